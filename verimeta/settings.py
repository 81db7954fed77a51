"""User preferences of the checksum tool, stored in an INI file."""

from __future__ import annotations

import base64
import configparser
import json
import os
from collections.abc import Callable
from pathlib import Path

from .tools import APP_NAME, DB_EXTS, Algorithm

MAX_RECENT_FILES = 15
FILTER_MODE_NOT_SET = 0

_GENERAL = "General"

_KEY_ALGO = "algorithm"
_KEY_DB_PREFIX = "dbPrefix"
_KEY_RESTORE_LAST_PATH = "restoreLastPathOnStartup"
_KEY_ADD_WORK_DIR = "addWorkDirToFilename"
_KEY_IS_LONG_EXT = "isLongExtension"
_KEY_SAVE_VERIF_DATE = "saveVerifDate"
_KEY_DB_FLAG_CONST = "dbFlagConst"
_KEY_INSTANT_SAVING = "instantSaving"
_KEY_CONSIDER_DATE_MODIFIED = "considerDateModified"
_KEY_DETECT_MOVED = "detectMoved"
_KEY_ALLOW_PASTE_INTO_DB = "allowPasteIntoDb"

_KEY_HISTORY_LAST_FS_PATH = "history/lastFsPath"
_KEY_HISTORY_RECENT_DB_FILES = "history/recentDbFiles"

_KEY_VIEW_GEOMETRY = "view/geometry"
_KEY_VIEW_COLUMN_STATE_FS = "view/columnStateFs"
_KEY_VIEW_COLUMN_STATE_DB = "view/columnStateDb"

_KEY_FILTER_MODE = "filter/mode"
_KEY_FILTER_LAST_EXTS = "filter/last_exts"
_KEY_FILTER_IGNORE_DB = "filter/ignore_db"
_KEY_FILTER_IGNORE_SHA = "filter/ignore_sha"
_KEY_FILTER_REMEMBER_EXTS = "filter/remember_exts"
_KEY_FILTER_EDITABLE_EXTS = "filter/editable_exts"
_KEY_FILTER_IGNORE_UNPERMITTED = "filter/ignore_unpermitted"
_KEY_FILTER_IGNORE_SYMLINKS = "filter/ignore_symlinks"

# settings attribute <-> stored key, for plain boolean options
_BOOL_OPTIONS = {
    "restore_last_path_on_startup": _KEY_RESTORE_LAST_PATH,
    "add_work_dir_to_filename": _KEY_ADD_WORK_DIR,
    "is_long_extension": _KEY_IS_LONG_EXT,
    "save_verification_date_time": _KEY_SAVE_VERIF_DATE,
    "db_flag_const": _KEY_DB_FLAG_CONST,
    "instant_saving": _KEY_INSTANT_SAVING,
    "consider_date_modified": _KEY_CONSIDER_DATE_MODIFIED,
    "detect_moved": _KEY_DETECT_MOVED,
    "allow_paste_into_db": _KEY_ALLOW_PASTE_INTO_DB,
    "filter_editable_exts": _KEY_FILTER_EDITABLE_EXTS,
    "filter_remember_exts": _KEY_FILTER_REMEMBER_EXTS,
    "filter_ignore_db": _KEY_FILTER_IGNORE_DB,
    "filter_ignore_sha": _KEY_FILTER_IGNORE_SHA,
    "filter_ignore_unpermitted": _KEY_FILTER_IGNORE_UNPERMITTED,
    "filter_ignore_symlinks": _KEY_FILTER_IGNORE_SYMLINKS,
}

_BYTES_OPTIONS = {
    "geometry_main_window": _KEY_VIEW_GEOMETRY,
    "header_state_fs": _KEY_VIEW_COLUMN_STATE_FS,
    "header_state_db": _KEY_VIEW_COLUMN_STATE_DB,
}


def db_file_extension(is_long: bool) -> str:
    """Database file extension: "ver.json" when ``is_long``, else "ver"."""
    return DB_EXTS[0 if is_long else 1]


def default_settings_path() -> Path:
    """Per-user location of the settings file."""
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / APP_NAME / f"{APP_NAME}.ini"


def _split_key(key: str) -> tuple[str, str]:
    section, sep, option = key.rpartition("/")
    return (section, option) if sep else (_GENERAL, key)


class _Store:
    """Flat "section/key" access over a ConfigParser."""

    def __init__(self) -> None:
        self.parser = configparser.ConfigParser(interpolation=None)
        self.parser.optionxform = str  # keep key case

    def set(self, key: str, value: str) -> None:
        section, option = _split_key(key)
        if not self.parser.has_section(section):
            self.parser.add_section(section)
        self.parser.set(section, option, value)

    def get(self, key: str) -> str | None:
        section, option = _split_key(key)
        return self.parser.get(section, option, fallback=None)

    def get_bool(self, key: str, default: bool) -> bool:
        raw = self.get(key)
        if raw is None:
            return default
        try:
            return self.parser.BOOLEAN_STATES[raw.strip().lower()]
        except KeyError:
            return default

    def get_int(self, key: str, default: int) -> int:
        raw = self.get(key)
        try:
            return int(raw) if raw is not None else default
        except ValueError:
            return default

    def get_list(self, key: str) -> list[str]:
        raw = self.get(key)
        if not raw:
            return []
        try:
            value = json.loads(raw)
        except ValueError:
            return []
        return [str(item) for item in value] if isinstance(value, list) else []

    def get_bytes(self, key: str) -> bytes:
        raw = self.get(key)
        if not raw:
            return b""
        try:
            return base64.b64decode(raw, validate=True)
        except ValueError:
            return b""


class Settings:
    """Application preferences with persistence to an INI file."""

    def __init__(self) -> None:
        self.recent_files: list[str] = []
        self.db_prefix = ""
        self.restore_last_path_on_startup = True
        self.add_work_dir_to_filename = True
        self.is_long_extension = True
        self.save_verification_date_time = False
        self.instant_saving = False
        self.db_flag_const = False
        self.consider_date_modified = True
        self.detect_moved = False
        self.allow_paste_into_db = False

        self.filter_mode = FILTER_MODE_NOT_SET
        self.filter_last_exts: list[str] = []
        self.filter_editable_exts = False
        self.filter_remember_exts = True
        self.filter_ignore_sha = True
        self.filter_ignore_db = True
        self.filter_ignore_unpermitted = True
        self.filter_ignore_symlinks = True

        self.geometry_main_window = b""
        self.header_state_fs = b""
        self.header_state_db = b""

        # last browsed filesystem path; None means it is not tracked
        self.last_fs_path: str | None = None

        self.algorithm_changed: list[Callable[[], None]] = []
        self._algorithm = Algorithm.SHA256

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    def set_algorithm(self, algo: Algorithm) -> None:
        """Change the algorithm and notify ``algorithm_changed`` listeners."""
        if algo != self._algorithm:
            self._algorithm = algo
            for callback in self.algorithm_changed:
                callback()

    def add_recent_file(self, file_path: str) -> None:
        """Put ``file_path`` at the top of the recent list, keeping at most 15."""
        if file_path in self.recent_files:
            self.recent_files.remove(file_path)
        self.recent_files.insert(0, file_path)

        if len(self.recent_files) > MAX_RECENT_FILES:
            self.recent_files.pop()

    def clear_recent_files(self) -> None:
        self.recent_files.clear()

    def db_file_extension(self) -> str:
        """Extension for new database files under the current setting."""
        return db_file_extension(self.is_long_extension)

    def save_settings(self, path: str | os.PathLike[str] | None = None) -> None:
        """Write all settings to ``path`` (the per-user file by default)."""
        target = Path(path) if path is not None else default_settings_path()
        store = _Store()

        if self.last_fs_path is not None:
            store.set(
                _KEY_HISTORY_LAST_FS_PATH,
                self.last_fs_path if self.restore_last_path_on_startup else "",
            )

        store.set(_KEY_ALGO, str(int(self._algorithm)))
        store.set(_KEY_DB_PREFIX, self.db_prefix)
        for attr, key in _BOOL_OPTIONS.items():
            store.set(key, "true" if getattr(self, attr) else "false")

        store.set(_KEY_FILTER_MODE, str(int(self.filter_mode)))
        store.set(_KEY_FILTER_LAST_EXTS, json.dumps(self.filter_last_exts))
        store.set(_KEY_HISTORY_RECENT_DB_FILES, json.dumps(self.recent_files))

        for attr, key in _BYTES_OPTIONS.items():
            store.set(key, base64.b64encode(getattr(self, attr)).decode("ascii"))

        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8") as file:
            store.parser.write(file)

    def load_settings(self, path: str | os.PathLike[str] | None = None) -> None:
        """Read settings from ``path``; missing values take their defaults."""
        source = Path(path) if path is not None else default_settings_path()
        store = _Store()
        store.parser.read(source, encoding="utf-8")

        if self.last_fs_path is not None:
            self.last_fs_path = store.get(_KEY_HISTORY_LAST_FS_PATH) or ""

        defaults = Settings()

        algo_value = store.get_int(_KEY_ALGO, int(defaults.algorithm))
        try:
            self._algorithm = Algorithm(algo_value)
        except ValueError:
            self._algorithm = Algorithm.NONE

        prefix = store.get(_KEY_DB_PREFIX)
        self.db_prefix = defaults.db_prefix if prefix is None else prefix

        for attr, key in _BOOL_OPTIONS.items():
            setattr(self, attr, store.get_bool(key, getattr(defaults, attr)))

        self.filter_mode = store.get_int(_KEY_FILTER_MODE, FILTER_MODE_NOT_SET)
        self.filter_last_exts = store.get_list(_KEY_FILTER_LAST_EXTS)
        self.recent_files = store.get_list(_KEY_HISTORY_RECENT_DB_FILES)

        for attr, key in _BYTES_OPTIONS.items():
            setattr(self, attr, store.get_bytes(key))