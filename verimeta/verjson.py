"""Reading and writing checksum databases stored as JSON (optionally zipped)."""

from __future__ import annotations

import io
import json
import logging
import zipfile
from pathlib import Path
from typing import Any

from .pathstr import has_extension
from .tools import (
    DB_EXTS,
    Algorithm,
    algo_by_str_len,
    algo_to_str,
    can_be_checksum,
    str_to_algo,
)

log = logging.getLogger(__name__)

_APP_ORIGIN = "verimeta"
_UNREADABLE_KEY = "Unreadable files"
_ZIPPED_ENTRY_NAME = "checksums.ver.json"


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _unzip_first(raw: bytes) -> bytes:
    """Return the first entry of a zip archive, or ``raw`` if it is not one."""
    try:
        with zipfile.ZipFile(io.BytesIO(raw)) as archive:
            entries = archive.infolist()
            if entries:
                return archive.read(entries[0])
    except zipfile.BadZipFile:
        pass
    return raw


class VerJson:
    """A database: a header object, a {file: checksum} object and unreadable files."""

    H_KEY_DATETIME = "DateTime"
    H_KEY_IGNORED = "Ignored"
    H_KEY_INCLUDED = "Included"
    H_KEY_ALGO = "Hash Algorithm"
    H_KEY_WORKDIR = "WorkDir"
    H_KEY_FLAGS = "Flags"
    H_KEY_UPDATED = "Updated"
    H_KEY_VERIFIED = "Verified"

    def __init__(self, file_path: str = "") -> None:
        self.file_path = file_path
        self.header: dict[str, Any] = {}
        self.data: dict[str, Any] = {}
        self.unreadable: list[Any] = []

    def __bool__(self) -> bool:
        return bool(self.data)

    def set_file(self, file_path: str) -> None:
        """Point at an existing database file and load it."""
        if not Path(file_path).exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        self.file_path = file_path
        self.load()

    def load(self) -> None:
        """Load the database from ``file_path``; raise ValueError if it is corrupted."""
        path = Path(self.file_path)
        if not self.file_path or not path.exists():
            raise FileNotFoundError(f"File not found: {self.file_path}")

        raw = path.read_bytes()
        if raw.startswith(b"PK"):
            raw = _unzip_first(raw)

        message = f"Corrupted or unreadable Json Database: {self.file_path}"
        try:
            doc = json.loads(raw)
        except ValueError as exc:
            raise ValueError(message) from exc

        if (
            isinstance(doc, list)
            and len(doc) > 1
            and isinstance(doc[0], dict)
            and isinstance(doc[1], dict)
        ):
            self.header = doc[0]
            self.data = doc[1]
            if len(doc) > 2:
                extra = doc[2]
                unreadable = extra.get(_UNREADABLE_KEY) if isinstance(extra, dict) else None
                self.unreadable = unreadable if isinstance(unreadable, list) else []
            return

        raise ValueError(message)

    def save(self) -> None:
        """Write the database; a ".ver" file is written as a zip archive."""
        if not self.data:
            raise ValueError("No data to save")
        if not self.file_path:
            raise ValueError("No file path provided")

        self._fill_header()

        content: list[dict[str, Any]] = [self.header, self.data]
        if self.unreadable:
            content.append({_UNREADABLE_KEY: self.unreadable})

        text = json.dumps(content, indent=4, ensure_ascii=False, sort_keys=True) + "\n"
        payload = text.encode("utf-8")

        if has_extension(self.file_path, DB_EXTS[1]):
            with zipfile.ZipFile(self.file_path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
                archive.writestr(_ZIPPED_ENTRY_NAME, payload)
        else:
            Path(self.file_path).write_bytes(payload)

    def add_item(self, file: str, checksum: str) -> None:
        self.data[file] = checksum

    def add_item_unr(self, file: str) -> None:
        self.unreadable.append(file)

    def add_info(self, header_key: str, value: str) -> None:
        self.header[header_key] = value

    def get_info(self, header_key: str) -> str:
        """Header value by exact key, else by a key containing its first letters."""
        if header_key in self.header:
            return _as_str(self.header[header_key])
        return self._find_value_str(self.header, header_key)

    def algorithm(self) -> Algorithm:
        """Algorithm judged by the first checksum, else by the header."""
        first_value = self._first_value_string(self.data)
        if can_be_checksum(first_value):
            return algo_by_str_len(len(first_value))

        str_algo = self._find_value_str(self.header, "Algo")
        if not str_algo:
            log.warning("Hash algorithm not found")
            return Algorithm.NONE
        return str_to_algo(str_algo)

    def _fill_header(self) -> None:
        self.header["App/Origin"] = _APP_ORIGIN
        self.header["Total Checksums"] = len(self.data)
        if self.H_KEY_ALGO not in self.header:
            self.header[self.H_KEY_ALGO] = algo_to_str(self.algorithm())

    @staticmethod
    def _find_value_str(obj: dict[str, Any], approx_key: str, sample_length: int = 4) -> str:
        sample = approx_key[:sample_length].lower()
        for key in sorted(obj):
            if sample in key.lower():
                return _as_str(obj[key])
        return ""

    @staticmethod
    def _first_value_string(obj: dict[str, Any]) -> str:
        return _as_str(obj[min(obj)]) if obj else ""