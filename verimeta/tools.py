"""Checksum algorithm helpers, path classification and human-readable formatting."""

from __future__ import annotations

import os
import re
from datetime import datetime
from enum import IntEnum
from pathlib import Path

from .pathstr import basic_name, has_extension
from .pathstr import join_strings as _join_with_char

DB_EXTS: tuple[str, ...] = ("ver.json", "ver")
DIGEST_EXTS: tuple[str, ...] = ("md5", "sha1", "sha256", "sha512")
DIGEST_EXTS_CAPITAL: tuple[str, ...] = ("MD5", "SHA-1", "SHA-256", "SHA-512")

APP_NAME = "veretino"
SEP_STICK = " | "
SEP_COMMA_SPACE = ", "
SEP_COLON_SPACE = ": "
DT_FORMAT = "%Y/%m/%d %H:%M"
DT_STR_LEN = 16  # length of a date-time string in DT_FORMAT
DB_PREFIX = "checksums"

_CHECKSUM_LENGTHS = frozenset({32, 40, 64, 128})
_FORBIDDEN_CHARS = frozenset(" :/\\%*?|<>&#^")
_HEX_CHARS = frozenset("0123456789abcdefABCDEF")


class Algorithm(IntEnum):
    """Supported checksum algorithms; NONE marks an unknown one."""

    NONE = 0
    MD5 = 1
    SHA1 = 2
    SHA256 = 4
    SHA512 = 6

    @property
    def hashlib_name(self) -> str:
        """Name accepted by ``hashlib.new``."""
        if self is Algorithm.NONE:
            raise ValueError("no hash function for an unknown algorithm")
        return self.name.lower()


_ALGO_LENGTHS = {
    Algorithm.MD5: 32,
    Algorithm.SHA1: 40,
    Algorithm.SHA256: 64,
    Algorithm.SHA512: 128,
}
_ALGO_BY_LENGTH = {length: algo for algo, length in _ALGO_LENGTHS.items()}
_ALGO_BY_DIGITS = {
    1: Algorithm.SHA1,
    256: Algorithm.SHA256,
    512: Algorithm.SHA512,
    5: Algorithm.MD5,
}
_ALGO_ORDER = (Algorithm.MD5, Algorithm.SHA1, Algorithm.SHA256, Algorithm.SHA512)


def _as_algorithm(algo: Algorithm | int) -> Algorithm:
    """Accept an Algorithm or a checksum string length."""
    if isinstance(algo, Algorithm):
        return algo
    return algo_by_str_len(algo)


def algo_str_len(algo: Algorithm) -> int:
    """Length of a hex checksum for ``algo``: SHA-256 -> 64; 0 if unknown."""
    return _ALGO_LENGTHS.get(algo, 0)


def algo_by_str_len(str_len: int) -> Algorithm:
    """Algorithm whose hex checksum has ``str_len`` characters; NONE if none."""
    return _ALGO_BY_LENGTH.get(str_len, Algorithm.NONE)


def digits_to_num(digits) -> int:
    """Combine decimal digits into a number: [0, 1, 2, 3] -> 123."""
    number = 0
    for digit in digits:
        number = number * 10 + digit
    return number


def str_to_algo(str_algo: str) -> Algorithm:
    """Guess the algorithm from the digits in a name such as "SHA-256"."""
    digits = [int(ch) for ch in str_algo if ch.isdecimal()]
    return _ALGO_BY_DIGITS.get(digits_to_num(digits), Algorithm.NONE)


def is_hex_char(ch: str) -> bool:
    """True if ``ch`` is a digit or a letter from 'A'/'a' to 'F'/'f'."""
    return ch in _HEX_CHARS


def can_be_checksum(text: str, algo: Algorithm | None = None) -> bool:
    """True if ``text`` looks like a hex checksum (of ``algo``, when given)."""
    if algo is not None and len(text) != algo_str_len(algo):
        return False
    return len(text) in _CHECKSUM_LENGTHS and all(is_hex_char(ch) for ch in text)


def _digit_value(ch: str) -> int:
    return int(ch) if ch.isdecimal() else -1


def is_later(dt_before: str, dt_later: str | datetime) -> bool:
    """True if ``dt_later`` is later than ``dt_before`` (both "yyyy/MM/dd HH:mm")."""
    if isinstance(dt_later, datetime):
        if not dt_before:
            return False
        dt_later = dt_later.strftime(DT_FORMAT)

    if len(dt_before) != DT_STR_LEN or len(dt_later) != DT_STR_LEN:
        return False

    for ch1, ch2 in zip(dt_before, dt_later):
        v1, v2 = _digit_value(ch1), _digit_value(ch2)
        if v1 < v2:
            return True
        if v1 > v2:
            return False
    return False


def is_flag_combined(flag: int) -> bool:
    """True if more than one bit is set in ``flag``."""
    return bool(flag & (flag - 1))


def is_flag_non_combined(flag: int) -> bool:
    """True if at most one bit is set in ``flag``."""
    return not flag & (flag - 1)


def join_strings(str1, str2, sep: str = " ") -> str:
    """Join two values.

    With a number on either side the result is "X str" / "str X". A one-character
    separator is not duplicated at the seam; a longer one is inserted as is.
    """
    if not isinstance(str1, str) or not isinstance(str2, str):
        return f"{str1} {str2}"
    if len(sep) == 1:
        return _join_with_char(str1, str2, sep)
    return f"{str1}{sep}{str2}"


def digest_file_path(file: str, algo: Algorithm | int) -> str:
    """"../folder/file.txt" -> "../folder/file.txt.sha256"; ``algo`` may be a length."""
    ext = algo_to_str(_as_algorithm(algo), False)
    return join_strings(file, ext, ".")


def is_db_file(file_path: str) -> bool:
    return has_extension(file_path, DB_EXTS)


def is_digest_file(file_path: str) -> bool:
    return has_extension(file_path, DIGEST_EXTS)


def current_date_time() -> str:
    """Current local time as "yyyy/MM/dd HH:mm"."""
    return datetime.now().strftime(DT_FORMAT)


def num_string(num: int) -> str:
    """Digits grouped by commas: 1234567890 -> "1,234,567,890"."""
    text = str(num)
    for pos in range(len(text) - 3, 0, -3):
        text = text[:pos] + "," + text[pos:]
    return text


def _tdiv(a: int, b: int) -> int:
    q = abs(a) // b
    return q if a >= 0 else -q


def millisec_to_readable(milliseconds: int, approx: bool = False) -> str:
    """Readable duration such as "1 min 23 sec"; rounded when ``approx``."""
    total_seconds = _tdiv(milliseconds, 1000)
    total_minutes = _tdiv(total_seconds, 60)
    seconds = total_seconds - total_minutes * 60
    hours = _tdiv(total_minutes, 60)
    minutes = total_minutes - hours * 60

    if hours > 0:
        if approx:
            return f"{hours} h {minutes} min"
        return f"{hours} h {minutes} min {seconds} sec"

    if approx and minutes > 0 and seconds > 15:
        return join_strings(minutes + 1, "min")

    if minutes > 0:
        if approx:
            return join_strings(minutes, "min")
        return f"{minutes} min {seconds} sec"

    if approx and seconds < 5:
        return "few sec"
    return join_strings(seconds, "sec")


def data_size_readable(size_bytes: int) -> str:
    """Size in readable binary units, e.g. "129.17GiB"; small sizes in bytes."""
    if size_bytes <= 1000:
        return join_strings(size_bytes, "bytes")

    converted = float(size_bytes)
    divisions = 0
    while True:
        converted /= 1024
        divisions += 1
        if converted <= 1000:
            break

    unit = {1: "K", 2: "M", 3: "G", 4: "T"}.get(divisions, "?")
    rounded = int(converted * 100 + 0.5) / 100
    return f"{rounded:.2f}{unit}iB"


def data_size_readable_ext(size_bytes: int) -> str:
    """E.g. "6.08GiB (6,532,974,324 bytes)"."""
    return f"{data_size_readable(size_bytes)} ({num_string(size_bytes)} bytes)"


def shorten_string(string: str, length: int = 64, cut_end: bool = True) -> str:
    """Cut ``string`` to ``length`` characters and mark the cut with "..."."""
    if len(string) <= length:
        return string
    if cut_end:
        return string[:length] + "..."
    return "..." + string[len(string) - length:]


def simplified_chars(text: str) -> str:
    """Replace characters unsafe in file names by '_' and collapse repeats."""
    if not text:
        return text
    replaced = "".join("_" if ch in _FORBIDDEN_CHARS else ch for ch in text)
    return re.sub("_{2,}", "_", replaced)


def in_parentheses(value) -> str:
    """Return "(value)"."""
    return f"({value})"


def add_str_in_parentheses(str1: str, str2: str) -> str:
    """Return "str1 (str2)"."""
    return f"{str1} ({str2})"


def compose_db_file_name(prefix: str, folder: str, extension: str) -> str:
    """Database file name: "prefix_FolderName.extension", or "prefix.extension"."""
    if not folder:
        return join_strings(prefix, extension, ".")

    folder_str = simplified_chars(basic_name(folder))
    db_file_name = join_strings(prefix, folder_str, "_")
    return join_strings(db_file_name, extension, ".")


def algo_to_str(algo: Algorithm | int, capital_letters: bool = True) -> str:
    """Display name of ``algo`` ("SHA-256" or "sha256"); ``algo`` may be a length."""
    algo = _as_algorithm(algo)
    names = DIGEST_EXTS_CAPITAL if capital_letters else DIGEST_EXTS
    if algo not in _ALGO_ORDER:
        return "Unknown"
    return names[_ALGO_ORDER.index(algo)]


def files_number(number: int) -> str:
    """"no files", "1 file" or "N files"."""
    if number == 0:
        return "no files"
    return join_strings(number, "file" if number == 1 else "files")


def files_num_size(number: int, files_size: int) -> str:
    """"N files (readable size)"."""
    if number == 0:
        return files_number(number)
    return add_str_in_parentheses(files_number(number), data_size_readable(files_size))


def file_name_and_size(file_path: str, size: int | None = None) -> str:
    """"name (readable size)"; the size is read from disk when not given."""
    if size is None:
        name = Path(file_path).name
        size = os.path.getsize(file_path) if os.path.isfile(file_path) else 0
    else:
        name = basic_name(file_path)
    return add_str_in_parentheses(name, data_size_readable(size))


def colored_text(ignore: bool, class_name: str | None = None) -> str:
    """Style text: red when ``ignore``, else green; wrapped for ``class_name``."""
    style = "color : " + ("red" if ignore else "green")
    if class_name is None:
        return style
    return f"{class_name} {{ {style} }}"