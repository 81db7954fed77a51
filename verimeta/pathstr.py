"""Helpers for handling filesystem paths as plain strings with '/' separators."""

from __future__ import annotations

from collections.abc import Iterable

SEP = "/"
DOT = "."


def _last_sep_before_end(path: str) -> int:
    """Index of the last separator, ignoring a trailing one; -1 if none."""
    return path.rfind(SEP, 0, max(len(path) - 1, 0))


def is_root(path: str) -> bool:
    """True for a Unix root "/" or a Windows drive root "X:" / "X:/"."""
    if len(path) == 1:
        return path == SEP
    if len(path) in (2, 3):
        return path[0].isalpha() and path[1] == ":"
    return False


def is_separator(ch: str) -> bool:
    """True if ``ch`` is '/' or '\\'."""
    return ch == SEP or ch == "\\"


def join_strings(str1: str, str2: str, sep: str) -> str:
    """Join two strings with ``sep`` without duplicating it at the seam."""
    s1_ends = str1.endswith(sep)
    s2_starts = str2.startswith(sep)

    if s1_ends and s2_starts:
        return str1[:-1] + str2
    if s1_ends or s2_starts:
        return str1 + str2
    return f"{str1}{sep}{str2}"


def basic_name(path: str) -> str:
    """Return the file or folder name: "/home/user/folder/fname/" -> "fname"."""
    if is_root(path):
        ch = path[0]
        return "Drive_" + ch.upper() if ch.isalpha() else "Root"

    ends_with_sep = path.endswith(SEP)
    last_sep = _last_sep_before_end(path)

    if last_sep == -1:
        return path[:-1] if ends_with_sep else path

    end = len(path) - 1 if ends_with_sep else len(path)
    return path[last_sep + 1:end]


def parent_folder(path: str) -> str:
    """Return the parent folder: "/folder/file_or_folder2/" -> "/folder"."""
    ind = _last_sep_before_end(path)

    if ind == -1:
        return path if is_root(path) else ""
    if ind == 0:
        return path[0]
    if ind == 2:
        return path[:3] if is_root(path[:2]) else path[:2]
    return path[:ind]


def relative_path(root_folder: str, full_path: str) -> str:
    """Return ``full_path`` relative to ``root_folder``, or "" if it is not inside."""
    if not root_folder:
        return full_path

    if not full_path.startswith(root_folder):
        return ""

    cut = len(root_folder) - 1 if root_folder.endswith(SEP) else len(root_folder)

    if cut < len(full_path) and full_path[cut] == SEP:
        return full_path[cut + 1:]
    return ""


def shorten_path(path: str) -> str:
    """Return the path itself if its parent is a root, else "../name"."""
    return path if is_root(parent_folder(path)) else "../" + basic_name(path)


def join_path(absolute_path: str, add_path: str) -> str:
    """Join two path parts with a single separator."""
    return join_strings(absolute_path, add_path, SEP)


def compose_file_path(parent_folder: str, file_name: str, ext: str) -> str:
    """Build "parent/name.ext" without any separator checks."""
    return f"{parent_folder}{SEP}{file_name}{DOT}{ext}"


def root(path: str) -> str:
    """Return the root of a path: "/home/folder" -> "/", "C:/Folder" -> "C:/"."""
    if path.startswith(SEP):
        return SEP

    if len(path) > 1 and path[0].isalpha() and path[1] == ":":
        if len(path) == 2:
            return path + SEP
        if is_separator(path[2]):
            return path[:3]

    return ""


def suffix_size(file: str) -> int:
    """Length of the file's suffix: "/folder/file.txt" -> 3."""
    file_name = basic_name(file)
    dot_ind = file_name.rfind(DOT)

    if dot_ind < 1:
        return 0
    return len(file_name) - dot_ind - 1


def suffix(file: str) -> str:
    """Return the lower-cased suffix: "file.txt" -> "txt"."""
    length = suffix_size(file)
    return file[-length:].lower() if length > 0 else ""


def set_suffix(file: str, suf: str) -> str:
    """Replace or add a suffix: "file" or "file.txt" -> "file.zip"."""
    cur_size = suffix_size(file)

    if cur_size == 0:
        return join_strings(file, suf, DOT)
    return file[:len(file) - cur_size] + suf


def has_extension(file: str, ext: str | Iterable[str]) -> bool:
    """True if ``file`` ends with ".ext" (case-insensitive); ``ext`` may be a list."""
    if not isinstance(ext, str):
        return any(has_extension(file, item) for item in ext)

    dot_ind = len(file) - len(ext) - 1
    return (
        dot_ind >= 0
        and file[dot_ind] == DOT
        and file.lower().endswith(ext.lower())
    )