"""Path-string helpers, checksum and formatting tools, chunked file hashing,
checksum database files, timestamps and user settings."""

__version__ = "0.1.0"