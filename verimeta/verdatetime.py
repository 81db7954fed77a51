"""Creation, update and verification timestamps of a checksum database."""

from __future__ import annotations

from enum import IntEnum

from .tools import DT_STR_LEN, SEP_COMMA_SPACE, current_date_time


class DT(IntEnum):
    """Kind of a stored timestamp."""

    CREATED = 0
    UPDATED = 1
    VERIFIED = 2


_PREFIXES = {
    DT.CREATED: "Created: ",
    DT.UPDATED: "Updated: ",
    DT.VERIFIED: "Verified: ",
}

# attribute set by a value whose first letter (case-insensitive) is the key
_ATTR_BY_INITIAL = {"c": "created", "u": "updated", "v": "verified"}


def current_dt(dt_type: DT) -> str:
    """Current timestamp string, e.g. "Created: 2023/11/09 17:45"."""
    return _PREFIXES.get(dt_type, "") + current_date_time()


class VerDateTime:
    """The created / updated / verified timestamps, stored as display strings."""

    def __init__(self, text: str = "") -> None:
        self.created = ""
        self.updated = ""
        self.verified = ""
        self.set_from_string(text)

    def __repr__(self) -> str:
        return (
            f"VerDateTime(created={self.created!r}, "
            f"updated={self.updated!r}, verified={self.verified!r})"
        )

    def __bool__(self) -> bool:
        return bool(self.created or self.updated)

    def value(self, dt_type: DT) -> str:
        """Stored string of the given kind."""
        if dt_type == DT.CREATED:
            return self.created
        if dt_type == DT.VERIFIED:
            return self.verified
        return self.updated

    def set(self, dt_type: DT, value: str) -> None:
        """Store ``value``; a newer stage clears the stages that follow it."""
        if dt_type == DT.CREATED:
            self.created = value
            self.updated = ""
            self.verified = ""
        elif dt_type == DT.UPDATED:
            self.updated = value
            self.verified = ""
        elif dt_type == DT.VERIFIED:
            self.verified = value

    def set_from_string(self, text: str) -> None:
        """Parse a ", "-joined string of timestamps.

        Exactly three parts are taken positionally; otherwise each non-empty
        part is assigned by its first letter (c, u or v).
        """
        parts = text.split(SEP_COMMA_SPACE)

        if len(parts) == 3:
            for dt_type, part in zip(DT, parts):
                self.set(dt_type, part)
            return

        for part in parts:
            if not part:
                continue
            attr = _ATTR_BY_INITIAL.get(part[0].lower())
            if attr is not None:
                setattr(self, attr, part)

    def update(self, dt_type: DT) -> None:
        """Set the given kind to the current time."""
        self.set(dt_type, current_dt(dt_type))

    def to_string(self, keep_empty_values: bool = True) -> str:
        """Join the stored values with ", "; empty ones kept as empty slots if asked."""
        result = ""
        for dt_type in DT:
            value = self.value(dt_type)
            if value or keep_empty_values:
                if result or (keep_empty_values and dt_type > 0):
                    result += SEP_COMMA_SPACE
                result += value
        return result

    def basic_date(self) -> str:
        """Date up to which files are considered unmodified ("" if unknown)."""
        if self.verified:
            return self.verified[-DT_STR_LEN:]
        if not self.updated:
            return self.created[-DT_STR_LEN:]
        return ""