"""A node of a tabular tree: a row of column values with child rows."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class TreeItem:
    """A tree node holding one value per column and an ordered list of children."""

    def __init__(self, data: Iterable[Any], parent: TreeItem | None = None) -> None:
        self._item_data: list[Any] = list(data)
        self._parent = parent
        self._children: list[TreeItem] = []

    @property
    def parent(self) -> TreeItem | None:
        return self._parent

    @property
    def children(self) -> tuple[TreeItem, ...]:
        return tuple(self._children)

    def child(self, number: int) -> TreeItem | None:
        """Return the child at ``number``, or None if out of range."""
        if 0 <= number < len(self._children):
            return self._children[number]
        return None

    def child_count(self) -> int:
        return len(self._children)

    def child_number(self) -> int:
        """Position of this item among its parent's children; 0 without a parent."""
        if self._parent is None:
            return 0
        return next(
            (i for i, item in enumerate(self._parent._children) if item is self),
            -1,
        )

    def column_count(self) -> int:
        return len(self._item_data)

    def data(self, column: int) -> Any:
        """Return the value at ``column``, or None if out of range."""
        if 0 <= column < len(self._item_data):
            return self._item_data[column]
        return None

    def set_data(self, column: int, value: Any) -> bool:
        """Store ``value`` at ``column``; False if the column does not exist."""
        if not 0 <= column < len(self._item_data):
            return False
        self._item_data[column] = value
        return True

    def append_child(self, item: TreeItem) -> None:
        self._children.append(item)

    def add_child(self, ti_data: Iterable[Any]) -> TreeItem:
        """Create a child with ``ti_data``, append it and return it."""
        item = TreeItem(ti_data, self)
        self._children.append(item)
        return item

    def find_child(self, text: str) -> TreeItem | None:
        """Return the first child whose column 0 equals ``text``."""
        for item in self._children:
            value = item.data(0)
            if text == ("" if value is None else str(value)):
                return item
        return None