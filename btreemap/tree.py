"""A B-tree map keyed by any totally ordered keys."""

from __future__ import annotations

from typing import Any, Optional

from btreemap.node import BTreeNode, Entry


class BTree:
    """A B-tree mapping keys to values.

    ``max_count`` is the number of keys at which a node is split.
    """

    def __init__(self, max_count: int) -> None:
        self.max_count = max_count
        self._root: Optional[BTreeNode] = None

    def __repr__(self) -> str:
        return f"BTree(max_count={self.max_count!r}, root={self._root!r})"

    def search(self, key: Any) -> Optional[Entry]:
        """The stored (key, value) for ``key``, or None if it is absent."""
        if self._root is None:
            return None
        return self._root.search(key)

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``, overwriting an existing value."""
        root = self._root if self._root is not None else BTreeNode(self.max_count)
        root.insert(key, value)
        if root.is_full():
            middle, (left, right) = root.split_node()
            middle_key, middle_value = middle
            root = BTreeNode(self.max_count, [middle_key], [middle_value], [left, right])
        self._root = root

    def delete(self, key: Any) -> None:
        """Remove ``key``; a key that is not present is ignored."""
        if self._root is None:
            return
        self._root.delete(key)
        if self._root.is_empty():
            self._root = None