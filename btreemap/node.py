"""A single node of a B-tree holding parallel key and value lists."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Optional

from btreemap.lookup import binary_lookup

Entry = tuple[Any, Any]


class _ChildDelete(Enum):
    NONE = auto()
    DELEGATE = auto()
    ROTATE_LEFT = auto()
    ROTATE_RIGHT = auto()
    MERGE_TO_LEFT = auto()
    MERGE_TO_RIGHT = auto()
    MERGE_TO_SELF = auto()


class BTreeNode:
    """A B-tree node: sorted keys, their values and, unless a leaf, children."""

    def __init__(
        self,
        max_count: int,
        keys: Optional[list] = None,
        values: Optional[list] = None,
        children: Optional[list["BTreeNode"]] = None,
    ) -> None:
        self.max_count = max_count
        self.keys: list = list(keys) if keys is not None else []
        self.values: list = list(values) if values is not None else []
        self.children: list[BTreeNode] = list(children) if children is not None else []

    def __repr__(self) -> str:
        return (
            f"BTreeNode(max_count={self.max_count!r}, keys={self.keys!r}, "
            f"values={self.values!r}, children={self.children!r})"
        )

    # -- state ---------------------------------------------------------------

    @property
    def _min_count(self) -> int:
        return self.max_count // 2

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return not self.children

    def is_empty(self) -> bool:
        """True when the node holds no keys."""
        return not self.keys

    def is_full(self) -> bool:
        """True when the node holds at least ``max_count`` keys."""
        return len(self.keys) >= self.max_count

    def is_more_than_min_count(self) -> bool:
        """True when the node can give up a key and stay above its minimum."""
        return len(self.keys) > self._min_count

    def has_key(self, key: Any) -> bool:
        """True when ``key`` is stored directly in this node."""
        return key in self.keys

    # -- entry helpers -------------------------------------------------------

    def _push_entry(self, entry: Entry) -> None:
        key, value = entry
        self.keys.append(key)
        self.values.append(value)

    def _insert_entry(self, index: int, entry: Entry) -> None:
        key, value = entry
        self.keys.insert(index, key)
        self.values.insert(index, value)

    def _pop_head(self) -> Entry:
        return self.keys.pop(0), self.values.pop(0)

    def _pop_tail(self) -> Entry:
        return self.keys.pop(), self.values.pop()

    def _remove_at(self, index: int) -> Entry:
        return self.keys.pop(index), self.values.pop(index)

    def entries(self) -> list[Entry]:
        """The node's own (key, value) pairs in order."""
        return list(zip(self.keys, self.values))

    # -- structure -----------------------------------------------------------

    def split_node(self) -> tuple[Entry, tuple["BTreeNode", "BTreeNode"]]:
        """Split around the middle key.

        Returns the middle (key, value) and the left and right halves.
        """
        mid = len(self.keys) // 2
        left = BTreeNode(
            self.max_count,
            self.keys[:mid],
            self.values[:mid],
            self.children[: mid + 1] if self.children else [],
        )
        right = BTreeNode(
            self.max_count,
            self.keys[mid + 1 :],
            self.values[mid + 1 :],
            self.children[mid + 1 :] if self.children else [],
        )
        return (self.keys[mid], self.values[mid]), (left, right)

    def merge(self, other: "BTreeNode") -> "BTreeNode":
        """A new node holding this node's contents followed by ``other``'s."""
        return BTreeNode(
            self.max_count,
            self.keys + other.keys,
            self.values + other.values,
            self.children + other.children,
        )

    # -- search / insert -----------------------------------------------------

    def search(self, key: Any) -> Optional[Entry]:
        """The stored (key, value) for ``key``, or None."""
        found, index = binary_lookup(self.keys, key)
        if found:
            return self.keys[index], self.values[index]
        if self.is_leaf():
            return None
        return self.children[index].search(key)

    def insert(self, key: Any, value: Any) -> None:
        """Insert or overwrite ``key``, splitting a child that becomes full."""
        found, index = binary_lookup(self.keys, key)
        if found:
            self.keys[index] = key
            self.values[index] = value
            return
        if self.is_leaf():
            self._insert_entry(index, (key, value))
            return
        child = self.children[index]
        child.insert(key, value)
        if child.is_full():
            middle, (left, right) = child.split_node()
            self._insert_entry(index, middle)
            self.children[index] = left
            self.children.insert(index + 1, right)

    # -- delete --------------------------------------------------------------

    def _pop_min(self) -> Optional[Entry]:
        if not self.is_leaf():
            return self.children[0]._pop_min()
        if self.is_more_than_min_count():
            return self._pop_head()
        return None

    def _pop_max(self) -> Optional[Entry]:
        if not self.is_leaf():
            return self.children[0]._pop_max()
        if self.is_more_than_min_count():
            return self._pop_tail()
        return None

    def delete(self, key: Any) -> None:
        """Remove ``key`` from this subtree; a missing key is ignored."""
        found, index = binary_lookup(self.keys, key)
        if found:
            if self.is_leaf():
                self._remove_at(index)
            else:
                self._delete_own_key(index)
        else:
            operation = self._child_delete_operation(key, index)
            self._apply_child_delete(key, index, operation)

    def _delete_own_key(self, index: int) -> None:
        replacement = self.children[0]._pop_max()
        if replacement is None:
            replacement = self.children[1]._pop_min()
        if replacement is not None:
            self.keys[index], self.values[index] = replacement
            return

        had_single_key = len(self.keys) == 1
        self._remove_at(index)
        left = self.children.pop(index)
        right = self.children.pop(index)
        merged = left.merge(right)
        if not had_single_key:
            self.children.insert(index, merged)
        else:
            self.keys = merged.keys
            self.values = merged.values
            self.children = merged.children
            self.max_count = merged.max_count

    def _child_delete_operation(self, key: Any, index: int) -> _ChildDelete:
        if self.is_leaf():
            return _ChildDelete.NONE
        child = self.children[index]
        if not child.is_leaf():
            return _ChildDelete.DELEGATE
        if not child.has_key(key):
            return _ChildDelete.NONE
        if child.is_more_than_min_count():
            return _ChildDelete.DELEGATE
        last = len(self.children) - 1
        if index == last and self.children[index - 1].is_more_than_min_count():
            return _ChildDelete.ROTATE_RIGHT
        if index < last and self.children[index + 1].is_more_than_min_count():
            return _ChildDelete.ROTATE_LEFT
        if len(self.keys) != 1 and index == last:
            return _ChildDelete.MERGE_TO_LEFT
        if len(self.keys) != 1 and index < last:
            return _ChildDelete.MERGE_TO_RIGHT
        return _ChildDelete.MERGE_TO_SELF

    def _apply_child_delete(self, key: Any, index: int, operation: _ChildDelete) -> None:
        if operation is _ChildDelete.NONE:
            return
        if operation is _ChildDelete.MERGE_TO_SELF:
            self._merge_children_into_self(key)
            return

        self.children[index].delete(key)

        if operation is _ChildDelete.ROTATE_LEFT:
            self.children[index]._push_entry(self._pop_head())
            self._insert_entry(0, self.children[index + 1]._pop_head())
        elif operation is _ChildDelete.ROTATE_RIGHT:
            self.children[index]._insert_entry(0, self._pop_tail())
            self._push_entry(self.children[index - 1]._pop_tail())
        elif operation is _ChildDelete.MERGE_TO_LEFT:
            self.children[index - 1]._push_entry(self._pop_tail())
            emptied = self.children.pop()
            for entry in emptied.entries():
                self.children[index - 1]._push_entry(entry)
        elif operation is _ChildDelete.MERGE_TO_RIGHT:
            self.children[index + 1]._insert_entry(0, self._pop_head())
            emptied = self.children.pop(0)
            for entry in reversed(emptied.entries()):
                self.children[index + 1]._insert_entry(0, entry)

    def _merge_children_into_self(self, key: Any) -> None:
        left = self.children.pop(0)
        right = self.children.pop(0)
        if left.has_key(key):
            left.delete(key)
        if right.has_key(key):
            right.delete(key)
        self.keys = left.keys + self.keys + right.keys
        self.values = left.values + self.values + right.values