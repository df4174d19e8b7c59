"""Ordered-sequence lookup used by the tree nodes."""

from __future__ import annotations

from typing import Any, NamedTuple, Sequence


class Lookup(NamedTuple):
    """Outcome of a lookup.

    When ``found`` is true, ``index`` is the position of the key. Otherwise it
    is the position where the key would be inserted to keep the order.
    """

    found: bool
    index: int


def binary_lookup(items: Sequence[Any], key: Any) -> Lookup:
    """Find ``key`` in the sorted ``items``.

    Returns the first position holding an equal item, or the position of the
    first item greater than ``key`` (``len(items)`` if there is none).
    """
    for index, item in enumerate(items):
        if key == item:
            return Lookup(True, index)
        if key < item:
            return Lookup(False, index)
    return Lookup(False, len(items))