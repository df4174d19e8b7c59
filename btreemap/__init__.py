"""An in-memory B-tree mapping ordered keys to values: the tree, its nodes and a sorted-list lookup."""

__version__ = "0.1.0"
__all__ = ["lookup", "node", "tree"]