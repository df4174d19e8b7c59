# btreemap

An in-memory B-tree that maps ordered keys to values. Keys can be of any type
that supports `==` and `<`. Values can be anything.

## Installation

```
pip install .
```

## Usage

```python
from btreemap.tree import BTree

tree = BTree(3)          # a node is split once it holds 3 keys

tree.insert(10, 100)
tree.insert(5, 50)
tree.insert(15, 150)

tree.search(10)          # (10, 100)
tree.search(20)          # None

tree.insert(10, 200)     # inserting an existing key replaces its value
tree.search(10)          # (10, 200)

tree.delete(5)
tree.search(5)           # None
tree.delete(42)          # deleting a missing key does nothing
```

`BTree(max_count)` starts empty. It has three methods:

- `search(key)` returns the stored `(key, value)` tuple, or `None` if the key
  is not in the tree.
- `insert(key, value)` adds the key, or replaces the value if the key is
  already there.
- `delete(key)` removes the key. A key that is not present is ignored.

### Nodes

`btreemap.node.BTreeNode` is the node type the tree is built from. It holds
parallel `keys` and `values` lists, a `children` list, and `max_count`. It has
its own `search`, `insert` and `delete`, plus `split_node()`, `merge(other)`,
`entries()` and the checks `is_leaf()`, `is_empty()`, `is_full()`,
`is_more_than_min_count()` and `has_key(key)`. Most code only needs `BTree`.

### Sorted-list lookup

`btreemap.lookup.binary_lookup(items, key)` scans a sorted sequence and finds
where `key` is or would go. It returns a `Lookup` named tuple with the fields
`found` and `index`:

```python
from btreemap.lookup import binary_lookup

binary_lookup([10, 20, 30], 20)   # Lookup(found=True, index=1)
binary_lookup([10, 20, 30], 15)   # Lookup(found=False, index=1)
binary_lookup([10, 20, 30], 99)   # Lookup(found=False, index=3)
```

If the key is there more than once, the first position is returned. The
lookup is a linear scan. It does not halve the range.

## What it does not do

The tree lives only in memory. Nothing is saved to disk. `BTree` has no
iteration, length, range queries or dictionary-style `[]` access. It offers
only `search`, `insert` and `delete`. There is no command-line tool.

## Running the tests

```
pip install ".[test]"
pytest
```