import pytest

from btreemap.node import BTreeNode


def leaf(max_count, *keys):
    return BTreeNode(max_count, list(keys), [k * 10 for k in keys])


def internal(max_count, keys, children):
    return BTreeNode(max_count, list(keys), [k * 10 for k in keys], children)


def collect_keys(node):
    if node.is_leaf():
        return list(node.keys)
    result = []
    for position, child in enumerate(node.children):
        result.extend(collect_keys(child))
        if position < len(node.keys):
            result.append(node.keys[position])
    return result


def test_empty_node_search_returns_none():
    node = BTreeNode(3)
    assert node.search(1) is None
    assert node.is_empty()
    assert node.is_leaf()


def test_insert_and_search_round_trip():
    node = BTreeNode(3)
    node.insert(10, 100)
    node.insert(5, 50)
    assert node.search(10) == (10, 100)
    assert node.search(5) == (5, 50)
    assert node.search(7) is None


def test_insert_overwrites_existing_key():
    node = BTreeNode(3)
    node.insert(10, 100)
    node.insert(10, 200)
    assert node.search(10) == (10, 200)
    assert node.keys == [10]


def test_leaf_insert_keeps_keys_sorted():
    node = BTreeNode(100)
    for key in [5, 3, 9, 1, 7]:
        node.insert(key, str(key))
    assert node.keys == sorted(node.keys)
    assert node.values == [str(k) for k in node.keys]


def test_is_full_and_min_count():
    node = leaf(3, 1, 2)
    assert not node.is_full()
    assert node.is_more_than_min_count()
    node.insert(3, 30)
    assert node.is_full()
    assert not leaf(3, 1).is_more_than_min_count()


def test_has_key():
    node = leaf(3, 1, 2)
    assert node.has_key(2)
    assert not node.has_key(4)


def test_entries_pairs_keys_with_values():
    node = leaf(5, 1, 2, 3)
    assert node.entries() == [(1, 10), (2, 20), (3, 30)]


def test_split_leaf():
    node = BTreeNode(3, [1, 2, 3], ["a", "b", "c"])
    middle, (left, right) = node.split_node()
    assert middle == (2, "b")
    assert left.keys == [1] and left.values == ["a"]
    assert right.keys == [3] and right.values == ["c"]
    assert left.is_leaf() and right.is_leaf()


def test_split_internal_node_distributes_children():
    children = [leaf(3, k) for k in (1, 3, 5, 7)]
    node = internal(3, [2, 4, 6], children)
    middle, (left, right) = node.split_node()
    assert middle == (4, 40)
    assert left.children == children[:2]
    assert right.children == children[2:]
    assert collect_keys(left) + [4] + collect_keys(right) == collect_keys(node)


def test_merge_concatenates():
    merged = leaf(3, 1, 2).merge(leaf(3, 5))
    assert merged.keys == [1, 2, 5]
    assert merged.values == [10, 20, 50]
    assert merged.max_count == 3


def test_internal_insert_splits_full_child():
    node = internal(3, [20], [leaf(3, 10), leaf(3, 30, 40)])
    node.insert(50, 500)
    assert node.keys == [20, 40]
    assert [c.keys for c in node.children] == [[10], [30], [50]]
    assert node.search(50) == (50, 500)


def test_search_descends_into_children():
    node = internal(3, [20], [leaf(3, 10), leaf(3, 30)])
    assert node.search(30) == (30, 300)
    assert node.search(10) == (10, 100)
    assert node.search(25) is None


def test_delete_from_leaf():
    node = leaf(5, 1, 2, 3)
    node.delete(2)
    assert node.keys == [1, 3]
    assert node.values == [10, 30]


def test_delete_missing_key_from_leaf_is_ignored():
    node = leaf(5, 1, 2)
    node.delete(9)
    assert node.entries() == [(1, 10), (2, 20)]


def test_delete_own_key_merges_into_self():
    node = internal(3, [20], [leaf(3, 10), leaf(3, 30)])
    node.delete(20)
    assert node.keys == [10, 30]
    assert node.is_leaf()


def test_delete_own_key_replaced_from_left_child():
    node = internal(3, [20], [leaf(3, 5, 10), leaf(3, 30)])
    node.delete(20)
    assert node.entries() == [(10, 100)]
    assert [c.keys for c in node.children] == [[5], [30]]


def test_delete_own_key_merges_children():
    node = internal(3, [20, 40], [leaf(3, 10), leaf(3, 30), leaf(3, 50)])
    node.delete(40)
    assert node.keys == [20]
    assert [c.keys for c in node.children] == [[10], [30, 50]]


def test_delete_rotates_left():
    node = internal(3, [20], [leaf(3, 10), leaf(3, 30, 40)])
    node.delete(10)
    assert node.keys == [30]
    assert [c.keys for c in node.children] == [[20], [40]]
    assert node.search(10) is None


def test_delete_rotates_right():
    node = internal(3, [30], [leaf(3, 10, 20), leaf(3, 40)])
    node.delete(40)
    assert node.keys == [20]
    assert [c.keys for c in node.children] == [[10], [30]]
    assert node.search(40) is None


def test_delete_merges_to_left():
    node = internal(3, [20, 40], [leaf(3, 10), leaf(3, 30), leaf(3, 50)])
    node.delete(50)
    assert node.keys == [20]
    assert [c.keys for c in node.children] == [[10], [30, 40]]
    assert collect_keys(node) == [10, 20, 30, 40]


def test_delete_merges_to_right():
    node = internal(3, [20, 40], [leaf(3, 10), leaf(3, 30), leaf(3, 50)])
    node.delete(10)
    assert node.keys == [40]
    assert [c.keys for c in node.children] == [[20, 30], [50]]
    assert collect_keys(node) == [20, 30, 40, 50]


def test_delete_child_merge_to_self():
    node = internal(3, [20], [leaf(3, 10), leaf(3, 30)])
    node.delete(10)
    assert node.keys == [20, 30]
    assert node.values == [200, 300]
    assert node.is_leaf()


def test_delete_absent_key_under_internal_node_is_ignored():
    node = internal(3, [20], [leaf(3, 10), leaf(3, 30)])
    node.delete(15)
    assert collect_keys(node) == [10, 20, 30]


@pytest.mark.parametrize("key", [10, 20, 30])
def test_delete_then_search_misses(key):
    node = internal(3, [20], [leaf(3, 10), leaf(3, 30)])
    node.delete(key)
    assert node.search(key) is None
    remaining = [k for k in (10, 20, 30) if k != key]
    assert all(node.search(k) == (k, k * 10) for k in remaining)