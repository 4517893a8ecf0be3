import pytest
from hypothesis import given
from hypothesis import strategies as st

from structkit.bst import TreeNode, build_tree, in_order, insert_recursive, pre_order
from structkit.bstops import (
    delete_recursive,
    find_min,
    inorder_successor,
    insert_into_bst,
    search_bst,
)


def _example_tree():
    # root = [5,3,6,2,4,null,7]
    return build_tree([5, 3, 6, 2, 4, 7], insert_recursive)


def _nodes(root):
    if root is not None:
        yield from _nodes(root.left)
        yield root
        yield from _nodes(root.right)


value_lists = st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1, max_size=60)


def test_find_min_of_example():
    root = _example_tree()
    assert find_min(root).val == 2


def test_find_min_of_single_node():
    node = TreeNode(9)
    assert find_min(node) is node


@given(value_lists)
def test_find_min_is_smallest_value(values):
    root = build_tree(values)
    assert find_min(root).val == min(values)


def test_delete_node_with_two_children_uses_successor():
    root = delete_recursive(_example_tree(), 3)
    # [5,4,6,2,null,null,7]
    assert list(pre_order(root)) == [5, 4, 2, 6, 7]


def test_delete_missing_key_leaves_tree_unchanged():
    root = _example_tree()
    before = list(pre_order(root))
    result = delete_recursive(root, 0)
    assert result is root
    assert list(pre_order(result)) == before


def test_delete_from_empty_tree():
    assert delete_recursive(None, 1) is None


def test_delete_only_node_empties_tree():
    assert delete_recursive(TreeNode(1), 1) is None


def test_delete_root_with_one_child_returns_child():
    root = build_tree([2, 1])
    child = root.left
    assert delete_recursive(root, 2) is child


@given(value_lists, st.integers(min_value=-1000, max_value=1000))
def test_delete_keeps_remaining_values_sorted(values, key):
    root = build_tree(values)
    root = delete_recursive(root, key)
    assert list(in_order(root)) == sorted(set(values) - {key})
    assert search_bst(root, key) is None


def test_inorder_successor_with_right_subtree():
    root = _example_tree()
    node = search_bst(root, 3)
    assert inorder_successor(root, node).val == 4


def test_inorder_successor_from_ancestor():
    root = _example_tree()
    node = search_bst(root, 4)
    assert inorder_successor(root, node) is root


def test_inorder_successor_of_largest_is_none():
    root = _example_tree()
    node = search_bst(root, 7)
    assert inorder_successor(root, node) is None


def test_inorder_successor_of_foreign_node_is_none():
    root = _example_tree()
    assert inorder_successor(root, TreeNode(3)) is None


@given(value_lists)
def test_inorder_successor_matches_sorted_order(values):
    root = build_tree(values)
    ordered = sorted(set(values))
    for node in _nodes(root):
        successor = inorder_successor(root, node)
        position = ordered.index(node.val)
        if position + 1 < len(ordered):
            assert successor is not None
            assert successor.val == ordered[position + 1]
        else:
            assert successor is None


def test_insert_into_example_one():
    root = build_tree([4, 2, 7, 1, 3])
    result = insert_into_bst(root, 5)
    assert result is root
    assert root.right.left.val == 5
    assert list(pre_order(root)) == [4, 2, 1, 3, 7, 5]


def test_insert_into_example_two():
    root = build_tree([40, 20, 60, 10, 30, 50, 70])
    insert_into_bst(root, 25)
    thirty = search_bst(root, 30)
    assert thirty.left.val == 25
    assert thirty.right is None


def test_insert_into_empty_tree():
    root = insert_into_bst(None, 8)
    assert list(pre_order(root)) == [8]


def test_insert_duplicate_is_ignored():
    root = build_tree([4, 2, 7])
    insert_into_bst(root, 2)
    assert list(in_order(root)) == [2, 4, 7]


@given(value_lists)
def test_insert_into_bst_builds_sorted_tree(values):
    root = None
    for value in values:
        root = insert_into_bst(root, value)
    assert list(in_order(root)) == sorted(set(values))


def test_search_example_one_returns_subtree():
    root = build_tree([4, 2, 7, 1, 3])
    found = search_bst(root, 2)
    assert list(pre_order(found)) == [2, 1, 3]


def test_search_example_two_missing_value():
    root = build_tree([4, 2, 7, 1, 3])
    assert search_bst(root, 5) is None


def test_search_empty_tree():
    assert search_bst(None, 1) is None


@pytest.mark.parametrize("value", [1, 2, 3, 4, 7])
def test_search_finds_every_inserted_value(value):
    root = build_tree([4, 2, 7, 1, 3])
    assert search_bst(root, value).val == value


@given(value_lists, st.integers(min_value=1001, max_value=5000))
def test_search_absent_value_returns_none(values, absent):
    root = build_tree(values)
    assert search_bst(root, absent) is None
    assert search_bst(root, -absent) is None