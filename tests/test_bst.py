import pytest

from dsakit.binary_tree import inorder, preorder
from dsakit.bst import bst_delete, bst_insert, bst_search, build_bst, min_node

VALUES = [5, 1, 3, 4, 2, 7]


def test_inorder_is_sorted():
    root = build_bst(VALUES)
    assert inorder(root) == sorted(VALUES)


def test_shape_follows_insertion_order():
    root = build_bst(VALUES)
    assert root.value == 5
    assert root.left.value == 1
    assert root.right.value == 7
    assert root.left.right.value == 3


def test_duplicates_are_kept():
    values = [3, 1, 3, 2, 3]
    root = build_bst(values)
    assert inorder(root) == sorted(values)


def test_insert_into_empty():
    root = bst_insert(None, 9)
    assert preorder(root) == [9]


def test_search():
    root = build_bst(VALUES)
    assert bst_search(root, 7) is True
    assert all(bst_search(root, v) for v in VALUES)
    assert bst_search(root, 6) is False
    assert bst_search(None, 1) is False


def test_min_node():
    root = build_bst(VALUES)
    assert min_node(root).value == min(VALUES)
    assert min_node(None) is None


@pytest.mark.parametrize("value", VALUES)
def test_delete_each_value(value):
    root = build_bst(VALUES)
    root = bst_delete(root, value)
    expected = sorted(VALUES)
    expected.remove(value)
    assert inorder(root) == expected
    assert bst_search(root, value) is False


def test_delete_everything():
    root = build_bst(VALUES)
    for value in VALUES:
        root = bst_delete(root, value)
    assert root is None


def test_delete_missing_raises():
    root = build_bst(VALUES)
    with pytest.raises(KeyError):
        bst_delete(root, 6)
    with pytest.raises(KeyError):
        bst_delete(None, 1)