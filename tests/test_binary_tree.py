import pytest

from dsakit.binary_tree import (
    TreeNode,
    count_nodes,
    diameter,
    height,
    inorder,
    is_balanced,
    left_view,
    level_order,
    postorder,
    preorder,
    right_view,
    sum_at_level,
    sum_nodes,
    sum_replace,
)


def full_tree():
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(5)),
        TreeNode(3, TreeNode(6), TreeNode(7)),
    )


def chain(n):
    root = None
    for value in range(n, 0, -1):
        root = TreeNode(value, left=root)
    return root


def test_traversals_of_sample_tree():
    root = full_tree()
    assert preorder(root) == [1, 2, 4, 5, 3, 6, 7]
    assert inorder(root) == [4, 2, 5, 1, 6, 3, 7]
    assert postorder(root) == [4, 5, 2, 6, 7, 3, 1]
    assert level_order(root) == [1, 2, 3, 4, 5, 6, 7]


def test_traversals_visit_same_values():
    root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
    values = sorted(preorder(root))
    assert sorted(inorder(root)) == values
    assert sorted(postorder(root)) == values
    assert sorted(level_order(root)) == values
    assert preorder(root)[0] == postorder(root)[-1] == 1


def test_empty_tree():
    assert preorder(None) == []
    assert level_order(None) == []
    assert count_nodes(None) == 0
    assert height(None) == 0
    assert diameter(None) == 0
    assert is_balanced(None) is True
    assert right_view(None) == []


def test_sum_at_level_sample():
    root = full_tree()
    assert sum_at_level(root, 1) == 5
    assert sum_at_level(root, 2) == 22
    assert sum_at_level(root, 0) == root.value


def test_sum_at_levels_add_to_total():
    root = full_tree()
    total = sum(sum_at_level(root, k) for k in range(height(root)))
    assert total == sum_nodes(root)
    assert sum_at_level(root, height(root)) == 0


def test_sum_at_level_empty_raises():
    with pytest.raises(ValueError):
        sum_at_level(None, 0)


def test_counts_and_sizes():
    root = full_tree()
    assert count_nodes(root) == 7
    assert sum_nodes(root) == 28
    assert height(root) == 3
    assert diameter(root) == 5


def test_chain_measurements():
    root = chain(5)
    assert height(root) == 5
    assert diameter(root) == 5
    assert count_nodes(root) == 5
    assert is_balanced(root) is False


def test_sum_replace_sample():
    root = full_tree()
    sum_replace(root)
    assert preorder(root) == [28, 11, 4, 5, 16, 6, 7]


def test_sum_replace_root_holds_total():
    root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
    total = sum_nodes(root)
    sum_replace(root)
    assert root.value == total


def test_is_balanced():
    assert is_balanced(full_tree()) is True
    assert is_balanced(chain(2)) is True
    assert is_balanced(chain(3)) is False


def test_views():
    root = full_tree()
    assert right_view(root) == [1, 3, 7]
    assert left_view(root) == [1, 2, 4]
    assert len(right_view(root)) == height(root)