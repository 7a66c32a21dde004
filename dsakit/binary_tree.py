"""Binary tree nodes, traversals and measurements."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    """Yield the nodes of each level, top to bottom, left to right."""
    if root is None:
        return
    level = [root]
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the values in root, left, right order."""
    return list(_preorder(root))


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left, root, right order."""
    return list(_inorder(root))


def postorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left, right, root order."""
    return list(_postorder(root))


def level_order(root: TreeNode | None) -> list[Any]:
    """Return the values level by level, each level left to right."""
    return [node.value for level in _levels(root) for node in level]


def sum_at_level(root: TreeNode | None, k: int) -> int:
    """Return the sum of the values at depth ``k``, the root being depth 0."""
    if root is None:
        raise ValueError("the tree is empty")
    for depth, level in enumerate(_levels(root)):
        if depth == k:
            return sum(node.value for node in level)
    return 0


def count_nodes(root: TreeNode | None) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _preorder(root))


def sum_nodes(root: TreeNode | None) -> int:
    """Return the sum of all values in the tree."""
    return sum(_preorder(root))


def height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    return sum(1 for _ in _levels(root))


def _height_and_diameter(node: TreeNode | None) -> tuple[int, int]:
    if node is None:
        return 0, 0
    left_height, left_diameter = _height_and_diameter(node.left)
    right_height, right_diameter = _height_and_diameter(node.right)
    through = left_height + right_height + 1
    return (
        max(left_height, right_height) + 1,
        max(through, left_diameter, right_diameter),
    )


def diameter(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest path between any two nodes."""
    return _height_and_diameter(root)[1]


def sum_replace(root: TreeNode | None) -> None:
    """Replace each value, in place, with the sum of the values in its subtree."""
    if root is None:
        return
    sum_replace(root.left)
    sum_replace(root.right)
    if root.left is not None:
        root.value += root.left.value
    if root.right is not None:
        root.value += root.right.value


def _balanced_height(node: TreeNode | None) -> int | None:
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: TreeNode | None) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def right_view(root: TreeNode | None) -> list[Any]:
    """Return the rightmost value of each level."""
    return [level[-1].value for level in _levels(root)]


def left_view(root: TreeNode | None) -> list[Any]:
    """Return the leftmost value of each level."""
    return [level[0].value for level in _levels(root)]


__all__ = [
    "TreeNode",
    "preorder",
    "inorder",
    "postorder",
    "level_order",
    "sum_at_level",
    "count_nodes",
    "sum_nodes",
    "height",
    "diameter",
    "sum_replace",
    "is_balanced",
    "right_view",
    "left_view",
]

# deque kept available for callers that extend level walks
_ = deque