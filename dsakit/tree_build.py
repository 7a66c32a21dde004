"""Rebuild binary trees from traversals, and find ancestors and distances."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from dsakit.binary_tree import TreeNode


def _find(values: Sequence[Any], target: Any, start: int, end: int) -> int:
    try:
        return values.index(target, start, end + 1)
    except ValueError:
        raise ValueError(
            f"{target!r} is not in the inorder sequence where expected"
        ) from None


def _build(
    order: Iterator[Any], inorder_values: list[Any], right_first: bool
) -> TreeNode | None:
    def build(start: int, end: int) -> TreeNode | None:
        if start > end:
            return None
        node = TreeNode(next(order))
        if start == end:
            return node
        pos = _find(inorder_values, node.value, start, end)
        if right_first:
            node.right = build(pos + 1, end)
            node.left = build(start, pos - 1)
        else:
            node.left = build(start, pos - 1)
            node.right = build(pos + 1, end)
        return node

    return build(0, len(inorder_values) - 1)


def _check_lengths(order: Sequence[Any], inorder_values: Sequence[Any]) -> None:
    if len(order) != len(inorder_values):
        raise ValueError("the traversals must have the same length")


def build_from_preorder(
    preorder_values: Sequence[Any], inorder_values: Sequence[Any]
) -> TreeNode | None:
    """Rebuild a tree from its preorder and inorder traversals."""
    _check_lengths(preorder_values, inorder_values)
    return _build(iter(list(preorder_values)), list(inorder_values), right_first=False)


def build_from_postorder(
    postorder_values: Sequence[Any], inorder_values: Sequence[Any]
) -> TreeNode | None:
    """Rebuild a tree from its postorder and inorder traversals."""
    _check_lengths(postorder_values, inorder_values)
    return _build(
        reversed(list(postorder_values)), list(inorder_values), right_first=True
    )


def lowest_common_ancestor(root: TreeNode | None, a: Any, b: Any) -> TreeNode | None:
    """Return the deepest node having both ``a`` and ``b`` in its subtree.

    If only one of them is in the tree, its node is returned; if neither is,
    ``None``.
    """
    if root is None:
        return None
    if root.value == a or root.value == b:
        return root
    left = lowest_common_ancestor(root.left, a, b)
    right = lowest_common_ancestor(root.right, a, b)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def _depth_of(root: TreeNode | None, target: Any, depth: int = 0) -> int | None:
    if root is None:
        return None
    if root.value == target:
        return depth
    found = _depth_of(root.left, target, depth + 1)
    if found is not None:
        return found
    return _depth_of(root.right, target, depth + 1)


def distance_between(root: TreeNode | None, a: Any, b: Any) -> int:
    """Return the number of edges on the path between the nodes holding ``a`` and ``b``."""
    ancestor = lowest_common_ancestor(root, a, b)
    first = _depth_of(ancestor, a)
    second = _depth_of(ancestor, b)
    if first is None or second is None:
        raise ValueError(f"both {a!r} and {b!r} must be in the tree")
    return first + second