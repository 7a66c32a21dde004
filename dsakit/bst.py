"""Binary search tree insertion, search and deletion."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from dsakit.binary_tree import TreeNode


def bst_insert(root: TreeNode | None, value: Any) -> TreeNode:
    """Insert ``value`` and return the root; equal values go to the right."""
    node = TreeNode(value)
    if root is None:
        return node
    current = root
    while True:
        if current.value > value:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def build_bst(values: Iterable[Any]) -> TreeNode | None:
    """Insert the values in order into an empty tree and return its root."""
    root = None
    for value in values:
        root = bst_insert(root, value)
    return root


def bst_search(root: TreeNode | None, value: Any) -> bool:
    """Tell whether ``value`` is in the tree."""
    current = root
    while current is not None:
        if current.value == value:
            return True
        current = current.left if current.value > value else current.right
    return False


def min_node(root: TreeNode | None) -> TreeNode | None:
    """Return the leftmost node of the tree, or ``None`` for an empty tree."""
    current = root
    while current is not None and current.left is not None:
        current = current.left
    return current


def bst_delete(root: TreeNode | None, value: Any) -> TreeNode | None:
    """Remove one occurrence of ``value`` and return the new root."""
    if root is None:
        raise KeyError(value)
    if value < root.value:
        root.left = bst_delete(root.left, value)
    elif value > root.value:
        root.right = bst_delete(root.right, value)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = min_node(root.right)
        root.value = successor.value
        root.right = bst_delete(root.right, successor.value)
    return root