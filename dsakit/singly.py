"""A singly linked list with cycle detection and alternate merging."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    value: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list reached through its ``head`` node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.insert_back(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def insert_front(self, value: Any) -> None:
        """Put ``value`` at the start of the list."""
        self.head = Node(value, self.head)

    def insert_back(self, value: Any) -> None:
        """Put ``value`` at the end of the list."""
        node = Node(value)
        if self.head is None:
            self.head = node
            return
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        tail.next = node

    def delete_front(self) -> Any:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        node = self.head
        self.head = node.next
        return node.value

    def delete_back(self) -> Any:
        """Remove the last node and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        if self.head.next is None:
            value = self.head.value
            self.head = None
            return value
        before = self.head
        while before.next.next is not None:
            before = before.next
        value = before.next.value
        before.next = None
        return value

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous = None
        current = self.head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def middle(self) -> Any:
        """Return the middle value; for an even length, the second of the two middles."""
        if self.head is None:
            raise IndexError("an empty list has no middle")
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow.value

    def has_cycle(self) -> bool:
        """Tell whether following ``next`` links ever returns to a node already seen."""
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def make_cycle(self, pos: int) -> None:
        """Link the last node back to the node at 1-based position ``pos``."""
        if self.has_cycle():
            raise ValueError("the list already has a cycle")
        target = tail = None
        for index, node in enumerate(self._nodes(), start=1):
            if index == pos:
                target = node
            tail = node
        if target is None:
            raise IndexError(f"no node at position {pos}")
        tail.next = target

    def delete_node(self, node: Node) -> None:
        """Delete ``node`` knowing only the node itself, by taking over its successor."""
        successor = node.next
        if successor is None:
            raise ValueError("the last node cannot be deleted this way")
        node.value = successor.value
        node.next = successor.next

    def merge_alternate(self, other: LinkedList) -> None:
        """Weave the nodes of ``other`` between this list's nodes.

        Nodes left over from the longer list stay at the end. Afterwards
        ``other`` is empty, unless this list was empty, in which case
        nothing changes.
        """
        if other is self:
            raise ValueError("cannot merge a list with itself")
        first, second = self.head, other.head
        if first is None:
            return
        while first is not None and second is not None:
            after_first = first.next
            first.next = second
            if after_first is None:
                break
            after_second = second.next
            second.next = after_first
            first, second = after_first, after_second
        other.head = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from head to tail; a list with a cycle never ends."""
        for node in self._nodes():
            yield node.value

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())