"""A circular singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from dsakit.singly import Node


class CircularList:
    """A singly linked list whose last node links back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            self.insert_back(value)

    def _link_after_tail(self, value: Any) -> Node:
        node = Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1
        return node

    def insert_front(self, value: Any) -> None:
        """Put ``value`` at the start of the list."""
        self._link_after_tail(value)

    def insert_back(self, value: Any) -> None:
        """Put ``value`` at the end of the list."""
        self._tail = self._link_after_tail(value)

    def delete_front(self) -> Any:
        """Remove the first node and return its value."""
        if self._tail is None:
            raise IndexError("delete from an empty list")
        head = self._tail.next
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        self._size -= 1
        return head.value

    def delete_at(self, pos: int) -> Any:
        """Remove the node at 1-based position ``pos`` and return its value."""
        if not 1 <= pos <= self._size:
            raise IndexError(f"no node at position {pos}")
        if pos == 1:
            return self.delete_front()
        before = self._tail.next
        for _ in range(pos - 2):
            before = before.next
        target = before.next
        before.next = target.next
        if target is self._tail:
            self._tail = before
        self._size -= 1
        return target.value

    def __iter__(self) -> Iterator[Any]:
        """Yield each value once, starting from the head."""
        if self._tail is None:
            return
        head = node = self._tail.next
        while True:
            yield node.value
            node = node.next
            if node is head:
                break

    def __len__(self) -> int:
        return self._size