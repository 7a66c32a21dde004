"""A first-in first-out queue built on linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from dsakit.singly import Node


class LinkedQueue:
    """A queue that adds at the rear and removes from the front."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._front: Node | None = None
        self._rear: Node | None = None
        self._size = 0
        for value in values:
            self.enqueue(value)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front is None:
            raise IndexError("queue underflow")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size