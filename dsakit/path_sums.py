"""Root-to-node path sums on a tree with point updates."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class PathSumTree:
    """A tree rooted at node 1 that answers sums of values on root-to-node paths.

    Nodes are numbered from 1; ``values[i - 1]`` is the value of node ``i``.
    Each node adds its value where its Euler tour visit starts and removes it
    where the visit ends, so a prefix sum up to a node's entry is the sum along
    its path from the root.
    """

    def __init__(self, values: Sequence[int], edges: Iterable[tuple[int, int]]) -> None:
        size = len(values)
        if size == 0:
            raise ValueError("the tree needs at least one node")
        edge_list = list(edges)
        if len(edge_list) != size - 1:
            raise ValueError(f"a tree of {size} nodes has {size - 1} edges, got {len(edge_list)}")
        adjacency: list[list[int]] = [[] for _ in range(size + 1)]
        for a, b in edge_list:
            for node in (a, b):
                if not 1 <= node <= size:
                    raise ValueError(f"node {node} is outside 1..{size}")
            adjacency[a].append(b)
            adjacency[b].append(a)

        self._size = size
        self._values = [0, *values]
        self._entry = [0] * (size + 1)
        self._exit = [0] * (size + 1)
        self._fenwick = [0] * (2 * size + 1)
        self._tour(adjacency)
        for node in range(1, size + 1):
            self._add(self._entry[node], self._values[node])
            self._add(self._exit[node], -self._values[node])

    def _tour(self, adjacency: list[list[int]]) -> None:
        timer = 1
        visited = [False] * (self._size + 1)
        visited[1] = True
        self._entry[1] = timer
        timer += 1
        stack = [(1, iter(adjacency[1]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if not visited[child]:
                    visited[child] = True
                    self._entry[child] = timer
                    timer += 1
                    stack.append((child, iter(adjacency[child])))
                    break
            else:
                stack.pop()
                self._exit[node] = timer
                timer += 1
        if not all(visited[1:]):
            raise ValueError("the edges do not connect every node")

    def _add(self, position: int, delta: int) -> None:
        while position < len(self._fenwick):
            self._fenwick[position] += delta
            position += position & -position

    def _prefix(self, position: int) -> int:
        total = 0
        while position > 0:
            total += self._fenwick[position]
            position -= position & -position
        return total

    def _check(self, node: int) -> None:
        if not 1 <= node <= self._size:
            raise IndexError(f"node {node} is outside 1..{self._size}")

    def update(self, node: int, value: int) -> None:
        """Set the value of ``node`` to ``value``."""
        self._check(node)
        delta = value - self._values[node]
        self._values[node] = value
        self._add(self._entry[node], delta)
        self._add(self._exit[node], -delta)

    def query(self, node: int) -> int:
        """Return the sum of the values on the path from the root to ``node``."""
        self._check(node)
        return self._prefix(self._entry[node])