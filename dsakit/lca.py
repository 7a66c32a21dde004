"""Lowest common ancestors through an Euler tour and range-minimum queries."""

from __future__ import annotations

from collections.abc import Iterable


class EulerTourLCA:
    """Answer lowest-common-ancestor queries on a tree of nodes ``0 .. n - 1``.

    The tree is walked once, recording every node each time the walk is at it.
    The ancestor of two nodes is the node visited earliest, by first-visit
    time, between their first visits in that record.
    """

    def __init__(self, n: int, edges: Iterable[tuple[int, int]], root: int = 0) -> None:
        if n < 1:
            raise ValueError("the tree needs at least one node")
        edge_list = list(edges)
        if len(edge_list) != n - 1:
            raise ValueError(f"a tree of {n} nodes has {n - 1} edges, got {len(edge_list)}")
        if not 0 <= root < n:
            raise ValueError(f"root {root} is outside 0..{n - 1}")
        adjacency: list[list[int]] = [[] for _ in range(n)]
        for a, b in edge_list:
            for node in (a, b):
                if not 0 <= node < n:
                    raise ValueError(f"node {node} is outside 0..{n - 1}")
            adjacency[a].append(b)
            adjacency[b].append(a)

        self._n = n
        self._first = [-1] * n
        tour = self._walk(adjacency, root)
        if -1 in self._first:
            raise ValueError("the edges do not connect every node")
        self._table = self._sparse_table(tour)

    def _walk(self, adjacency: list[list[int]], root: int) -> list[int]:
        self._first[root] = 0
        tour = [root]
        stack = [iter(adjacency[root])]
        path = [root]
        while stack:
            for child in stack[-1]:
                if self._first[child] == -1:
                    self._first[child] = len(tour)
                    tour.append(child)
                    stack.append(iter(adjacency[child]))
                    path.append(child)
                    break
            else:
                stack.pop()
                path.pop()
                if path:
                    tour.append(path[-1])
        return tour

    def _earlier(self, a: int, b: int) -> int:
        return a if self._first[a] < self._first[b] else b

    def _sparse_table(self, tour: list[int]) -> list[list[int]]:
        table = [tour]
        span = 1
        while 2 * span <= len(tour):
            previous = table[-1]
            table.append(
                [
                    self._earlier(previous[i], previous[i + span])
                    for i in range(len(tour) - 2 * span + 1)
                ]
            )
            span *= 2
        return table

    def lca(self, a: int, b: int) -> int:
        """Return the lowest common ancestor of nodes ``a`` and ``b``."""
        for node in (a, b):
            if not 0 <= node < self._n:
                raise IndexError(f"node {node} is outside 0..{self._n - 1}")
        lo, hi = sorted((self._first[a], self._first[b]))
        level = (hi - lo + 1).bit_length() - 1
        row = self._table[level]
        return self._earlier(row[lo], row[hi - (1 << level) + 1])