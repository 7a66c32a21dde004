"""Find a path through a square maze moving only down or right."""

from __future__ import annotations

from collections.abc import Sequence


def solve_maze(grid: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Return a grid marking a path from the top-left to the bottom-right cell.

    Open cells hold 1. Moves go down first, then right. The bottom-right cell
    counts as reached whatever it holds. Returns ``None`` when no path exists.
    """
    size = len(grid)
    if size == 0:
        raise ValueError("the maze is empty")
    if any(len(row) != size for row in grid):
        raise ValueError("the maze must be square")

    path = [[0] * size for _ in range(size)]
    last = size - 1

    def walk(x: int, y: int) -> bool:
        if x == last and y == last:
            path[x][y] = 1
            return True
        if x < size and y < size and grid[x][y] == 1:
            path[x][y] = 1
            if walk(x + 1, y) or walk(x, y + 1):
                return True
            path[x][y] = 0
        return False

    return path if walk(0, 0) else None