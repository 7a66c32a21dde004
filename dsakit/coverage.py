"""Count integer points by how many segments cover them."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def coverage_counts(segments: Iterable[tuple[int, int]]) -> list[int]:
    """For ``k = 1 .. n``, count the integer points covered by exactly ``k`` segments.

    Each segment is ``(start, length)`` and covers ``start .. start + length - 1``.
    The result has one entry per segment given.
    """
    deltas: Counter[int] = Counter()
    count = 0
    for start, length in segments:
        if length < 0:
            raise ValueError(f"segment length must be non-negative, got {length}")
        deltas[start] += 1
        deltas[start + length] -= 1
        count += 1

    result = [0] * (count + 1)
    depth = 0
    previous = None
    for point in sorted(deltas):
        if previous is not None:
            result[depth] += point - previous
        depth += deltas[point]
        previous = point
    return result[1:]