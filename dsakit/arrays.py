"""Small algorithms over sequences of integers."""

from collections import Counter
from collections.abc import Sequence
from itertools import pairwise
from typing import NamedTuple


class KthExtremes(NamedTuple):
    """The k-th largest and k-th smallest values of a sequence."""

    maximum: int
    minimum: int


def reverse_array(items: Sequence[int]) -> list[int]:
    """Return the items in reverse order."""
    return list(reversed(items))


def rotate_right(items: Sequence[int]) -> list[int]:
    """Return the items rotated one place to the right; the last item comes first."""
    if not items:
        return []
    return [items[-1], *items[:-1]]


def kth_min_max(items: Sequence[int], k: int) -> KthExtremes:
    """Return the k-th largest and k-th smallest values (1-based ``k``)."""
    ordered = sorted(items)
    if not 1 <= k <= len(ordered):
        raise ValueError(f"k must be between 1 and {len(ordered)}, got {k}")
    return KthExtremes(maximum=ordered[-k], minimum=ordered[k - 1])


def sort_three_values(items: Sequence[int]) -> list[int]:
    """Sort a sequence made only of 0, 1 and 2 by counting each value."""
    counts = Counter(items)
    unexpected = set(counts) - {0, 1, 2}
    if unexpected:
        raise ValueError(f"only 0, 1 and 2 are allowed, got {sorted(unexpected)}")
    return [value for value in (0, 1, 2) for _ in range(counts[value])]


def max_subarray_sum(items: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of items."""
    values = iter(items)
    try:
        best = current = next(values)
    except StopIteration:
        raise ValueError("the sequence is empty") from None
    for value in values:
        current = max(value, current + value)
        best = max(best, current)
    return best


def min_jumps(items: Sequence[int]) -> int | None:
    """Return the fewest jumps to reach the last index, or ``None`` if it cannot be reached.

    Each item is the longest jump allowed from its position.
    """
    n = len(items)
    if n <= 1:
        return 0
    if items[0] == 0:
        return None
    max_reach = steps = items[0]
    jumps = 1
    for position in range(1, n):
        if position == n - 1:
            return jumps
        max_reach = max(max_reach, position + items[position])
        steps -= 1
        if steps == 0:
            jumps += 1
            if position >= max_reach:
                return None
            steps = max_reach - position
    return None


def longest_arithmetic_subarray(items: Sequence[int]) -> int:
    """Return the length of the longest contiguous run with a constant difference."""
    if len(items) < 2:
        raise ValueError("at least two items are needed")
    differences = [b - a for a, b in pairwise(items)]
    best = current = 2
    for previous, difference in pairwise(differences):
        current = current + 1 if difference == previous else 2
        best = max(best, current)
    return best


def count_record_breaks(items: Sequence[int]) -> int:
    """Count the items after the first that beat every item before them.

    A sequence of one item counts as a single record.
    """
    if not items:
        raise ValueError("the sequence is empty")
    if len(items) == 1:
        return 1
    record = items[0]
    breaks = 0
    for value in items[1:]:
        if value > record:
            breaks += 1
            record = value
    return breaks