"""Assorted numeric puzzles: primes, painters, a calculator and digit splits."""

from bisect import bisect_left
from collections.abc import Sequence
from enum import IntEnum
from math import isqrt

PAINT_MODULUS = 10_000_003
_DIGITS = frozenset("0123456789")


def prime_sieve(limit: int) -> list[bool]:
    """Return flags for ``0 .. limit - 1``, ``True`` where the index is prime."""
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    flags = [True] * limit
    flags[: min(limit, 2)] = [False] * min(limit, 2)
    for number in range(2, isqrt(max(limit - 1, 0)) + 1):
        if flags[number]:
            multiples = range(number * number, limit, number)
            flags[number * number :: number] = [False] * len(multiples)
    return flags


def min_painting_time(painters: int, unit_time: int, boards: Sequence[int]) -> int:
    """Return the least time to paint ``boards`` modulo 10000003.

    Each painter paints a contiguous run of whole boards and takes
    ``unit_time`` per unit of board length.
    """
    if painters < 1:
        raise ValueError(f"at least one painter is needed, got {painters}")
    if any(length < 0 for length in boards):
        raise ValueError("board lengths must be non-negative")
    if not boards:
        return 0

    def feasible(limit: int) -> bool:
        needed, load = 1, 0
        for length in boards:
            if load + length > limit:
                needed += 1
                load = length
            else:
                load += length
        return needed <= painters

    lowest = max(boards)
    candidates = range(lowest, sum(boards) + 1)
    best = lowest + bisect_left(candidates, True, key=feasible)
    return best * unit_time % PAINT_MODULUS


class Operation(IntEnum):
    """The calculator's menu choices."""

    ADD = 1
    SUBTRACT = 2
    MULTIPLY = 3
    DIVIDE = 4


def _truncating_divide(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def calculate(a: int, b: int, choice: int) -> int:
    """Apply the menu operation ``choice`` to ``a`` and ``b``.

    Division truncates toward zero.
    """
    try:
        operation = Operation(choice)
    except ValueError:
        raise ValueError(f"wrong choice: {choice}") from None
    if operation is Operation.ADD:
        return a + b
    if operation is Operation.SUBTRACT:
        return a - b
    if operation is Operation.MULTIPLY:
        return a * b
    return _truncating_divide(a, b)


def max_split_product(digits: str) -> int:
    """Split the digits into two numbers and return their largest product.

    Digits keep descending order within each number, and neither number may
    start with zero. Returns 0 when no valid split exists.
    """
    if set(digits) - _DIGITS:
        raise ValueError(f"expected only decimal digits, got {digits!r}")
    ordered = sorted(digits, reverse=True)
    best = 0
    for mask in range(1, 1 << len(ordered)):
        first = "".join(d for bit, d in enumerate(ordered) if mask >> bit & 1)
        second = "".join(d for bit, d in enumerate(ordered) if not mask >> bit & 1)
        if first and second and first[0] != "0" and second[0] != "0":
            best = max(best, int(first) * int(second))
    return best