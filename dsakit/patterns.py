"""Star and number patterns, each returned as a list of text lines."""

from itertools import count


def right_aligned_pyramid(n: int) -> list[str]:
    """Return ``n`` rows of stars aligned to the right; row ``i`` has ``i`` stars."""
    return [" " * (n - row) + "*" * row for row in range(1, n + 1)]


def filled_rectangle(rows: int, cols: int) -> list[str]:
    """Return a solid rectangle of spaced stars, ``rows`` lines of ``cols`` stars."""
    return ["*  " * cols + " " for _ in range(rows)]


def floyds_triangle(n: int) -> list[str]:
    """Return Floyd's triangle of height ``n``: consecutive numbers, row ``i`` holding ``i`` of them."""
    numbers = count(1)
    return [
        "".join(f"{next(numbers)} " for _ in range(row))
        for row in range(1, n + 1)
    ]


def half_pyramid_numbers(n: int) -> list[str]:
    """Return a half pyramid where row ``i`` repeats the number ``i`` exactly ``i`` times."""
    return [f"{row} " * row for row in range(1, n + 1)]


def hollow_rectangle(rows: int, cols: int) -> list[str]:
    """Return the outline of a ``rows`` by ``cols`` rectangle drawn with stars."""

    def cell(row: int, col: int) -> str:
        on_border = row in (1, rows) or col in (1, cols)
        return "*" if on_border else " "

    return [
        "".join(cell(row, col) for col in range(1, cols + 1))
        for row in range(1, rows + 1)
    ]


def inverted_pyramid(n: int) -> list[str]:
    """Return ``n`` rows of stars, starting with ``n`` stars and shrinking by one."""
    return ["*" * width for width in range(n, 0, -1)]