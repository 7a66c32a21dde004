import pytest

from dsakit.patterns import (
    filled_rectangle,
    floyds_triangle,
    half_pyramid_numbers,
    hollow_rectangle,
    inverted_pyramid,
    right_aligned_pyramid,
)


def test_hollow_rectangle_matches_documented_example():
    assert hollow_rectangle(5, 4) == ["****", "*  *", "*  *", "*  *", "****"]


def test_filled_rectangle_matches_documented_example():
    assert filled_rectangle(4, 5) == ["*  *  *  *  *   "] * 4


def test_half_pyramid_matches_documented_example():
    assert half_pyramid_numbers(5) == [
        "1 ",
        "2 2 ",
        "3 3 3 ",
        "4 4 4 4 ",
        "5 5 5 5 5 ",
    ]


@pytest.mark.parametrize("n", [1, 2, 5, 8])
def test_right_aligned_pyramid_shape(n):
    lines = right_aligned_pyramid(n)
    assert len(lines) == n
    for row, line in enumerate(lines, start=1):
        assert len(line) == n
        assert line.count("*") == row
        assert line.endswith("*" * row)


@pytest.mark.parametrize("n", [1, 3, 6])
def test_inverted_pyramid_mirrors_right_aligned_pyramid(n):
    expected = [line.lstrip() for line in reversed(right_aligned_pyramid(n))]
    assert inverted_pyramid(n) == expected


@pytest.mark.parametrize("n", [1, 4, 7])
def test_floyds_triangle_counts_up(n):
    lines = floyds_triangle(n)
    numbers = [int(token) for line in lines for token in line.split()]
    assert numbers == list(range(1, len(numbers) + 1))
    assert [len(line.split()) for line in lines] == list(range(1, n + 1))
    assert all(line.endswith(" ") for line in lines)


@pytest.mark.parametrize("n", [2, 5])
def test_half_pyramid_rows_repeat_row_number(n):
    for row, line in enumerate(half_pyramid_numbers(n), start=1):
        assert line.split() == [str(row)] * row


def test_hollow_rectangle_single_column_is_all_stars():
    assert hollow_rectangle(3, 1) == ["*"] * 3


@pytest.mark.parametrize(
    "build",
    [right_aligned_pyramid, floyds_triangle, half_pyramid_numbers, inverted_pyramid],
)
@pytest.mark.parametrize("n", [0, -3])
def test_non_positive_height_gives_no_lines(build, n):
    assert build(n) == []


def test_rectangles_with_no_rows_are_empty():
    assert filled_rectangle(0, 5) == []
    assert hollow_rectangle(0, 5) == []