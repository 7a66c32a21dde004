import pytest

from dsakit.text import abbreviate, add_binary, shuffle_distinct


def test_abbreviate_long_word():
    assert abbreviate("localization") == "l10n"


@pytest.mark.parametrize("word", ["word", "a", "", "abcdefghij"])
def test_abbreviate_keeps_short_words(word):
    assert abbreviate(word) == word


@pytest.mark.parametrize("word", ["abcdefghijk", "pneumonoultramicroscopic"])
def test_abbreviate_shape(word):
    short = abbreviate(word)
    assert short[0] == word[0]
    assert short[-1] == word[-1]
    assert int(short[1:-1]) == len(word) - 2


@pytest.mark.parametrize("s", ["ab", "abc", "start", "jelly", "abcabc", "aabbcc", "mississippi"])
def test_shuffle_distinct_moves_every_character(s):
    result = shuffle_distinct(s)
    assert sorted(result) == sorted(s)
    assert all(new != old for new, old in zip(result, s))


@pytest.mark.parametrize("s", ["a", "aaa", "aab"])
def test_shuffle_distinct_impossible(s):
    assert shuffle_distinct(s) is None


def test_shuffle_distinct_empty_string():
    assert shuffle_distinct("") == ""


def test_add_binary_known_values():
    assert add_binary(1, 1) == 10
    assert add_binary(101, 11) == 1000


@pytest.mark.parametrize("number", [0, 1, 10, 100, 1011])
def test_add_binary_zero_is_identity(number):
    assert add_binary(number, 0) == number
    assert add_binary(0, number) == number


@pytest.mark.parametrize("a, b", [(1, 10), (111, 1), (1010, 110)])
def test_add_binary_commutes(a, b):
    assert add_binary(a, b) == add_binary(b, a)


def test_add_binary_doubling_appends_zero():
    for number in (1, 11, 101):
        assert add_binary(number, number) == number * 10


@pytest.mark.parametrize("a, b", [(12, 1), (1, 2), (-1, 1)])
def test_add_binary_rejects_non_binary(a, b):
    with pytest.raises(ValueError):
        add_binary(a, b)