"""Word and string puzzles."""


def abbreviate(word: str) -> str:
    """Shorten words longer than ten letters to first letter, inner length, last letter."""
    if len(word) <= 10:
        return word
    return f"{word[0]}{len(word) - 2}{word[-1]}"


def shuffle_distinct(s: str) -> str | None:
    """Rearrange ``s`` so no position keeps its original character.

    Positions are grouped by character, largest group first, and characters
    are swapped between groups. Returns ``None`` when the result still has a
    character in its original place.
    """
    chars = list(s)
    groups: dict[str, list[int]] = {}
    for index, char in enumerate(s):
        groups.setdefault(char, []).append(index)
    ordered = sorted(groups.values(), key=len, reverse=True)

    donor, receiver = 1, 0
    donor_offset = 0
    while donor < len(ordered) and receiver < len(ordered):
        receiver_offset = 0
        while receiver_offset < len(ordered[receiver]) and donor < len(ordered):
            a = ordered[donor][donor_offset]
            b = ordered[receiver][receiver_offset]
            chars[a], chars[b] = chars[b], chars[a]
            receiver_offset += 1
            donor_offset += 1
            if donor_offset == len(ordered[donor]):
                donor += 1
                donor_offset = 0
        receiver += 1

    if any(new == old for new, old in zip(chars, s)):
        return None
    return "".join(chars)


def _binary_value(number: int) -> int:
    if number < 0:
        raise ValueError(f"expected a non-negative number, got {number}")
    digits = str(number)
    if set(digits) - {"0", "1"}:
        raise ValueError(f"{number} is not written with binary digits")
    return int(digits, 2)


def add_binary(a: int, b: int) -> int:
    """Add two numbers whose decimal digits are binary digits, e.g. ``101 + 11 -> 1000``."""
    return int(format(_binary_value(a) + _binary_value(b), "b"))