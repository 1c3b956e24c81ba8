"""Small string puzzles: prefixes, differences, Morse code and zigzags."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import zip_longest

_MORSE = (
    ".-", "-...", "-.-.", "-..", ".", "..-.", "--.", "....", "..",
    ".---", "-.-", ".-..", "--", "-.", "---", ".--.", "--.-", ".-.",
    "...", "-", "..-", "...-", ".--", "-..-", "-.--", "--..",
)


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string."""
    prefix: list[str] = []
    for chars in zip(*strs):
        if len(set(chars)) != 1:
            break
        prefix.append(chars[0])
    return "".join(prefix)


def find_the_difference(s: str, t: str) -> str:
    """Return the character that ``t`` holds once more than ``s``."""
    for a, b in zip_longest(sorted(s), sorted(t)):
        if b is None:
            break
        if a != b:
            return b
    raise ValueError("t holds no character beyond those of s")


def _to_morse(word: str) -> str:
    codes = []
    for ch in word:
        if not "a" <= ch <= "z":
            raise ValueError(f"only lowercase letters can be encoded, got {ch!r}")
        codes.append(_MORSE[ord(ch) - ord("a")])
    return "".join(codes)


def unique_morse_representations(words: Iterable[str]) -> int:
    """Count the distinct Morse transformations among ``words``."""
    return len({_to_morse(word) for word in words})


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows <= 1:
        return s
    rows = [[] for _ in range(num_rows)]
    row, step = 0, 1
    for ch in s:
        rows[row].append(ch)
        if row == 0:
            step = 1
        if row == num_rows - 1:
            step = -1
        row += step
    return "".join("".join(chars) for chars in rows)