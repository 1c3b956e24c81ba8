"""Greedy answers to grouping, ordering and digit problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import cmp_to_key


def group_the_people(group_sizes: Sequence[int]) -> list[list[int]]:
    """Split people into groups whose size equals each member's required size.

    People left over once a size's full groups are formed are dropped.
    """
    buckets: dict[int, list[int]] = {}
    for person, size in enumerate(group_sizes):
        if size < 1:
            raise ValueError(f"group size must be at least 1, got {size}")
        buckets.setdefault(size, []).append(person)
    groups: list[list[int]] = []
    for size, people in buckets.items():
        full = len(people) // size * size
        groups.extend(people[i : i + size] for i in range(0, full, size))
    return groups


def _concat_order(a: str, b: str) -> int:
    if a + b > b + a:
        return -1
    if a + b < b + a:
        return 1
    return 0


def largest_number(nums: Iterable[int]) -> str:
    """Arrange the numbers so that their concatenation is as large as possible."""
    parts = sorted(map(str, nums), key=cmp_to_key(_concat_order))
    if not parts:
        raise ValueError("need at least one number")
    result = "".join(parts)
    return "0" if result[0] == "0" else result


def _is_monotone(n: int) -> bool:
    digits = str(n)
    return all(a <= b for a, b in zip(digits, digits[1:]))


def monotone_increasing_digits_brute(n: int) -> int:
    """Largest number <= n with non-decreasing digits, by counting down."""
    if n < 0:
        raise ValueError("n must not be negative")
    return next((i for i in range(n, 0, -1) if _is_monotone(i)), 0)


def monotone_increasing_digits(n: int) -> int:
    """Largest number <= n with non-decreasing digits."""
    if n < 0:
        raise ValueError("n must not be negative")
    digits = list(str(n))
    mark = len(digits)
    for i in range(len(digits) - 1, 0, -1):
        if digits[i - 1] > digits[i]:
            mark = i
            digits[i - 1] = chr(ord(digits[i - 1]) - 1)
    digits[mark:] = "9" * (len(digits) - mark)
    return int("".join(digits))