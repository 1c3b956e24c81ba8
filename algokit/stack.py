"""Stack-based answers to digit removal and interval merging."""

from __future__ import annotations

from collections.abc import Sequence


def remove_k_digits(num: str, k: int) -> str:
    """Remove ``k`` digits from ``num`` to leave the smallest possible number."""
    if not 0 <= k <= len(num):
        raise ValueError(f"cannot remove {k} digits from a {len(num)}-digit number")
    if k == len(num):
        return "0"
    stack: list[str] = []
    for digit in num:
        while k and stack and stack[-1] > digit:
            stack.pop()
            k -= 1
        stack.append(digit)
    if k:
        del stack[-k:]
    return "".join(stack).lstrip("0") or "0"


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching intervals.

    The merged intervals come back ordered by descending start.
    """
    if len(intervals) <= 1:
        return [list(interval) for interval in intervals]
    ordered = sorted(list(interval) for interval in intervals)
    stack: list[list[int]] = [ordered[0]]
    for start, end in ordered[1:]:
        top = stack[-1]
        if top[1] < start:
            stack.append([start, end])
        elif top[1] < end:
            stack[-1] = [top[0], end]
    return stack[::-1]