"""Maximum of every fixed-size window over a sequence."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def _check_window(k: int) -> None:
    if k < 1:
        raise ValueError(f"window size must be at least 1, got {k}")


def max_sliding_window_brute(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of each window of ``k`` items by scanning every window."""
    _check_window(k)
    return [max(nums[i : i + k]) for i in range(len(nums) - k + 1)]


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of each window of ``k`` items using a monotonic deque.

    A window wider than the sequence yields the maximum of the whole sequence.
    """
    _check_window(k)
    if k > len(nums):
        if not nums:
            raise ValueError("cannot take the maximum of an empty sequence")
        return [max(nums)]
    window: deque[int] = deque()
    result: list[int] = []
    for j, value in enumerate(nums):
        while window and window[-1] < value:
            window.pop()
        window.append(value)
        start = j - k + 1
        if start >= 0:
            result.append(window[0])
            if window[0] == nums[start]:
                window.popleft()
    return result