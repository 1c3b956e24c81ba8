"""Heap-driven simulations."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def last_stone_weight(stones: Sequence[int]) -> int:
    """Smash the two heaviest stones together until one is left; return its weight."""
    if not stones:
        raise ValueError("need at least one stone")
    if len(stones) == 1:
        return stones[0]
    heap = [-stone for stone in stones]
    heapq.heapify(heap)
    while len(heap) > 1:
        heaviest = -heapq.heappop(heap)
        second = -heapq.heappop(heap)
        heapq.heappush(heap, -abs(heaviest - second))
    return -heap[0]