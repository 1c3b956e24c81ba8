"""Rectangle, circle and projection queries on integer grids."""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple


class _Update(NamedTuple):
    row1: int
    row2: int
    col1: int
    col2: int
    value: int

    def covers(self, row: int, col: int) -> bool:
        return self.row1 <= row <= self.row2 and self.col1 <= col <= self.col2


class SubrectangleQueries:
    """A rectangle whose sub-rectangles can be overwritten and whose cells can be read.

    Updates are recorded rather than applied; a read takes the newest update
    covering the cell, or the original value.
    """

    def __init__(self, rectangle: Sequence[Sequence[int]]) -> None:
        self._rectangle = [list(row) for row in rectangle]
        self._updates: list[_Update] = []

    def update_subrectangle(
        self, row1: int, col1: int, row2: int, col2: int, new_value: int
    ) -> None:
        """Set every cell from (row1, col1) to (row2, col2) inclusive to ``new_value``."""
        self._updates.append(_Update(row1, row2, col1, col2, new_value))

    def get_value(self, row: int, col: int) -> int:
        """Return the current value of cell (row, col)."""
        for update in reversed(self._updates):
            if update.covers(row, col):
                return update.value
        return self._rectangle[row][col]


def count_points(
    points: Sequence[Sequence[int]], queries: Sequence[Sequence[int]]
) -> list[int]:
    """For each circle (x, y, r), count the points inside it or on its edge."""
    return [
        sum((cx - px) ** 2 + (cy - py) ** 2 <= r * r for px, py in points)
        for cx, cy, r in queries
    ]


def projection_area(grid: Sequence[Sequence[int]]) -> int:
    """Total area of the three axis projections of towers stacked on a square grid."""
    n = len(grid)
    top = n * n - sum(height == 0 for row in grid for height in row)
    front = sum(max(row) for row in grid)
    side = sum(max(0, *column) for column in zip(*grid))
    return top + front + side