"""Traversals of two-dimensional grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

_NEIGHBOURS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def shortest_path_binary_matrix(grid: Sequence[Sequence[int]]) -> int:
    """Length in cells of the shortest 8-connected clear path corner to corner, or -1."""
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one cell")
    rows, cols = len(grid), len(grid[0])
    target = (rows - 1, cols - 1)
    if grid[0][0] or grid[target[0]][target[1]]:
        return -1
    seen = {(0, 0)}
    queue = deque([(0, 0, 1)])
    while queue:
        r, c, length = queue.popleft()
        if (r, c) == target:
            return length
        for dr, dc in _NEIGHBOURS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and not grid[nr][nc] and (nr, nc) not in seen:
                seen.add((nr, nc))
                queue.append((nr, nc, length + 1))
    return -1


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of ``matrix`` in clockwise spiral order."""
    if not matrix or not matrix[0]:
        return []
    top, left = 0, 0
    bottom, right = len(matrix) - 1, len(matrix[0]) - 1
    result: list[int] = []
    while top <= bottom and left <= right:
        result.extend(matrix[top][left : right + 1])
        top += 1
        result.extend(matrix[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top > bottom:
            break
        result.extend(matrix[bottom][j] for j in range(right, left - 1, -1))
        bottom -= 1
        if left > right:
            break
        result.extend(matrix[i][left] for i in range(bottom, top - 1, -1))
        left += 1
    return result