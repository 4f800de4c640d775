"""Grid and matrix problems: paths, squares, falling sums, triangles and point tables."""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import cache

_INT32_MAX = 2**31 - 1

Grid = Sequence[Sequence[int]]


def _require_grid(rows: Sequence[Sequence[object]], name: str) -> None:
    if not rows or not rows[0]:
        raise ValueError(f"{name} must have at least one non-empty row")


def cherry_pickup(grid: Grid) -> int:
    """Return the most cherries two walkers collect going right/down from the top-left corner.

    Cells hold 1 (cherry), 0 (empty) or -1 (thorn). A cell shared by both walkers
    counts once; when no path gets through, the result is 0.
    """
    n = len(grid)

    @cache
    def collect(r1: int, c1: int, r2: int, c2: int) -> float:
        if max(r1, c1, r2, c2) >= n or grid[r1][c1] == -1 or grid[r2][c2] == -1:
            return -math.inf
        if r1 == n - 1 and c1 == n - 1:
            return grid[r1][c1]
        if r2 == n - 1 and c2 == n - 1:
            return grid[r2][c2]
        if (r1, c1) == (r2, c2):
            here = grid[r1][c1]
        else:
            here = grid[r1][c1] + grid[r2][c2]
        return here + max(
            collect(r1 + 1, c1, r2 + 1, c2),
            collect(r1 + 1, c1, r2, c2 + 1),
            collect(r1, c1 + 1, r2 + 1, c2),
            collect(r1, c1 + 1, r2, c2 + 1),
        )

    return max(0, collect(0, 0, 0, 0))


def count_squares(matrix: Grid) -> int:
    """Return the number of square submatrices made entirely of ones."""
    _require_grid(matrix, "matrix")
    width = len(matrix[0])
    above = [0] * width
    total = 0
    for i, row in enumerate(matrix):
        current = [0] * width
        for j in range(width):
            if row[j] != 1:
                continue
            if i == 0 or j == 0:
                current[j] = 1
            else:
                current[j] = 1 + min(above[j], current[j - 1], above[j - 1])
            total += current[j]
        above = current
    return total


def unique_paths(m: int, n: int) -> int:
    """Return the number of right/down paths across an m by n grid."""
    if m < 1 or n < 1:
        raise ValueError(f"grid dimensions must be positive, got {m}x{n}")
    row = [1] * n
    for _ in range(m - 1):
        for j in range(1, n):
            row[j] += row[j - 1]
    return row[-1]


def maximal_square(matrix: Sequence[Sequence[str]]) -> int:
    """Return the area of the largest square of "1" cells in a character matrix."""
    _require_grid(matrix, "matrix")
    width = len(matrix[0])
    above = [0] * width
    max_side = 0
    for row in matrix:
        current = [0] * width
        for j in range(width):
            if row[j] != "1":
                continue
            left = current[j - 1] if j > 0 else 0
            diagonal = above[j - 1] if j > 0 else 0
            current[j] = 1 + min(left, diagonal, above[j])
            max_side = max(max_side, current[j])
        above = current
    return max_side * max_side


def max_points(points: Grid) -> int:
    """Return the best score picking one cell per row, losing |j - k| between columns.

    The walk starts at column 0, so the first row's pick is also charged its
    distance from column 0.
    """
    _require_grid(points, "points")
    width = len(points[0])
    below = [0] * width
    for row in reversed(points):
        below = [
            max(row[k] - abs(j - k) + below[k] for k in range(width))
            for j in range(width)
        ]
    return below[0]


def min_falling_path_sum(matrix: Grid) -> int:
    """Return the smallest sum of a path falling one row at a time, diagonally or straight."""
    _require_grid(matrix, "matrix")
    rows = len(matrix)
    width = len(matrix[0])
    below = [matrix[-1][j] for j in range(width)]
    for row in reversed(matrix[:-1]):
        current = []
        for j in range(width):
            options = [below[j]]
            if j > 0:
                options.append(below[j - 1])
            if j < rows - 1:
                options.append(below[j + 1])
            current.append(row[j] + min(options))
        below = current
    return min(below)


def minimum_total(triangle: Grid) -> int:
    """Return the smallest top-to-bottom path sum of a triangle, capped at 2**31 - 1."""
    _require_grid(triangle, "triangle")
    row = [triangle[0][0]]
    for i, values in enumerate(triangle[1:], start=1):
        row = (
            [row[0] + values[0]]
            + [min(row[j - 1], row[j]) + values[j] for j in range(1, i)]
            + [row[-1] + values[i]]
        )
    return min(*row, _INT32_MAX)


def minimum_total_bottom_up(triangle: Grid) -> int:
    """Return the smallest top-to-bottom path sum of a triangle, computed from the base up."""
    n = len(triangle)
    if n == 0:
        raise ValueError("triangle must not be empty")
    base = triangle[-1]
    below = [base[j] for j in range(n)]
    for i in range(n - 2, -1, -1):
        values = triangle[i]
        below = [values[j] + min(below[j], below[j + 1]) for j in range(i + 1)]
    return below[0]


def min_path_sum(grid: Grid) -> int:
    """Return the smallest right/down path sum from the top-left to the bottom-right cell."""
    _require_grid(grid, "grid")
    width = len(grid[0])
    above: list[int] | None = None
    for row in grid:
        current: list[int] = []
        for j in range(width):
            options = []
            if above is not None:
                options.append(above[j])
            if j > 0:
                options.append(current[j - 1])
            current.append(row[j] + (min(options) if options else 0))
        above = current
    assert above is not None
    return above[-1]


def ninja_training(points: Grid) -> int:
    """Return the most points over the days, never doing the same task two days running."""
    _require_grid(points, "points")
    tasks = len(points[0])
    first = points[0]
    row = [
        max([0, *(first[p] for p in range(tasks) if p != last)])
        for last in range(tasks + 1)
    ]
    for day in points[1:]:
        row = [
            max([0, *(row[p] + day[p] for p in range(tasks) if p != last)])
            for last in range(tasks + 1)
        ]
    return row[tasks]