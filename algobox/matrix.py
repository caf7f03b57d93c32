"""Grid problems: rotation, obstacle paths and connected regions."""

from __future__ import annotations

from collections.abc import Sequence


def _square(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


def rotate_clockwise(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the square matrix rotated a quarter turn clockwise."""
    rows = _square(matrix)
    return [list(column) for column in zip(*rows[::-1])]


def rotate_anticlockwise(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the square matrix rotated a quarter turn anticlockwise."""
    rows = _square(matrix)
    return [list(column) for column in zip(*rows)][::-1]


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Count right/down paths from the top-left to the bottom-right corner.

    Cells holding 1 are obstacles.
    """
    if not grid or not grid[0]:
        return 0
    paths = [0] * len(grid[0])
    paths[0] = 1
    for row in grid:
        for column, cell in enumerate(row):
            if cell == 1:
                paths[column] = 0
            elif column:
                paths[column] += paths[column - 1]
    return paths[-1]


def count_regions(grid: Sequence[Sequence[int]]) -> int:
    """Count the 4-connected regions of cells holding 1."""
    land = {
        (r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == 1
    }
    regions = 0
    while land:
        regions += 1
        stack = [land.pop()]
        while stack:
            r, c = stack.pop()
            for neighbour in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
                if neighbour in land:
                    land.remove(neighbour)
                    stack.append(neighbour)
    return regions