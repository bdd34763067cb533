"""Coordinate arithmetic on a letter grid: neighbours, bounds, letter lookup."""

from __future__ import annotations

from typing import Optional

from models import Coord, Direction, Grid


def grid_shape(grid: Grid) -> tuple[int, int]:
    """(rows, cols) of a rectangular grid; (0, 0) when it has no rows."""
    if not grid:
        return 0, 0
    return len(grid), len(grid[0])


def in_bounds(grid: Grid, coord: Coord) -> bool:
    """True iff 0 <= row < rows and 0 <= col < width of row 0."""
    rows, cols = grid_shape(grid)
    row, col = coord
    return 0 <= row < rows and 0 <= col < cols


def find_letter_positions(grid: Grid, letter: str) -> list[Coord]:
    """Scan T→B, L→R and return every cell equal to *letter*, ignoring case."""
    target = letter.upper()
    return [
        Coord(r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell.upper() == target
    ]


def neighbors(coord: Coord) -> tuple[Optional[Coord], ...]:
    """The 8 neighbours of *coord* in Direction order.

    A neighbour is ``None`` when its row or column would be negative. Grid
    extents are not checked here; pass the result through ``in_bounds``.
    A coordinate that is itself negative has no neighbours at all.
    """
    row, col = coord
    if row < 0 or col < 0:
        return (None,) * len(Direction)

    result: list[Optional[Coord]] = []
    for d in Direction:
        nr, nc = row + d.dy, col + d.dx
        result.append(Coord(nr, nc) if nr >= 0 and nc >= 0 else None)
    return tuple(result)


def in_bounds_neighbors(grid: Grid, coord: Coord) -> list[Coord]:
    """Neighbours of *coord* that exist on *grid*, in Direction order."""
    return [n for n in neighbors(coord) if n is not None and in_bounds(grid, n)]
