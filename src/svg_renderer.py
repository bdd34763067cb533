"""Render a replayed search step as standalone SVG."""

from __future__ import annotations

from typing import Sequence
from xml.sax.saxutils import escape

from cell_paint import CellPaint, compute_cell_paint
from grid_adjacency import grid_shape
from models import Coord, Grid, Puzzle, TraceEvent

STRIPE_WIDTH = 4


def render_svg(
    grid: Grid,
    paint: dict[Coord, CellPaint],
    output_path: str,
    cell_size: float | None = None,
) -> None:
    """Write the letter grid with per-cell paint to an SVG file."""
    rows, cols = grid_shape(grid)
    if cell_size is None:
        cell_size = _default_cell_size(max(rows, cols))

    letter_font = cell_size * 0.5
    width = cell_size * cols
    height = cell_size * rows

    parts: list[str] = []
    parts.append(
        f'<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">\n'
    )

    patterns = _stripe_patterns(paint)
    if patterns:
        parts.append('  <defs>\n')
        for colors, pattern_id in patterns.items():
            parts.append(_pattern_def(pattern_id, colors))
        parts.append('  </defs>\n')

    for r in range(rows):
        for c in range(cols):
            x = c * cell_size
            y = r * cell_size
            cell = paint.get(Coord(r, c), CellPaint())
            fill = cell.fill or "white"

            parts.append(
                f'  <rect x="{x}" y="{y}" width="{cell_size}" '
                f'height="{cell_size}" fill="{fill}" '
                f'stroke="#999999" stroke-width="0.5"/>\n'
            )
            if cell.stripes:
                parts.append(
                    f'  <rect x="{x}" y="{y}" width="{cell_size}" '
                    f'height="{cell_size}" fill="url(#{patterns[cell.stripes]})" '
                    f'fill-opacity="0.7"/>\n'
                )

            cx = x + cell_size / 2
            cy = y + cell_size / 2
            parts.append(
                f'  <text x="{cx}" y="{cy}" '
                f'text-anchor="middle" dominant-baseline="central" '
                f'font-family="Helvetica, Arial, sans-serif" '
                f'font-size="{letter_font}" '
                f'fill="black">{escape(grid[r][c])}</text>\n'
            )

    # Outer border
    parts.append(
        f'  <rect x="0" y="0" width="{width}" height="{height}" '
        f'fill="none" stroke="black" stroke-width="1.5"/>\n'
    )
    parts.append('</svg>\n')

    with open(output_path, 'w', encoding='utf-8') as f:
        f.writelines(parts)


def render_frame_svg(
    puzzle: Puzzle,
    events: Sequence[TraceEvent],
    step: int,
    colors: dict[str, str],
    output_path: str,
    cell_size: float | None = None,
) -> None:
    """Render the search state after the first *step* events."""
    paint = compute_cell_paint(events, step, colors, puzzle.grid)
    render_svg(puzzle.grid, paint, output_path, cell_size=cell_size)


def render_solution_svg(
    puzzle: Puzzle,
    events: Sequence[TraceEvent],
    colors: dict[str, str],
    output_path: str,
) -> None:
    """Render the final state: every found word painted in its colour."""
    render_frame_svg(puzzle, events, len(events), colors, output_path)


def _stripe_patterns(paint: dict[Coord, CellPaint]) -> dict[tuple[str, ...], str]:
    """One pattern id per distinct stripe colour combination, in first-seen order."""
    patterns: dict[tuple[str, ...], str] = {}
    for cell in paint.values():
        if cell.stripes and cell.stripes not in patterns:
            patterns[cell.stripes] = f"stripes-{len(patterns)}"
    return patterns


def _pattern_def(pattern_id: str, colors: tuple[str, ...]) -> str:
    """Diagonal bands, one STRIPE_WIDTH band per colour."""
    span = STRIPE_WIDTH * len(colors)
    bands = "".join(
        f'<rect x="{i * STRIPE_WIDTH}" y="0" width="{STRIPE_WIDTH}" '
        f'height="{span}" fill="{color}"/>'
        for i, color in enumerate(colors)
    )
    return (
        f'    <pattern id="{pattern_id}" patternUnits="userSpaceOnUse" '
        f'width="{span}" height="{span}" patternTransform="rotate(45)">'
        f'{bands}</pattern>\n'
    )


def _default_cell_size(longest_side: int) -> float:
    if longest_side <= 10:
        return 40.0
    elif longest_side <= 15:
        return 32.0
    elif longest_side <= 20:
        return 26.0
    else:
        return 20.0
