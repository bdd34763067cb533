"""Render a word search to a printable PDF using ReportLab.

Page 1 is the puzzle: title banner, letter grid, and the word list in
columns below the grid. Page 2 is the solution: the same grid with every
found path filled in its word colour, and the word list marked found or
not found.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.platypus import Paragraph

from models import Coord, Puzzle, TraceEvent
from palette import color_map_for_words, hex_to_rgb
from replay import replay

PAGE_W, PAGE_H = letter  # 612 x 792
MARGIN = 36
GRID_GAP = 12  # banner to grid
WORD_ZONE_MIN = 32  # gap plus one line of words under the grid


@dataclass
class LayoutParams:
    """All computed layout measurements."""

    page_w: float = PAGE_W
    page_h: float = PAGE_H
    margin: float = MARGIN
    usable_w: float = PAGE_W - 2 * MARGIN
    usable_h: float = PAGE_H - 2 * MARGIN

    # Grid
    rows: int = 10
    cols: int = 10
    cell_size: float = 28.0
    grid_w: float = 0.0
    grid_h: float = 0.0
    grid_x: float = 0.0
    grid_y: float = 0.0  # top of grid in page coords

    # Title banner
    banner_h: float = 28.0
    banner_y: float = 0.0

    # Word list below the grid
    word_font_size: float = 11.0
    word_leading: float = 14.0
    word_zone_y: float = 0.0
    word_cols: int = 3
    word_gutter: float = 12.0
    word_col_w: float = 0.0

    title: str = "WORD SEARCH"


def render_pdf(
    puzzle: Puzzle,
    events: Sequence[TraceEvent],
    title: str,
    output_path: str,
    colors: dict[str, str] | None = None,
) -> None:
    """Compute layout, adaptive fit, draw page 1 (puzzle) + page 2 (solution)."""
    from reportlab.pdfgen.canvas import Canvas

    if colors is None:
        colors = color_map_for_words(list(puzzle.words))
    found = replay(events, len(events)).found

    layout = _compute_layout(puzzle, title)
    layout = _adaptive_fit(puzzle, layout)

    c = Canvas(output_path, pagesize=letter)

    # --- Page 1: Puzzle ---
    _draw_title_banner(c, layout)
    _draw_grid(c, puzzle, layout, fills={})
    _draw_word_zone(c, puzzle, layout, found=None)
    c.showPage()

    # --- Page 2: Solution ---
    solution = replace(layout, title="SOLUTION")
    fills = {
        coord: colors[word]
        for word, path in found.items()
        if word in colors
        for coord in path
    }
    _draw_title_banner(c, solution)
    _draw_grid(c, puzzle, solution, fills=fills)
    _draw_word_zone(c, puzzle, solution, found=found)
    c.showPage()

    c.save()


def _compute_layout(puzzle: Puzzle, title: str) -> LayoutParams:
    """Calculate all positions and sizes."""
    lp = LayoutParams(rows=puzzle.rows, cols=puzzle.cols, title=title)

    longest = max(puzzle.rows, puzzle.cols)
    if longest <= 10:
        lp.cell_size = 36.0
    elif longest <= 15:
        lp.cell_size = 28.0
    elif longest <= 20:
        lp.cell_size = 24.0
    else:
        lp.cell_size = min(20.0, lp.usable_w / puzzle.cols)

    # Tall grids: keep the bottom edge and one word line above the margin
    grid_top = lp.page_h - lp.margin - lp.banner_h - GRID_GAP
    max_h = grid_top - lp.margin - WORD_ZONE_MIN
    lp.cell_size = min(lp.cell_size, max_h / puzzle.rows)

    lp.word_cols = 3 if len(puzzle.words) < 30 else 4

    _recompute_positions(lp)
    return lp


def _recompute_positions(lp: LayoutParams) -> None:
    """(Re)calculate derived positions from current params."""
    lp.grid_w = lp.cell_size * lp.cols
    lp.grid_h = lp.cell_size * lp.rows

    lp.banner_y = lp.page_h - lp.margin - lp.banner_h

    # Grid: centered horizontally, starts below banner + small gap
    lp.grid_x = (lp.page_w - lp.grid_w) / 2
    lp.grid_y = lp.banner_y - GRID_GAP

    lp.word_zone_y = lp.grid_y - lp.grid_h - 18

    total_gutter = lp.word_gutter * (lp.word_cols - 1)
    lp.word_col_w = (lp.usable_w - total_gutter) / lp.word_cols


def _adaptive_fit(puzzle: Puzzle, layout: LayoutParams) -> LayoutParams:
    """Step through adjustments until the word list fits below the grid."""
    for _ in range(24):
        if _content_fits(puzzle, layout):
            return layout

        # Step 1: reduce font
        if layout.word_font_size > 8.0:
            layout.word_font_size -= 0.5
            layout.word_leading = layout.word_font_size + 3
            continue

        # Step 2: add word column
        if layout.word_cols < 5:
            layout.word_cols += 1
            _recompute_positions(layout)
            continue

        # Step 3: reduce cell size
        if layout.cell_size > 14:
            layout.cell_size -= 1
            _recompute_positions(layout)
            continue

        break

    return layout


def _content_fits(puzzle: Puzzle, layout: LayoutParams) -> bool:
    per_col = -(-len(puzzle.words) // layout.word_cols)
    needed = per_col * layout.word_leading
    available = layout.word_zone_y - layout.margin
    return needed <= available


def _word_style(layout: LayoutParams) -> ParagraphStyle:
    return ParagraphStyle(
        "WordStyle",
        fontName="Helvetica",
        fontSize=layout.word_font_size,
        leading=layout.word_leading,
    )


def _word_markup(word: str, found: dict[str, tuple[Coord, ...]] | None) -> str:
    """Plain word on the puzzle page; bold if found, struck out if not."""
    text = escape(word)
    if found is None:
        return text
    if word in found:
        return f"<b>{text}</b>"
    return f"<strike>{text}</strike>"


# ─── Drawing functions ──────────────────────────────────────────────────────


def _draw_title_banner(c, layout: LayoutParams) -> None:
    """Black rect + white centered bold text."""
    x = layout.margin
    y = layout.banner_y
    w = layout.usable_w
    h = layout.banner_h

    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y, w, h, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 16)
    text_w = stringWidth(layout.title, "Helvetica-Bold", 16)
    tx = x + (w - text_w) / 2
    ty = y + (h - 16) / 2 + 2
    c.drawString(tx, ty, layout.title)


def _draw_grid(c, puzzle: Puzzle, layout: LayoutParams, fills: dict[Coord, str]) -> None:
    """Draw the letter grid, filling cells listed in *fills*."""
    x0 = layout.grid_x
    y0 = layout.grid_y
    cs = layout.cell_size
    font_size = cs * 0.5

    for r in range(layout.rows):
        for col in range(layout.cols):
            cx = x0 + col * cs
            cy = y0 - (r + 1) * cs

            fill = fills.get(Coord(r, col))
            if fill:
                c.setFillColorRGB(*hex_to_rgb(fill))
            else:
                c.setFillColorRGB(1, 1, 1)
            c.setStrokeColorRGB(0.6, 0.6, 0.6)
            c.setLineWidth(0.5)
            c.rect(cx, cy, cs, cs, fill=1, stroke=1)

            ch = puzzle.grid[r][col]
            c.setFillColorRGB(0, 0, 0)
            c.setFont("Helvetica", font_size)
            lw = stringWidth(ch, "Helvetica", font_size)
            c.drawString(cx + (cs - lw) / 2, cy + cs / 2 - font_size * 0.35, ch)

    # Outer border
    c.setStrokeColorRGB(0, 0, 0)
    c.setLineWidth(1.5)
    c.rect(x0, y0 - layout.grid_h, layout.grid_w, layout.grid_h, fill=0, stroke=1)


def _draw_word_zone(
    c,
    puzzle: Puzzle,
    layout: LayoutParams,
    found: dict[str, tuple[Coord, ...]] | None,
) -> None:
    """Words flow top-to-bottom through evenly filled columns."""
    style = _word_style(layout)
    per_col = max(1, -(-len(puzzle.words) // layout.word_cols))

    for i, word in enumerate(puzzle.words):
        col_idx, row_idx = divmod(i, per_col)
        col_x = layout.margin + col_idx * (layout.word_col_w + layout.word_gutter)
        top = layout.word_zone_y - row_idx * layout.word_leading

        p = Paragraph(_word_markup(word, found), style)
        _, h = p.wrap(layout.word_col_w, 10000)
        p.drawOn(c, col_x, top - h)
