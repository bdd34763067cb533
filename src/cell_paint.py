"""Per-cell colours for a replayed search step.

Found words paint their path in the word colour. The path being tried right
now is painted in a lightened word colour, and its in-bounds neighbours get a
pale highlight. Cells claimed by more than one word are striped with every
claimant's colour.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from grid_adjacency import in_bounds_neighbors
from models import Coord, Grid, TraceEvent
from palette import lighten_color
from replay import replay

ADJACENT_FILL = "#eaf4ff"
TENTATIVE_LIGHTEN = 0.6
_FALLBACK_COLOR = "#BDBDBD"


@dataclass(frozen=True)
class CellPaint:
    fill: Optional[str] = None
    stripes: tuple[str, ...] = ()


def compute_cell_paint(
    events: Sequence[TraceEvent],
    cursor: int,
    colors: dict[str, str],
    grid: Grid,
) -> dict[Coord, CellPaint]:
    """Replay ``events[0:cursor]`` and return the paint of every touched cell."""
    state = replay(events, cursor)

    strong: dict[Coord, str] = {}
    strong_words: dict[Coord, list[str]] = {}
    for word, path in state.found.items():
        for coord in path:
            strong[coord] = _color(colors, word)
            _add(strong_words, coord, word)

    light: dict[Coord, str] = {}
    central_words: dict[Coord, list[str]] = {}
    adjacent_words: dict[Coord, list[str]] = {}
    for word, path in state.tentative.items():
        shade = lighten_color(_color(colors, word), TENTATIVE_LIGHTEN)
        for coord in path:
            light[coord] = shade
            _add(central_words, coord, word)
            for n in in_bounds_neighbors(grid, coord):
                _add(adjacent_words, n, word)

    fills: dict[Coord, str] = {}
    stripes: dict[Coord, list[str]] = {}

    for coord, words in adjacent_words.items():
        fills[coord] = ADJACENT_FILL
        if len(words) >= 2:
            stripes[coord] = [_color(colors, w) for w in words]
    for coord, words in central_words.items():
        if len(words) >= 2:
            stripes[coord] = [_color(colors, w) for w in words]
    for coord, words in strong_words.items():
        if len(words) >= 2:
            stripes.setdefault(coord, []).extend(_color(colors, w) for w in words)

    # Strong beats light beats the adjacent highlight.
    fills.update(light)
    fills.update(strong)

    paint: dict[Coord, CellPaint] = {}
    for coord in sorted(fills.keys() | stripes.keys()):
        paint[coord] = CellPaint(
            fill=fills.get(coord),
            stripes=tuple(stripes.get(coord, ())),
        )
    return paint


def _add(index: dict[Coord, list[str]], coord: Coord, word: str) -> None:
    words = index.setdefault(coord, [])
    if word not in words:
        words.append(word)


def _color(colors: dict[str, str], word: str) -> str:
    return colors.get(word, _FALLBACK_COLOR)
