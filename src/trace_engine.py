"""Brute-force word search that records every step it takes.

For each word the search tries every cell holding the word's first letter
(row-major), and from each of those every direction in ``Direction`` order,
checking letters at increasing distance. The first complete match ends the
search for that word. Everything it does is emitted as a ``TraceEvent``, so
a replay layer can rebuild the partial search state at any step without
searching again.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from grid_adjacency import find_letter_positions, in_bounds
from models import (
    Coord,
    Direction,
    EndWord,
    Found,
    Grid,
    Mismatch,
    StartAt,
    StartWord,
    TraceEvent,
    TryDirection,
    Visit,
)


def trace(grid: Grid, words: Iterable[str]) -> list[TraceEvent]:
    """Run the search for every word and return the full event log."""
    return list(iter_trace(grid, words))


def iter_trace(grid: Grid, words: Iterable[str]) -> Iterator[TraceEvent]:
    """Lazy form of ``trace``: yields the same events in the same order."""
    for word in words:
        if not word:
            continue
        yield StartWord(word)
        yield from _search_word(grid, word)
        yield EndWord(word)


def _search_word(grid: Grid, word: str) -> Iterator[TraceEvent]:
    """Events between start-word and end-word; stops at the first match."""
    target = word.upper()

    for start in find_letter_positions(grid, target[0]):
        yield StartAt(word, start)
        for direction in Direction:
            yield TryDirection(word, start, direction)
            path: list[Coord] = []
            yield from _walk(grid, word, target, start, direction, path)
            if len(path) == len(target):
                yield Found(word, tuple(path))
                return


def _walk(
    grid: Grid,
    word: str,
    target: str,
    start: Coord,
    direction: Direction,
    path: list[Coord],
) -> Iterator[TraceEvent]:
    """Check letters along one direction, appending matches to *path*.

    Stops at the first off-grid cell or wrong letter; *path* is then shorter
    than the word.
    """
    for i, letter in enumerate(target):
        coord = direction.step(start, i)
        if not in_bounds(grid, coord):
            yield Mismatch(word, coord, i)
            return
        yield Visit(word, coord, i)
        if grid[coord.row][coord.col].upper() != letter:
            yield Mismatch(word, coord, i)
            return
        path.append(coord)
