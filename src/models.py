"""Data models for the word search tracer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, NamedTuple, Sequence

Grid = Sequence[Sequence[str]]


class Coord(NamedTuple):
    """A (row, col) cell position. Components may be negative off-grid."""

    row: int
    col: int


class Direction(Enum):
    """The 8 search directions as (dy, dx). Member order is the search order."""

    N = (-1, 0)
    S = (1, 0)
    E = (0, 1)
    W = (0, -1)
    NW = (-1, -1)
    NE = (-1, 1)
    SW = (1, -1)
    SE = (1, 1)

    @property
    def dy(self) -> int:
        return self.value[0]

    @property
    def dx(self) -> int:
        return self.value[1]

    def step(self, start: Coord, distance: int) -> Coord:
        return Coord(start.row + self.dy * distance, start.col + self.dx * distance)


class EventKind(Enum):
    START_WORD = "start-word"
    START_AT = "start-at"
    TRY_DIRECTION = "try-direction"
    VISIT = "visit"
    MISMATCH = "mismatch"
    FOUND = "found"
    END_WORD = "end-word"


@dataclass(frozen=True)
class TraceEvent:
    """One moment of the search. Subclasses add the payload for their kind."""

    kind: ClassVar[EventKind]

    word: str

    def describe(self) -> str:
        return f"{self.kind.value}({self.word})"

    def as_row(self) -> tuple:
        """(event, word, row, col, index, direction, path) for tabular export."""
        return (self.kind.value, self.word, None, None, None, None, None)


@dataclass(frozen=True)
class StartWord(TraceEvent):
    kind: ClassVar[EventKind] = EventKind.START_WORD


@dataclass(frozen=True)
class EndWord(TraceEvent):
    kind: ClassVar[EventKind] = EventKind.END_WORD


@dataclass(frozen=True)
class StartAt(TraceEvent):
    """A candidate start cell holding the word's first letter."""

    kind: ClassVar[EventKind] = EventKind.START_AT

    coord: Coord

    def describe(self) -> str:
        return f"{self.kind.value}({self.word}, {tuple(self.coord)})"

    def as_row(self) -> tuple:
        return (self.kind.value, self.word, self.coord.row, self.coord.col, None, None, None)


@dataclass(frozen=True)
class TryDirection(TraceEvent):
    kind: ClassVar[EventKind] = EventKind.TRY_DIRECTION

    coord: Coord
    direction: Direction

    def describe(self) -> str:
        return f"{self.kind.value}({self.word}, {tuple(self.coord)}, {self.direction.name})"

    def as_row(self) -> tuple:
        return (
            self.kind.value, self.word, self.coord.row, self.coord.col,
            None, self.direction.name, None,
        )


@dataclass(frozen=True)
class CellEvent(TraceEvent):
    """Base for events that check one cell against ``word[index]``."""

    coord: Coord
    index: int

    def describe(self) -> str:
        return f"{self.kind.value}({self.word}, {tuple(self.coord)}, {self.index})"

    def as_row(self) -> tuple:
        return (
            self.kind.value, self.word, self.coord.row, self.coord.col,
            self.index, None, None,
        )


@dataclass(frozen=True)
class Visit(CellEvent):
    """The cell at ``coord`` is checked against ``word[index]``."""

    kind: ClassVar[EventKind] = EventKind.VISIT


@dataclass(frozen=True)
class Mismatch(CellEvent):
    """The cell failed to match ``word[index]`` or lies off the grid."""

    kind: ClassVar[EventKind] = EventKind.MISMATCH


@dataclass(frozen=True)
class Found(TraceEvent):
    """A complete path, one coordinate per letter of the word."""

    kind: ClassVar[EventKind] = EventKind.FOUND

    path: tuple[Coord, ...]

    def describe(self) -> str:
        return f"{self.kind.value}({self.word}, {format_path(self.path)})"

    def as_row(self) -> tuple:
        return (self.kind.value, self.word, None, None, None, None, format_path(self.path))


def format_path(path: Sequence[Coord]) -> str:
    return " ".join(f"({r},{c})" for r, c in path)


@dataclass(frozen=True)
class Puzzle:
    """A rectangular letter grid and the words to look for in it."""

    grid: tuple[str, ...]
    words: tuple[str, ...]

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0


class WordSearchError(Exception):
    """Fatal error while loading a puzzle or producing output."""
