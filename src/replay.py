"""Rebuild the partial search state from a prefix of the trace."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from models import Coord, Direction, EventKind, TraceEvent


@dataclass
class ReplayState:
    """Search state after applying events one at a time.

    ``tentative`` holds the path being checked by the current direction
    attempt; ``found`` holds the final path of every word found so far.
    """

    step: int = 0
    found: dict[str, tuple[Coord, ...]] = field(default_factory=dict)
    tentative: dict[str, list[Coord]] = field(default_factory=dict)
    current_word: Optional[str] = None
    current_start: Optional[Coord] = None
    current_direction: Optional[Direction] = None

    def apply(self, event: TraceEvent) -> None:
        kind = event.kind
        word = event.word

        if kind == EventKind.START_WORD:
            self.current_word = word
        elif kind == EventKind.START_AT:
            self.current_start = event.coord
            self.current_direction = None
            self.tentative[word] = []
        elif kind == EventKind.TRY_DIRECTION:
            self.current_direction = event.direction
            self.tentative[word] = []
        elif kind == EventKind.VISIT:
            self.tentative.setdefault(word, []).append(event.coord)
        elif kind == EventKind.MISMATCH:
            self.tentative.pop(word, None)
        elif kind == EventKind.FOUND:
            self.found[word] = event.path
            self.tentative.pop(word, None)
        elif kind == EventKind.END_WORD:
            self.tentative.pop(word, None)
            self.current_word = None
            self.current_start = None
            self.current_direction = None
        else:
            raise ValueError(f"Unknown trace event kind: {kind!r}")

        self.step += 1

    def apply_all(self, events: Sequence[TraceEvent]) -> None:
        for event in events:
            self.apply(event)


def clamp_cursor(events: Sequence[TraceEvent], cursor: int) -> int:
    return max(0, min(cursor, len(events)))


def replay(events: Sequence[TraceEvent], cursor: int) -> ReplayState:
    """Apply ``events[0:cursor]`` to a fresh state. *cursor* is clamped."""
    state = ReplayState()
    state.apply_all(events[:clamp_cursor(events, cursor)])
    return state


def found_words(events: Sequence[TraceEvent], cursor: int) -> set[str]:
    return set(replay(events, cursor).found)
