"""Playback cursor over a trace: start/pause/resume at a chosen speed.

The caller owns the clock. ``tick`` is fed elapsed milliseconds and returns
the indices of the events revealed by that tick, so a consumer applying them
to a ``ReplayState`` never skips one.
"""

from __future__ import annotations

from dataclasses import dataclass, field

SPEED_PRESETS: dict[str, int] = {
    "slow": 800,
    "medium": 400,
    "fast": 50,
}
MIN_INTERVAL_MS = 50


@dataclass
class Playback:
    total_steps: int
    speed_ms: int = SPEED_PRESETS["medium"]
    step: int = 0
    running: bool = False
    _pending_ms: float = field(default=0.0, init=False, repr=False)

    @property
    def interval_ms(self) -> int:
        return max(MIN_INTERVAL_MS, self.speed_ms)

    @property
    def finished(self) -> bool:
        return self.step >= self.total_steps

    def start(self) -> None:
        """Rewind to step 0 and run."""
        self.step = 0
        self._pending_ms = 0.0
        self.running = self.total_steps > 0

    def pause(self) -> None:
        self.running = False

    def resume(self) -> None:
        if not self.finished:
            self.running = True

    def set_speed(self, speed_ms: int) -> None:
        """Switch speed; a partly elapsed interval is dropped, not re-timed."""
        self.speed_ms = speed_ms
        self._pending_ms = 0.0

    def seek(self, step: int) -> range:
        """Jump to *step*, returning the indices passed over on a forward seek.

        A backward seek returns an empty range; state built from earlier
        events must then be rebuilt with ``replay.replay``.
        """
        old = self.step
        self.step = max(0, min(step, self.total_steps))
        self._pending_ms = 0.0
        if self.finished:
            self.running = False
        return range(old, max(old, self.step))

    def advance(self, n: int = 1) -> range:
        """Move forward *n* steps regardless of the clock."""
        old = self.step
        self.step = min(self.step + max(0, n), self.total_steps)
        if self.finished:
            self.running = False
        return range(old, self.step)

    def tick(self, elapsed_ms: float) -> range:
        """Advance one step per whole interval in *elapsed_ms* while running."""
        if not self.running:
            return range(self.step, self.step)
        self._pending_ms += elapsed_ms
        n = int(self._pending_ms // self.interval_ms)
        self._pending_ms -= n * self.interval_ms
        return self.advance(n)
