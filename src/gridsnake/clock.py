# clock.py
from __future__ import annotations
import time
from typing import Callable, Optional

# A clock is any zero-argument callable returning milliseconds from a
# monotonic origin (time.monotonic, pygame.time.get_ticks, ...).
Clock = Callable[[], int]


def monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class ManualClock:
    """Clock that only moves when told to. Handy for scripted runs and tests."""

    def __init__(self, start_ms: int = 0):
        self.now_ms = start_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> int:
        self.now_ms += ms
        return self.now_ms


class TickGate:
    """
    Fixed-interval gate for the render loop: `due(now)` is True at most once
    per `interval_ms`, and the first call after `reset()` always fires.
    """

    def __init__(self, interval_ms: int):
        if interval_ms < 0:
            raise ValueError("interval_ms must be >= 0")
        self.interval_ms = interval_ms
        self.last_tick: Optional[int] = None

    def due(self, now_ms: int) -> bool:
        if self.last_tick is not None and now_ms - self.last_tick < self.interval_ms:
            return False
        self.last_tick = now_ms
        return True

    def reset(self) -> None:
        self.last_tick = None


def format_elapsed(elapsed_ms: int) -> str:
    """Whole seconds as MM:SS (minutes keep counting past 59)."""
    total_seconds = max(elapsed_ms, 0) // 1000
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"
