from __future__ import annotations

import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from gridsnake.clock import ManualClock  # noqa: E402
from gridsnake.game import SnakeGame  # noqa: E402
from gridsnake.geometry import Direction, Point  # noqa: E402


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock(start_ms=1_000)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def make_game(rng: random.Random, clock: ManualClock):
    def _make(width: int, height: int, body, direction: Direction, food: Point, **kwargs) -> SnakeGame:
        kwargs.setdefault("rng", rng)
        kwargs.setdefault("clock", clock)
        return SnakeGame.from_layout(width, height, [Point(x, y) for x, y in body], direction, food, **kwargs)

    return _make


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("GRIDSNAKE_"):
            monkeypatch.delenv(key)
