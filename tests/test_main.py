from __future__ import annotations

import pygame
import pytest

from gridsnake.clock import TickGate
from gridsnake.game import Status
from gridsnake.geometry import Direction, Point
from gridsnake.main import handle_event, parse_args


def key(k: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=k)


@pytest.fixture
def game(make_game):
    return make_game(8, 8, [(1, 4), (2, 4), (3, 4)], Direction.RIGHT, Point(7, 7))


def test_arrow_and_wasd_keys_turn_the_snake(game) -> None:
    gate = TickGate(100)
    assert handle_event(game, gate, key(pygame.K_w)) is True
    assert game.snapshot().direction is Direction.UP

    # second turn before a tick is dropped
    handle_event(game, gate, key(pygame.K_LEFT))
    assert game.snapshot().direction is Direction.UP


def test_space_starts_and_r_resets(game) -> None:
    gate = TickGate(100)
    gate.due(0)

    handle_event(game, gate, key(pygame.K_r))
    assert game.status is Status.NOT_STARTED

    handle_event(game, gate, key(pygame.K_SPACE))
    assert game.status is Status.RUNNING
    assert gate.due(1) is True

    for _ in range(5):
        game.tick()
    assert game.status is Status.GAME_OVER

    handle_event(game, gate, key(pygame.K_r))
    assert game.status is Status.NOT_STARTED
    assert game.score == 0


def test_quit_events(game) -> None:
    gate = TickGate(100)
    assert handle_event(game, gate, pygame.event.Event(pygame.QUIT)) is False
    assert handle_event(game, gate, key(pygame.K_ESCAPE)) is False
    assert handle_event(game, gate, pygame.event.Event(pygame.KEYUP, key=pygame.K_UP)) is True


def test_parse_args_layers_flags_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRIDSNAKE_TICK_MS", "70")
    cfg = parse_args(["--width", "12", "--seed", "3", "--log-level", "debug"])

    assert cfg.grid_w == 12
    assert cfg.seed == 3
    assert cfg.tick_ms == 70
    assert cfg.log_level == "DEBUG"


@pytest.mark.parametrize(
    "argv",
    [["--width", "2"], ["--tick-ms", "0"], ["--food-strategy", "magic"]],
)
def test_parse_args_rejects_bad_values(argv) -> None:
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_parse_args_reports_bad_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRIDSNAKE_GRID_H", "tall")
    with pytest.raises(SystemExit):
        parse_args([])
