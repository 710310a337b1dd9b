from __future__ import annotations

import pygame
import pytest

from gridsnake.board import Board
from gridsnake.config import FOOD, HUD_HEIGHT, SNAKE_BODY, SNAKE_HEAD
from gridsnake.game import Snapshot, Status
from gridsnake.geometry import Direction, Point
from gridsnake.render import draw_game

CELL = 10


@pytest.fixture(scope="module")
def font() -> pygame.font.Font:
    pygame.font.init()
    return pygame.font.Font(None, 18)


def make_snapshot(status: Status) -> Snapshot:
    body = (Point(1, 6), Point(2, 6), Point(3, 6))
    food = Point(8, 8)
    return Snapshot(
        board=Board.build(10, 10, body, food).as_array(),
        snake=body,
        food=food,
        direction=Direction.RIGHT,
        score=4,
        status=status,
        elapsed_ms=65_000,
    )


def pixel(screen: pygame.Surface, point: Point) -> tuple:
    x = point.x * CELL + CELL // 2
    y = HUD_HEIGHT + point.y * CELL + CELL // 2
    return tuple(screen.get_at((x, y)))[:3]


def test_draws_cells_in_palette(font: pygame.font.Font) -> None:
    screen = pygame.Surface((10 * CELL, 10 * CELL + HUD_HEIGHT))
    draw_game(screen, font, make_snapshot(Status.RUNNING), CELL)

    assert pixel(screen, Point(8, 8)) == FOOD
    assert pixel(screen, Point(3, 6)) == SNAKE_HEAD
    assert pixel(screen, Point(1, 6)) == SNAKE_BODY
    assert pixel(screen, Point(5, 2)) == (0, 0, 0)


@pytest.mark.parametrize("status", [Status.NOT_STARTED, Status.GAME_OVER])
def test_overlay_dims_the_board(font: pygame.font.Font, status: Status) -> None:
    screen = pygame.Surface((10 * CELL, 10 * CELL + HUD_HEIGHT))
    draw_game(screen, font, make_snapshot(status), CELL)

    assert pixel(screen, Point(8, 8)) != FOOD
