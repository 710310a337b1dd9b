# src/gridsnake/__init__.py
"""Grid snake: game-state core plus a thin pygame front end."""

from .errors import InvariantViolation
from .geometry import Direction, Point
from .board import Board, Cell
from .snake import Snake
from .game import GameState, SnakeGame, Snapshot, Status

__all__ = [
    "InvariantViolation",
    "Direction",
    "Point",
    "Board",
    "Cell",
    "Snake",
    "GameState",
    "SnakeGame",
    "Snapshot",
    "Status",
]
