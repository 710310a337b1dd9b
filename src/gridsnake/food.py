# food.py
"""
Food placement.

`generate` is plain rejection sampling: it keeps drawing uniform cells until
one is neither SNAKE on the board nor the excluded point. There is no retry
cap, so on a board with no free cell it never returns. Boards are always
larger than the longest reachable snake in normal play, so this is left as a
known degenerate case.

`generate_from_free_cells` enumerates the free cells first and picks one
uniformly, which gives the same distribution with bounded cost.
"""
from __future__ import annotations
import random
from typing import Callable, Dict

from .board import Board, Cell
from .errors import InvariantViolation
from .geometry import Point

FoodGenerator = Callable[[int, int, Board, Point, random.Random], Point]


def generate(
    width: int,
    height: int,
    board: Board,
    excluded: Point,
    rng: random.Random,
) -> Point:
    while True:
        candidate = Point(rng.randrange(width), rng.randrange(height))
        if board.is_set(candidate, Cell.SNAKE) or candidate == excluded:
            continue
        return candidate


def generate_from_free_cells(
    width: int,
    height: int,
    board: Board,
    excluded: Point,
    rng: random.Random,
) -> Point:
    free = [p for p in board.free_cells() if p != excluded]
    if not free:
        raise InvariantViolation(f"no free cell left for food on a {width}x{height} board")
    return rng.choice(free)


FOOD_STRATEGIES: Dict[str, FoodGenerator] = {
    "sample": generate,
    "enumerate": generate_from_free_cells,
}


def get_strategy(name: str) -> FoodGenerator:
    try:
        return FOOD_STRATEGIES[name]
    except KeyError:
        raise ValueError(f"Unknown food strategy: {name}") from None
