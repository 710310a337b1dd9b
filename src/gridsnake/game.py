# game.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple
import logging
import random

import numpy as np  # type: ignore

from .board import Board, Cell
from .clock import Clock, monotonic_ms
from .errors import InvariantViolation
from .food import get_strategy
from .geometry import Direction, Point
from .snake import INITIAL_LENGTH, Snake

logger = logging.getLogger(__name__)

# Left is never dealt: the initial body trails off to the left of the head.
INITIAL_DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.RIGHT)


class Status(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"


# ---------- State ----------
@dataclass
class GameState:
    board: Board
    snake: Snake
    food: Point
    score: int = 0
    status: Status = Status.NOT_STARTED
    started_at_ms: Optional[int] = None
    ended_at_ms: Optional[int] = None


@dataclass(frozen=True, eq=False)
class Snapshot:
    """Read-only view of a game handed to the presentation layer."""
    board: np.ndarray
    snake: Tuple[Point, ...]   # tail first, head last
    food: Point
    direction: Direction
    score: int
    status: Status
    elapsed_ms: int

    @property
    def head(self) -> Point:
        return self.snake[-1]

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def width(self) -> int:
        return self.board.shape[1]

    @property
    def height(self) -> int:
        return self.board.shape[0]


# ---------- Game ----------
class SnakeGame:
    """
    Snake game state machine: NOT_STARTED -> RUNNING -> GAME_OVER -> (reset) NOT_STARTED.

    The game owns no timer. Whoever drives it calls `tick()` at its own
    cadence; the injected `clock` is only read to measure elapsed play time.
    At most one direction change is accepted between two ticks.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        rng: Optional[random.Random] = None,
        clock: Optional[Clock] = None,
        food_strategy: str = "sample",
        initial_direction: Optional[Direction] = None,
        state: Optional[GameState] = None,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.clock: Clock = clock if clock is not None else monotonic_ms
        self.food_strategy = food_strategy
        self._place_food = get_strategy(food_strategy)
        self.initial_direction = initial_direction
        self.direction_lock = False
        if state is None:
            self._deal(width, height)
        else:
            self.width, self.height = width, height
            self.state = state

    @classmethod
    def from_layout(
        cls,
        width: int,
        height: int,
        body: Iterable[Point],
        direction: Direction,
        food: Point,
        *,
        rng: Optional[random.Random] = None,
        clock: Optional[Clock] = None,
        food_strategy: str = "sample",
    ) -> SnakeGame:
        """Build a NOT_STARTED game from an explicit body (tail first) and food cell."""
        snake = Snake(body, direction)
        board = Board.build(width, height, snake)
        if not board.contains(food):
            raise InvariantViolation(f"food {food} is outside the board")
        if food in snake:
            raise InvariantViolation(f"food {food} overlaps the snake")
        board.set(food, Cell.FOOD)
        return cls(
            width,
            height,
            rng=rng,
            clock=clock,
            food_strategy=food_strategy,
            state=GameState(board=board, snake=snake, food=food),
        )

    # ----- lifecycle -----
    def initialize(self, width: int, height: int) -> None:
        """Deal a fresh NOT_STARTED game on a width x height board. Not allowed mid-game."""
        if self.state.status is Status.RUNNING:
            raise InvariantViolation("cannot re-initialize a running game")
        self._deal(width, height)

    def _deal(self, width: int, height: int) -> None:
        # The board must have room for the initial body, its food and one more cell.
        if width < 4 or height < 1 or width * height <= INITIAL_LENGTH + 1:
            raise InvariantViolation(f"board too small for the initial snake: {width}x{height}")
        self.width, self.height = width, height
        self.direction_lock = False

        direction = self.initial_direction
        if direction is None:
            direction = self.rng.choice(INITIAL_DIRECTIONS)
        snake = Snake.initial(width, height, direction)
        board = Board.build(width, height, snake)
        food = self._place_food(width, height, board, snake.head(), self.rng)
        board.set(food, Cell.FOOD)

        self.state = GameState(board=board, snake=snake, food=food)
        logger.debug("initialized %dx%d game, heading %s, food at %s",
                      width, height, direction.name, food)

    def start(self) -> None:
        if self.state.status is not Status.NOT_STARTED:
            raise InvariantViolation(f"cannot start a game in state {self.state.status.name}")
        self.state.status = Status.RUNNING
        self.state.started_at_ms = self.clock()
        logger.info("game started on %dx%d board", self.width, self.height)

    def reset(self) -> None:
        """Replace a finished game with a fresh NOT_STARTED one of the same size."""
        if self.state.status is not Status.GAME_OVER:
            raise InvariantViolation(f"cannot reset a game in state {self.state.status.name}")
        self._deal(self.width, self.height)
        logger.info("game reset")

    # ----- input -----
    def request_direction_change(self, direction: Direction) -> bool:
        """
        Ask the snake to turn. Returns True if accepted.

        Rejected when a change was already accepted since the last tick,
        when `direction` is a 180° turn, or once the game is over.
        """
        if self.state.status is Status.GAME_OVER or self.direction_lock:
            return False
        if not self.state.snake.set_direction(direction):
            return False
        self.direction_lock = True
        return True

    # ----- update -----
    def tick(self) -> Snapshot:
        """
        Advance the snake one cell.

        The collision test runs against the board built from the body
        *before* the move, so stepping into the cell the tail is about to
        leave still counts as hitting yourself.
        """
        state = self.state
        if state.status is not Status.RUNNING:
            raise InvariantViolation(f"tick() called in state {state.status.name}")

        self.direction_lock = False
        snake = state.snake
        new_head = snake.head().moved(snake.direction)

        # Wall collision
        if not new_head.in_bounds(self.width, self.height):
            self._game_over(f"hit the wall at {new_head}")
            return self.snapshot()

        state.board = Board.build(self.width, self.height, snake, state.food)
        ate_food = new_head == state.food

        # Self collision
        if state.board.is_set(new_head, Cell.SNAKE):
            self._game_over(f"ran into itself at {new_head}")
            return self.snapshot()

        # Move / grow
        if ate_food:
            state.food = self._place_food(self.width, self.height, state.board, new_head, self.rng)
            state.score += 1
            snake.add_head(new_head)
            logger.debug("ate food at %s, score %d, next food at %s", new_head, state.score, state.food)
        else:
            snake.remove_tail()
            snake.add_head(new_head)

        state.board = Board.build(self.width, self.height, snake, state.food)
        return self.snapshot()

    def _game_over(self, reason: str) -> None:
        self.state.status = Status.GAME_OVER
        self.state.ended_at_ms = self.clock()
        logger.info("game over: %s (score %d, length %d)", reason, self.state.score, len(self.state.snake))

    # ----- read side -----
    @property
    def status(self) -> Status:
        return self.state.status

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def is_over(self) -> bool:
        return self.state.status is Status.GAME_OVER

    def elapsed_ms(self) -> int:
        state = self.state
        if state.started_at_ms is None:
            return 0
        end = state.ended_at_ms if state.ended_at_ms is not None else self.clock()
        return end - state.started_at_ms

    def snapshot(self) -> Snapshot:
        state = self.state
        return Snapshot(
            board=state.board.as_array(),
            snake=state.snake.cells(),
            food=state.food,
            direction=state.snake.direction,
            score=state.score,
            status=state.status,
            elapsed_ms=self.elapsed_ms(),
        )
