# board.py
from __future__ import annotations
from enum import IntEnum
from typing import Iterable, List, Optional

import numpy as np  # type: ignore

from .errors import InvariantViolation
from .geometry import Point


class Cell(IntEnum):
    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Board:
    """
    Fixed-size cell classification grid, indexed [y, x].

    The game never patches a board between ticks; it builds a fresh one
    from the snake body and the food point with `Board.build`.
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise InvariantViolation(f"board must be at least 1x1, got {width}x{height}")
        self._cells = np.full((height, width), Cell.EMPTY, dtype=np.int8)

    @classmethod
    def build(
        cls,
        width: int,
        height: int,
        body: Iterable[Point],
        food: Optional[Point] = None,
    ) -> Board:
        board = cls(width, height)
        for point in body:
            board.set(point, Cell.SNAKE)
        if food is not None:
            board.set(food, Cell.FOOD)
        return board

    @property
    def width(self) -> int:
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        return self._cells.shape[0]

    def contains(self, point: Point) -> bool:
        return point.in_bounds(self.width, self.height)

    def _check(self, point: Point) -> None:
        if not self.contains(point):
            raise InvariantViolation(
                f"{point} is outside the {self.width}x{self.height} board"
            )

    def get(self, point: Point) -> Cell:
        self._check(point)
        return Cell(int(self._cells[point.y, point.x]))

    def set(self, point: Point, value: Cell) -> None:
        self._check(point)
        self._cells[point.y, point.x] = value

    def is_set(self, point: Point, value: Cell) -> bool:
        return self.get(point) is value

    def count(self, value: Cell) -> int:
        return int(np.count_nonzero(self._cells == value))

    def free_cells(self) -> List[Point]:
        """All cells not marked SNAKE, in row-major order."""
        ys, xs = np.nonzero(self._cells != Cell.SNAKE)
        return [Point(int(x), int(y)) for y, x in zip(ys, xs)]

    def as_array(self) -> np.ndarray:
        """Read-only copy of the grid (shape = (height, width))."""
        grid = self._cells.copy()
        grid.flags.writeable = False
        return grid
