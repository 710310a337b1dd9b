# snake.py
from __future__ import annotations
from collections import deque
from typing import Deque, Iterable, Iterator, Set, Tuple

from .errors import InvariantViolation
from .geometry import Direction, Point

INITIAL_LENGTH = 3


class Snake:
    """
    Ordered body of distinct cells, tail first, head last, plus a heading.
    """

    def __init__(self, body: Iterable[Point], direction: Direction):
        self._body: Deque[Point] = deque(body)
        self._cells: Set[Point] = set(self._body)
        if not self._body:
            raise InvariantViolation("a snake needs at least one cell")
        if len(self._cells) != len(self._body):
            raise InvariantViolation("snake body cells must be distinct")
        self._direction = direction

    @classmethod
    def initial(cls, width: int, height: int, direction: Direction) -> Snake:
        """Three cells ending at the board centre, extending to the left."""
        cx, cy = width // 2, height // 2
        body = [Point(cx - i, cy) for i in range(INITIAL_LENGTH - 1, -1, -1)]
        if not all(p.in_bounds(width, height) for p in body):
            raise InvariantViolation(
                f"a {width}x{height} board cannot hold the initial snake"
            )
        return cls(body, direction)

    @property
    def direction(self) -> Direction:
        return self._direction

    def set_direction(self, direction: Direction) -> bool:
        """Change heading unless `direction` is a 180° turn. Returns True if taken."""
        if direction.is_opposite(self._direction):
            return False
        self._direction = direction
        return True

    def head(self) -> Point:
        return self._body[-1]

    def tail(self) -> Point:
        return self._body[0]

    def remove_tail(self) -> Point:
        """Pop the oldest cell. Callers follow up with `add_head` to keep length >= 1."""
        point = self._body.popleft()
        self._cells.discard(point)
        return point

    def add_head(self, point: Point) -> None:
        if point in self._cells:
            raise InvariantViolation(f"{point} is already part of the snake")
        self._body.append(point)
        self._cells.add(point)

    def cells(self) -> Tuple[Point, ...]:
        return tuple(self._body)

    def __len__(self) -> int:
        return len(self._body)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._body)

    def __contains__(self, point: object) -> bool:
        return point in self._cells
