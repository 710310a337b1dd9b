# geometry.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Grid headings as (dx, dy) unit vectors; y grows downward."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        return Direction((-self.dx, -self.dy))

    def is_opposite(self, other: Direction) -> bool:
        return other is self.opposite


@dataclass(frozen=True, slots=True)
class Point:
    x: int
    y: int

    def moved(self, direction: Direction) -> Point:
        """Return the neighbouring cell one step in `direction`."""
        return Point(self.x + direction.dx, self.y + direction.dy)

    def in_bounds(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height
