from enum import Enum
from typing import NamedTuple


class Direction(Enum):
    """Grid direction; the value is its (dx, dy) step, y grows downwards."""
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


def opposite(direction: Direction) -> Direction:
    return Direction((-direction.dx, -direction.dy))


class Position(NamedTuple):
    x: int
    y: int

    def shifted(self, direction: Direction) -> "Position":
        return Position(self.x + direction.dx, self.y + direction.dy)


def inbound(pos: Position, lo: Position, hi: Position) -> bool:
    """
    Strict interior test: a position lying on lo/hi (or beyond) is out.
    """
    x_in = lo.x < pos.x < hi.x
    y_in = lo.y < pos.y < hi.y
    return x_in and y_in
