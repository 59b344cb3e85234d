from collections import deque
from typing import Deque, Iterator

from .geometry import Direction, Position, opposite


class Snake:
    """
    Ordered body from head (index 0) to tail, a cached head and the
    current heading. Starts three cells long, lying to the right of the
    head and facing LEFT.
    """

    def __init__(self, head: Position):
        self.body: Deque[Position] = deque(
            [head, Position(head.x + 1, head.y), Position(head.x + 2, head.y)]
        )
        self.direction = Direction.LEFT
        self.head = head

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.body)

    def __repr__(self) -> str:
        return f"<Snake head={self.head} len={len(self.body)} dir={self.direction.name}>"

    def go(self) -> None:
        """Move one cell along the current direction. No bounds checking."""
        self.body.pop()
        new_head = self.head.shifted(self.direction)
        self.body.appendleft(new_head)
        self.head = new_head

    def grow(self) -> None:
        # new tail extends away from the direction of travel
        tail = self.body[-1]
        self.body.append(tail.shifted(opposite(self.direction)))

    def ate_itself(self) -> bool:
        # the head is always body[0], so a second hit means a collision
        return sum(1 for p in self.body if p == self.head) >= 2

    def set_dir(self, new_dir: Direction) -> None:
        """Accept 90° turns only; same or reversed heading is a no-op."""
        if new_dir == self.direction or new_dir == opposite(self.direction):
            return
        self.direction = new_dir
