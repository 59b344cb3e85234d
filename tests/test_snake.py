"""
Tests for the grid helpers and the Snake entity.
"""

from collections import deque

import pytest

from termsnake.config import WIDTH, HEIGHT, TOP_LEFT, BOTTOM_RIGHT
from termsnake.geometry import Direction, Position, inbound, opposite
from termsnake.snake import Snake

PERPENDICULAR = {
    Direction.UP: (Direction.LEFT, Direction.RIGHT),
    Direction.DOWN: (Direction.LEFT, Direction.RIGHT),
    Direction.LEFT: (Direction.UP, Direction.DOWN),
    Direction.RIGHT: (Direction.UP, Direction.DOWN),
}


def make_snake(cells, direction):
    snake = Snake(cells[0])
    snake.body = deque(cells)
    snake.head = cells[0]
    snake.direction = direction
    return snake


class TestGeometry:
    """Tests for Position, Direction and inbound."""

    def test_opposites(self):
        """Each direction reverses onto its pair."""
        assert opposite(Direction.UP) == Direction.DOWN
        assert opposite(Direction.DOWN) == Direction.UP
        assert opposite(Direction.LEFT) == Direction.RIGHT
        assert opposite(Direction.RIGHT) == Direction.LEFT

    def test_shifted(self):
        """Up decreases y, right increases x."""
        p = Position(5, 5)
        assert p.shifted(Direction.UP) == (5, 4)
        assert p.shifted(Direction.DOWN) == (5, 6)
        assert p.shifted(Direction.LEFT) == (4, 5)
        assert p.shifted(Direction.RIGHT) == (6, 5)

    def test_border_ring_is_out(self):
        """Every cell of the border ring fails the strict interior test."""
        for x in range(WIDTH):
            assert not inbound(Position(x, 0), TOP_LEFT, BOTTOM_RIGHT)
            assert not inbound(Position(x, HEIGHT - 1), TOP_LEFT, BOTTOM_RIGHT)
        for y in range(HEIGHT):
            assert not inbound(Position(0, y), TOP_LEFT, BOTTOM_RIGHT)
            assert not inbound(Position(WIDTH - 1, y), TOP_LEFT, BOTTOM_RIGHT)

    def test_interior_is_in(self):
        """Every strictly interior cell passes."""
        for x in range(1, WIDTH - 1):
            for y in range(1, HEIGHT - 1):
                assert inbound(Position(x, y), TOP_LEFT, BOTTOM_RIGHT)

    def test_negative_coordinates_are_out(self):
        """A head pushed past the top/left edge is simply out of bounds."""
        assert not inbound(Position(-1, 5), TOP_LEFT, BOTTOM_RIGHT)
        assert not inbound(Position(5, -1), TOP_LEFT, BOTTOM_RIGHT)


class TestSnake:
    """Tests for the Snake class."""

    def test_initial_layout(self):
        """New snake is three cells, tail to the right, facing left."""
        snake = Snake(Position(14, 7))
        assert list(snake.body) == [(14, 7), (15, 7), (16, 7)]
        assert snake.head == (14, 7)
        assert snake.direction == Direction.LEFT

    def test_go_moves_one_cell(self):
        """One step left shifts every segment forward."""
        snake = Snake(Position(14, 7))
        snake.go()
        assert snake.head == (13, 7)
        assert list(snake.body) == [(13, 7), (14, 7), (15, 7)]

    @pytest.mark.parametrize("direction", list(Direction))
    def test_go_keeps_length(self, direction):
        """Moving never changes length; head stays body[0]."""
        snake = Snake(Position(10, 7))
        snake.set_dir(direction)
        snake.go()
        assert len(snake) == 3
        assert snake.head == snake.body[0]

    @pytest.mark.parametrize(
        "direction,expected",
        [
            (Direction.LEFT, (17, 7)),
            (Direction.RIGHT, (15, 7)),
            (Direction.UP, (16, 8)),
            (Direction.DOWN, (16, 6)),
        ],
    )
    def test_grow_extends_away_from_travel(self, direction, expected):
        """The new tail sits one cell past the old tail, opposite to the heading."""
        snake = Snake(Position(14, 7))
        snake.direction = direction
        snake.grow()
        assert len(snake) == 4
        assert snake.head == (14, 7)
        assert snake.body[-1] == expected

    @pytest.mark.parametrize("direction", list(Direction))
    def test_set_dir_rejects_same_and_reverse(self, direction):
        """Same heading and exact reversal are both no-ops."""
        snake = Snake(Position(10, 7))
        snake.direction = direction
        snake.set_dir(direction)
        assert snake.direction == direction
        snake.set_dir(opposite(direction))
        assert snake.direction == direction

    @pytest.mark.parametrize("direction", list(Direction))
    def test_set_dir_accepts_turns(self, direction):
        """Any 90° turn is taken."""
        for turn in PERPENDICULAR[direction]:
            snake = Snake(Position(10, 7))
            snake.direction = direction
            snake.set_dir(turn)
            assert snake.direction == turn

    def test_distinct_body_did_not_eat_itself(self):
        """Pairwise distinct cells never count as a collision."""
        snake = Snake(Position(10, 7))
        assert snake.ate_itself() is False
        snake.grow()
        snake.grow()
        assert snake.ate_itself() is False

    def test_head_onto_fourth_segment(self):
        """A length-5 snake turning into its own body is detected."""
        snake = make_snake(
            [Position(5, 5), Position(6, 5), Position(6, 6), Position(5, 6), Position(4, 6)],
            Direction.DOWN,
        )
        snake.go()
        assert snake.head == (5, 6)
        assert snake.ate_itself() is True
