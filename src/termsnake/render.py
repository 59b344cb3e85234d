# render.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

import numpy as np  # type: ignore

from .config import (
    WIDTH, HEIGHT,
    Cell, Colour,
    SPACE, FOOD, SNAKE_PART, SNAKE_HEAD, LINE, L_TOOTH, R_TOOTH, V, CARET,
)
from .game import GameState
from .geometry import Position


# -----------------------------------------------------------------------------
# Frame buffer
# -----------------------------------------------------------------------------
class FrameBuffer:
    """
    HEIGHT x WIDTH grid of cells, kept as two parallel numpy arrays:
    one-character glyphs and Colour codes. Indexed [y, x].
    """

    def __init__(self, glyphs: np.ndarray, colours: np.ndarray):
        self.glyphs = glyphs
        self.colours = colours

    @classmethod
    def blank(cls) -> FrameBuffer:
        return cls(
            np.full((HEIGHT, WIDTH), SPACE.glyph, dtype="<U1"),
            np.full((HEIGHT, WIDTH), int(SPACE.colour), dtype=np.uint8),
        )

    @property
    def shape(self):
        return self.glyphs.shape

    def __getitem__(self, yx) -> Cell:
        y, x = yx
        return Cell(str(self.glyphs[y, x]), Colour(int(self.colours[y, x])))

    def put(self, x: int, y: int, cell: Cell) -> None:
        # cells off the grid are dropped
        if 0 <= x < WIDTH and 0 <= y < HEIGHT:
            self.glyphs[y, x] = cell.glyph
            self.colours[y, x] = int(cell.colour)

    def fill_row(self, y: int, cell: Cell) -> None:
        self.glyphs[y, :] = cell.glyph
        self.colours[y, :] = int(cell.colour)

    def write_text(self, x: int, y: int, text: str, colour: Colour = Colour.WHITE) -> None:
        for i, ch in enumerate(text):
            self.put(x + i, y, Cell(ch, colour))

    def rows(self) -> Iterator[List[Cell]]:
        """Row-major iteration, one list of cells per row."""
        for y in range(HEIGHT):
            yield [self[y, x] for x in range(WIDTH)]

    def text(self) -> List[str]:
        """Glyphs only, one string per row."""
        return ["".join(row) for row in self.glyphs.tolist()]


@dataclass
class Frame:
    """What a FrameSink draws: the score header line and the grid."""
    score: int
    buffer: FrameBuffer

    @property
    def header(self) -> str:
        return f"Score: {self.score}"


# -----------------------------------------------------------------------------
# Composition
# -----------------------------------------------------------------------------
def draw_field(buff: FrameBuffer) -> None:
    buff.fill_row(0, V)
    buff.fill_row(HEIGHT - 1, CARET)
    # side teeth run down to the bottom row, overwriting its corners
    for y in range(1, HEIGHT):
        buff.put(0, y, R_TOOTH)
        buff.put(WIDTH - 1, y, L_TOOTH)


def draw_snake(buff: FrameBuffer, state: GameState) -> None:
    for p in state.snake:
        buff.put(p.x, p.y, SNAKE_PART)
    head: Position = state.snake.head
    buff.put(head.x, head.y, SNAKE_HEAD)


def draw_food(buff: FrameBuffer, state: GameState) -> None:
    buff.put(state.food.x, state.food.y, FOOD)


def draw_game(state: GameState) -> Frame:
    """Build this tick's frame from scratch: border, snake, then food on top."""
    buff = FrameBuffer.blank()
    draw_field(buff)
    draw_snake(buff, state)
    draw_food(buff, state)
    return Frame(score=state.score, buffer=buff)


def draw_game_over(score: int) -> Frame:
    buff = FrameBuffer.blank()
    draw_field(buff)
    for x in range(10, 20):
        buff.put(x, 4, LINE)
        buff.put(x, 8, LINE)
    buff.write_text(11, 5, "You Died")
    buff.write_text(9, 7, "Again?: (Y/N)")
    return Frame(score=score, buffer=buff)
