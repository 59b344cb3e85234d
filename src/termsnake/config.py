from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Optional

from .geometry import Direction, Position

# ----- Board -----
# Dimensions include the 1-cell border ring.
WIDTH, HEIGHT = 30, 14
SPAWN = Position(14, 7)
TOP_LEFT = Position(0, 0)
BOTTOM_RIGHT = Position(WIDTH - 1, HEIGHT - 1)

# ----- Timing -----
FPS = 15
TICK_MS = 10 * FPS


# ----- Cells -----
class Colour(IntEnum):
    GREEN = 0
    RED = 1
    BLACK = 2
    WHITE = 3


class Cell(NamedTuple):
    glyph: str
    colour: Colour


SPACE      = Cell(" ", Colour.BLACK)
FOOD       = Cell("@", Colour.RED)
SNAKE_PART = Cell("o", Colour.GREEN)
SNAKE_HEAD = Cell("0", Colour.GREEN)
LINE       = Cell("-", Colour.WHITE)
L_TOOTH    = Cell("<", Colour.WHITE)
R_TOOTH    = Cell(">", Colour.WHITE)
V          = Cell("v", Colour.WHITE)
CARET      = Cell("^", Colour.WHITE)

# ----- Keys -----
# Special keys get names; printable keys are their own single character.
KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT = "up", "down", "left", "right"
KEY_ESC = "esc"

# ZQSD and WASD share "s" and "d", so both layouts fit in one table.
MOVE_KEYS = {
    KEY_UP: Direction.UP, "z": Direction.UP, "w": Direction.UP,
    KEY_DOWN: Direction.DOWN, "s": Direction.DOWN,
    KEY_LEFT: Direction.LEFT, "q": Direction.LEFT, "a": Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT, "d": Direction.RIGHT,
}
PAUSE_KEYS = {KEY_ESC}
YES_KEYS = {"y", "Y"}
NO_KEYS = {"n", "N"}


# ----- Run-time options (board and speed are fixed above) -----
@dataclass
class Config:
    backend: str = "terminal"
    seed: Optional[int] = None
    log_file: Optional[str] = None
    log_level: str = "WARNING"


BACKENDS = ("terminal", "pygame")
