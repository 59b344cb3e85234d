# game.py
import logging
import random
from dataclasses import dataclass
from typing import Optional

from .config import (
    WIDTH, HEIGHT, SPAWN, TOP_LEFT, BOTTOM_RIGHT,
    MOVE_KEYS, PAUSE_KEYS,
)
from .geometry import Position, inbound
from .snake import Snake

logger = logging.getLogger(__name__)


# ---------- Helpers ----------
def spawn_food(rng: random.Random) -> Position:
    """
    Uniform pick over the interior. The snake is not consulted, so food may
    land on its body.
    """
    return Position(rng.randint(1, WIDTH - 2), rng.randint(1, HEIGHT - 2))


# ---------- State ----------
@dataclass
class GameState:
    snake: Snake
    food: Position
    score: int
    playing: bool              # False once the snake has died
    rng: random.Random


def new_game_state(rng: Optional[random.Random] = None) -> GameState:
    rng = rng or random.Random()
    return GameState(
        snake=Snake(SPAWN),
        food=spawn_food(rng),
        score=0,
        playing=True,
        rng=rng,
    )


def reset_game(state: GameState) -> None:
    """Start a fresh life on the same state object."""
    state.snake = Snake(SPAWN)
    state.food = spawn_food(state.rng)
    state.score = 0
    state.playing = True


# ---------- Input / Update ----------
def handle_input(state: GameState, key: Optional[str]) -> bool:
    """Apply one key to the snake. Return False if the key pauses the game."""
    if key is None:
        return True
    if key in PAUSE_KEYS:
        return False
    if len(key) == 1:
        key = key.lower()
    direction = MOVE_KEYS.get(key)
    if direction is not None:
        state.snake.set_dir(direction)
    return True


def snake_alive(state: GameState) -> bool:
    return inbound(state.snake.head, TOP_LEFT, BOTTOM_RIGHT) and not state.snake.ate_itself()


def snake_eats(state: GameState) -> None:
    state.snake.grow()
    state.food = spawn_food(state.rng)
    state.score += 1
    logger.debug("food eaten, score=%d, next food at %s", state.score, state.food)


def step_game(state: GameState) -> bool:
    """
    Advance the game by one tick.
    - move the snake one cell
    - border ring or own body -> dead
    - head on food -> grow, respawn food, score +1
    Returns True if alive, False if game over.
    """
    state.snake.go()

    if not snake_alive(state):
        state.playing = False
        cause = "self" if state.snake.ate_itself() else "wall"
        logger.info("snake died (%s) at %s, score=%d", cause, state.snake.head, state.score)
        return False

    if state.snake.head == state.food:
        snake_eats(state)
    return True
