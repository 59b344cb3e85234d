# loop.py
import logging
import time
from enum import Enum
from typing import Callable

from .config import TICK_MS, YES_KEYS, NO_KEYS
from .game import GameState, handle_input, reset_game, step_game
from .ports import FrameSink, InputSource
from .render import draw_game, draw_game_over

logger = logging.getLogger(__name__)


def sleep_ms(ms: int) -> None:
    time.sleep(ms / 1000)


class LifeOutcome(Enum):
    DIED = "died"
    # Esc leaves the tick loop with the snake still alive; the end screen
    # and the Y/N prompt follow all the same.
    ABANDONED = "abandoned"


def play(
    state: GameState,
    sink: FrameSink,
    source: InputSource,
    sleep: Callable[[int], None] = sleep_ms,
) -> LifeOutcome:
    """Run one life tick by tick, then show the end screen."""
    sink.clear()
    sink.draw(draw_game(state))
    logger.info("life started, food at %s", state.food)

    while True:
        # 1) input
        if not handle_input(state, source.poll()):
            logger.info("paused at score=%d", state.score)
            outcome = LifeOutcome.ABANDONED
            break

        # 2) update
        if not step_game(state):
            outcome = LifeOutcome.DIED
            break

        # 3) render
        sink.draw(draw_game(state))
        sleep(TICK_MS)

    sink.draw(draw_game_over(state.score))
    return outcome


def prompt_again(source: InputSource) -> bool:
    """Block until Y (play again) or N (quit); other keys are ignored."""
    while True:
        key = source.wait()
        if key in YES_KEYS:
            return True
        if key in NO_KEYS:
            return False


def run(
    state: GameState,
    sink: FrameSink,
    source: InputSource,
    sleep: Callable[[int], None] = sleep_ms,
) -> int:
    """Play lives until the player declines another. Returns the last score."""
    while True:
        play(state, sink, source, sleep)
        if not prompt_again(source):
            logger.info("quit with score=%d", state.score)
            return state.score
        logger.info("restart after score=%d", state.score)
        reset_game(state)
