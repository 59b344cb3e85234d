# main.py
import argparse
import logging
import random
import sys
from typing import List, Optional

from .config import BACKENDS, Config
from .game import new_game_state
from .loop import run
from .ports import PortError

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> Config:
    parser = argparse.ArgumentParser(prog="termsnake", description="Snake in the terminal.")
    parser.add_argument(
        "--backend",
        type=str,
        default="terminal",
        choices=BACKENDS,
        help="terminal: ANSI in the current tty; pygame: a window",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed for food placement (reproducible games)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="write the log here instead of stderr",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="defaults to INFO with --log-file, WARNING otherwise",
    )
    args = parser.parse_args(argv)

    level = args.log_level or ("INFO" if args.log_file else "WARNING")
    return Config(backend=args.backend, seed=args.seed, log_file=args.log_file, log_level=level)


def setup_logging(cfg: Config) -> None:
    # the game owns the screen, so a log file is the only useful sink in play
    logging.basicConfig(
        filename=cfg.log_file,
        level=getattr(logging, cfg.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def play_terminal(cfg: Config) -> int:
    from .terminal import AnsiFrameSink, RawKeyboard

    state = new_game_state(random.Random(cfg.seed))
    sink = AnsiFrameSink()
    try:
        with RawKeyboard() as keyboard:
            return run(state, sink, keyboard)
    finally:
        sink.reset()


def play_pygame(cfg: Config) -> int:
    import pygame  # type: ignore
    from .pygame_backend import PygameFrameSink, PygameInput

    state = new_game_state(random.Random(cfg.seed))
    sink = PygameFrameSink()
    try:
        return run(state, sink, PygameInput(), sleep=pygame.time.wait)
    finally:
        sink.close()


def main(argv: Optional[List[str]] = None) -> int:
    cfg = parse_args(argv)
    setup_logging(cfg)
    logger.info("starting %s backend (seed=%s)", cfg.backend, cfg.seed)

    try:
        if cfg.backend == "pygame":
            score = play_pygame(cfg)
        else:
            score = play_terminal(cfg)
    except PortError as e:
        if cfg.log_file:
            logger.error("fatal: %s", e)
        print(f"termsnake: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    print(f"Final score: {score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
