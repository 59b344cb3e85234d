# pygame_backend.py
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import (
    WIDTH, HEIGHT, Colour,
    KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_ESC, MOVE_KEYS,
)
from .ports import PortError
from .render import Frame

# ----- Window -----
CELL_SIZE = 20
HEADER_H = 28
WINDOW_W, WINDOW_H = WIDTH * CELL_SIZE, HEIGHT * CELL_SIZE + HEADER_H

# ----- Colors -----
BG   = (20, 20, 24)
TEXT = (220, 220, 230)
RGB = {
    Colour.BLACK: BG,
    Colour.GREEN: (80, 200, 80),
    Colour.RED:   (200, 70, 70),
    Colour.WHITE: TEXT,
}

SPECIAL_KEYS = {
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_ESCAPE: KEY_ESC,
}


def key_name(event) -> Optional[str]:
    """Map a KEYDOWN event to a key name, or None for keys we don't read."""
    if event.key in SPECIAL_KEYS:
        return SPECIAL_KEYS[event.key]
    if len(event.unicode) == 1 and event.unicode.isprintable():
        return event.unicode
    return None


class PygameFrameSink:
    """Draws each cell's glyph, tinted by its colour, on a fixed window."""

    def __init__(self):
        try:
            pygame.init()
            self.screen = pygame.display.set_mode((WINDOW_W, WINDOW_H))
            pygame.display.set_caption("Snake")
            self.font = pygame.font.SysFont("monospace", CELL_SIZE, bold=True)
        except pygame.error as e:
            raise PortError(f"cannot open pygame window: {e}") from e

    def clear(self) -> None:
        try:
            self.screen.fill(BG)
            pygame.display.flip()
        except pygame.error as e:
            raise PortError(f"cannot clear window: {e}") from e

    def _blit(self, text: str, color: Tuple[int, int, int], center: Tuple[int, int]) -> None:
        surf = self.font.render(text, True, color)
        self.screen.blit(surf, surf.get_rect(center=center))

    def draw(self, frame: Frame) -> None:
        try:
            self.screen.fill(BG)
            txt = self.font.render(frame.header, True, TEXT)
            self.screen.blit(txt, (8, 4))
            for y, row in enumerate(frame.buffer.rows()):
                for x, cell in enumerate(row):
                    if cell.glyph == " ":
                        continue
                    cx = x * CELL_SIZE + CELL_SIZE // 2
                    cy = HEADER_H + y * CELL_SIZE + CELL_SIZE // 2
                    self._blit(cell.glyph, RGB[cell.colour], (cx, cy))
            pygame.display.flip()
        except pygame.error as e:
            raise PortError(f"cannot draw frame: {e}") from e

    def close(self) -> None:
        pygame.quit()


class PygameInput:
    """Keys from the pygame event queue. Closing the window exits."""

    def poll(self) -> Optional[str]:
        # drain the queue: Esc wins, then the latest direction key
        paused = False
        move = other = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                raise SystemExit
            if event.type != pygame.KEYDOWN:
                continue
            key = key_name(event)
            if key == KEY_ESC:
                paused = True
            elif key is not None and key.lower() in MOVE_KEYS:
                move = key
            elif key is not None:
                other = key
        if paused:
            return KEY_ESC
        return move or other

    def wait(self) -> str:
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                raise SystemExit
            if event.type == pygame.KEYDOWN:
                key = key_name(event)
                if key is not None:
                    return key
