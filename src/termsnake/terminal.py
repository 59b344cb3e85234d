"""
Raw POSIX terminal adapters: ANSI escape output and non-blocking keyboard
input through termios/tty/select.
"""
import logging
import os
import select
import sys
import termios
import tty
from typing import Dict, Optional, TextIO

from .config import Colour, KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_ESC
from .ports import PortError
from .render import Frame

logger = logging.getLogger(__name__)

ESC = "\x1b"
HIDE_CURSOR = ESC + "[?25l"
CLEAR_SCREEN = ESC + "[2J"
CURSOR_HOME = ESC + "[1;1H"
FG_RESET = ESC + "[39m"
TERMINAL_RESET = ESC + "c"

FG: Dict[Colour, str] = {
    Colour.BLACK: ESC + "[30m",
    Colour.RED: ESC + "[31m",
    Colour.GREEN: ESC + "[32m",
    Colour.WHITE: ESC + "[37m",
}

ARROWS = {
    ESC + "[A": KEY_UP,
    ESC + "[B": KEY_DOWN,
    ESC + "[C": KEY_RIGHT,
    ESC + "[D": KEY_LEFT,
    # application cursor mode
    ESC + "OA": KEY_UP,
    ESC + "OB": KEY_DOWN,
    ESC + "OC": KEY_RIGHT,
    ESC + "OD": KEY_LEFT,
}

CTRL_C = "\x03"


def decode_key(seq: str) -> Optional[str]:
    """
    Turn the characters of one key press into a key name.
    Arrow escapes map to KEY_UP..KEY_RIGHT, a lone ESC to KEY_ESC, a single
    character to itself; anything else (function keys, ...) to None.
    """
    if seq == ESC:
        return KEY_ESC
    if seq in ARROWS:
        return ARROWS[seq]
    if len(seq) == 1:
        return seq
    return None


# ---------- Output ----------
class AnsiFrameSink:
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def _write(self, text: str) -> None:
        try:
            self.stream.write(text)
            self.stream.flush()
        except OSError as e:
            raise PortError(f"cannot write to terminal: {e}") from e

    def clear(self) -> None:
        self._write(HIDE_CURSOR + CLEAR_SCREEN)

    def draw(self, frame: Frame) -> None:
        out = [CURSOR_HOME, frame.header, "\r\n"]
        for row in frame.buffer.rows():
            for cell in row:
                out.append(FG[cell.colour])
                out.append(cell.glyph)
            out.append(FG_RESET)
            out.append("\r\n")
        self._write("".join(out))

    def reset(self) -> None:
        self._write(TERMINAL_RESET)


# ---------- Input ----------
class RawKeyboard:
    """
    Puts the terminal in raw mode for the duration of a ``with`` block.
    poll() never blocks; wait() blocks for one key.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdin
        self.fd = self.stream.fileno()
        self._saved = None

    def __enter__(self):
        try:
            self._saved = termios.tcgetattr(self.fd)
            tty.setraw(self.fd)
        except (OSError, termios.error) as e:
            raise PortError(f"cannot switch terminal to raw mode: {e}") from e
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._saved is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved)
            self._saved = None

    def _ready(self, timeout: Optional[float]) -> bool:
        try:
            readable, _, _ = select.select([self.fd], [], [], timeout)
        except OSError as e:
            raise PortError(f"cannot read keyboard: {e}") from e
        return bool(readable)

    def _read_char(self) -> str:
        try:
            data = os.read(self.fd, 1)
        except OSError as e:
            raise PortError(f"cannot read keyboard: {e}") from e
        if not data:
            raise PortError("keyboard input closed")
        return data.decode("latin-1")

    def _read_key(self) -> Optional[str]:
        seq = self._read_char()
        if seq == CTRL_C:
            raise KeyboardInterrupt
        if seq == ESC:
            # the rest of an escape sequence arrives together with the ESC
            while len(seq) < 3 and self._ready(0):
                seq += self._read_char()
        key = decode_key(seq)
        if key is None:
            logger.debug("ignored key sequence %r", seq)
        return key

    def poll(self) -> Optional[str]:
        if not self._ready(0):
            return None
        return self._read_key()

    def wait(self) -> str:
        while True:
            self._ready(None)
            key = self._read_key()
            if key is not None:
                return key
