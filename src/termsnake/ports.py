"""
The two collaborators the game loop talks to: somewhere to draw frames and
somewhere to read keys from. Keys are either a single printable character or
one of the names in ``config`` (``KEY_UP``, ``KEY_ESC``, ...).
"""
from __future__ import annotations

from typing import Optional, Protocol

from .render import Frame


class PortError(RuntimeError):
    """The screen or keyboard failed; the game cannot go on."""


class FrameSink(Protocol):
    def clear(self) -> None:
        """Hide the cursor and wipe the screen before a life starts."""

    def draw(self, frame: Frame) -> None:
        """Render one frame and flush it."""


class InputSource(Protocol):
    def poll(self) -> Optional[str]:
        """Return the next pending key, or None right away if there is none."""

    def wait(self) -> str:
        """Block until a key is pressed and return it."""
