# src/termsnake/__init__.py
"""Terminal snake: engine, renderer and the terminal/pygame front ends."""

__version__ = "0.1.0"
