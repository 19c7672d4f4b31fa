"""Single-keypress reader for the terminal frontend.

Reads arrow keys, WASD, digits and a few commands without waiting for
Enter. Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getwch()


_getch = _getch_windows if os.name == "nt" else _getch_unix


_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "n": "new",
    "\r": "enter",
    "\n": "enter",
    "\x7f": "backspace",
    "\x08": "backspace",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    if "0" <= ch <= "9":
        return ch
    return _KEY_MAP.get(ch.lower(), "")


def get_key() -> str:
    """Block for one keypress and return its action string.

    Possible return values:
        "up", "down", "left", "right"  : tile movement
        "0".."9"                       : part of a tile number
        "enter", "backspace"           : finish / edit the tile number
        "new", "quit"                  : commands
        ""                             : unrecognised key
    """
    ch = _getch()

    # ESC [ A/B/C/D
    if ch == "\x1b":
        if _getch() == "[":
            return _ARROW_MAP.get(_getch(), "")
        return "quit"

    return resolve(ch)
