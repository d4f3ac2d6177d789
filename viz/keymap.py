# viz/keymap.py
from __future__ import annotations
import curses
from core.interfaces import Key

CHAR_KEYS = {
    "a": Key.LEFT,  "A": Key.LEFT,
    "s": Key.DOWN,  "S": Key.DOWN,
    "d": Key.RIGHT, "D": Key.RIGHT,
    "w": Key.UP,    "W": Key.UP,
    "x": Key.QUIT,  "X": Key.QUIT,
}

CURSES_ARROWS = {
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_UP: Key.UP,
}

def key_from_char(ch: str) -> Key:
    if not ch:
        return Key.NO_KEY
    return CHAR_KEYS.get(ch, Key.UNRECOGNIZED)

def key_from_curses(code: int) -> Key:
    """Map a ``getch()`` result; -1 means the poll timed out."""
    if code == -1:
        return Key.NO_KEY
    if code in CURSES_ARROWS:
        return CURSES_ARROWS[code]
    if 0 <= code < 256:
        return key_from_char(chr(code))
    return Key.UNRECOGNIZED
