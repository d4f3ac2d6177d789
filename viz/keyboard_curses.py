# viz/keyboard_curses.py
import time
from core.interfaces import Key
from viz.keymap import key_from_curses

class CursesKeyboard:
    """Polls one key per tick; every poll takes one full ``tick_ms``.

    ``getch`` returns early when a key arrives, so the rest of the tick is
    slept off to keep the snake's speed independent of key presses.
    """

    def __init__(self, stdscr, tick_ms: int):
        self.scr = stdscr
        self.tick_ms = tick_ms
        self.scr.keypad(True)
        self.scr.timeout(tick_ms)

    def poll(self) -> Key:
        start = time.monotonic()
        key = key_from_curses(self.scr.getch())
        left = self.tick_ms / 1000.0 - (time.monotonic() - start)
        if left > 0:
            time.sleep(left)
        return key

    def wait(self) -> None:
        self.scr.timeout(-1)
        try:
            self.scr.getch()
        finally:
            self.scr.timeout(self.tick_ms)
