# viz/renderer_curses.py
from __future__ import annotations
import curses
from typing import Optional
from config import AppConfig
from core.interfaces import Snapshot
from viz.frame import frame_lines, overlay_lines

class CursesRenderer:
    def __init__(self, stdscr):
        self.scr = stdscr
        self.cfg: Optional[AppConfig] = None

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # some terminals cannot hide the cursor

    def draw(self, s: Snapshot) -> None:
        self._paint(s, game_over=False)

    def show_game_over(self, s: Snapshot) -> None:
        self._paint(s, game_over=True)

    def close(self) -> None:
        # curses.wrapper restores the terminal
        self.cfg = None

    # internals
    def _paint(self, s: Snapshot, game_over: bool) -> None:
        assert self.cfg is not None, "Renderer not opened"
        self.scr.erase()
        for row, line in enumerate(frame_lines(s)):
            self._put(row, 0, line)
        for row, col, text in overlay_lines(s, game_over):
            self._put(row, col, text)
        self.scr.refresh()

    def _put(self, row: int, col: int, text: str) -> None:
        # terminal smaller than the board: clip instead of crashing
        try:
            self.scr.addstr(row, col, text)
        except curses.error:
            pass
