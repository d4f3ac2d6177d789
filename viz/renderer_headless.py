# viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional
from config import AppConfig
from core.interfaces import Snapshot
from viz.frame import render_text

class HeadlessRenderer:
    """Keeps every composed frame in memory instead of drawing it."""

    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.frames: List[List[str]] = []
        self.snapshots: List[Snapshot] = []
        self.final: Optional[List[str]] = None
        self.closed = False

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg

    def draw(self, snap: Snapshot) -> None:
        self.snapshots.append(snap)
        self.frames.append(render_text(snap))

    def show_game_over(self, snap: Snapshot) -> None:
        self.final = render_text(snap, game_over=True)

    def close(self) -> None:
        self.closed = True
