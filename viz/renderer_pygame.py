# viz/renderer_pygame.py
from __future__ import annotations
import pygame as pg
from typing import Optional
from config import AppConfig
from core.interfaces import Snapshot
from viz.frame import overlay_lines, HELP_LINE
import viz.renderer_colors as theme

HUD_ROWS = 2

class PygameRenderer:
    def __init__(self):
        self.cell = 20
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self._font: Optional[pg.font.Font] = None
        self._grid_w = 0
        self._grid_h = 0

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg

        self._grid_w, self._grid_h = cfg.grid_w, cfg.grid_h
        self.cell = cfg.render_cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        hud = HUD_ROWS if cfg.render_show_hud else 0
        self.surf = pg.display.set_mode((self._grid_w * self.cell, (self._grid_h + hud) * self.cell))
        self._font = pg.font.SysFont(None, 22)

    def draw(self, s: Snapshot) -> None:
        self._paint(s, game_over=False)

    def show_game_over(self, s: Snapshot) -> None:
        self._paint(s, game_over=True)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self._font = None

    # internals
    def _paint(self, s: Snapshot, game_over: bool) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell
        W, H = s.grid_w, s.grid_h

        surf.fill(theme.BG)

        for x in range(W):
            pg.draw.rect(surf, theme.WALL, pg.Rect(x * c, 0, c, c))
            pg.draw.rect(surf, theme.WALL, pg.Rect(x * c, (H - 1) * c, c, c))
        for y in range(1, H - 1):
            pg.draw.rect(surf, theme.WALL, pg.Rect(0, y * c, c, c))
            pg.draw.rect(surf, theme.WALL, pg.Rect((W - 1) * c, y * c, c, c))

        fx, fy = s.fruit
        pg.draw.rect(surf, theme.FOOD, pg.Rect(fx * c, fy * c, c, c))

        for (x, y) in s.body:
            pg.draw.rect(surf, theme.BODY, pg.Rect(x * c, y * c, c, c))
        hx, hy = s.head
        pg.draw.rect(surf, theme.HEAD, pg.Rect(hx * c, hy * c, c, c))

        if self.cfg.render_show_hud:
            self._text(f"Score: {s.score}", (6, H * c + 2))
            self._text(HELP_LINE, (6, H * c + 2 + c))

        for row, _, text in overlay_lines(s, game_over):
            img = self._font.render(text, True, theme.TEXT)
            surf.blit(img, img.get_rect(center=(W * c // 2, row * c + c // 2)))

        pg.display.flip()

    def _text(self, text: str, pos) -> None:
        self.surf.blit(self._font.render(text, True, theme.TEXT), pos)
