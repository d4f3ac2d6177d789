# viz/keyboard.py
import pygame as pg
from core.interfaces import Key

PG_KEYS = {
    pg.K_a: Key.LEFT,  pg.K_LEFT: Key.LEFT,
    pg.K_s: Key.DOWN,  pg.K_DOWN: Key.DOWN,
    pg.K_d: Key.RIGHT, pg.K_RIGHT: Key.RIGHT,
    pg.K_w: Key.UP,    pg.K_UP: Key.UP,
    pg.K_x: Key.QUIT,  pg.K_ESCAPE: Key.QUIT,
}

class Keyboard:
    """pygame key source; ``poll`` also paces the loop at ``fps``."""

    def __init__(self, fps: float):
        self.fps = fps
        self.clock = pg.time.Clock()

    def poll(self) -> Key:
        self.clock.tick(self.fps)
        key = None
        pressed = False
        for e in pg.event.get():
            if e.type == pg.QUIT:
                return Key.QUIT
            if e.type != pg.KEYDOWN:
                continue
            pressed = True
            # first recognized key wins; modifiers and the like are skipped
            if key is None and e.key in PG_KEYS:
                key = PG_KEYS[e.key]
        if key is not None:
            return key
        return Key.UNRECOGNIZED if pressed else Key.NO_KEY

    def wait(self) -> None:
        while True:
            e = pg.event.wait()
            if e.type in (pg.QUIT, pg.KEYDOWN):
                return
