# runners/run_snake.py
from __future__ import annotations
import curses
from typing import Optional
from config import AppConfig
from core.engine import TickEngine
from core.interfaces import KeySource, Snapshot, Status
from core.snake_rules import GameState
from runners.tick_log import ALL_KEYS, CSVLogger, Logger
from viz.render_iface import Renderer

def run_game(
    engine: TickEngine,
    keys: KeySource,
    renderer: Renderer,
    logger: Optional[Logger] = None,
) -> Snapshot:
    """Drive ``engine`` until the game ends, then show the game-over screen.

    The key poll sets the cadence: it waits at most one tick interval.
    """
    snap = engine.snapshot()
    renderer.draw(snap)

    step = 0
    status = snap.status
    while status is Status.RUNNING:
        key = keys.poll()
        status = engine.tick(key)
        snap = engine.snapshot()
        step += 1
        if logger is not None:
            logger.log_snapshot(step, snap, key)
        renderer.draw(snap)

    if logger is not None:
        logger.flush()
    renderer.show_game_over(snap)
    keys.wait()
    return snap

def _play_terminal(stdscr, cfg: AppConfig, engine: TickEngine, logger: Optional[Logger]) -> Snapshot:
    from viz.keyboard_curses import CursesKeyboard
    from viz.renderer_curses import CursesRenderer

    rend = CursesRenderer(stdscr)
    rend.open(cfg)
    kbd = CursesKeyboard(stdscr, cfg.tick_ms)
    try:
        return run_game(engine, kbd, rend, logger)
    finally:
        rend.close()

def _play_pygame(cfg: AppConfig, engine: TickEngine, logger: Optional[Logger]) -> Snapshot:
    from viz.keyboard import Keyboard
    from viz.renderer_pygame import PygameRenderer

    rend = PygameRenderer()
    rend.open(cfg)
    kbd = Keyboard(fps=cfg.fps)
    try:
        return run_game(engine, kbd, rend, logger)
    finally:
        rend.close()

def main(cfg: Optional[AppConfig] = None) -> Snapshot:
    cfg = cfg or AppConfig()

    # seeded once here; None draws from OS entropy
    state = GameState(cfg)
    engine = TickEngine(state)

    logger = CSVLogger(cfg.log_path, fieldnames=ALL_KEYS) if cfg.log_path else None
    try:
        if cfg.ui == "pygame":
            return _play_pygame(cfg, engine, logger)
        return curses.wrapper(_play_terminal, cfg, engine, logger)
    finally:
        if logger is not None:
            logger.close()
