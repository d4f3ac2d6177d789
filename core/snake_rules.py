# core/snake_rules.py  (game state only, no curses/pygame)
from __future__ import annotations
from typing import List, Optional
import random
from .interfaces import Cell, Direction, Snapshot, Status
from config import AppConfig

class GameState:
    """Owns the snake, fruit, score, direction and status of one game.

    Nothing here does I/O; the engine mutates it and renderers only ever
    see ``snapshot()``.
    """

    def __init__(self, cfg: AppConfig):
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.rng = random.Random(cfg.seed)
        self.initialize()

    def seed(self, seed: Optional[int]):
        self.rng = random.Random(seed)

    def initialize(self) -> Snapshot:
        self.score = 0
        self.status = Status.RUNNING
        self.direction = Direction.NONE
        self.head: Cell = (self.cfg.grid_w // 2, self.cfg.grid_h // 2)
        self.body: List[Cell] = []
        self.fruit: Cell = self.head
        self.reason: Optional[str] = None
        self.message: Optional[str] = None
        self.tick_count = 0
        if not self.place_fruit():
            self.terminate("board_full")
        return self.snapshot()

    # ---- queries ----
    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 1 <= x <= self.cfg.grid_w - 2 and 1 <= y <= self.cfg.grid_h - 2

    def occupies(self, cell: Cell) -> bool:
        return cell == self.head or cell in self.body

    @property
    def terminated(self) -> bool:
        return self.status is Status.TERMINATED

    # ---- mutations ----
    def place_fruit(self) -> bool:
        """Move the fruit to a random free cell inside the walls.

        Random probes come first; after ``cfg.fruit_attempts`` misses the free
        cells are enumerated and one is picked uniformly. Returns False (fruit
        untouched) when the snake covers the whole playable area.
        """
        w, h = self.cfg.grid_w, self.cfg.grid_h
        for _ in range(self.cfg.fruit_attempts):
            cand = (self.rng.randint(1, w - 2), self.rng.randint(1, h - 2))
            if not self.occupies(cand):
                self.fruit = cand
                return True

        occ = set(self.body)
        occ.add(self.head)
        free = [(x, y) for x in range(1, w - 1) for y in range(1, h - 1) if (x, y) not in occ]
        if not free:
            return False
        self.fruit = self.rng.choice(free)
        return True

    def set_direction(self, requested: Direction) -> None:
        if requested is Direction.NONE:
            return
        # any first move is allowed; after that a 180° turn is ignored
        if self.direction is not Direction.NONE and requested.is_opposite_of(self.direction):
            return
        self.direction = requested

    def terminate(self, reason: str) -> None:
        self.status = Status.TERMINATED
        self.reason = reason
        self.message = f"GAME OVER! Final Score: {self.score}"

    def snapshot(self) -> Snapshot:
        return Snapshot(
            grid_w=self.cfg.grid_w,
            grid_h=self.cfg.grid_h,
            head=self.head,
            body=tuple(self.body),
            fruit=self.fruit,
            score=self.score,
            direction=self.direction,
            status=self.status,
            reason=self.reason,
            message=self.message,
            tick_count=self.tick_count,
            max_len=self.cfg.max_len,
        )
