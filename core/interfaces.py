# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Protocol

Cell = Tuple[int, int]


class Direction(Enum):
    NONE = 0
    LEFT = 1
    DOWN = 2
    RIGHT = 3
    UP = 4

    @property
    def delta(self) -> Cell:
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def is_opposite_of(self, other: "Direction") -> bool:
        # NONE is its own "opposite" in the table but never counts as a reversal
        return self is not Direction.NONE and self.opposite is other


_DELTAS = {
    Direction.NONE: (0, 0),
    Direction.LEFT: (-1, 0),
    Direction.DOWN: (0, 1),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
}

_OPPOSITES = {
    Direction.NONE: Direction.NONE,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


class Status(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class Key(Enum):
    """Abstract key symbol handed to the engine once per tick."""
    NO_KEY = "no_key"
    LEFT = "left"
    DOWN = "down"
    RIGHT = "right"
    UP = "up"
    QUIT = "quit"
    UNRECOGNIZED = "unrecognized"


KEY_TO_DIRECTION = {
    Key.LEFT: Direction.LEFT,
    Key.DOWN: Direction.DOWN,
    Key.RIGHT: Direction.RIGHT,
    Key.UP: Direction.UP,
}


@dataclass(frozen=True)
class Snapshot:
    grid_w: int
    grid_h: int
    head: Cell
    body: Tuple[Cell, ...]          # segment 0 trails the head
    fruit: Cell
    score: int
    direction: Direction
    status: Status
    reason: str | None
    message: str | None             # optional status line for the renderer
    tick_count: int
    max_len: int

    @property
    def terminated(self) -> bool:
        return self.status is Status.TERMINATED


class KeySource(Protocol):
    def poll(self) -> Key: ...
    def wait(self) -> None: ...
