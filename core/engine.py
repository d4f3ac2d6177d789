# core/engine.py
from __future__ import annotations
from .interfaces import Key, KEY_TO_DIRECTION, Snapshot, Status
from .snake_rules import GameState

MAX_LENGTH_NOTICE = "MAX LENGTH!"

class TickEngine:
    """Advances a GameState by one tick per call to ``tick``."""

    def __init__(self, state: GameState):
        self.state = state

    def snapshot(self) -> Snapshot:
        return self.state.snapshot()

    def tick(self, key: Key = Key.NO_KEY) -> Status:
        s = self.state
        if s.terminated:
            return s.status

        if key is Key.QUIT:
            s.terminate("quit")
            return s.status

        requested = KEY_TO_DIRECTION.get(key)
        if requested is not None:
            s.set_direction(requested)

        return self._physics()

    def _physics(self) -> Status:
        s = self.state
        s.tick_count += 1
        # cap notice only lives for the tick that produced it
        s.message = None

        prev_head = s.head
        dx, dy = s.direction.delta
        new_head = (prev_head[0] + dx, prev_head[1] + dy)

        # the fatal frame keeps the head where it crashed
        if not s.in_bounds(new_head):
            s.head = new_head
            s.terminate("wall")
            return s.status
        if new_head in s.body:
            s.head = new_head
            s.terminate("self")
            return s.status

        s.head = new_head

        ate = new_head == s.fruit
        if ate:
            s.score += s.cfg.fruit_reward
            if len(s.body) < s.cfg.max_len:
                s.body.append(prev_head)  # overwritten by the shift below
            else:
                s.message = MAX_LENGTH_NOTICE

        if s.body:
            for i in range(len(s.body) - 1, 0, -1):
                s.body[i] = s.body[i - 1]
            s.body[0] = prev_head

        # relocate after the shift so the fruit avoids the final body
        if ate and not s.place_fruit():
            s.terminate("board_full")
        return s.status
