# runners/tick_log.py
from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol

from core.interfaces import Key, Snapshot

# one row per tick; the header is written once per file
ALL_KEYS = [
    "step",
    "tick", "key", "score", "body_len",
    "head_x", "head_y", "fruit_x", "fruit_y",
    "direction", "status", "reason",
]

class Logger(Protocol):
    def log(self, step: int, scalars: Dict[str, Any]) -> None: ...
    def log_snapshot(self, step: int, snap: Snapshot, key: Key) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Per-tick game trace appended to a CSV file.

    ``log_snapshot`` is what the game loop calls; ``log`` takes free-form
    rows and is used for anything outside the fixed tick schema.
    """
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log_snapshot(self, step: int, snap: Snapshot, key: Key) -> None:
        hx, hy = snap.head
        fx, fy = snap.fruit
        self.log(step, {
            "tick": snap.tick_count,
            "key": key.value,
            "score": snap.score,
            "body_len": len(snap.body),
            "head_x": hx, "head_y": hy,
            "fruit_x": fx, "fruit_y": fy,
            "direction": snap.direction.name,
            "status": snap.status.value,
            "reason": snap.reason or "",
        })

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        row = {"step": step, **scalars}
        if self._writer is None:
            # schema is fixed by the first row unless given up front
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames or list(row),
                extrasaction="ignore",
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(row)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()
