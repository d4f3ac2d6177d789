# viz/frame.py
from __future__ import annotations
from typing import List, Tuple
import numpy as np
from core.interfaces import Snapshot

WALL, HEAD, BODY, FRUIT, EMPTY = "#", "O", "o", "*", " "
HELP_LINE = "Use WASD to move, X to quit."

def compose_grid(s: Snapshot) -> np.ndarray:
    """(grid_h, grid_w) array of single characters for one snapshot."""
    H, W = s.grid_h, s.grid_w
    grid = np.full((H, W), EMPTY, dtype="<U1")
    grid[0, :] = WALL; grid[H - 1, :] = WALL
    grid[:, 0] = WALL; grid[:, W - 1] = WALL

    for (x, y) in s.body:
        grid[y, x] = BODY
    fx, fy = s.fruit
    grid[fy, fx] = FRUIT
    hx, hy = s.head
    # head may sit on the wall on the fatal frame
    if 0 <= hx < W and 0 <= hy < H:
        grid[hy, hx] = HEAD
    return grid

def frame_lines(s: Snapshot) -> List[str]:
    """Board rows followed by the score and help lines."""
    rows = ["".join(r) for r in compose_grid(s)]
    rows.append(f" Score: {s.score}")
    rows.append(f" {HELP_LINE}")
    return rows

def _centered(s: Snapshot, row: int, text: str) -> Tuple[int, int, str]:
    return row, max(0, (s.grid_w - len(text)) // 2), text

def overlay_lines(s: Snapshot, game_over: bool = False) -> List[Tuple[int, int, str]]:
    """(row, col, text) items drawn on top of the board."""
    mid = s.grid_h // 2
    if game_over:
        return [
            _centered(s, mid, "GAME OVER!"),
            _centered(s, mid + 1, f"Final Score: {s.score}"),
            _centered(s, mid + 2, "Press any key to exit..."),
        ]
    if s.message:
        return [_centered(s, mid, s.message)]
    return []

def render_text(s: Snapshot, game_over: bool = False) -> List[str]:
    """Frame rows with overlays burned in; what a plain text surface shows."""
    rows = [list(r) for r in frame_lines(s)]
    for row, col, text in overlay_lines(s, game_over):
        line = rows[row]
        end = col + len(text)
        if end > len(line):
            line.extend(EMPTY * (end - len(line)))
        line[col:end] = list(text)
    return ["".join(r) for r in rows]
