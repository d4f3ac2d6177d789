# config.py
from dataclasses import dataclass, replace
from typing import Optional, Literal

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board (fixed for the lifetime of a process)
    grid_w: int = 40
    grid_h: int = 20
    max_len: int = 100
    seed: Optional[int] = None

    # gameplay
    fruit_reward: int = 10
    fruit_attempts: int = 1000       # random probes before scanning free cells
    tick_ms: int = 150               # loop cadence == max wait of the key poll

    # shell
    ui: Literal["terminal", "pygame"] = "terminal"
    log_path: Optional[str] = None

    # render (pygame window)
    render_cell: int = 20
    render_title: str = "Snake"
    render_show_hud: bool = True

    def __post_init__(self):
        if self.grid_w < 3 or self.grid_h < 3:
            raise ValueError(f"board must be at least 3x3, got {self.grid_w}x{self.grid_h}")
        if self.max_len < 0:
            raise ValueError(f"max_len must be >= 0, got {self.max_len}")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be > 0, got {self.tick_ms}")

    @property
    def fps(self) -> float:
        return 1000.0 / self.tick_ms

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
