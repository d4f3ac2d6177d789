# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

from config import AppConfig
from core.interfaces import Key

@pytest.fixture
def cfg():
    return AppConfig(seed=1234)

@pytest.fixture
def state_factory(cfg):
    from core.snake_rules import GameState
    def make(**overrides):
        return GameState(cfg.with_(**overrides) if overrides else cfg)
    return make

@pytest.fixture
def engine_factory(state_factory):
    from core.engine import TickEngine
    def make(**overrides):
        return TickEngine(state_factory(**overrides))
    return make

class ScriptedKeys:
    """Key source that replays a fixed script, then quits."""
    def __init__(self, keys):
        self._keys = list(keys)
        self.polls = 0
        self.waited = False

    def poll(self) -> Key:
        self.polls += 1
        if self._keys:
            return self._keys.pop(0)
        return Key.QUIT

    def wait(self) -> None:
        self.waited = True

@pytest.fixture
def scripted_keys():
    return ScriptedKeys
