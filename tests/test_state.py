# tests/test_state.py
import pytest

from config import AppConfig
from core.interfaces import Direction, Status
from core.snake_rules import GameState

def test_initialize_scenario_a(state_factory):
    s = state_factory()
    snap = s.initialize()
    assert (snap.grid_w, snap.grid_h) == (40, 20)
    assert snap.head == (20, 10)
    assert snap.body == ()
    assert snap.direction is Direction.NONE
    assert snap.score == 0
    assert snap.status is Status.RUNNING
    fx, fy = snap.fruit
    assert 1 <= fx <= 38 and 1 <= fy <= 18
    assert snap.fruit != (20, 10)

def test_initialize_resets_a_finished_game(state_factory):
    s = state_factory()
    s.score = 50
    s.body = [(19, 10), (18, 10)]
    s.direction = Direction.RIGHT
    s.terminate("wall")
    snap = s.initialize()
    assert snap.status is Status.RUNNING
    assert snap.score == 0 and snap.body == ()
    assert snap.reason is None and snap.message is None
    assert snap.tick_count == 0

def test_class_instead_of_instance_rejected():
    with pytest.raises(TypeError):
        GameState(AppConfig)

@pytest.mark.parametrize("kw", [dict(grid_w=2), dict(grid_h=1), dict(max_len=-1), dict(tick_ms=0)])
def test_config_validation(kw):
    with pytest.raises(ValueError):
        AppConfig(**kw)

@pytest.mark.parametrize("cur,req", [
    (Direction.RIGHT, Direction.LEFT),
    (Direction.LEFT, Direction.RIGHT),
    (Direction.UP, Direction.DOWN),
    (Direction.DOWN, Direction.UP),
])
def test_reversal_is_ignored(state_factory, cur, req):
    s = state_factory()
    s.direction = cur
    s.set_direction(req)
    assert s.direction is cur

@pytest.mark.parametrize("cur", [Direction.LEFT, Direction.DOWN, Direction.RIGHT, Direction.UP])
def test_non_opposite_requests_accepted(state_factory, cur):
    for req in (Direction.LEFT, Direction.DOWN, Direction.RIGHT, Direction.UP):
        if req is cur.opposite:
            continue
        s = state_factory()
        s.direction = cur
        s.set_direction(req)
        assert s.direction is req

@pytest.mark.parametrize("req", [Direction.LEFT, Direction.DOWN, Direction.RIGHT, Direction.UP])
def test_first_move_from_none_always_accepted(state_factory, req):
    s = state_factory()
    assert s.direction is Direction.NONE
    s.set_direction(req)
    assert s.direction is req

def test_requesting_none_keeps_direction(state_factory):
    s = state_factory()
    s.direction = Direction.UP
    s.set_direction(Direction.NONE)
    assert s.direction is Direction.UP

def test_direction_relation():
    assert Direction.LEFT.delta == (-1, 0)
    assert Direction.UP.delta == (0, -1)
    assert Direction.NONE.delta == (0, 0)
    assert Direction.LEFT.is_opposite_of(Direction.RIGHT)
    assert not Direction.LEFT.is_opposite_of(Direction.UP)
    assert not Direction.NONE.is_opposite_of(Direction.NONE)

def test_place_fruit_avoids_snake(state_factory):
    s = state_factory()
    s.head = (5, 5)
    s.body = [(x, 5) for x in range(6, 30)] + [(x, 6) for x in range(1, 39)]
    for _ in range(200):
        assert s.place_fruit()
        assert not s.occupies(s.fruit)
        assert s.in_bounds(s.fruit)

def test_place_fruit_finds_last_free_cell(state_factory):
    # 5x4 board: playable area is 3x2
    s = state_factory(grid_w=5, grid_h=4, fruit_attempts=0)
    s.head = (1, 1)
    s.body = [(2, 1), (3, 1), (3, 2), (2, 2)]
    assert s.place_fruit()
    assert s.fruit == (1, 2)

def test_place_fruit_reports_full_board(state_factory):
    s = state_factory(grid_w=5, grid_h=4)
    s.head = (1, 1)
    s.body = [(2, 1), (3, 1), (3, 2), (2, 2), (1, 2)]
    before = s.fruit
    assert s.place_fruit() is False
    assert s.fruit == before

def test_snapshot_is_a_copy(state_factory):
    s = state_factory()
    s.body = [(19, 10)]
    snap = s.snapshot()
    s.body.append((18, 10))
    assert snap.body == ((19, 10),)

def test_smallest_board_starts_full(state_factory):
    # 3x3 leaves a single playable cell, taken by the head
    s = state_factory(grid_w=3, grid_h=3)
    assert s.head == (1, 1)
    assert s.status is Status.TERMINATED
    assert s.reason == "board_full"
