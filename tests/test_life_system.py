from gridgames.components.control_button import ControlAction
from gridgames.components.grid import Grid
from gridgames.components.life_state import LifeState
from gridgames.constants import LIFE_UPDATE_RATE
from gridgames.events.bus import (
    EVENT_BOARD_RESIZED,
    EVENT_CONTROL_ACTIVATED,
    EVENT_GENERATION_ADVANCED,
)

from tests.helpers import alive_positions, drive_ticks, grid_from_positions, make_life, record

BLINKER = grid_from_positions(5, 5, [(1, 2), (2, 2), (3, 2)])


def test_board_entity_created_and_seeded():
    bus, world, life = make_life(size=10)
    grids = list(world.get_component(Grid))
    assert len(grids) == 1
    grid = grids[0][1]
    assert (grid.rows, grid.cols) == (10, 10)
    assert 25 <= grid.count(1) < 33
    assert life.state.saved_state == grid.cells


def test_generation_runs_every_update_rate_ticks():
    bus, world, life = make_life(size=5)
    assert life.load_snapshot(BLINKER)
    generations = record(bus, EVENT_GENERATION_ADVANCED)
    drive_ticks(bus, LIFE_UPDATE_RATE - 1)
    assert generations == []
    assert alive_positions(life.grid) == {(1, 2), (2, 2), (3, 2)}
    drive_ticks(bus, 1)
    assert len(generations) == 1
    assert generations[0]["generation"] == 1
    assert alive_positions(life.grid) == {(2, 1), (2, 2), (2, 3)}


def test_speed_controls_step_by_five_within_bounds():
    bus, world, life = make_life()
    state = world.component_for_entity(life.board_entity, LifeState)
    for _ in range(10):
        bus.emit(EVENT_CONTROL_ACTIVATED, action=ControlAction.FASTER)
    assert state.update_rate == 10
    for _ in range(20):
        bus.emit(EVENT_CONTROL_ACTIVATED, action=ControlAction.SLOWER)
    assert state.update_rate == 60
    bus.emit(EVENT_CONTROL_ACTIVATED, action=ControlAction.FASTER)
    assert state.update_rate == 55


def test_reset_restores_last_randomized_board():
    bus, world, life = make_life(size=8)
    seeded = life.grid.copy_cells()
    life.step()
    life.step()
    bus.emit(EVENT_CONTROL_ACTIVATED, action=ControlAction.RESET)
    assert life.grid.cells == seeded
    assert life.state.generation == 0


def test_reset_after_resize_is_noop_when_shape_differs():
    bus, world, life = make_life(size=8)
    life.state.saved_state = [[1] * 8 for _ in range(8)]
    life.grid.resize(9, minimum=5)
    before = life.grid.copy_cells()
    assert not life.reset()
    assert life.grid.cells == before


def test_randomize_updates_saved_state():
    bus, world, life = make_life(size=10, seed=5)
    first = life.state.saved_state
    bus.emit(EVENT_CONTROL_ACTIVATED, action=ControlAction.RANDOMIZE)
    assert life.state.saved_state == life.grid.cells
    assert life.state.saved_state is not first


def test_grow_and_shrink_controls_resize_square_board():
    bus, world, life = make_life(size=6)
    resized = record(bus, EVENT_BOARD_RESIZED)
    bus.emit(EVENT_CONTROL_ACTIVATED, action=ControlAction.GROW)
    assert (life.grid.rows, life.grid.cols) == (7, 7)
    assert life.state.saved_state == life.grid.cells
    bus.emit(EVENT_CONTROL_ACTIVATED, action=ControlAction.SHRINK)
    bus.emit(EVENT_CONTROL_ACTIVATED, action=ControlAction.SHRINK)
    assert (life.grid.rows, life.grid.cols) == (5, 5)
    assert [(e["rows"], e["cols"]) for e in resized] == [(7, 7), (6, 6), (5, 5)]


def test_resize_below_minimum_rejected():
    bus, world, life = make_life(size=5)
    before = life.grid.copy_cells()
    bus.emit(EVENT_CONTROL_ACTIVATED, action=ControlAction.SHRINK)
    assert not life.resize(3)
    assert (life.grid.rows, life.grid.cols) == (5, 5)
    assert life.grid.cells == before


def test_load_snapshot_resizes_and_wraps_codes():
    bus, world, life = make_life(size=10)
    data = [[0, 1, 2], [3, 0, 0], [0, 0, 1], [1, 1, 1]]
    assert life.load_snapshot(data)
    assert (life.grid.rows, life.grid.cols) == (4, 3)
    assert life.grid.cells == [[0, 1, 0], [1, 0, 0], [0, 0, 1], [1, 1, 1]]
    assert life.state.saved_state == life.grid.cells


def test_malformed_snapshot_leaves_board_untouched(caplog):
    bus, world, life = make_life(size=6)
    before = life.grid.copy_cells()
    saved = life.state.saved_state
    for payload in ({"rows": []}, [], [[0, 1], [1]], [[0, "x"]], [[0, 1], 5], "[[0]]"):
        assert not life.load_snapshot(payload)
    assert life.grid.cells == before
    assert life.state.saved_state is saved
    assert "Life snapshot rejected" in caplog.text


def test_tile_clicks_do_nothing_for_life():
    bus, world, life = make_life(size=5)
    before = life.grid.copy_cells()
    bus.emit("tile_click", row=0, col=0)
    assert life.grid.cells == before


def test_grow_after_loading_a_tiny_board_jumps_to_minimum():
    bus, _, life = make_life(size=8)
    assert life.load_snapshot(grid_from_positions(3, 3, [(1, 1)]))
    bus.emit(EVENT_CONTROL_ACTIVATED, action=ControlAction.GROW)
    assert (life.grid.rows, life.grid.cols) == (5, 5)
    bus.emit(EVENT_CONTROL_ACTIVATED, action=ControlAction.GROW)
    assert life.grid.rows == 6
