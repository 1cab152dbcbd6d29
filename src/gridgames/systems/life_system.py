from __future__ import annotations

import logging
import random
from typing import Any

from esper import World

from gridgames.components.cell_states import LIFE_STATE_COUNT, LifeCell
from gridgames.components.control_button import ControlAction
from gridgames.components.grid import Grid
from gridgames.components.life_state import LifeState
from gridgames.constants import (
    LIFE_DEFAULT_SIZE,
    LIFE_MIN_SIZE,
    LIFE_UPDATE_RATE_MAX,
    LIFE_UPDATE_RATE_MIN,
    LIFE_UPDATE_RATE_STEP,
)
from gridgames.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_BOARD_RESIZED,
    EVENT_CONTROL_ACTIVATED,
    EVENT_GENERATION_ADVANCED,
    EVENT_LIFE_SPEED_CHANGED,
    EVENT_TICK,
    EventBus,
)
from gridgames.systems import life_rules
from gridgames.systems.snapshot import SnapshotError, validate_snapshot

logger = logging.getLogger(__name__)


class LifeSystem:
    """Owns the Life board entity and advances it on the frame tick.

    One generation runs every ``update_rate`` ticks. Control actions
    (randomize, reset, speed, resize) arrive through EVENT_CONTROL_ACTIVATED;
    loading goes through ``load_snapshot`` which the snapshot system calls.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        size: int = LIFE_DEFAULT_SIZE,
        *,
        rng: random.Random | None = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.rng = rng or getattr(world, "random", None) or random.Random()
        size = max(size, LIFE_MIN_SIZE)
        self.board_entity = self.world.create_entity(
            Grid(rows=size, cols=size, states=LIFE_STATE_COUNT),
            LifeState(),
        )
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_CONTROL_ACTIVATED, self.on_control_activated)
        self.randomize()

    @property
    def grid(self) -> Grid:
        return self.world.component_for_entity(self.board_entity, Grid)

    @property
    def state(self) -> LifeState:
        return self.world.component_for_entity(self.board_entity, LifeState)

    def on_tick(self, sender, **payload):
        state = self.state
        state.frame += 1
        if state.frame % state.update_rate == 0:
            self.step()

    def on_control_activated(self, sender, **payload):
        action = payload.get("action")
        if action == ControlAction.RANDOMIZE:
            self.randomize()
        elif action == ControlAction.RESET:
            self.reset()
        elif action == ControlAction.FASTER:
            self.faster()
        elif action == ControlAction.SLOWER:
            self.slower()
        elif action == ControlAction.GROW:
            # Loaded boards may sit below the minimum; growing jumps straight to it.
            self.resize(max(self.grid.rows + 1, LIFE_MIN_SIZE))
        elif action == ControlAction.SHRINK:
            self.resize(self.grid.rows - 1)

    def step(self) -> None:
        grid = self.grid
        life_rules.step(grid)
        state = self.state
        state.generation += 1
        self.event_bus.emit(
            EVENT_GENERATION_ADVANCED,
            generation=state.generation,
            alive=grid.count(LifeCell.ALIVE),
        )

    def randomize(self) -> int:
        """Reseed the board and remember it as the reset point."""
        alive = life_rules.randomize(self.grid, self.rng)
        self._remember()
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="randomize")
        return alive

    def reset(self) -> bool:
        """Restore the remembered board; no-op when nothing matching was saved."""
        grid = self.grid
        state = self.state
        saved = state.saved_state
        if saved is None or not grid.same_shape(saved):
            return False
        for row, line in enumerate(saved):
            for col, value in enumerate(line):
                grid.set(col, row, value)
        state.generation = 0
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="reset")
        return True

    def resize(self, size: int) -> bool:
        grid = self.grid
        if not grid.resize(size, minimum=LIFE_MIN_SIZE):
            logger.debug("Ignoring Life resize to %d (minimum %d)", size, LIFE_MIN_SIZE)
            return False
        self.event_bus.emit(EVENT_BOARD_RESIZED, rows=grid.rows, cols=grid.cols)
        self.randomize()
        return True

    def load_snapshot(self, data: Any) -> bool:
        """Replace the board with ``data``; logs and leaves the board alone if malformed."""
        try:
            rows = validate_snapshot(data)
        except SnapshotError as exc:
            logger.warning("Life snapshot rejected: %s", exc)
            return False
        grid = self.grid
        reshaped = not grid.same_shape(rows)
        grid.replace(rows)
        self._remember()
        if reshaped:
            self.event_bus.emit(EVENT_BOARD_RESIZED, rows=grid.rows, cols=grid.cols)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="load")
        return True

    def faster(self) -> int:
        state = self.state
        if state.update_rate > LIFE_UPDATE_RATE_MIN:
            state.update_rate -= LIFE_UPDATE_RATE_STEP
            self.event_bus.emit(EVENT_LIFE_SPEED_CHANGED, update_rate=state.update_rate)
        return state.update_rate

    def slower(self) -> int:
        state = self.state
        if state.update_rate < LIFE_UPDATE_RATE_MAX:
            state.update_rate += LIFE_UPDATE_RATE_STEP
            self.event_bus.emit(EVENT_LIFE_SPEED_CHANGED, update_rate=state.update_rate)
        return state.update_rate

    def _remember(self) -> None:
        state = self.state
        state.saved_state = self.grid.copy_cells()
        state.generation = 0
