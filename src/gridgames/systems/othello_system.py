from __future__ import annotations

import logging
from typing import Any

from esper import World

from gridgames.components.cell_states import OTHELLO_STATE_COUNT, Disc, OthelloStatus, opposite
from gridgames.components.control_button import ControlAction
from gridgames.components.grid import Grid
from gridgames.components.othello_state import OthelloState
from gridgames.constants import (
    HIGHLIGHT_DELAY,
    HIGHLIGHT_INTERVAL,
    OTHELLO_DEFAULT_SIZE,
    OTHELLO_MIN_SIZE,
)
from gridgames.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_BOARD_RESIZED,
    EVENT_CONTROL_ACTIVATED,
    EVENT_DISC_PLACED,
    EVENT_GAME_OVER,
    EVENT_HIGHLIGHTS_CHANGED,
    EVENT_TICK,
    EVENT_TILE_CLICK,
    EVENT_TURN_ADVANCED,
    EVENT_TURN_SKIPPED,
    EventBus,
)
from gridgames.systems import othello_rules
from gridgames.systems.snapshot import SnapshotError, validate_snapshot

logger = logging.getLogger(__name__)


class OthelloSystem:
    """Turn-based Othello on a single board entity.

    Flow after a legal placement:
      - the disc is set, captured lines flip, the turn passes to the opponent;
      - if the opponent has no legal move (NOMOVES) the turn comes straight back;
      - if nobody can move or the board is full (GAMEOVER) the result is fixed
        and clicks are ignored until reset.
    Illegal clicks are ignored without logging.
    """

    def __init__(self, world: World, event_bus: EventBus, size: int = OTHELLO_DEFAULT_SIZE):
        self.world = world
        self.event_bus = event_bus
        size = max(size - size % 2, OTHELLO_MIN_SIZE)
        self.size = size
        self.board_entity = self.world.create_entity(
            Grid(rows=size, cols=size, states=OTHELLO_STATE_COUNT),
            OthelloState(),
        )
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_CONTROL_ACTIVATED, self.on_control_activated)
        self.reset()

    @property
    def grid(self) -> Grid:
        return self.world.component_for_entity(self.board_entity, Grid)

    @property
    def state(self) -> OthelloState:
        return self.world.component_for_entity(self.board_entity, OthelloState)

    @property
    def status(self) -> OthelloStatus:
        return othello_rules.compute_status(self.grid, self.state.turn)

    def on_tile_click(self, sender, **payload):
        row = payload.get("row")
        col = payload.get("col")
        if row is None or col is None:
            return
        self.attempt_place(col, row)

    def on_control_activated(self, sender, **payload):
        if payload.get("action") == ControlAction.RESET:
            self.reset()

    def on_tick(self, sender, **payload):
        # Move hints stay hidden for HIGHLIGHT_DELAY seconds after a move, then blink.
        dt = float(payload.get("dt", 0.0))
        state = self.state
        if state.game_over:
            return
        state.elapsed += dt
        if state.elapsed < HIGHLIGHT_DELAY:
            return
        state.blink_elapsed += dt
        if state.blink_elapsed > HIGHLIGHT_INTERVAL:
            state.blink_elapsed = 0.0
            if state.highlights_visible:
                self.hide_highlights()
            else:
                self.show_highlights()

    def attempt_place(self, col: int, row: int) -> bool:
        state = self.state
        grid = self.grid
        if state.game_over:
            return False
        mover = state.turn
        if not othello_rules.is_valid_move(grid, col, row, mover):
            return False
        grid.set(col, row, mover)
        flipped = othello_rules.place(grid, col, row, mover)
        self._clear_highlights()
        self.event_bus.emit(EVENT_DISC_PLACED, col=col, row=row, color=mover, flipped=flipped)
        state.turn = opposite(mover)
        self.event_bus.emit(EVENT_TURN_ADVANCED, previous=mover, current=state.turn)
        self._settle_turn()
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="place")
        return True

    def reset(self) -> None:
        grid = self.grid
        state = self.state
        if not _holds_opening(grid):
            # Loaded boards that are odd or too small go back to the configured size.
            grid.resize(self.size, minimum=OTHELLO_MIN_SIZE)
            self.event_bus.emit(EVENT_BOARD_RESIZED, rows=grid.rows, cols=grid.cols)
        othello_rules.set_opening(grid)
        state.turn = Disc.WHITE
        state.result = None
        self._clear_highlights()
        self._settle_turn()
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="reset")

    def load_snapshot(self, data: Any) -> bool:
        """Adopt a saved board; WHITE moves next unless WHITE is stuck."""
        try:
            rows = validate_snapshot(data)
        except SnapshotError as exc:
            logger.warning("Othello snapshot rejected: %s", exc)
            return False
        grid = self.grid
        state = self.state
        reshaped = not grid.same_shape(rows)
        grid.replace(rows)
        state.turn = Disc.WHITE
        state.result = None
        self._clear_highlights()
        if reshaped:
            self.event_bus.emit(EVENT_BOARD_RESIZED, rows=grid.rows, cols=grid.cols)
        self._settle_turn()
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="load")
        return True

    def legal_moves(self):
        """Positions the player to move may take; recomputed on every call."""
        return othello_rules.legal_moves(self.grid, self.state.turn)

    def show_highlights(self) -> None:
        state = self.state
        state.highlighted = self.legal_moves()
        state.highlights_visible = True
        self.event_bus.emit(EVENT_HIGHLIGHTS_CHANGED, visible=True, positions=state.highlighted)

    def hide_highlights(self) -> None:
        state = self.state
        state.highlights_visible = False
        self.event_bus.emit(EVENT_HIGHLIGHTS_CHANGED, visible=False, positions=state.highlighted)

    def _clear_highlights(self) -> None:
        state = self.state
        was_visible = state.highlights_visible
        state.elapsed = 0.0
        state.blink_elapsed = 0.0
        state.highlights_visible = False
        state.highlighted = frozenset()
        if was_visible:
            self.event_bus.emit(EVENT_HIGHLIGHTS_CHANGED, visible=False, positions=frozenset())

    def _settle_turn(self) -> None:
        state = self.state
        status = self.status
        if status is OthelloStatus.NOMOVES:
            skipped = state.turn
            state.turn = opposite(skipped)
            logger.debug("%s has no legal move; %s plays again", skipped.name, state.turn.name)
            self.event_bus.emit(EVENT_TURN_SKIPPED, skipped=skipped, current=state.turn)
        elif status is OthelloStatus.GAMEOVER:
            state.result = othello_rules.decide_result(self.grid)
            logger.info(
                "Othello game over: white %d, black %d",
                state.result.white,
                state.result.black,
            )
            self.event_bus.emit(EVENT_GAME_OVER, result=state.result)


def _holds_opening(grid: Grid) -> bool:
    """True when the centred opening block fits and leaves room to play."""
    for side in (grid.rows, grid.cols):
        if side < OTHELLO_MIN_SIZE or side % 2:
            return False
    return True
