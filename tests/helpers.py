from __future__ import annotations

import random

from gridgames.components.game_state import GameMode
from gridgames.events.bus import EventBus, EVENT_TICK
from gridgames.systems.life_system import LifeSystem
from gridgames.systems.othello_system import OthelloSystem
from gridgames.world import create_world


def make_life(size: int = 10, seed: int = 1234):
    bus = EventBus()
    world = create_world(GameMode.LIFE, rng=random.Random(seed))
    system = LifeSystem(world, bus, size)
    return bus, world, system


def make_othello(size: int = 8):
    bus = EventBus()
    world = create_world(GameMode.OTHELLO)
    system = OthelloSystem(world, bus, size)
    return bus, world, system


def record(bus: EventBus, name: str) -> list[dict]:
    events: list[dict] = []
    bus.subscribe(name, lambda sender, **payload: events.append(payload))
    return events


def drive_ticks(bus: EventBus, count: int, dt: float = 1 / 60) -> None:
    for _ in range(count):
        bus.emit(EVENT_TICK, dt=dt)


def alive_positions(grid) -> set[tuple[int, int]]:
    return {(col, row) for col, row in grid.positions() if grid.get(col, row) == 1}


def grid_from_positions(rows: int, cols: int, alive) -> list[list[int]]:
    cells = [[0] * cols for _ in range(rows)]
    for col, row in alive:
        cells[row][col] = 1
    return cells
