"""Conway's Game of Life transition and seeding rules."""
from __future__ import annotations

import random
from typing import List

from gridgames.components.cell_states import LifeCell
from gridgames.components.grid import Grid
from gridgames.systems.neighbors import count_life_neighbors

SURVIVAL_COUNTS = frozenset({2, 3})
BIRTH_COUNTS = frozenset({3})


def next_state(state: int, live_neighbors: int) -> LifeCell:
    if state == LifeCell.ALIVE:
        return LifeCell.ALIVE if live_neighbors in SURVIVAL_COUNTS else LifeCell.DEAD
    return LifeCell.ALIVE if live_neighbors in BIRTH_COUNTS else LifeCell.DEAD


def next_generation(grid: Grid) -> List[List[int]]:
    """Compute the following generation without touching ``grid``."""
    return [
        [int(next_state(grid.cells[row][col], count_life_neighbors(grid, col, row))) for col in range(grid.cols)]
        for row in range(grid.rows)
    ]


def step(grid: Grid) -> None:
    """Advance ``grid`` one generation.

    Every next state is computed from the pre-step board before any cell is
    written, so neighbor counts never observe a half-updated generation.
    """
    fresh = next_generation(grid)
    for row, line in enumerate(fresh):
        grid.cells[row][:] = line


def random_population(rows: int, rng: random.Random) -> int:
    """Pick how many cells to bring alive when seeding a board.

    Draws uniformly from [L // 4, L // 3) with L = rows * rows. The row count
    is squared rather than multiplied by the column count; boards created by
    resizing are square so the two agree, loaded rectangular boards do not.
    """
    area = rows * rows
    low, high = area // 4, area // 3
    if high <= low:
        return low
    return rng.randrange(low, high)


def randomize(grid: Grid, rng: random.Random) -> int:
    """Kill every cell, then bring a random sample of cells alive. Returns the sample size."""
    for line in grid.cells:
        line[:] = [int(LifeCell.DEAD)] * grid.cols
    positions = list(grid.positions())
    count = min(random_population(grid.rows, rng), len(positions))
    for col, row in rng.sample(positions, count):
        grid.set(col, row, LifeCell.ALIVE)
    return count
