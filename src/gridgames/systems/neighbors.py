"""Adjacency facts derived from a grid: Life neighbor counts and Othello capture lines.

Nothing here mutates the grid.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from gridgames.components.cell_states import Disc, LifeCell
from gridgames.components.grid import Grid, Position

DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (1, 0), (1, 1), (0, 1), (-1, 1),
    (-1, 0), (-1, -1), (0, -1), (1, -1),
)


class LineKind(Enum):
    BLOCKED = auto()     # first cell is off-board, empty, or the mover's own disc
    CAPTURABLE = auto()  # opponent run closed by a mover disc
    OPEN = auto()        # opponent run that runs into an empty cell or the edge


@dataclass(frozen=True, slots=True)
class LineScan:
    kind: LineKind
    end: Optional[Position] = None
    captured: Tuple[Position, ...] = field(default_factory=tuple)

    @property
    def capturable(self) -> bool:
        return self.kind is LineKind.CAPTURABLE


def count_life_neighbors(grid: Grid, col: int, row: int) -> int:
    """Number of ALIVE cells among the 8 surrounding positions; the edge counts as dead."""
    count = 0
    for dx, dy in DIRECTIONS:
        if grid.get(col + dx, row + dy) == LifeCell.ALIVE:
            count += 1
    return count


def scan_direction(
    grid: Grid,
    col: int,
    row: int,
    dx: int,
    dy: int,
    mover: Disc,
    opponent: Disc,
) -> LineScan:
    """Walk outward from (col, row) one step at a time and classify the line."""
    run: List[Position] = []
    x, y = col + dx, row + dy
    while True:
        value = grid.get(x, y)
        if value is None or value == Disc.EMPTY:
            break
        if value == opponent:
            run.append((x, y))
        elif value == mover:
            if run:
                return LineScan(LineKind.CAPTURABLE, end=(x, y), captured=tuple(run))
            break
        x += dx
        y += dy
    if run:
        return LineScan(LineKind.OPEN)
    return LineScan(LineKind.BLOCKED)
