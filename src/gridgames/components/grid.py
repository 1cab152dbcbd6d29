from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

Position = Tuple[int, int]  # (col, row)


@dataclass(slots=True)
class Grid:
    """Rectangular board of small integer state codes.

    Coordinates are (col, row): ``col`` is the x axis and ``row`` the y axis,
    with row 0 at the top of the board. ``states`` is the number of valid codes
    for the game owning the grid; every stored code lies in ``range(states)``.
    """

    rows: int
    cols: int
    states: int
    cells: List[List[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"grid needs at least one row and column, got {self.rows}x{self.cols}")
        if self.states < 2:
            raise ValueError(f"grid needs at least two states, got {self.states}")
        if not self.cells:
            self.cells = [[0] * self.cols for _ in range(self.rows)]
        assert len(self.cells) == self.rows, "cells/rows mismatch"
        assert all(len(line) == self.cols for line in self.cells), "cells/cols mismatch"

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, col: int, row: int) -> int | None:
        """Return the code at (col, row) or None when outside the board."""
        if not self.in_bounds(col, row):
            return None
        return self.cells[row][col]

    def set(self, col: int, row: int, state: int) -> None:
        if not self.in_bounds(col, row):
            raise IndexError(f"({col}, {row}) is outside a {self.cols}x{self.rows} grid")
        self.cells[row][col] = int(state) % self.states

    def flatten(self) -> Iterator[int]:
        for line in self.cells:
            yield from line

    def positions(self) -> Iterator[Position]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield col, row

    def count(self, state: int) -> int:
        return sum(1 for value in self.flatten() if value == state)

    def copy_cells(self) -> List[List[int]]:
        return [list(line) for line in self.cells]

    def same_shape(self, cells: Sequence[Sequence[int]]) -> bool:
        return len(cells) == self.rows and all(len(line) == self.cols for line in cells)

    def resize(self, size: int, minimum: int = 1) -> bool:
        """Replace the board with an empty ``size`` x ``size`` grid.

        Old contents are discarded. Sizes below ``minimum`` are rejected and
        leave the grid untouched.
        """
        if size < max(1, minimum):
            return False
        self.rows = size
        self.cols = size
        self.cells = [[0] * size for _ in range(size)]
        return True

    def replace(self, cells: Sequence[Sequence[int]]) -> None:
        """Adopt the shape and content of a validated rectangular array."""
        fresh = [[int(value) % self.states for value in line] for line in cells]
        if not fresh or not fresh[0]:
            raise ValueError("replacement cells must be a non-empty 2D array")
        width = len(fresh[0])
        if any(len(line) != width for line in fresh):
            raise ValueError("replacement cells must be rectangular")
        # Single assignment of the new rows so readers never see a mixed board.
        self.rows, self.cols, self.cells = len(fresh), width, fresh


def create_grid(rows: int, cols: int, states: int, fill: int = 0) -> Grid:
    if rows < 1 or cols < 1:
        raise ValueError(f"grid needs at least one row and column, got {rows}x{cols}")
    value = int(fill) % states
    return Grid(rows=rows, cols=cols, states=states, cells=[[value] * cols for _ in range(rows)])
