import random

import pytest

from gridgames.components.grid import Grid
from gridgames.systems import life_rules

from tests.helpers import alive_positions, grid_from_positions


def reference_next(cells):
    """Full-snapshot Life step written independently of the engine."""
    rows, cols = len(cells), len(cells[0])
    out = []
    for r in range(rows):
        line = []
        for c in range(cols):
            n = 0
            for dr in (-1, 0, 1):
                for dc in (-1, 0, 1):
                    if (dr or dc) and 0 <= r + dr < rows and 0 <= c + dc < cols:
                        n += cells[r + dr][c + dc]
            alive = cells[r][c] == 1
            line.append(1 if (alive and n in (2, 3)) or (not alive and n == 3) else 0)
        out.append(line)
    return out


@pytest.mark.parametrize("alive, n, expected", [
    (1, 0, 0), (1, 1, 0), (1, 2, 1), (1, 3, 1), (1, 4, 0), (1, 8, 0),
    (0, 2, 0), (0, 3, 1), (0, 4, 0),
])
def test_next_state_table(alive, n, expected):
    assert life_rules.next_state(alive, n) == expected


@pytest.mark.parametrize("seed", [1, 7, 42, 99])
def test_step_matches_full_snapshot_reference(seed):
    rng = random.Random(seed)
    rows, cols = 9, 12
    cells = [[rng.randint(0, 1) for _ in range(cols)] for _ in range(rows)]
    grid = Grid(rows=rows, cols=cols, states=2, cells=[list(line) for line in cells])
    expected = reference_next(cells)
    life_rules.step(grid)
    assert grid.cells == expected
    life_rules.step(grid)
    assert grid.cells == reference_next(expected)


def test_blinker_oscillates():
    grid = Grid(rows=5, cols=5, states=2, cells=grid_from_positions(5, 5, [(1, 2), (2, 2), (3, 2)]))
    life_rules.step(grid)
    assert alive_positions(grid) == {(2, 1), (2, 2), (2, 3)}
    life_rules.step(grid)
    assert alive_positions(grid) == {(1, 2), (2, 2), (3, 2)}


def test_glider_moves_one_cell_diagonally_every_four_steps():
    glider = [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)]
    grid = Grid(rows=10, cols=10, states=2, cells=grid_from_positions(10, 10, glider))
    for _ in range(4):
        life_rules.step(grid)
    assert alive_positions(grid) == {(col + 1, row + 1) for col, row in glider}


def test_next_generation_leaves_grid_untouched():
    cells = grid_from_positions(5, 5, [(1, 2), (2, 2), (3, 2)])
    grid = Grid(rows=5, cols=5, states=2, cells=[list(line) for line in cells])
    life_rules.next_generation(grid)
    assert grid.cells == cells


def test_randomize_population_within_quarter_and_third():
    rng = random.Random(3)
    grid = Grid(rows=12, cols=12, states=2)
    for _ in range(20):
        count = life_rules.randomize(grid, rng)
        assert 36 <= count < 48
        assert grid.count(1) == count


def test_randomize_uses_row_count_squared():
    # 4 rows x 10 cols: population comes from 4*4 = 16, i.e. [4, 5).
    grid = Grid(rows=4, cols=10, states=2)
    assert life_rules.randomize(grid, random.Random(0)) == 4


def test_randomize_never_samples_more_cells_than_exist():
    grid = Grid(rows=9, cols=1, states=2)
    count = life_rules.randomize(grid, random.Random(0))
    assert count <= 9
    assert grid.count(1) == count
