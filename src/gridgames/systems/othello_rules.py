"""Othello legality, capture and game-phase rules over a Grid of Disc codes."""
from __future__ import annotations

from typing import FrozenSet, List

from gridgames.components.cell_states import Disc, OthelloStatus, opposite
from gridgames.components.grid import Grid, Position
from gridgames.components.othello_state import OthelloResult
from gridgames.systems.neighbors import DIRECTIONS, scan_direction


def is_valid_move(grid: Grid, col: int, row: int, color: Disc) -> bool:
    if grid.get(col, row) != Disc.EMPTY:
        return False
    other = opposite(color)
    for dx, dy in DIRECTIONS:
        if scan_direction(grid, col, row, dx, dy, color, other).capturable:
            return True
    return False


def place(grid: Grid, col: int, row: int, color: Disc) -> List[Position]:
    """Flip every capturable line radiating from (col, row) to ``color``.

    No legality check is made and the placement cell itself is left to the
    caller. Each capturable line is walked back from its closing disc towards
    the placement point. Returns the flipped positions.
    """
    other = opposite(color)
    flipped: List[Position] = []
    for dx, dy in DIRECTIONS:
        scan = scan_direction(grid, col, row, dx, dy, color, other)
        if not scan.capturable:
            continue
        x, y = scan.end
        while True:
            x -= dx
            y -= dy
            if (x, y) == (col, row):
                break
            grid.set(x, y, color)
            flipped.append((x, y))
    return flipped


def legal_moves(grid: Grid, color: Disc) -> FrozenSet[Position]:
    return frozenset(
        (col, row) for col, row in grid.positions() if is_valid_move(grid, col, row, color)
    )


def has_legal_move(grid: Grid, color: Disc) -> bool:
    return any(is_valid_move(grid, col, row, color) for col, row in grid.positions())


def compute_status(grid: Grid, turn: Disc) -> OthelloStatus:
    if grid.count(Disc.EMPTY) == 0:
        return OthelloStatus.GAMEOVER
    white_moves = has_legal_move(grid, Disc.WHITE)
    black_moves = has_legal_move(grid, Disc.BLACK)
    if not white_moves and not black_moves:
        return OthelloStatus.GAMEOVER
    can_move = white_moves if turn == Disc.WHITE else black_moves
    return OthelloStatus.PLAYING if can_move else OthelloStatus.NOMOVES


def count_discs(grid: Grid) -> tuple[int, int]:
    """Return (white, black) disc counts."""
    return grid.count(Disc.WHITE), grid.count(Disc.BLACK)


def decide_result(grid: Grid) -> OthelloResult:
    white, black = count_discs(grid)
    if white > black:
        winner = Disc.WHITE
    elif black > white:
        winner = Disc.BLACK
    else:
        winner = None
    return OthelloResult(winner=winner, white=white, black=black)


def set_opening(grid: Grid) -> None:
    """Clear the board and place the four starting discs around the center."""
    for line in grid.cells:
        line[:] = [int(Disc.EMPTY)] * grid.cols
    mid_x = grid.cols // 2 - 1
    mid_y = grid.rows // 2 - 1
    grid.set(mid_x, mid_y, Disc.WHITE)
    grid.set(mid_x, mid_y + 1, Disc.BLACK)
    grid.set(mid_x + 1, mid_y, Disc.BLACK)
    grid.set(mid_x + 1, mid_y + 1, Disc.WHITE)
