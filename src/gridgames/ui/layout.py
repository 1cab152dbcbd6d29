from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from gridgames.components.control_button import ControlButton, ControlSide
from gridgames.constants import (
    BOARD_CENTER_X_PCT,
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    CONTROL_COLUMN_GAP,
    CONTROL_GAP,
    MIN_TILE_SIZE,
)

Rect = Tuple[float, float, float, float]  # left, bottom, width, height


@dataclass(frozen=True, slots=True)
class BoardGeometry:
    """Screen placement of the board. Row 0 is drawn at the top edge."""

    rows: int
    cols: int
    tile_size: int
    left: float
    bottom: float

    @property
    def width(self) -> float:
        return self.tile_size * self.cols

    @property
    def height(self) -> float:
        return self.tile_size * self.rows

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def top(self) -> float:
        return self.bottom + self.height


def compute_board_geometry(window_width: int, window_height: int, rows: int, cols: int) -> BoardGeometry:
    """Size the board so it fits the percentage caps of the window.

    Render and input both call this so clicks map onto what was drawn.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    tile_size = int(min(max_board_w / cols, max_board_h / rows))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    width = tile_size * cols
    height = tile_size * rows
    left = window_width * BOARD_CENTER_X_PCT - width / 2
    bottom = max(float(BOTTOM_MARGIN), (window_height - height) / 2)
    return BoardGeometry(rows=rows, cols=cols, tile_size=tile_size, left=left, bottom=bottom)


def cell_at_point(geometry: BoardGeometry, x: float, y: float) -> Optional[Tuple[int, int]]:
    """Return (col, row) under the point, or None outside the board."""
    if x < geometry.left or x >= geometry.right:
        return None
    if y <= geometry.bottom or y > geometry.top:
        return None
    col = int((x - geometry.left) // geometry.tile_size)
    row = int((geometry.top - y) // geometry.tile_size)
    if 0 <= row < geometry.rows and 0 <= col < geometry.cols:
        return col, row
    return None


def cell_center(geometry: BoardGeometry, col: int, row: int) -> Tuple[float, float]:
    half = geometry.tile_size / 2
    return geometry.left + col * geometry.tile_size + half, geometry.top - row * geometry.tile_size - half


def control_rect(button: ControlButton, geometry: BoardGeometry) -> Rect:
    if button.slot >= 0:
        bottom = geometry.top - button.slot * (button.height + CONTROL_GAP) - button.height
    else:
        bottom = geometry.bottom + (-button.slot - 1) * (button.height + CONTROL_GAP)
    offset = button.column * (button.width + CONTROL_COLUMN_GAP)
    if button.side == ControlSide.RIGHT:
        left = geometry.right + CONTROL_GAP + offset
    else:
        left = geometry.left - CONTROL_GAP - offset - button.width
    return left, bottom, button.width, button.height


def point_in_rect(rect: Rect, x: float, y: float) -> bool:
    left, bottom, width, height = rect
    return left <= x <= left + width and bottom <= y <= bottom + height


def control_at_point(
    buttons: Iterable[ControlButton],
    geometry: BoardGeometry,
    x: float,
    y: float,
) -> Optional[ControlButton]:
    for button in buttons:
        if point_in_rect(control_rect(button, geometry), x, y):
            return button
    return None
