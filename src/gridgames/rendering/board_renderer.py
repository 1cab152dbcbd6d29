from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Optional, Tuple

from gridgames.constants import CELL_PADDING_PCT
from gridgames.rendering.palette import HIGHLIGHT, HOVER_OUTLINE, CellStyle, scaled_border
from gridgames.ui.layout import cell_center

if TYPE_CHECKING:
    from gridgames.components.grid import Grid
    from gridgames.ui.layout import BoardGeometry


class BoardRenderer:
    """Draws one marker per cell; Life cells as squares, Othello discs as circles."""

    def __init__(self, styles: Mapping[int, CellStyle], *, round_cells: bool):
        self._styles = styles
        self._round = round_cells

    def render(
        self,
        arcade,
        grid: Grid,
        geometry: BoardGeometry,
        *,
        highlighted=frozenset(),
        hovered: Optional[Tuple[int, int]] = None,
    ) -> None:
        tile = geometry.tile_size
        size = max(tile * (1 - CELL_PADDING_PCT), 2)
        for col, row in grid.positions():
            style = self._styles[grid.cells[row][col]]
            cx, cy = cell_center(geometry, col, row)
            border = scaled_border(style, grid.cols)
            if self._round:
                arcade.draw_circle_filled(cx, cy, size / 2, style.fill)
                if style.border is not None:
                    arcade.draw_circle_outline(cx, cy, size / 2, style.border, border)
            else:
                left = cx - size / 2
                bottom = cy - size / 2
                arcade.draw_lbwh_rectangle_filled(left, bottom, size, size, style.fill)
                if style.border is not None:
                    arcade.draw_lbwh_rectangle_outline(left, bottom, size, size, style.border, border)
            if (col, row) in highlighted:
                arcade.draw_circle_filled(cx, cy, size / 2, HIGHLIGHT)
            if hovered == (col, row):
                arcade.draw_circle_outline(cx, cy, size / 2 + 2, HOVER_OUTLINE, 2)
