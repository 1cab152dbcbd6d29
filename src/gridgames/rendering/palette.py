"""Stateless style tables keyed by cell state code. Only the renderer reads them."""
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from gridgames.components.cell_states import Disc, LifeCell

Color = Tuple[int, ...]

BACKGROUND = (235, 250, 255)
BOARD = (17, 163, 166)
BORDER = (50, 50, 50)
TEXT = (30, 30, 45)
HIGHLIGHT = (255, 255, 255, 51)
HOVER_OUTLINE = (255, 255, 255, 160)
BUTTON_HOVER_ALPHA = 204


@dataclass(frozen=True, slots=True)
class CellStyle:
    fill: Color
    border: Optional[Color] = BORDER
    # Border width for a 6-cell board; thinned as boards grow.
    border_width: float = 3.0


LIFE_STYLES: Mapping[int, CellStyle] = {
    LifeCell.DEAD: CellStyle(fill=(0, 0, 0, 76)),
    LifeCell.ALIVE: CellStyle(fill=(220, 220, 220)),
}

DISC_STYLES: Mapping[int, CellStyle] = {
    Disc.EMPTY: CellStyle(fill=(0, 0, 0, 76)),
    Disc.WHITE: CellStyle(fill=(220, 220, 220)),
    Disc.BLACK: CellStyle(fill=(20, 20, 20)),
}


def scaled_border(style: CellStyle, cols: int) -> float:
    return max(1.0, style.border_width * 6 / max(cols, 1))
