from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple

from gridgames.components.cell_states import Disc


@dataclass(frozen=True, slots=True)
class OthelloResult:
    """Final score; ``winner`` is None for a draw."""
    winner: Optional[Disc]
    white: int
    black: int


@dataclass(slots=True)
class OthelloState:
    """Turn and move-hint state for an Othello board.

    The game phase is not stored here; it is derived from the grid and turn
    by ``othello_rules.compute_status``.
    """
    turn: Disc = Disc.WHITE
    result: Optional[OthelloResult] = None
    elapsed: float = 0.0
    blink_elapsed: float = 0.0
    highlights_visible: bool = False
    highlighted: FrozenSet[Tuple[int, int]] = field(default_factory=frozenset)

    @property
    def game_over(self) -> bool:
        return self.result is not None
