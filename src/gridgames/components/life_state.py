from dataclasses import dataclass
from typing import List, Optional

from gridgames.constants import LIFE_UPDATE_RATE


@dataclass(slots=True)
class LifeState:
    """Per-board Life bookkeeping.

    saved_state: copy of the cells captured on randomize or load; reset
    restores it when the board still has the same shape.
    """
    update_rate: int = LIFE_UPDATE_RATE
    saved_state: Optional[List[List[int]]] = None
    frame: int = 0
    generation: int = 0
