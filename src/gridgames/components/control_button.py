"""Components for the on-screen control buttons beside the board."""
from dataclasses import dataclass
from enum import Enum, auto

from gridgames.constants import CONTROL_HEIGHT, CONTROL_WIDTH


class ControlAction(Enum):
    """Actions that a control button can trigger."""
    LOAD = auto()
    SAVE = auto()
    RANDOMIZE = auto()
    RESET = auto()
    FASTER = auto()
    SLOWER = auto()
    GROW = auto()
    SHRINK = auto()


class ControlSide(Enum):
    LEFT = auto()
    RIGHT = auto()


@dataclass
class ControlButton:
    """Button anchored to the board edge.

    slot counts downward from the board top; a negative slot counts upward
    from the board bottom (-1 is the lowest). column places narrow buttons
    side by side within a slot.
    """
    label: str
    action: ControlAction
    side: ControlSide = ControlSide.RIGHT
    slot: int = 0
    column: int = 0
    width: float = CONTROL_WIDTH
    height: float = CONTROL_HEIGHT
    hovered: bool = False
