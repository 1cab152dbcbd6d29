"""Factories for the control buttons shown beside each board."""
from esper import World

from gridgames.components.control_button import ControlAction, ControlButton, ControlSide
from gridgames.constants import CONTROL_NARROW_WIDTH


def spawn_life_controls(world: World) -> list[int]:
    """LOAD/SAVE/RANDOM on top right, speed and RESET at the bottom right, resize on the left."""
    buttons = [
        ControlButton("LOAD", ControlAction.LOAD, slot=0),
        ControlButton("SAVE", ControlAction.SAVE, slot=1),
        ControlButton("RANDOM", ControlAction.RANDOMIZE, slot=2),
        ControlButton("<<", ControlAction.SLOWER, slot=-2, column=0, width=CONTROL_NARROW_WIDTH),
        ControlButton(">>", ControlAction.FASTER, slot=-2, column=1, width=CONTROL_NARROW_WIDTH),
        ControlButton("RESET", ControlAction.RESET, slot=-1),
        ControlButton("+", ControlAction.GROW, side=ControlSide.LEFT, slot=0, width=CONTROL_NARROW_WIDTH),
        ControlButton("-", ControlAction.SHRINK, side=ControlSide.LEFT, slot=1, width=CONTROL_NARROW_WIDTH),
    ]
    return [world.create_entity(button) for button in buttons]


def spawn_othello_controls(world: World) -> list[int]:
    # The turn banner occupies the top of the right column.
    buttons = [
        ControlButton("LOAD", ControlAction.LOAD, slot=-3),
        ControlButton("SAVE", ControlAction.SAVE, slot=-2),
        ControlButton("RESET", ControlAction.RESET, slot=-1),
    ]
    return [world.create_entity(button) for button in buttons]
