from __future__ import annotations

from typing import Tuple, Type, TypeVar

from esper import World

from gridgames.components.game_state import GameMode, GameState
from gridgames.components.grid import Grid

T = TypeVar("T")


def get_board_grid(world: World) -> Grid:
    for _, grid in world.get_component(Grid):
        return grid
    raise RuntimeError("Board grid not found")


def find_board_grid(world: World) -> Grid | None:
    for _, grid in world.get_component(Grid):
        return grid
    return None


def get_board_component(world: World, component_type: Type[T]) -> Tuple[int, T]:
    """Return (entity, component) for the board entity carrying ``component_type``."""
    for entity, component in world.get_component(component_type):
        return entity, component
    raise RuntimeError(f"{component_type.__name__} not found")


def current_mode(world: World) -> GameMode | None:
    for _, state in world.get_component(GameState):
        return state.mode
    return None
