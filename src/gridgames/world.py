import random

from esper import World
from gridgames.components.game_state import GameState, GameMode


def create_world(
    mode: GameMode = GameMode.LIFE,
    *,
    rng: random.Random | None = None,
) -> World:
    """Create the world holding the game-state resource.

    Board entities are added by the board systems themselves (LifeSystem,
    OthelloSystem) so a world hosts exactly one board.
    """
    world = World()
    setattr(world, "random", rng or random.Random())
    world.create_entity(GameState(mode=mode))
    return world
