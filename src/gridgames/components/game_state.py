"""Game state resource describing which board the window hosts."""
from dataclasses import dataclass
from enum import Enum


class GameMode(Enum):
    LIFE = "life"
    OTHELLO = "othello"


@dataclass
class GameState:
    """Singleton component storing the active game."""
    mode: GameMode = GameMode.LIFE
