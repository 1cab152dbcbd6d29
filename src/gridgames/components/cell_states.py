"""State codes stored in grid cells, shared by the engines and the renderer."""
from enum import Enum, IntEnum, auto


class LifeCell(IntEnum):
    DEAD = 0
    ALIVE = 1


class Disc(IntEnum):
    EMPTY = 0
    WHITE = 1
    BLACK = 2


class OthelloStatus(Enum):
    """Derived game phase; computed from the grid and turn, never stored."""
    PLAYING = auto()
    NOMOVES = auto()
    GAMEOVER = auto()


LIFE_STATE_COUNT = len(LifeCell)
OTHELLO_STATE_COUNT = len(Disc)


def opposite(color: Disc) -> Disc:
    if color == Disc.WHITE:
        return Disc.BLACK
    if color == Disc.BLACK:
        return Disc.WHITE
    raise ValueError("EMPTY has no opposite color")
