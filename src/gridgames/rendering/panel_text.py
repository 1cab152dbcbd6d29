"""Text shown in the side panel, derived from board state."""
from gridgames.components.cell_states import Disc
from gridgames.components.life_state import LifeState
from gridgames.components.othello_state import OthelloState


def othello_banner(state: OthelloState) -> list[str]:
    result = state.result
    if result is None:
        name = "WHITE'S" if state.turn == Disc.WHITE else "BLACK'S"
        return [name, "TURN"]
    if result.winner == Disc.WHITE:
        return ["WHITE", "WINS", f"{result.white}-{result.black}"]
    if result.winner == Disc.BLACK:
        return ["BLACK", "WINS", f"{result.black}-{result.white}"]
    return ["DRAW", f"{result.white}-{result.black}"]


def life_panel(state: LifeState) -> list[str]:
    return [f"GEN {state.generation}", f"EVERY {state.update_rate}"]
