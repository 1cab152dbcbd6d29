from gridgames.components.cell_states import Disc
from gridgames.components.life_state import LifeState
from gridgames.components.othello_state import OthelloResult, OthelloState
from gridgames.rendering.panel_text import life_panel, othello_banner


def test_turn_banner():
    assert othello_banner(OthelloState()) == ["WHITE'S", "TURN"]
    assert othello_banner(OthelloState(turn=Disc.BLACK)) == ["BLACK'S", "TURN"]


def test_result_banners_lead_with_the_winner_score():
    white = OthelloState(result=OthelloResult(winner=Disc.WHITE, white=40, black=24))
    black = OthelloState(result=OthelloResult(winner=Disc.BLACK, white=20, black=44))
    draw = OthelloState(result=OthelloResult(winner=None, white=32, black=32))
    assert othello_banner(white) == ["WHITE", "WINS", "40-24"]
    assert othello_banner(black) == ["BLACK", "WINS", "44-20"]
    assert othello_banner(draw) == ["DRAW", "32-32"]


def test_life_panel_shows_generation_and_rate():
    assert life_panel(LifeState(update_rate=15, generation=7)) == ["GEN 7", "EVERY 15"]
