from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that nobody else references alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button
EVENT_MOUSE_MOVE = "mouse_move"                    # payload: x, y, dx, dy
EVENT_TILE_CLICK = "tile_click"                    # payload: row, col
EVENT_TILE_HOVER = "tile_hover"                    # payload: row=int|None, col=int|None
EVENT_CONTROL_ACTIVATED = "control_activated"      # payload: action=ControlAction


# ============================================================================
# BOARD
# ============================================================================
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str
EVENT_BOARD_RESIZED = "board_resized"              # payload: rows=int, cols=int


# ============================================================================
# LIFE
# ============================================================================
EVENT_GENERATION_ADVANCED = "generation_advanced"  # payload: generation=int, alive=int
EVENT_LIFE_SPEED_CHANGED = "life_speed_changed"    # payload: update_rate=int


# ============================================================================
# OTHELLO
# ============================================================================
EVENT_DISC_PLACED = "disc_placed"                  # payload: col, row, color=Disc, flipped=list[(c,r)]
EVENT_TURN_ADVANCED = "turn_advanced"              # payload: previous=Disc, current=Disc
EVENT_TURN_SKIPPED = "turn_skipped"                # payload: skipped=Disc, current=Disc
EVENT_GAME_OVER = "game_over"                      # payload: result=OthelloResult
EVENT_HIGHLIGHTS_CHANGED = "highlights_changed"    # payload: visible=bool, positions=frozenset[(c,r)]


# ============================================================================
# SNAPSHOTS
# ============================================================================
EVENT_SNAPSHOT_SAVED = "snapshot_saved"            # payload: path=Path
EVENT_SNAPSHOT_LOADED = "snapshot_loaded"          # payload: path=Path|None, rows=int, cols=int
EVENT_SNAPSHOT_REJECTED = "snapshot_rejected"      # payload: path=Path|None, reason=str
