from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
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
EVENT_TILE_CLICK = "tile_click"                    # payload: x=int (column), y=int (row)
EVENT_NEW_GAME_REQUEST = "new_game_request"        # payload: None
EVENT_DEBUG_DUMP_REQUEST = "debug_dump_request"    # payload: None


# ============================================================================
# BOARD & CLUSTERS
# ============================================================================
EVENT_GAME_STARTED = "game_started"                # payload: cols=int, rows=int, tokens=int, game_over=bool
EVENT_CLUSTER_SELECTED = "cluster_selected"        # payload: cluster_id=int, size=int, positions=[(x,y),...], active=bool
EVENT_CLUSTER_DESELECTED = "cluster_deselected"    # payload: cluster_id=int, positions=[(x,y),...], reason=str
EVENT_CLUSTER_REMOVED = "cluster_removed"          # payload: cluster_id=int, size=int, positions=[(x,y),...], color=str
EVENT_GRAVITY_APPLIED = "gravity_applied"          # payload: moves=[{'from': (x,y), 'to': (x,y), 'color': str}, ...]
EVENT_BOARD_DUMPED = "board_dumped"                # payload: lines=list[str]


# ============================================================================
# SCORE & GAME FLOW
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"              # payload: cluster_score=int, bonus_score=int, total=int, delta=int
EVENT_GAME_OVER = "game_over"                      # payload: score=int, tokens_remaining=int
