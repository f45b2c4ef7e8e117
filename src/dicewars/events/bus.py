from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems that are not stored anywhere keep receiving events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                # payload: x, y, button
EVENT_MOUSE_MOVE = "mouse_move"                  # payload: x, y, dx, dy
EVENT_MOUSE_LEAVE = "mouse_leave"                # payload: x, y
EVENT_KEY_PRESS = "key_press"                    # payload: symbol, modifiers


# ============================================================================
# DICE
# ============================================================================
EVENT_DICE_ROLL_REQUEST = "dice_roll_request"    # payload: source=str
EVENT_DICE_ROLLED = "dice_rolled"                # payload: die1=int, die2=int, source=str


# ============================================================================
# GRID
# ============================================================================
EVENT_CELL_OWNER_CHANGE = "cell_owner_change"    # payload: player=Player, i=int, j=int
EVENT_CELL_OWNER_CHANGED = "cell_owner_changed"  # payload: player=Player, i=int, j=int, previous=Player|None
