from dicewars.components.cursor_state import CursorState
from dicewars.components.roll_button import RollButton
from dicewars.events.bus import (
    EventBus,
    EVENT_DICE_ROLL_REQUEST,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_LEAVE,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
)

# arcade.key.ENTER / arcade.key.SPACE; matched numerically so the system stays importable headless.
ROLL_KEYS = (65293, 32)
MOUSE_BUTTON_LEFT = 1


class InputSystem:
    """Turns raw window input into roll requests and pointer state.

    Only the pointer position is stored; the render pass maps it to a cell.
    """

    def __init__(self, event_bus: EventBus, window, world):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_MOVE, self.on_mouse_move)
        self.event_bus.subscribe(EVENT_MOUSE_LEAVE, self.on_mouse_leave)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        if button != MOUSE_BUTTON_LEFT:
            return
        for _, roll_button in self.world.get_component(RollButton):
            if roll_button.contains(x, y):
                self.event_bus.emit(EVENT_DICE_ROLL_REQUEST, source="button")
                return

    def on_key_press(self, sender, **kwargs):
        if kwargs.get('symbol') in ROLL_KEYS:
            self.event_bus.emit(EVENT_DICE_ROLL_REQUEST, source="keyboard")

    def on_mouse_move(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        try:
            xf = float(x)
            yf = float(y)
        except (TypeError, ValueError):
            return
        cursor = self._cursor()
        if cursor is None:
            return
        cursor.x = xf
        cursor.y = yf
        cursor.present = True

    def on_mouse_leave(self, sender, **kwargs):
        cursor = self._cursor()
        if cursor is not None:
            cursor.present = False

    def _cursor(self) -> CursorState | None:
        for _, cursor in self.world.get_component(CursorState):
            return cursor
        return None
