"""Entry point for the Dice wars prototype.

Sets up the ECS world, event bus, systems and the arcade window.
"""
import logging

from arcade import Window, run, set_background_color

from dicewars.config import GameSettings, load_settings
from dicewars.constants import BACKGROUND_COLOR, WINDOW_TITLE
from dicewars.events.bus import (
    EventBus,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_LEAVE,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
)
from dicewars.systems.dice_system import DiceSystem
from dicewars.systems.grid_system import GridSystem
from dicewars.systems.input import InputSystem
from dicewars.systems.render import RenderSystem
from dicewars.world import create_world

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


class DiceWarsWindow(Window):
    def __init__(self, settings: GameSettings):
        super().__init__(settings.window_width, settings.window_height, WINDOW_TITLE, resizable=False)
        self.settings = settings
        self.event_bus = EventBus()
        self.world = create_world(settings)

        # Board and dice
        self.grid_system = GridSystem(self.world, self.event_bus, size=settings.field_size)
        self.dice_system = DiceSystem(
            self.world,
            self.event_bus,
            mode=settings.dice_mode,
            faces=settings.dice_faces,
        )

        # Interface
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.render_system = RenderSystem(self.world, self.event_bus, self)

        set_background_color(BACKGROUND_COLOR)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=x, y=y, dx=dx, dy=dy)

    def on_mouse_leave(self, x: float, y: float):
        self.event_bus.emit(EVENT_MOUSE_LEAVE, x=x, y=y)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main():
    settings = load_settings()
    setup_logging(settings.log_level)
    logger.info(
        "Starting Dice wars: %dx%d board, %s dice, %s pointer mapping",
        settings.field_size,
        settings.field_size,
        settings.dice_mode.name.lower(),
        settings.pixel_mapping.name.lower(),
    )
    DiceWarsWindow(settings)
    run()

if __name__ == "__main__":
    main()
