from __future__ import annotations

import random
from dataclasses import dataclass

from esper import World

from dicewars.config import GameSettings
from dicewars.events.bus import EventBus
from dicewars.systems.dice_system import DiceSystem
from dicewars.systems.grid_system import GridSystem
from dicewars.systems.input import InputSystem
from dicewars.systems.render import RenderSystem
from dicewars.world import create_world


class DummyWindow:
    def __init__(self, width=800, height=878):
        self.width = width
        self.height = height


@dataclass
class Game:
    bus: EventBus
    world: World
    window: DummyWindow
    grid_system: GridSystem
    dice_system: DiceSystem
    input_system: InputSystem
    render_system: RenderSystem


def build_game(settings: GameSettings | None = None, *, seed: int = 1234) -> Game:
    """Wire every system the way the window does, without opening a window."""

    settings = settings or GameSettings()
    bus = EventBus()
    world = create_world(settings, rng=random.Random(seed))
    window = DummyWindow(settings.window_width, settings.window_height)
    grid_system = GridSystem(world, bus, size=settings.field_size)
    dice_system = DiceSystem(world, bus, mode=settings.dice_mode, faces=settings.dice_faces)
    input_system = InputSystem(bus, window, world)
    render_system = RenderSystem(world, bus, window)
    return Game(bus, world, window, grid_system, dice_system, input_system, render_system)
