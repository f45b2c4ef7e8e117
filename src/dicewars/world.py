import random

from esper import World

from dicewars.components.cursor_state import CursorState
from dicewars.components.dice_state import DiceState
from dicewars.components.game_state import GameState
from dicewars.components.roll_button import RollButton
from dicewars.config import GameSettings
from dicewars.ui.layout import build_geometry, compute_layout


def create_world(
    settings: GameSettings | None = None,
    *,
    rng: random.Random | None = None,
) -> World:
    settings = settings or GameSettings()
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "settings", settings)

    # Global state resource: turn owner, last roll and pointer position.
    world.create_entity(GameState(), DiceState(), CursorState())

    layout = compute_layout(settings.window_width, settings.window_height)
    # Raises ValueError for a margin wider than the cells.
    geometry = build_geometry(layout, settings.field_size, settings.cell_margin, settings.pixel_mapping)
    setattr(world, "layout", layout)
    setattr(world, "geometry", geometry)

    world.create_entity(
        RollButton(
            label=settings.button_label,
            x=layout.button_center_x,
            y=layout.button_center_y,
            width=layout.button_width,
            height=layout.button_height,
        )
    )
    return world
