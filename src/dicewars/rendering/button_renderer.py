"""Draws the roll button."""
from __future__ import annotations

from esper import World

from dicewars.components.roll_button import RollButton
from dicewars.constants import (
    BUTTON_FILL_COLOR,
    BUTTON_FONT_SIZE,
    BUTTON_OUTLINE_COLOR,
    BUTTON_TEXT_COLOR,
)


class ButtonRenderer:
    def __init__(self, world: World) -> None:
        self.world = world

    def render(self, arcade) -> None:
        for _, button in self.world.get_component(RollButton):
            left = button.x - button.width / 2
            bottom = button.y - button.height / 2
            arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, BUTTON_FILL_COLOR)
            arcade.draw_lbwh_rectangle_outline(
                left,
                bottom,
                button.width,
                button.height,
                BUTTON_OUTLINE_COLOR,
                border_width=2,
            )
            arcade.draw_text(
                button.label,
                button.x,
                button.y,
                BUTTON_TEXT_COLOR,
                BUTTON_FONT_SIZE,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
