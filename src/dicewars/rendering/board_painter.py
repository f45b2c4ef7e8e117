from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from dicewars.rendering.frame import FillCommand
    from dicewars.ui.layout import ScreenLayout


class BoardPainter:
    """Draws frame layers onto the canvas area of the arcade window.

    The board layer is kept in a ``ShapeElementList`` so the GPU buffers are
    only rebuilt when the layer itself changes. The hover overlay is a single
    cell and is drawn immediately.
    """

    def __init__(self) -> None:
        self._shapes: Any | None = None
        self._source: Sequence[FillCommand] | None = None

    def draw_board(self, arcade, layout: ScreenLayout, commands: Sequence[FillCommand]) -> None:
        if self._shapes is None or commands is not self._source:
            self._shapes = self._build_shapes(arcade, layout, commands)
            self._source = commands
        self._shapes.draw()

    def draw_overlay(self, arcade, layout: ScreenLayout, commands: Sequence[FillCommand]) -> None:
        for command in commands:
            rect = command.rect
            left, bottom, width, height = layout.to_window_lbwh(rect.x, rect.y, rect.width, rect.height)
            arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, command.color)

    @staticmethod
    def _build_shapes(arcade, layout: ScreenLayout, commands: Sequence[FillCommand]):
        shapes = arcade.shape_list.ShapeElementList()
        for command in commands:
            rect = command.rect
            left, bottom, width, height = layout.to_window_lbwh(rect.x, rect.y, rect.width, rect.height)
            shapes.append(
                arcade.shape_list.create_rectangle_filled(
                    left + width / 2,
                    bottom + height / 2,
                    width,
                    height,
                    command.color,
                )
            )
        return shapes
