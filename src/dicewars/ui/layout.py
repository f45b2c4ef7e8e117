from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from dicewars.constants import (
    BUTTON_CANVAS_SPACING,
    BUTTON_HEIGHT,
    BUTTON_TOP_MARGIN,
    BUTTON_WIDTH,
    CANVAS_BOTTOM_MARGIN,
    CANVAS_SIDE_MARGIN,
)
from dicewars.geometry import Cell, GridGeometry, PixelMapping


@dataclass(frozen=True, slots=True)
class ScreenLayout:
    """Window-space placement of the roll button and the canvas.

    Window coordinates follow arcade: origin bottom-left, y up. The canvas
    itself is addressed top-left/y-down, see ``to_canvas``.
    """

    button_center_x: float
    button_center_y: float
    button_width: float
    button_height: float
    canvas_left: float
    canvas_bottom: float
    canvas_width: float
    canvas_height: float

    @property
    def canvas_top(self) -> float:
        return self.canvas_bottom + self.canvas_height

    def to_canvas(self, x: float, y: float) -> Tuple[float, float]:
        """Window point -> canvas-local point (origin top-left, y down)."""
        return x - self.canvas_left, self.canvas_top - y

    def to_window_lbwh(self, x: float, y: float, width: float, height: float) -> Tuple[float, float, float, float]:
        """Canvas-local rect -> window ``(left, bottom, width, height)``."""
        return self.canvas_left + x, self.canvas_top - y - height, width, height


def compute_layout(window_width: int, window_height: int) -> ScreenLayout:
    """Button centred at the top, canvas filling the remaining area below it."""
    button_center_y = window_height - BUTTON_TOP_MARGIN - BUTTON_HEIGHT / 2
    canvas_top = window_height - BUTTON_TOP_MARGIN - BUTTON_HEIGHT - BUTTON_CANVAS_SPACING
    canvas_width = window_width - 2 * CANVAS_SIDE_MARGIN
    canvas_height = canvas_top - CANVAS_BOTTOM_MARGIN
    if canvas_width <= 0 or canvas_height <= 0:
        raise ValueError(f"window {window_width}x{window_height} is too small for the board")
    return ScreenLayout(
        button_center_x=window_width / 2,
        button_center_y=button_center_y,
        button_width=BUTTON_WIDTH,
        button_height=BUTTON_HEIGHT,
        canvas_left=CANVAS_SIDE_MARGIN,
        canvas_bottom=CANVAS_BOTTOM_MARGIN,
        canvas_width=canvas_width,
        canvas_height=canvas_height,
    )


def build_geometry(layout: ScreenLayout, size: int, margin: float, mapping: PixelMapping) -> GridGeometry:
    return GridGeometry(
        width=layout.canvas_width,
        height=layout.canvas_height,
        size=size,
        margin=margin,
        mapping=mapping,
    )


def cursor_cell(layout: ScreenLayout, geometry: GridGeometry, x: float, y: float) -> Optional[Cell]:
    """Cell under window point ``(x, y)``, or None when the point is off the canvas."""
    local_x, local_y = layout.to_canvas(x, y)
    if not geometry.contains(local_x, local_y):
        return None
    return geometry.pixel_to_cell(local_x, local_y)
