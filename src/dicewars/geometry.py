"""Grid geometry: cell rectangles and pointer-to-cell mapping.

All coordinates here are canvas-local with the origin at the canvas top-left
corner and y growing downwards. Conversion to and from window coordinates is
the layout's job (see ``dicewars.ui.layout``).
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple

from dicewars.constants import CELL_MARGIN, FIELD_SIZE

Cell = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def inset(self, margin: float) -> Rect:
        return Rect(
            self.x + margin,
            self.y + margin,
            self.width - 2 * margin,
            self.height - 2 * margin,
        )

    def strictly_contains(self, other: Rect) -> bool:
        return (
            self.x < other.x
            and self.y < other.y
            and other.right < self.right
            and other.bottom < self.bottom
        )


class PixelMapping(Enum):
    """How pointer positions map to cell indices.

    ``LEGACY`` reproduces the early prototype: ``ceil(x / w) - 1`` and
    ``ceil(y / h) - 2``, saturating at zero with no upper clamp.
    ``SYMMETRIC`` floors both axes and clamps into ``[0, size - 1]``.
    """
    LEGACY = auto()
    SYMMETRIC = auto()


@dataclass(frozen=True, slots=True)
class GridGeometry:
    """Maps an ``size`` x ``size`` grid onto a ``width`` x ``height`` canvas."""

    width: float
    height: float
    size: int = FIELD_SIZE
    margin: float = CELL_MARGIN
    mapping: PixelMapping = PixelMapping.SYMMETRIC

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"grid size must be positive, got {self.size}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"canvas must have a positive area, got {self.width}x{self.height}")
        if self.margin < 0:
            raise ValueError(f"cell margin must not be negative, got {self.margin}")
        smallest = min(self.cell_width, self.cell_height)
        if 2 * self.margin >= smallest:
            raise ValueError(
                f"cell margin {self.margin} leaves no content in {smallest:.2f}px cells"
            )

    @property
    def cell_width(self) -> float:
        return self.width / self.size

    @property
    def cell_height(self) -> float:
        return self.height / self.size

    def cell_regions(self, i: int, j: int) -> Tuple[Rect, Rect]:
        """Return ``(background, content)`` for cell ``(i, j)``.

        The background covers the whole cell; the content is the same rect
        inset by the margin on every side, so painting both in contrasting
        colours draws the cell border.
        """
        background = Rect(i * self.cell_width, j * self.cell_height, self.cell_width, self.cell_height)
        return background, background.inset(self.margin)

    def cell_center(self, i: int, j: int) -> Tuple[float, float]:
        return (i + 0.5) * self.cell_width, (j + 0.5) * self.cell_height

    def contains(self, x: float, y: float) -> bool:
        return 0 <= x <= self.width and 0 <= y <= self.height

    def pixel_to_cell(self, x: float, y: float) -> Cell:
        if self.mapping is PixelMapping.LEGACY:
            i = max(math.ceil(x / self.cell_width) - 1, 0)
            j = max(math.ceil(y / self.cell_height) - 2, 0)
            return i, j
        last = self.size - 1
        i = min(max(math.floor(x / self.cell_width), 0), last)
        j = min(max(math.floor(y / self.cell_height), 0), last)
        return i, j
