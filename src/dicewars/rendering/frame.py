"""Pure frame construction: grid state in, fill commands out.

Nothing here touches arcade, so frames can be built and inspected headless.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from dicewars.components.grid import Grid
from dicewars.components.player import Player
from dicewars.constants import (
    CELL_BORDER_COLOR,
    CELL_FILL_COLOR,
    DICE_BORDER_COLOR,
    DICE_FILL_COLOR,
    HOVER_BORDER_COLOR,
    HOVER_FILL_COLOR,
)
from dicewars.dice import DiceRoll
from dicewars.geometry import Cell, GridGeometry, Rect

Color = Tuple[int, int, int]

OWNER_FILL_COLORS: Dict[Player, Color] = {
    Player.PLAYER_1: (70, 90, 180),
    Player.PLAYER_2: (200, 130, 60),
}


@dataclass(frozen=True, slots=True)
class FillCommand:
    rect: Rect
    color: Color


@dataclass(slots=True)
class Frame:
    """Board layer (grid plus dice highlight) and the hover overlay layer."""

    board: List[FillCommand] = field(default_factory=list)
    overlay: List[FillCommand] = field(default_factory=list)


def _fill_cell(commands: List[FillCommand], geometry: GridGeometry, i: int, j: int, border: Color, fill: Color) -> None:
    background, content = geometry.cell_regions(i, j)
    commands.append(FillCommand(background, border))
    commands.append(FillCommand(content, fill))


def render_board(grid: Grid, dice: Optional[DiceRoll], geometry: GridGeometry) -> List[FillCommand]:
    commands: List[FillCommand] = []
    for i, j, owner in grid.cells():
        fill = OWNER_FILL_COLORS[owner] if owner is not None else CELL_FILL_COLOR
        _fill_cell(commands, geometry, i, j, CELL_BORDER_COLOR, fill)
    if dice is not None:
        for i, j in highlighted_cells(dice, grid.size):
            _fill_cell(commands, geometry, i, j, DICE_BORDER_COLOR, DICE_FILL_COLOR)
    return commands


def render_overlay(cursor_cell: Optional[Cell], geometry: GridGeometry) -> List[FillCommand]:
    if cursor_cell is None:
        return []
    commands: List[FillCommand] = []
    i, j = cursor_cell
    _fill_cell(commands, geometry, i, j, HOVER_BORDER_COLOR, HOVER_FILL_COLOR)
    return commands


def render_frame(
    grid: Grid,
    dice: Optional[DiceRoll],
    cursor_cell: Optional[Cell],
    geometry: GridGeometry,
) -> Frame:
    return Frame(board=render_board(grid, dice, geometry), overlay=render_overlay(cursor_cell, geometry))


def highlighted_cells(dice: DiceRoll, size: int) -> List[Cell]:
    """Cells covered by a roll: ``i < die1`` and ``j < die2``, clipped to the board."""
    width = min(dice.die1, size)
    height = min(dice.die2, size)
    return [(i, j) for i in range(width) for j in range(height)]
