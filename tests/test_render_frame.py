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
from dicewars.geometry import GridGeometry
from dicewars.rendering.frame import OWNER_FILL_COLORS, highlighted_cells, render_frame


def _geometry(size=16):
    return GridGeometry(width=800, height=800, size=size, margin=3)


def _cell_of(geometry, command):
    return geometry.pixel_to_cell(command.rect.x + 1, command.rect.y + 1)


def test_empty_board_is_black_and_white():
    geometry = _geometry()
    frame = render_frame(Grid(size=16), None, None, geometry)

    assert len(frame.board) == 16 * 16 * 2
    assert frame.overlay == []
    backgrounds = frame.board[0::2]
    contents = frame.board[1::2]
    assert {c.color for c in backgrounds} == {CELL_BORDER_COLOR}
    assert {c.color for c in contents} == {CELL_FILL_COLOR}
    first_bg, first_content = geometry.cell_regions(0, 0)
    assert frame.board[0].rect == first_bg
    assert frame.board[1].rect == first_content


def test_roll_highlights_exactly_the_rolled_rectangle():
    geometry = _geometry()
    frame = render_frame(Grid(size=16), DiceRoll(4, 2), None, geometry)

    highlight = frame.board[16 * 16 * 2:]
    assert len(highlight) == 4 * 2 * 2
    assert {c.color for c in highlight[0::2]} == {DICE_BORDER_COLOR}
    assert {c.color for c in highlight[1::2]} == {DICE_FILL_COLOR}
    cells = {_cell_of(geometry, c) for c in highlight[0::2]}
    assert cells == {(i, j) for i in range(4) for j in range(2)}


def test_highlight_clipped_to_small_boards():
    assert highlighted_cells(DiceRoll(6, 5), 3) == [(i, j) for i in range(3) for j in range(3)]


def test_cursor_cell_draws_overlay():
    geometry = _geometry()
    frame = render_frame(Grid(size=16), None, (3, 9), geometry)

    assert [c.color for c in frame.overlay] == [HOVER_BORDER_COLOR, HOVER_FILL_COLOR]
    background, content = geometry.cell_regions(3, 9)
    assert frame.overlay[0].rect == background
    assert frame.overlay[1].rect == content


def test_owned_cells_use_owner_colour():
    grid = Grid(size=16)
    grid.owners[1][2] = Player.PLAYER_2
    geometry = _geometry()
    frame = render_frame(grid, None, None, geometry)

    index = (1 * 16 + 2) * 2 + 1
    assert frame.board[index].color == OWNER_FILL_COLORS[Player.PLAYER_2]
    assert frame.board[index - 1].color == CELL_BORDER_COLOR
