from dicewars.components.player import Player
from dicewars.config import GameSettings
from dicewars.constants import DICE_FILL_COLOR, HOVER_FILL_COLOR
from dicewars.dice import DiceRoll
from dicewars.events.bus import (
    EVENT_CELL_OWNER_CHANGE,
    EVENT_DICE_ROLL_REQUEST,
    EVENT_MOUSE_LEAVE,
    EVENT_MOUSE_MOVE,
)
from dicewars.geometry import PixelMapping
from dicewars.rendering.frame import OWNER_FILL_COLORS
from tests.helpers import build_game


def _highlighted(frame, geometry):
    return {
        geometry.pixel_to_cell(c.rect.x, c.rect.y)
        for c in frame.board
        if c.color == DICE_FILL_COLOR
    }


def test_initial_frame_has_board_only():
    game = build_game()
    frame = game.render_system.build_frame()
    assert len(frame.board) == 16 * 16 * 2
    assert frame.overlay == []


def test_roll_highlights_exactly_dice_extent():
    game = build_game()
    game.render_system.build_frame()

    game.bus.emit(EVENT_DICE_ROLL_REQUEST, source="test")
    roll: DiceRoll = game.dice_system.last_roll()
    frame = game.render_system.build_frame()

    geometry = game.render_system.geometry()
    expected = {(i, j) for i in range(roll.die1) for j in range(roll.die2)}
    assert _highlighted(frame, geometry) == expected


def test_board_layer_cached_until_state_changes():
    game = build_game()
    render = game.render_system
    first = render.build_frame().board
    second = render.build_frame().board
    assert first is second
    assert render.board_cache.builds == 1

    game.bus.emit(EVENT_DICE_ROLL_REQUEST)
    third = render.build_frame().board
    assert third is not first
    assert render.board_cache.builds == 2


def test_pointer_motion_only_rebuilds_overlay():
    game = build_game()
    render = game.render_system
    render.build_frame()

    game.bus.emit(EVENT_MOUSE_MOVE, x=125, y=675, dx=0, dy=0)
    frame = render.build_frame()

    assert render.board_cache.builds == 1
    assert render.overlay_cache.builds == 2
    assert frame.overlay[1].color == HOVER_FILL_COLOR
    assert render.current_cursor_cell() == (2, 2)

    # Moving inside the same cell keeps the cached overlay.
    game.bus.emit(EVENT_MOUSE_MOVE, x=130, y=670, dx=5, dy=-5)
    render.build_frame()
    assert render.overlay_cache.builds == 2


def test_no_hover_highlight_outside_canvas():
    game = build_game()
    game.bus.emit(EVENT_MOUSE_MOVE, x=400, y=860, dx=0, dy=0)
    assert game.render_system.build_frame().overlay == []

    game.bus.emit(EVENT_MOUSE_MOVE, x=125, y=675, dx=0, dy=0)
    game.bus.emit(EVENT_MOUSE_LEAVE, x=-1, y=-1)
    assert game.render_system.build_frame().overlay == []


def test_owner_change_invalidates_board():
    game = build_game()
    render = game.render_system
    render.build_frame()

    game.bus.emit(EVENT_CELL_OWNER_CHANGE, player=Player.PLAYER_1, i=0, j=0)
    frame = render.build_frame()

    assert render.board_cache.builds == 2
    assert frame.board[1].color == OWNER_FILL_COLORS[Player.PLAYER_1]


def test_large_board_with_legacy_mapping():
    settings = GameSettings(field_size=64, pixel_mapping=PixelMapping.LEGACY)
    game = build_game(settings)
    # Canvas-local (100, 100) -> 12.5px cells -> ceil(8) - 1, ceil(8) - 2.
    game.bus.emit(EVENT_MOUSE_MOVE, x=100, y=700, dx=0, dy=0)
    frame = game.render_system.build_frame()
    assert len(frame.board) == 64 * 64 * 2
    assert game.render_system.current_cursor_cell() == (7, 6)


def test_dice_system_seed_is_shared_with_world():
    first = build_game(seed=42)
    second = build_game(seed=42)
    for game in (first, second):
        game.bus.emit(EVENT_DICE_ROLL_REQUEST)
    assert first.dice_system.last_roll() == second.dice_system.last_roll()
