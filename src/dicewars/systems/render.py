from __future__ import annotations

import logging
from typing import List, Optional

from esper import World

from dicewars.components.cursor_state import CursorState
from dicewars.components.dice_state import DiceState
from dicewars.components.grid import Grid
from dicewars.config import GameSettings
from dicewars.events.bus import EventBus, EVENT_CELL_OWNER_CHANGED, EVENT_DICE_ROLLED
from dicewars.geometry import Cell, GridGeometry
from dicewars.rendering.board_painter import BoardPainter
from dicewars.rendering.button_renderer import ButtonRenderer
from dicewars.rendering.frame import FillCommand, Frame, render_board, render_overlay
from dicewars.rendering.frame_cache import FrameCache
from dicewars.ui.layout import ScreenLayout, build_geometry, compute_layout, cursor_cell

logger = logging.getLogger(__name__)


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_DICE_ROLLED, self.on_board_changed)
        self.event_bus.subscribe(EVENT_CELL_OWNER_CHANGED, self.on_board_changed)
        self._board_cache: FrameCache[List[FillCommand]] = FrameCache()
        self._overlay_cache: FrameCache[List[FillCommand]] = FrameCache()
        self._overlay_cell: Optional[Cell] = None
        self._layout: ScreenLayout | None = None
        self._geometry: GridGeometry | None = None
        self._painter = BoardPainter()
        self._button_renderer = ButtonRenderer(self.world)
        self.last_frame: Frame | None = None

    def on_board_changed(self, sender, **kwargs):
        logger.debug("Board layer invalidated")
        self._board_cache.invalidate()

    @property
    def board_cache(self) -> FrameCache[List[FillCommand]]:
        return self._board_cache

    @property
    def overlay_cache(self) -> FrameCache[List[FillCommand]]:
        return self._overlay_cache

    def layout(self) -> ScreenLayout:
        if self._layout is None:
            self._layout = getattr(self.world, "layout", None) or compute_layout(self.window.width, self.window.height)
        return self._layout

    def geometry(self) -> GridGeometry:
        if self._geometry is None:
            geometry = getattr(self.world, "geometry", None)
            if geometry is None:
                settings = self._settings()
                geometry = build_geometry(self.layout(), settings.field_size, settings.cell_margin, settings.pixel_mapping)
            self._geometry = geometry
        return self._geometry

    def current_cursor_cell(self) -> Optional[Cell]:
        """Derive the hovered cell from the stored pointer position."""
        cursor = self._component(CursorState)
        if cursor is None or not cursor.present:
            return None
        return cursor_cell(self.layout(), self.geometry(), cursor.x, cursor.y)

    def build_frame(self) -> Frame:
        """Assemble the current frame, rebuilding only the layers that changed."""
        geometry = self.geometry()
        grid = self._component(Grid)
        if grid is None:
            raise RuntimeError('Grid component not found; create a GridSystem first')
        dice_state = self._component(DiceState)
        dice = dice_state.last_roll if dice_state else None

        cell = self.current_cursor_cell()
        if cell != self._overlay_cell:
            self._overlay_cell = cell
            self._overlay_cache.invalidate()

        board = self._board_cache.get(lambda: render_board(grid, dice, geometry))
        overlay = self._overlay_cache.get(lambda: render_overlay(cell, geometry))
        self.last_frame = Frame(board=board, overlay=overlay)
        return self.last_frame

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        frame = self.build_frame()
        if headless:
            return
        layout = self.layout()
        self._button_renderer.render(arcade)
        self._painter.draw_board(arcade, layout, frame.board)
        self._painter.draw_overlay(arcade, layout, frame.overlay)

    def _settings(self) -> GameSettings:
        return getattr(self.world, "settings", None) or GameSettings()

    def _component(self, component_type):
        for _, component in self.world.get_component(component_type):
            return component
        return None
