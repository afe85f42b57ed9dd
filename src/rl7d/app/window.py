from __future__ import annotations

import logging
from typing import Dict, List, Optional

import arcade

from ..config import WindowSettings
from ..input import InputMapper
from ..render import PLAYER_COLOR, PLAYER_GLYPH, cell_origin, iter_cells, view_tiles
from ..session import GameEvent, GameSession

logger = logging.getLogger(__name__)

# arcade key constants we translate to InputMapper names
_KEY_NAMES = ("UP", "DOWN", "LEFT", "RIGHT", "W", "A", "S", "D", "ENTER", "RETURN", "ESCAPE")
_MODIFIERS = (("CTRL", "MOD_CTRL"), ("ALT", "MOD_ALT"), ("SHIFT", "MOD_SHIFT"))


def key_names() -> Dict[int, str]:
    return {getattr(arcade.key, name): name for name in _KEY_NAMES}


def modifier_names(modifiers: int) -> List[str]:
    return [name for name, attr in _MODIFIERS if modifiers & getattr(arcade.key, attr)]


class DungeonWindow(arcade.Window):
    """Arcade window that draws the session's map and feeds it key presses.

    Walls and floors are drawn as filled cells in their style colour, the
    player as an ``@``. Rendering and input stay here; the session never sees
    arcade types.
    """

    def __init__(
        self,
        session: GameSession,
        settings: Optional[WindowSettings] = None,
        mapper: Optional[InputMapper] = None,
    ) -> None:
        self.session = session
        self.view_settings = settings or WindowSettings()
        self.mapper = mapper or InputMapper.default()
        self._key_names = key_names()
        px = self.view_settings.tile_px
        self._view_columns, self._view_rows = view_tiles(
            session.grid, self.view_settings.columns, self.view_settings.rows
        )
        width, height = self._view_columns * px, self._view_rows * px
        rate = 1 / self.view_settings.fps
        super().__init__(
            width=width,
            height=height,
            title=self.view_settings.title,
            fullscreen=session.fullscreen,
            update_rate=rate,
            draw_rate=rate,
        )
        self.background_color = arcade.color.BLACK
        session.add_listener(self._on_event)
        logger.info("Arcade window initialized (%dx%d @ %d fps)", width, height, self.view_settings.fps)

    def _on_event(self, event: GameEvent, session: GameSession) -> None:
        if event is GameEvent.FULLSCREEN_TOGGLED:
            self.set_fullscreen(session.fullscreen)

    def _cell_origin(self, x: int, y: int) -> tuple[int, int]:
        return cell_origin(x, y, self._view_rows, self.view_settings.tile_px)

    def on_draw(self) -> None:  # pragma: no cover - needs a display
        self.clear()
        px = self.view_settings.tile_px
        for x, y, style in iter_cells(self.session.grid):
            left, bottom = self._cell_origin(x, y)
            arcade.draw_lrbt_rectangle_filled(left, left + px, bottom, bottom + px, style.color)
        left, bottom = self._cell_origin(*self.session.player_pos)
        arcade.draw_text(
            PLAYER_GLYPH,
            left + px / 2,
            bottom + px / 2,
            PLAYER_COLOR,
            font_size=px,
            anchor_x="center",
            anchor_y="center",
        )

    def on_key_press(self, symbol: int, modifiers: int) -> None:
        name = self._key_names.get(symbol)
        if name is None:
            return
        action = self.mapper.translate_key(name, modifier_names(modifiers))
        if self.session.handle(action):
            self.close()


def run(session: GameSession, settings: WindowSettings) -> None:  # pragma: no cover - manual usage
    DungeonWindow(session, settings)
    arcade.run()


__all__ = ["DungeonWindow", "key_names", "modifier_names", "run"]
