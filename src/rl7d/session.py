from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Callable, List, Optional, Tuple

from .config import GenerationSettings
from .dungeon.generator import MapGenerator
from .dungeon.movement import Entity, MovementEngine, Position
from .dungeon.rect import Rect
from .dungeon.tiles import TileGrid
from .input import MOVE_DELTAS, InputAction
from .rng import RandomSource

logger = logging.getLogger(__name__)


class GameEvent(Enum):
    """Events emitted by GameSession to notify the UI."""

    PLAYER_MOVED = auto()
    FULLSCREEN_TOGGLED = auto()


Listener = Callable[[GameEvent, "GameSession"], None]


class GameSession:
    """One play session: owns the generated map and the player for its lifetime.

    The player starts at the center of the first accepted room. If generation
    accepted no room the player is parked at the grid center, inside solid
    rock, and every move is refused.
    """

    def __init__(
        self,
        settings: Optional[GenerationSettings] = None,
        rng: Optional[RandomSource] = None,
        fullscreen: bool = False,
    ) -> None:
        self.settings = settings or GenerationSettings()
        self._listeners: List[Listener] = []
        self._movement = MovementEngine()
        generated = MapGenerator(self.settings, rng).generate()
        self.grid: TileGrid = generated.grid
        self.rooms: List[Rect] = generated.rooms
        self.fullscreen = fullscreen
        if self.rooms:
            sx, sy = self.rooms[0].center()
        else:
            logger.warning("No rooms were placed; player starts walled in")
            sx, sy = self.grid.width // 2, self.grid.height // 2
        self.player = Entity(id="player", pos=Position(sx, sy))
        logger.info("Session started with %d rooms, player at (%d,%d)", len(self.rooms), sx, sy)

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            listener(event, self)

    @property
    def player_pos(self) -> Tuple[int, int]:
        return self.player.pos.x, self.player.pos.y

    def move(self, dx: int, dy: int) -> bool:
        """Move the player by one cardinal step if the destination is open."""
        moved = self._movement.try_move(self.player, dx, dy, self.grid)
        if moved:
            self._emit(GameEvent.PLAYER_MOVED)
        return moved

    def handle(self, action: Optional[InputAction]) -> bool:
        """Apply an input action. Returns True when the session should end."""
        if action is None:
            return False
        if action is InputAction.EXIT:
            logger.info("Exit requested")
            return True
        if action is InputAction.TOGGLE_FULLSCREEN:
            self.fullscreen = not self.fullscreen
            logger.debug("Fullscreen is now %s", self.fullscreen)
            self._emit(GameEvent.FULLSCREEN_TOGGLED)
            return False
        dx, dy = MOVE_DELTAS[action]
        self.move(dx, dy)
        return False


__all__ = ["GameEvent", "GameSession"]
