from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..rng import RandomSource
from .rect import Rect
from .tiles import TileGrid

logger = logging.getLogger(__name__)


def fits(candidate: Rect, accepted: Sequence[Rect]) -> bool:
    """Return True if ``candidate`` intersects none of the ``accepted`` rooms."""
    return not any(candidate.intersects_with(other) for other in accepted)


def carve_room(grid: TileGrid, room: Rect) -> None:
    for x, y in room.interior():
        grid.set_floor(x, y)


class RoomPlacer:
    """Scatters non-overlapping rectangular rooms over a grid, one attempt at a time.

    Each attempt samples a size and an origin, keeps the candidate only if it
    clears every room accepted so far, and carves its interior. Rejected
    candidates are dropped without trace; the caller decides how many attempts
    to make.
    """

    def __init__(self, grid: TileGrid, room_min_size: int, room_max_size: int, rng: RandomSource) -> None:
        self.grid = grid
        self.room_min_size = room_min_size
        self.room_max_size = room_max_size
        self._rng = rng
        self.rooms: List[Rect] = []

    def sample(self) -> Rect:
        """Draw a candidate rectangle lying fully inside the grid."""
        rng = self._rng
        w = rng.randint(self.room_min_size, self.room_max_size)
        h = rng.randint(self.room_min_size, self.room_max_size)
        x = rng.randint(0, self.grid.width - w - 1)
        y = rng.randint(0, self.grid.height - h - 1)
        return Rect.from_size(x, y, w, h)

    def attempt(self) -> Optional[Rect]:
        """Run one placement attempt; return the accepted room or None."""
        candidate = self.sample()
        if not fits(candidate, self.rooms):
            logger.debug("Rejected room %s: overlaps an accepted room", candidate)
            return None
        carve_room(self.grid, candidate)
        self.rooms.append(candidate)
        logger.debug("Accepted room #%d %s", len(self.rooms), candidate)
        return candidate


__all__ = ["RoomPlacer", "fits", "carve_room"]
