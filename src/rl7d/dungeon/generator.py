from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional

from ..config import GenerationSettings
from ..rng import RandomSource, SeededRandom
from .corridors import connect_rooms
from .rect import Rect
from .rooms import RoomPlacer
from .tiles import TileGrid

logger = logging.getLogger(__name__)


class GeneratedMap(NamedTuple):
    grid: TileGrid
    rooms: List[Rect]  # in acceptance order


class MapGenerator:
    """Rooms-and-corridors map generator.

    Makes exactly ``max_rooms`` placement attempts. Every accepted room after
    the first is joined to the previously accepted one by an L-shaped corridor
    between their centers. Accepting no room at all is a valid outcome and
    leaves the grid entirely walled.
    """

    def __init__(self, settings: GenerationSettings, rng: Optional[RandomSource] = None) -> None:
        settings.validate()
        self.settings = settings
        self.rng: RandomSource = rng if rng is not None else SeededRandom(settings.seed)

    def generate(self) -> GeneratedMap:
        s = self.settings
        grid = TileGrid(s.width, s.height)
        placer = RoomPlacer(grid, s.room_min_size, s.room_max_size, self.rng)

        for _ in range(s.max_rooms):
            room = placer.attempt()
            if room is None or len(placer.rooms) < 2:
                continue
            previous = placer.rooms[-2]
            connect_rooms(grid, previous.center(), room.center(), self.rng)

        logger.info(
            "Generated %dx%d map: %d/%d attempts accepted, %d floor tiles",
            s.width,
            s.height,
            len(placer.rooms),
            s.max_rooms,
            grid.floor_count(),
        )
        return GeneratedMap(grid, list(placer.rooms))


def generate_map(
    width: int,
    height: int,
    room_min_size: int,
    room_max_size: int,
    max_rooms: int,
    rng: RandomSource,
) -> GeneratedMap:
    """Generate one map; raises ConfigurationError for ill-formed bounds."""
    settings = GenerationSettings(
        width=width,
        height=height,
        room_min_size=room_min_size,
        room_max_size=room_max_size,
        max_rooms=max_rooms,
    )
    return MapGenerator(settings, rng).generate()


__all__ = ["GeneratedMap", "MapGenerator", "generate_map"]
