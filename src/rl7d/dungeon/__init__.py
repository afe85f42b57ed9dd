"""
Dungeon core for rl7d.

Contains the tile grid, room placement, corridor carving, map generation and
the movement rule that consults the grid before an entity changes cells.
"""
from .corridors import Elbow, carve_h_tunnel, carve_v_tunnel, connect_rooms
from .generator import GeneratedMap, MapGenerator, generate_map
from .movement import Entity, MovementEngine, Position, can_move
from .rect import Rect
from .rooms import RoomPlacer, fits
from .tiles import Tile, TileGrid

__all__ = [
    "Elbow",
    "Entity",
    "GeneratedMap",
    "MapGenerator",
    "MovementEngine",
    "Position",
    "Rect",
    "RoomPlacer",
    "Tile",
    "TileGrid",
    "can_move",
    "carve_h_tunnel",
    "carve_v_tunnel",
    "connect_rooms",
    "fits",
    "generate_map",
]
