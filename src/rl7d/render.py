from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .dungeon.tiles import FLOOR_GLYPH, WALL_GLYPH, TileGrid


class CellStyle(Enum):
    """The two visual states a cell can be drawn in."""

    WALL = "wall"
    FLOOR = "floor"

    @property
    def glyph(self) -> str:
        return WALL_GLYPH if self is CellStyle.WALL else FLOOR_GLYPH

    @property
    def color(self) -> Tuple[int, int, int]:
        """Default RGB colour for the arcade renderer."""
        return {
            CellStyle.WALL: (0, 0, 100),
            CellStyle.FLOOR: (50, 50, 150),
        }[self]


PLAYER_GLYPH = "@"
PLAYER_COLOR: Tuple[int, int, int] = (255, 255, 255)


def cell_style(grid: TileGrid, x: int, y: int) -> CellStyle:
    return CellStyle.WALL if grid.blocks_sight(x, y) else CellStyle.FLOOR


def iter_cells(grid: TileGrid) -> Iterator[Tuple[int, int, CellStyle]]:
    for x, y in grid.cells():
        yield x, y, cell_style(grid, x, y)


def render_ascii(grid: TileGrid, player: Optional[Tuple[int, int]] = None) -> List[str]:
    rows: List[List[str]] = [[] for _ in range(grid.height)]
    for x, y, style in iter_cells(grid):
        rows[y].append(PLAYER_GLYPH if (x, y) == player else style.glyph)
    return ["".join(row) for row in rows]


def view_tiles(grid: TileGrid, columns: int, rows: int) -> Tuple[int, int]:
    """Tile size of a view that holds at least ``columns`` x ``rows`` and the whole grid."""
    return max(columns, grid.width), max(rows, grid.height)


def cell_origin(x: int, y: int, rows: int, tile_px: int) -> Tuple[int, int]:
    """Bottom-left pixel of cell (x, y) in a view ``rows`` tiles tall.

    Map rows grow downward, screen y grows upward.
    """
    return x * tile_px, (rows - 1 - y) * tile_px


__all__ = [
    "CellStyle",
    "PLAYER_COLOR",
    "PLAYER_GLYPH",
    "cell_origin",
    "cell_style",
    "iter_cells",
    "render_ascii",
    "view_tiles",
]
