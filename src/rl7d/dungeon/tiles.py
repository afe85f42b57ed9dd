from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Iterator, List, Optional, Sequence, Tuple

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tile:
    """Blocking state of one grid cell.

    ``blocks_sight`` is carried for future visibility work and always equals
    ``blocked`` here.
    """

    blocked: bool
    blocks_sight: bool

    WALL: ClassVar["Tile"]
    FLOOR: ClassVar["Tile"]


Tile.WALL = Tile(blocked=True, blocks_sight=True)
Tile.FLOOR = Tile(blocked=False, blocks_sight=False)

# text form shared by from_lines, to_lines and the ASCII renderer
WALL_GLYPH = "#"
FLOOR_GLYPH = "."


class TileGrid:
    """Fixed-size rectangular map of tiles stored in one flat row-major list.

    Cell ``(x, y)`` lives at index ``y * width + x``. Every cell starts as a
    wall and only carving (``set_floor``) changes it. Reads and writes outside
    the grid raise IndexError: callers are expected never to produce such a
    coordinate, so one showing up means a bug upstream.
    """

    __slots__ = ("_w", "_h", "_tiles")

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"TileGrid dimensions must be positive, got {width}x{height}")
        self._w = int(width)
        self._h = int(height)
        self._tiles: List[Tile] = [Tile.WALL] * (self._w * self._h)
        logger.debug("Initialized TileGrid %dx%d", self._w, self._h)

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._w and 0 <= y < self._h

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinates out of bounds: ({x}, {y}) for grid {self._w}x{self._h}")
        return y * self._w + x

    def get(self, x: int, y: int) -> Tile:
        return self._tiles[self._index(x, y)]

    def set_floor(self, x: int, y: int) -> None:
        """Mark (x, y) as floor. Calling it again on the same cell is a no-op."""
        self._tiles[self._index(x, y)] = Tile.FLOOR

    def is_blocked(self, x: int, y: int) -> bool:
        return self._tiles[self._index(x, y)].blocked

    def blocks_sight(self, x: int, y: int) -> bool:
        return self._tiles[self._index(x, y)].blocks_sight

    def floor_count(self) -> int:
        return sum(1 for t in self._tiles if not t.blocked)

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield every coordinate in row-major order."""
        for y in range(self._h):
            for x in range(self._w):
                yield x, y

    def snapshot(self) -> Tuple[bool, ...]:
        """Hashable copy of every cell's blocked flag, for equality checks."""
        return tuple(t.blocked for t in self._tiles)

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "TileGrid":
        """Build a grid from rows of '#' (wall) and '.' (floor).

        Handy for test fixtures. Any character other than '.' stays a wall.
        """
        if not lines:
            raise ConfigurationError("lines must not be empty")
        width = len(lines[0])
        for i, row in enumerate(lines):
            if len(row) != width:
                raise ConfigurationError(
                    f"All rows must have equal width; row 0 has {width}, row {i} has {len(row)}"
                )
        grid = cls(width, len(lines))
        for y, row in enumerate(lines):
            for x, ch in enumerate(row):
                if ch == FLOOR_GLYPH:
                    grid.set_floor(x, y)
        return grid

    def to_lines(self, overlay: Optional[dict[Tuple[int, int], str]] = None) -> List[str]:
        """Render the grid as '#'/'.' rows; ``overlay`` replaces single cells."""
        overlay = overlay or {}
        rows: List[str] = []
        for y in range(self._h):
            row = []
            for x in range(self._w):
                glyph = WALL_GLYPH if self._tiles[y * self._w + x].blocked else FLOOR_GLYPH
                row.append(overlay.get((x, y), glyph))
            rows.append("".join(row))
        return rows

    def __repr__(self) -> str:
        return f"TileGrid(width={self._w}, height={self._h})"


__all__ = ["FLOOR_GLYPH", "Tile", "TileGrid", "WALL_GLYPH"]
