from __future__ import annotations

import logging
from enum import Enum
from typing import List, Tuple

from ..rng import RandomSource
from .tiles import TileGrid

logger = logging.getLogger(__name__)

Point = Tuple[int, int]


class Elbow(Enum):
    """Which corner an L-shaped corridor turns at."""

    HORIZONTAL_FIRST = "horizontal_first"  # corner at (new_x, prev_y)
    VERTICAL_FIRST = "vertical_first"  # corner at (prev_x, new_y)


def carve_h_tunnel(grid: TileGrid, x1: int, x2: int, y: int) -> None:
    if x2 < x1:
        x1, x2 = x2, x1
    for x in range(x1, x2 + 1):
        grid.set_floor(x, y)


def carve_v_tunnel(grid: TileGrid, y1: int, y2: int, x: int) -> None:
    if y2 < y1:
        y1, y2 = y2, y1
    for y in range(y1, y2 + 1):
        grid.set_floor(x, y)


def _span(a: int, b: int) -> range:
    step = 1 if b >= a else -1
    return range(a, b + step, step)


def l_path(prev: Point, new: Point, elbow: Elbow) -> List[Point]:
    """Cells walked from ``prev`` to ``new`` along the L, in order.

    ``connect_rooms`` carves exactly these cells. The corner cell appears twice.
    """
    (px, py), (nx, ny) = prev, new
    if elbow is Elbow.HORIZONTAL_FIRST:
        return [(x, py) for x in _span(px, nx)] + [(nx, y) for y in _span(py, ny)]
    return [(px, y) for y in _span(py, ny)] + [(x, ny) for x in _span(px, nx)]


def connect_rooms(grid: TileGrid, prev: Point, new: Point, rng: RandomSource) -> Elbow:
    """Carve an L-shaped corridor from ``prev`` to ``new``.

    A single coin flip picks the corner. Either shape joins the two points, so
    the flip only affects the look of the map.
    """
    elbow = Elbow.HORIZONTAL_FIRST if rng.coin_flip() else Elbow.VERTICAL_FIRST
    for x, y in l_path(prev, new, elbow):
        grid.set_floor(x, y)
    logger.debug("Carved %s corridor %s -> %s", elbow.value, prev, new)
    return elbow


__all__ = ["Elbow", "carve_h_tunnel", "carve_v_tunnel", "connect_rooms", "l_path"]
