from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, Protocol, Tuple

logger = logging.getLogger(__name__)

CARDINAL_DELTAS: FrozenSet[Tuple[int, int]] = frozenset({(0, -1), (0, 1), (-1, 0), (1, 0)})


@dataclass
class Position:
    x: int
    y: int


@dataclass
class Entity:
    """A movable object on the map, identified by name.

    It only stores a coordinate; all map questions go through the grid.
    """

    id: str
    pos: Position


class CollisionMap(Protocol):
    """What movement needs from a map: a blocking predicate by coordinate."""

    def is_blocked(self, x: int, y: int) -> bool: ...


def can_move(grid: CollisionMap, x: int, y: int, dx: int, dy: int) -> bool:
    """Return True if the cell at (x + dx, y + dy) is not blocked.

    The destination must be inside the grid; the grid raises IndexError
    otherwise.
    """
    return not grid.is_blocked(x + dx, y + dy)


class MovementEngine:
    """Applies single-step cardinal moves that the grid allows."""

    def try_move(self, entity: Entity, dx: int, dy: int, grid: CollisionMap) -> bool:
        """Attempt to move an entity by (dx, dy).

        Returns True if the entity moved. Non-cardinal deltas and blocked
        destinations return False and leave the entity where it was.
        """
        if (dx, dy) not in CARDINAL_DELTAS:
            logger.debug("Rejected non-cardinal move (%d,%d) for %s", dx, dy, entity.id)
            return False

        if not can_move(grid, entity.pos.x, entity.pos.y, dx, dy):
            logger.debug(
                "Blocked movement for %s: target (%d,%d) is blocked",
                entity.id,
                entity.pos.x + dx,
                entity.pos.y + dy,
            )
            return False

        tx = entity.pos.x + dx
        ty = entity.pos.y + dy
        logger.debug("Entity %s moves from (%d,%d) to (%d,%d)", entity.id, entity.pos.x, entity.pos.y, tx, ty)
        entity.pos.x = tx
        entity.pos.y = ty
        return True


__all__ = ["CARDINAL_DELTAS", "Position", "Entity", "CollisionMap", "MovementEngine", "can_move"]
