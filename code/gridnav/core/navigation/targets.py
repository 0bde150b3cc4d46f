import logging
from typing import AbstractSet, Optional

from ..world.position import GridPosition

logger = logging.getLogger(__name__)


def resolve_target(target: GridPosition, start: GridPosition,
                   obstacles: AbstractSet[GridPosition]) -> Optional[GridPosition]:
    """
    Decide the cell a search should actually aim for.

    A free target is used as is. A blocked target is replaced by its free
    neighbour closest to `start` (squared distance, first seen wins ties in
    x-then-y order). Returns None when the target and all its neighbours are blocked.
    """
    if target not in obstacles:
        return target

    closest = None
    closest_dist = float('inf')
    for neighbor in target.neighbors():
        if neighbor in obstacles:
            continue
        dist = neighbor.distance_squared(start)
        if dist < closest_dist:
            closest = neighbor
            closest_dist = dist

    if closest is None:
        logger.debug(f"Target {target} and all of its neighbours are blocked")
    else:
        logger.debug(f"Target {target} is blocked, using {closest} instead")
    return closest
