"""
Bounded A* search over the 8-connected grid.

Every move costs 1.0, diagonal or not, and the heuristic is the squared
euclidean distance to the target. The heuristic can overestimate, so returned
paths are not guaranteed to be the cheapest.

The open set is scanned linearly for the lowest f-score. It is an
insertion-ordered dict, so ties resolve to the earliest inserted node and the
same input always yields the same path.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import AbstractSet, Deque, Dict, Optional

from ..world.position import GridPosition

MAX_ITERATIONS = 100

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """
    Outcome of a single search.

    `path` excludes the start cell and is None when the budget ran out.
    `reached_target` is False for a best-effort path that ends at the last
    explored node because the open set ran dry.
    """
    path: Optional[Deque[GridPosition]]
    reached_target: bool
    iterations: int

    @property
    def found(self) -> bool:
        return self.path is not None


def search(start: GridPosition, target: GridPosition, obstacles: AbstractSet[GridPosition],
           max_iterations: int = MAX_ITERATIONS) -> SearchResult:
    """Run A* from start to target, giving up after `max_iterations` expansions."""
    if start.layer != target.layer:
        raise ValueError(f"Cannot search between layers: {start} -> {target}")

    def h(node: GridPosition) -> float:
        return float(node.distance_squared(target))

    open_set: Dict[GridPosition, None] = {start: None}
    came_from: Dict[GridPosition, GridPosition] = {}
    g_score: Dict[GridPosition, float] = {start: 0.0}
    f_score: Dict[GridPosition, float] = {start: h(start)}

    current = start
    iterations = 0
    while open_set:
        iterations += 1
        if iterations > max_iterations:
            logger.debug(f"Search {start} -> {target} gave up after {max_iterations} iterations")
            return SearchResult(None, False, max_iterations)

        current = min(open_set, key=lambda pos: f_score.get(pos, float('inf')))
        if current == target:
            break

        del open_set[current]

        g = g_score[current] + 1.0
        for neighbor in current.neighbors():
            if neighbor in obstacles:
                continue
            if g < g_score.get(neighbor, float('inf')):
                came_from[neighbor] = current
                g_score[neighbor] = g
                f_score[neighbor] = g + h(neighbor)
                open_set[neighbor] = None

    reached = current == target
    if not reached:
        logger.debug(f"Open set exhausted before reaching {target}, ending path at {current}")
    return SearchResult(_reconstruct(came_from, current), reached, iterations)


def _reconstruct(came_from: Dict[GridPosition, GridPosition], current: GridPosition) -> Deque[GridPosition]:
    """Walk back-pointers to the start; the start itself is left out"""
    path = deque()
    while current in came_from:
        path.appendleft(current)
        current = came_from[current]
    return path


def find_path(start: GridPosition, target: GridPosition, obstacles: AbstractSet[GridPosition],
              max_iterations: int = MAX_ITERATIONS) -> Optional[Deque[GridPosition]]:
    return search(start, target, obstacles, max_iterations).path
