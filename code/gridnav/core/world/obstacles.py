import logging
from typing import FrozenSet, Iterable, Iterator, Optional

from .position import GridPosition


class ObstacleRegistry:
    """
    This class keeps track of the grid cells occupied by blocking objects.

    Membership may change between ticks. Searches work on an immutable
    snapshot so it can never change mid-search.
    """
    def __init__(self, positions: Optional[Iterable[GridPosition]] = None):
        self._positions = set(positions or ())
        self.logger = logging.getLogger(self.__class__.__name__)

    def add(self, pos: GridPosition) -> None:
        self._positions.add(pos)

    def remove(self, pos: GridPosition) -> None:
        """Remove an obstacle. Removing a free cell is a no-op."""
        self._positions.discard(pos)

    def clear(self) -> None:
        self._positions.clear()

    def is_blocked(self, pos: GridPosition) -> bool:
        """Check if a grid cell is occupied by an obstacle"""
        return pos in self._positions

    def on_layer(self, layer: int) -> FrozenSet[GridPosition]:
        return frozenset(p for p in self._positions if p.layer == layer)

    def snapshot(self, extra: Iterable[GridPosition] = ()) -> FrozenSet[GridPosition]:
        """Immutable copy of the obstacle set, optionally merged with extra cells"""
        return frozenset(self._positions).union(extra)

    def __contains__(self, pos) -> bool:
        return pos in self._positions

    def __iter__(self) -> Iterator[GridPosition]:
        return iter(sorted(self._positions, key=GridPosition.as_tuple))

    def __len__(self) -> int:
        return len(self._positions)
