import math
from dataclasses import dataclass
from typing import Iterator, Sequence


@dataclass(frozen=True)
class GridPosition:
    """
    Integer grid cell. Cells on different layers are never connected.
    """
    x: int
    y: int
    layer: int = 0

    def distance_squared(self, other: 'GridPosition') -> int:
        """Squared euclidean distance, layer included"""
        return ((self.x - other.x) ** 2 +
                (self.y - other.y) ** 2 +
                (self.layer - other.layer) ** 2)

    def distance(self, other: 'GridPosition') -> float:
        return math.sqrt(self.distance_squared(other))

    def neighbors(self) -> Iterator['GridPosition']:
        """Yield the 8 surrounding cells on the same layer, x then y ascending."""
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                yield GridPosition(self.x + dx, self.y + dy, self.layer)

    def is_adjacent(self, other: 'GridPosition') -> bool:
        """True when other is one of the 8 same-layer neighbours"""
        return (self.layer == other.layer and
                max(abs(self.x - other.x), abs(self.y - other.y)) == 1)

    def as_tuple(self):
        return self.x, self.y, self.layer

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> 'GridPosition':
        """Build from [x, y] or [x, y, layer]"""
        if len(values) not in (2, 3):
            raise ValueError(f"Grid position needs 2 or 3 components, got {list(values)}")
        return cls(*(int(v) for v in values))

    @classmethod
    def parse(cls, text: str) -> 'GridPosition':
        """Parse 'x,y' or 'x,y,layer'"""
        try:
            return cls.from_sequence([int(part) for part in text.split(',')])
        except ValueError as e:
            raise ValueError(f"Invalid grid position '{text}': {e}") from e

    def __str__(self):
        return f"({self.x}, {self.y}, {self.layer})"


GridPosition.ZERO = GridPosition(0, 0, 0)
