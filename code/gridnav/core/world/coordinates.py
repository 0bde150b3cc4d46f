import logging
import math
from typing import Dict, Optional

import numpy as np

from .position import GridPosition


class CoordinateMapper:
    """
    This class handles coordinate transformations between grid cells and world space.

    The terrain is a grid of `width x height` quads centred on the world origin,
    stored as a `(height + 1, width + 1)` array of vertex altitudes. Cell (0, 0)
    is the quad at the centre of the terrain. World points are `[x, altitude, z]`
    with grid x along world x and grid y along world z.
    """
    def __init__(self, width: int, height: int, altitudes: Optional[np.ndarray] = None,
                 cell_size: float = 1.0):
        if width <= 0 or height <= 0:
            raise ValueError(f"Terrain size must be positive, got {width}x{height}")
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        if altitudes is None:
            altitudes = np.zeros((height + 1, width + 1), dtype=float)
        altitudes = np.asarray(altitudes, dtype=float)
        if altitudes.shape != (height + 1, width + 1):
            raise ValueError(f"Expected altitude grid of shape {(height + 1, width + 1)}, got {altitudes.shape}")

        self.width = width
        self.height = height
        self.cell_size = float(cell_size)
        self.altitudes = altitudes
        self.logger = logging.getLogger(self.__class__.__name__)

    @classmethod
    def plane(cls, width: int, height: int, cell_size: float = 1.0) -> 'CoordinateMapper':
        """Flat terrain at altitude 0"""
        return cls(width, height, cell_size=cell_size)

    @classmethod
    def sinusoidal(cls, width: int, height: int, amplitude: float,
                   cell_size: float = 1.0) -> 'CoordinateMapper':
        """Terrain whose altitude follows a sine of the vertex index"""
        index = np.arange((height + 1) * (width + 1), dtype=float).reshape(height + 1, width + 1)
        return cls(width, height, amplitude * np.sin(index), cell_size=cell_size)

    @classmethod
    def from_heightmap(cls, heightmap, max_altitude: float,
                       cell_size: float = 1.0) -> 'CoordinateMapper':
        """
        Build terrain from a heightmap of 0-255 values, one per vertex.

        A value of 255 gives altitude `max_altitude`.
        """
        heightmap = np.asarray(heightmap, dtype=float)
        if heightmap.ndim != 2 or heightmap.shape[0] < 2 or heightmap.shape[1] < 2:
            raise ValueError(f"Heightmap must be a 2D grid of at least 2x2 vertices, got shape {heightmap.shape}")
        height, width = heightmap.shape[0] - 1, heightmap.shape[1] - 1
        return cls(width, height, heightmap / 255.0 * max_altitude, cell_size=cell_size)

    @classmethod
    def from_info(cls, terrain_info: Dict) -> 'CoordinateMapper':
        """Build terrain from the `terrain` section of a map file"""
        cell_size = terrain_info.get('cell_size', 1.0)
        if 'heightmap' in terrain_info:
            return cls.from_heightmap(terrain_info['heightmap'],
                                      terrain_info.get('max_altitude', 1.0),
                                      cell_size=cell_size)
        amplitude = terrain_info.get('amplitude', 0.0)
        if amplitude:
            return cls.sinusoidal(terrain_info['width'], terrain_info['height'], amplitude,
                                  cell_size=cell_size)
        return cls.plane(terrain_info['width'], terrain_info['height'], cell_size=cell_size)

    def _vertex_index(self, pos: GridPosition):
        return self.width // 2 + pos.x, self.height // 2 + pos.y

    def in_bounds(self, pos: GridPosition) -> bool:
        """Check if the grid cell lies on the terrain"""
        vx, vy = self._vertex_index(pos)
        return 0 <= vx < self.width and 0 <= vy < self.height

    def vertex_altitude(self, vx: int, vy: int) -> float:
        if 0 <= vx <= self.width and 0 <= vy <= self.height:
            return float(self.altitudes[vy, vx])
        return 0.0

    def grid_to_world(self, pos: GridPosition) -> np.ndarray:
        """
        Convert a grid position to a world position.

        Altitude is the average of the cell's four corner vertices. Cells off the
        terrain sit at altitude 0.
        """
        vx, vy = self._vertex_index(pos)
        corner_x = (vx - self.width / 2.0) * self.cell_size
        corner_z = (vy - self.height / 2.0) * self.cell_size
        altitude = (self.vertex_altitude(vx, vy) +
                    self.vertex_altitude(vx + 1, vy) +
                    self.vertex_altitude(vx + 1, vy + 1) +
                    self.vertex_altitude(vx, vy + 1)) / 4.0
        return np.array([corner_x + self.cell_size / 2.0,
                         altitude,
                         corner_z + self.cell_size / 2.0])

    def world_to_grid(self, point, layer: int = 0) -> GridPosition:
        """Convert a world position to the grid cell containing it"""
        x = math.floor(point[0] / self.cell_size + self.width / 2.0) - self.width // 2
        y = math.floor(point[2] / self.cell_size + self.height / 2.0) - self.height // 2
        return GridPosition(int(x), int(y), layer)
