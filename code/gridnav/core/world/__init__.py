"""
World module for grid coordinates, obstacles, agents and map loading.

This module provides:
- GridPosition: Integer (x, y, layer) grid cell
- CoordinateMapper: Grid <-> world space transformations over terrain altitudes
- ObstacleRegistry: Set of blocked grid cells
- AgentStore / AgentRecord: Agents with optional path, follower and request fields
- World: Terrain, obstacles and agents loaded from a map file
"""

from .position import GridPosition
from .coordinates import CoordinateMapper
from .obstacles import ObstacleRegistry
from .agents import AgentRecord, AgentStore, PathFollower, PathRequest
from .world import World

__all__ = [
    'GridPosition',
    'CoordinateMapper',
    'ObstacleRegistry',
    'AgentRecord',
    'AgentStore',
    'PathFollower',
    'PathRequest',
    'World'
]
