"""
gridnav: bounded A* pathfinding and frame-driven path following on layered grids.
"""

__version__ = '0.1.0'
