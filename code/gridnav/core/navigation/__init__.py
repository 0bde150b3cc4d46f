"""
Navigation module for path search and path following.

This module provides:
- resolve_target: Substitute a free neighbour for a blocked target
- search / find_path: Bounded A* search over the grid
- advance_follower: Move an agent one tick along its path
- process_path_requests / follow_paths: Per-tick systems over a TickContext
"""

from .targets import resolve_target
from .astar import MAX_ITERATIONS, SearchResult, search, find_path
from .movement import SNAP_EPSILON, advance_follower, lerp
from .systems import PathOutcome, TickContext, process_request, process_path_requests, follow_paths

__all__ = [
    'resolve_target',
    'MAX_ITERATIONS',
    'SearchResult',
    'search',
    'find_path',
    'SNAP_EPSILON',
    'advance_follower',
    'lerp',
    'PathOutcome',
    'TickContext',
    'process_request',
    'process_path_requests',
    'follow_paths'
]
