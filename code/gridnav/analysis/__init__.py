"""
Analysis module for visualizing simulation runs.

This module provides:
- plot_run: Top-down plot of obstacles and agent trajectories
"""

from .plotting import plot_run

__all__ = [
    'plot_run'
]
