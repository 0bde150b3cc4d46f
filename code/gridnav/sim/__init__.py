"""
Simulation module for driving the navigation systems over time.

This module provides:
- FrameClock: Fixed-step frame clock
- Simulation: Tick loop running the search and motion passes over a World
- SimulationRunner: Config, logging and output orchestration for the CLI
"""

from .simulation import FrameClock, Simulation, TRACE_COLUMNS
from .runner import SimulationRunner

__all__ = [
    'FrameClock',
    'Simulation',
    'TRACE_COLUMNS',
    'SimulationRunner'
]
