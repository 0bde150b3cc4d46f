"""
Configuration module for navigation settings.

Provides:
- SimulationConfig: Dataclass-based configuration with YAML loading
- NavigationConfig: Path search and following configuration
- SimulationSettings: Tick loop and output configuration
"""

from .config import (
    DEFAULT_CONFIG_PATH,
    SimulationConfig,
    NavigationConfig,
    SimulationSettings
)

__all__ = [
    'DEFAULT_CONFIG_PATH',
    'SimulationConfig',
    'NavigationConfig',
    'SimulationSettings'
]
