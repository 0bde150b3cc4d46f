"""
Configuration validation schemas for navigation and simulation.

Provides validation to ensure configuration parameters are valid.
"""

import logging

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def validate_navigation(config) -> None:
    """Validate a NavigationConfig"""
    if config.max_iterations <= 0:
        raise ValueError("max_iterations must be positive")
    if config.snap_epsilon < 0:
        raise ValueError("snap_epsilon must be non-negative")
    if config.default_speed <= 0:
        raise ValueError("default_speed must be positive")


def validate_simulation(config) -> None:
    """Validate a SimulationSettings"""
    if config.tick_delta <= 0:
        raise ValueError("tick_delta must be positive")
    if config.num_ticks < 0:
        raise ValueError("num_ticks must be non-negative")
    validate_log_level(config.log_level)


def validate_log_level(log_level: str) -> int:
    """Validate a log level name and return its numeric value"""
    if not isinstance(log_level, str) or log_level.upper() not in VALID_LOG_LEVELS:
        raise ValueError(f"log_level must be one of {VALID_LOG_LEVELS}, got {log_level}")
    return getattr(logging, log_level.upper())


def validate_map_name(map_name: str) -> str:
    """Validate map name parameter"""
    if not map_name or not isinstance(map_name, str):
        raise ValueError("map name must be a non-empty string")
    return map_name
