"""
Main configuration classes for navigation and simulation.

Provides dataclass-based configuration with YAML loading and validation.
Default values live in default.yaml; the dataclass defaults mirror them so
components can be built without a config file.
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Dict, Any, Optional

from .schema import validate_navigation, validate_simulation

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), 'default.yaml')


@dataclass
class NavigationConfig:
    """Path search and path following settings"""
    max_iterations: int = 100
    snap_epsilon: float = 1e-6
    default_speed: float = 1.0

    def __post_init__(self):
        validate_navigation(self)


@dataclass
class SimulationSettings:
    """Tick loop and output settings"""
    tick_delta: float = 1.0 / 60.0
    num_ticks: int = 600
    stop_when_idle: bool = True
    log_dir: str = "results"
    log_level: str = "INFO"

    def __post_init__(self):
        validate_simulation(self)


@dataclass
class SimulationConfig:
    """Top-level configuration"""
    navigation: NavigationConfig = field(default_factory=NavigationConfig)
    simulation: SimulationSettings = field(default_factory=SimulationSettings)

    @classmethod
    def from_params(cls, base_config_path: Optional[str] = None, **params) -> 'SimulationConfig':
        """
        Create configuration from YAML base and parameter overrides.

        Args:
            base_config_path: Path to a YAML file merged over default.yaml
            **params: Parameters to override using dot notation keys

        Example:
            config = SimulationConfig.from_params(
                'fast.yaml',
                **{
                    'navigation.max_iterations': 250,
                    'simulation.tick_delta': 0.05,
                }
            )
        """
        with open(DEFAULT_CONFIG_PATH, 'r') as f:
            defaults = yaml.safe_load(f)

        if base_config_path:
            if not os.path.exists(base_config_path):
                raise FileNotFoundError(f"Config file not found: {base_config_path}")
            with open(base_config_path, 'r') as f:
                custom = yaml.safe_load(f) or {}
                defaults = cls._deep_update(defaults, custom)

        if params:
            nested_overrides = cls._params_to_nested_dict(params)
            defaults = cls._deep_update(defaults, nested_overrides)

        try:
            return cls(
                navigation=NavigationConfig(**defaults['navigation']),
                simulation=SimulationSettings(**defaults['simulation'])
            )
        except TypeError as e:
            raise ValueError(f"Invalid configuration: {e}") from e

    @staticmethod
    def _params_to_nested_dict(params: Dict[str, Any]) -> Dict[str, Any]:
        """Convert dot notation parameters to nested dictionary"""
        result = {}
        for key, value in params.items():
            keys = key.split('.')
            current = result
            for k in keys[:-1]:
                if k not in current:
                    current[k] = {}
                current = current[k]
            current[keys[-1]] = value
        return result

    @staticmethod
    def _deep_update(base_dict: Dict, update_dict: Dict) -> Dict:
        """Deep update dictionary, handling nested structures"""
        result = base_dict.copy()
        for key, value in update_dict.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = SimulationConfig._deep_update(result[key], value)
            else:
                result[key] = value
        return result
