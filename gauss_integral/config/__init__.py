"""
Configuration module for TOML-based quadrature parameters.

Provides:
- Schema dataclass for typed configuration
- TOML loading and saving
- Parameter sweep expansion, e.g. over quadrature orders
"""

from .schema import Config

from .loader import load_config, save_config, config_from_dict

from .sweep import expand_sweeps, count_sweep_combinations

__all__ = [
    # Schema classes
    "Config",
    # Loader functions
    "load_config",
    "save_config",
    "config_from_dict",
    # Sweep functions
    "expand_sweeps",
    "count_sweep_combinations",
]
