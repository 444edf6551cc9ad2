"""
grand.config

Configuration management for grand.

Exports:
- Config schemas
- Loading/saving utilities
- RandomSource construction from config
"""

from .schema import (
    GrandConfig,
    SeedingConfig,
    LoggingConfig,
)

from .load import (
    load_config,
    save_config,
    config_from_dict,
    config_to_dict,
)

from .build import build_random_source

__all__ = [
    # Schemas
    "GrandConfig",
    "SeedingConfig",
    "LoggingConfig",
    # Load/save
    "load_config",
    "save_config",
    "config_from_dict",
    "config_to_dict",
    # Construction
    "build_random_source",
]
