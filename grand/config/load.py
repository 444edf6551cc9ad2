"""
grand.config.load

Config loading and validation.
"""

import yaml
from pathlib import Path
from typing import Union, Dict, Any

from .schema import GrandConfig, SeedingConfig, LoggingConfig
from ..core.exceptions import ConfigError


def load_config(path: Union[str, Path]) -> GrandConfig:
    """Load configuration from YAML file."""
    path = Path(path)
    
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")
    
    # An empty file means "all defaults".
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config root must be a mapping in {path}")
    
    return config_from_dict(raw)


def config_from_dict(d: Dict[str, Any]) -> GrandConfig:
    """Create GrandConfig from dictionary."""
    unknown = set(d) - {"seeding", "logging"}
    if unknown:
        raise ConfigError(f"Unknown config sections: {sorted(unknown)}")
    
    try:
        seeding = SeedingConfig(**(d.get("seeding") or {}))
        logging = LoggingConfig(**(d.get("logging") or {}))
        return GrandConfig(seeding=seeding, logging=logging)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config: {e}")


def save_config(config: GrandConfig, path: Union[str, Path]) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    
    d = config_to_dict(config)
    
    with open(path, "w") as f:
        yaml.dump(d, f, default_flow_style=False, sort_keys=False)


def config_to_dict(config: GrandConfig) -> Dict[str, Any]:
    """Convert GrandConfig to dictionary."""
    return {
        "seeding": {
            "seed": config.seeding.seed,
            "entropy_source": config.seeding.entropy_source,
        },
        "logging": {
            "log_dir": config.logging.log_dir,
            "verbose": config.logging.verbose,
        },
    }
