"""
grand.config.schema

Configuration schemas using dataclasses.

Design: All config fields have explicit types and defaults, so GrandConfig()
is a complete, usable configuration.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..core.entropy import available_entropy_sources


@dataclass
class SeedingConfig:
    """How a RandomSource is seeded."""
    seed: Optional[int] = None  # None defers to the entropy source
    entropy_source: str = "system"
    
    def __post_init__(self):
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, int)
        ):
            raise ValueError(f"seed must be an int or None, got {self.seed!r}")
        if self.entropy_source not in available_entropy_sources():
            raise ValueError(f"Invalid entropy_source: {self.entropy_source}")


@dataclass
class LoggingConfig:
    """Seed event logging."""
    log_dir: Optional[str] = None  # None disables logging
    verbose: bool = False


@dataclass
class GrandConfig:
    """Top-level configuration.
    
    Groups the sub-configs; each supplies its own field defaults.
    """
    seeding: SeedingConfig = field(default_factory=SeedingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    
    @classmethod
    def fixed(cls, seed: int) -> "GrandConfig":
        """Factory for a deterministic configuration."""
        return cls(seeding=SeedingConfig(seed=seed))
