"""
grand.core

Core of grand.

Exports:
- Exception classes
- RandomSource and its seeding states
- Uniform random bit generator interface and adapters
- Entropy sources
- Conversion utilities
- Seed logging
"""

from .exceptions import (
    GrandError,
    ConversionError,
    EntropySourceError,
    ValidationError,
    ConfigError,
)

from .rng import (
    RandomSource,
    PendingEntropy,
    Seeded,
    SeedCallback,
)

from .urbg import UniformRandomBitGenerator

from .adapters import RandomAdapter, shuffle

from .entropy import (
    EntropySource,
    SystemEntropySource,
    register_entropy_source,
    get_entropy_source,
    available_entropy_sources,
)

from .validation import (
    to_integer,
    to_seed,
    to_int_bound,
    to_real,
)

from .logging import create_seed_logger

__all__ = [
    # Exceptions
    "GrandError",
    "ConversionError",
    "EntropySourceError",
    "ValidationError",
    "ConfigError",
    # RNG
    "RandomSource",
    "PendingEntropy",
    "Seeded",
    "SeedCallback",
    # Interoperability
    "UniformRandomBitGenerator",
    "RandomAdapter",
    "shuffle",
    # Entropy
    "EntropySource",
    "SystemEntropySource",
    "register_entropy_source",
    "get_entropy_source",
    "available_entropy_sources",
    # Validation
    "to_integer",
    "to_seed",
    "to_int_bound",
    "to_real",
    # Logging
    "create_seed_logger",
]
