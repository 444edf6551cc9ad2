"""
grand

Easy pseudorandom number generation: a lazily seeded convenience wrapper
around numpy's 32-bit Mersenne Twister. Not for cryptographic use.
"""

from .core import (
    RandomSource,
    RandomAdapter,
    UniformRandomBitGenerator,
    shuffle,
    EntropySource,
    SystemEntropySource,
    GrandError,
    ConversionError,
    EntropySourceError,
    ValidationError,
    ConfigError,
)

__version__ = "1.1.1"

# Guaranteed to increase with each release: 1 01 01 means 1.1.1
PACKAGE_VERSION = 10101

__all__ = [
    "RandomSource",
    "RandomAdapter",
    "UniformRandomBitGenerator",
    "shuffle",
    "EntropySource",
    "SystemEntropySource",
    "GrandError",
    "ConversionError",
    "EntropySourceError",
    "ValidationError",
    "ConfigError",
    "__version__",
    "PACKAGE_VERSION",
]
