"""
grand.core.entropy

Nondeterministic entropy sources used to resolve deferred seeding.

A RandomSource only touches its entropy source when an output is requested
while an unpredictable seed is pending. Sources are injectable so tests
(and environments without an OS entropy pool) can replace them.
"""

import os
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Type

from .exceptions import ConfigError, EntropySourceError


class EntropySource(ABC):
    """Produces unpredictable 32-bit seed values on demand."""
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Registry name of this source."""
    
    @abstractmethod
    def draw_seed(self) -> int:
        """Return an unpredictable integer suitable for seeding.
        
        Raises:
            EntropySourceError: If no entropy could be obtained.
        """


_ENTROPY_SOURCES: Dict[str, Type[EntropySource]] = {}


def register_entropy_source(name: str) -> Callable[[Type[EntropySource]], Type[EntropySource]]:
    """Class decorator adding an EntropySource subclass to the registry."""
    def decorator(cls: Type[EntropySource]) -> Type[EntropySource]:
        if name in _ENTROPY_SOURCES:
            raise ConfigError(f"Entropy source already registered: {name}")
        _ENTROPY_SOURCES[name] = cls
        return cls
    return decorator


@register_entropy_source("system")
class SystemEntropySource(EntropySource):
    """Four bytes from ``os.urandom()``."""
    
    @property
    def name(self) -> str:
        return "system"
    
    def draw_seed(self) -> int:
        try:
            raw = os.urandom(4)
        except (OSError, NotImplementedError) as e:
            raise EntropySourceError(f"OS entropy source unavailable: {e}") from e
        return int.from_bytes(raw, "little")


def get_entropy_source(name: str) -> EntropySource:
    """Instantiate a registered entropy source by name.
    
    Raises:
        ConfigError: If name is not registered.
    """
    try:
        cls = _ENTROPY_SOURCES[name]
    except KeyError:
        raise ConfigError(
            f"Unknown entropy source: {name!r} "
            f"(available: {', '.join(available_entropy_sources())})"
        ) from None
    return cls()


def available_entropy_sources() -> List[str]:
    """Sorted names of all registered entropy sources."""
    return sorted(_ENTROPY_SOURCES)
