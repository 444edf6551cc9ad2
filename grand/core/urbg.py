"""
grand.core.urbg

Uniform random bit generator capability.

Generic consumers (see grand.core.adapters) accept any object implementing
this interface without knowing anything else about it.
"""

from abc import ABC, abstractmethod


class UniformRandomBitGenerator(ABC):
    """Raw-draw operation plus static output bounds.
    
    Every value returned by ``__call__()`` is an instance of
    ``result_type`` in ``[min(), max()]``, uniformly distributed.
    """
    
    result_type: type = int
    
    @classmethod
    @abstractmethod
    def min(cls) -> int:
        """Smallest value a raw draw can return."""
    
    @classmethod
    @abstractmethod
    def max(cls) -> int:
        """Largest value a raw draw can return."""
    
    @abstractmethod
    def __call__(self) -> int:
        """Return one raw draw."""
