"""
grand.core.validation

Boundary conversion of caller-supplied seeds and bounds.

Design: Convert at API boundaries, trust internally.
All conversion functions raise ConversionError on failure, chained to
the exception the underlying conversion raised.
"""

import math
import numbers
import operator
from typing import Any

from .exceptions import ConversionError


SEED_BITS = 32
SEED_MASK = (1 << SEED_BITS) - 1
INT64_MAX = (1 << 63) - 1


def _reject_text(value: Any, name: str) -> None:
    # float("0.5") and int("7") succeed, but a string is never a number here.
    if isinstance(value, (str, bytes, bytearray)):
        raise ConversionError(
            f"{name} must be numeric, got {type(value).__name__}"
        )


def to_integer(value: Any, name: str = "value") -> int:
    """Convert value to a Python int.
    
    Integral types (int, bool, numpy integers, anything with __index__)
    convert exactly. Other real numbers are truncated toward zero.
    
    Raises:
        ConversionError: If value is not numeric or is not finite.
    """
    _reject_text(value, name)
    
    try:
        return operator.index(value)
    except TypeError as e:
        if not isinstance(value, numbers.Real):
            raise ConversionError(
                f"{name} must be an integer, got {type(value).__name__}"
            ) from e
    
    try:
        return math.trunc(value)
    except (ValueError, OverflowError) as e:
        raise ConversionError(f"{name} must be finite, got {value!r}") from e


def to_seed(value: Any) -> int:
    """Convert value to an engine seed in [0, 2**32 - 1].
    
    Out-of-range integers wrap modulo 2**32, so -1 becomes 0xFFFFFFFF.
    """
    return to_integer(value, "seed") & SEED_MASK


def to_int_bound(value: Any, name: str = "n") -> int:
    """Convert an exclusive upper bound for integer sampling.
    
    Any integer is accepted; non-positive bounds are returned unchanged.
    """
    return to_integer(value, name)


def to_real(value: Any, name: str = "value") -> float:
    """Convert value to a Python float."""
    _reject_text(value, name)
    
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise ConversionError(
            f"{name} must be a real number, got {type(value).__name__}"
        ) from e
