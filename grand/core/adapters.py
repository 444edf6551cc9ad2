"""
grand.core.adapters

Generic consumers parameterized over a UniformRandomBitGenerator.

RandomAdapter plugs any bit generator into the stdlib ``random.Random``
API the same way ``random.SystemRandom`` plugs in the OS: only
``random()`` and ``getrandbits()`` are overridden, and every other method
(shuffle, sample, choice, gauss, ...) is derived from them by the stdlib.
"""

import random
from typing import Any, MutableSequence, NoReturn

from .exceptions import ValidationError
from .urbg import UniformRandomBitGenerator


BPF = 53  # Number of bits in a float
RECIP_BPF = 2 ** -BPF


class RandomAdapter(random.Random):
    """random.Random whose entropy comes from a bit generator.

    The bit generator must produce values in [0, 2**k - 1] for some k >= 1.
    Draws go straight to it, so interleaving adapter calls with direct
    calls on the same generator advances one shared stream.
    """

    def __init__(self, urbg: UniformRandomBitGenerator) -> None:
        low, high = urbg.min(), urbg.max()
        span = high - low + 1
        if low != 0 or span < 2 or span & (span - 1):
            raise ValidationError(
                f"bit generator range must be [0, 2**k - 1], got [{low}, {high}]"
            )
        self._urbg = urbg
        self._word_bits = span.bit_length() - 1
        self.gauss_next = None

    @property
    def urbg(self) -> UniformRandomBitGenerator:
        return self._urbg

    def random(self) -> float:
        """Get the next random number in the range 0.0 <= X < 1.0."""
        return self.getrandbits(BPF) * RECIP_BPF

    def getrandbits(self, k: int) -> int:
        """getrandbits(k) -> x.  Generates an int with k random bits."""
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        n_words = -(-k // self._word_bits)
        x = 0
        for _ in range(n_words):
            x = (x << self._word_bits) | int(self._urbg())
        return x >> (n_words * self._word_bits - k)

    def seed(self, *args: Any, **kwds: Any) -> None:
        "Stub method.  Reseed the underlying bit generator instead."
        return None

    def _notimplemented(self, *args: Any, **kwds: Any) -> NoReturn:
        "Method should not be called for a bit generator adapter."
        raise NotImplementedError("Adapter state lives in the bit generator.")

    getstate = setstate = _notimplemented


def shuffle(x: MutableSequence, urbg: UniformRandomBitGenerator) -> None:
    """Shuffle list x in place, drawing from urbg."""
    RandomAdapter(urbg).shuffle(x)
