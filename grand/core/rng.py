"""
grand.core.rng

RandomSource - a lazily seeded 32-bit Mersenne Twister.

Design Principles:
- One engine per instance, never shared (copies are fully independent)
- Unpredictable seeding is deferred until the first output is requested
- Engine and distribution transforms come from numpy, not from here
- NOT thread-safe: use one instance per thread or guard it with a lock
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union
import numpy as np
import torch

from .entropy import EntropySource, SystemEntropySource
from .exceptions import ConversionError
from .adapters import RandomAdapter
from .urbg import UniformRandomBitGenerator
from .validation import INT64_MAX, SEED_MASK, to_int_bound, to_real, to_seed


SeedCallback = Callable[[Dict[str, Any]], None]

ORIGIN_EXPLICIT = "explicit"
ORIGIN_ENTROPY = "entropy"

UINT64_LIMIT = 1 << 64


def _mt19937(seed: int) -> np.random.MT19937:
    """MT19937 initialized with the classic init_genrand routine.

    This is the seeding std::mt19937 uses, so raw output for a given seed
    matches every other conforming 32-bit Mersenne Twister.
    """
    bit_generator = np.random.MT19937(0)
    bit_generator._legacy_seeding(seed)
    return bit_generator


@dataclass(frozen=True)
class PendingEntropy:
    """Unpredictable seeding requested but not yet performed.

    No engine exists in this state. The first output-producing call
    draws from the entropy source and replaces it with Seeded.
    """


@dataclass
class Seeded:
    """Engine initialized from a 32-bit seed."""

    seed: int
    origin: str  # "explicit" | "entropy"
    bit_generator: np.random.MT19937
    generator: np.random.Generator

    @classmethod
    def from_seed(cls, seed: int, origin: str) -> "Seeded":
        bit_generator = _mt19937(seed)
        return cls(seed, origin, bit_generator, np.random.Generator(bit_generator))

    def copy(self) -> "Seeded":
        """Independent engine continuing from the current position."""
        # Construct from the known seed so no OS entropy is consumed,
        # then overwrite the whole state.
        bit_generator = _mt19937(self.seed)
        bit_generator.state = self.bit_generator.state
        return Seeded(
            self.seed, self.origin, bit_generator, np.random.Generator(bit_generator)
        )


SeedState = Union[PendingEntropy, Seeded]


class RandomSource(UniformRandomBitGenerator):
    """Convenience wrapper around numpy's MT19937 bit generator.

    Usage:
        r = RandomSource()        # unpredictable seed, drawn on first use
        r2 = RandomSource(7)      # fixed seed gives a predictable sequence
        r2.reseed(2)              # another way to seed

        r.next_int(100)           # int in {0, 1, ..., 99}
        r.next_bool()             # coin flip
        r.next_bool(0.75)         # True with probability 0.75
        r.next_real()             # float in [0.0, 1.0)
        r.next_real(3.0)          # float in [0.0, 3.0)

        shuffle(values, r)        # grand.core.adapters.shuffle

    Every output-producing call first resolves a pending unpredictable
    seed. Arguments are converted before that, so a conversion failure
    never consumes entropy or changes state.
    """

    result_type = int

    def __init__(
        self,
        seed: Any = None,
        *,
        entropy_source: Optional[EntropySource] = None,
        on_seed: Optional[SeedCallback] = None,
    ) -> None:
        """
        Args:
            seed: Integral seed, or None to defer unpredictable seeding.
            entropy_source: Where pending seeds are drawn from.
                Defaults to SystemEntropySource.
            on_seed: Called with an event dict after every completed
                seeding (see grand.core.logging.create_seed_logger).
        """
        self._entropy_source = entropy_source if entropy_source is not None else SystemEntropySource()
        self._on_seed = on_seed
        self._state: SeedState = PendingEntropy()
        if seed is not None:
            self.reseed(seed)

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------

    def reseed(self, seed: Any = None) -> None:
        """Seed with the given value now, or request an unpredictable seed.

        With no argument the engine is left alone; the entropy source is
        consulted only if an output is requested before the next explicit
        seed.

        Raises:
            ConversionError: If seed is not an integral value.
        """
        if seed is None:
            self._state = PendingEntropy()
            return
        self._commit(Seeded.from_seed(to_seed(seed), ORIGIN_EXPLICIT))

    @property
    def is_seed_pending(self) -> bool:
        """True until the pending unpredictable seed has been drawn."""
        return isinstance(self._state, PendingEntropy)

    @property
    def seed_value(self) -> Optional[int]:
        """Seed currently in effect, or None while pending.

        After deferred seeding resolves this is the value drawn from the
        entropy source, so the run can be replayed with RandomSource(seed).
        """
        if isinstance(self._state, Seeded):
            return self._state.seed
        return None

    @property
    def seed_origin(self) -> Optional[str]:
        """Either "explicit" or "entropy"; None while pending."""
        if isinstance(self._state, Seeded):
            return self._state.origin
        return None

    def _ensure_seeded(self) -> Seeded:
        state = self._state
        if isinstance(state, Seeded):
            return state
        # Draw and convert before touching self._state so a failing
        # entropy source leaves the seed pending.
        seed = to_seed(self._entropy_source.draw_seed())
        return self._commit(Seeded.from_seed(seed, ORIGIN_ENTROPY))

    def _commit(self, state: Seeded) -> Seeded:
        previous = self._state
        self._state = state
        if self._on_seed is not None:
            # A failing callback fails the whole seeding.
            try:
                self._on_seed({"event": "seed", "origin": state.origin, "seed": state.seed})
            except BaseException:
                self._state = previous
                raise
        return state

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------

    def next_int(self, n: Any = 2) -> int:
        """Random int in [0, n-1], or 0 if n <= 0. Range is {0, 1} by default."""
        n = to_int_bound(n)
        state = self._ensure_seeded()
        if n <= 0:
            return 0
        if n <= INT64_MAX:
            return int(state.generator.integers(0, n))
        if n <= UINT64_LIMIT:
            return int(state.generator.integers(0, n, dtype=np.uint64))
        return RandomAdapter(self).randrange(n)

    def next_real(self, x: Any = 1.0) -> float:
        """Random float in [0.0, x) if x > 0, in (x, 0.0] if x < 0, else 0.0.

        Deviation: an infinite x is rejected rather than sampled, since no
        uniform distribution exists over an infinite range.

        Raises:
            ConversionError: If x is infinite.
        """
        x = to_real(x, "x")
        if math.isinf(x):
            raise ConversionError(f"x must be finite, got {x}")
        state = self._ensure_seeded()
        if x > 0.0:
            return float(state.generator.uniform(0.0, x))
        if x < 0.0:
            return -float(state.generator.uniform(0.0, -x))
        return 0.0

    def next_bool(self, p: Any = 0.5) -> bool:
        """Random bool, True with probability p (0.5 by default).

        p <= 0 (or NaN) always gives False, p >= 1 always gives True.
        """
        p = to_real(p, "p")
        state = self._ensure_seeded()
        if not p > 0.0:
            return False
        if p >= 1.0:
            return True
        return bool(state.generator.random() < p)

    def raw_next(self) -> int:
        """Raw engine output in [min(), max()]."""
        return int(self._ensure_seeded().bit_generator.random_raw())

    # ------------------------------------------------------------------
    # Uniform random bit generator interface
    # ------------------------------------------------------------------

    @classmethod
    def min(cls) -> int:
        return 0

    @classmethod
    def max(cls) -> int:
        return SEED_MASK

    def __call__(self, n: Any = None) -> int:
        """Raw draw with no argument; next_int(n) with one."""
        if n is None:
            return self.raw_next()
        return self.next_int(n)

    # ------------------------------------------------------------------
    # Copies and child streams
    # ------------------------------------------------------------------

    def copy(self) -> "RandomSource":
        """Independent copy with an identical future output sequence.

        The entropy source and seed callback are collaborators and are
        shared; engine state is not. A pending source copies as pending.
        """
        clone = type(self)(entropy_source=self._entropy_source, on_seed=self._on_seed)
        if isinstance(self._state, Seeded):
            clone._state = self._state.copy()
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo: Dict[int, Any]) -> "RandomSource":
        return self.copy()

    def spawn(self) -> "RandomSource":
        """Create a child source seeded from this source's raw stream.

        Deterministic given this source's seed, and independent of it
        afterwards.
        """
        return type(self)(
            self.raw_next(),
            entropy_source=self._entropy_source,
            on_seed=self._on_seed,
        )

    def spawn_many(self, n: int) -> List["RandomSource"]:
        """Create n child sources."""
        return [self.spawn() for _ in range(n)]

    # ------------------------------------------------------------------
    # Library bridges
    # ------------------------------------------------------------------

    @property
    def numpy_rng(self) -> np.random.Generator:
        """Underlying numpy Generator (for arbitrary numpy distributions).

        Draws from it advance this source. A later reseed() replaces the
        engine, so do not hold on to the returned object across reseeds.
        """
        return self._ensure_seeded().generator

    def torch_generator(self) -> torch.Generator:
        """New torch Generator seeded with 64 bits from this source."""
        high = self.raw_next()
        low = self.raw_next()
        generator = torch.Generator()
        generator.manual_seed((high << 32) | low)
        return generator

    def __repr__(self) -> str:
        if isinstance(self._state, Seeded):
            return f"RandomSource(seed={self._state.seed}, origin={self._state.origin!r})"
        return "RandomSource(<pending entropy>)"
