"""Counter-based RNG owned by the caller (used by the shuffle subsystem)."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

from ..constants import MASK64, POISSON_KNUTH_LIMIT
from ..core.errors import InvalidParameterError
from ..core.sanitize import coerce_seed
from .kernel import hash64

T = TypeVar("T")

_U53_SCALE = 1.0 / (1 << 53)


class Rng:
    """
    Deterministic generator wrapping a seed and a draw counter.

    Draw n is hash64(seed, n), so two Rng objects with the same seed and
    counter produce the same stream. There is no module-level instance;
    callers create and own their own.

    Example:
        >>> rng = Rng(42)
        >>> rng.below(6)
        >>> rng.uniform()
    """

    __slots__ = ("_seed", "_counter")

    def __init__(self, seed: int = 0):
        self._seed = coerce_seed(seed)
        self._counter = 0

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def counter(self) -> int:
        """Number of 64-bit draws made so far."""
        return self._counter

    def reseed(self, seed: int) -> None:
        self._seed = coerce_seed(seed)
        self._counter = 0

    def reset(self) -> None:
        """Rewind to the first draw of the current seed."""
        self._counter = 0

    def fork(self) -> Rng:
        """Independent child generator; advances this one by one draw."""
        return Rng(self.next_u64())

    def next_u64(self) -> int:
        value = hash64(self._seed, self._counter)
        self._counter = (self._counter + 1) & MASK64
        return value

    def next_u32(self) -> int:
        return self.next_u64() >> 32

    def below(self, n: int) -> int:
        """Uniform int in [0, n) by multiply-shift. n <= 0 returns 0."""
        if n <= 0:
            return 0
        return (self.next_u64() * n) >> 64

    def between(self, lo: int, hi: int) -> int:
        """Uniform int in [lo, hi] (inclusive)."""
        if hi < lo:
            lo, hi = hi, lo
        return lo + self.below(hi - lo + 1)

    def uniform(self) -> float:
        """Uniform float in [0, 1) with 53 bits."""
        return (self.next_u64() >> 11) * _U53_SCALE

    def chance(self, p: float) -> bool:
        if not p > 0.0:
            return False
        return self.uniform() < p

    def choose(self, items: Sequence[T]) -> T:
        if not items:
            raise IndexError("cannot choose from an empty sequence")
        return items[self.below(len(items))]

    def gaussian(self, mean: float = 0.0, std_dev: float = 1.0) -> float:
        """Normal deviate via Box-Muller."""
        u1 = 1.0 - self.uniform()  # (0, 1]
        u2 = self.uniform()
        z = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
        return mean + std_dev * z

    def poisson(self, lam: float) -> int:
        """Poisson count via Knuth's algorithm (normal approximation for large lambda)."""
        if not (math.isfinite(lam) and lam > 0.0):
            raise InvalidParameterError("lambda", "must be finite and > 0")
        if lam > POISSON_KNUTH_LIMIT:
            return max(0, round(self.gaussian(lam, math.sqrt(lam))))
        limit = math.exp(-lam)
        k = 0
        p = self.uniform()
        while p > limit:
            k += 1
            p *= self.uniform()
        return k

    def __repr__(self) -> str:
        return f"Rng(seed={self._seed}, counter={self._counter})"
