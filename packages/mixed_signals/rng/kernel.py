"""
Stateless integer-hash RNG.

Every value is a pure function of (seed, coord), so noise signals need no
running state and can be sampled in any order from any thread. All arithmetic
is on Python ints masked to 64 bits, which makes results identical on every
platform.

Usage:
    >>> uniform_unit(42, 7)        # float in [0, 1)
    >>> uniform_bipolar(42, 7)     # float in [-1, 1)
    >>> hash32(derive_seed(42, 1), 7)
"""

from __future__ import annotations

import math
from typing import Final

from ..constants import MASK64

GOLDEN_GAMMA: Final[int] = 0x9E37_79B9_7F4A_7C15
SEED_SALT: Final[int] = 0x5851_F42D_4C95_7F2D
UNIT_SCALE: Final[float] = 1.0 / (1 << 24)


def mix64(z: int) -> int:
    """SplitMix64 finalizer."""
    z &= MASK64
    z = ((z ^ (z >> 30)) * 0xBF58_476D_1CE4_E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D0_49BB_1331_11EB) & MASK64
    return z ^ (z >> 31)


def hash64(seed: int, coord: int) -> int:
    z = mix64((seed & MASK64) ^ SEED_SALT)
    z = (z + (coord & MASK64) * GOLDEN_GAMMA) & MASK64
    return mix64(z)


def hash32(seed: int, coord: int) -> int:
    """h(seed, coord) -> u32."""
    return hash64(seed, coord) >> 32


def hash2(seed: int, a: int, b: int) -> int:
    """Hash a 2-D coordinate to u32."""
    return hash32(hash64(seed, a), b)


def derive_seed(seed: int, salt: int) -> int:
    """Independent sub-seed for a named stream of the same seed."""
    return hash64(seed, salt ^ GOLDEN_GAMMA)


def uniform_unit(seed: int, coord: int) -> float:
    """Uniform float in [0, 1) with 24 bits of resolution."""
    return (hash32(seed, coord) >> 8) * UNIT_SCALE


def uniform_bipolar(seed: int, coord: int) -> float:
    """Uniform float in [-1, 1)."""
    return 2.0 * uniform_unit(seed, coord) - 1.0


def uniform_u64(seed: int, coord: int) -> int:
    c = (coord & MASK64) << 1
    return (hash32(seed, c) << 32) | hash32(seed, (c + 1) & MASK64)


def unit_at(seed: int, a: int, b: int) -> float:
    """Uniform [0, 1) keyed on a 2-D coordinate."""
    return (hash2(seed, a, b) >> 8) * UNIT_SCALE


def time_bucket(x: float) -> int:
    """floor(x) as a u64 coordinate; non-finite input maps to bucket 0."""
    if not math.isfinite(x):
        return 0
    return math.floor(x) & MASK64


def salted(seed: int, salt: int) -> int:
    """Mix a nonzero salt (instance id, spatial seed) into a seed."""
    if salt == 0:
        return seed
    return hash64(seed, salt) & MASK64
