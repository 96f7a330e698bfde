"""Helpers that keep parameters and samples finite."""

from __future__ import annotations

import math
import sys

from ..constants import MASK64
from .errors import InvalidParameterError


def finite_or(value: float, default: float) -> float:
    """Return value as float, or default when it is NaN or infinite."""
    value = float(value)
    return value if math.isfinite(value) else default


def positive_or(value: float, default: float) -> float:
    """Return value when finite and > 0, else default."""
    value = float(value)
    return value if math.isfinite(value) and value > 0.0 else default


def non_negative(value: float) -> float:
    """Finite, non-negative duration. Anything else becomes 0."""
    value = float(value)
    return value if math.isfinite(value) and value > 0.0 else 0.0


def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x


def fract(u: float) -> float:
    return u - math.floor(u)


def saturate(value: float, fallback: float = 0.0) -> float:
    """Pin an overflowed sample to the largest finite float of its sign; NaN gives fallback."""
    if math.isfinite(value):
        return value
    if math.isnan(value):
        return fallback
    return math.copysign(sys.float_info.max, value)


def lerp(a: float, b: float, progress: float) -> float:
    """
    a + (b - a) * progress, staying finite when b - a overflows.

    Example:
        >>> lerp(-1e308, 1e308, 0.5)
        0.0
    """
    value = a + (b - a) * progress
    if math.isfinite(value):
        return value
    return saturate(a * (1.0 - progress) + b * progress, a)


def coerce_seed(seed: int | float, field: str = "seed") -> int:
    """
    Convert a seed to an unsigned 64-bit int.

    Negative ints wrap like two's complement. Floats are accepted only when
    finite and integral.

    Raises:
        InvalidParameterError: If the seed is NaN, infinite or fractional
    """
    if isinstance(seed, bool):
        return int(seed)
    if isinstance(seed, int):
        return seed & MASK64
    try:
        value = float(seed)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(field, f"expected an integer, got {seed!r}") from e
    if not math.isfinite(value):
        raise InvalidParameterError(field, "seed must be finite")
    if not value.is_integer():
        raise InvalidParameterError(field, "seed must be an integer")
    return int(value) & MASK64
