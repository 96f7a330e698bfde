"""Declared output envelope of a signal."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SignalRange:
    """
    Declared [min, max] envelope of a signal's output.

    A hint for visualisers and Normalized, not a clamp. Bounds are sorted on
    construction; a non-finite bound gives the unit range.

    Example:
        >>> SignalRange(1.0, -1.0)
        SignalRange(min=-1.0, max=1.0)
    """

    min: float
    max: float

    def __post_init__(self) -> None:
        lo, hi = float(self.min), float(self.max)
        if not (math.isfinite(lo) and math.isfinite(hi)):
            lo, hi = 0.0, 1.0
        elif lo > hi:
            lo, hi = hi, lo
        object.__setattr__(self, "min", lo)
        object.__setattr__(self, "max", hi)

    @property
    def width(self) -> float:
        return self.max - self.min

    @property
    def center(self) -> float:
        return (self.min + self.max) * 0.5

    def contains(self, value: float, tolerance: float = 0.0) -> bool:
        return self.min - tolerance <= value <= self.max + tolerance

    def clamp(self, value: float) -> float:
        return self.min if value < self.min else self.max if value > self.max else value

    def union(self, other: SignalRange) -> SignalRange:
        """Smallest range covering both."""
        return SignalRange(min(self.min, other.min), max(self.max, other.max))

    def normalize(self, value: float) -> float:
        """Map value into [0, 1] by this range; 0.5 when the range is collapsed."""
        width = self.max - self.min
        if not width > 0.0:
            return 0.5
        if math.isfinite(width):
            n = (value - self.min) / width
        else:
            n = (value * 0.5 - self.min * 0.5) / (self.max * 0.5 - self.min * 0.5)
        if not math.isfinite(n):
            return 0.5
        return 0.0 if n < 0.0 else 1.0 if n > 1.0 else n

    @classmethod
    def spanning(cls, *values: float) -> SignalRange:
        """Range covering every given value."""
        return cls(min(values), max(values))

    @classmethod
    def point(cls, value: float) -> SignalRange:
        return cls(value, value)


UNIT_RANGE = SignalRange(0.0, 1.0)
BIPOLAR_RANGE = SignalRange(-1.0, 1.0)
