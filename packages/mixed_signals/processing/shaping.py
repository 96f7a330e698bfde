"""
Unary value shapers.

Each wraps one child and transforms its output; time and context pass
through unchanged.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..constants import MIN_QUANTIZE_LEVELS
from ..core.context import SignalContext
from ..core.errors import InvalidParameterError
from ..core.range import UNIT_RANGE, SignalRange
from ..core.sanitize import finite_or, lerp, saturate
from ..core.signal import Param, Signal, param_range, param_value, sanitize_param


@dataclass(frozen=True, slots=True)
class Scale(Signal):
    """factor * inner. The factor may itself be a Signal."""

    inner: Signal
    factor: Param = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "factor", sanitize_param(self.factor, 1.0))

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        value = param_value(self.factor, t, ctx) * self.inner.sample_with_context(t, ctx)
        return value if math.isfinite(value) else 0.0

    def output_range(self) -> SignalRange:
        r = self.inner.output_range()
        k = param_range(self.factor)
        return SignalRange.spanning(r.min * k.min, r.min * k.max, r.max * k.min, r.max * k.max)


@dataclass(frozen=True, slots=True)
class Invert(Signal):
    """-inner."""

    inner: Signal

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        return -self.inner.sample_with_context(t, ctx)

    def output_range(self) -> SignalRange:
        r = self.inner.output_range()
        return SignalRange(-r.max, -r.min)


@dataclass(frozen=True, slots=True)
class Abs(Signal):
    """|inner|."""

    inner: Signal

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        return abs(self.inner.sample_with_context(t, ctx))

    def output_range(self) -> SignalRange:
        r = self.inner.output_range()
        return SignalRange(0.0, max(abs(r.min), abs(r.max)))


@dataclass(frozen=True, slots=True)
class Clamp(Signal):
    """
    Hard limit to [lo, hi].

    Reversed bounds are swapped; non-finite bounds become 0 and 1.
    """

    inner: Signal
    lo: float = 0.0
    hi: float = 1.0

    def __post_init__(self) -> None:
        lo = finite_or(self.lo, 0.0)
        hi = finite_or(self.hi, 1.0)
        if lo > hi:
            lo, hi = hi, lo
        object.__setattr__(self, "lo", lo)
        object.__setattr__(self, "hi", hi)

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        value = self.inner.sample_with_context(t, ctx)
        return self.lo if value < self.lo else self.hi if value > self.hi else value

    def output_range(self) -> SignalRange:
        return SignalRange(self.lo, self.hi)


@dataclass(frozen=True, slots=True)
class Remap(Signal):
    """
    Linear map from [in_min, in_max] to [out_min, out_max], without clamping.

    A collapsed input range maps everything to out_min.

    Example:
        >>> Remap(Sine(), -1.0, 1.0, 0.0, 1.0).sample(0.0)
        0.5
    """

    inner: Signal
    in_min: float = 0.0
    in_max: float = 1.0
    out_min: float = 0.0
    out_max: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "in_min", finite_or(self.in_min, 0.0))
        object.__setattr__(self, "in_max", finite_or(self.in_max, 1.0))
        object.__setattr__(self, "out_min", finite_or(self.out_min, 0.0))
        object.__setattr__(self, "out_max", finite_or(self.out_max, 1.0))

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        span = self.in_max - self.in_min
        if span == 0.0:
            return self.out_min
        x = self.inner.sample_with_context(t, ctx)
        value = self.out_min + (x - self.in_min) * (self.out_max - self.out_min) / span
        return value if math.isfinite(value) else self.out_min

    def output_range(self) -> SignalRange:
        return SignalRange(self.out_min, self.out_max)


@dataclass(frozen=True, slots=True)
class Quantize(Signal):
    """Snap to `levels` evenly spaced values across the inner range."""

    inner: Signal
    levels: int = 2

    def __post_init__(self) -> None:
        levels = finite_or(self.levels, float(MIN_QUANTIZE_LEVELS))
        object.__setattr__(self, "levels", max(MIN_QUANTIZE_LEVELS, int(levels)))

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        r = self.inner.output_range()
        if not r.width > 0.0:
            return r.min
        x = r.clamp(self.inner.sample_with_context(t, ctx))
        if math.isfinite(r.width):
            step = r.width / (self.levels - 1)
            index = math.floor((x - r.min) / step + 0.5)
            return min(r.max, r.min + index * step)
        # span overflows a float: measure in halves
        half_step = (r.max * 0.5 - r.min * 0.5) / (self.levels - 1)
        index = math.floor((x * 0.5 - r.min * 0.5) / half_step + 0.5)
        return min(r.max, lerp(r.min, r.max, index / (self.levels - 1)))

    def output_range(self) -> SignalRange:
        return self.inner.output_range()


@dataclass(frozen=True, slots=True)
class Normalized(Signal):
    """Map inner's declared range onto [0, 1]; a collapsed range yields 0.5."""

    inner: Signal

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        return self.inner.output_range().normalize(self.inner.sample_with_context(t, ctx))

    def output_range(self) -> SignalRange:
        return UNIT_RANGE


CLIP_MODES = ("hard", "soft")


@dataclass(frozen=True, slots=True)
class Clipper(Signal):
    """
    Limit inner to [neg_threshold, pos_threshold].

    "hard" clamps. "soft" lets values past a threshold approach +/-1
    exponentially, using the headroom between the threshold and 1; with no
    headroom it clamps. Reversed thresholds are swapped.

    Example:
        >>> Clipper(Constant(0.9), 0.7, -0.7).sample(0.0)
        0.7

    Raises:
        InvalidParameterError: If mode is not "hard" or "soft"
    """

    inner: Signal
    pos_threshold: float = 1.0
    neg_threshold: float = -1.0
    mode: str = "hard"

    def __post_init__(self) -> None:
        if self.mode not in CLIP_MODES:
            raise InvalidParameterError(
                "mode", f"expected one of {', '.join(CLIP_MODES)}, got {self.mode!r}"
            )
        pos = finite_or(self.pos_threshold, 1.0)
        neg = finite_or(self.neg_threshold, -1.0)
        if neg > pos:
            pos, neg = neg, pos
        object.__setattr__(self, "pos_threshold", pos)
        object.__setattr__(self, "neg_threshold", neg)

    @classmethod
    def symmetric(cls, inner: Signal, threshold: float, mode: str = "hard") -> Clipper:
        """Clip at +/- |threshold|."""
        threshold = abs(threshold)
        return cls(inner, threshold, -threshold, mode)

    def limit(self, value: float) -> float:
        pos, neg = self.pos_threshold, self.neg_threshold
        if self.mode == "hard":
            return neg if value < neg else pos if value > pos else value
        if value > pos:
            headroom = 1.0 - pos
            if headroom <= 0.0:
                return pos
            return pos + headroom * (1.0 - math.exp(-(value - pos) / headroom))
        if value < neg:
            headroom = 1.0 + neg
            if headroom <= 0.0:
                return neg
            return neg - headroom * (1.0 - math.exp(-(neg - value) / headroom))
        return value

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        return saturate(self.limit(self.inner.sample_with_context(t, ctx)), 0.0)

    def output_range(self) -> SignalRange:
        r = self.inner.output_range()
        return SignalRange(self.limit(r.min), self.limit(r.max))
