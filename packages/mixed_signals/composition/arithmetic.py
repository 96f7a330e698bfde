"""Binary combinators: Add, Multiply, Mix."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.context import SignalContext
from ..core.range import SignalRange
from ..core.sanitize import clamp
from ..core.signal import Param, Signal, param_value, sanitize_param


@dataclass(frozen=True, slots=True)
class Add(Signal):
    """a + b."""

    a: Signal
    b: Signal

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        value = self.a.sample_with_context(t, ctx) + self.b.sample_with_context(t, ctx)
        return value if math.isfinite(value) else 0.0

    def output_range(self) -> SignalRange:
        ra, rb = self.a.output_range(), self.b.output_range()
        return SignalRange(ra.min + rb.min, ra.max + rb.max)


@dataclass(frozen=True, slots=True)
class Multiply(Signal):
    """a * b; range is the envelope of the four corner products."""

    a: Signal
    b: Signal

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        value = self.a.sample_with_context(t, ctx) * self.b.sample_with_context(t, ctx)
        return value if math.isfinite(value) else 0.0

    def output_range(self) -> SignalRange:
        ra, rb = self.a.output_range(), self.b.output_range()
        return SignalRange.spanning(
            ra.min * rb.min, ra.min * rb.max, ra.max * rb.min, ra.max * rb.max
        )


@dataclass(frozen=True, slots=True)
class Mix(Signal):
    """
    Crossfade (1 - w) * a + w * b with w clamped to [0, 1].

    The weight may be a Signal for a moving crossfade. A non-finite static
    weight becomes 0.5.

    Example:
        >>> Mix(Sine(), Square(), 0.25).sample(0.1)
    """

    a: Signal
    b: Signal
    weight: Param = 0.5

    def __post_init__(self) -> None:
        weight = sanitize_param(self.weight, 0.5)
        if not isinstance(weight, Signal):
            weight = clamp(weight, 0.0, 1.0)
        object.__setattr__(self, "weight", weight)

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        w = param_value(self.weight, t, ctx)
        w = clamp(w, 0.0, 1.0) if math.isfinite(w) else 0.5
        if w == 0.0:
            return self.a.sample_with_context(t, ctx)
        if w == 1.0:
            return self.b.sample_with_context(t, ctx)
        value = (1.0 - w) * self.a.sample_with_context(t, ctx) + w * self.b.sample_with_context(t, ctx)
        return value if math.isfinite(value) else 0.0

    def output_range(self) -> SignalRange:
        return self.a.output_range().union(self.b.output_range())
