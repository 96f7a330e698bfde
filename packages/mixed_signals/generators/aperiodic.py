"""Aperiodic waveforms: Ramp, Step, Pulse, Constant."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.context import SignalContext
from ..core.range import SignalRange
from ..core.sanitize import finite_or, lerp
from ..core.signal import Signal
from ..easing import ease, easing_extent, validate_easing


@dataclass(frozen=True, slots=True)
class Ramp(Signal):
    """
    Linear segment from start to end over duration seconds, then hold end.

    duration <= 0 turns the ramp into a step at t = 0. An easing name shapes
    the progress between the endpoints; the declared range widens to cover
    the overshoot of back and elastic curves.

    Example:
        >>> Ramp(0.0, 1.0, 1.0).sample(0.4)
        0.4
    """

    start: float = 0.0
    end: float = 1.0
    duration: float = 1.0
    easing: str = "linear"

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", finite_or(self.start, 0.0))
        object.__setattr__(self, "end", finite_or(self.end, 1.0))
        object.__setattr__(self, "duration", finite_or(self.duration, 1.0))
        validate_easing(self.easing)

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        if not math.isfinite(t):
            t = 0.0
        if self.duration <= 0.0:
            return self.start if t < 0.0 else self.end
        if t >= self.duration:
            return self.end
        progress = t / self.duration
        if self.easing != "linear":
            progress = ease(self.easing, progress)
        elif progress < 0.0:
            progress = 0.0
        return lerp(self.start, self.end, progress)

    def output_range(self) -> SignalRange:
        lo, hi = easing_extent(self.easing)
        return SignalRange.spanning(
            self.start,
            self.end,
            lerp(self.start, self.end, lo),
            lerp(self.start, self.end, hi),
        )


@dataclass(frozen=True, slots=True)
class Step(Signal):
    """low before threshold, high from threshold on."""

    low: float = 0.0
    high: float = 1.0
    threshold: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "low", finite_or(self.low, 0.0))
        object.__setattr__(self, "high", finite_or(self.high, 1.0))
        object.__setattr__(self, "threshold", finite_or(self.threshold, 0.0))

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        if not math.isfinite(t):
            t = 0.0
        return self.low if t < self.threshold else self.high

    def output_range(self) -> SignalRange:
        return SignalRange(self.low, self.high)


@dataclass(frozen=True, slots=True)
class Pulse(Signal):
    """
    high inside the closed window [start, end], low outside.

    Example:
        >>> gate = Pulse.window(0.65, 0.85)
        >>> gate.sample(0.7), gate.sample(0.5)
        (1.0, 0.0)
    """

    start: float = 0.0
    end: float = 1.0
    low: float = 0.0
    high: float = 1.0

    def __post_init__(self) -> None:
        start = finite_or(self.start, 0.0)
        end = finite_or(self.end, 1.0)
        if start > end:
            start, end = end, start
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)
        object.__setattr__(self, "low", finite_or(self.low, 0.0))
        object.__setattr__(self, "high", finite_or(self.high, 1.0))

    @classmethod
    def window(cls, start: float, end: float) -> Pulse:
        """0/1 gate over [start, end]."""
        return cls(start=start, end=end)

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        if not math.isfinite(t):
            t = 0.0
        return self.high if self.start <= t <= self.end else self.low

    def output_range(self) -> SignalRange:
        return SignalRange(self.low, self.high)


@dataclass(frozen=True, slots=True)
class Constant(Signal):
    """Always value."""

    value: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", finite_or(self.value, 0.0))

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        return self.value

    def output_range(self) -> SignalRange:
        return SignalRange(self.value, self.value)
