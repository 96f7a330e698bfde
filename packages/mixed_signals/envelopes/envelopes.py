"""
Envelopes over absolute time.

All envelopes are 0 for t < 0 and declare the range [0, peak].
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..constants import DEFAULT_DECAY_RATE, ENVELOPE_EPSILON
from ..core.context import SignalContext
from ..core.range import SignalRange
from ..core.sanitize import clamp, finite_or, non_negative
from ..core.signal import Signal


def _segment(duration: float) -> float:
    """Collapse segments shorter than the envelope epsilon."""
    duration = non_negative(duration)
    return duration if duration >= ENVELOPE_EPSILON else 0.0


@dataclass(frozen=True, slots=True)
class ADSR(Signal):
    """
    Attack, decay, sustain, release envelope with zero hold.

    Rises 0 -> peak over attack, falls to sustain * peak over decay, then
    releases straight to 0 over release (the gate closes at attack + decay).

    Example:
        >>> env = ADSR(attack=0.1, decay=0.2, sustain=0.5, release=0.3)
        >>> env.sample(0.1)
        1.0
    """

    attack: float = 0.01
    decay: float = 0.1
    sustain: float = 0.7
    release: float = 0.2
    peak: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "attack", _segment(self.attack))
        object.__setattr__(self, "decay", _segment(self.decay))
        object.__setattr__(self, "release", _segment(self.release))
        object.__setattr__(self, "sustain", clamp(finite_or(self.sustain, 1.0), 0.0, 1.0))
        object.__setattr__(self, "peak", finite_or(self.peak, 1.0))

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        if not math.isfinite(t) or t < 0.0:
            return 0.0
        peak = self.peak
        sustain_level = self.sustain * peak
        if t < self.attack:
            return peak * (t / self.attack)
        t -= self.attack
        if t < self.decay:
            return peak + (sustain_level - peak) * (t / self.decay)
        t -= self.decay
        if t < self.release:
            return sustain_level * (1.0 - t / self.release)
        return 0.0

    def output_range(self) -> SignalRange:
        return SignalRange(0.0, self.peak)


@dataclass(frozen=True, slots=True)
class LinearEnvelope(Signal):
    """Triangular envelope: 0 -> peak over attack, peak -> 0 over release."""

    attack: float = 0.01
    release: float = 0.5
    peak: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "attack", _segment(self.attack))
        object.__setattr__(self, "release", _segment(self.release))
        object.__setattr__(self, "peak", finite_or(self.peak, 1.0))

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        if not math.isfinite(t) or t < 0.0:
            return 0.0
        if t < self.attack:
            return self.peak * (t / self.attack)
        t -= self.attack
        if t < self.release:
            return self.peak * (1.0 - t / self.release)
        return 0.0

    def output_range(self) -> SignalRange:
        return SignalRange(0.0, self.peak)


@dataclass(frozen=True, slots=True)
class Impact(Signal):
    """Exponential strike: peak * exp(-decay_rate * t) for t >= 0."""

    peak: float = 1.0
    decay_rate: float = DEFAULT_DECAY_RATE

    def __post_init__(self) -> None:
        object.__setattr__(self, "peak", finite_or(self.peak, 1.0))
        rate = finite_or(self.decay_rate, DEFAULT_DECAY_RATE)
        object.__setattr__(self, "decay_rate", max(0.0, rate))

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        if not math.isfinite(t) or t < 0.0:
            return 0.0
        return self.peak * math.exp(-self.decay_rate * t)

    def output_range(self) -> SignalRange:
        return SignalRange(0.0, self.peak)
