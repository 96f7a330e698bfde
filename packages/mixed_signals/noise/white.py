"""Bucketed uniform noise: WhiteNoise (bipolar) and SeededRandom (unsigned)."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..constants import SAFE_RATE, SEEDED_RANDOM_RATE, WHITE_NOISE_RATE
from ..core.context import SignalContext
from ..core.range import SignalRange
from ..core.sanitize import coerce_seed, finite_or, positive_or, saturate
from ..core.signal import Signal
from ..rng import salted, time_bucket, uniform_bipolar, uniform_unit


@dataclass(frozen=True, slots=True)
class WhiteNoise(Signal):
    """
    Uniform noise held for 1/rate seconds per value.

    offset + amplitude * U(-1, 1), keyed on floor(t * rate).

    Example:
        >>> noise = WhiteNoise(seed=42, amplitude=0.5, rate=30.0)
        >>> noise.sample(1.0) == noise.sample(1.0)
        True
    """

    seed: int = 0
    amplitude: float = 1.0
    rate: float = WHITE_NOISE_RATE
    offset: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed", coerce_seed(self.seed))
        object.__setattr__(self, "amplitude", finite_or(self.amplitude, 1.0))
        object.__setattr__(self, "rate", positive_or(self.rate, SAFE_RATE))
        object.__setattr__(self, "offset", finite_or(self.offset, 0.0))

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        if not math.isfinite(t):
            t = 0.0
        seed = salted(self.seed, ctx.instance_id)
        value = self.offset + self.amplitude * uniform_bipolar(seed, time_bucket(t * self.rate))
        return saturate(value, self.offset)

    def output_range(self) -> SignalRange:
        a = abs(self.amplitude)
        return SignalRange(self.offset - a, self.offset + a)


@dataclass(frozen=True, slots=True)
class SeededRandom(Signal):
    """Unsigned counterpart of WhiteNoise: offset + amplitude * U(0, 1)."""

    seed: int = 0
    amplitude: float = 1.0
    rate: float = SEEDED_RANDOM_RATE
    offset: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed", coerce_seed(self.seed))
        object.__setattr__(self, "amplitude", finite_or(self.amplitude, 1.0))
        object.__setattr__(self, "rate", positive_or(self.rate, SAFE_RATE))
        object.__setattr__(self, "offset", finite_or(self.offset, 0.0))

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        if not math.isfinite(t):
            t = 0.0
        seed = salted(self.seed, ctx.instance_id)
        value = self.offset + self.amplitude * uniform_unit(seed, time_bucket(t * self.rate))
        return saturate(value, self.offset)

    def output_range(self) -> SignalRange:
        return SignalRange(self.offset, self.offset + self.amplitude)
