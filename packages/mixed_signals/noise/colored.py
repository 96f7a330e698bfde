"""
Correlated and pink noise without running state.

CorrelatedNoise approximates an AR(1) process x[n] = rho * x[n-1] + e[n] by
unrolling the recursion over a fixed window of hashed frames. PinkNoise uses
the Voss-McCartney trick: octave row o only changes every 2**o frames.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ..constants import (
    CORRELATED_RATE,
    CORRELATION_WINDOW,
    MASK64,
    PINK_NOISE_RATE,
    PINK_OCTAVES,
    SAFE_RATE,
)
from ..core.context import SignalContext
from ..core.errors import InvalidParameterError
from ..core.range import SignalRange
from ..core.sanitize import coerce_seed, finite_or, positive_or, saturate
from ..core.signal import Signal
from ..rng import derive_seed, salted, uniform_bipolar


def _frame_position(t: float, rate: float) -> tuple[int, float]:
    x = t * rate if math.isfinite(t) else 0.0
    if not math.isfinite(x):
        x = 0.0
    frame = math.floor(x)
    return frame, x - frame


@dataclass(frozen=True, slots=True)
class CorrelatedNoise(Signal):
    """
    Smoothly wandering noise with lag-one correlation rho.

    Frame n's value is the weighted mean of the hashed innovations of frames
    n, n-1, ..., n-15 with weights rho**k; consecutive frames are blended
    linearly. rho = 0 is white noise, rho near 1 drifts slowly.

    Raises:
        InvalidParameterError: If correlation is outside [0, 1]
    """

    seed: int = 0
    correlation: float = 0.9
    amplitude: float = 1.0
    mean: float = 0.0
    rate: float = CORRELATED_RATE
    _weights: tuple[float, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed", coerce_seed(self.seed))
        rho = finite_or(self.correlation, 0.9)
        if not 0.0 <= rho <= 1.0:
            raise InvalidParameterError("correlation", f"must be within [0, 1], got {rho}")
        object.__setattr__(self, "correlation", rho)
        object.__setattr__(self, "amplitude", finite_or(self.amplitude, 1.0))
        object.__setattr__(self, "mean", finite_or(self.mean, 0.0))
        object.__setattr__(self, "rate", positive_or(self.rate, SAFE_RATE))
        weights = [rho**k for k in range(CORRELATION_WINDOW)]
        norm = sum(weights)
        object.__setattr__(self, "_weights", tuple(w / norm for w in weights))

    def _frame_value(self, seed: int, frame: int) -> float:
        total = 0.0
        for k, weight in enumerate(self._weights):
            if weight == 0.0:
                break
            total += weight * uniform_bipolar(seed, (frame - k) & MASK64)
        return total

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        seed = salted(self.seed, ctx.instance_id)
        frame, frac = _frame_position(t, self.rate)
        a = self._frame_value(seed, frame)
        b = self._frame_value(seed, frame + 1)
        return saturate(self.mean + self.amplitude * (a + (b - a) * frac), self.mean)

    def output_range(self) -> SignalRange:
        a = abs(self.amplitude)
        return SignalRange(self.mean - a, self.mean + a)


@dataclass(frozen=True, slots=True)
class PinkNoise(Signal):
    """Approximate 1/f noise: mean of 8 white rows updated at halving rates."""

    seed: int = 0
    amplitude: float = 1.0
    mean: float = 0.0
    rate: float = PINK_NOISE_RATE

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed", coerce_seed(self.seed))
        object.__setattr__(self, "amplitude", finite_or(self.amplitude, 1.0))
        object.__setattr__(self, "mean", finite_or(self.mean, 0.0))
        object.__setattr__(self, "rate", positive_or(self.rate, SAFE_RATE))

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        seed = salted(self.seed, ctx.instance_id)
        frame, _ = _frame_position(t, self.rate)
        total = 0.0
        for octave in range(PINK_OCTAVES):
            total += uniform_bipolar(derive_seed(seed, octave), (frame >> octave) & MASK64)
        return saturate(self.mean + self.amplitude * (total / PINK_OCTAVES), self.mean)

    def output_range(self) -> SignalRange:
        a = abs(self.amplitude)
        return SignalRange(self.mean - a, self.mean + a)
