"""
Noise with a chosen distribution: Gaussian, Poisson, Student-t and impulses.

Every draw is keyed on (seed, bucket, draw index), so a bucket always
reproduces the same value without any running state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..constants import (
    GAUSSIAN_RATE,
    GAUSSIAN_TAIL,
    IMPULSE_SLOT_SECONDS,
    POISSON_KNUTH_LIMIT,
    POISSON_RATE,
    POISSON_TAIL,
    SAFE_RATE,
)
from ..core.context import SignalContext
from ..core.errors import InvalidParameterError
from ..core.range import SignalRange
from ..core.sanitize import clamp, coerce_seed, finite_or, positive_or, saturate
from ..core.signal import Signal
from ..rng import hash2, salted, time_bucket, unit_at

TAU = 2.0 * math.pi
STUDENT_T_ATTEMPTS = 16


def _box_muller(seed: int, bucket: int) -> float:
    u1 = 1.0 - unit_at(seed, bucket, 0)  # (0, 1]
    u2 = unit_at(seed, bucket, 1)
    return math.sqrt(-2.0 * math.log(u1)) * math.cos(TAU * u2)


def _require_positive(value: float, default: float, field: str) -> float:
    """Non-finite -> default; finite but <= 0 -> InvalidParameterError."""
    value = finite_or(value, default)
    if value <= 0.0:
        raise InvalidParameterError(field, f"must be > 0, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class GaussianNoise(Signal):
    """
    Normally distributed noise: mean + amplitude * N(0, std_dev).

    Deviates are clipped at +/- 5 sigma so the declared range holds.

    Raises:
        InvalidParameterError: If std_dev <= 0
    """

    seed: int = 0
    std_dev: float = 1.0
    amplitude: float = 1.0
    mean: float = 0.0
    rate: float = GAUSSIAN_RATE

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed", coerce_seed(self.seed))
        object.__setattr__(self, "std_dev", _require_positive(self.std_dev, 1.0, "std_dev"))
        object.__setattr__(self, "amplitude", finite_or(self.amplitude, 1.0))
        object.__setattr__(self, "mean", finite_or(self.mean, 0.0))
        object.__setattr__(self, "rate", positive_or(self.rate, SAFE_RATE))

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        if not math.isfinite(t):
            t = 0.0
        seed = salted(self.seed, ctx.instance_id)
        limit = GAUSSIAN_TAIL * self.std_dev
        deviate = clamp(self.std_dev * _box_muller(seed, time_bucket(t * self.rate)), -limit, limit)
        return saturate(self.mean + self.amplitude * deviate, self.mean)

    def output_range(self) -> SignalRange:
        spread = abs(self.amplitude) * GAUSSIAN_TAIL * self.std_dev
        return SignalRange(self.mean - spread, self.mean + spread)


@dataclass(frozen=True, slots=True)
class PoissonNoise(Signal):
    """
    Poisson-distributed counts: amplitude * (mean + N), N ~ Poisson(lambda_).

    Knuth's multiplication method below lambda 30, a rounded normal
    approximation above. Counts are capped at 5 * max(lambda, 1).

    Raises:
        InvalidParameterError: If lambda_ <= 0
    """

    seed: int = 0
    lambda_: float = 1.0
    amplitude: float = 1.0
    mean: float = 0.0
    rate: float = POISSON_RATE

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed", coerce_seed(self.seed))
        object.__setattr__(self, "lambda_", _require_positive(self.lambda_, 1.0, "lambda"))
        object.__setattr__(self, "amplitude", finite_or(self.amplitude, 1.0))
        object.__setattr__(self, "mean", finite_or(self.mean, 0.0))
        object.__setattr__(self, "rate", positive_or(self.rate, SAFE_RATE))

    @property
    def cap(self) -> float:
        return POISSON_TAIL * max(self.lambda_, 1.0)

    def _count(self, seed: int, bucket: int) -> float:
        lam = self.lambda_
        cap = self.cap
        if lam > POISSON_KNUTH_LIMIT:
            n = round(lam + math.sqrt(lam) * _box_muller(seed, bucket))
            return min(float(max(n, 0)), cap)
        limit = math.exp(-lam)
        count = 0
        p = 1.0
        bucket_seed = hash2(seed, bucket, 0x5049)
        while count < cap:
            p *= unit_at(bucket_seed, count, 1)
            if p <= limit:
                break
            count += 1
        return min(float(count), cap)

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        if not math.isfinite(t):
            t = 0.0
        seed = salted(self.seed, ctx.instance_id)
        count = self._count(seed, time_bucket(t * self.rate))
        return saturate(self.amplitude * (self.mean + count), 0.0)

    def output_range(self) -> SignalRange:
        a = self.amplitude
        return SignalRange.spanning(0.0, a * self.mean, a * (self.mean + self.cap))


@dataclass(frozen=True, slots=True)
class StudentTNoise(Signal):
    """
    Heavy-tailed noise: amplitude * tanh(T * tail_scale / 3), T ~ Student-t(dof).

    T is drawn with Bailey's polar method; tanh keeps the tails inside
    [-amplitude, amplitude].

    Raises:
        InvalidParameterError: If dof <= 0
    """

    seed: int = 0
    dof: float = 3.0
    tail_scale: float = 1.0
    amplitude: float = 1.0
    rate: float = GAUSSIAN_RATE

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed", coerce_seed(self.seed))
        object.__setattr__(self, "dof", _require_positive(self.dof, 3.0, "dof"))
        object.__setattr__(self, "tail_scale", finite_or(self.tail_scale, 1.0))
        object.__setattr__(self, "amplitude", finite_or(self.amplitude, 1.0))
        object.__setattr__(self, "rate", positive_or(self.rate, SAFE_RATE))

    def _draw(self, seed: int, bucket: int) -> float:
        nu = self.dof
        for attempt in range(STUDENT_T_ATTEMPTS):
            u = 2.0 * unit_at(seed, bucket, 2 * attempt) - 1.0
            v = 2.0 * unit_at(seed, bucket, 2 * attempt + 1) - 1.0
            w = u * u + v * v
            if 0.0 < w < 1.0:
                exponent = (-2.0 / nu) * math.log(w)
                if exponent > 700.0:
                    return math.copysign(1e300, u)
                return u * math.sqrt(nu * (math.exp(exponent) - 1.0) / w)
        return 0.0

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        if not math.isfinite(t):
            t = 0.0
        seed = salted(self.seed, ctx.instance_id)
        value = self._draw(seed, time_bucket(t * self.rate)) * self.tail_scale / 3.0
        if not math.isfinite(value):
            value = 0.0
        return self.amplitude * math.tanh(value)

    def output_range(self) -> SignalRange:
        a = abs(self.amplitude)
        return SignalRange(-a, a)


@dataclass(frozen=True, slots=True)
class ImpulseNoise(Signal):
    """
    Sparse impulses from a slotted Poisson process.

    Each 1 ms slot fires with probability 1 - exp(-rate * 0.001). A firing
    slot yields +/- amplitude (bipolar) or amplitude; quiet slots yield 0.
    """

    seed: int = 0
    rate: float = 10.0
    amplitude: float = 1.0
    bipolar: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed", coerce_seed(self.seed))
        object.__setattr__(self, "rate", positive_or(self.rate, SAFE_RATE))
        object.__setattr__(self, "amplitude", finite_or(self.amplitude, 1.0))
        object.__setattr__(self, "bipolar", bool(self.bipolar))

    @property
    def probability(self) -> float:
        return 1.0 - math.exp(-self.rate * IMPULSE_SLOT_SECONDS)

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        if not math.isfinite(t):
            t = 0.0
        seed = salted(self.seed, ctx.instance_id)
        slot = time_bucket(t / IMPULSE_SLOT_SECONDS)
        if unit_at(seed, slot, 0) >= self.probability:
            return 0.0
        if self.bipolar and unit_at(seed, slot, 1) < 0.5:
            return -self.amplitude
        return self.amplitude

    def output_range(self) -> SignalRange:
        if self.bipolar:
            a = abs(self.amplitude)
            return SignalRange(-a, a)
        return SignalRange(0.0, self.amplitude)
