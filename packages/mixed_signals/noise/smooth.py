"""
Smooth value noise: PerlinNoise (fractal, 1-D) and SpatialNoise (row-keyed 2-D).

Lattice points carry hashed values in [-1, 1); between them the value is
blended with the hermite curve 3x^2 - 2x^3, so the result never leaves
[-1, 1].
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from ..constants import DEFAULT_PERSISTENCE, MASK64, MAX_PERLIN_OCTAVES
from ..core.context import SignalContext
from ..core.range import SignalRange
from ..core.sanitize import clamp, coerce_seed, finite_or, positive_or
from ..core.signal import Signal
from ..rng import derive_seed, hash2, salted, uniform_bipolar


def _hermite(x: float) -> float:
    return x * x * (3.0 - 2.0 * x)


def value_noise(seed: int, x: float) -> float:
    """1-D value noise in [-1, 1]."""
    if not math.isfinite(x):
        x = 0.0
    cell = math.floor(x)
    frac = x - cell
    a = uniform_bipolar(seed, cell & MASK64)
    b = uniform_bipolar(seed, (cell + 1) & MASK64)
    return a + (b - a) * _hermite(frac)


def _row_value(seed: int, cell: int, row: int) -> float:
    return (hash2(seed, cell & MASK64, row) >> 8) * (2.0 / (1 << 24)) - 1.0


@dataclass(frozen=True, slots=True)
class PerlinNoise(Signal):
    """
    Smooth 1-D noise with optional fractal octaves.

    Octave i runs at frequency * 2**i with weight persistence**i; the sum is
    divided by the total weight so the peak stays within [-amplitude,
    amplitude].

    Example:
        >>> clouds = PerlinNoise(seed=3, frequency=0.5).with_octaves(4, 0.5)
    """

    seed: int = 0
    frequency: float = 1.0
    amplitude: float = 1.0
    octaves: int = 1
    persistence: float = DEFAULT_PERSISTENCE

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed", coerce_seed(self.seed))
        object.__setattr__(self, "frequency", finite_or(self.frequency, 1.0))
        object.__setattr__(self, "amplitude", finite_or(self.amplitude, 1.0))
        octaves = int(clamp(finite_or(self.octaves, 1.0), 1.0, float(MAX_PERLIN_OCTAVES)))
        object.__setattr__(self, "octaves", octaves)
        persistence = clamp(finite_or(self.persistence, DEFAULT_PERSISTENCE), 0.0, 1.0)
        object.__setattr__(self, "persistence", persistence)

    def with_octaves(self, octaves: int, persistence: float = DEFAULT_PERSISTENCE) -> PerlinNoise:
        return replace(self, octaves=octaves, persistence=persistence)

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        if not math.isfinite(t):
            t = 0.0
        seed = salted(self.seed, ctx.instance_id)
        x = t * self.frequency
        if self.octaves == 1:
            return self.amplitude * value_noise(seed, x)
        total = 0.0
        norm = 0.0
        weight = 1.0
        scale = 1.0
        for octave in range(self.octaves):
            total += weight * value_noise(derive_seed(seed, octave), x * scale)
            norm += weight
            weight *= self.persistence
            scale *= 2.0
        return self.amplitude * (total / norm)

    def output_range(self) -> SignalRange:
        a = abs(self.amplitude)
        return SignalRange(-a, a)


@dataclass(frozen=True, slots=True)
class SpatialNoise(Signal):
    """
    Value noise over (t * spatial_scale, ctx.spatial_seed).

    Each spatial_seed selects an independent row; along a row the noise is
    smooth in t. Used for field-like effects where neighbouring rows differ.
    """

    seed: int = 0
    amplitude: float = 1.0
    spatial_scale: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed", coerce_seed(self.seed))
        object.__setattr__(self, "amplitude", finite_or(self.amplitude, 1.0))
        object.__setattr__(self, "spatial_scale", positive_or(self.spatial_scale, 1.0))

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        if not math.isfinite(t):
            t = 0.0
        seed = salted(self.seed, ctx.instance_id)
        x = t * self.spatial_scale
        if not math.isfinite(x):
            x = 0.0
        cell = math.floor(x)
        row = ctx.spatial_seed
        a = _row_value(seed, cell, row)
        b = _row_value(seed, cell + 1, row)
        return self.amplitude * (a + (b - a) * _hermite(x - cell))

    def output_range(self) -> SignalRange:
        a = abs(self.amplitude)
        return SignalRange(-a, a)
