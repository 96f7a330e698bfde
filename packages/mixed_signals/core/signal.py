"""
The Signal abstraction.

A signal is a pure function of time (and an optional context) with a declared
output range. Leaves and combinators are frozen slotted dataclasses deriving
from Signal; the fluent methods below build combinator trees.

Usage:
    >>> from mixed_signals import Sine, LinearEnvelope
    >>> tone = Sine(frequency=2.0).mix(Sine(frequency=3.0), 0.5)
    >>> voice = tone.multiply(LinearEnvelope(0.1, 0.5)).scale(0.95)
    >>> voice.sample(0.25)
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Callable, MutableSequence
from typing import TYPE_CHECKING, Union

import numpy as np

from .context import DEFAULT_CONTEXT, SignalContext
from .range import SignalRange

if TYPE_CHECKING:
    from ..spec.models import SignalSpec


class Signal(ABC):
    """Base class for every sampleable signal."""

    __slots__ = ()

    @abstractmethod
    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        """Value at time t under the given context. Must be pure and finite."""

    @abstractmethod
    def output_range(self) -> SignalRange:
        """Declared output envelope. Constant for the life of the signal."""

    def sample(self, t: float) -> float:
        return self.sample_with_context(t, DEFAULT_CONTEXT)

    def sample_into(
        self,
        t0: float,
        dt: float,
        out: MutableSequence[float],
        ctx: SignalContext | None = None,
    ) -> None:
        """
        Fill a preallocated buffer with out[i] = sample(t0 + i * dt).

        Each time is computed from the index, so long buffers do not
        accumulate rounding error.

        Args:
            t0: Time of the first sample (seconds)
            dt: Time step between samples (seconds)
            out: Mutable float buffer (list or numpy array)
            ctx: Context for every sample (default context if None)
        """
        ctx = DEFAULT_CONTEXT if ctx is None else ctx
        sample = self.sample_with_context
        for i in range(len(out)):
            out[i] = sample(t0 + i * dt, ctx)

    def sample_array(
        self,
        t0: float,
        dt: float,
        count: int,
        ctx: SignalContext | None = None,
    ) -> np.ndarray:
        """Allocate a float32 buffer of count samples and fill it."""
        buf = np.zeros(max(0, int(count)), dtype=np.float32)
        self.sample_into(t0, dt, buf, ctx)
        return buf

    # Fluent builder

    def add(self, other: Signal | float) -> Signal:
        from ..composition import Add

        return Add(self, lift(other))

    def multiply(self, other: Signal | float) -> Signal:
        from ..composition import Multiply

        return Multiply(self, lift(other))

    def mix(self, other: Signal | float, weight: Param = 0.5) -> Signal:
        from ..composition import Mix

        return Mix(self, lift(other), weight)

    def frequency_mod(
        self, modulator: Signal, depth: Param = 1.0, base: float = 1.0
    ) -> Signal:
        from ..composition import FrequencyMod

        return FrequencyMod(self, modulator, depth, base)

    def scale(self, factor: Param) -> Signal:
        from ..processing import Scale

        return Scale(self, factor)

    def invert(self) -> Signal:
        from ..processing import Invert

        return Invert(self)

    def abs(self) -> Signal:
        from ..processing import Abs

        return Abs(self)

    def clamp(self, lo: float = 0.0, hi: float = 1.0) -> Signal:
        from ..processing import Clamp

        return Clamp(self, lo, hi)

    def clip(
        self, pos_threshold: float = 1.0, neg_threshold: float = -1.0, mode: str = "hard"
    ) -> Signal:
        from ..processing import Clipper

        return Clipper(self, pos_threshold, neg_threshold, mode)

    def remap(
        self, in_min: float, in_max: float, out_min: float, out_max: float
    ) -> Signal:
        from ..processing import Remap

        return Remap(self, in_min, in_max, out_min, out_max)

    def quantize(self, levels: int) -> Signal:
        from ..processing import Quantize

        return Quantize(self, levels)

    def normalized(self) -> Signal:
        from ..processing import Normalized

        return Normalized(self)

    def loop(self, period: float) -> Signal:
        from ..processing import Loop

        return Loop(self, period)

    def map(
        self, fn: Callable[[float], float], output_range: SignalRange | None = None
    ) -> Signal:
        from ..processing import Map

        return Map(self, fn, output_range)

    def to_spec(self) -> SignalSpec:
        """Reflect this tree back into its declarative spec."""
        from ..spec.reflect import reflect

        return reflect(self)

    # Operators

    def __add__(self, other: Signal | float) -> Signal:
        return self.add(other)

    def __radd__(self, other: float) -> Signal:
        return lift(other).add(self)

    def __sub__(self, other: Signal | float) -> Signal:
        return self.add(lift(other).invert())

    def __rsub__(self, other: float) -> Signal:
        return lift(other).add(self.invert())

    def __mul__(self, other: Signal | float) -> Signal:
        if isinstance(other, Signal):
            return self.multiply(other)
        return self.scale(other)

    def __rmul__(self, other: float) -> Signal:
        return self.scale(other)

    def __neg__(self) -> Signal:
        return self.invert()


# Numeric parameter that may itself vary over time
Param = Union[float, Signal]


def lift(value: Signal | float) -> Signal:
    """Wrap a plain number as a Constant."""
    if isinstance(value, Signal):
        return value
    from ..generators import Constant

    return Constant(value)


def sanitize_param(value: Param, default: float) -> Param:
    """Keep signals as-is; replace non-finite numbers with default."""
    if isinstance(value, Signal):
        return value
    value = float(value)
    return value if math.isfinite(value) else default


def param_value(value: Param, t: float, ctx: SignalContext) -> float:
    if isinstance(value, Signal):
        return value.sample_with_context(t, ctx)
    return value


def param_range(value: Param) -> SignalRange:
    if isinstance(value, Signal):
        return value.output_range()
    return SignalRange(value, value)
