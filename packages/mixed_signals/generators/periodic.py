"""
Periodic waveforms.

Each yields offset + amplitude * shape(frequency * t + phase). Any of the four
parameters may be a Signal, in which case it is sampled at the same (t, ctx)
as the waveform. A signal-valued frequency is applied instantaneously
(f(t) * t); it is not phase-integrated.
"""

from __future__ import annotations

import math
from abc import abstractmethod
from dataclasses import dataclass

from ..constants import (
    DEFAULT_AMPLITUDE,
    DEFAULT_DUTY,
    DEFAULT_FREQUENCY,
    DEFAULT_OFFSET,
    DEFAULT_PHASE,
)
from ..core.context import SignalContext
from ..core.range import SignalRange
from ..core.sanitize import clamp, finite_or
from ..core.signal import Param, Signal, param_range, param_value, sanitize_param

TAU = 2.0 * math.pi


@dataclass(frozen=True, slots=True)
class Periodic(Signal):
    """Shared parameter handling for periodic waveforms."""

    frequency: Param = DEFAULT_FREQUENCY
    amplitude: Param = DEFAULT_AMPLITUDE
    offset: Param = DEFAULT_OFFSET
    phase: Param = DEFAULT_PHASE

    def __post_init__(self) -> None:
        object.__setattr__(self, "frequency", sanitize_param(self.frequency, DEFAULT_FREQUENCY))
        object.__setattr__(self, "amplitude", sanitize_param(self.amplitude, DEFAULT_AMPLITUDE))
        object.__setattr__(self, "offset", sanitize_param(self.offset, DEFAULT_OFFSET))
        object.__setattr__(self, "phase", sanitize_param(self.phase, DEFAULT_PHASE))

    @abstractmethod
    def shape(self, u: float) -> float:
        """Unit waveform over one cycle; u is in cycles."""

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        if not math.isfinite(t):
            t = 0.0
        freq = param_value(self.frequency, t, ctx)
        u = freq * t + param_value(self.phase, t, ctx)
        if not math.isfinite(u):
            u = 0.0
        offset = param_value(self.offset, t, ctx)
        value = offset + param_value(self.amplitude, t, ctx) * self.shape(u)
        return value if math.isfinite(value) else finite_or(offset, 0.0)

    def output_range(self) -> SignalRange:
        amp = param_range(self.amplitude)
        bound = max(abs(amp.min), abs(amp.max))
        off = param_range(self.offset)
        return SignalRange(off.min - bound, off.max + bound)


@dataclass(frozen=True, slots=True)
class Sine(Periodic):
    """
    Sine wave: sin(2 pi u).

    Example:
        >>> Sine(frequency=2.0, amplitude=0.5).sample(0.125)
        0.5
    """

    def shape(self, u: float) -> float:
        return math.sin(TAU * u)


@dataclass(frozen=True, slots=True)
class Triangle(Periodic):
    """Triangle wave: 4|fract(u) - 0.5| - 1 (starts at +1)."""

    def shape(self, u: float) -> float:
        return 4.0 * abs(u - math.floor(u) - 0.5) - 1.0


@dataclass(frozen=True, slots=True)
class Square(Periodic):
    """Square wave: +1 while fract(u) < duty, else -1."""

    duty: float = DEFAULT_DUTY

    def __post_init__(self) -> None:
        Periodic.__post_init__(self)
        object.__setattr__(self, "duty", clamp(finite_or(self.duty, DEFAULT_DUTY), 0.0, 1.0))

    def shape(self, u: float) -> float:
        return 1.0 if u - math.floor(u) < self.duty else -1.0


@dataclass(frozen=True, slots=True)
class Sawtooth(Periodic):
    """Rising sawtooth 2 fract(u) - 1, falling when inverted."""

    inverted: bool = False

    def __post_init__(self) -> None:
        Periodic.__post_init__(self)
        object.__setattr__(self, "inverted", bool(self.inverted))

    def shape(self, u: float) -> float:
        value = 2.0 * (u - math.floor(u)) - 1.0
        return -value if self.inverted else value
