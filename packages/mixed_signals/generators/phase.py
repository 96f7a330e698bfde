"""
Integrated phase, for frequency sweeps that stay continuous.

FrequencyMod and signal-valued Periodic frequencies evaluate f(t) * t, which
jumps whenever f changes. PhaseAccumulator integrates f from 0 to t instead,
and PhaseSine turns that phase into a waveform. Both remain pure: the
integral is recomputed on every sample.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..constants import (
    DEFAULT_FREQUENCY,
    PHASE_MAX_STEPS,
    PHASE_STEPS_PER_SECOND,
    PHASE_WRAP_EPSILON,
)
from ..core.context import SignalContext
from ..core.range import BIPOLAR_RANGE, UNIT_RANGE, SignalRange
from ..core.sanitize import finite_or, fract
from ..core.signal import Param, Signal, param_value, sanitize_param

TAU = 2.0 * math.pi


@dataclass(frozen=True, slots=True)
class PhaseAccumulator(Signal):
    """
    Phase in cycles, wrapped to [0, 1): initial_phase + integral of frequency.

    A constant frequency integrates exactly. A signal-valued frequency uses the
    trapezoid rule at 1 ms steps, at most 4096 of them; a non-finite frequency
    sample counts as 0 Hz. Times before 0 give initial_phase.

    Example:
        >>> PhaseAccumulator(frequency=2.0).sample(0.25)
        0.5
    """

    frequency: Param = DEFAULT_FREQUENCY
    initial_phase: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "frequency", sanitize_param(self.frequency, DEFAULT_FREQUENCY))
        object.__setattr__(self, "initial_phase", fract(finite_or(self.initial_phase, 0.0)))

    def _integral(self, t: float, ctx: SignalContext) -> float:
        if not isinstance(self.frequency, Signal):
            return self.frequency * t
        steps = t * PHASE_STEPS_PER_SECOND
        steps = PHASE_MAX_STEPS if steps >= PHASE_MAX_STEPS else max(1, math.ceil(steps))
        dt = t / steps
        total = 0.0
        prev = finite_or(self.frequency.sample_with_context(0.0, ctx), 0.0)
        for i in range(1, steps + 1):
            curr = finite_or(self.frequency.sample_with_context(i * dt, ctx), 0.0)
            total += (prev + curr) * 0.5 * dt
            prev = curr
        return total

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        if not math.isfinite(t) or t <= 0.0:
            return self.initial_phase
        phase = self.initial_phase + self._integral(t, ctx)
        if not math.isfinite(phase):
            return self.initial_phase
        phase = fract(phase)
        return 0.0 if phase >= 1.0 - PHASE_WRAP_EPSILON else phase

    def output_range(self) -> SignalRange:
        return UNIT_RANGE


@dataclass(frozen=True, slots=True)
class PhaseSine(Signal):
    """
    sin(2 pi * phase(t)), usually fed by a PhaseAccumulator.

    Example:
        >>> PhaseSine(PhaseAccumulator(frequency=1.0)).sample(0.25)
        1.0
    """

    phase: Param = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "phase", sanitize_param(self.phase, 0.0))

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        u = param_value(self.phase, t, ctx)
        if not math.isfinite(u):
            u = 0.0
        return math.sin(TAU * u)

    def output_range(self) -> SignalRange:
        return BIPOLAR_RANGE
