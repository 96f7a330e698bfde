"""Modulation combinators: FrequencyMod and VcaCentered."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.context import SignalContext
from ..core.range import SignalRange
from ..core.sanitize import finite_or
from ..core.signal import Param, Signal, param_range, param_value, sanitize_param


@dataclass(frozen=True, slots=True)
class FrequencyMod(Signal):
    """
    Time-warp frequency modulation.

    Samples the carrier at t * (base + depth * modulator(t)) / base. This is a
    shortcut without a phase accumulator, so it is not a physically correct
    FM synthesiser: the instantaneous frequency also scales with t. A zero or
    non-finite base leaves the carrier unmodulated.

    Example:
        >>> vibrato = FrequencyMod(Sine(frequency=440.0), Sine(frequency=5.0), depth=4.0, base=440.0)
    """

    carrier: Signal
    modulator: Signal
    depth: Param = 1.0
    base: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "depth", sanitize_param(self.depth, 0.0))
        object.__setattr__(self, "base", finite_or(self.base, 0.0))

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        if self.base == 0.0:
            return self.carrier.sample_with_context(t, ctx)
        depth = param_value(self.depth, t, ctx)
        ratio = (self.base + depth * self.modulator.sample_with_context(t, ctx)) / self.base
        warped = t * ratio
        if not math.isfinite(warped):
            warped = t
        return self.carrier.sample_with_context(warped, ctx)

    def output_range(self) -> SignalRange:
        return self.carrier.output_range()


@dataclass(frozen=True, slots=True)
class VcaCentered(Signal):
    """
    Voltage-controlled amplifier around the carrier's range centre.

    center + (carrier - center) * amplitude, so a unipolar carrier swells
    about its midpoint instead of about zero.
    """

    carrier: Signal
    amplitude: Param = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "amplitude", sanitize_param(self.amplitude, 1.0))

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        center = self.carrier.output_range().center
        gain = param_value(self.amplitude, t, ctx)
        value = center + (self.carrier.sample_with_context(t, ctx) - center) * gain
        return value if math.isfinite(value) else center

    def output_range(self) -> SignalRange:
        carrier = self.carrier.output_range()
        gain = param_range(self.amplitude)
        half = carrier.width * 0.5 * max(abs(gain.min), abs(gain.max))
        return SignalRange(carrier.center - half, carrier.center + half)
