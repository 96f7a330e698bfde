"""Noise keyed on the character being drawn rather than on time."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.context import SignalContext
from ..core.range import SignalRange
from ..core.sanitize import coerce_seed, finite_or, saturate
from ..core.signal import Signal
from ..rng import salted, uniform_unit


@dataclass(frozen=True, slots=True)
class PerCharacterNoise(Signal):
    """
    One stable random value per character: mean + amplitude * U(0, 1).

    Keys on ctx.char_index (falling back to ctx.instance_id when unset); a
    nonzero ctx.spatial_seed selects a different set of values. t is ignored.

    Example:
        >>> noise = PerCharacterNoise(seed=7)
        >>> ctx = DEFAULT_CONTEXT.with_char_index(3)
        >>> noise.sample_with_context(0.0, ctx) == noise.sample_with_context(9.0, ctx)
        True
    """

    seed: int = 0
    amplitude: float = 1.0
    mean: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed", coerce_seed(self.seed))
        object.__setattr__(self, "amplitude", finite_or(self.amplitude, 1.0))
        object.__setattr__(self, "mean", finite_or(self.mean, 0.0))

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        key = ctx.char_index if ctx.char_index is not None else ctx.instance_id
        seed = salted(self.seed, ctx.spatial_seed)
        return saturate(self.mean + self.amplitude * uniform_unit(seed, key), self.mean)

    def output_range(self) -> SignalRange:
        return SignalRange(self.mean, self.mean + self.amplitude)
