"""Time-domain wrappers."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.context import SignalContext
from ..core.errors import InvalidParameterError
from ..core.range import SignalRange
from ..core.sanitize import finite_or
from ..core.signal import Signal


@dataclass(frozen=True, slots=True)
class Loop(Signal):
    """
    Repeat the first `period` seconds of inner forever.

    Negative times wrap into [0, period) as well.

    Raises:
        InvalidParameterError: If period <= 0
    """

    inner: Signal
    period: float = 1.0

    def __post_init__(self) -> None:
        period = finite_or(self.period, 1.0)
        if period <= 0.0:
            raise InvalidParameterError("period", f"must be > 0, got {period}")
        object.__setattr__(self, "period", period)

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        local = t % self.period if math.isfinite(t) else 0.0
        return self.inner.sample_with_context(local, ctx)

    def output_range(self) -> SignalRange:
        return self.inner.output_range()
