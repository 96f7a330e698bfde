"""Arbitrary output transforms."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from ..core.context import SignalContext
from ..core.range import SignalRange
from ..core.signal import Signal


@dataclass(frozen=True, slots=True)
class Map(Signal):
    """
    Apply a Python callable to every output.

    The callable must be pure for the result to stay deterministic. Without
    an explicit range the inner range is declared. Map trees cannot be
    reflected into a spec.
    """

    inner: Signal
    fn: Callable[[float], float]
    declared_range: SignalRange | None = None

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        value = float(self.fn(self.inner.sample_with_context(t, ctx)))
        return value if math.isfinite(value) else 0.0

    def output_range(self) -> SignalRange:
        if self.declared_range is not None:
            return self.declared_range
        return self.inner.output_range()
