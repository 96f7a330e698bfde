"""Piecewise curve through (time, value) keyframes."""

from __future__ import annotations

import bisect
import math
from dataclasses import dataclass, field

from ..core.context import SignalContext
from ..core.errors import InvalidParameterError
from ..core.range import SignalRange
from ..core.sanitize import finite_or, lerp
from ..core.signal import Signal
from ..easing import ease, easing_extent, validate_easing


@dataclass(frozen=True, slots=True)
class Keyframe:
    """A point on a Keyframes curve; easing shapes the segment arriving here."""

    time: float
    value: float
    easing: str = "linear"


@dataclass(frozen=True, slots=True)
class Keyframes(Signal):
    """
    Interpolate between keyframes sorted by time, holding both ends.

    Keyframes with a non-finite time are dropped; non-finite values become 0.

    Example:
        >>> curve = Keyframes((Keyframe(0.0, 0.0), Keyframe(1.0, 1.0, "quad_in")))
        >>> curve.sample(0.5)
        0.25

    Raises:
        InvalidParameterError: If no usable keyframe remains
    """

    points: tuple[Keyframe, ...]
    _times: tuple[float, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        cleaned = []
        for point in self.points:
            if not isinstance(point, Keyframe):
                point = Keyframe(*point)
            if not math.isfinite(float(point.time)):
                continue
            validate_easing(point.easing)
            cleaned.append(
                Keyframe(float(point.time), finite_or(point.value, 0.0), point.easing)
            )
        if not cleaned:
            raise InvalidParameterError("points", "at least one finite keyframe is required")
        cleaned.sort(key=lambda p: p.time)
        object.__setattr__(self, "points", tuple(cleaned))
        object.__setattr__(self, "_times", tuple(p.time for p in cleaned))

    def sample_with_context(self, t: float, ctx: SignalContext) -> float:
        if not math.isfinite(t):
            t = 0.0
        points = self.points
        if t <= points[0].time:
            return points[0].value
        if t >= points[-1].time:
            return points[-1].value
        i = bisect.bisect_right(self._times, t)
        a, b = points[i - 1], points[i]
        span = b.time - a.time
        progress = (t - a.time) / span if span > 0.0 else 1.0
        if b.easing != "linear":
            progress = ease(b.easing, progress)
        return lerp(a.value, b.value, progress)

    def output_range(self) -> SignalRange:
        values = [p.value for p in self.points]
        for a, b in zip(self.points, self.points[1:]):
            if b.easing != "linear":
                lo, hi = easing_extent(b.easing)
                values += [lerp(a.value, b.value, lo), lerp(a.value, b.value, hi)]
        return SignalRange.spanning(*values)
