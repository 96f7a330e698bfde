"""
Easing curves on [0, 1].

Each curve maps 0 to 0 and 1 to 1. Back and elastic overshoot in between.
Names are snake_case ("quad_in_out") so they read naturally in JSON specs.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from functools import lru_cache

from ..core.errors import InvalidParameterError

EaseFn = Callable[[float], float]

_BACK_C1 = 1.70158
_BACK_C2 = _BACK_C1 * 1.525
_BACK_C3 = _BACK_C1 + 1.0
_ELASTIC_C4 = (2.0 * math.pi) / 3.0
_ELASTIC_C5 = (2.0 * math.pi) / 4.5
EXTENT_GRID = 4096


def _bounce_out(x: float) -> float:
    n1, d1 = 7.5625, 2.75
    if x < 1.0 / d1:
        return n1 * x * x
    if x < 2.0 / d1:
        x -= 1.5 / d1
        return n1 * x * x + 0.75
    if x < 2.5 / d1:
        x -= 2.25 / d1
        return n1 * x * x + 0.9375
    x -= 2.625 / d1
    return n1 * x * x + 0.984375


def _elastic_in(x: float) -> float:
    if x <= 0.0 or x >= 1.0:
        return x
    return -(2.0 ** (10.0 * x - 10.0)) * math.sin((x * 10.0 - 10.75) * _ELASTIC_C4)


def _elastic_out(x: float) -> float:
    if x <= 0.0 or x >= 1.0:
        return x
    return 2.0 ** (-10.0 * x) * math.sin((x * 10.0 - 0.75) * _ELASTIC_C4) + 1.0


def _elastic_in_out(x: float) -> float:
    if x <= 0.0 or x >= 1.0:
        return x
    if x < 0.5:
        return -(2.0 ** (20.0 * x - 10.0) * math.sin((20.0 * x - 11.125) * _ELASTIC_C5)) / 2.0
    return (2.0 ** (-20.0 * x + 10.0) * math.sin((20.0 * x - 11.125) * _ELASTIC_C5)) / 2.0 + 1.0


def _expo_in(x: float) -> float:
    return 0.0 if x <= 0.0 else 2.0 ** (10.0 * x - 10.0)


def _expo_out(x: float) -> float:
    return 1.0 if x >= 1.0 else 1.0 - 2.0 ** (-10.0 * x)


def _expo_in_out(x: float) -> float:
    if x <= 0.0 or x >= 1.0:
        return x
    if x < 0.5:
        return 2.0 ** (20.0 * x - 10.0) / 2.0
    return (2.0 - 2.0 ** (-20.0 * x + 10.0)) / 2.0


EASINGS: dict[str, EaseFn] = {
    "linear": lambda x: x,
    "quad_in": lambda x: x * x,
    "quad_out": lambda x: 1.0 - (1.0 - x) * (1.0 - x),
    "quad_in_out": lambda x: 2.0 * x * x if x < 0.5 else 1.0 - (-2.0 * x + 2.0) ** 2 / 2.0,
    "cubic_in": lambda x: x * x * x,
    "cubic_out": lambda x: 1.0 - (1.0 - x) ** 3,
    "cubic_in_out": lambda x: 4.0 * x * x * x if x < 0.5 else 1.0 - (-2.0 * x + 2.0) ** 3 / 2.0,
    "sine_in": lambda x: 1.0 - math.cos(x * math.pi / 2.0),
    "sine_out": lambda x: math.sin(x * math.pi / 2.0),
    "sine_in_out": lambda x: -(math.cos(math.pi * x) - 1.0) / 2.0,
    "expo_in": _expo_in,
    "expo_out": _expo_out,
    "expo_in_out": _expo_in_out,
    "circ_in": lambda x: 1.0 - math.sqrt(1.0 - x * x),
    "circ_out": lambda x: math.sqrt(1.0 - (x - 1.0) ** 2),
    "circ_in_out": lambda x: (
        (1.0 - math.sqrt(1.0 - (2.0 * x) ** 2)) / 2.0
        if x < 0.5
        else (math.sqrt(1.0 - (-2.0 * x + 2.0) ** 2) + 1.0) / 2.0
    ),
    "back_in": lambda x: _BACK_C3 * x * x * x - _BACK_C1 * x * x,
    "back_out": lambda x: 1.0 + _BACK_C3 * (x - 1.0) ** 3 + _BACK_C1 * (x - 1.0) ** 2,
    "back_in_out": lambda x: (
        ((2.0 * x) ** 2 * ((_BACK_C2 + 1.0) * 2.0 * x - _BACK_C2)) / 2.0
        if x < 0.5
        else ((2.0 * x - 2.0) ** 2 * ((_BACK_C2 + 1.0) * (x * 2.0 - 2.0) + _BACK_C2) + 2.0) / 2.0
    ),
    "elastic_in": _elastic_in,
    "elastic_out": _elastic_out,
    "elastic_in_out": _elastic_in_out,
    "bounce_in": lambda x: 1.0 - _bounce_out(1.0 - x),
    "bounce_out": _bounce_out,
    "bounce_in_out": lambda x: (
        (1.0 - _bounce_out(1.0 - 2.0 * x)) / 2.0
        if x < 0.5
        else (1.0 + _bounce_out(2.0 * x - 1.0)) / 2.0
    ),
}


def validate_easing(name: str) -> str:
    """
    Check an easing name.

    Raises:
        InvalidParameterError: If the name is not a known curve
    """
    if name not in EASINGS:
        raise InvalidParameterError(
            "easing", f"unknown easing {name!r} (expected one of: {', '.join(EASINGS)})"
        )
    return name


@lru_cache(maxsize=64)
def easing_extent(name: str) -> tuple[float, float]:
    """
    Lowest and highest output of a curve over [0, 1].

    Found on a grid of EXTENT_GRID steps, so an overshoot peak between grid
    points may be missed by a few millionths.

    Example:
        >>> easing_extent("quad_in")
        (0.0, 1.0)
    """
    fn = EASINGS[validate_easing(name)]
    values = [fn(i / EXTENT_GRID) for i in range(EXTENT_GRID + 1)]
    return min(values), max(values)


def ease(name: str, x: float) -> float:
    """Apply a named curve to x, clamped to [0, 1] first."""
    if not x > 0.0:
        x = 0.0
    elif x > 1.0:
        x = 1.0
    return EASINGS[validate_easing(name)](x)
