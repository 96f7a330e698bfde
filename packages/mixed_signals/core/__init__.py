"""Signal abstraction, ranges, context and errors."""

from .context import DEFAULT_CONTEXT, SignalContext
from .errors import (
    BuildFailureError,
    InvalidParameterError,
    MissingFieldError,
    ReflectionError,
    SignalError,
    SpecDecodeError,
    UnknownKindError,
)
from .range import BIPOLAR_RANGE, UNIT_RANGE, SignalRange
from .sanitize import (
    clamp,
    coerce_seed,
    finite_or,
    fract,
    lerp,
    non_negative,
    positive_or,
    saturate,
)
from .signal import Param, Signal, lift, param_range, param_value, sanitize_param

__all__ = [
    "BIPOLAR_RANGE",
    "DEFAULT_CONTEXT",
    "UNIT_RANGE",
    "BuildFailureError",
    "InvalidParameterError",
    "MissingFieldError",
    "Param",
    "ReflectionError",
    "Signal",
    "SignalContext",
    "SignalError",
    "SignalRange",
    "SpecDecodeError",
    "UnknownKindError",
    "clamp",
    "coerce_seed",
    "finite_or",
    "fract",
    "lerp",
    "lift",
    "non_negative",
    "param_range",
    "param_value",
    "positive_or",
    "sanitize_param",
    "saturate",
]
