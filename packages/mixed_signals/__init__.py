"""Mixed Signals: deterministic, composable 1-D signals for visual effects.

Signals are immutable trees sampled at a time t. Noise is a pure function of
seed and time, so any tree can be sampled in any order and from any thread.
"""

from .composition import Add, FrequencyMod, Mix, Multiply, VcaCentered
from .config import Settings, get_settings
from .core import (
    BIPOLAR_RANGE,
    DEFAULT_CONTEXT,
    UNIT_RANGE,
    BuildFailureError,
    InvalidParameterError,
    MissingFieldError,
    Param,
    ReflectionError,
    Signal,
    SignalContext,
    SignalError,
    SignalRange,
    SpecDecodeError,
    UnknownKindError,
)
from .easing import EASINGS, ease, easing_extent
from .envelopes import ADSR, Impact, LinearEnvelope
from .generators import (
    Constant,
    Keyframe,
    Keyframes,
    PhaseAccumulator,
    PhaseSine,
    Pulse,
    Ramp,
    Sawtooth,
    Sine,
    Square,
    Step,
    Triangle,
)
from .noise import (
    CorrelatedNoise,
    GaussianNoise,
    ImpulseNoise,
    PerCharacterNoise,
    PerlinNoise,
    PinkNoise,
    PoissonNoise,
    SeededRandom,
    SpatialNoise,
    StudentTNoise,
    WhiteNoise,
)
from .processing import (
    Abs,
    Clamp,
    Clipper,
    Invert,
    Loop,
    Map,
    Normalized,
    Quantize,
    Remap,
    Scale,
)
from .rng import Rng
from .spec import (
    SignalSpec,
    SpecSerializer,
    build_spec,
    dump_spec,
    load_spec,
    load_spec_file,
    load_spec_json,
    reflect,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Signal",
    "SignalContext",
    "SignalRange",
    "Param",
    "DEFAULT_CONTEXT",
    "UNIT_RANGE",
    "BIPOLAR_RANGE",
    # Errors
    "SignalError",
    "InvalidParameterError",
    "SpecDecodeError",
    "UnknownKindError",
    "MissingFieldError",
    "BuildFailureError",
    "ReflectionError",
    # Generators
    "Sine",
    "Triangle",
    "Square",
    "Sawtooth",
    "Ramp",
    "Step",
    "Pulse",
    "Constant",
    "Keyframe",
    "Keyframes",
    "PhaseAccumulator",
    "PhaseSine",
    # Envelopes
    "ADSR",
    "LinearEnvelope",
    "Impact",
    # Noise
    "WhiteNoise",
    "SeededRandom",
    "PerlinNoise",
    "GaussianNoise",
    "PoissonNoise",
    "CorrelatedNoise",
    "PinkNoise",
    "SpatialNoise",
    "PerCharacterNoise",
    "ImpulseNoise",
    "StudentTNoise",
    # Composition
    "Add",
    "Multiply",
    "Mix",
    "FrequencyMod",
    "VcaCentered",
    # Processing
    "Scale",
    "Invert",
    "Abs",
    "Clamp",
    "Clipper",
    "Remap",
    "Quantize",
    "Normalized",
    "Loop",
    "Map",
    # Easing
    "EASINGS",
    "ease",
    "easing_extent",
    # Randomness
    "Rng",
    # Specs
    "SignalSpec",
    "SpecSerializer",
    "build_spec",
    "dump_spec",
    "load_spec",
    "load_spec_file",
    "load_spec_json",
    "reflect",
    # Settings
    "Settings",
    "get_settings",
    "__version__",
]
