"""Declarative signal specs: models, loading, building, reflection."""

from .loader import (
    build_spec,
    dump_spec,
    load_spec,
    load_spec_file,
    load_spec_json,
    spec_to_json,
    translate_validation_error,
)
from .models import (
    KINDS,
    SPEC_MODELS,
    AbsSpec,
    AddSpec,
    ADSRSpec,
    ClampSpec,
    ClipperSpec,
    ConstantSpec,
    CorrelatedNoiseSpec,
    FrequencyModSpec,
    GaussianNoiseSpec,
    ImpactSpec,
    ImpulseNoiseSpec,
    InvertSpec,
    KeyframeSpec,
    KeyframesSpec,
    LinearEnvelopeSpec,
    LoopSpec,
    MixSpec,
    MultiplySpec,
    NormalizedSpec,
    PerCharacterNoiseSpec,
    PerlinNoiseSpec,
    PhaseAccumulatorSpec,
    PhaseSineSpec,
    PinkNoiseSpec,
    PoissonNoiseSpec,
    PulseSpec,
    QuantizeSpec,
    RampSpec,
    RemapSpec,
    SawtoothSpec,
    ScaleSpec,
    SeededRandomSpec,
    SignalOrFloat,
    SignalSpec,
    SineSpec,
    SpatialNoiseSpec,
    SpecModel,
    SquareSpec,
    StepSpec,
    StudentTNoiseSpec,
    TriangleSpec,
    VcaCenteredSpec,
    WhiteNoiseSpec,
)
from .reflect import reflect
from .serializer import SerializationFormat, SpecSerializer

__all__ = [
    "KINDS",
    "SPEC_MODELS",
    "ADSRSpec",
    "AbsSpec",
    "AddSpec",
    "ClampSpec",
    "ClipperSpec",
    "ConstantSpec",
    "CorrelatedNoiseSpec",
    "FrequencyModSpec",
    "GaussianNoiseSpec",
    "ImpactSpec",
    "ImpulseNoiseSpec",
    "InvertSpec",
    "KeyframeSpec",
    "KeyframesSpec",
    "LinearEnvelopeSpec",
    "LoopSpec",
    "MixSpec",
    "MultiplySpec",
    "NormalizedSpec",
    "PerCharacterNoiseSpec",
    "PerlinNoiseSpec",
    "PhaseAccumulatorSpec",
    "PhaseSineSpec",
    "PinkNoiseSpec",
    "PoissonNoiseSpec",
    "PulseSpec",
    "QuantizeSpec",
    "RampSpec",
    "RemapSpec",
    "SawtoothSpec",
    "ScaleSpec",
    "SeededRandomSpec",
    "SerializationFormat",
    "SignalOrFloat",
    "SignalSpec",
    "SineSpec",
    "SpatialNoiseSpec",
    "SpecModel",
    "SpecSerializer",
    "SquareSpec",
    "StepSpec",
    "StudentTNoiseSpec",
    "TriangleSpec",
    "VcaCenteredSpec",
    "WhiteNoiseSpec",
    "build_spec",
    "dump_spec",
    "load_spec",
    "load_spec_file",
    "load_spec_json",
    "reflect",
    "spec_to_json",
    "translate_validation_error",
]
