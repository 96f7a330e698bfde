"""Leaf generators: periodic and aperiodic waveforms."""

from .aperiodic import Constant, Pulse, Ramp, Step
from .keyframes import Keyframe, Keyframes
from .phase import PhaseAccumulator, PhaseSine
from .periodic import Periodic, Sawtooth, Sine, Square, Triangle

__all__ = [
    "Constant",
    "Keyframe",
    "Keyframes",
    "Periodic",
    "PhaseAccumulator",
    "PhaseSine",
    "Pulse",
    "Ramp",
    "Sawtooth",
    "Sine",
    "Square",
    "Step",
    "Triangle",
]
