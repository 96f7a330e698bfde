"""Single-child processors: value shaping, looping and mapping."""

from .mapping import Map
from .shaping import Abs, Clamp, Clipper, Invert, Normalized, Quantize, Remap, Scale
from .timing import Loop

__all__ = [
    "Abs",
    "Clamp",
    "Clipper",
    "Invert",
    "Loop",
    "Map",
    "Normalized",
    "Quantize",
    "Remap",
    "Scale",
]
