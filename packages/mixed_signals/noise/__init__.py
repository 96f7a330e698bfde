"""Deterministic noise and random sources."""

from .colored import CorrelatedNoise, PinkNoise
from .per_character import PerCharacterNoise
from .smooth import PerlinNoise, SpatialNoise, value_noise
from .statistical import GaussianNoise, ImpulseNoise, PoissonNoise, StudentTNoise
from .white import SeededRandom, WhiteNoise

__all__ = [
    "CorrelatedNoise",
    "GaussianNoise",
    "ImpulseNoise",
    "PerCharacterNoise",
    "PerlinNoise",
    "PinkNoise",
    "PoissonNoise",
    "SeededRandom",
    "SpatialNoise",
    "StudentTNoise",
    "WhiteNoise",
    "value_noise",
]
