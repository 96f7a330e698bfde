"""Deterministic RNG foundation for noise and shuffles."""

from .kernel import (
    derive_seed,
    hash2,
    hash32,
    hash64,
    mix64,
    salted,
    time_bucket,
    uniform_bipolar,
    uniform_u64,
    uniform_unit,
    unit_at,
)
from .rng import Rng

__all__ = [
    "Rng",
    "derive_seed",
    "hash2",
    "hash32",
    "hash64",
    "mix64",
    "salted",
    "time_bucket",
    "uniform_bipolar",
    "uniform_u64",
    "uniform_unit",
    "unit_at",
]
