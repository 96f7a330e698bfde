"""Shared numeric constants."""

from .defaults import (
    CORRELATED_RATE,
    CORRELATION_WINDOW,
    DEFAULT_AMPLITUDE,
    DEFAULT_DECAY_RATE,
    DEFAULT_DUTY,
    DEFAULT_FREQUENCY,
    DEFAULT_OFFSET,
    DEFAULT_PERSISTENCE,
    DEFAULT_PHASE,
    ENVELOPE_EPSILON,
    GAUSSIAN_RATE,
    GAUSSIAN_TAIL,
    IMPULSE_SLOT_SECONDS,
    MASK32,
    MASK64,
    MAX_PERLIN_OCTAVES,
    MIN_QUANTIZE_LEVELS,
    PHASE_MAX_STEPS,
    PHASE_STEPS_PER_SECOND,
    PHASE_WRAP_EPSILON,
    PINK_NOISE_RATE,
    PINK_OCTAVES,
    POISSON_KNUTH_LIMIT,
    POISSON_RATE,
    POISSON_TAIL,
    SAFE_RATE,
    SEEDED_RANDOM_RATE,
    WHITE_NOISE_RATE,
)

__all__ = [
    "CORRELATED_RATE",
    "CORRELATION_WINDOW",
    "DEFAULT_AMPLITUDE",
    "DEFAULT_DECAY_RATE",
    "DEFAULT_DUTY",
    "DEFAULT_FREQUENCY",
    "DEFAULT_OFFSET",
    "DEFAULT_PERSISTENCE",
    "DEFAULT_PHASE",
    "ENVELOPE_EPSILON",
    "GAUSSIAN_RATE",
    "GAUSSIAN_TAIL",
    "IMPULSE_SLOT_SECONDS",
    "MASK32",
    "MASK64",
    "MAX_PERLIN_OCTAVES",
    "MIN_QUANTIZE_LEVELS",
    "PHASE_MAX_STEPS",
    "PHASE_STEPS_PER_SECOND",
    "PHASE_WRAP_EPSILON",
    "PINK_NOISE_RATE",
    "PINK_OCTAVES",
    "POISSON_KNUTH_LIMIT",
    "POISSON_RATE",
    "POISSON_TAIL",
    "SAFE_RATE",
    "SEEDED_RANDOM_RATE",
    "WHITE_NOISE_RATE",
]
