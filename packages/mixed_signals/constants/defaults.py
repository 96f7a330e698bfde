"""Numeric defaults shared across signal kinds.

Sample rates belong to consumers; the rates here are bucket rates that decide
how often a noise source draws a fresh value.
"""

from typing import Final

# 64-bit wraparound
MASK64: Final[int] = 0xFFFF_FFFF_FFFF_FFFF
MASK32: Final[int] = 0xFFFF_FFFF

# Periodic defaults (also used to replace non-finite parameters)
DEFAULT_FREQUENCY: Final[float] = 1.0
DEFAULT_AMPLITUDE: Final[float] = 1.0
DEFAULT_OFFSET: Final[float] = 0.0
DEFAULT_PHASE: Final[float] = 0.0
DEFAULT_DUTY: Final[float] = 0.5

# Envelopes
ENVELOPE_EPSILON: Final[float] = 1e-6  # Shorter segments collapse
DEFAULT_DECAY_RATE: Final[float] = 3.0

# Noise bucket rates (buckets per second)
SAFE_RATE: Final[float] = 1.0  # Replaces non-positive rates
WHITE_NOISE_RATE: Final[float] = 60.0
SEEDED_RANDOM_RATE: Final[float] = 1000.0
GAUSSIAN_RATE: Final[float] = 1000.0
POISSON_RATE: Final[float] = 1000.0
CORRELATED_RATE: Final[float] = 60.0
PINK_NOISE_RATE: Final[float] = 60.0
IMPULSE_SLOT_SECONDS: Final[float] = 0.001

# Tail factors
GAUSSIAN_TAIL: Final[float] = 5.0  # Samples clipped at +/- k sigma
POISSON_TAIL: Final[float] = 5.0  # Counts capped at k * max(lambda, 1)
POISSON_KNUTH_LIMIT: Final[float] = 30.0  # Above this, normal approximation

# Noise structure
CORRELATION_WINDOW: Final[int] = 16
PINK_OCTAVES: Final[int] = 8
MAX_PERLIN_OCTAVES: Final[int] = 16
DEFAULT_PERSISTENCE: Final[float] = 0.5

# Processing
MIN_QUANTIZE_LEVELS: Final[int] = 2

# Phase integration
PHASE_STEPS_PER_SECOND: Final[int] = 1000
PHASE_MAX_STEPS: Final[int] = 4096  # Long horizons integrate coarser
PHASE_WRAP_EPSILON: Final[float] = 1e-6  # Phases this close to 1 read as 0
