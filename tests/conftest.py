"""Root conftest.py - Setup Python path and shared fixtures for tests"""

import sys
from pathlib import Path

import pytest

# Add packages to Python path
root_dir = Path(__file__).parent.parent
packages_dir = root_dir / "packages"

sys.path.insert(0, str(packages_dir))

from mixed_signals import (  # noqa: E402
    ADSR,
    Abs,
    Add,
    Clamp,
    Clipper,
    Constant,
    CorrelatedNoise,
    FrequencyMod,
    GaussianNoise,
    Impact,
    ImpulseNoise,
    Invert,
    Keyframe,
    Keyframes,
    LinearEnvelope,
    Loop,
    Mix,
    Multiply,
    PerCharacterNoise,
    PerlinNoise,
    PhaseAccumulator,
    PhaseSine,
    PinkNoise,
    PoissonNoise,
    Pulse,
    Quantize,
    Ramp,
    Remap,
    Rng,
    Sawtooth,
    Scale,
    SeededRandom,
    Sine,
    SpatialNoise,
    Square,
    Step,
    StudentTNoise,
    Triangle,
    VcaCentered,
    WhiteNoise,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def build_catalogue():
    """One instance of every signal type, with combinators over small trees"""
    sine = Sine(frequency=2.0, amplitude=0.5)
    return {
        "Sine": sine,
        "Triangle": Triangle(frequency=3.0),
        "Square": Square(frequency=1.5, duty=0.25),
        "Sawtooth": Sawtooth(frequency=0.5, inverted=True),
        "Ramp": Ramp(0.0, 1.0, 1.0),
        "Step": Step(low=-1.0, high=1.0, threshold=0.3),
        "Pulse": Pulse.window(0.65, 0.85),
        "Constant": Constant(0.42),
        "Keyframes": Keyframes((Keyframe(0.0, 0.0), Keyframe(0.5, 1.0, "quad_out"), Keyframe(1.0, 0.2))),
        "PhaseAccumulator": PhaseAccumulator(frequency=1.5, initial_phase=0.25),
        "PhaseSine": PhaseSine(PhaseAccumulator(frequency=2.0)),
        "ADSR": ADSR(attack=0.1, decay=0.2, sustain=0.5, release=0.3),
        "LinearEnvelope": LinearEnvelope(attack=0.1, release=0.5),
        "Impact": Impact(peak=1.0, decay_rate=4.0),
        "WhiteNoise": WhiteNoise(seed=1),
        "SeededRandom": SeededRandom(seed=2),
        "PerlinNoise": PerlinNoise(seed=3, frequency=2.0, octaves=4),
        "GaussianNoise": GaussianNoise(seed=4, std_dev=0.5),
        "PoissonNoise": PoissonNoise(seed=5, lambda_=3.0, amplitude=0.1),
        "CorrelatedNoise": CorrelatedNoise(seed=6, correlation=0.8),
        "PinkNoise": PinkNoise(seed=7),
        "SpatialNoise": SpatialNoise(seed=8, spatial_scale=0.5),
        "PerCharacterNoise": PerCharacterNoise(seed=9),
        "ImpulseNoise": ImpulseNoise(seed=10, rate=50.0),
        "StudentTNoise": StudentTNoise(seed=11, dof=2.0),
        "Add": Add(sine, Triangle()),
        "Multiply": Multiply(sine, LinearEnvelope(0.1, 0.5)),
        "Mix": Mix(sine, Square(), 0.25),
        "FrequencyMod": FrequencyMod(Sine(frequency=4.0), Sine(frequency=0.5), depth=0.1),
        "VcaCentered": VcaCentered(SeededRandom(seed=12), Sine(frequency=1.0, amplitude=0.5, offset=0.5)),
        "Scale": Scale(sine, 3.0),
        "Invert": Invert(sine),
        "Abs": Abs(sine),
        "Clamp": Clamp(Sine(amplitude=2.0), -0.5, 0.5),
        "Clipper": Clipper(Sine(amplitude=1.5), 0.6, -0.8, "soft"),
        "Remap": Remap(sine, -0.5, 0.5, 0.0, 10.0),
        "Quantize": Quantize(sine, 4),
        "Loop": Loop(Ramp(0.0, 1.0, 2.0), 0.75),
    }


@pytest.fixture
def catalogue():
    """Name -> signal for every signal type"""
    return build_catalogue()


@pytest.fixture
def rng():
    """Fixed-seed Rng"""
    return Rng(12345)


@pytest.fixture
def kitt_path() -> Path:
    """Path to the kitt.json fixture"""
    return FIXTURES_DIR / "kitt.json"
