"""Tests for periodic and aperiodic generators, keyframes and easing."""

import math

import pytest

from mixed_signals import (
    EASINGS,
    Constant,
    InvalidParameterError,
    Keyframe,
    Keyframes,
    PhaseAccumulator,
    PhaseSine,
    Pulse,
    Ramp,
    Sawtooth,
    SignalRange,
    Sine,
    Square,
    Step,
    Triangle,
    ease,
    easing_extent,
)


class TestSine:
    """Test Sine generator."""

    def test_quarter_period_peak(self) -> None:
        """Test sine of 2 Hz at t=0.125 reaches the amplitude."""
        sine = Sine(frequency=2.0, amplitude=0.5, offset=0.0, phase=0.0)
        assert sine.sample(0.125) == pytest.approx(0.5, abs=0.001)

    def test_phase_in_cycles(self) -> None:
        """Test phase is measured in cycles."""
        assert Sine(frequency=1.0, phase=0.25).sample(0.0) == pytest.approx(1.0)

    def test_offset_and_range(self) -> None:
        """Test offset shifts output and range."""
        sine = Sine(amplitude=2.0, offset=1.0)
        assert sine.output_range() == SignalRange(-1.0, 3.0)

    def test_non_finite_parameters_replaced(self) -> None:
        """Test NaN parameters fall back to defaults."""
        sine = Sine(frequency=float("nan"), amplitude=float("inf"))
        assert sine.frequency == 1.0
        assert sine.amplitude == 1.0

    def test_signal_valued_amplitude(self) -> None:
        """Test amplitude may be a Signal sampled at the same t."""
        swell = Sine(frequency=1.0, amplitude=Constant(0.25))
        assert swell.sample(0.25) == pytest.approx(0.25)
        assert swell.output_range() == SignalRange(-0.25, 0.25)


class TestOtherPeriodic:
    """Test Triangle, Square and Sawtooth."""

    def test_triangle_shape(self) -> None:
        """Test triangle corners."""
        tri = Triangle(frequency=1.0)
        assert tri.sample(0.0) == pytest.approx(1.0)
        assert tri.sample(0.25) == pytest.approx(0.0)
        assert tri.sample(0.5) == pytest.approx(-1.0)

    def test_square_duty(self) -> None:
        """Test square honours duty cycle."""
        sq = Square(frequency=1.0, duty=0.25)
        assert sq.sample(0.1) == 1.0
        assert sq.sample(0.3) == -1.0

    def test_square_duty_clamped(self) -> None:
        """Test duty is clamped to [0, 1]."""
        assert Square(duty=3.0).duty == 1.0

    def test_sawtooth_rising_and_inverted(self) -> None:
        """Test sawtooth direction."""
        assert Sawtooth(frequency=1.0).sample(0.75) == pytest.approx(0.5)
        assert Sawtooth(frequency=1.0, inverted=True).sample(0.75) == pytest.approx(-0.5)


class TestRamp:
    """Test Ramp generator."""

    def test_linear_progress(self) -> None:
        """Test ramp interpolates then holds."""
        ramp = Ramp(0.0, 1.0, 1.0)
        assert ramp.sample(0.4) == 0.4
        assert ramp.sample(2.0) == 1.0
        assert ramp.sample(-1.0) == 0.0

    def test_zero_duration_is_step(self) -> None:
        """Test duration <= 0 jumps to end at t=0."""
        ramp = Ramp(2.0, 5.0, 0.0)
        assert ramp.sample(-0.1) == 2.0
        assert ramp.sample(0.0) == 5.0

    def test_easing(self) -> None:
        """Test easing shapes progress."""
        assert Ramp(0.0, 1.0, 1.0, easing="quad_in").sample(0.5) == pytest.approx(0.25)

    def test_unknown_easing(self) -> None:
        """Test unknown easing is rejected."""
        with pytest.raises(InvalidParameterError, match="easing"):
            Ramp(0.0, 1.0, 1.0, easing="wobble")

    def test_descending_range(self) -> None:
        """Test range of a falling ramp."""
        assert Ramp(1.0, -1.0, 2.0).output_range() == SignalRange(-1.0, 1.0)

    @pytest.mark.parametrize("easing", ["back_in", "back_out", "elastic_in", "elastic_out"])
    def test_overshoot_inside_range(self, easing: str) -> None:
        """Test the declared range covers back and elastic overshoot."""
        ramp = Ramp(0.0, 10.0, 1.0, easing=easing)
        r = ramp.output_range()
        assert r.width > 10.0
        assert all(r.contains(ramp.sample(i / 500), tolerance=1e-4) for i in range(501))

    def test_extreme_span_stays_finite(self) -> None:
        """Test a span wider than the largest float interpolates without overflow."""
        ramp = Ramp(-1e308, 1e308, 1.0)
        assert ramp.sample(0.0) == -1e308
        assert ramp.sample(0.5) == 0.0
        assert ramp.sample(0.25) == pytest.approx(-5e307)
        assert ramp.sample(1.0) == 1e308


class TestStepPulseConstant:
    """Test Step, Pulse and Constant."""

    def test_step_threshold(self) -> None:
        """Test step switches at threshold."""
        step = Step(low=-1.0, high=1.0, threshold=0.5)
        assert step.sample(0.49) == -1.0
        assert step.sample(0.5) == 1.0

    def test_pulse_window(self) -> None:
        """Test pulse window gate."""
        gate = Pulse.window(0.65, 0.85)
        assert gate.sample(0.7) == 1.0
        assert gate.sample(0.5) == 0.0
        assert gate.sample(0.65) == 1.0
        assert gate.sample(0.85) == 1.0

    def test_pulse_reversed_window(self) -> None:
        """Test reversed window bounds are swapped."""
        gate = Pulse(start=0.8, end=0.2)
        assert (gate.start, gate.end) == (0.2, 0.8)

    @pytest.mark.parametrize("t", [-1e6, -1.0, 0.0, 0.5, 1e6, float("nan")])
    def test_constant_everywhere(self, t: float) -> None:
        """Test constant value at every time."""
        assert Constant(0.42).sample(t) == 0.42
        assert Constant(0.42).output_range() == SignalRange(0.42, 0.42)


class TestKeyframes:
    """Test Keyframes curve."""

    def test_interpolates_and_holds(self) -> None:
        """Test interpolation between points and held ends."""
        curve = Keyframes((Keyframe(0.0, 0.0), Keyframe(1.0, 2.0), Keyframe(2.0, 0.0)))
        assert curve.sample(-5.0) == 0.0
        assert curve.sample(0.5) == pytest.approx(1.0)
        assert curve.sample(1.5) == pytest.approx(1.0)
        assert curve.sample(10.0) == 0.0

    def test_points_sorted(self) -> None:
        """Test unsorted points are sorted by time."""
        curve = Keyframes((Keyframe(1.0, 1.0), Keyframe(0.0, 0.0)))
        assert [p.time for p in curve.points] == [0.0, 1.0]
        assert curve.sample(0.25) == pytest.approx(0.25)

    def test_tuple_points_accepted(self) -> None:
        """Test plain tuples convert to Keyframe."""
        curve = Keyframes(((0.0, 1.0), (1.0, 3.0, "quad_in")))
        assert curve.sample(0.5) == pytest.approx(1.5)

    def test_range_covers_values(self) -> None:
        """Test range spans keyframe values."""
        curve = Keyframes((Keyframe(0.0, -1.0), Keyframe(1.0, 4.0)))
        assert curve.output_range() == SignalRange(-1.0, 4.0)

    def test_range_covers_overshoot(self) -> None:
        """Test an overshooting segment widens the range past its keyframes."""
        curve = Keyframes((Keyframe(0.0, 0.0), Keyframe(1.0, 1.0, "back_out")))
        r = curve.output_range()
        assert r.max > 1.0
        assert all(r.contains(curve.sample(i / 500), tolerance=1e-4) for i in range(501))

    @pytest.mark.parametrize("t", [0.0025, 0.5, 0.9975])
    def test_extreme_values_stay_finite(self, t: float) -> None:
        """Test interpolating between opposite extreme floats."""
        curve = Keyframes(((0.0, -1e308), (1.0, 1e308)))
        value = curve.sample(t)
        assert math.isfinite(value)
        assert -1e308 <= value <= 1e308

    def test_empty_rejected(self) -> None:
        """Test empty keyframes."""
        with pytest.raises(InvalidParameterError, match="points"):
            Keyframes(())


class TestPhaseAccumulator:
    """Test PhaseAccumulator and PhaseSine."""

    @pytest.mark.parametrize(
        ("frequency", "initial", "t", "expected"),
        [
            (1.0, 0.0, 0.25, 0.25),
            (1.0, 0.0, 1.0, 0.0),
            (2.0, 0.0, 0.25, 0.5),
            (1.0, 0.25, 0.5, 0.75),
            (0.0, 0.3, 5.0, 0.3),
            (-1.0, 0.5, 0.25, 0.25),
        ],
    )
    def test_constant_frequency(
        self, frequency: float, initial: float, t: float, expected: float
    ) -> None:
        """Test constant frequencies integrate exactly."""
        phase = PhaseAccumulator(frequency=frequency, initial_phase=initial)
        assert phase.sample(t) == pytest.approx(expected, abs=1e-9)

    @pytest.mark.parametrize(("initial", "wrapped"), [(1.5, 0.5), (-0.25, 0.75), (3.0, 0.0)])
    def test_initial_phase_wrapped(self, initial: float, wrapped: float) -> None:
        """Test the initial phase is wrapped into [0, 1)."""
        assert PhaseAccumulator(initial_phase=initial).initial_phase == pytest.approx(wrapped)

    @pytest.mark.parametrize("t", [0.0, -2.0, float("nan"), float("inf")])
    def test_before_start(self, t: float) -> None:
        """Test t <= 0 and non-finite t give the initial phase."""
        assert PhaseAccumulator(frequency=3.0, initial_phase=0.4).sample(t) == 0.4

    def test_signal_frequency_matches_constant(self) -> None:
        """Test a Constant frequency signal integrates like the plain number."""
        swept = PhaseAccumulator(frequency=Constant(2.0), initial_phase=0.1)
        plain = PhaseAccumulator(frequency=2.0, initial_phase=0.1)
        for t in (0.1, 0.37, 0.8):
            assert swept.sample(t) == pytest.approx(plain.sample(t), abs=1e-9)

    def test_linear_sweep(self) -> None:
        """Test a ramped frequency integrates to the area under the ramp."""
        # f(t) = 2t over [0, 1], so phase(t) = t^2
        phase = PhaseAccumulator(frequency=Ramp(0.0, 2.0, 1.0))
        assert phase.sample(0.5) == pytest.approx(0.25, abs=1e-9)
        assert phase.sample(0.9) == pytest.approx(0.81, abs=1e-9)

    def test_continuous_across_frequency_jump(self) -> None:
        """Test phase stays continuous where the frequency steps."""
        phase = PhaseAccumulator(frequency=Step(low=1.0, high=4.0, threshold=0.5))
        before, after = phase.sample(0.499), phase.sample(0.501)
        assert abs(after - before) < 0.02

    def test_non_finite_frequency_counts_as_zero(self) -> None:
        """Test a frequency signal that overflows contributes nothing."""
        blown = Sine().map(lambda x: math.inf)
        phase = PhaseAccumulator(frequency=blown, initial_phase=0.2)
        assert phase.sample(0.5) == pytest.approx(0.2)

    def test_long_horizon_finite(self) -> None:
        """Test very late times stay in [0, 1) with a signal frequency."""
        phase = PhaseAccumulator(frequency=Sine(frequency=0.1, amplitude=2.0, offset=3.0))
        value = phase.sample(1e6)
        assert 0.0 <= value < 1.0

    def test_range(self) -> None:
        """Test the declared range is the unit interval."""
        assert PhaseAccumulator().output_range() == SignalRange(0.0, 1.0)

    def test_phase_sine(self) -> None:
        """Test PhaseSine reads the phase in cycles."""
        voice = PhaseSine(PhaseAccumulator(frequency=1.0))
        assert voice.sample(0.25) == pytest.approx(1.0)
        assert voice.sample(0.75) == pytest.approx(-1.0)
        assert voice.output_range() == SignalRange(-1.0, 1.0)

    def test_phase_sine_static_phase(self) -> None:
        """Test a plain number is a fixed phase."""
        assert PhaseSine(0.25).sample(123.0) == pytest.approx(1.0)


class TestEasing:
    """Test easing curves."""

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_endpoints(self, name: str) -> None:
        """Test every curve maps 0 to 0 and 1 to 1."""
        assert ease(name, 0.0) == pytest.approx(0.0, abs=1e-9)
        assert ease(name, 1.0) == pytest.approx(1.0, abs=1e-9)

    def test_input_clamped(self) -> None:
        """Test out-of-range and NaN inputs are clamped."""
        assert ease("quad_in", 2.0) == 1.0
        assert ease("quad_in", -1.0) == 0.0
        assert ease("quad_in", float("nan")) == 0.0

    def test_back_overshoots(self) -> None:
        """Test back_in dips below zero."""
        assert ease("back_in", 0.2) < 0.0

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_extent_bounds_curve(self, name: str) -> None:
        """Test easing_extent brackets every sampled output."""
        lo, hi = easing_extent(name)
        assert lo <= 1e-9 and hi >= 1.0 - 1e-9
        assert all(lo - 1e-5 <= ease(name, i / 997) <= hi + 1e-5 for i in range(998))

    def test_extent_overshoot(self) -> None:
        """Test back curves report their overshoot."""
        assert easing_extent("back_in")[0] == pytest.approx(-0.1, abs=0.01)
        assert easing_extent("back_out")[1] == pytest.approx(1.1, abs=0.01)
        assert easing_extent("linear") == (0.0, 1.0)

    def test_unknown_name(self) -> None:
        """Test unknown easing names."""
        with pytest.raises(InvalidParameterError, match="easing"):
            ease("nope", 0.5)

    def test_symmetry(self) -> None:
        """Test in_out curves pass through the midpoint."""
        for name in EASINGS:
            if name.endswith("in_out"):
                assert ease(name, 0.5) == pytest.approx(0.5, abs=1e-9), name
        assert not math.isnan(ease("elastic_out", 0.3))
