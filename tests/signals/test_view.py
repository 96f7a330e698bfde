"""Tests for the plotting contract."""

import numpy as np
import pytest

from mixed_signals import Constant, InvalidParameterError, Ramp, Sine
from mixed_signals.view import (
    PlotWindow,
    SignalPlotter,
    TextPlotter,
    rasterize,
    sample_columns,
)


class TestPlotWindow:
    """Test PlotWindow."""

    def test_sorts_bounds(self) -> None:
        """Test reversed windows are swapped."""
        window = PlotWindow(2.0, 1.0, 5.0, -5.0)
        assert (window.t_start, window.t_end) == (1.0, 2.0)
        assert (window.v_min, window.v_max) == (-5.0, 5.0)
        assert window.duration == 1.0

    @pytest.mark.parametrize("bad", [float("nan"), float("inf")])
    def test_rejects_non_finite(self, bad: float) -> None:
        """Test every bound must be finite."""
        with pytest.raises(InvalidParameterError, match="v_max"):
            PlotWindow(0.0, 1.0, 0.0, bad)

    def test_for_signal(self) -> None:
        """Test value bounds come from the declared range."""
        window = PlotWindow.for_signal(Sine(amplitude=2.0), 0.0, 1.0)
        assert (window.v_min, window.v_max) == (-2.0, 2.0)

    def test_for_constant_signal(self) -> None:
        """Test a collapsed declared range is padded."""
        window = PlotWindow.for_signal(Constant(3.0), 0.0, 1.0)
        assert (window.v_min, window.v_max) == (2.5, 3.5)


class TestSampling:
    """Test sample_columns and rasterize."""

    def test_sample_columns_endpoints(self) -> None:
        """Test first and last columns hit the window edges."""
        window = PlotWindow(0.0, 2.0, 0.0, 4.0)
        values = sample_columns(Ramp(0.0, 4.0, 2.0), window, 5)
        assert values.dtype == np.float64
        np.testing.assert_allclose(values, [0.0, 1.0, 2.0, 3.0, 4.0])

    def test_zero_columns(self) -> None:
        """Test no columns gives an empty array."""
        assert sample_columns(Sine(), PlotWindow(0.0, 1.0, -1.0, 1.0), 0).size == 0

    def test_rasterize_ramp(self) -> None:
        """Test a rising ramp draws a diagonal, top row first."""
        window = PlotWindow(0.0, 1.0, 0.0, 2.0)
        rows = rasterize([0.0, 1.0, 2.0], window, 3)
        assert rows == ["  *", " * ", "*  "]

    def test_rasterize_pins_out_of_range(self) -> None:
        """Test values outside the window land on the edge rows."""
        window = PlotWindow(0.0, 1.0, 0.0, 1.0)
        rows = rasterize([5.0, -5.0, float("nan")], window, 4)
        assert rows[0] == "*  "
        assert rows[-1] == " * "
        assert all(row[2] == " " for row in rows)

    def test_rasterize_collapsed_window(self) -> None:
        """Test a collapsed value window draws on the middle row."""
        window = PlotWindow(0.0, 1.0, 1.0, 1.0)
        rows = rasterize([1.0, 1.0], window, 5)
        assert rows[2] == "**"


class TestTextPlotter:
    """Test TextPlotter."""

    def test_is_signal_plotter(self) -> None:
        """Test TextPlotter satisfies the plotter protocol."""
        assert isinstance(TextPlotter(), SignalPlotter)

    def test_grid_shape(self) -> None:
        """Test one mark per column over width x height cells."""
        plotter = TextPlotter(width=40, height=8)
        text = plotter.plot(Sine(), PlotWindow(0.0, 1.0, -1.0, 1.0))
        rows = text.split("\n")
        assert len(rows) == 8
        assert all(len(row) == 40 for row in rows)
        assert sum(row.count("*") for row in rows) == 40

    def test_minimum_size(self) -> None:
        """Test width and height are at least 2."""
        plotter = TextPlotter(width=0, height=-3)
        assert (plotter.width, plotter.height) == (2, 2)
