"""Plotting contract for external visualisers."""

from .plot import PlotWindow, SignalPlotter, TextPlotter, rasterize, sample_columns

__all__ = [
    "PlotWindow",
    "SignalPlotter",
    "TextPlotter",
    "rasterize",
    "sample_columns",
]
