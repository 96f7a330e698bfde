"""
Plotting contract.

The library owns no UI. A plotter receives a signal, a time window and a
value window, samples the signal across the window and draws the result
however it likes. PlotWindow and the two helpers below are the shared
vocabulary; TextPlotter is a minimal character-grid plotter used by the CLI.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import numpy as np

from ..core.context import DEFAULT_CONTEXT, SignalContext
from ..core.errors import InvalidParameterError
from ..core.signal import Signal

PLOT_MARK = "*"
EMPTY_CELL = " "


@dataclass(frozen=True, slots=True)
class PlotWindow:
    """
    Time window [t_start, t_end] and value window [v_min, v_max].

    Both windows are sorted on construction.

    Raises:
        InvalidParameterError: If any bound is not finite
    """

    t_start: float
    t_end: float
    v_min: float
    v_max: float

    def __post_init__(self) -> None:
        for name in ("t_start", "t_end", "v_min", "v_max"):
            if not math.isfinite(getattr(self, name)):
                raise InvalidParameterError(name, "must be finite")
        if self.t_start > self.t_end:
            t_start, t_end = self.t_end, self.t_start
            object.__setattr__(self, "t_start", float(t_start))
            object.__setattr__(self, "t_end", float(t_end))
        if self.v_min > self.v_max:
            v_min, v_max = self.v_max, self.v_min
            object.__setattr__(self, "v_min", float(v_min))
            object.__setattr__(self, "v_max", float(v_max))

    @property
    def duration(self) -> float:
        return self.t_end - self.t_start

    @classmethod
    def for_signal(cls, signal: Signal, t_start: float, t_end: float) -> PlotWindow:
        """Window whose value bounds come from the signal's declared range."""
        declared = signal.output_range()
        v_min, v_max = declared.min, declared.max
        if v_max - v_min <= 0.0:
            v_min, v_max = v_min - 0.5, v_max + 0.5
        return cls(t_start, t_end, v_min, v_max)


def sample_columns(
    signal: Signal,
    window: PlotWindow,
    columns: int,
    ctx: SignalContext | None = None,
) -> np.ndarray:
    """
    Sample one value per column, evenly spaced across the time window.

    The first column samples t_start and the last samples t_end.
    """
    columns = max(0, int(columns))
    ctx = DEFAULT_CONTEXT if ctx is None else ctx
    times = np.linspace(window.t_start, window.t_end, columns)
    return np.array([signal.sample_with_context(float(t), ctx) for t in times], dtype=np.float64)


def rasterize(values: np.ndarray | list[float], window: PlotWindow, rows: int) -> list[str]:
    """
    Draw column values into a grid of text rows, top row first.

    Values outside [v_min, v_max] are pinned to the nearest edge row.
    A collapsed value window draws every value on the middle row.
    """
    rows = max(1, int(rows))
    grid = [[EMPTY_CELL] * len(values) for _ in range(rows)]
    span = window.v_max - window.v_min
    for column, value in enumerate(values):
        if not math.isfinite(value):
            continue
        if span <= 0.0:
            row = rows // 2
        else:
            position = (window.v_max - float(value)) / span
            row = min(rows - 1, max(0, round(position * (rows - 1))))
        grid[row][column] = PLOT_MARK
    return ["".join(line) for line in grid]


@runtime_checkable
class SignalPlotter(Protocol):
    """
    Protocol for anything that draws a signal over a window.

    Example:
        >>> class MyPlotter:
        ...     def plot(self, signal: Signal, window: PlotWindow) -> str:
        ...         return "..."
        >>> isinstance(MyPlotter(), SignalPlotter)
        True
    """

    def plot(self, signal: Signal, window: PlotWindow) -> str:
        """Render the signal over the window."""
        ...


class TextPlotter:
    """Character-grid plotter: one column per sample, one mark per column."""

    def __init__(self, width: int = 72, height: int = 12):
        self.width = max(2, int(width))
        self.height = max(2, int(height))

    def plot(self, signal: Signal, window: PlotWindow) -> str:
        values = sample_columns(signal, window, self.width)
        return "\n".join(rasterize(values, window, self.height))
