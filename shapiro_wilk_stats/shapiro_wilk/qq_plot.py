"""
Normal quantile-quantile plot for the Shapiro-Wilk node.

The plot is split into two steps: ``qq_plot_data`` computes everything that
is drawn (as a plain value that can be inspected or tested), and
``render_qq_plot`` draws it with matplotlib on an explicit Axes or a fresh
``Figure``. ``show_qq_plot`` is the pyplot front end that keeps the figure
open for display.
"""

from __future__ import annotations

from dataclasses import dataclass

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from scipy.stats import norm
from statsmodels.graphics.gofplots import ProbPlot

from .validation import validate_sample


@dataclass(frozen=True)
class QQPlotData:
    """Points and reference line of a normal QQ plot."""

    theoretical_quantiles: np.ndarray
    sample_quantiles: np.ndarray
    slope: float
    intercept: float

    @property
    def n(self) -> int:
        return int(self.sample_quantiles.size)


def plotting_position_offset(n: int) -> float:
    """Offset ``a`` of the plotting positions (i - a) / (n + 1 - 2a), as used by R's ppoints."""
    return 3.0 / 8.0 if n <= 10 else 0.5


def qq_plot_data(data) -> QQPlotData:
    """
    Compute the QQ plot of ``data`` against the standard normal distribution.

    Parameters:
    -----------
    data : array-like
        Numeric sample (at least 3 finite observations), in any order.

    Returns:
    --------
    QQPlotData
        Sorted sample against normal quantiles, plus a reference line
        through the first and third quartiles.
    """
    x = validate_sample(data)
    n = x.size

    pp = ProbPlot(x, dist=norm, a=plotting_position_offset(n))
    theoretical = np.asarray(pp.theoretical_quantiles, dtype=float)
    sample = np.asarray(pp.sample_quantiles, dtype=float)

    # Line through the quartiles of the sample and of the standard normal
    y_q = np.quantile(x, [0.25, 0.75])
    x_q = norm.ppf([0.25, 0.75])
    slope = float((y_q[1] - y_q[0]) / (x_q[1] - x_q[0]))
    intercept = float(y_q[0] - slope * x_q[0])

    return QQPlotData(
        theoretical_quantiles=theoretical,
        sample_quantiles=sample,
        slope=slope,
        intercept=intercept,
    )


def render_qq_plot(plot_data: QQPlotData, ax=None, title: str = "Normal Q-Q Plot"):
    """Draw ``plot_data`` on ``ax`` (a new Figure when omitted) and return the Axes."""
    if ax is None:
        fig = Figure(figsize=(6, 6))
        ax = fig.subplots()

    ax.scatter(plot_data.theoretical_quantiles, plot_data.sample_quantiles, s=12, color="tab:blue")

    x_line = np.array([plot_data.theoretical_quantiles[0], plot_data.theoretical_quantiles[-1]])
    ax.plot(x_line, plot_data.intercept + plot_data.slope * x_line, color="tab:red", linewidth=1.5)

    ax.set_title(title)
    ax.set_xlabel("Theoretical Quantiles")
    ax.set_ylabel("Sample Quantiles")
    ax.grid(True, alpha=0.3)
    return ax


def show_qq_plot(plot_data: QQPlotData):
    """
    Draw ``plot_data`` on a new pyplot figure and return its Axes.

    The figure is registered with pyplot, so it is displayed by interactive
    backends and by ``plt.show()``; closing it is up to the caller.
    """
    _fig, ax = plt.subplots(figsize=(6, 6))
    return render_qq_plot(plot_data, ax=ax)
