"""
Shapiro-Wilk normality test module.
"""

from .qq_plot import QQPlotData, qq_plot_data, render_qq_plot, show_qq_plot
from .shapiro_wilk_core import compute, run_shapiro_wilk_test, shapiro_wilk_w

__all__ = [
    "QQPlotData",
    "compute",
    "qq_plot_data",
    "render_qq_plot",
    "run_shapiro_wilk_test",
    "shapiro_wilk_w",
    "show_qq_plot",
]
