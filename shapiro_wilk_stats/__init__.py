"""
UTD Statistics: Shapiro-Wilk normality test.

The computational core is importable without KNIME; the node itself is
registered through ``shapiro_wilk_stats.extension``.
"""

from .shapiro_wilk import (
    QQPlotData,
    compute,
    qq_plot_data,
    render_qq_plot,
    run_shapiro_wilk_test,
    shapiro_wilk_w,
    show_qq_plot,
)

__all__ = [
    "QQPlotData",
    "compute",
    "qq_plot_data",
    "render_qq_plot",
    "run_shapiro_wilk_test",
    "shapiro_wilk_w",
    "show_qq_plot",
]
