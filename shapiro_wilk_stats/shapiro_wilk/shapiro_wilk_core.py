"""
Shapiro-Wilk W statistic computational core.

This module contains the pure Python implementation of the W statistic,
separated from KNIME UI logic for better maintainability and testability.

Note on the weights: the weight vector is derived from the single (scalar)
covariance between the sorted sample and the expected normal order
statistics, broadcast to every position and normalized to unit length. Every
weight is therefore +-1/sqrt(n) and W reduces to n * mean^2 / SS. This is not
the textbook Shapiro-Wilk weight vector (which comes from the covariance
matrix of the order statistics); ``run_shapiro_wilk_test`` reports SciPy's
reference W and p-value next to it.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple

import numpy as np
from scipy.stats import norm, shapiro

from .qq_plot import QQPlotData, qq_plot_data, show_qq_plot
from .validation import check_not_constant, validate_alpha, validate_plot_flag, validate_sample


def stable_sort(x: np.ndarray) -> np.ndarray:
    """Return a sorted copy using a stable O(n log n) comparison sort."""
    return np.sort(x, kind="mergesort")


def sample_mean_std(x: np.ndarray) -> Tuple[float, float]:
    """Return sample mean and unbiased (ddof=1) sample standard deviation."""
    scale = float(np.max(np.abs(x)))
    if scale == 0.0:
        return 0.0, 0.0
    z = x / scale
    return scale * float(np.mean(z)), scale * float(np.std(z, ddof=1))


def expected_order_statistics(n: int) -> np.ndarray:
    """Approximate expected normal order statistics, Phi^-1((i - 3/8) / (n + 1/4))."""
    i = np.arange(1, n + 1, dtype=float)
    return norm.ppf((i - 0.375) / (n + 0.25))


def covariance_weights(sorted_x: np.ndarray, m: np.ndarray) -> np.ndarray:
    """
    Weight vector from the sample covariance of ``sorted_x`` with ``m``.

    The scalar covariance is broadcast to length n and scaled so that the
    squared weights sum to one.
    """
    c = np.full(sorted_x.size, np.cov(sorted_x, m, ddof=1)[0, 1])
    return c / np.sqrt(np.sum(c**2))


def _compute_w(sorted_x: np.ndarray) -> Tuple[float, np.ndarray]:
    # W is scale invariant; unit max-abs keeps c**2 and the sums of squares in range
    z = sorted_x / np.max(np.abs(sorted_x))
    m = expected_order_statistics(z.size)
    a = covariance_weights(z, m)
    w = np.sum(a * z) ** 2 / np.sum((z - np.mean(z)) ** 2)
    return float(w), a


def shapiro_wilk_w(
    data,
    plot_qq: bool = False,
    renderer: Optional[Callable[[QQPlotData], object]] = None,
) -> float:
    """
    Compute the Shapiro-Wilk W statistic of a numeric sample.

    Parameters:
    -----------
    data : array-like
        One-dimensional numeric sample with at least 3 finite, non-missing
        observations.
    plot_qq : bool
        When True, a normal QQ plot of ``data`` is passed to ``renderer``.
        Plotting never changes the returned value.
    renderer : callable, optional
        Receives the ``QQPlotData``. Defaults to ``show_qq_plot``, which
        draws on a new pyplot figure that stays open for display.

    Returns:
    --------
    float
        The W statistic.
    """
    x = validate_sample(data)
    validate_plot_flag(plot_qq)
    check_not_constant(x)

    sorted_x = stable_sort(x)
    w, _ = _compute_w(sorted_x)

    if plot_qq:
        (renderer or show_qq_plot)(qq_plot_data(x))

    return w


compute = shapiro_wilk_w


def run_shapiro_wilk_test(data, alpha: float = 0.05) -> Dict[str, object]:
    """
    Run the Shapiro-Wilk normality test and collect results in a dict.

    ``statistic`` is the W from ``shapiro_wilk_w``; ``reference_statistic``
    and ``p_value`` come from ``scipy.stats.shapiro`` and drive the decision.
    """
    alpha = validate_alpha(alpha)
    x = validate_sample(data)
    check_not_constant(x)

    sorted_x = stable_sort(x)
    n = int(sorted_x.size)
    mean, std = sample_mean_std(sorted_x)
    w, _ = _compute_w(sorted_x)

    reference = shapiro(sorted_x)
    p_value = float(reference.pvalue)
    decision = "Reject normality" if p_value <= alpha else "Do not reject normality"

    notes: List[str] = []
    if n < 8:
        notes.append("Small sample (n<8): low power / higher numerical sensitivity.")
    if n > 5000:
        notes.append("Very large sample (n>5000): reference p-value may be inaccurate.")

    return {
        "test": "Shapiro-Wilk",
        "statistic": w,
        "reference_statistic": float(reference.statistic),
        "p_value": p_value,
        "alpha": alpha,
        "decision": decision,
        "n": n,
        "mean": mean,
        "std": std,
        "notes": notes,
    }
