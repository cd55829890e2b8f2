"""
Input validation for the Shapiro-Wilk computational core.

Checks run in a fixed order and the first failing one raises, so callers
always see the most basic problem with their input first.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Sequence

import numpy as np
import pandas as pd

MIN_OBSERVATIONS = 3


def _as_float(value) -> float:
    if value is None or value is pd.NA:
        return np.nan
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise TypeError("Data must be a numeric vector.")
    try:
        return float(value)
    except OverflowError:
        # integers beyond the float range
        return math.inf if value > 0 else -math.inf


def _from_elements(values) -> np.ndarray:
    return np.array([_as_float(v) for v in values], dtype=float)


def as_numeric_vector(data) -> np.ndarray:
    """
    Coerce ``data`` to a 1-D float array or raise ``TypeError``.

    Accepted inputs are sequences of real numbers (lists, tuples, ranges, ...),
    1-D numpy arrays and pandas Series holding integer or floating point
    values. Missing entries (None, NaN, pandas NA) are kept as NaN so the
    missing-value check can report them.
    """
    if isinstance(data, pd.Series):
        if data.dtype == object:
            return _from_elements(data.tolist())
        series = data
    elif isinstance(data, np.ndarray):
        if data.ndim != 1:
            raise TypeError("Data must be a numeric vector.")
        if data.dtype == object:
            return _from_elements(data.tolist())
        series = pd.Series(data)
    elif isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray)):
        return _from_elements(data)
    else:
        # DataFrames, strings, scalars, mappings, ...
        raise TypeError("Data must be a numeric vector.")

    if (
        not pd.api.types.is_numeric_dtype(series)
        or pd.api.types.is_bool_dtype(series)
        or pd.api.types.is_complex_dtype(series)
    ):
        raise TypeError("Data must be a numeric vector.")

    return series.to_numpy(dtype=float, na_value=np.nan)


def validate_sample(data) -> np.ndarray:
    """Run the sample checks (type, missing, infinite, size) and return a clean float array."""
    x = as_numeric_vector(data)

    if np.isnan(x).any():
        raise ValueError("Data contains missing values.")

    if np.isinf(x).any():
        raise ValueError("Data contains infinite values.")

    if x.size < MIN_OBSERVATIONS:
        raise ValueError(f"Data must contain at least {MIN_OBSERVATIONS} observations.")

    return x


def validate_plot_flag(plot_qq) -> None:
    """The plot flag must be a real boolean; truthy numbers or strings are rejected."""
    if not isinstance(plot_qq, (bool, np.bool_)):
        raise TypeError("plot_qq argument must be of type logical.")


def check_not_constant(x: np.ndarray) -> None:
    """Constant samples have zero variance, which leaves W as 0/0."""
    if np.all(x == x[0]):
        raise ValueError(
            f"Data contains only constant values ({x[0]:g}). "
            "The W statistic is undefined for constant data."
        )


def validate_alpha(alpha) -> float:
    alpha = float(alpha)
    if not 0.0 < alpha < 1.0:
        raise ValueError(f"Significance level must be between 0 and 1 (exclusive). Got: {alpha}")
    return alpha
