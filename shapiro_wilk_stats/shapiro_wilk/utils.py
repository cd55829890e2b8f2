"""
Utility functions and parameters for the Shapiro-Wilk node.
"""

import knime.extension as knext
import pandas as pd


def is_numeric(col: knext.Column) -> bool:
    """Helper function to filter for numeric columns."""
    return col.ktype in (knext.double(), knext.int32(), knext.int64())


def format_p_value(p):
    """
    Format p-value to avoid scientific notation (e.g., E-22) in output.

    Example:
        >>> format_p_value(0.0456)
        '0.0456'
        >>> format_p_value(1.23e-22)
        '< 0.001'
        >>> format_p_value(None)
        '?'
    """
    if p is None or pd.isna(p) or p == "?":
        return "?"
    if p < 0.001:
        return "< 0.001"
    return f"{p:.4f}"


input_column_param = knext.ColumnParameter(
    label="Data Column",
    description="Numeric column to test for normality.",
    column_filter=is_numeric,
)

alpha_param = knext.DoubleParameter(
    label="Significance Level (α)",
    description=(
        "Significance level for the reference Shapiro-Wilk p-value (default: 0.05). "
        "If the p-value is at or below this threshold, normality is rejected."
    ),
    default_value=0.05,
    min_value=0.01,
    max_value=0.999,
)

plot_qq_param = knext.BoolParameter(
    label="Show Q-Q Plot",
    description=(
        "Render a normal quantile-quantile plot of the column in the node view. "
        "Points close to the reference line indicate normally distributed data."
    ),
    default_value=True,
)
