"""
Shapiro-Wilk Normality Test Node for KNIME.

This module provides a single KNIME node that computes the Shapiro-Wilk W
statistic for a numeric column, reports SciPy's reference W and p-value with
a statistical decision, and shows a normal Q-Q plot in the node view.
"""

import knime.extension as knext
import numpy as np
import pandas as pd
from matplotlib.figure import Figure

from .shapiro_wilk import qq_plot_data, render_qq_plot, run_shapiro_wilk_test
from .shapiro_wilk.utils import alpha_param, format_p_value, input_column_param, is_numeric, plot_qq_param


# UTD statistical analysis category
utd_category = knext.category(
    path="/community",
    level_id="utd_development",
    name="University of Texas at Dallas Development",
    description="Statistical analysis tools developed by the University of Texas at Dallas",
    icon="./icons/utd.png",
)


RESULT_COLUMNS = [
    ("Column Tested", knext.string()),
    ("Test", knext.string()),
    ("Sample Size (n)", knext.int32()),
    ("W Statistic", knext.double()),
    ("Reference W (SciPy)", knext.double()),
    ("P-Value", knext.double()),
    ("Statistical Decision", knext.string()),
]


@knext.node(
    name="Shapiro-Wilk Normality Test",
    node_type=knext.NodeType.MANIPULATOR,
    icon_path="./icons/curve.jpg",
    category=utd_category,
)
@knext.input_table(name="Input data", description="Table containing the numeric column to test.")
@knext.output_table(
    name="Results",
    description="One-row table with the W statistic, reference p-value and statistical decision.",
)
@knext.output_view(
    name="Q-Q Plot",
    description="Normal quantile-quantile plot of the tested column with a reference line through the quartiles.",
)
class ShapiroWilkNode:
    """Tests whether a numeric column follows a normal distribution using the Shapiro-Wilk W statistic.

    The node reports the W statistic together with SciPy's reference Shapiro-Wilk
    statistic and p-value, and renders a normal Q-Q plot for visual inspection.
    Columns with missing or infinite values, fewer than 3 rows or constant values
    are rejected.
    """

    input_column = input_column_param
    alpha = alpha_param
    plot_qq = plot_qq_param

    def _validate_input_data(self, df, col_name):
        """Check that the configured column exists and is numeric; return its values."""
        if col_name is None:
            raise ValueError("No column selected. Please configure the node and select a numeric data column.")

        if col_name not in df.columns:
            raise ValueError(f"Column '{col_name}' not found in input data.")

        data = df[col_name]
        if not pd.api.types.is_numeric_dtype(data) or pd.api.types.is_bool_dtype(data):
            raise ValueError(f"Column '{col_name}' must be numeric (int/float). Found: {data.dtype}")

        return data

    def configure(self, cfg_ctx, input_spec):
        """Configure the node's output table schema."""
        # Auto-preselect the last numeric column if nothing is selected yet
        if self.input_column is None:
            numeric_cols = [col.name for col in input_spec if is_numeric(col)]
            if numeric_cols:
                self.input_column = numeric_cols[-1]

        if self.input_column is None:
            raise knext.InvalidParametersError("No numeric column available. Please select a numeric data column.")

        results_cols = [knext.Column(ktype, name) for name, ktype in RESULT_COLUMNS]
        return knext.Schema.from_columns(results_cols)

    def execute(self, exec_ctx, input_table):
        """Execute the Shapiro-Wilk test on the selected column."""
        df = input_table.to_pandas()
        col_name = self.input_column

        data = self._validate_input_data(df, col_name)
        result = run_shapiro_wilk_test(data, alpha=self.alpha)

        for note in result["notes"]:
            knext.LOGGER.warning(f"Column '{col_name}': {note}")
        if result["notes"]:
            exec_ctx.set_warning(" ".join(result["notes"]))

        knext.LOGGER.info(
            f"Shapiro-Wilk on '{col_name}': W = {result['statistic']:.4f}, "
            f"reference W = {result['reference_statistic']:.4f}, p = {format_p_value(result['p_value'])}"
        )

        results_df = pd.DataFrame(
            [
                {
                    "Column Tested": col_name,
                    "Test": result["test"],
                    "Sample Size (n)": np.int32(result["n"]),
                    "W Statistic": result["statistic"],
                    "Reference W (SciPy)": result["reference_statistic"],
                    "P-Value": result["p_value"],
                    "Statistical Decision": result["decision"],
                }
            ]
        )

        fig = self._build_qq_figure(data, col_name)

        return knext.Table.from_pandas(results_df), knext.view_matplotlib(fig)

    def _build_qq_figure(self, data, col_name):
        fig = Figure(figsize=(6, 6))
        ax = fig.subplots()
        if self.plot_qq:
            render_qq_plot(qq_plot_data(data), ax=ax, title=f"Normal Q-Q Plot: {col_name}")
        else:
            ax.set_axis_off()
            ax.text(0.5, 0.5, "Q-Q plot disabled in the node settings.", ha="center", va="center")
        return fig
