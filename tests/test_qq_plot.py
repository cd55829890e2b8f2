import unittest

import numpy as np
from matplotlib.figure import Figure
from numpy.testing import assert_allclose
from scipy.stats import norm

from shapiro_wilk_stats import qq_plot_data, render_qq_plot
from shapiro_wilk_stats.shapiro_wilk.qq_plot import plotting_position_offset
from shapiro_wilk_stats.shapiro_wilk.shapiro_wilk_core import expected_order_statistics


class TestQQPlotData(unittest.TestCase):
    def test_small_sample_uses_three_eighths_offset(self):
        data = qq_plot_data([7.0, 5.0, 6.0])
        assert_allclose(data.theoretical_quantiles, expected_order_statistics(3))
        assert_allclose(data.sample_quantiles, [5.0, 6.0, 7.0])

    def test_large_sample_uses_half_offset(self):
        x = np.random.default_rng(5).normal(size=20)
        data = qq_plot_data(x)
        i = np.arange(1, 21)
        assert_allclose(data.theoretical_quantiles, norm.ppf((i - 0.5) / 20))
        assert_allclose(data.sample_quantiles, np.sort(x))
        self.assertEqual(data.n, 20)

    def test_plotting_position_offset(self):
        self.assertEqual(plotting_position_offset(10), 0.375)
        self.assertEqual(plotting_position_offset(11), 0.5)

    def test_reference_line_through_quartiles(self):
        data = qq_plot_data([1.0, 2.0, 3.0, 4.0, 5.0])
        q = norm.ppf(0.75)
        assert_allclose(data.slope, 1.0 / q)
        assert_allclose(data.intercept, 3.0)

    def test_invalid_input_rejected(self):
        with self.assertRaises(ValueError):
            qq_plot_data([1.0, np.nan, 2.0])
        with self.assertRaises(TypeError):
            qq_plot_data("abc")


class TestRenderQQPlot(unittest.TestCase):
    def test_render_on_new_figure(self):
        ax = render_qq_plot(qq_plot_data([1.0, 3.0, 2.0, 6.0, 4.0]))
        self.assertIsInstance(ax.figure, Figure)
        self.assertEqual(ax.get_title(), "Normal Q-Q Plot")
        self.assertEqual(ax.get_xlabel(), "Theoretical Quantiles")
        self.assertEqual(ax.get_ylabel(), "Sample Quantiles")
        self.assertEqual(len(ax.collections), 1)
        self.assertEqual(len(ax.lines), 1)

    def test_render_on_given_axes(self):
        fig = Figure()
        ax = fig.subplots()
        returned = render_qq_plot(qq_plot_data([1.0, 3.0, 2.0]), ax=ax, title="x")
        self.assertIs(returned, ax)
        self.assertEqual(ax.get_title(), "x")

    def test_scatter_points_match_data(self):
        data = qq_plot_data([4.0, 1.0, 3.0, 2.0])
        ax = render_qq_plot(data)
        offsets = ax.collections[0].get_offsets()
        assert_allclose(offsets[:, 0], data.theoretical_quantiles)
        assert_allclose(offsets[:, 1], data.sample_quantiles)


if __name__ == "__main__":
    unittest.main()
