"""
Unit tests for the confusion chart orchestrator.

Tests cover eager validation, drawing order, matplotlib rendering and the
keyword-per-option plot function.
"""

import contextlib
import io
import unittest
import warnings
import numpy as np
import pandas as pd
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend for testing
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from confmat.errors import InvalidBandWidth, InvalidColor, InvalidLabels, InvalidMatrix, InvalidMode
from confmat.options import ColorScheme, HighlightMode
from confmat.plotting import ConfusionChart, plot_confusion_matrix
from confmat.plotting.backend import draw_on_axes
from confmat.plotting.colors import ColorSpec
from confmat.plotting.primitives import Drawing, FillRect, Segment, Text
from confmat.plotting.style import RenderStyle

TABLE_3 = [[10, 2, 1], [2, 15, 3], [4, 0, 18]]


class TestConfusionChartValidation(unittest.TestCase):
    """Test that bad input is rejected before drawing."""

    def test_options_resolved(self):
        chart = ConfusionChart(
            TABLE_3,
            color_spec=ColorSpec(scheme="rgb_scaled"),
            style=RenderStyle(highlighting="both", band_half_width=1),
        )

        self.assertIs(chart.color_spec.scheme, ColorScheme.RGB_SCALED)
        self.assertIs(chart.style.highlighting, HighlightMode.BOTH)
        self.assertEqual(chart.matrix.labels, ("class_1", "class_2", "class_3"))

    def test_band_width_equal_to_dimension(self):
        with self.assertRaises(InvalidBandWidth):
            ConfusionChart(TABLE_3, style=RenderStyle(band_half_width=3))

    def test_non_square_matrix(self):
        with self.assertRaises(InvalidMatrix):
            ConfusionChart([[1, 2, 3], [4, 5, 6]])

    def test_bad_labels(self):
        with self.assertRaises(InvalidLabels):
            ConfusionChart(TABLE_3, labels=["a", "b"])

    def test_bad_colour(self):
        with self.assertRaises(InvalidColor):
            ConfusionChart(TABLE_3, color_spec=ColorSpec.rgb((0, 0, 2)))

    def test_bad_mode(self):
        with self.assertRaises(InvalidMode):
            ConfusionChart(TABLE_3, style=RenderStyle(highlighting="glow"))

    def test_grey_colour_highlighting_warns(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            ConfusionChart(TABLE_3, style=RenderStyle(highlighting="color"))

        self.assertTrue(any(issubclass(w.category, UserWarning) for w in caught))

    def test_dataframe_labels(self):
        df = pd.DataFrame(TABLE_3, index=["lo", "mid", "hi"], columns=["lo", "mid", "hi"])
        chart = ConfusionChart(df)

        self.assertEqual(chart.matrix.labels, ("lo", "mid", "hi"))
        texts = [t.text for t in chart.draw().texts]
        self.assertIn("mid", texts)


class TestConfusionChartDrawing(unittest.TestCase):
    """Test drawing composition and order."""

    def test_order_cells_frame_labels(self):
        drawing = ConfusionChart(TABLE_3).draw()
        kinds = [type(p) for p in drawing]

        self.assertEqual(len(drawing), 18 + 12 + 8)
        last_rect = max(i for i, k in enumerate(kinds) if k is FillRect)
        first_segment = kinds.index(Segment)
        last_segment = max(i for i, k in enumerate(kinds) if k is Segment)
        self.assertLess(last_rect, first_segment)
        self.assertTrue(all(k is Text for k in kinds[last_segment + 1:]))

    def test_no_highlighting(self):
        drawing = ConfusionChart(TABLE_3, style=RenderStyle(highlighting="none")).draw()

        self.assertEqual(len(drawing.segments), 0)

    def test_frame_uses_colour_spec(self):
        chart = ConfusionChart(
            TABLE_3,
            color_spec=ColorSpec.rgb(frame=(0.5, 0.5, 0.5)),
            style=RenderStyle(frame_width=3.0, band_half_width=1),
        )
        segments = chart.draw().segments

        self.assertEqual(len(segments), 4 + 4)
        self.assertTrue(all(s.color == (0.5, 0.5, 0.5) for s in segments))
        self.assertTrue(all(s.width == 3.0 for s in segments))

    def test_accuracy_uses_highlighted_band(self):
        chart = ConfusionChart(TABLE_3, style=RenderStyle(band_half_width=1))
        result = chart.accuracy()

        self.assertAlmostEqual(result.accuracy, 50 / 55)
        self.assertAlmostEqual(result.expected_accuracy, 7 / 9)

    def test_draw_is_repeatable(self):
        chart = ConfusionChart(TABLE_3)

        self.assertEqual(chart.draw().primitives, chart.draw().primitives)

    def test_verbose_output(self):
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            ConfusionChart(TABLE_3, verbose=True).draw()

        self.assertIn("[INFO]", buffer.getvalue())


class TestRendering(unittest.TestCase):
    """Test painting onto matplotlib axes."""

    def tearDown(self):
        plt.close('all')

    def test_render_new_figure(self):
        fig = ConfusionChart(TABLE_3).render()
        ax = fig.axes[0]

        self.assertIsInstance(fig, Figure)
        self.assertEqual(len(ax.patches), 9)
        self.assertEqual(len(ax.lines), 12)
        self.assertEqual(len(ax.texts), 9 + 8)
        self.assertEqual(ax.get_xlim(), (0.0, 3.0))
        self.assertEqual(ax.get_ylim(), (0.0, 3.0))

    def test_render_on_existing_axes(self):
        fig, ax = plt.subplots()
        returned = ConfusionChart(TABLE_3, style=RenderStyle(highlighting="none")).render(ax)

        self.assertIs(returned, fig)
        self.assertEqual(len(ax.lines), 0)
        self.assertEqual(len(ax.patches), 9)

    def test_margins_leave_room_for_labels(self):
        fig = ConfusionChart(TABLE_3).render(figsize=(6, 6))
        ax = fig.axes[0]
        bounds = ax.get_position()

        self.assertGreater(bounds.x0, 0.1)
        self.assertLess(bounds.y1, 0.9)

    def test_draw_on_axes_font_scale(self):
        fig, ax = plt.subplots()
        drawing = Drawing([Text(0.5, 0.5, "x", scale=1.5)])
        draw_on_axes(drawing, ax, fontsize=10)

        self.assertAlmostEqual(ax.texts[0].get_fontsize(), 15.0)

    def test_rect_colours_reach_patches(self):
        fig, ax = plt.subplots()
        drawing = Drawing([FillRect(0, 0, 1, 1, (1.0, 0.0, 0.0, 0.5))])
        draw_on_axes(drawing, ax)

        np.testing.assert_allclose(ax.patches[0].get_facecolor(), (1.0, 0.0, 0.0, 0.5))

    def test_unknown_primitive(self):
        fig, ax = plt.subplots()
        with self.assertRaises(TypeError):
            draw_on_axes(Drawing(["not a primitive"]), ax)


class TestPlotConfusionMatrix(unittest.TestCase):
    """Test the keyword-per-option entry point."""

    def tearDown(self):
        plt.close('all')

    def test_full_options(self):
        fig = plot_confusion_matrix(
            TABLE_3,
            color="rgb_scaled",
            rgb_code=(1, 0.5, 0),
            horizontal_label="Predicted Class",
            vertical_label="Actual Class",
            class_labels=["a", "b", "c"],
            main_diagonal_highlighting="both",
            rgb_code_highlighting=(0.5, 0.5, 0.5),
            n_of_parallel_diagonals_to_highlight=1,
            percentage_display=True,
            percentage_round_digits=2,
        )
        texts = [t.get_text() for t in fig.axes[0].texts]

        self.assertIn("Predicted Class", texts)
        self.assertIn("Actual Class", texts)
        self.assertIn("18.18 %", texts)
        self.assertEqual(len(fig.axes[0].lines), 8)

    def test_invalid_colour_scheme(self):
        with self.assertRaises(InvalidMode):
            plot_confusion_matrix(TABLE_3, color="rainbow")

    def test_invalid_half_width(self):
        with self.assertRaises(InvalidBandWidth):
            plot_confusion_matrix(TABLE_3, n_of_parallel_diagonals_to_highlight=-1)

    def test_nothing_drawn_on_invalid_input(self):
        fig, ax = plt.subplots()
        with self.assertRaises(InvalidBandWidth):
            plot_confusion_matrix(TABLE_3, n_of_parallel_diagonals_to_highlight=5, ax=ax)

        self.assertEqual(len(ax.patches), 0)
        self.assertEqual(len(ax.texts), 0)


if __name__ == '__main__':
    unittest.main()
