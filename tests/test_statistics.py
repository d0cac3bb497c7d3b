"""
Unit tests for the statistics module.

Tests cover the band mask, banded accuracy, its expectation under random
classification, the accuracy profile and the binomial chance test.
"""

import unittest
import numpy as np
import pandas as pd
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from confmat.errors import InvalidBandWidth, InvalidMatrix
from confmat.matrix import ConfusionMatrix
from confmat.statistics import (
    BandedAccuracy,
    accuracy_profile,
    band_mask,
    compare_with_chance,
    compute_banded_accuracy,
    expected_banded_accuracy,
)

TABLE_3 = [[10, 2, 1], [2, 15, 3], [4, 0, 18]]


class TestBandMask(unittest.TestCase):
    """Test the |i - j| <= k membership mask."""

    def test_main_diagonal(self):
        np.testing.assert_array_equal(band_mask(4, 0), np.eye(4, dtype=bool))

    def test_tridiagonal(self):
        mask = band_mask(4, 1)
        expected = np.array(
            [
                [1, 1, 0, 0],
                [1, 1, 1, 0],
                [0, 1, 1, 1],
                [0, 0, 1, 1],
            ],
            dtype=bool,
        )
        np.testing.assert_array_equal(mask, expected)

    def test_full_band(self):
        self.assertTrue(band_mask(5, 4).all())


class TestExpectedAccuracy(unittest.TestCase):
    """Test the closed-form accuracy under random classification."""

    def test_main_diagonal_is_one_over_n(self):
        for n in range(1, 8):
            self.assertAlmostEqual(expected_banded_accuracy(n, 0), 1.0 / n)

    def test_full_band_is_one(self):
        for n in range(1, 8):
            self.assertAlmostEqual(expected_banded_accuracy(n, n - 1), 1.0)

    def test_five_classes_half_width_one(self):
        self.assertAlmostEqual(expected_banded_accuracy(5, 1), 0.52)

    def test_matches_band_cell_share(self):
        """Uniform row/column draws land in the band with its cell share."""
        for n in range(1, 7):
            for k in range(n):
                share = band_mask(n, k).sum() / n**2
                self.assertAlmostEqual(expected_banded_accuracy(n, k), share)

    def test_non_decreasing_in_k(self):
        for n in range(1, 9):
            values = [expected_banded_accuracy(n, k) for k in range(n)]
            self.assertTrue(np.all(np.diff(values) >= 0))

    def test_invalid_half_width(self):
        with self.assertRaises(InvalidBandWidth):
            expected_banded_accuracy(3, 3)
        with self.assertRaises(InvalidBandWidth):
            expected_banded_accuracy(3, -1)


class TestComputeBandedAccuracy(unittest.TestCase):
    """Test banded accuracy on concrete and random matrices."""

    def test_three_class_main_diagonal(self):
        result = compute_banded_accuracy(TABLE_3, 0)

        self.assertIsInstance(result, BandedAccuracy)
        self.assertAlmostEqual(result.accuracy, 43 / 55)
        self.assertAlmostEqual(result.expected_accuracy, 1 - (2 * 3) / 9)
        self.assertEqual(result.n_in_band, 43)
        self.assertEqual(result.total, 55)
        self.assertEqual(result.n_classes, 3)

    def test_three_class_half_width_one(self):
        result = compute_banded_accuracy(TABLE_3, 1)

        self.assertAlmostEqual(result.accuracy, 50 / 55)
        self.assertAlmostEqual(result.expected_accuracy, 7 / 9)

    def test_default_half_width_is_zero(self):
        self.assertEqual(compute_banded_accuracy(TABLE_3).band_half_width, 0)

    def test_main_diagonal_equals_trace_accuracy(self):
        rng = np.random.default_rng(0)
        for n in range(1, 7):
            table = rng.integers(0, 20, size=(n, n)) + 1
            result = compute_banded_accuracy(table, 0)
            self.assertAlmostEqual(result.accuracy, np.trace(table) / table.sum())

    def test_full_band_is_one(self):
        rng = np.random.default_rng(1)
        for n in range(1, 7):
            table = rng.integers(0, 20, size=(n, n)) + 1
            result = compute_banded_accuracy(table, n - 1)
            self.assertAlmostEqual(result.accuracy, 1.0)
            self.assertAlmostEqual(result.expected_accuracy, 1.0)

    def test_accuracy_non_decreasing_in_k(self):
        table = np.array([[5, 3, 0, 1], [2, 8, 4, 0], [1, 2, 9, 3], [0, 1, 2, 7]])
        values = [compute_banded_accuracy(table, k).accuracy for k in range(4)]
        self.assertTrue(np.all(np.diff(values) >= 0))

    def test_as_dict(self):
        result = compute_banded_accuracy(TABLE_3, 0).as_dict()
        self.assertEqual(set(result), {"accuracy", "expected_accuracy"})

    def test_excess_accuracy(self):
        result = compute_banded_accuracy(TABLE_3, 0)
        self.assertAlmostEqual(result.excess_accuracy, 43 / 55 - 1 / 3)

    def test_accepts_dataframe_and_confusion_matrix(self):
        df = pd.DataFrame(TABLE_3, index=list("abc"), columns=list("abc"))
        matrix = ConfusionMatrix.from_array(TABLE_3)

        self.assertAlmostEqual(compute_banded_accuracy(df, 1).accuracy, 50 / 55)
        self.assertAlmostEqual(compute_banded_accuracy(matrix, 1).accuracy, 50 / 55)

    def test_single_class(self):
        result = compute_banded_accuracy([[7]], 0)
        self.assertAlmostEqual(result.accuracy, 1.0)
        self.assertAlmostEqual(result.expected_accuracy, 1.0)

    def test_half_width_equal_to_dimension_rejected(self):
        with self.assertRaises(InvalidBandWidth):
            compute_banded_accuracy(TABLE_3, 3)

    def test_negative_and_fractional_half_width_rejected(self):
        with self.assertRaises(InvalidBandWidth):
            compute_banded_accuracy(TABLE_3, -1)
        with self.assertRaises(InvalidBandWidth):
            compute_banded_accuracy(TABLE_3, 0.5)

    def test_integral_float_half_width_accepted(self):
        self.assertEqual(compute_banded_accuracy(TABLE_3, 1.0).band_half_width, 1)

    def test_non_square_rejected(self):
        with self.assertRaises(InvalidMatrix):
            compute_banded_accuracy([[1, 2, 3], [4, 5, 6]], 0)

    def test_non_integer_rejected(self):
        with self.assertRaises(InvalidMatrix):
            compute_banded_accuracy([[1.5, 2], [3, 4]], 0)

    def test_zero_total_rejected(self):
        with self.assertRaises(InvalidMatrix):
            compute_banded_accuracy([[0, 0], [0, 0]], 0)


class TestAccuracyProfile(unittest.TestCase):
    """Test the per-half-width accuracy table."""

    def test_columns_and_rows(self):
        profile = accuracy_profile(TABLE_3)

        self.assertEqual(
            list(profile.columns),
            ["band_half_width", "accuracy", "expected_accuracy", "excess_accuracy"],
        )
        self.assertEqual(list(profile["band_half_width"]), [0, 1, 2])

    def test_values(self):
        profile = accuracy_profile(TABLE_3)

        np.testing.assert_array_almost_equal(
            profile["accuracy"].values, [43 / 55, 50 / 55, 1.0]
        )
        np.testing.assert_array_almost_equal(
            profile["expected_accuracy"].values, [1 / 3, 7 / 9, 1.0]
        )
        np.testing.assert_array_almost_equal(
            profile["excess_accuracy"].values,
            profile["accuracy"].values - profile["expected_accuracy"].values,
        )


class TestCompareWithChance(unittest.TestCase):
    """Test the binomial test against the expected accuracy."""

    def test_good_classifier_beats_chance(self):
        result = compare_with_chance(TABLE_3, 0)

        self.assertLess(result.p_value, 1e-6)
        self.assertAlmostEqual(result.accuracy, 43 / 55)
        self.assertLess(result.ci_lower, result.accuracy)
        self.assertGreater(result.ci_upper, result.accuracy)

    def test_chance_level_classifier(self):
        # Every cell equally filled: accuracy equals the chance level
        result = compare_with_chance(np.full((4, 4), 25), 0)

        self.assertAlmostEqual(result.accuracy, 0.25)
        self.assertGreater(result.p_value, 0.4)

    def test_full_band_p_value_is_one(self):
        result = compare_with_chance(TABLE_3, 2)
        self.assertAlmostEqual(result.p_value, 1.0)

    def test_wider_interval_for_higher_level(self):
        narrow = compare_with_chance(TABLE_3, 0, ci_level=0.8)
        wide = compare_with_chance(TABLE_3, 0, ci_level=0.99)

        self.assertLess(wide.ci_lower, narrow.ci_lower)
        self.assertGreater(wide.ci_upper, narrow.ci_upper)

    def test_invalid_alternative(self):
        with self.assertRaises(ValueError):
            compare_with_chance(TABLE_3, 0, alternative="bigger")

    def test_invalid_ci_level(self):
        with self.assertRaises(ValueError):
            compare_with_chance(TABLE_3, 0, ci_level=1.5)


if __name__ == "__main__":
    unittest.main()
