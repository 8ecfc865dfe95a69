"""Tests for jauge.stats.distribution: Normal and Chi-Squared functions.

Chi-Squared values are checked against the tabulated critical values
directly, since the functions are step approximations over the table.
"""

from __future__ import annotations

import math
import unittest

from jauge.errors import InvalidArgument
from jauge.stats.distribution import (
    chi_squared_cdf,
    chi_squared_inv,
    min_sample_count,
    normal_cdf,
)
from jauge.stats.tables import CRITICAL_VALUES, MAX_DEGREES_OF_FREEDOM, QUANTILE_LEVELS


# ---------------------------------------------------------------------------
# Normal
# ---------------------------------------------------------------------------


class TestNormalCdf(unittest.TestCase):
    def test_median(self) -> None:
        self.assertAlmostEqual(normal_cdf(0.0, 1.0, 0.0), 0.5)
        self.assertAlmostEqual(normal_cdf(10.0, 3.0, 10.0), 0.5)

    def test_known_quantiles(self) -> None:
        self.assertAlmostEqual(normal_cdf(0.0, 1.0, 1.959964), 0.975, places=5)
        self.assertAlmostEqual(normal_cdf(0.0, 1.0, -1.0), 0.158655, places=5)
        self.assertAlmostEqual(normal_cdf(5.0, 2.0, 7.0), 0.841345, places=5)

    def test_tails(self) -> None:
        self.assertLess(normal_cdf(0.0, 1.0, -40.0), 1e-300)
        self.assertEqual(normal_cdf(0.0, 1.0, 40.0), 1.0)

    def test_nonpositive_stddev_rejected(self) -> None:
        for stddev in (0.0, -1.0):
            with self.assertRaises(InvalidArgument):
                normal_cdf(0.0, stddev, 1.0)

    def test_invalid_argument_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            normal_cdf(0.0, 0.0, 1.0)


# ---------------------------------------------------------------------------
# Chi-Squared tables
# ---------------------------------------------------------------------------


class TestTables(unittest.TestCase):
    def test_shape(self) -> None:
        self.assertEqual(len(QUANTILE_LEVELS), 19)
        self.assertEqual(MAX_DEGREES_OF_FREEDOM, 100)
        for row in CRITICAL_VALUES:
            self.assertEqual(len(row), len(QUANTILE_LEVELS))

    def test_rows_increase(self) -> None:
        for row in CRITICAL_VALUES:
            self.assertEqual(list(row), sorted(row))
            self.assertEqual(len(set(row)), len(row))

    def test_immutable(self) -> None:
        self.assertIsInstance(CRITICAL_VALUES, tuple)
        self.assertIsInstance(CRITICAL_VALUES[0], tuple)


# ---------------------------------------------------------------------------
# Chi-Squared CDF
# ---------------------------------------------------------------------------


class TestChiSquaredCdf(unittest.TestCase):
    def test_exact_critical_value(self) -> None:
        # One degree of freedom, 95th percentile.
        self.assertEqual(chi_squared_cdf(2, 3.841459), 0.95)

    def test_between_levels_rounds_down(self) -> None:
        self.assertEqual(chi_squared_cdf(2, 3.9), 0.95)
        self.assertEqual(chi_squared_cdf(3, 5.0), 0.9)

    def test_below_first_level(self) -> None:
        self.assertEqual(chi_squared_cdf(2, 0.0), 0.0)
        self.assertEqual(chi_squared_cdf(10, 0.5), 0.0)

    def test_above_last_level(self) -> None:
        self.assertEqual(chi_squared_cdf(2, 1000.0), 0.995)

    def test_negative_mirrors(self) -> None:
        self.assertAlmostEqual(chi_squared_cdf(2, -3.9), 0.05)
        self.assertEqual(chi_squared_cdf(2, -0.00001), 1.0)

    def test_symmetry(self) -> None:
        # Holds for x != 0 only; see test_zero_is_not_mirrored.
        for n in (2, 3, 10, 50, 101, 500):
            for x in (0.001, 0.5, 1.0, 3.84, 10.0, 75.0, 150.0, 1e6):
                with self.subTest(n=n, x=x):
                    self.assertAlmostEqual(chi_squared_cdf(n, -x), 1.0 - chi_squared_cdf(n, x))

    def test_zero_is_not_mirrored(self) -> None:
        for n in (2, 50, 500):
            with self.subTest(n=n):
                self.assertEqual(chi_squared_cdf(n, 0.0), 0.0)
                self.assertEqual(chi_squared_cdf(n, -0.0), 0.0)

    def test_large_n_uses_last_row(self) -> None:
        for x in (60.0, 99.4, 124.4, 140.169489, 200.0):
            with self.subTest(x=x):
                self.assertEqual(chi_squared_cdf(101, x), chi_squared_cdf(10_000, x))
        self.assertEqual(chi_squared_cdf(101, 140.169489), 0.995)

    def test_last_tabulated_row_is_distinct(self) -> None:
        # n=100 reads 99 degrees of freedom, n=101 reads 100.
        self.assertEqual(chi_squared_cdf(100, 140.169489), 0.995)
        self.assertEqual(chi_squared_cdf(101, 138.986783), 0.99)

    def test_monotonic_in_x(self) -> None:
        values = [chi_squared_cdf(20, x / 4) for x in range(0, 250)]
        self.assertEqual(values, sorted(values))

    def test_small_n_rejected(self) -> None:
        for n in (1, 0, -3):
            with self.assertRaises(InvalidArgument):
                chi_squared_cdf(n, 1.0)


# ---------------------------------------------------------------------------
# Chi-Squared inverse
# ---------------------------------------------------------------------------


class TestChiSquaredInv(unittest.TestCase):
    def test_exact_level(self) -> None:
        self.assertEqual(chi_squared_inv(2, 0.95), 3.841459)
        self.assertEqual(chi_squared_inv(3, 0.5), 1.386294)

    def test_between_levels_uses_lower(self) -> None:
        self.assertEqual(chi_squared_inv(2, 0.96), 3.841459)

    def test_bounds(self) -> None:
        self.assertEqual(chi_squared_inv(2, 1.0), 7.879439)
        self.assertEqual(chi_squared_inv(2, 0.0), 0.0)
        self.assertEqual(chi_squared_inv(2, 0.001), 0.0)

    def test_large_n_uses_last_row(self) -> None:
        self.assertEqual(chi_squared_inv(250, 0.995), 140.169489)

    def test_invalid_probability(self) -> None:
        for p in (-0.1, 1.1, float("nan")):
            with self.assertRaises(InvalidArgument):
                chi_squared_inv(5, p)

    def test_small_n_rejected(self) -> None:
        with self.assertRaises(InvalidArgument):
            chi_squared_inv(1, 0.5)

    def test_roundtrip_lands_on_tabulated_level(self) -> None:
        probabilities = [0.005, 0.03, 0.1, 0.33, 0.5, 0.77, 0.95, 0.99, 0.999, 1.0]
        for n in (2, 7, 60, 101, 300):
            for p in probabilities:
                with self.subTest(n=n, p=p):
                    q = chi_squared_cdf(n, chi_squared_inv(n, p))
                    self.assertIn(q, QUANTILE_LEVELS)
                    self.assertLessEqual(q, p)


# ---------------------------------------------------------------------------
# Minimum sample count
# ---------------------------------------------------------------------------


def _joint(q: float, n: int) -> float:
    bound = q * math.sqrt(n)
    p_mean = normal_cdf(0.0, 1.0, bound) - normal_cdf(0.0, 1.0, -bound)
    p_var = chi_squared_cdf(n, n * (1 + q) ** 2) - chi_squared_cdf(n, n * (1 - q) ** 2)
    return p_mean * p_var


class TestMinSampleCount(unittest.TestCase):
    def test_known_value(self) -> None:
        # n=4 gives 0.9545 * 0.995 < 0.95; n=5 gives 0.9747 * 0.995.
        self.assertEqual(min_sample_count(1.0, 0.95), 5)

    def test_minimal(self) -> None:
        for q, p in ((1.0, 0.95), (0.5, 0.5), (0.8, 0.9), (0.6, 0.8)):
            with self.subTest(q=q, p=p):
                n = min_sample_count(q, p)
                self.assertGreaterEqual(n, 2)
                self.assertGreaterEqual(_joint(q, n), p)
                if n > 2:
                    self.assertLess(_joint(q, n - 1), p)

    def test_lower_confidence_needs_no_more_samples(self) -> None:
        self.assertLessEqual(min_sample_count(1.0, 0.5), min_sample_count(1.0, 0.95))

    def test_invalid_precision(self) -> None:
        for q in (0.0, -0.5):
            with self.assertRaises(InvalidArgument):
                min_sample_count(q, 0.9)

    def test_invalid_confidence(self) -> None:
        for p in (0.0, 1.0, -0.2, 1.5):
            with self.assertRaises(InvalidArgument):
                min_sample_count(0.5, p)

    def test_confidence_above_table(self) -> None:
        with self.assertRaises(InvalidArgument):
            min_sample_count(0.5, 0.999)

    def test_unreachable_terminates(self) -> None:
        # The variance window is far narrower than any step of the table.
        with self.assertRaises(InvalidArgument) as ctx:
            min_sample_count(0.01, 0.95)
        self.assertIn("unreachable", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
