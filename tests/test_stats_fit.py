"""Tests for jauge.stats.fit: Chi-Squared goodness-of-fit testing."""

from __future__ import annotations

import unittest

from jauge.errors import InsufficientData, InvalidArgument
from jauge.stats.fit import fits_normal, goodness_of_fit, normal_prototype
from jauge.stats.histogram import Histogram
from jauge.stats.sample import SampleStatistics


def _hist(values: list[float], bins: int | None = None) -> Histogram:
    return Histogram(SampleStatistics(values), bins=bins)


class TestGoodnessOfFit(unittest.TestCase):
    def test_self_accepted(self) -> None:
        hist = _hist([float(i) for i in range(101)], bins=10)
        for p in (0.01, 0.05, 0.5, 0.95, 0.99):
            with self.subTest(p=p):
                self.assertTrue(goodness_of_fit(p, hist, hist))

    def test_self_accepted_default_bins(self) -> None:
        hist = _hist([(i * 37 % 101) / 7.0 for i in range(300)])
        self.assertGreaterEqual(sum(1 for c in hist.counts if c), 3)
        self.assertTrue(goodness_of_fit(0.95, hist, hist))

    def test_different_binning(self) -> None:
        values = [float(i) for i in range(101)]
        self.assertTrue(goodness_of_fit(0.95, _hist(values, bins=4), _hist(values, bins=10)))

    def test_mismatch_rejected(self) -> None:
        prototype = _hist([0.0] * 98 + [50.0, 100.0])
        observed = _hist([0.0, 50.0] + [100.0] * 98, bins=3)
        self.assertFalse(goodness_of_fit(0.95, prototype, observed))

    def test_empty_prototype_bin_counts_when_observed(self) -> None:
        # The middle bin has no prototype mass but observed samples; it
        # stays a degree of freedom, leaving three valid bins.
        prototype = _hist([0.0] * 50 + [100.0] * 50, bins=3)
        observed = _hist([0.0] * 10 + [50.0] + [100.0] * 10, bins=3)
        self.assertTrue(goodness_of_fit(0.95, prototype, observed))

    def test_bins_empty_on_both_sides_excluded(self) -> None:
        # Two valid bins remain, which is one degree of freedom short.
        hist = _hist([0.0] * 10 + [100.0] * 10, bins=3)
        self.assertEqual(hist.counts, (10, 0, 10))
        self.assertFalse(goodness_of_fit(0.95, hist, hist))

    def test_single_bin_rejected(self) -> None:
        hist = _hist([1.0, 2.0, 3.0], bins=1)
        self.assertFalse(goodness_of_fit(0.95, hist, hist))

    def test_prototype_out_of_range(self) -> None:
        prototype = _hist([500.0, 600.0])
        observed = _hist([float(i) for i in range(101)], bins=10)
        with self.assertRaises(InsufficientData):
            goodness_of_fit(0.95, prototype, observed)


class TestNormalPrototype(unittest.TestCase):
    def test_deterministic(self) -> None:
        a = normal_prototype(10.0, 2.0, 200)
        b = normal_prototype(10.0, 2.0, 200)
        self.assertEqual(a.values, b.values)
        self.assertEqual(a.count, 200)

    def test_moments(self) -> None:
        proto = normal_prototype(10.0, 2.0, 1000)
        self.assertAlmostEqual(proto.mean, 10.0, places=6)
        self.assertAlmostEqual(proto.stddev, 2.0, delta=0.05)

    def test_invalid(self) -> None:
        with self.assertRaises(InvalidArgument):
            normal_prototype(0.0, 1.0, 1)
        with self.assertRaises(InvalidArgument):
            normal_prototype(0.0, 0.0, 100)


class TestFitsNormal(unittest.TestCase):
    def test_normal_data_accepted(self) -> None:
        data = normal_prototype(50.0, 5.0, 200)
        self.assertTrue(fits_normal(data, 0.95))

    def test_too_few_samples(self) -> None:
        with self.assertRaises(InsufficientData):
            fits_normal(SampleStatistics([1.0]), 0.95)

    def test_no_spread(self) -> None:
        with self.assertRaises(InsufficientData):
            fits_normal(SampleStatistics([3.0, 3.0, 3.0]), 0.95)


if __name__ == "__main__":
    unittest.main()
