"""Tests for jauge.stats.histogram: bin selection and binning."""

from __future__ import annotations

import math
import unittest

from jauge.errors import InvalidArgument
from jauge.stats.histogram import Histogram, bin_width, partition, partition_statistics
from jauge.stats.sample import SampleStatistics


def _uniform() -> SampleStatistics:
    """0, 1, ..., 100."""
    return SampleStatistics(float(i) for i in range(101))


class TestPartition(unittest.TestCase):
    def test_bin_width(self) -> None:
        self.assertAlmostEqual(bin_width(8, 2.0), 3.5)
        self.assertAlmostEqual(bin_width(1000, 10.0), 3.5)

    def test_sqrt_cap(self) -> None:
        # Scott's rule asks for 14 bins; sqrt(100) caps it at 10.
        self.assertEqual(partition(100, 10.0, 0.0, 100.0), 10)

    def test_scott_below_cap(self) -> None:
        self.assertEqual(partition(4, 100.0, 0.0, 1.0), 1)
        self.assertEqual(partition(1000, 10.0, 0.0, 34.0), 10)

    def test_zero_spread_uses_sqrt(self) -> None:
        self.assertEqual(partition(100, 0.0, 5.0, 5.0), 10)

    def test_degenerate_range(self) -> None:
        self.assertEqual(partition(4, 1.0, 3.0, 3.0), 1)

    def test_bounds(self) -> None:
        for n in (2, 3, 10, 50, 101, 1000):
            for stddev in (0.0, 0.01, 1.0, 100.0):
                for spread in (0.0, 1.0, 50.0, 1e6):
                    with self.subTest(n=n, stddev=stddev, spread=spread):
                        bins = partition(n, stddev, 0.0, spread)
                        self.assertGreaterEqual(bins, 1)
                        self.assertLessEqual(bins, max(round(math.sqrt(n)), 1))

    def test_invalid(self) -> None:
        with self.assertRaises(InvalidArgument):
            partition(1, 1.0, 0.0, 1.0)
        with self.assertRaises(InvalidArgument):
            partition(10, 1.0, 2.0, 1.0)
        with self.assertRaises(InvalidArgument):
            partition_statistics(SampleStatistics([1.0]))


class TestHistogram(unittest.TestCase):
    def test_uniform_ten_bins(self) -> None:
        hist = Histogram(_uniform(), bins=10)
        self.assertEqual(hist.size, 10)
        self.assertEqual(len(hist), 10)
        self.assertAlmostEqual(hist.bin_width, 10.0)
        self.assertEqual(sum(hist.counts), 101)
        self.assertEqual(hist.total, 101)
        self.assertEqual(hist.counts, (10,) * 9 + (11,))
        for center in hist.bin_centers:
            self.assertGreater(center, 0.0)
            self.assertLess(center, 100.0)
        self.assertEqual(hist.bin_center(0), 5.0)

    def test_densities(self) -> None:
        hist = Histogram(_uniform(), bins=10)
        self.assertAlmostEqual(sum(hist.densities), 1.0)
        self.assertAlmostEqual(hist.densities[0], 10 / 101)

    def test_bin_ranges(self) -> None:
        hist = Histogram(_uniform(), bins=10)
        self.assertEqual(hist.bin_range(0), (0.0, 10.0))
        self.assertEqual(hist.bin_range(9), (90.0, 100.0))
        with self.assertRaises(IndexError):
            hist.bin_range(10)
        with self.assertRaises(IndexError):
            hist.bin_range(-1)

    def test_recount_matches_counts(self) -> None:
        values = [0.1 * i**1.5 for i in range(200)]
        for bins in (1, 3, 7, 13):
            hist = Histogram(SampleStatistics(values), bins=bins)
            last = hist.size - 1
            for i in range(hist.size):
                left, right = hist.bin_range(i)
                with self.subTest(bins=bins, i=i):
                    self.assertEqual(
                        hist.count(left, right, include_upper=(i == last)), hist.counts[i]
                    )

    def test_highest_in_last_bin(self) -> None:
        hist = Histogram(SampleStatistics([0.0, 1.0, 2.0, 3.0]), bins=3)
        self.assertEqual(hist.counts[-1], 1 + 1)

    def test_count_scans_raw_samples(self) -> None:
        hist = Histogram(_uniform(), bins=2)
        self.assertEqual(hist.count(0.0, 4.5), 5)
        self.assertEqual(hist.count(10.0, 20.0), 11)
        self.assertEqual(hist.count(10.0, 20.0, include_upper=False), 10)

    def test_default_bins(self) -> None:
        stats = _uniform()
        self.assertEqual(Histogram(stats).size, partition_statistics(stats))

    def test_constant_samples(self) -> None:
        hist = Histogram(SampleStatistics([5.0] * 9))
        self.assertEqual(sum(hist.counts), 9)
        self.assertEqual(hist.counts[-1], 9)
        self.assertEqual(hist.bin_width, 0.0)

    def test_snapshot(self) -> None:
        stats = SampleStatistics([1.0, 2.0, 3.0, 4.0])
        hist = Histogram(stats, bins=2)
        stats.append(100.0)
        self.assertEqual(hist.total, 4)
        self.assertEqual(hist.highest, 4.0)

    def test_invalid(self) -> None:
        with self.assertRaises(InvalidArgument):
            Histogram(SampleStatistics(), bins=3)
        with self.assertRaises(InvalidArgument):
            Histogram(_uniform(), bins=0)
        with self.assertRaises(InvalidArgument):
            Histogram(SampleStatistics([1.0]))

    def test_repr(self) -> None:
        self.assertIn("bins=10", repr(Histogram(_uniform(), bins=10)))


if __name__ == "__main__":
    unittest.main()
