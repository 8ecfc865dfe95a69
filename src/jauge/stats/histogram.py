"""Histograms over a sample set.

The default bin count follows Scott's normal reference rule, whose bin
width minimizes the mean squared error of the density estimate for
normally distributed data, capped at the square-root rule.

References:
    Scott, D. W. (1979). "On optimal and data-based histograms."
        Biometrika 66(3): 605-610.
"""

from __future__ import annotations

import bisect
import math

from jauge.errors import InvalidArgument
from jauge.stats.distribution import MIN_SAMPLES_FOR_VARIANCE
from jauge.stats.sample import SampleStatistics


def bin_width(n: int, stddev: float) -> float:
    """MMSE-optimal bin width for *n* normal samples with spread *stddev*."""
    return 3.5 * stddev / n ** (1.0 / 3.0)


def partition(n: int, stddev: float, lowest: float, highest: float) -> int:
    """Choose a bin count for a sample set.

    Returns ``min(scotts, round(sqrt(n)))``, never less than one, where
    ``scotts = ceil((highest - lowest) / bin_width(n, stddev))``.

    Raises:
        InvalidArgument: If ``n < 2`` or ``highest < lowest``.
    """
    if n < MIN_SAMPLES_FOR_VARIANCE:
        raise InvalidArgument(f"partition needs at least 2 samples, got {n}")
    if highest < lowest:
        raise InvalidArgument(f"highest ({highest}) is below lowest ({lowest})")

    sqrt_bins = int(round(math.sqrt(n)))
    width = bin_width(n, stddev)
    if width > 0:
        scotts = int(math.ceil((highest - lowest) / width))
        bins = min(scotts, sqrt_bins)
    else:
        bins = sqrt_bins
    return max(bins, 1)


def partition_statistics(stats: SampleStatistics) -> int:
    """:func:`partition` applied to a sample snapshot."""
    if stats.count < MIN_SAMPLES_FOR_VARIANCE:
        raise InvalidArgument(f"partition needs at least 2 samples, got {stats.count}")
    return partition(stats.count, stats.stddev, stats.lowest, stats.highest)


class Histogram:
    """Read-only histogram of one :class:`SampleStatistics` snapshot.

    Bins are half-open ``[left, right)`` except the last, which also
    includes ``highest``.  The samples are copied at construction, so
    later appends to the source statistics do not affect the histogram.
    """

    def __init__(self, stats: SampleStatistics, bins: int | None = None) -> None:
        if bins is None:
            bins = partition_statistics(stats)
        if bins < 1:
            raise InvalidArgument(f"bin count must be at least 1, got {bins}")
        if stats.count < 1:
            raise InvalidArgument("cannot build a histogram of an empty sample set")

        self._samples = SampleStatistics(stats.ordered)
        self._lowest = stats.lowest
        self._highest = stats.highest
        self._width = (self._highest - self._lowest) / bins
        # Interior edges; edge i separates bin i from bin i + 1.
        self._edges = [self._lowest + i * self._width for i in range(1, bins)]
        self._centers = tuple(self._lowest + (i + 0.5) * self._width for i in range(bins))

        counts = [0] * bins
        for x in self._samples.ordered:
            counts[self._bin_index(x)] += 1
        self._counts = tuple(counts)
        total = self._samples.count
        self._densities = tuple(c / total for c in counts)

    def _bin_index(self, x: float) -> int:
        # Equivalent to floor((x - lowest) / width), clamped to the last bin.
        return min(bisect.bisect_right(self._edges, x), len(self._centers) - 1)

    @property
    def size(self) -> int:
        """Number of bins."""
        return len(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    @property
    def bin_width(self) -> float:
        return self._width

    @property
    def bin_centers(self) -> tuple[float, ...]:
        return self._centers

    def bin_center(self, i: int) -> float:
        return self._centers[i]

    def bin_range(self, i: int) -> tuple[float, float]:
        """Return the ``(left, right)`` boundaries of bin *i*."""
        if not 0 <= i < self.size:
            raise IndexError(f"bin {i} out of range for {self.size} bins")
        left = self._lowest if i == 0 else self._edges[i - 1]
        right = self._highest if i == self.size - 1 else self._edges[i]
        return left, right

    @property
    def counts(self) -> tuple[int, ...]:
        """Raw sample count per bin."""
        return self._counts

    @property
    def densities(self) -> tuple[float, ...]:
        """Per-bin fraction of all samples."""
        return self._densities

    @property
    def lowest(self) -> float:
        return self._lowest

    @property
    def highest(self) -> float:
        return self._highest

    @property
    def total(self) -> int:
        return self._samples.count

    def count(self, x1: float, x2: float, *, include_upper: bool = True) -> int:
        """Count the raw samples with ``x1 <= x <= x2``.

        Scans the underlying samples rather than the bins, so the range
        need not line up with this histogram's binning.  With
        ``include_upper=False`` the range is half-open.
        """
        return self._samples.count_between(x1, x2, include_upper=include_upper)

    def __repr__(self) -> str:
        return f"Histogram(bins={self.size}, samples={self.total}, width={self._width:.6g})"
