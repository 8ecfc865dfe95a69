"""Chi-Squared goodness-of-fit testing.

:func:`goodness_of_fit` compares an observed histogram against a
prototype.  The prototype's expected counts are recomputed over the
observed histogram's own bin ranges from its raw samples, so the two
histograms do not need to share a binning.
"""

from __future__ import annotations

import logging
import statistics

from jauge.errors import InsufficientData, InvalidArgument
from jauge.stats.distribution import MIN_SAMPLES_FOR_VARIANCE, chi_squared_inv
from jauge.stats.histogram import Histogram
from jauge.stats.sample import SampleStatistics

log = logging.getLogger("jauge")


def goodness_of_fit(confidence: float, prototype: Histogram, observed: Histogram) -> bool:
    """Test whether *observed* plausibly comes from *prototype*.

    Args:
        confidence: Level the test must satisfy, in (0, 1).
        prototype: Reference distribution, queried through its raw samples.
        observed: Histogram of the measured data.

    Returns:
        True if the Chi-Squared statistic is within the critical value
        for ``valid_bins - 1``; False if it is not, or if too few bins
        remain to look a critical value up.

    Raises:
        InsufficientData: If either side has no samples in range.
    """
    last = observed.size - 1
    observed_counts = list(observed.counts)
    expected_counts = []
    for i in range(observed.size):
        left, right = observed.bin_range(i)
        expected_counts.append(prototype.count(left, right, include_upper=(i == last)))

    observed_total = sum(observed_counts)
    if observed_total == 0:
        raise InsufficientData("observed histogram has no samples")
    expected_total = sum(expected_counts)
    if expected_total == 0:
        raise InsufficientData("prototype has no samples within the observed range")

    observed_density = [c / observed_total for c in observed_counts]
    expected_density = [c / expected_total for c in expected_counts]

    valid_bins = 0
    statistic = 0.0
    for o, e in zip(observed_density, expected_density):
        if e == 0:
            # An empty prototype bin would put zero in the denominator; it
            # adds nothing to the statistic and only keeps its degree of
            # freedom when the observed bin is occupied.
            if o != 0:
                valid_bins += 1
            continue
        valid_bins += 1
        statistic += (o - e) ** 2 / e

    try:
        critical = chi_squared_inv(valid_bins - 1, confidence)
    except InvalidArgument:
        log.debug("Goodness of fit: only %d valid bin(s), rejecting", valid_bins)
        return False

    log.debug(
        "Goodness of fit: statistic %.6g vs critical %.6g (%d bins, p=%.3g)",
        statistic,
        critical,
        valid_bins,
        confidence,
    )
    return statistic <= critical


def normal_prototype(mean: float, stddev: float, size: int = 1000) -> SampleStatistics:
    """Build a deterministic reference sample of Normal(mean, stddev).

    Uses the quantile midpoints ``(i + 0.5) / size`` so repeated calls
    produce identical prototypes.
    """
    if size < MIN_SAMPLES_FOR_VARIANCE:
        raise InvalidArgument(f"prototype size must be at least 2, got {size}")
    if not stddev > 0:
        raise InvalidArgument(f"standard deviation must be positive, got {stddev}")
    dist = statistics.NormalDist(mean, stddev)
    return SampleStatistics(dist.inv_cdf((i + 0.5) / size) for i in range(size))


def fits_normal(stats: SampleStatistics, confidence: float, *, prototype_size: int = 1000) -> bool:
    """Test a sample set against a Normal with its own mean and spread.

    Raises:
        InsufficientData: If there are fewer than two samples, or no spread.
    """
    if stats.count < MIN_SAMPLES_FOR_VARIANCE:
        raise InsufficientData(f"fit needs at least 2 samples, have {stats.count}")
    stddev = stats.stddev
    if stddev == 0:
        raise InsufficientData("fit needs samples with nonzero spread")
    prototype = Histogram(normal_prototype(stats.mean, stddev, prototype_size))
    return goodness_of_fit(confidence, prototype, Histogram(stats))
