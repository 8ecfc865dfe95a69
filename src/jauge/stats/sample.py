"""Descriptive statistics over an accumulating set of measurements.

:class:`SampleStatistics` supports both incremental accumulation (the
scheduler appends one sample per repetition) and one-shot construction
from an existing sequence.  Mean and variance are kept current with
Welford's online update, so asking for them after every sample is cheap.
"""

from __future__ import annotations

import bisect
import math
import statistics
from dataclasses import dataclass
from typing import Iterable, Sequence

from jauge.errors import InsufficientData, InvalidArgument
from jauge.stats.distribution import MIN_SAMPLES_FOR_VARIANCE


@dataclass
class DescriptiveStats:
    """Summary statistics for a sample."""

    n: int
    mean: float
    median: float
    stdev: float
    min: float
    max: float
    q1: float  # 25th percentile
    q3: float  # 75th percentile
    iqr: float  # interquartile range
    cv: float  # coefficient of variation (stdev/mean)

    def to_dict(self) -> dict[str, float | int]:
        """Serialize to a dict with rounded values."""
        return {
            "n": self.n,
            "mean": round(self.mean, 9),
            "median": round(self.median, 9),
            "stdev": round(self.stdev, 9),
            "min": round(self.min, 9),
            "max": round(self.max, 9),
            "q1": round(self.q1, 9),
            "q3": round(self.q3, 9),
            "iqr": round(self.iqr, 9),
            "cv": round(self.cv, 9),
        }


class SampleStatistics:
    """Append-only sample set with running descriptive statistics.

    Usage::

        stats = SampleStatistics()
        stats.append(1.25)
        stats.append(1.31)
        stats.stddev  # defined from two samples on

        offline = SampleStatistics([1.25, 1.31, 1.28])
    """

    def __init__(self, values: Iterable[float] = ()) -> None:
        self._values: list[float] = []
        self._ordered: list[float] = []
        self._mean = 0.0
        self._m2 = 0.0  # sum of squared deviations from the running mean
        self._frozen = False
        self.extend(values)

    # -- mutation -----------------------------------------------------------

    def append(self, value: float) -> None:
        """Add one sample.

        Raises:
            InvalidArgument: If *value* is not a finite number.
            RuntimeError: If the statistics have been frozen.
        """
        if self._frozen:
            raise RuntimeError("cannot append to frozen sample statistics")
        value = float(value)
        if not math.isfinite(value):
            raise InvalidArgument(f"sample must be finite, got {value}")

        self._values.append(value)
        bisect.insort(self._ordered, value)

        n = len(self._values)
        delta = value - self._mean
        self._mean += delta / n
        self._m2 += delta * (value - self._mean)

    def extend(self, values: Iterable[float]) -> None:
        """Add samples in order."""
        for value in values:
            self.append(value)

    def freeze(self) -> None:
        """Reject any further samples."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -- derived values -----------------------------------------------------

    @property
    def count(self) -> int:
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    @property
    def values(self) -> tuple[float, ...]:
        """Samples in arrival order."""
        return tuple(self._values)

    @property
    def ordered(self) -> tuple[float, ...]:
        """Samples in ascending order."""
        return tuple(self._ordered)

    def _require(self, n: int, what: str) -> None:
        if len(self._values) < n:
            raise InsufficientData(
                f"{what} needs at least {n} sample(s), have {len(self._values)}"
            )

    @property
    def mean(self) -> float:
        self._require(1, "mean")
        return self._mean

    @property
    def variance(self) -> float:
        """Unbiased sample variance."""
        self._require(MIN_SAMPLES_FOR_VARIANCE, "variance")
        return max(self._m2, 0.0) / (len(self._values) - 1)

    @property
    def stddev(self) -> float:
        return math.sqrt(self.variance)

    @property
    def lowest(self) -> float:
        self._require(1, "lowest")
        return self._ordered[0]

    @property
    def highest(self) -> float:
        self._require(1, "highest")
        return self._ordered[-1]

    def count_between(self, x1: float, x2: float, *, include_upper: bool = True) -> int:
        """Number of samples with ``x1 <= x <= x2`` (``< x2`` if not *include_upper*)."""
        if x2 < x1:
            return 0
        left = bisect.bisect_left(self._ordered, x1)
        if include_upper:
            right = bisect.bisect_right(self._ordered, x2)
        else:
            right = bisect.bisect_left(self._ordered, x2)
        return max(right - left, 0)

    def summary(self) -> DescriptiveStats:
        """Compute descriptive statistics over the current samples.

        If n < 2, stdev and CV are 0.0; if empty, every field is NaN.
        """
        n = len(self._ordered)
        if n == 0:
            nan = float("nan")
            return DescriptiveStats(n=0, mean=nan, median=nan, stdev=nan, min=nan,
                                    max=nan, q1=nan, q3=nan, iqr=nan, cv=nan)  # fmt: skip

        mean = self._mean
        if n >= MIN_SAMPLES_FOR_VARIANCE:
            stdev = self.stddev
            cv = stdev / mean if mean != 0 else float("inf")
        else:
            stdev = 0.0
            cv = 0.0

        q1 = _percentile(self._ordered, 0.25)
        q3 = _percentile(self._ordered, 0.75)
        return DescriptiveStats(
            n=n,
            mean=mean,
            median=statistics.median(self._ordered),
            stdev=stdev,
            min=self._ordered[0],
            max=self._ordered[-1],
            q1=q1,
            q3=q3,
            iqr=q3 - q1,
            cv=cv,
        )

    def __repr__(self) -> str:
        return f"SampleStatistics(count={self.count})"


def _percentile(sorted_values: Sequence[float], p: float) -> float:
    """Compute the p-th percentile using linear interpolation.

    Assumes *sorted_values* is ascending.
    """
    n = len(sorted_values)
    if n == 0:
        return float("nan")
    if n == 1:
        return sorted_values[0]

    k = (n - 1) * p
    f = math.floor(k)
    c = math.ceil(k)
    if f == c:
        return sorted_values[int(k)]
    d = k - f
    return sorted_values[int(f)] * (1 - d) + sorted_values[int(c)] * d
