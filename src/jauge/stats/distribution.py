"""Normal and Chi-Squared distribution functions.

The Chi-Squared functions are table driven: they read the critical
values in :mod:`jauge.stats.tables` and return step approximations at
the tabulated quantile levels.  That resolution is enough to decide how
many samples a benchmark needs, which is all they are used for.

References:
    DeGroot, M. H. & Schervish, M. J. (2002). "Probability and
        Statistics." 3rd ed., pp. 393-404, 776-777.
"""

from __future__ import annotations

import math

from jauge.errors import InvalidArgument
from jauge.stats.tables import CRITICAL_VALUES, QUANTILE_LEVELS

# Smallest sample size for which a sample variance is defined.
MIN_SAMPLES_FOR_VARIANCE = 2


# ---------------------------------------------------------------------------
# Normal distribution
# ---------------------------------------------------------------------------


def normal_cdf(mean: float, stddev: float, x: float) -> float:
    """Return Pr(X <= x) for X ~ Normal(mean, stddev).

    Raises:
        InvalidArgument: If *stddev* is not strictly positive.
    """
    if not stddev > 0:
        raise InvalidArgument(f"standard deviation must be positive, got {stddev}")
    z = (x - mean) / (stddev * math.sqrt(2.0))
    return 0.5 * math.erfc(-z)


# ---------------------------------------------------------------------------
# Chi-Squared distribution
# ---------------------------------------------------------------------------


def _row_for(n: int) -> tuple[float, ...]:
    """Critical values for sample size *n* (``n - 1`` degrees of freedom).

    Sizes past the end of the table use the last row; the values have
    converged by then.
    """
    index = min(n - MIN_SAMPLES_FOR_VARIANCE, len(CRITICAL_VALUES) - 1)
    return CRITICAL_VALUES[index]


def chi_squared_cdf(n: int, x: float) -> float:
    """Evaluate the Chi-Squared CDF for sample size *n*.

    Returns the largest tabulated quantile level whose critical value is
    at most ``|x|`` (0.0 if there is none).  Negative *x* mirrors the
    result to ``1 - p``, so ``cdf(n, -x) == 1 - cdf(n, x)`` for every
    ``x != 0``.  Zero (including ``-0.0``) is not negative and gives 0.0.

    Args:
        n: Sample size; the distribution has ``n - 1`` degrees of freedom.
        x: Value of the random variable.

    Raises:
        InvalidArgument: If ``n < 2``.
    """
    if n < MIN_SAMPLES_FOR_VARIANCE:
        raise InvalidArgument(f"sample size must be at least 2, got {n}")

    negative = x < 0
    magnitude = -x if negative else x

    p = 0.0
    for level, critical in zip(QUANTILE_LEVELS, _row_for(n)):
        if magnitude < critical:
            break
        p = level

    return 1.0 - p if negative else p


def chi_squared_inv(n: int, p: float) -> float:
    """Invert the Chi-Squared CDF for sample size *n*.

    Returns the critical value at the highest tabulated quantile level
    that does not exceed *p*.  This is a lower bound: no interpolation
    between levels is attempted.  Below the first level the critical
    value is 0.0.

    Raises:
        InvalidArgument: If *p* is outside [0, 1] or ``n < 2``.
    """
    if not 0.0 <= p <= 1.0:
        raise InvalidArgument(f"probability must lie in [0, 1], got {p}")
    if n < MIN_SAMPLES_FOR_VARIANCE:
        raise InvalidArgument(f"sample size must be at least 2, got {n}")

    x = 0.0
    for level, critical in zip(QUANTILE_LEVELS, _row_for(n)):
        if p < level:
            break
        x = critical
    return x


# ---------------------------------------------------------------------------
# Minimum sample count
# ---------------------------------------------------------------------------


def min_sample_count(precision: float, confidence: float) -> int:
    """Smallest sample size that pins down both mean and variance.

    Finds the smallest ``n`` such that::

        Pr(|Z| <= q * sqrt(n)) * Pr((1-q)^2 <= s^2/sigma^2 <= (1+q)^2) >= p

    where the first factor is Normal and the second follows from the
    Chi-Squared distribution of ``n * s^2 / sigma^2``.

    Args:
        precision: ``q``, the tolerated deviation in standard deviations.
        confidence: ``p``, the probability both bounds must hold with.

    Raises:
        InvalidArgument: If ``q <= 0``, ``p`` is outside (0, 1), or no
            tabulated sample size can reach ``p``.
    """
    if not 0.0 < confidence < 1.0:
        raise InvalidArgument(f"confidence must lie in (0, 1), got {confidence}")
    if not precision > 0:
        raise InvalidArgument(f"precision must be positive, got {precision}")
    if confidence > QUANTILE_LEVELS[-1]:
        # The variance factor never exceeds the top tabulated level.
        raise InvalidArgument(f"confidence {confidence} exceeds the tabulated range")

    upper = (1.0 + precision) ** 2
    lower = (1.0 - precision) ** 2
    last_row = len(CRITICAL_VALUES) + 1
    ceiling = CRITICAL_VALUES[-1][-1]

    n = MIN_SAMPLES_FOR_VARIANCE
    while True:
        bound = precision * math.sqrt(n)
        p_mean = normal_cdf(0.0, 1.0, bound) - normal_cdf(0.0, 1.0, -bound)
        p_variance = chi_squared_cdf(n, n * upper) - chi_squared_cdf(n, n * lower)
        if p_mean * p_variance >= confidence:
            return n
        # Past the table, both variance bounds saturate at the top level
        # and the variance factor stays zero from here on.
        if n >= last_row and n * lower >= ceiling:
            raise InvalidArgument(
                f"confidence {confidence} is unreachable at precision {precision}"
            )
        n += 1
