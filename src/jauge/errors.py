"""Exception types shared by the statistics engine and the scheduler."""

from __future__ import annotations


class JaugeError(Exception):
    """Base class for jauge errors."""


class InvalidArgument(JaugeError, ValueError):
    """A statistics function received malformed input.

    Raised synchronously (bad degrees of freedom, out-of-range
    probability, empty data) and never retried.
    """


class InsufficientData(JaugeError):
    """Too few samples for the requested quantity.

    Distinct from :class:`InvalidArgument`: the input is well formed,
    there just is not enough of it yet (e.g. variance of one sample).
    """


class MeasurementFailure(JaugeError):
    """A single measurement repetition failed.

    The scheduler retries these locally.  Running out of retries marks
    the scenario as failed; the exception itself never escapes a run.
    """
