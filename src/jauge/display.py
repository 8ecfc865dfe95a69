"""Text rendering of trials for the CLI."""

from __future__ import annotations

from typing import Callable, Sequence

from jauge.bench.results import Trial
from jauge.errors import InvalidArgument
from jauge.stats.histogram import Histogram

_REASON_LABELS: dict[str, str] = {
    "converged": "✓ converged",
    "max_trials_reached": "… max trials",
    "time_limit_reached": "⏱ timed out",
    "failed": "✗ failed",
    "skipped": "⊘ skipped",
}


def format_seconds(value: float) -> str:
    """Format a duration with a unit that keeps three significant digits."""
    magnitude = abs(value)
    if magnitude >= 1:
        return f"{value:.3g}s"
    if magnitude >= 1e-3:
        return f"{value * 1e3:.3g}ms"
    if magnitude >= 1e-6:
        return f"{value * 1e6:.3g}us"
    return f"{value * 1e9:.3g}ns"


def format_table(headers: Sequence[str], rows: Sequence[Sequence[str]], *, indent: int = 2) -> str:
    """Align *rows* under *headers*; every column after the first is right-aligned."""
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def _line(cells: Sequence[str]) -> str:
        parts = [
            cell.ljust(widths[i]) if i == 0 else cell.rjust(widths[i])
            for i, cell in enumerate(cells)
        ]
        return " " * indent + "  ".join(parts).rstrip()

    lines = [_line(headers), " " * indent + "  ".join("-" * w for w in widths)]
    lines.extend(_line(row) for row in rows)
    return "\n".join(lines)


def format_trials(trials: Sequence[Trial]) -> str:
    """One row per trial: outcome, sample count, and summary statistics.

    Values are shown as durations for time instruments and as megabytes
    for ``peak_rss``.
    """
    rows: list[list[str]] = []
    for trial in trials:
        reason = trial.reason.value if trial.reason else "pending"
        row = [trial.scenario.label, _REASON_LABELS.get(reason, reason), str(trial.count)]
        if trial.count:
            s = trial.summary()
            fmt = _formatter(trial.scenario.instrument_id)
            row += [fmt(s.mean), fmt(s.stdev), fmt(s.min), fmt(s.max)]
        else:
            row += ["-", "-", "-", "-"]
        row.append({True: "yes", False: "no", None: "-"}[trial.fit_accepted])
        rows.append(row)

    headers = ["scenario", "outcome", "n", "mean", "stdev", "min", "max", "normal"]
    return format_table(headers, rows)


def format_histogram(trial: Trial, *, width: int = 40) -> str:
    """ASCII histogram of a trial's samples, or "" if there are too few."""
    try:
        hist = Histogram(trial.statistics)
    except InvalidArgument:
        return ""

    fmt = _formatter(trial.scenario.instrument_id)
    peak = max(hist.counts) or 1
    lines = []
    for i, count in enumerate(hist.counts):
        left, right = hist.bin_range(i)
        bar = "█" * max(round(count / peak * width), 1 if count else 0)
        lines.append(f"  {fmt(left):>9} - {fmt(right):<9} {bar} {count}")
    return "\n".join(lines)


def _formatter(instrument_id: str) -> Callable[[float], str]:
    if instrument_id == "peak_rss":
        return lambda v: f"{v:.1f}MB"
    return format_seconds
