"""Trial results and result sinks.

Hierarchy::

    Trial (one per scenario)
      → scenario: Scenario
      → statistics: SampleStatistics (the accepted samples)
      → reason: TerminationReason
      → summary: DescriptiveStats (computed on demand)

A trial is created empty when its scenario starts measuring, grows one
sample per successful repetition, and is frozen when the scenario
terminates.  The scheduler then hands it to a :class:`ResultSink`
exactly once.

Files produced by :class:`JsonlResultSink`::

    trials.jsonl: one Trial per line, in delivery order
"""

from __future__ import annotations

import enum
import json
import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Any, Protocol

from jauge.bench.scenario import Scenario
from jauge.stats.sample import DescriptiveStats, SampleStatistics

log = logging.getLogger("jauge")


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


class TrialState(enum.Enum):
    """Where a scenario is in its measurement lifecycle."""

    PENDING = "pending"
    MEASURING = "measuring"
    CONVERGED = "converged"
    MAX_TRIALS_REACHED = "max_trials_reached"
    TIMED_OUT = "timed_out"
    FAILED = "failed"
    SKIPPED = "skipped"
    REPORTED = "reported"

    @property
    def is_terminal(self) -> bool:
        return self not in (TrialState.PENDING, TrialState.MEASURING)


class TerminationReason(enum.Enum):
    """Why measurement of a scenario stopped."""

    CONVERGED = "converged"
    MAX_TRIALS_REACHED = "max_trials_reached"
    TIME_LIMIT_REACHED = "time_limit_reached"
    FAILED = "failed"
    SKIPPED = "skipped"

    @property
    def state(self) -> TrialState:
        """The terminal state this reason puts a trial in."""
        return {
            TerminationReason.CONVERGED: TrialState.CONVERGED,
            TerminationReason.MAX_TRIALS_REACHED: TrialState.MAX_TRIALS_REACHED,
            TerminationReason.TIME_LIMIT_REACHED: TrialState.TIMED_OUT,
            TerminationReason.FAILED: TrialState.FAILED,
            TerminationReason.SKIPPED: TrialState.SKIPPED,
        }[self]

    @property
    def measured(self) -> bool:
        """True if the trial's samples are a usable (if unconverged) result."""
        return self in (
            TerminationReason.CONVERGED,
            TerminationReason.MAX_TRIALS_REACHED,
            TerminationReason.TIME_LIMIT_REACHED,
        )


# ---------------------------------------------------------------------------
# Trial
# ---------------------------------------------------------------------------


@dataclass
class Trial:
    """The measurement outcome for one scenario."""

    scenario: Scenario
    statistics: SampleStatistics = field(default_factory=SampleStatistics)
    state: TrialState = TrialState.PENDING
    reason: TerminationReason | None = None
    detail: str = ""  # Human-readable note on the termination
    target_samples: int | None = None  # Last convergence target computed
    fit_accepted: bool | None = None  # Goodness of fit vs. a Normal prototype
    attempts: int = 0  # Repetitions requested, including failed ones
    errors: list[str] = field(default_factory=list)
    duration_s: float = 0.0

    @property
    def frozen(self) -> bool:
        return self.reason is not None

    @property
    def samples(self) -> tuple[float, ...]:
        return self.statistics.values

    @property
    def count(self) -> int:
        return self.statistics.count

    def start(self) -> None:
        """Move from PENDING to MEASURING."""
        if self.state is not TrialState.PENDING:
            raise RuntimeError(f"cannot start a trial in state {self.state.value}")
        self.state = TrialState.MEASURING

    def add_sample(self, value: float) -> None:
        """Append an accepted sample.

        Raises:
            RuntimeError: If the trial is not measuring.
        """
        if self.state is not TrialState.MEASURING:
            raise RuntimeError(f"cannot add samples to a trial in state {self.state.value}")
        self.statistics.append(value)

    def finish(self, reason: TerminationReason, detail: str = "") -> None:
        """Freeze the trial with its termination reason."""
        if self.frozen:
            raise RuntimeError(f"trial for {self.scenario.label} already finished")
        self.reason = reason
        self.detail = detail
        self.state = reason.state
        self.statistics.freeze()

    def mark_reported(self) -> None:
        if not self.frozen:
            raise RuntimeError("cannot report an unfinished trial")
        if self.state is TrialState.REPORTED:
            raise RuntimeError(f"trial for {self.scenario.label} already reported")
        self.state = TrialState.REPORTED

    def summary(self) -> DescriptiveStats:
        return self.statistics.summary()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        d: dict[str, Any] = {
            "scenario": self.scenario.to_dict(),
            "reason": self.reason.value if self.reason else None,
            "detail": self.detail,
            "samples": list(self.statistics.values),
            "target_samples": self.target_samples,
            "fit_accepted": self.fit_accepted,
            "attempts": self.attempts,
            "errors": list(self.errors),
            "duration_s": round(self.duration_s, 6),
        }
        if self.statistics.count:
            d["summary"] = self.summary().to_dict()
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Trial:
        """Deserialize a finished trial.  Statistics are recomputed."""
        trial = cls(scenario=Scenario.from_dict(data["scenario"]))
        trial.statistics.extend(data.get("samples", []))
        trial.target_samples = data.get("target_samples")
        trial.fit_accepted = data.get("fit_accepted")
        trial.attempts = data.get("attempts", 0)
        trial.errors = list(data.get("errors", []))
        trial.duration_s = data.get("duration_s", 0.0)
        if data.get("reason"):
            trial.finish(TerminationReason(data["reason"]), data.get("detail", ""))
        return trial

    def to_jsonl_line(self) -> str:
        """Serialize to a single JSONL line."""
        return json.dumps(self.to_dict(), separators=(",", ":"))


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------


class ResultSink(Protocol):
    """Consumer of finalized trials.

    ``on_trial`` is called exactly once per scenario, from a single
    thread, in scenario enumeration order.  ``close`` is called exactly
    once after the last trial, including when a run is abandoned early.
    """

    def on_trial(self, trial: Trial) -> None: ...

    def close(self) -> None: ...


class CollectingSink:
    """Keeps delivered trials in memory."""

    def __init__(self) -> None:
        self.trials: list[Trial] = []
        self.close_calls = 0

    @property
    def closed(self) -> bool:
        return self.close_calls > 0

    def on_trial(self, trial: Trial) -> None:
        if self.closed:
            raise RuntimeError("sink is closed")
        self.trials.append(trial)

    def close(self) -> None:
        self.close_calls += 1


class JsonlResultSink:
    """Appends each trial to a JSONL file as it is delivered.

    Writing incrementally preserves finished trials if a long run is
    interrupted.  Safe to call from several threads.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._lock = threading.Lock()
        self._fh: IO[str] | None = None
        self._closed = False
        self.written = 0

    def on_trial(self, trial: Trial) -> None:
        with self._lock:
            if self._closed:
                raise RuntimeError(f"sink for {self.path} is closed")
            if self._fh is None:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self._fh = open(self.path, "a", encoding="utf-8")
            self._fh.write(trial.to_jsonl_line() + "\n")
            self._fh.flush()
            self.written += 1

    def close(self) -> None:
        with self._lock:
            self._closed = True
            if self._fh is not None:
                self._fh.close()
                self._fh = None
        log.info("Wrote %d trial(s) to %s", self.written, self.path)


def load_trials(path: Path) -> list[Trial]:
    """Load trials written by :class:`JsonlResultSink`.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    trials: list[Trial] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if line:
            trials.append(Trial.from_dict(json.loads(line)))
    return trials
