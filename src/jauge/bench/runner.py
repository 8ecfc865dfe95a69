"""Trial scheduling engine.

Orchestrates:
1. Configuration validation
2. Per-scenario measurement loops with a statistical stopping policy
3. Per-scenario and whole-run limits (repetitions and wall time)
4. Post-run goodness-of-fit validation of each trial
5. In-order delivery of finalized trials to a result sink
6. Progress reporting

Each scenario moves through::

    PENDING -> MEASURING -> CONVERGED | MAX_TRIALS_REACHED | TIMED_OUT | FAILED
    PENDING -> SKIPPED

and every trial is then marked REPORTED and handed to the sink.

With ``workers > 1`` scenarios are measured concurrently, but samples of
one scenario are always taken one after another, and the sink is only
ever called from the thread that called :meth:`TrialScheduler.run`.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import wait as wait_futures
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Protocol

from jauge.bench.config import TrialConfig, validate_config
from jauge.bench.results import ResultSink, TerminationReason, Trial
from jauge.bench.scenario import Scenario
from jauge.errors import InsufficientData, InvalidArgument, MeasurementFailure
from jauge.stats.distribution import MIN_SAMPLES_FOR_VARIANCE, min_sample_count
from jauge.stats.fit import fits_normal
from jauge.stats.sample import SampleStatistics

log = logging.getLogger("jauge")


class MeasurementExecutor(Protocol):
    """Produces one sample per call.

    Implementations raise (any exception) when a repetition fails.
    """

    def measure_once(self, scenario: Scenario) -> float: ...


# ---------------------------------------------------------------------------
# Stopping policy
# ---------------------------------------------------------------------------


def convergence_target(
    stats: SampleStatistics,
    precision: float,
    confidence: float,
) -> int | None:
    """Number of samples needed to pin down the running mean and spread.

    *precision* is a fraction of the running mean.  It is converted to
    standard-deviation units with the running estimate and capped at 1.

    Returns:
        The target count, or None if it is undefined (fewer than two
        samples, a zero mean) or unreachable from the tables.
    """
    if stats.count < MIN_SAMPLES_FOR_VARIANCE:
        return None

    stddev = stats.stddev
    if stddev == 0:
        q = 1.0
    else:
        q = min(precision * abs(stats.mean) / stddev, 1.0)
    if q <= 0:
        return None

    try:
        return min_sample_count(q, confidence)
    except InvalidArgument as exc:
        log.debug("No convergence target (q=%.4g, p=%.4g): %s", q, confidence, exc)
        return None


# ---------------------------------------------------------------------------
# Run budget
# ---------------------------------------------------------------------------


class RunBudget:
    """Repetition and wall-time budget shared by all scenarios of a run.

    ``max_trials`` counts repetitions across the run; ``time_limit`` is
    in seconds from construction.  None means unbounded.
    """

    def __init__(
        self,
        max_trials: int | None = None,
        time_limit: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._lock = threading.Lock()
        self._clock = clock
        self.max_trials = max_trials
        self.used = 0
        self.deadline = None if time_limit is None else clock() + time_limit

    def time_remaining(self) -> float | None:
        if self.deadline is None:
            return None
        return self.deadline - self._clock()

    @property
    def out_of_time(self) -> bool:
        remaining = self.time_remaining()
        return remaining is not None and remaining <= 0

    @property
    def out_of_trials(self) -> bool:
        with self._lock:
            return self.max_trials is not None and self.used >= self.max_trials

    @property
    def exhausted(self) -> bool:
        return self.out_of_time or self.out_of_trials

    def try_consume(self) -> bool:
        """Reserve one repetition.  Returns False if none are left."""
        with self._lock:
            if self.max_trials is not None and self.used >= self.max_trials:
                return False
            self.used += 1
            return True


# ---------------------------------------------------------------------------
# Progress callback
# ---------------------------------------------------------------------------


@dataclass
class TrialProgress:
    """Progress info passed to the callback."""

    phase: str  # "measure", "retry", "done"
    scenario: str
    position: int  # 1-based index in enumeration order
    scenarios_total: int
    samples: int
    attempts: int
    target: int | None = None
    value: float | None = None
    status: str = ""
    detail: str = ""


# Type alias for the progress callback.
ProgressCallback = Any  # Callable[[TrialProgress], None] | None


# ---------------------------------------------------------------------------
# TrialScheduler
# ---------------------------------------------------------------------------


class TrialScheduler:
    """Measures every scenario until it converges or hits a limit.

    Usage::

        scheduler = TrialScheduler(TrialConfig(), executor, CollectingSink())
        trials = scheduler.run(ScenarioSpace(descriptor))
    """

    def __init__(
        self,
        config: TrialConfig,
        executor: MeasurementExecutor,
        sink: ResultSink,
        *,
        progress_callback: ProgressCallback = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config
        self.executor = executor
        self.sink = sink
        self.progress: Any = progress_callback or self._default_progress
        self._clock = clock

    def run(self, scenarios: Iterable[Scenario]) -> list[Trial]:
        """Measure all scenarios and deliver their trials.

        The sink receives one ``on_trial`` per scenario in enumeration
        order and exactly one ``close``, whether or not the run completes.

        Returns:
            The trials, in enumeration order.

        Raises:
            ValueError: If the configuration is invalid.
        """
        errors = validate_config(self.config)
        fatal = [e for e in errors if e.severity == "error"]
        for w in (e for e in errors if e.severity == "warning"):
            log.warning("Config warning: %s: %s", w.field, w.message)
        if fatal:
            self.sink.close()
            messages = [f"  {e.field}: {e.message}" for e in fatal]
            raise ValueError("Invalid trial configuration:\n" + "\n".join(messages))

        todo = list(scenarios)
        budget = RunBudget(self.config.run_max_trials, self.config.run_time_limit, self._clock)
        log.info("Measuring %d scenario(s) with %d worker(s)", len(todo), self.config.workers)

        try:
            if self.config.workers > 1 and len(todo) > 1:
                trials = self._run_parallel(todo, budget)
            else:
                trials = self._run_sequential(todo, budget)
        finally:
            self.sink.close()

        counts: dict[str, int] = {}
        for trial in trials:
            key = trial.reason.value if trial.reason else "unknown"
            counts[key] = counts.get(key, 0) + 1
        log.info(
            "Run complete: %s (%d repetition(s))",
            ", ".join(f"{n} {k}" for k, n in sorted(counts.items())) or "no scenarios",
            budget.used,
        )
        return trials

    # -- execution strategies ------------------------------------------------

    def _run_sequential(self, scenarios: list[Scenario], budget: RunBudget) -> list[Trial]:
        trials: list[Trial] = []
        for position, scenario in enumerate(scenarios, 1):
            try:
                trial = self._measure(scenario, budget, position, len(scenarios))
            except Exception as exc:
                trial = self._error_trial(scenario, exc)
            self._deliver(trial)
            trials.append(trial)
        return trials

    def _run_parallel(self, scenarios: list[Scenario], budget: RunBudget) -> list[Trial]:
        """Measure on a worker pool; deliver on this thread in order."""
        trials: list[Trial] = []
        total = len(scenarios)

        with ThreadPoolExecutor(
            max_workers=self.config.workers, thread_name_prefix="jauge-worker"
        ) as pool:
            futures = [
                pool.submit(self._measure, scenario, budget, position, total)
                for position, scenario in enumerate(scenarios, 1)
            ]
            try:
                for scenario, future in zip(scenarios, futures):
                    try:
                        trial = future.result()
                    except Exception as exc:
                        trial = self._error_trial(scenario, exc)
                    self._deliver(trial)
                    trials.append(trial)
            except BaseException:
                for future in futures:
                    future.cancel()
                raise

        return trials

    def _deliver(self, trial: Trial) -> None:
        # The sink receives the trial in its final state.
        trial.mark_reported()
        self.sink.on_trial(trial)

    @staticmethod
    def _error_trial(scenario: Scenario, exc: BaseException) -> Trial:
        log.error("Worker exception for %s: %s", scenario.label, exc)
        trial = Trial(scenario=scenario)
        trial.errors.append(f"Worker exception: {exc}")
        trial.finish(TerminationReason.FAILED, f"Worker exception: {exc}")
        return trial

    # -- per-scenario loop ---------------------------------------------------

    def _measure(
        self,
        scenario: Scenario,
        budget: RunBudget,
        position: int,
        total: int,
    ) -> Trial:
        """Run the measurement loop for one scenario and return its frozen trial."""
        cfg = self.config
        trial = Trial(scenario=scenario)

        if budget.exhausted:
            trial.finish(TerminationReason.SKIPPED, "run budget exhausted before start")
            self._emit(trial, "done", position, total)
            return trial

        trial.start()
        started = self._clock()
        limit = cfg.scenario_time_limit
        deadline = None if limit is None else started + limit
        failures = 0  # consecutive

        # One thread per scenario, so a hung repetition can be abandoned.
        pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="jauge-measure")
        abandoned = False
        try:
            while not trial.frozen:
                if trial.count >= cfg.max_trials:
                    self._conclude(
                        trial,
                        TerminationReason.MAX_TRIALS_REACHED,
                        f"reached the cap of {cfg.max_trials} trial(s)",
                        started,
                    )
                    break

                remaining, detail = self._time_left(deadline, budget)
                if remaining is not None and remaining <= 0:
                    self._conclude(trial, TerminationReason.TIME_LIMIT_REACHED, detail, started)
                    break

                if not budget.try_consume():
                    self._conclude(
                        trial,
                        TerminationReason.MAX_TRIALS_REACHED,
                        "run trial budget exhausted",
                        started,
                    )
                    break

                trial.attempts += 1
                future = pool.submit(self.executor.measure_once, scenario)
                done, _ = wait_futures([future], timeout=remaining)
                if not done:
                    abandoned = True
                    future.add_done_callback(_discard_late(scenario))
                    self._conclude(
                        trial,
                        TerminationReason.TIME_LIMIT_REACHED,
                        f"repetition {trial.attempts} overran: {detail}",
                        started,
                    )
                    break

                try:
                    value = _checked_sample(future.result())
                except Exception as exc:
                    failures += 1
                    trial.errors.append(f"{type(exc).__name__}: {exc}")
                    log.warning(
                        "%s: repetition %d failed (%d/%d): %s",
                        scenario.label,
                        trial.attempts,
                        failures,
                        cfg.retry_limit,
                        exc,
                    )
                    self._emit(trial, "retry", position, total, detail=str(exc))
                    if failures >= cfg.retry_limit:
                        self._conclude(
                            trial,
                            TerminationReason.FAILED,
                            f"{failures} consecutive failed repetition(s)",
                            started,
                        )
                    continue

                remaining, detail = self._time_left(deadline, budget)
                if remaining is not None and remaining <= 0:
                    log.debug(
                        "%s: discarding sample %r taken past the deadline", scenario.label, value
                    )
                    self._conclude(trial, TerminationReason.TIME_LIMIT_REACHED, detail, started)
                    break

                failures = 0
                trial.add_sample(value)
                target = convergence_target(
                    trial.statistics, cfg.target_relative_precision, cfg.target_confidence
                )
                if target is not None:
                    trial.target_samples = target
                self._emit(trial, "measure", position, total, value=value)

                if target is not None and trial.count >= target:
                    self._conclude(
                        trial,
                        TerminationReason.CONVERGED,
                        f"converged after {trial.count} sample(s)",
                        started,
                    )
        finally:
            pool.shutdown(wait=not abandoned, cancel_futures=True)

        self._check_fit(trial)
        self._emit(trial, "done", position, total)
        return trial

    def _time_left(self, deadline: float | None, budget: RunBudget) -> tuple[float | None, str]:
        """Seconds until the nearer of the scenario and run deadlines."""
        now = self._clock()
        remaining: float | None = None
        detail = ""
        if deadline is not None:
            remaining = deadline - now
            detail = "scenario time limit reached"
        run_left = budget.time_remaining()
        if run_left is not None and (remaining is None or run_left < remaining):
            remaining = run_left
            detail = "run time budget exhausted"
        return remaining, detail

    def _conclude(
        self,
        trial: Trial,
        reason: TerminationReason,
        detail: str,
        started: float,
    ) -> None:
        trial.duration_s = max(self._clock() - started, 0.0)
        trial.finish(reason, detail)

    def _check_fit(self, trial: Trial) -> None:
        """Record whether a measured trial looks normally distributed."""
        if not self.config.check_fit or trial.reason is None or not trial.reason.measured:
            return
        try:
            trial.fit_accepted = fits_normal(
                trial.statistics,
                self.config.target_confidence,
                prototype_size=self.config.fit_prototype_size,
            )
        except (InsufficientData, InvalidArgument) as exc:
            log.debug("%s: no goodness-of-fit verdict: %s", trial.scenario.label, exc)
            trial.fit_accepted = None

    def _emit(
        self,
        trial: Trial,
        phase: str,
        position: int,
        total: int,
        *,
        value: float | None = None,
        detail: str = "",
    ) -> None:
        self.progress(
            TrialProgress(
                phase=phase,
                scenario=trial.scenario.label,
                position=position,
                scenarios_total=total,
                samples=trial.count,
                attempts=trial.attempts,
                target=trial.target_samples,
                value=value,
                status=trial.state.value,
                detail=detail or trial.detail,
            )
        )

    @staticmethod
    def _default_progress(progress: TrialProgress) -> None:
        """Default progress callback: log to stderr."""
        prefix = f"[{progress.position}/{progress.scenarios_total}] {progress.scenario}"
        target = "?" if progress.target is None else str(progress.target)

        if progress.phase == "done":
            line = f"{prefix}: {progress.status} with {progress.samples} sample(s)"
            if progress.detail:
                line += f" ({progress.detail})"
            log.info(line)
        elif progress.phase == "measure":
            log.debug(
                "%s: sample %d/%s = %.6g", prefix, progress.samples, target, progress.value
            )
        else:
            log.debug("%s: attempt %d failed: %s", prefix, progress.attempts, progress.detail)


def _checked_sample(value: Any) -> float:
    """Reject samples the statistics engine cannot accept."""
    try:
        sample = float(value)
    except (TypeError, ValueError) as exc:
        raise MeasurementFailure(f"executor returned a non-numeric sample: {value!r}") from exc
    if not math.isfinite(sample):
        raise MeasurementFailure(f"executor returned a non-finite sample: {sample}")
    return sample


def _discard_late(scenario: Scenario) -> Callable[[Future[float]], None]:
    def _callback(future: Future[float]) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            log.debug("%s: late repetition failed after timeout: %s", scenario.label, exc)
        else:
            log.debug("%s: discarding late sample %r", scenario.label, future.result())

    return _callback
