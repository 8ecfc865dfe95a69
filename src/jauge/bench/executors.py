"""Measurement executors.

An executor turns one scenario into one sample per call.  Two are
provided:

- :class:`CallableExecutor` imports ``module:function`` targets (or uses
  callables directly) and times them in-process.
- :class:`SubprocessExecutor` formats a command template with the
  scenario's parameters and measures the child process.

Both run the operation's hooks: BEFORE_EXPERIMENT the first time a
scenario is measured, BEFORE_REP/AFTER_REP around every repetition, and
AFTER_EXPERIMENT for every started scenario when :meth:`finish` is
called.
"""

from __future__ import annotations

import importlib
import logging
import subprocess
import threading
import time
from typing import Any, Callable

from jauge.bench.config import EnvironmentDef
from jauge.bench.scenario import (
    BenchmarkDescriptor,
    Hook,
    HookRole,
    OperationDef,
    OperationKind,
    Scenario,
)
from jauge.bench.timing import INSTRUMENTS, build_env, measure_command
from jauge.errors import InvalidArgument, MeasurementFailure

log = logging.getLogger("jauge")


def resolve_reference(ref: str) -> Callable[..., Any]:
    """Import the callable named by ``package.module:attr.path``.

    Raises:
        InvalidArgument: If the reference is malformed, cannot be
            imported, or does not name a callable.
    """
    module_name, sep, attr_path = ref.partition(":")
    if not sep or not module_name or not attr_path:
        raise InvalidArgument(f"expected 'module:function', got {ref!r}")
    try:
        obj: Any = importlib.import_module(module_name)
        for attr in attr_path.split("."):
            obj = getattr(obj, attr)
    except (ImportError, AttributeError) as exc:
        raise InvalidArgument(f"cannot resolve {ref!r}: {exc}") from exc
    if not callable(obj):
        raise InvalidArgument(f"{ref!r} is not callable")
    return obj


# ---------------------------------------------------------------------------
# Hook bookkeeping
# ---------------------------------------------------------------------------


class _HookedExecutor:
    """Shared hook dispatch; subclasses implement one timed repetition."""

    def __init__(self, descriptor: BenchmarkDescriptor) -> None:
        self.descriptor = descriptor
        self._lock = threading.Lock()
        self._started: list[Scenario] = []
        self._seen: set[Scenario] = set()

    def measure_once(self, scenario: Scenario) -> float:
        op = self.descriptor.operation(scenario.operation_id)

        with self._lock:
            first = scenario not in self._seen
        if first:
            self._run_hooks(op, HookRole.BEFORE_EXPERIMENT, scenario)
            with self._lock:
                self._seen.add(scenario)
                self._started.append(scenario)

        self._run_hooks(op, HookRole.BEFORE_REP, scenario)
        try:
            return self._repetition(op, scenario)
        finally:
            self._run_hooks(op, HookRole.AFTER_REP, scenario)

    def finish(self) -> None:
        """Run AFTER_EXPERIMENT hooks for every scenario measured so far.

        A failing hook is logged and does not stop the others.
        """
        with self._lock:
            started, self._started = self._started, []
            self._seen.clear()
        for scenario in started:
            op = self.descriptor.operation(scenario.operation_id)
            try:
                self._run_hooks(op, HookRole.AFTER_EXPERIMENT, scenario)
            except Exception as exc:  # noqa: BLE001
                log.warning("%s: after_experiment hook failed: %s", scenario.label, exc)

    def _run_hooks(self, op: OperationDef, role: HookRole, scenario: Scenario) -> None:
        for hook in op.hooks_for(role):
            log.debug("%s: running %s hook %r", scenario.label, role.value, hook)
            self._call_hook(hook, scenario)

    def _call_hook(self, hook: Hook, scenario: Scenario) -> None:
        raise NotImplementedError

    def _repetition(self, op: OperationDef, scenario: Scenario) -> float:
        raise NotImplementedError


# ---------------------------------------------------------------------------
# In-process
# ---------------------------------------------------------------------------


# Instrument id -> clock.
CLOCKS: dict[str, Callable[[], float]] = {
    "wall_time": time.perf_counter,
    "cpu_time": time.process_time,
}


class CallableExecutor(_HookedExecutor):
    """Times Python callables in the current process.

    The target is called with the scenario's parameters as keyword
    arguments.  MICRO operations are called *repetitions* times per
    sample and the mean time per call is reported.  Hooks take no
    arguments.
    """

    def __init__(self, descriptor: BenchmarkDescriptor, *, repetitions: int = 100) -> None:
        if repetitions < 1:
            raise InvalidArgument(f"repetitions must be at least 1, got {repetitions}")
        super().__init__(descriptor)
        self.repetitions = repetitions
        self._resolved: dict[str, Callable[..., Any]] = {}

    def _resolve(self, target: Any) -> Callable[..., Any]:
        if callable(target):
            return target
        if not isinstance(target, str):
            raise InvalidArgument(f"cannot call target {target!r}")
        with self._lock:
            fn = self._resolved.get(target)
        if fn is None:
            fn = resolve_reference(target)
            with self._lock:
                self._resolved[target] = fn
        return fn

    def _call_hook(self, hook: Hook, scenario: Scenario) -> None:
        self._resolve(hook)()

    def _repetition(self, op: OperationDef, scenario: Scenario) -> float:
        clock = CLOCKS.get(scenario.instrument_id)
        if clock is None:
            raise InvalidArgument(
                f"instrument {scenario.instrument_id!r} is not available in-process "
                f"(choose from {', '.join(sorted(CLOCKS))})"
            )
        fn = self._resolve(op.target)
        kwargs = scenario.parameter_dict
        loops = self.repetitions if op.kind is OperationKind.MICRO else 1

        start = clock()
        for _ in range(loops):
            fn(**kwargs)
        return (clock() - start) / loops


# ---------------------------------------------------------------------------
# Subprocess
# ---------------------------------------------------------------------------


class SubprocessExecutor(_HookedExecutor):
    """Measures a command template in a child process.

    ``{name}`` placeholders in the command are replaced with the
    scenario's parameter values; the scenario's environment adds its
    variables to the child's environment.  String hooks are run as
    shell commands under the same environment.
    """

    def __init__(
        self,
        descriptor: BenchmarkDescriptor,
        environments: dict[str, EnvironmentDef] | None = None,
        *,
        timeout: float | None = None,
        cwd: str | None = None,
    ) -> None:
        super().__init__(descriptor)
        self.environments = environments or {}
        self.timeout = timeout
        self.cwd = cwd

    def _env_for(self, scenario: Scenario) -> dict[str, str]:
        if scenario.environment_id in self.environments:
            return self.environments[scenario.environment_id].env
        if scenario.environment_id == "default":
            return {}
        raise InvalidArgument(f"unknown environment {scenario.environment_id!r}")

    def format_command(self, op: OperationDef, scenario: Scenario) -> str | list[str]:
        """Fill the operation's command template for *scenario*."""
        params = scenario.parameter_dict
        try:
            if isinstance(op.target, str):
                return op.target.format(**params)
            return [str(part).format(**params) for part in op.target]
        except KeyError as exc:
            raise InvalidArgument(
                f"command of {op.operation_id!r} uses undefined parameter {exc}"
            ) from exc

    def _call_hook(self, hook: Hook, scenario: Scenario) -> None:
        if callable(hook):
            hook()
            return
        proc = subprocess.run(
            hook,
            shell=True,
            cwd=self.cwd,
            env=build_env(self._env_for(scenario)),
            capture_output=True,
            text=True,
            timeout=self.timeout,
        )
        if proc.returncode != 0:
            raise MeasurementFailure(
                f"hook {hook!r} exited with {proc.returncode}: {proc.stderr.strip()[-200:]}"
            )

    def _repetition(self, op: OperationDef, scenario: Scenario) -> float:
        if scenario.instrument_id not in INSTRUMENTS:
            raise InvalidArgument(
                f"unknown instrument {scenario.instrument_id!r} "
                f"(choose from {', '.join(sorted(INSTRUMENTS))})"
            )
        command = self.format_command(op, scenario)
        result = measure_command(
            command,
            cwd=self.cwd,
            env=self._env_for(scenario),
            timeout=self.timeout,
            probe_rss=scenario.instrument_id == "peak_rss",
        )
        if result.timed_out:
            raise MeasurementFailure(f"command timed out after {self.timeout}s")
        if result.exit_code != 0:
            raise MeasurementFailure(
                f"command exited with {result.exit_code}: {result.stderr.strip()[-200:]}"
            )
        return result.metric(scenario.instrument_id)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


class ProfileExecutor:
    """Routes each scenario to the executor its operation names.

    Operations declared with ``callable:`` in a profile run in-process;
    those declared with ``command:`` run as subprocesses.
    """

    def __init__(
        self,
        descriptor: BenchmarkDescriptor,
        environments: dict[str, EnvironmentDef] | None = None,
        *,
        repetitions: int = 100,
        timeout: float | None = None,
    ) -> None:
        self.descriptor = descriptor
        self.executors: dict[str, _HookedExecutor] = {
            "callable": CallableExecutor(descriptor, repetitions=repetitions),
            "command": SubprocessExecutor(descriptor, environments, timeout=timeout),
        }

    def measure_once(self, scenario: Scenario) -> float:
        op = self.descriptor.operation(scenario.operation_id)
        try:
            executor = self.executors[op.executor]
        except KeyError:
            raise InvalidArgument(
                f"operation {op.operation_id!r} names unknown executor {op.executor!r}"
            ) from None
        return executor.measure_once(scenario)

    def finish(self) -> None:
        for executor in self.executors.values():
            executor.finish()
