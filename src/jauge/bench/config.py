"""Trial configuration and benchmark profile loading.

Handles:
- The scheduler's stopping limits and statistical targets.
- Validating a configuration before a run starts.
- Loading benchmark profiles (operations, environments, instruments,
  and limits) from YAML files.
- Merging CLI options over profile values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jauge.bench.scenario import BenchmarkDescriptor, HookRole, OperationDef, OperationKind

log = logging.getLogger("jauge")


# ---------------------------------------------------------------------------
# TrialConfig
# ---------------------------------------------------------------------------


@dataclass
class TrialConfig:
    """Limits and targets for a scheduler run."""

    # Per-scenario limits
    max_trials: int = 30  # Repetition cap per scenario
    time_limit_per_scenario: float = 30.0  # Seconds; 0 = unbounded
    retry_limit: int = 3  # Consecutive failed repetitions before giving up

    # Statistical targets
    target_confidence: float = 0.95
    target_relative_precision: float = 0.2  # Fraction of the running mean

    # Whole-run budget (None = unbounded)
    run_max_trials: int | None = None
    run_time_limit: float | None = None

    # Execution
    workers: int = 1

    # Post-run validation
    check_fit: bool = True
    fit_prototype_size: int = 1000

    @property
    def scenario_time_limit(self) -> float | None:
        """Per-scenario limit in seconds, or None if unbounded."""
        if self.time_limit_per_scenario > 0:
            return self.time_limit_per_scenario
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "max_trials": self.max_trials,
            "time_limit_per_scenario": self.time_limit_per_scenario,
            "retry_limit": self.retry_limit,
            "target_confidence": self.target_confidence,
            "target_relative_precision": self.target_relative_precision,
            "run_max_trials": self.run_max_trials,
            "run_time_limit": self.run_time_limit,
            "workers": self.workers,
            "check_fit": self.check_fit,
            "fit_prototype_size": self.fit_prototype_size,
        }


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


@dataclass
class ValidationError:
    """A single configuration validation error."""

    field: str
    message: str
    severity: str = "error"  # "error" or "warning"


def validate_config(config: TrialConfig) -> list[ValidationError]:
    """Validate a trial configuration.

    Returns a list of validation errors.  Empty list means valid.
    """
    errors: list[ValidationError] = []

    # Two samples are needed before the stopping policy can run.
    if config.max_trials < 2:
        errors.append(
            ValidationError(
                field="max_trials",
                message=f"Need at least 2 trials per scenario (got {config.max_trials}).",
            )
        )

    if config.time_limit_per_scenario < 0:
        errors.append(
            ValidationError(
                field="time_limit_per_scenario",
                message=(
                    f"Time limit cannot be negative (got {config.time_limit_per_scenario}). "
                    f"Use 0 for no limit."
                ),
            )
        )

    if config.retry_limit < 1:
        errors.append(
            ValidationError(
                field="retry_limit",
                message=f"Retry limit must be at least 1 (got {config.retry_limit}).",
            )
        )

    if not 0 < config.target_confidence < 1:
        errors.append(
            ValidationError(
                field="target_confidence",
                message=f"Confidence must lie in (0, 1) (got {config.target_confidence}).",
            )
        )
    elif config.target_confidence > 0.995:
        errors.append(
            ValidationError(
                field="target_confidence",
                message=(
                    f"Confidence {config.target_confidence} is above the tabulated range; "
                    f"scenarios will run until a limit stops them."
                ),
                severity="warning",
            )
        )

    if config.target_relative_precision <= 0:
        errors.append(
            ValidationError(
                field="target_relative_precision",
                message=(
                    f"Relative precision must be positive "
                    f"(got {config.target_relative_precision})."
                ),
            )
        )

    if config.run_max_trials is not None and config.run_max_trials < 0:
        errors.append(
            ValidationError(
                field="run_max_trials",
                message=f"Run trial budget cannot be negative (got {config.run_max_trials}).",
            )
        )

    if config.run_time_limit is not None and config.run_time_limit < 0:
        errors.append(
            ValidationError(
                field="run_time_limit",
                message=f"Run time budget cannot be negative (got {config.run_time_limit}).",
            )
        )

    if config.workers < 1:
        errors.append(
            ValidationError(
                field="workers",
                message=f"Need at least one worker (got {config.workers}).",
            )
        )

    if config.check_fit and config.fit_prototype_size < 2:
        errors.append(
            ValidationError(
                field="fit_prototype_size",
                message=f"Prototype needs at least 2 samples (got {config.fit_prototype_size}).",
            )
        )

    if config.time_limit_per_scenario == 0 and config.run_time_limit is None:
        errors.append(
            ValidationError(
                field="time_limit_per_scenario",
                message="No time limit at any level; a hung executor will stall the run.",
                severity="warning",
            )
        )

    return errors


# ---------------------------------------------------------------------------
# Environments
# ---------------------------------------------------------------------------


@dataclass
class EnvironmentDef:
    """A named set of environment variables to measure under."""

    name: str
    description: str = ""
    env: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict (sparse: omits defaults)."""
        d: dict[str, Any] = {"name": self.name}
        if self.description:
            d["description"] = self.description
        if self.env:
            d["env"] = self.env
        return d


@dataclass
class Profile:
    """Everything a benchmark profile defines."""

    descriptor: BenchmarkDescriptor
    config: TrialConfig
    environments: dict[str, EnvironmentDef] = field(default_factory=dict)
    instruments: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# YAML profile loading
# ---------------------------------------------------------------------------


def load_profile(profile_path: Path) -> dict[str, Any]:
    """Load a benchmark profile from a YAML file.

    Profile format::

        name: "string building"
        max_trials: 30
        time_limit_per_scenario: 30
        target_confidence: 0.95
        target_relative_precision: 0.2
        instruments: [wall_time, cpu_time]

        environments:
          default: {}
          hashseed:
            description: "Fixed hash seed"
            env:
              PYTHONHASHSEED: "0"

        operations:
          join:
            callable: "mybench.strings:join"
            kind: micro
            parameters:
              size: [10, 100, 1000]
            before_rep: "mybench.strings:reset"
          startup:
            command: "python -c 'import {module}'"
            parameters:
              module: [json, decimal]

    Returns:
        The parsed YAML as a dict.
    """
    import yaml

    if not profile_path.exists():
        raise FileNotFoundError(f"Profile not found: {profile_path}")

    data = yaml.safe_load(profile_path.read_text())

    if not isinstance(data, dict):
        raise ValueError(f"Profile must be a YAML mapping, got {type(data).__name__}")

    return data


def config_from_profile(
    profile_data: dict[str, Any],
    *,
    cli_overrides: dict[str, Any] | None = None,
) -> TrialConfig:
    """Build a TrialConfig from a parsed profile.

    CLI overrides take precedence over profile values.  Keys match
    TrialConfig field names; ``None`` values are ignored.
    """
    cli = {k: v for k, v in (cli_overrides or {}).items() if v is not None}
    config = TrialConfig()

    for name in config.to_dict():
        if name in cli:
            setattr(config, name, cli[name])
        elif name in profile_data and profile_data[name] is not None:
            setattr(config, name, profile_data[name])

    return config


_HOOK_KEYS = {role.value: role for role in HookRole}


def _operation_from_profile(op_id: str, op_data: dict[str, Any] | None) -> OperationDef:
    if op_data is None:
        op_data = {}
    if not isinstance(op_data, dict):
        raise ValueError(f"Operation '{op_id}' must be a mapping, got {type(op_data).__name__}")

    if "callable" in op_data and "command" in op_data:
        raise ValueError(f"Operation '{op_id}' sets both 'callable' and 'command'.")
    executor = "command" if "command" in op_data else "callable"
    target = op_data.get(executor)
    if not target:
        raise ValueError(f"Operation '{op_id}' needs a 'callable' or a 'command'.")

    params = op_data.get("parameters") or {}
    if not isinstance(params, dict):
        raise ValueError(f"Parameters of '{op_id}' must be a mapping of name -> values")
    parameters: dict[str, list[Any]] = {}
    for name, values in params.items():
        parameters[str(name)] = list(values) if isinstance(values, list) else [values]

    kind_name = op_data.get("kind", "macro")
    try:
        kind = OperationKind(kind_name)
    except ValueError as exc:
        raise ValueError(
            f"Unknown kind '{kind_name}' for operation '{op_id}'. Valid kinds: micro, macro"
        ) from exc

    op = OperationDef(
        operation_id=str(op_id),
        parameters=parameters,
        target=target,
        kind=kind,
        executor=executor,
        description=op_data.get("description", ""),
    )
    for key, role in _HOOK_KEYS.items():
        refs = op_data.get(key)
        if refs is None:
            continue
        for ref in refs if isinstance(refs, list) else [refs]:
            op.add_hook(role, ref)
    return op


def profile_from_data(
    profile_data: dict[str, Any],
    *,
    cli_overrides: dict[str, Any] | None = None,
) -> Profile:
    """Build the descriptor, environments, instruments and config of a profile."""
    ops_data = profile_data.get("operations", {})
    if not isinstance(ops_data, dict):
        raise ValueError("Profile 'operations' must be a mapping of operation_id -> definition")

    descriptor = BenchmarkDescriptor(name=profile_data.get("name", ""))
    for op_id, op_data in ops_data.items():
        descriptor.operations.append(_operation_from_profile(op_id, op_data))

    envs_data = profile_data.get("environments") or {"default": {}}
    if not isinstance(envs_data, dict):
        raise ValueError("Profile 'environments' must be a mapping of name -> definition")
    environments: dict[str, EnvironmentDef] = {}
    for name, env_data in envs_data.items():
        env_data = env_data or {}
        environments[str(name)] = EnvironmentDef(
            name=str(name),
            description=env_data.get("description", ""),
            env={str(k): str(v) for k, v in (env_data.get("env") or {}).items()},
        )

    instruments = profile_data.get("instruments") or ["wall_time"]
    if isinstance(instruments, str):
        instruments = [instruments]

    return Profile(
        descriptor=descriptor,
        config=config_from_profile(profile_data, cli_overrides=cli_overrides),
        environments=environments,
        instruments=[str(i) for i in instruments],
    )
