"""Benchmark descriptors and scenario enumeration.

A :class:`BenchmarkDescriptor` is the already-resolved description of
what to measure: an ordered list of operations, each with named
parameters and their candidate values.  :class:`ScenarioSpace` expands
it into the Cartesian product

    operation x parameter values x environment x instrument

in a fixed order, so two runs over the same descriptor visit the same
scenarios in the same sequence.
"""

from __future__ import annotations

import enum
import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Sequence, Union

from jauge.errors import InvalidArgument

# A hook is a callable or a "module:function" reference resolved by the executor.
Hook = Union[Callable[..., Any], str]


class HookRole(enum.Enum):
    """When an operation hook runs, relative to measurement."""

    BEFORE_EXPERIMENT = "before_experiment"
    AFTER_EXPERIMENT = "after_experiment"
    BEFORE_REP = "before_rep"
    AFTER_REP = "after_rep"


class OperationKind(enum.Enum):
    """How one repetition of an operation is timed.

    MICRO operations are cheap; an in-process executor loops them several
    times per repetition and reports the per-call time.  MACRO operations
    run once per repetition.
    """

    MICRO = "micro"
    MACRO = "macro"


@dataclass
class OperationDef:
    """One measurable operation of a benchmark.

    ``target`` is opaque to the scheduler: a callable, a ``module:function``
    reference, or a command template, interpreted by the executor.
    """

    operation_id: str
    parameters: dict[str, list[Any]] = field(default_factory=dict)
    hooks: dict[HookRole, list[Hook]] = field(default_factory=dict)
    target: Any = None
    kind: OperationKind = OperationKind.MACRO
    executor: str = "callable"  # "callable" or "command"
    description: str = ""

    def hooks_for(self, role: HookRole) -> list[Hook]:
        """Hooks registered for *role*, in registration order."""
        return list(self.hooks.get(role, []))

    def add_hook(self, role: HookRole, hook: Hook) -> None:
        self.hooks.setdefault(role, []).append(hook)


@dataclass
class BenchmarkDescriptor:
    """Ordered list of operations making up a benchmark."""

    name: str = ""
    operations: list[OperationDef] = field(default_factory=list)

    def operation(self, operation_id: str) -> OperationDef:
        """Look up an operation by id.

        Raises:
            KeyError: If no operation has that id.
        """
        for op in self.operations:
            if op.operation_id == operation_id:
                return op
        raise KeyError(operation_id)


@dataclass(frozen=True, order=True)
class Scenario:
    """One fully specified combination to measure.

    Equality and ordering follow the field tuple.  Parameter values
    should be mutually comparable for ordering to work.
    """

    operation_id: str
    parameters: tuple[tuple[str, Any], ...] = ()
    environment_id: str = "default"
    instrument_id: str = "wall_time"

    @property
    def parameter_dict(self) -> dict[str, Any]:
        return dict(self.parameters)

    @property
    def label(self) -> str:
        """Compact human-readable identifier."""
        params = ",".join(f"{k}={v}" for k, v in self.parameters)
        base = f"{self.operation_id}[{params}]" if params else self.operation_id
        return f"{base}@{self.environment_id}/{self.instrument_id}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            "operation_id": self.operation_id,
            "parameters": {k: v for k, v in self.parameters},
            "environment_id": self.environment_id,
            "instrument_id": self.instrument_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Scenario:
        """Deserialize from a dict; parameters are re-sorted by name."""
        params = data.get("parameters", {})
        return cls(
            operation_id=data["operation_id"],
            parameters=tuple(sorted(params.items())),
            environment_id=data.get("environment_id", "default"),
            instrument_id=data.get("instrument_id", "wall_time"),
        )


DEFAULT_ENVIRONMENTS: tuple[str, ...] = ("default",)
DEFAULT_INSTRUMENTS: tuple[str, ...] = ("wall_time",)


class ScenarioSpace:
    """Deterministic enumeration of a descriptor's scenarios.

    Dimension order is operation (descriptor order), then parameters
    sorted by name (candidate values in declared order), then
    environment, then instrument.
    """

    def __init__(
        self,
        descriptor: BenchmarkDescriptor,
        environments: Sequence[str] = DEFAULT_ENVIRONMENTS,
        instruments: Sequence[str] = DEFAULT_INSTRUMENTS,
    ) -> None:
        seen: set[str] = set()
        for op in descriptor.operations:
            if op.operation_id in seen:
                raise InvalidArgument(f"duplicate operation id: {op.operation_id!r}")
            seen.add(op.operation_id)
            for name, values in op.parameters.items():
                if not values:
                    raise InvalidArgument(
                        f"parameter {name!r} of {op.operation_id!r} has no candidate values"
                    )
        if not environments:
            raise InvalidArgument("at least one environment id is required")
        if not instruments:
            raise InvalidArgument("at least one instrument id is required")

        self.descriptor = descriptor
        self.environments = tuple(environments)
        self.instruments = tuple(instruments)

    def _assignments(self, op: OperationDef) -> Iterator[tuple[tuple[str, Any], ...]]:
        names = sorted(op.parameters)
        for values in itertools.product(*(op.parameters[name] for name in names)):
            yield tuple(zip(names, values))

    def __iter__(self) -> Iterator[Scenario]:
        for op in self.descriptor.operations:
            for assignment in self._assignments(op):
                for env_id in self.environments:
                    for instrument_id in self.instruments:
                        yield Scenario(
                            operation_id=op.operation_id,
                            parameters=assignment,
                            environment_id=env_id,
                            instrument_id=instrument_id,
                        )

    def __len__(self) -> int:
        total = 0
        for op in self.descriptor.operations:
            combos = 1
            for values in op.parameters.values():
                combos *= len(values)
            total += combos
        return total * len(self.environments) * len(self.instruments)

    def scenarios(self) -> list[Scenario]:
        """All scenarios, in enumeration order."""
        return list(self)
