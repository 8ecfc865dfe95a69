"""Command-line interface for jauge.

Subcommands:
    jauge run         Measure every scenario of a profile
    jauge scenarios   List the scenarios a profile expands to
    jauge show        Display trials saved by ``jauge run --output``
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from jauge import __version__
from jauge.logging import get_logger, setup_logging

if TYPE_CHECKING:
    from jauge.bench.config import Profile

log = get_logger("cli")


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """jauge: measure benchmark scenarios until the numbers settle."""


def _load(profile_path: Path, cli_overrides: dict[str, object] | None = None) -> Profile:
    from jauge.bench.config import load_profile, profile_from_data

    try:
        return profile_from_data(load_profile(profile_path), cli_overrides=cli_overrides)
    except (ValueError, FileNotFoundError) as exc:
        raise click.ClickException(str(exc)) from exc


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------


@main.command()
@click.option(
    "--profile",
    "profile_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="YAML profile defining operations, environments and limits.",
)
@click.option("--max-trials", type=int, default=None, help="Repetition cap per scenario.")
@click.option(
    "--time-limit",
    type=float,
    default=None,
    help="Seconds per scenario (0 for no limit).",
)
@click.option("--confidence", type=float, default=None, help="Target confidence, in (0, 1).")
@click.option(
    "--precision",
    type=float,
    default=None,
    help="Target precision as a fraction of the mean.",
)
@click.option(
    "--retry-limit",
    type=int,
    default=None,
    help="Consecutive failed repetitions before a scenario fails.",
)
@click.option("--workers", type=int, default=None, help="Scenarios measured in parallel.")
@click.option("--run-time-limit", type=float, default=None, help="Seconds for the whole run.")
@click.option(
    "--run-max-trials",
    type=int,
    default=None,
    help="Repetitions for the whole run.",
)
@click.option(
    "--repetitions",
    type=int,
    default=100,
    show_default=True,
    help="Calls per sample for micro operations.",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Append trials to this JSONL file.",
)
@click.option("--histograms", is_flag=True, help="Print a histogram per measured scenario.")
@click.option("-v", "--verbose", is_flag=True, help="Show every repetition.")
@click.option("-q", "--quiet", is_flag=True, help="Only show warnings and errors.")
@click.option("--log-file", type=click.Path(path_type=Path), default=None)
def run(  # noqa: PLR0913
    profile_path: Path,
    max_trials: int | None,
    time_limit: float | None,
    confidence: float | None,
    precision: float | None,
    retry_limit: int | None,
    workers: int | None,
    run_time_limit: float | None,
    run_max_trials: int | None,
    repetitions: int,
    output: Path | None,
    histograms: bool,
    verbose: bool,
    quiet: bool,
    log_file: Path | None,
) -> None:
    """Measure every scenario in a profile until it converges.

    CLI options override the profile's values.

    \b
    Examples:
        jauge run --profile strings.yaml
        jauge run --profile startup.yaml --workers 4 --output trials.jsonl
        jauge run --profile strings.yaml --confidence 0.99 --precision 0.05
    """
    from jauge.bench.executors import ProfileExecutor
    from jauge.bench.results import CollectingSink, JsonlResultSink, ResultSink
    from jauge.bench.runner import TrialScheduler
    from jauge.bench.scenario import ScenarioSpace
    from jauge.display import format_histogram, format_trials
    from jauge.errors import InvalidArgument

    setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    cli_overrides: dict[str, object] = {
        "max_trials": max_trials,
        "time_limit_per_scenario": time_limit,
        "target_confidence": confidence,
        "target_relative_precision": precision,
        "retry_limit": retry_limit,
        "workers": workers,
        "run_time_limit": run_time_limit,
        "run_max_trials": run_max_trials,
    }
    profile = _load(profile_path, cli_overrides)

    try:
        space = ScenarioSpace(
            profile.descriptor,
            environments=list(profile.environments),
            instruments=profile.instruments,
        )
        executor = ProfileExecutor(
            profile.descriptor,
            profile.environments,
            repetitions=repetitions,
            timeout=profile.config.scenario_time_limit,
        )
    except InvalidArgument as exc:
        raise click.ClickException(str(exc)) from exc

    sink: ResultSink = JsonlResultSink(output) if output else CollectingSink()
    scheduler = TrialScheduler(profile.config, executor, sink)
    try:
        trials = scheduler.run(space)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1) from exc
    except KeyboardInterrupt:
        click.echo("\nRun interrupted.", err=True)
        raise SystemExit(130)  # noqa: B904
    finally:
        executor.finish()

    click.echo()
    click.echo(format_trials(trials))
    if histograms:
        for trial in trials:
            text = format_histogram(trial)
            if text:
                click.echo(f"\n{trial.scenario.label}")
                click.echo(text)
    if output:
        click.echo(f"\nTrials saved to: {output}")

    if trials and all(t.reason is not None and not t.reason.measured for t in trials):
        log.error("No scenario produced a measurement.")
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# scenarios
# ---------------------------------------------------------------------------


@main.command()
@click.option(
    "--profile",
    "profile_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="YAML profile defining operations, environments and instruments.",
)
def scenarios(profile_path: Path) -> None:
    """List the scenarios a profile expands to, in measurement order."""
    from jauge.bench.scenario import ScenarioSpace
    from jauge.errors import InvalidArgument

    profile = _load(profile_path)
    try:
        space = ScenarioSpace(
            profile.descriptor,
            environments=list(profile.environments),
            instruments=profile.instruments,
        )
    except InvalidArgument as exc:
        raise click.ClickException(str(exc)) from exc

    for index, scenario in enumerate(space, 1):
        click.echo(f"{index:4d}  {scenario.label}")
    click.echo(f"\n{len(space)} scenario(s)")


# ---------------------------------------------------------------------------
# show
# ---------------------------------------------------------------------------


@main.command()
@click.argument("results", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--histograms", is_flag=True, help="Print a histogram per measured scenario.")
def show(results: Path, histograms: bool) -> None:
    """Display trials saved by ``jauge run --output``."""
    from jauge.bench.results import load_trials
    from jauge.display import format_histogram, format_trials

    try:
        trials = load_trials(results)
    except ValueError as exc:
        raise click.ClickException(f"{results}: {exc}") from exc

    click.echo(format_trials(trials))
    if histograms:
        for trial in trials:
            text = format_histogram(trial)
            if text:
                click.echo(f"\n{trial.scenario.label}")
                click.echo(text)
