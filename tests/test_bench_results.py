"""Tests for jauge.bench.results: trial lifecycle, serialization and sinks."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from bench_test_helpers import make_trial

from jauge.bench.results import (
    CollectingSink,
    JsonlResultSink,
    TerminationReason,
    Trial,
    TrialState,
    load_trials,
)
from jauge.bench.scenario import Scenario


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


class TestTerminationReason(unittest.TestCase):
    def test_states(self) -> None:
        self.assertIs(TerminationReason.TIME_LIMIT_REACHED.state, TrialState.TIMED_OUT)
        self.assertIs(TerminationReason.SKIPPED.state, TrialState.SKIPPED)
        for reason in TerminationReason:
            self.assertTrue(reason.state.is_terminal)

    def test_measured(self) -> None:
        self.assertTrue(TerminationReason.CONVERGED.measured)
        self.assertTrue(TerminationReason.TIME_LIMIT_REACHED.measured)
        self.assertFalse(TerminationReason.FAILED.measured)
        self.assertFalse(TerminationReason.SKIPPED.measured)


class TestTrialLifecycle(unittest.TestCase):
    """Tests for the Trial state machine."""

    def test_happy_path(self) -> None:
        trial = Trial(scenario=Scenario("op"))
        self.assertIs(trial.state, TrialState.PENDING)
        trial.start()
        self.assertIs(trial.state, TrialState.MEASURING)
        trial.add_sample(1.0)
        trial.add_sample(2.0)
        trial.finish(TerminationReason.CONVERGED, "done")
        self.assertIs(trial.state, TrialState.CONVERGED)
        self.assertTrue(trial.frozen)
        self.assertEqual(trial.samples, (1.0, 2.0))
        trial.mark_reported()
        self.assertIs(trial.state, TrialState.REPORTED)
        self.assertIs(trial.reason, TerminationReason.CONVERGED)

    def test_skip_from_pending(self) -> None:
        trial = Trial(scenario=Scenario("op"))
        trial.finish(TerminationReason.SKIPPED)
        self.assertIs(trial.state, TrialState.SKIPPED)
        self.assertEqual(trial.count, 0)

    def test_no_samples_before_start(self) -> None:
        trial = Trial(scenario=Scenario("op"))
        with self.assertRaises(RuntimeError):
            trial.add_sample(1.0)

    def test_frozen_rejects_samples(self) -> None:
        trial = make_trial([1.0, 2.0])
        with self.assertRaises(RuntimeError):
            trial.add_sample(3.0)
        self.assertEqual(trial.count, 2)

    def test_finish_once(self) -> None:
        trial = make_trial([1.0])
        with self.assertRaises(RuntimeError):
            trial.finish(TerminationReason.FAILED)

    def test_start_once(self) -> None:
        trial = make_trial([], reason=None)
        with self.assertRaises(RuntimeError):
            trial.start()

    def test_report_once(self) -> None:
        trial = make_trial([1.0])
        trial.mark_reported()
        with self.assertRaises(RuntimeError):
            trial.mark_reported()

    def test_report_requires_finish(self) -> None:
        trial = make_trial([1.0], reason=None)
        with self.assertRaises(RuntimeError):
            trial.mark_reported()


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


class TestTrialSerialization(unittest.TestCase):
    def test_to_dict(self) -> None:
        trial = make_trial([1.0, 2.0, 3.0])
        trial.attempts = 4
        trial.errors.append("MeasurementFailure: boom")
        d = trial.to_dict()
        self.assertEqual(d["reason"], "converged")
        self.assertEqual(d["samples"], [1.0, 2.0, 3.0])
        self.assertEqual(d["attempts"], 4)
        self.assertEqual(d["summary"]["n"], 3)
        self.assertEqual(d["scenario"]["operation_id"], "op")

    def test_empty_trial_has_no_summary(self) -> None:
        trial = Trial(scenario=Scenario("op"))
        trial.finish(TerminationReason.SKIPPED)
        self.assertNotIn("summary", trial.to_dict())

    def test_roundtrip(self) -> None:
        trial = make_trial([1.5, 2.5], reason=None)
        trial.target_samples = 7
        trial.fit_accepted = False
        trial.duration_s = 1.25
        trial.finish(TerminationReason.TIME_LIMIT_REACHED, "scenario time limit reached")
        restored = Trial.from_dict(json.loads(trial.to_jsonl_line()))
        self.assertEqual(restored.scenario, trial.scenario)
        self.assertEqual(restored.samples, (1.5, 2.5))
        self.assertIs(restored.reason, TerminationReason.TIME_LIMIT_REACHED)
        self.assertIs(restored.state, TrialState.TIMED_OUT)
        self.assertEqual(restored.detail, "scenario time limit reached")
        self.assertEqual(restored.target_samples, 7)
        self.assertIs(restored.fit_accepted, False)
        self.assertEqual(restored.duration_s, 1.25)
        self.assertAlmostEqual(restored.statistics.mean, 2.0)

    def test_jsonl_line_is_single_line(self) -> None:
        self.assertNotIn("\n", make_trial([1.0, 2.0]).to_jsonl_line())


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------


class TestCollectingSink(unittest.TestCase):
    def test_collects(self) -> None:
        sink = CollectingSink()
        trials = [make_trial([1.0], operation_id=name) for name in ("a", "b")]
        for t in trials:
            sink.on_trial(t)
        sink.close()
        self.assertEqual(sink.trials, trials)
        self.assertEqual(sink.close_calls, 1)
        self.assertTrue(sink.closed)

    def test_closed_rejects(self) -> None:
        sink = CollectingSink()
        sink.close()
        with self.assertRaises(RuntimeError):
            sink.on_trial(make_trial([1.0]))


class TestJsonlResultSink(unittest.TestCase):
    def test_write_and_load(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "out" / "trials.jsonl"
            sink = JsonlResultSink(path)
            for name in ("a", "b", "c"):
                sink.on_trial(make_trial([1.0, 2.0], operation_id=name))
            sink.close()

            self.assertEqual(sink.written, 3)
            self.assertEqual(len(path.read_text().splitlines()), 3)
            loaded = load_trials(path)
        self.assertEqual([t.scenario.operation_id for t in loaded], ["a", "b", "c"])
        self.assertTrue(all(t.reason is TerminationReason.CONVERGED for t in loaded))

    def test_no_trials_no_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "trials.jsonl"
            sink = JsonlResultSink(path)
            sink.close()
            self.assertFalse(path.exists())

    def test_closed_rejects(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            sink = JsonlResultSink(Path(tmp) / "trials.jsonl")
            sink.close()
            with self.assertRaises(RuntimeError):
                sink.on_trial(make_trial([1.0]))

    def test_load_skips_blank_lines(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "trials.jsonl"
            path.write_text("\n" + make_trial([3.0]).to_jsonl_line() + "\n\n")
            self.assertEqual(len(load_trials(path)), 1)

    def test_load_missing(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_trials(Path("/nonexistent/trials.jsonl"))


if __name__ == "__main__":
    unittest.main()
