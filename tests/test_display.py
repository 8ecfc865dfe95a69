"""Tests for jauge.display: text rendering of trials."""

from __future__ import annotations

import unittest

from bench_test_helpers import make_trial

from jauge.bench.results import TerminationReason, Trial
from jauge.bench.scenario import Scenario
from jauge.display import format_histogram, format_seconds, format_table, format_trials


class TestFormatSeconds(unittest.TestCase):
    def test_units(self) -> None:
        self.assertEqual(format_seconds(2.5), "2.5s")
        self.assertEqual(format_seconds(0.0123), "12.3ms")
        self.assertEqual(format_seconds(4.56e-5), "45.6us")
        self.assertEqual(format_seconds(7e-8), "70ns")

    def test_zero(self) -> None:
        self.assertEqual(format_seconds(0.0), "0ns")

    def test_large(self) -> None:
        self.assertEqual(format_seconds(1234.0), "1.23e+03s")


class TestFormatTable(unittest.TestCase):
    def test_alignment(self) -> None:
        text = format_table(["name", "n"], [["a", "1"], ["long", "100"]])
        lines = text.splitlines()
        self.assertEqual(lines[0], "  name    n")
        self.assertEqual(lines[1], "  ----  ---")
        self.assertEqual(lines[2], "  a       1")
        self.assertEqual(lines[3], "  long  100")

    def test_empty_rows(self) -> None:
        self.assertEqual(len(format_table(["a", "b"], []).splitlines()), 2)

    def test_indent(self) -> None:
        self.assertTrue(format_table(["a"], [["x"]], indent=0).startswith("a"))


class TestFormatTrials(unittest.TestCase):
    def test_measured_row(self) -> None:
        trial = make_trial([0.001, 0.002, 0.003])
        trial.fit_accepted = True
        text = format_trials([trial])
        self.assertIn("op@default/wall_time", text)
        self.assertIn("converged", text)
        self.assertIn("2ms", text)
        self.assertIn("yes", text)

    def test_unmeasured_row(self) -> None:
        trial = Trial(scenario=Scenario("skipme"))
        trial.finish(TerminationReason.SKIPPED)
        row = format_trials([trial]).splitlines()[-1]
        self.assertIn("skipped", row)
        self.assertEqual(row.split()[-5:], ["-", "-", "-", "-", "-"])

    def test_memory_instrument(self) -> None:
        trial = Trial(scenario=Scenario("op", instrument_id="peak_rss"))
        trial.start()
        for v in (10.0, 12.0):
            trial.add_sample(v)
        trial.finish(TerminationReason.MAX_TRIALS_REACHED)
        text = format_trials([trial])
        self.assertIn("11.0MB", text)
        self.assertEqual(text.splitlines()[-1].split()[-1], "-")

    def test_header(self) -> None:
        header = format_trials([]).splitlines()[0].split()
        self.assertEqual(
            header, ["scenario", "outcome", "n", "mean", "stdev", "min", "max", "normal"]
        )


class TestFormatHistogram(unittest.TestCase):
    def test_bars(self) -> None:
        trial = make_trial([float(i) for i in range(16)])
        text = format_histogram(trial, width=10)
        lines = text.splitlines()
        # Scott's rule picks 3 bins of width 5 for 0..15.
        self.assertEqual(len(lines), 3)
        self.assertTrue(all("█" in line for line in lines))
        self.assertEqual(sum(int(line.split()[-1]) for line in lines), 16)

    def test_too_few_samples(self) -> None:
        self.assertEqual(format_histogram(make_trial([1.0])), "")
        self.assertEqual(format_histogram(make_trial([])), "")


if __name__ == "__main__":
    unittest.main()
