import unittest

from gtest_timing.config.config import Config
from gtest_timing.contracts.run import Run
from gtest_timing.contracts.suite_result import RunResults
from gtest_timing.core.cross_run_aggregator import CrossRunAggregator, percent_spread
from gtest_timing.errors import ConfigError


def make_results(name, durations, path=None):
    return RunResults(run=Run.from_path(path or f"{name}.log", name), durations=durations)


class TestPercentSpread(unittest.TestCase):
    def test_fifty_percent(self):
        self.assertEqual(percent_spread(100, 150), 50)

    def test_equal_is_zero(self):
        self.assertEqual(percent_spread(80, 80), 0)

    def test_truncates_toward_zero(self):
        # 200 / 3 - 100 = 566.66...
        self.assertEqual(percent_spread(3, 20), 566)
        self.assertEqual(percent_spread(7, 8), 14)

    def test_zero_minimum(self):
        self.assertEqual(percent_spread(0, 0), 0)
        self.assertEqual(percent_spread(0, 5), Config.MAX_DURATION_MS)


class TestCrossRunAggregator(unittest.TestCase):
    def test_two_runs_percentage(self):
        a = make_results("A", {"SuiteX": 100})
        b = make_results("B", {"SuiteX": 150})
        agg = CrossRunAggregator([a.run, b.run])
        agg.add_run(a)
        agg.add_run(b)
        stats = agg.stats["SuiteX"]
        self.assertEqual((stats.minimum, stats.maximum, stats.percent), (100, 150, 50))

    def test_single_run(self):
        a = make_results("A", {"SuiteY": 80})
        agg = CrossRunAggregator([a.run])
        agg.add_run(a)
        stats = agg.stats["SuiteY"]
        self.assertEqual((stats.minimum, stats.maximum, stats.percent), (80, 80, 0))

    def test_running_fold_reflects_runs_so_far(self):
        a = make_results("A", {"S": 200})
        b = make_results("B", {"S": 100})
        agg = CrossRunAggregator([a.run, b.run])
        agg.add_run(a)
        self.assertEqual(agg.stats["S"].percent, 0)
        agg.add_run(b)
        self.assertEqual(agg.stats["S"].minimum, 100)
        self.assertEqual(agg.stats["S"].maximum, 200)
        self.assertEqual(agg.stats["S"].percent, 100)

    def test_sorted_descending_by_maximum(self):
        a = make_results("A", {"A": 300, "B": 100, "C": 200})
        agg = CrossRunAggregator([a.run])
        agg.add_run(a)
        self.assertEqual([s for s, _ in agg.sorted_suites()], ["A", "C", "B"])

    def test_ties_broken_by_name(self):
        a = make_results("A", {"Zed": 10, "Abc": 10, "Mid": 10})
        agg = CrossRunAggregator([a.run])
        agg.add_run(a)
        self.assertEqual(
            agg.sorted_suites(), [("Abc", 10), ("Mid", 10), ("Zed", 10)]
        )

    def test_suite_width_tracks_longest_name(self):
        a = make_results("A", {"Short": 1})
        b = make_results("B", {"MuchLongerName": 1})
        agg = CrossRunAggregator([a.run, b.run])
        agg.add_run(a)
        self.assertEqual(agg.report.suite_width, 5)
        agg.add_run(b)
        self.assertEqual(agg.report.suite_width, 14)

    def test_duplicate_run_name_first_policy(self):
        a = make_results("same", {"S": 10}, path="a.log")
        b = make_results("same", {"S": 30}, path="b.log")
        agg = CrossRunAggregator([a.run, b.run], policy="first")
        agg.add_run(a)
        with self.assertLogs("gtest_timing.core.cross_run_aggregator", level="WARNING"):
            agg.add_run(b)
        self.assertIs(agg.report.results["same"], a)
        # statistics still see both runs
        self.assertEqual(agg.stats["S"].maximum, 30)
        self.assertEqual(agg.stats["S"].percent, 200)

    def test_unsupported_policy(self):
        with self.assertRaises(ConfigError):
            CrossRunAggregator([], policy="merge")

    def test_duplicate_run_name_last_policy(self):
        a = make_results("same", {"S": 10}, path="a.log")
        b = make_results("same", {"S": 30}, path="b.log")
        agg = CrossRunAggregator([a.run, b.run], policy="last")
        agg.add_run(a)
        agg.add_run(b)
        self.assertIs(agg.report.results["same"], b)


if __name__ == "__main__":
    unittest.main()
