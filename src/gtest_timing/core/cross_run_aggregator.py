import logging
from typing import Dict, List, Optional, Tuple

from gtest_timing.config.config import Config
from gtest_timing.contracts.run import Run
from gtest_timing.contracts.suite_result import (
    ComparisonReport,
    RunResults,
    SuiteStats,
)

logger = logging.getLogger(__name__)


def percent_spread(minimum: int, maximum: int) -> int:
    """
    Percentage by which the slowest run exceeds the fastest, truncated toward zero.

    A zero minimum has no finite ratio: 0 if the maximum is also 0, otherwise
    Config.MAX_DURATION_MS.
    """
    if minimum == 0:
        return 0 if maximum == 0 else Config.MAX_DURATION_MS
    return int(maximum * 100.0 / minimum - 100.0)


class CrossRunAggregator:
    """
    Folds each run's results into per-suite minimum, maximum and spread.
    Statistics always reflect every run folded so far.
    """

    def __init__(self, runs: List[Run], policy: Optional[str] = None):
        """
        Args:
            runs (List[Run]): Runs in command-line order; these become report columns.
            policy (Optional[str]): What to do with a repeated display name,
                "first" or "last". Defaults to Config.DUPLICATE_POLICY.
        """
        self.policy = Config.duplicate_policy(policy)
        self.report = ComparisonReport(runs=list(runs))

    @property
    def stats(self) -> Dict[str, SuiteStats]:
        return self.report.stats

    def add_run(self, run_results: RunResults):
        """
        Fold one run into the aggregate. Every suite in the run updates the
        statistics even if the run's display name was already taken.

        Args:
            run_results (RunResults): Parsed results of one run.
        """
        name = run_results.run.name
        if name in self.report.results and self.policy == "first":
            logger.warning(
                f"Run name '{name}' used more than once; its column shows the first run."
            )
        else:
            self.report.results[name] = run_results

        for suite, execution in sorted(run_results.durations.items()):
            self.report.suite_width = max(self.report.suite_width, len(suite))
            stats = self.report.stats.get(suite)
            if stats is None:
                stats = SuiteStats(minimum=Config.MAX_DURATION_MS)
                self.report.stats[suite] = stats
            stats.minimum = min(stats.minimum, execution)
            stats.maximum = max(stats.maximum, execution)
            stats.percent = percent_spread(stats.minimum, stats.maximum)

    def sorted_suites(self) -> List[Tuple[str, int]]:
        """
        Suites with their maximum duration, slowest first, ties by name.

        Returns:
            List[Tuple[str, int]]: (suite, maximum) pairs.
        """
        return sorted(
            ((suite, stats.maximum) for suite, stats in self.report.stats.items()),
            key=lambda item: (-item[1], item[0]),
        )
