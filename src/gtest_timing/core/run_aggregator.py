import logging
from typing import Callable, Optional

from gtest_timing.abstractions.line_source import LineSource
from gtest_timing.config.config import Config
from gtest_timing.contracts.run import Run
from gtest_timing.contracts.suite_result import RunResults
from gtest_timing.core.file_line_source import FileLineSource
from gtest_timing.core.profiler import Profiler
from gtest_timing.core.suite_time_extractor import SuiteTimeExtractor

logger = logging.getLogger(__name__)


class RunAggregator:
    """
    Reads one run's log and collects its suite durations.
    """

    def __init__(
        self,
        extractor: Optional[SuiteTimeExtractor] = None,
        policy: Optional[str] = None,
        source_factory: Callable[[str], LineSource] = FileLineSource,
    ):
        """
        Args:
            extractor (Optional[SuiteTimeExtractor]): Line matcher to use.
            policy (Optional[str]): Duplicate suite policy, "first" or "last".
                Defaults to Config.DUPLICATE_POLICY.
            source_factory (Callable[[str], LineSource]): Opens a path as a line source.
        """
        self.extractor = extractor or SuiteTimeExtractor()
        self.policy = Config.duplicate_policy(policy)
        self.source_factory = source_factory

    def collect(self, run: Run, source: LineSource) -> RunResults:
        """
        Scan every line of a source and record matching suites.

        Args:
            run (Run): The run the lines belong to.
            source (LineSource): Where to read lines from.

        Returns:
            RunResults: Durations keyed by suite name, plus the run total.
        """
        results = RunResults(run=run)
        while source.has_line():
            line = source.get_line()
            results.lines_scanned += 1
            result = self.extractor.extract(line)
            if result is None:
                continue
            if not results.add(result, self.policy):
                logger.debug(
                    f"Suite {result.suite} repeated in {run.name}; keeping first value."
                )
        return results

    @Profiler.profile
    def parse_run(self, run: Run) -> RunResults:
        """
        Open the run's log file and collect its suite durations.

        Raises:
            FileOpenError: If the log file cannot be opened.
        """
        with self.source_factory(run.path) as source:
            results = self.collect(run, source)
        logger.info(
            f"Parsed {run.path} as '{run.name}': {len(results.durations)} suites, "
            f"{results.total_ms} ms total over {results.lines_scanned} lines."
        )
        return results
