from typing import Dict, List

from pydantic import BaseModel, Field

from gtest_timing.contracts.run import Run


class SuiteResult(BaseModel):
    """
    A suite name and its total execution time, extracted from one log line.
    """

    suite: str
    duration_ms: int = Field(ge=0)


class RunResults(BaseModel):
    """
    Suite durations collected from a single run's log.
    """

    run: Run
    durations: Dict[str, int] = {}
    total_ms: int = 0
    lines_scanned: int = 0
    matches: int = 0

    def add(self, result: SuiteResult, policy: str = "first") -> bool:
        """
        Record a suite duration for this run.

        Args:
            result (SuiteResult): The extracted suite result.
            policy (str): "first" keeps an existing duration for the suite,
                "last" overwrites it.

        Returns:
            bool: True if the stored duration for the suite was set.
        """
        self.matches += 1
        self.total_ms += result.duration_ms
        if policy == "first" and result.suite in self.durations:
            return False
        self.durations[result.suite] = result.duration_ms
        return True


class SuiteStats(BaseModel):
    """
    Fastest and slowest duration seen for a suite across runs.
    """

    minimum: int
    maximum: int = 0
    percent: int = 0


class ComparisonReport(BaseModel):
    """
    Everything the report renderer needs: the runs in command-line order,
    each run's results keyed by display name, and per-suite statistics.
    """

    runs: List[Run]
    results: Dict[str, RunResults] = {}
    stats: Dict[str, SuiteStats] = {}
    suite_width: int = 0

    def duration_for(self, run_name: str, suite: str) -> int:
        """
        Duration of a suite in the named run, 0 if the run has no entry for it.
        """
        run_results = self.results.get(run_name)
        if run_results is None:
            return 0
        return run_results.durations.get(suite, 0)
