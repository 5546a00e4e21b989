import logging
from typing import Iterable, Optional

from prometheus_client import CollectorRegistry, Gauge, write_to_textfile

from gtest_timing.contracts.suite_result import RunResults

logger = logging.getLogger(__name__)


class MetricsManager:
    """
    Collects per-run parsing metrics in a private registry so a batch
    invocation can leave them behind for a textfile collector.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry or CollectorRegistry()
        self.LINES_SCANNED = Gauge(
            "gtest_timing_lines_scanned",
            "Log lines scanned per run",
            ["run"],
            registry=self.registry,
        )
        self.SUITES_MATCHED = Gauge(
            "gtest_timing_suites_matched",
            "Suite completion lines matched per run",
            ["run"],
            registry=self.registry,
        )
        self.RUN_TOTAL_MS = Gauge(
            "gtest_timing_run_total_ms",
            "Sum of extracted suite durations per run in milliseconds",
            ["run"],
            registry=self.registry,
        )
        self.SUITES = Gauge(
            "gtest_timing_suites",
            "Distinct suites across all runs",
            registry=self.registry,
        )

    def record_runs(self, run_results: Iterable[RunResults], suite_count: int):
        for results in run_results:
            name = results.run.name
            self.LINES_SCANNED.labels(run=name).set(results.lines_scanned)
            self.SUITES_MATCHED.labels(run=name).set(results.matches)
            self.RUN_TOTAL_MS.labels(run=name).set(results.total_ms)
        self.SUITES.set(suite_count)

    def write(self, path: str):
        write_to_textfile(path, self.registry)
        logger.info(f"Wrote metrics to {path}")
