#!/usr/bin/env python3
"""Compare Googletest suite execution times across one or more log files.

Usage:
  gtest-timing-compare log-file-1 [--as "named run 1"] log-file-2 [--as "named run 2"] ...

Each log is scanned for lines like `[----------] 1 test from FooTest (12 ms total)`.
The report lists every suite, slowest first, with its time in each run and the
percentage between its fastest and slowest run.
"""

import logging
import os
import sys
from typing import List, Optional, TextIO

from gtest_timing.config.config import Config
from gtest_timing.config.logging_config import setup_logging
from gtest_timing.contracts.run import Run
from gtest_timing.core.cross_run_aggregator import CrossRunAggregator
from gtest_timing.core.metrics_manager import MetricsManager
from gtest_timing.core.report_renderer import ReportRenderer
from gtest_timing.core.run_aggregator import RunAggregator
from gtest_timing.errors import GTestTimingError, MetricsWriteError, UsageError

logger = logging.getLogger(__name__)

AS_FLAG = "--as"
HELP_FLAGS = ("-h", "--help")


def usage(prog: str) -> str:
    return (
        f'usage: {prog} log-file-1 [--as "named run 1"] '
        f'log-file-2 [--as "named run 2"] etc.\n'
    )


def parse_runs(args: List[str]) -> List[Run]:
    """
    Turn command-line tokens into runs. A file path may be followed by
    `--as <title>` to set its display name.

    Args:
        args (List[str]): Tokens after the program name.

    Returns:
        List[Run]: Runs in command-line order.

    Raises:
        UsageError: If `--as` has no title or no preceding file, or no file is given.
    """
    runs = []
    i = 0
    while i < len(args):
        path = args[i]
        if path == AS_FLAG:
            raise UsageError("Expected a log file before --as.")
        title = None
        if i + 1 < len(args) and args[i + 1] == AS_FLAG:
            if i + 2 >= len(args):
                raise UsageError("Expected optional name after reading --as.")
            title = args[i + 2]
            i += 2
        runs.append(Run.from_path(path, title))
        i += 1
    if not runs:
        raise UsageError("Please provide at least one file containing Googletest output.")
    return runs


def compare(runs: List[Run], out: TextIO):
    """
    Parse every run in order, fold the results and write the report.

    Raises:
        ConfigError: If the duplicate policy is not supported.
        FileOpenError: If any log file cannot be opened.
        MetricsWriteError: If the metrics file cannot be written. The report
            has already been written to out by then.
    """
    run_aggregator = RunAggregator()
    cross_run = CrossRunAggregator(runs)
    all_results = []
    for run in runs:
        run_results = run_aggregator.parse_run(run)
        all_results.append(run_results)
        cross_run.add_run(run_results)

    ReportRenderer().render(cross_run.report, cross_run.sorted_suites(), out)

    if Config.METRICS_FILE:
        metrics = MetricsManager()
        metrics.record_runs(all_results, len(cross_run.stats))
        try:
            metrics.write(Config.METRICS_FILE)
        except OSError as e:
            raise MetricsWriteError(Config.METRICS_FILE, e.strerror or str(e)) from e


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv if argv is None else argv
    prog = os.path.basename(argv[0]) if argv else "gtest-timing-compare"
    args = list(argv[1:])
    setup_logging()

    if args and args[0] in HELP_FLAGS:
        sys.stdout.write(usage(prog))
        return 0

    try:
        runs = parse_runs(args)
    except UsageError as e:
        logger.debug(f"Rejected arguments {args}: {e}")
        sys.stderr.write(f"{e}\n")
        sys.stderr.write(usage(prog))
        return 1

    try:
        compare(runs, sys.stdout)
    except GTestTimingError as e:
        logger.debug(f"Comparison failed: {e!r}")
        sys.stderr.write(f"{e}\n")
        return 1
    return 0


def run():
    raise SystemExit(main())


if __name__ == "__main__":
    run()
