import logging
from typing import List, Optional, TextIO, Tuple

from gtest_timing.config.config import Config
from gtest_timing.contracts.suite_result import ComparisonReport

logger = logging.getLogger(__name__)


class ReportRenderer:
    """
    Formats a ComparisonReport as a fixed-width, tab-headed text table.
    """

    def __init__(self, column_width: Optional[int] = None, separator: Optional[str] = None):
        self.column_width = column_width or Config.COLUMN_WIDTH
        self.separator = Config.COLUMN_SEPARATOR if separator is None else separator

    def header(self, report: ComparisonReport) -> str:
        cells = [Config.SUITE_HEADER.rjust(report.suite_width)]
        cells.extend(f'"{run.name}"' for run in report.runs)
        cells.append(Config.METRIC_HEADER)
        return "\t".join(cells)

    def row(self, report: ComparisonReport, suite: str) -> str:
        parts = [suite.rjust(report.suite_width)]
        for run in report.runs:
            duration = report.duration_for(run.name, suite)
            parts.append(self.separator + str(duration).rjust(self.column_width))
        percent = report.stats[suite].percent
        parts.append(self.separator + str(percent).rjust(self.column_width))
        return "".join(parts)

    def render_lines(
        self, report: ComparisonReport, ordered: List[Tuple[str, int]]
    ) -> List[str]:
        """
        Build the report lines.

        Args:
            report (ComparisonReport): Aggregated results.
            ordered (List[Tuple[str, int]]): (suite, maximum) pairs in display order.

        Returns:
            List[str]: Header line followed by one line per suite.
        """
        lines = [self.header(report)]
        lines.extend(self.row(report, suite) for suite, _ in ordered)
        logger.debug(f"Rendered {len(ordered)} suites across {len(report.runs)} runs.")
        return lines

    def render(
        self, report: ComparisonReport, ordered: List[Tuple[str, int]], out: TextIO
    ):
        for line in self.render_lines(report, ordered):
            out.write(line + "\n")
