"""
Pulls suite names and total execution times out of Googletest log lines such as

    [----------] 1 test from FooTest (123 ms total)
"""
import logging
import re
from typing import Optional

from gtest_timing.config.config import Config
from gtest_timing.contracts.suite_result import SuiteResult

logger = logging.getLogger(__name__)

SUITE_TIME_RE = re.compile(
    r"\] [0-9]+ test from (?P<suite>[a-zA-Z]+).*\((?P<ms>[0-9]+) ms total\)"
)


class SuiteTimeExtractor:
    """
    Matches a single log line against the suite-completion pattern.
    """

    def __init__(self, max_duration_ms: Optional[int] = None):
        """
        Args:
            max_duration_ms (Optional[int]): Durations above this value are
                saturated to it. Defaults to Config.MAX_DURATION_MS.
        """
        self.max_duration_ms = (
            Config.MAX_DURATION_MS if max_duration_ms is None else max_duration_ms
        )

    def extract(self, line: str) -> Optional[SuiteResult]:
        """
        Search a line for a completed suite and its duration.

        Args:
            line (str): One line of log text.

        Returns:
            Optional[SuiteResult]: The suite and duration, or None if the line does not match.
        """
        m = SUITE_TIME_RE.search(line)
        if not m:
            return None
        suite = m.group("suite")
        digits = m.group("ms").lstrip("0") or "0"
        # very long digit runs are out of range before int() is even attempted
        if len(digits) > len(str(self.max_duration_ms)):
            duration = self.max_duration_ms + 1
        else:
            duration = int(digits)
        if duration > self.max_duration_ms:
            logger.warning(
                f"Duration {digits[:20]} ms for {suite} exceeds {self.max_duration_ms}; clamping."
            )
            duration = self.max_duration_ms
        return SuiteResult(suite=suite, duration_ms=duration)
