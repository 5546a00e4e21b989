import os
from typing import Optional

from gtest_timing.errors import ConfigError


class Config:
    """
    Configuration class for environment variables and default settings.
    """

    # "first" keeps the first value seen for a suite or run name, "last" overwrites
    DUPLICATE_POLICY = os.environ.get("GTEST_TIMING_DUPLICATE_POLICY", "first").lower()
    DUPLICATE_POLICIES = ("first", "last")

    # Optional Prometheus textfile written after the report
    METRICS_FILE = os.environ.get("GTEST_TIMING_METRICS_FILE")

    LOG_ENCODING = os.environ.get("GTEST_TIMING_LOG_ENCODING", "utf-8")

    # Largest representable duration; also the starting minimum for a suite
    MAX_DURATION_MS = 2**31 - 1

    # Report layout
    COLUMN_WIDTH = 12
    COLUMN_SEPARATOR = "  "
    SUITE_HEADER = '"Test Suite"'
    METRIC_HEADER = '"Speedup Percent / Variation"'

    @classmethod
    def duplicate_policy(cls, policy: Optional[str] = None) -> str:
        """
        Resolve a duplicate policy, falling back to DUPLICATE_POLICY.

        Raises:
            ConfigError: If the policy is not one of DUPLICATE_POLICIES.
        """
        policy = policy or cls.DUPLICATE_POLICY
        if policy not in cls.DUPLICATE_POLICIES:
            raise ConfigError(
                f"Unsupported duplicate policy: {policy}. "
                f"Supported: {list(cls.DUPLICATE_POLICIES)}"
            )
        return policy
