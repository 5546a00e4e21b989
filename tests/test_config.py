import importlib
import logging
import os
import unittest

from gtest_timing.config import logging_config
from gtest_timing.config.config import Config
from gtest_timing.errors import ConfigError


class TestConfig(unittest.TestCase):
    def test_config_defaults(self):
        self.assertEqual(Config.DUPLICATE_POLICY, "first")
        self.assertIsNone(Config.METRICS_FILE)
        self.assertEqual(Config.MAX_DURATION_MS, 2147483647)
        self.assertEqual(Config.COLUMN_WIDTH, 12)
        self.assertEqual(Config.COLUMN_SEPARATOR, "  ")
        self.assertEqual(Config.SUITE_HEADER, '"Test Suite"')
        self.assertEqual(Config.METRIC_HEADER, '"Speedup Percent / Variation"')

    def test_duplicate_policy_resolution(self):
        self.assertEqual(Config.duplicate_policy(), "first")
        self.assertEqual(Config.duplicate_policy("last"), "last")
        with self.assertRaises(ConfigError):
            Config.duplicate_policy("merge")

    def test_config_env_override(self):
        import gtest_timing.config.config as config_mod

        os.environ["GTEST_TIMING_DUPLICATE_POLICY"] = "LAST"
        try:
            importlib.reload(config_mod)
            self.assertEqual(config_mod.Config.DUPLICATE_POLICY, "last")
        finally:
            del os.environ["GTEST_TIMING_DUPLICATE_POLICY"]
            importlib.reload(config_mod)


class TestLoggingConfig(unittest.TestCase):
    def test_logging_setup(self):
        try:
            logging_config.setup_logging()
        except Exception as e:
            self.fail(f"setup_logging() raised {e}")
        logger = logging.getLogger()
        self.assertTrue(logger.hasHandlers())

    def test_console_handler_uses_stderr(self):
        cfg = logging_config.build_logging_config(level="DEBUG", log_file="")
        self.assertEqual(cfg["handlers"]["console"]["stream"], "ext://sys.stderr")
        self.assertNotIn("file", cfg["handlers"])
        self.assertEqual(cfg["root"]["level"], "DEBUG")

    def test_file_handler_added_when_log_file_set(self):
        cfg = logging_config.build_logging_config(log_file="run.log")
        self.assertEqual(cfg["handlers"]["file"]["filename"], "run.log")
        self.assertEqual(cfg["root"]["handlers"], ["console", "file"])


if __name__ == "__main__":
    unittest.main()
