import logging
import logging.config
import os

LOG_LEVEL = os.getenv("GTEST_TIMING_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE = os.getenv("GTEST_TIMING_LOG_FILE")


def build_logging_config(level=None, log_file=None):
    """
    Build a dictConfig mapping. The report owns stdout, so the console
    handler always writes to stderr.
    """
    level = level or LOG_LEVEL
    log_file = log_file if log_file is not None else LOG_FILE
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "level": level,
            "stream": "ext://sys.stderr",
        },
    }
    if log_file:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": log_file,
            "formatter": "default",
            "level": level,
        }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": LOG_FORMAT,
            },
        },
        "handlers": handlers,
        "root": {
            "handlers": list(handlers),
            "level": level,
        },
    }


def setup_logging(level=None, log_file=None):
    logging.config.dictConfig(build_logging_config(level, log_file))
