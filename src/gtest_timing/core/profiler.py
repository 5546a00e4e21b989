import functools
import logging
import time

logger = logging.getLogger(__name__)


class Profiler:
    """
    Provides a decorator that logs how long a function call took.
    """

    @staticmethod
    def profile(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                elapsed = time.perf_counter() - start
                logger.debug(f"[Profiler] {func.__qualname__} took {elapsed:.4f}s")

        return wrapper
