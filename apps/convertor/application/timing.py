"""
Call duration measurement for application-level entry points.
"""

import functools
import logging
import time

logger = logging.getLogger(__name__)


def measure_duration(func):
    """Log how long each call of ``func`` takes, whether it returns or raises."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        started = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info("%s took %.3f ms", func.__qualname__, elapsed_ms)

    return wrapper
