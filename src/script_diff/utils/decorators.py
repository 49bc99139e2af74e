"""Reusable decorators for logging and timing."""

import functools
import time
import logging
from typing import Callable, TypeVar, ParamSpec

P = ParamSpec("P")
R = TypeVar("R")

logger = logging.getLogger(__name__)


def timed(func: Callable[P, R]) -> Callable[P, R]:
    """Log execution time of a function at DEBUG level."""
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug(f"{func.__qualname__} completed in {elapsed_ms:.2f}ms")
        return result
    return wrapper


def logged(func: Callable[P, R]) -> Callable[P, R]:
    """Log function entry and exit, and re-raise failures after logging them."""
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        logger.debug(f"{func.__qualname__} called")
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(f"{func.__qualname__} failed: {e}")
            raise
        logger.debug(f"{func.__qualname__} succeeded")
        return result
    return wrapper
