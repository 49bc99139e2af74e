"""Utilities: logging, decorators."""

from script_diff.utils.logging import setup_logging, get_logger
from script_diff.utils.decorators import timed, logged

__all__ = [
    "setup_logging",
    "get_logger",
    "timed",
    "logged",
]
