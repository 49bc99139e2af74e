"""Logging configuration."""

import logging
import sys
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
FormatStyle = Literal["simple", "detailed"]

FORMATS: dict[str, str] = {
    "simple": "%(levelname)s | %(name)s | %(message)s",
    "detailed": "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
}

_configured = False


def setup_logging(level: LogLevel = "INFO", format_style: FormatStyle = "simple") -> None:
    """Configure root logging once per process.

    Args:
        level: Log level name
        format_style: 'simple' for development, 'detailed' for production
    """
    global _configured

    if _configured:
        return

    logging.basicConfig(
        level=getattr(logging, level),
        format=FORMATS[format_style],
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Server libraries log every request on their own
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically for ``__name__``)."""
    return logging.getLogger(name)
