"""Core components: data classes, exceptions."""

from script_diff.core.base import Token, DiffWord
from script_diff.core.exceptions import (
    ScriptDiffError,
    ConfigError,
    InputTooLargeError,
)

__all__ = [
    # Data classes
    "Token",
    "DiffWord",
    # Exceptions
    "ScriptDiffError",
    "ConfigError",
    "InputTooLargeError",
]
