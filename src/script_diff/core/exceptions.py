"""Custom exceptions for the script diff service."""


class ScriptDiffError(Exception):
    """Base exception for all script diff errors."""
    pass


class ConfigError(ScriptDiffError):
    """Configuration loading or validation error."""
    pass


class InputTooLargeError(ScriptDiffError):
    """Input text exceeds a configured size limit."""

    def __init__(self, field: str, length: int, limit: int, unit: str = "characters"):
        self.field = field
        self.length = length
        self.limit = limit
        self.unit = unit
        super().__init__(f"'{field}' is {length} {unit}, limit is {limit}")
