"""Pydantic configuration schemas with validation."""

from typing import Literal
from pydantic import BaseModel, Field

from script_diff.api.config import APIConfig


class ScriptDiffConfig(BaseModel):
    """Root configuration for the script diff service."""
    api: APIConfig = Field(default_factory=APIConfig)

    # Global settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["simple", "detailed"] = "simple"
