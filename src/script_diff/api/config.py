"""API configuration with Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LimitSettings(BaseModel):
    """Input size limits for diff requests."""

    max_text_chars: int = Field(default=20_000, ge=1, description="Max characters per text field")
    # The alignment table holds one cell per (original word, transcribed word) pair
    max_words: int = Field(default=1_000, ge=1, description="Max words per text field")
    max_cells: int = Field(
        default=250_000,
        ge=1,
        description="Max original words times transcribed words per request",
    )


class APIConfig(BaseModel):
    """Complete API configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)

    # Feature flags
    enable_docs: bool = True
    enable_cors: bool = True
    cors_origins: list[str] = ["*"]

    # Sub-configs
    limits: LimitSettings = LimitSettings()


# Default configuration
DEFAULT_API_CONFIG = APIConfig()
