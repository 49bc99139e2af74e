"""Request and response schemas for API endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Common Schemas
# ============================================================================

class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(description="Human-readable error message")
    code: str = Field(description="Machine-readable error code")
    status: int = Field(description="HTTP status code")
    request_id: str | None = Field(default=None, description="Request ID for tracing")
    details: dict[str, Any] | None = Field(default=None, description="Additional context")

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": "'original' is 25000 characters, limit is 20000",
                "code": "TEXT_TOO_LONG",
                "status": 413,
                "request_id": "550e8400-e29b-41d4-a716-446655440000",
                "details": {"field": "original", "length": 25000, "limit": 20000},
            }
        }
    }


# ============================================================================
# Diff Schemas
# ============================================================================

class DiffRequest(BaseModel):
    """Original script and the learner's transcribed attempt."""

    original: str = Field(description="Script text the learner memorized")
    transcription: str | None = Field(
        default=None,
        description="Speech-to-text transcript; null or blank means nothing was recognized",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "original": "I am a student.",
                "transcription": "i am student",
            }
        }
    }


class DiffWordSchema(BaseModel):
    """A single original word and whether it was reproduced."""

    word: str = Field(description="Original spelling, punctuation included")
    matched: bool = Field(description="True if the word appears in the transcript alignment")


class DiffResponse(BaseModel):
    """Per-word diff in original script order."""

    words: list[DiffWordSchema] = Field(description="One entry per original word")

    model_config = {
        "json_schema_extra": {
            "example": {
                "words": [
                    {"word": "I", "matched": True},
                    {"word": "am", "matched": True},
                    {"word": "a", "matched": False},
                    {"word": "student.", "matched": True},
                ]
            }
        }
    }
