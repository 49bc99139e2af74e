"""Script diff endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Request

from script_diff.api.config import LimitSettings
from script_diff.api.deps import Config
from script_diff.api.schemas import DiffRequest, DiffResponse, DiffWordSchema, ErrorResponse
from script_diff.core.exceptions import InputTooLargeError
from script_diff.diff import count_words, diff_script, is_blank

router = APIRouter()


def check_text_limits(body: DiffRequest, limits: LimitSettings) -> None:
    """Reject requests whose alignment would exceed the configured limits.

    Characters are checked first, then words per field, then the product of
    both word counts. A blank transcription is never aligned, so it only
    counts against the character limit.

    Raises:
        InputTooLargeError: If any limit is exceeded
    """
    for field in ("original", "transcription"):
        text = getattr(body, field) or ""
        if len(text) > limits.max_text_chars:
            raise InputTooLargeError(field, len(text), limits.max_text_chars)

    word_counts = {}
    for field in ("original", "transcription"):
        words = count_words(getattr(body, field))
        if words > limits.max_words:
            raise InputTooLargeError(field, words, limits.max_words, unit="words")
        word_counts[field] = words

    if is_blank(body.transcription):
        return

    cells = word_counts["original"] * word_counts["transcription"]
    if cells > limits.max_cells:
        raise InputTooLargeError(
            "original x transcription", cells, limits.max_cells, unit="word pairs"
        )


@router.post(
    "/diff",
    response_model=DiffResponse,
    responses={413: {"model": ErrorResponse, "description": "Text too long"}},
    summary="Diff a transcript against its original script",
)
def create_diff(body: DiffRequest, request: Request, config: Config) -> DiffResponse:
    """Mark which original script words the transcript reproduced.

    Returns one entry per whitespace-delimited word of ``original``, in order,
    with its original spelling. A null or blank transcription leaves every
    word unmatched.
    """
    check_text_limits(body, config.limits)

    words = diff_script(body.original, body.transcription)

    # Picked up by LoggingMiddleware for the request log line
    matched = sum(1 for w in words if w.matched)
    request.state.diff_summary = f"{matched}/{len(words)} words matched"

    return DiffResponse(
        words=[DiffWordSchema(word=w.word, matched=w.matched) for w in words],
    )
