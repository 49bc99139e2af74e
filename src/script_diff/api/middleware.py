"""Middleware for error handling, logging, and request context."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from script_diff.core.exceptions import InputTooLargeError, ScriptDiffError

logger = logging.getLogger(__name__)


# ============================================================================
# Request ID Middleware
# ============================================================================

class RequestIDMiddleware(BaseHTTPMiddleware):
    """Add X-Request-ID header to all requests/responses."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Get or generate request ID
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))

        # Store in request state
        request.state.request_id = request_id

        # Process request
        response = await call_next(request)

        # Add to response headers
        response.headers["X-Request-ID"] = request_id

        return response


# ============================================================================
# Logging Middleware
# ============================================================================

class LoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with timing and, for diffs, the match outcome."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        # Get request info
        request_id = getattr(request.state, "request_id", "unknown")
        client_ip = request.client.host if request.client else "unknown"

        # Process request
        response = await call_next(request)

        # Calculate duration
        duration_ms = (time.perf_counter() - start_time) * 1000

        status_code = response.status_code
        log_msg = (
            f"{request.method} {request.url.path} - {status_code} - {duration_ms:.1f}ms "
            f"[{request_id}] from {client_ip}"
        )

        # Match outcome or rejection reason, set by the diff endpoint and handlers
        outcome = getattr(request.state, "diff_summary", None)
        if outcome:
            log_msg += f" ({outcome})"

        # Log based on status code
        if status_code >= 500:
            logger.error(log_msg)
        elif status_code >= 400:
            logger.warning(log_msg)
        else:
            logger.info(log_msg)

        # Add timing header
        response.headers["X-Response-Time-Ms"] = f"{duration_ms:.1f}"

        return response


# ============================================================================
# Exception Handlers
# ============================================================================

def create_error_response(
    status_code: int,
    error: str,
    code: str,
    request_id: str | None = None,
    details: dict | None = None,
) -> JSONResponse:
    """Create consistent error response."""
    content = {
        "error": error,
        "code": code,
        "status": status_code,
    }

    if request_id:
        content["request_id"] = request_id
    if details:
        content["details"] = details

    return JSONResponse(status_code=status_code, content=content)


async def script_diff_error_handler(request: Request, exc: ScriptDiffError) -> JSONResponse:
    """Handle service errors raised from endpoints."""
    request_id = getattr(request.state, "request_id", None)

    if isinstance(exc, InputTooLargeError):
        request.state.diff_summary = f"rejected: {exc}"
        return create_error_response(
            status_code=413,
            error=str(exc),
            code="TEXT_TOO_LONG",
            request_id=request_id,
            details={
                "field": exc.field,
                "length": exc.length,
                "limit": exc.limit,
                "unit": exc.unit,
            },
        )

    logger.error(f"Service error [{request_id}]: {exc}")
    return create_error_response(
        status_code=500,
        error="Diff operation failed",
        code="SERVICE_ERROR",
        request_id=request_id,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    request_id = getattr(request.state, "request_id", None)

    logger.exception(f"Unhandled exception [{request_id}]: {exc}")

    return create_error_response(
        status_code=500,
        error="Internal server error",
        code="INTERNAL_ERROR",
        request_id=request_id,
    )


# ============================================================================
# Setup Function
# ============================================================================

def setup_middleware(app: FastAPI) -> None:
    """Add exception handlers and middleware to the app.

    Middleware runs in reverse order of addition: the request ID is assigned
    before the logging middleware reads it.
    """
    app.add_exception_handler(ScriptDiffError, script_diff_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
