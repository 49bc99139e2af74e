"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from script_diff import __version__
from script_diff.api.config import APIConfig, DEFAULT_API_CONFIG
from script_diff.api.health import router as health_router
from script_diff.api.middleware import setup_middleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    logger.info("Starting Script Diff API...")
    app.state.initialized = True
    logger.info(f"Script Diff API started (max_text_chars={app.state.config.limits.max_text_chars})")

    yield

    app.state.initialized = False
    logger.info("Script Diff API shutdown complete")


def create_app(config: APIConfig | None = None) -> FastAPI:
    """Create and configure FastAPI application."""
    config = config or DEFAULT_API_CONFIG

    app = FastAPI(
        title="Script Diff API",
        description="Compare a spoken-script transcript against the original script word by word",
        version=__version__,
        docs_url="/docs" if config.enable_docs else None,
        redoc_url="/redoc" if config.enable_docs else None,
        openapi_url="/openapi.json" if config.enable_docs else None,
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.initialized = False

    if config.enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    setup_middleware(app)

    app.include_router(health_router, prefix="/health", tags=["health"])

    from script_diff.api.v1.router import router as v1_router
    app.include_router(v1_router, prefix="/api/v1")

    return app
