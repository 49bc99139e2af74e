"""FastAPI dependencies for configuration injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from script_diff.api.config import APIConfig, DEFAULT_API_CONFIG


def get_api_config(request: Request) -> APIConfig:
    """Get the API config the app was created with."""
    return getattr(request.app.state, "config", DEFAULT_API_CONFIG)


Config = Annotated[APIConfig, Depends(get_api_config)]
