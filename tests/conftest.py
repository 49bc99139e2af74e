"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def api_config():
    """API configuration with small size limits for tests."""
    from script_diff.api.config import APIConfig, LimitSettings
    return APIConfig(limits=LimitSettings(max_text_chars=200, max_words=20, max_cells=100))


@pytest.fixture
def app(api_config):
    """FastAPI app built from the test config."""
    from script_diff.api.app import create_app
    return create_app(api_config)


@pytest.fixture
def client(app):
    """Test client with the lifespan started."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def clean_env(monkeypatch):
    """Remove SCRIPT_DIFF__* variables leaking in from the outer environment."""
    import os
    for key in list(os.environ):
        if key.startswith("SCRIPT_DIFF__"):
            monkeypatch.delenv(key)
    return monkeypatch


@pytest.fixture
def write_yaml(tmp_path):
    """Write a YAML string to a file under tmp_path and return its path."""
    def _write(name: str, content: str):
        path = tmp_path / name
        path.write_text(content)
        return path
    return _write
