"""Shared fixtures - a fresh app per test with service env vars cleared."""

import pytest
from fastapi.testclient import TestClient

from womm.config import Settings
from womm.main import create_app

SERVICE_ENV_VARS = (
    "PORT",
    "HOST",
    "VERSION",
    "NODE_ENV",
    "BUILD_NUMBER",
    "GIT_COMMIT",
    "BUILD_DATE",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the host environment out of settings resolution."""
    for name in SERVICE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Unhandled errors are answered by the 500 handler; don't re-raise them here.
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
