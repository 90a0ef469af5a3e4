"""Tests for settings resolution."""

import pytest
from pydantic import ValidationError

from womm.config import Settings


def test_defaults():
    """Absent variables fall back to fixed literals."""
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.version == "1.0.0"
    assert settings.environment == "development"
    assert settings.build_number == "dev"
    assert settings.git_commit == "unknown"
    assert settings.build_date is None
    assert settings.is_production is False


def test_reads_environment(monkeypatch):
    """Values come from the environment."""
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("VERSION", "2.3.4")
    monkeypatch.setenv("NODE_ENV", "production")
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.version == "2.3.4"
    assert settings.environment == "production"
    assert settings.is_production is True


def test_empty_values_use_defaults(monkeypatch):
    """Empty variables are treated as absent, never an error."""
    for name in ("PORT", "VERSION", "NODE_ENV", "BUILD_NUMBER", "GIT_COMMIT", "BUILD_DATE"):
        monkeypatch.setenv(name, "")
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.version == "1.0.0"
    assert settings.environment == "development"
    assert settings.build_number == "dev"
    assert settings.git_commit == "unknown"
    assert settings.build_date is None


def test_only_literal_production_is_production():
    """Verbose errors are hidden only for NODE_ENV=production exactly."""
    assert Settings(_env_file=None, node_env="Production").is_production is False
    assert Settings(_env_file=None, node_env="prod").is_production is False


@pytest.mark.parametrize("port", ["0", "70000", "abc"])
def test_invalid_port_rejected(monkeypatch, port):
    """A bad PORT fails settings resolution at startup."""
    monkeypatch.setenv("PORT", port)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_are_immutable():
    """Resolved settings cannot be changed after startup."""
    settings = Settings(_env_file=None)
    with pytest.raises(ValidationError):
        settings.version = "0.0.0"
