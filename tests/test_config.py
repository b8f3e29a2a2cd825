"""Tests for Settings loading."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from task_manager.config import ConfigError, Settings


def test_from_env_reads_values():
    settings = Settings.from_env({
        "AUTH_SECRET": "abc",
        "DATABASE_URL": "postgresql://user:pw@db/tasks",
        "PORT": "8080",
        "TOKEN_TTL_SECONDS": "120",
        "LOG_LEVEL": "debug",
    })
    assert settings.auth_secret == "abc"
    assert settings.database_url == "postgresql://user:pw@db/tasks"
    assert settings.port == 8080
    assert settings.token_ttl_seconds == 120
    assert settings.log_level == "DEBUG"
    assert not settings.is_sqlite


def test_from_env_defaults():
    settings = Settings.from_env({"AUTH_SECRET": "abc"})
    assert settings.database_url == "sqlite:///./todo_app.db"
    assert settings.port == 5000
    assert settings.token_ttl_seconds == 3600
    assert settings.is_sqlite


@pytest.mark.parametrize("environ", [{}, {"AUTH_SECRET": ""}, {"AUTH_SECRET": "   "}])
def test_missing_secret_fails_fast(environ):
    with pytest.raises(ConfigError):
        Settings.from_env(environ)


def test_unparseable_port_is_config_error():
    with pytest.raises(ConfigError):
        Settings.from_env({"AUTH_SECRET": "abc", "PORT": "not-a-port"})


def test_settings_are_immutable():
    settings = Settings(auth_secret="abc")
    with pytest.raises(PydanticValidationError):
        settings.auth_secret = "other"
