"""Runtime configuration for the Task Manager API."""
import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field


class ConfigError(RuntimeError):
    """Raised at startup when required configuration is missing or invalid."""


class Settings(BaseModel):
    """Immutable process configuration, built once at startup."""

    model_config = ConfigDict(frozen=True)

    database_url: str = "sqlite:///./todo_app.db"
    port: int = 5000
    auth_secret: str = Field(..., min_length=1)
    token_ttl_seconds: int = Field(default=3600, gt=0)
    environment: str = "development"
    frontend_url: Optional[str] = "http://localhost:3000"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from; defaults to ``os.environ`` after
                loading a ``.env`` file.

        Returns:
            Settings instance

        Raises:
            ConfigError: If AUTH_SECRET is missing or a value cannot be parsed
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        secret = (environ.get("AUTH_SECRET") or "").strip()
        if not secret:
            raise ConfigError("AUTH_SECRET must be set to a non-empty signing key")

        try:
            return cls(
                database_url=environ.get("DATABASE_URL", "sqlite:///./todo_app.db"),
                port=int(environ.get("PORT", "5000")),
                auth_secret=secret,
                token_ttl_seconds=int(environ.get("TOKEN_TTL_SECONDS", "3600")),
                environment=environ.get("ENVIRONMENT", "development"),
                frontend_url=environ.get("FRONTEND_URL", "http://localhost:3000"),
                log_level=environ.get("LOG_LEVEL", "INFO").upper(),
            )
        except ValueError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")
