"""Application configuration."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, resolved once at startup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    host: str = "0.0.0.0"
    port: int = 3000

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not (1 <= v <= 65535):
            raise ValueError("PORT must be between 1 and 65535")
        return v

    version: str = "1.0.0"
    node_env: str = "development"
    build_number: str = "dev"
    git_commit: str = "unknown"
    # Unset means "now", evaluated per request.
    build_date: str | None = None
    log_level: str = "INFO"

    @property
    def environment(self) -> str:
        return self.node_env

    @property
    def is_production(self) -> bool:
        return self.node_env == "production"
