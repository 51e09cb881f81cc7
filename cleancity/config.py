"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./cleancity.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    jwt_secret: str = Field(
        default="change-me",
        description="Secret the authentication provider uses to sign access tokens",
        min_length=1,
    )
    jwt_algorithm: str = Field(default="HS256")
    jwt_audience: str | None = Field(
        default="authenticated",
        description="Expected audience claim of access tokens; empty disables the check",
    )
    app_base_url: str = Field(
        default="http://localhost:5173",
        description="Origin of the web client, used to build notification click URLs",
    )
    ntfy_base_url: str = Field(
        default="https://ntfy.sh",
        description="Base URL of the ntfy push relay",
    )
    ntfy_auth_token: str | None = Field(
        default=None,
        description="Optional bearer token attached to ntfy publish requests",
    )
    ntfy_topic_prefix: str = Field(default="pi-clean-city", min_length=1)
    ntfy_timeout_seconds: float = Field(default=10.0)
    notifications_enabled: bool = Field(default=True)
    post_new_hours: float = Field(default=24, gt=0)
    post_popular_rating: float = Field(default=4.0, ge=0)
    verified_author_ids: list[str] = Field(default_factory=list)
    app_timezone: str = Field(default="Europe/Zagreb")
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def _validate_ntfy(self) -> "Settings":
        if self.ntfy_timeout_seconds <= 0:
            raise ValueError("NTFY_TIMEOUT_SECONDS must be greater than zero")
        if not self.ntfy_base_url.startswith(("http://", "https://")):
            raise ValueError("NTFY_BASE_URL must be an http(s) URL")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
