"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from petdoc.domain.entities import DeploymentMode

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./petdoc.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    deployment_mode: DeploymentMode = Field(
        default=DeploymentMode.DEVELOPMENT,
        description="Environment profile that selects the reminder cadence",
    )
    dashboard_url: str = Field(
        default="http://localhost:8080/dashboard",
        description="Link to the owner dashboard included in every reminder",
        min_length=1,
    )
    reminder_offsets: list[int] = Field(
        default_factory=lambda: [15, 7, 1],
        description="Days ahead of the booster date that trigger a reminder in production",
    )
    reminder_hour: int = Field(default=8, ge=0, le=23)
    reminder_minute: int = Field(default=0, ge=0, le=59)
    development_interval_minutes: int = Field(
        default=30,
        description="Minutes between reminder checks in development",
        gt=0,
    )
    scheduler_enabled: bool = Field(
        default=True,
        description="Start the background reminder scheduler with the application",
    )
    app_timezone: str | None = Field(
        default=None,
        description="IANA timezone (or UTC offset) used to compute the current date",
    )
    sendgrid_api_key: str | None = Field(
        default=None,
        description="SendGrid API key used for sending transactional emails via the REST API",
    )
    sendgrid_sender: str | None = Field(
        default=None,
        description="Email address that will appear as the sender of transactional messages",
        min_length=3,
    )
    cors_allowed_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:4200"],
        description="Origins allowed to call the API from a browser",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )

    @field_validator("deployment_mode", mode="before")
    @classmethod
    def _parse_deployment_mode(cls, value: object) -> object:
        if isinstance(value, str):
            return DeploymentMode.parse(value)
        return value

    @field_validator("reminder_offsets")
    @classmethod
    def _validate_offsets(cls, value: list[int]) -> list[int]:
        if not value:
            raise ValueError("REMINDER_OFFSETS must contain at least one offset")
        if any(offset < 0 for offset in value):
            raise ValueError("REMINDER_OFFSETS cannot contain negative values")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper() or "INFO"
        return value

    @model_validator(mode="after")
    def _validate_sendgrid_pair(self) -> "Settings":
        if bool(self.sendgrid_api_key) ^ bool(self.sendgrid_sender):
            raise ValueError(
                "SENDGRID_API_KEY and SENDGRID_SENDER must both be provided to enable email"
            )
        if self.sendgrid_sender and "@" not in self.sendgrid_sender:
            raise ValueError("SENDGRID_SENDER must be a valid email address")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
