"""Configuration management using Pydantic Settings."""

from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import EndpointIdentity, ReleaseContext


class ReporterSettings(BaseSettings):
    """Reporter settings loaded from SENTRY_REPORTER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SENTRY_REPORTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Endpoint identity
    public_key: str
    host: str
    project_id: str

    # Release context
    release: str
    environment: str = "production"
    context: str = "default"

    # Logging
    log_level: str = "INFO"

    # Delivery
    max_retries: int = 60
    retry_delay_seconds: float = 1.0

    @field_validator("project_id", mode="before")
    @classmethod
    def parse_project_id(cls, v: Any) -> Any:
        """Accept numeric project ids."""
        if isinstance(v, int):
            return str(v)
        return v

    @field_validator("log_level")
    @classmethod
    def parse_log_level(cls, v: str) -> str:
        """Normalise log level to upper case."""
        return v.strip().upper()

    @field_validator("max_retries")
    @classmethod
    def check_max_retries(cls, v: int) -> int:
        if v < 0:
            raise ValueError("max_retries must be >= 0")
        return v

    @field_validator("retry_delay_seconds")
    @classmethod
    def check_retry_delay(cls, v: float) -> float:
        if v < 0:
            raise ValueError("retry_delay_seconds must be >= 0")
        return v

    def endpoint_identity(self) -> EndpointIdentity:
        """Build the endpoint identity for the configured project."""
        return EndpointIdentity(
            public_key=self.public_key,
            host=self.host,
            project_id=self.project_id,
        )

    def release_context(self) -> ReleaseContext:
        """Build the release context attached to every event."""
        return ReleaseContext(
            release=self.release,
            environment=self.environment,
            context=self.context,
        )
