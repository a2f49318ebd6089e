"""Value types shared by the event builder, encoder and reporter."""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Severity(str, Enum):
    """Event severity, valued by its wire token."""

    FATAL = "fatal"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be empty")
    return value


class EndpointIdentity(BaseModel):
    """
    Where and as whom events are submitted.

    Determines both the X-Sentry-Auth header and the store URL.
    The three parts are supplied separately, never parsed from a DSN.
    """

    model_config = ConfigDict(frozen=True)

    public_key: str
    host: str
    project_id: str

    @field_validator("public_key", "host", "project_id", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        """Accept integer project ids from settings or callers."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("public_key", "host", "project_id")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return _require_text(v)


class ReleaseContext(BaseModel):
    """Release, environment and scope of the reporting application."""

    model_config = ConfigDict(frozen=True)

    release: str
    environment: str
    context: str

    @field_validator("release", "environment", "context")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return _require_text(v)


class EventRecord(BaseModel):
    """
    A single event, built immediately before it is sent.

    Attributes:
        event_id: 32 lowercase hex digits, no dashes
        timestamp: Unix time in whole seconds
        level: Event severity
        message: Free-form message, may be empty
        extra: Arbitrary JSON-serialisable metadata
    """

    model_config = ConfigDict(frozen=True)

    event_id: str = Field(pattern=r"^[0-9a-f]{32}$")
    timestamp: int
    level: Severity
    message: str = ""
    extra: Dict[str, Any] = Field(default_factory=dict)
