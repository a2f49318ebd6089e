"""Async client for reporting events to a Sentry-compatible store endpoint."""

__version__ = "1.0.0"

from .client import SentryReporter
from .config import ReporterSettings
from .delivery import deliver
from .encoder import StoreRequest, encode
from .event import build_event, generate_event_id
from .logging_config import configure_logging
from .models import EndpointIdentity, EventRecord, ReleaseContext, Severity

__all__ = [
    "EndpointIdentity",
    "EventRecord",
    "ReleaseContext",
    "ReporterSettings",
    "SentryReporter",
    "Severity",
    "StoreRequest",
    "build_event",
    "configure_logging",
    "deliver",
    "encode",
    "generate_event_id",
]
