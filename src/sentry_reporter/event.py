"""Event construction: identifiers, timestamps and metadata."""

import time
import uuid
from typing import Any, Callable, Mapping, Optional

from .models import EventRecord, Severity


def generate_event_id() -> str:
    """Return a fresh dash-free, lowercase hex event id."""
    return uuid.uuid4().hex


def build_event(
    severity: Severity,
    message: str,
    extra: Optional[Mapping[str, Any]] = None,
    *,
    clock: Callable[[], int] = time.time_ns,
) -> EventRecord:
    """
    Build an event record for immediate submission.

    The clock is read once. Sub-second precision is dropped: wall-clock
    milliseconds are divided by 1000 to get whole seconds.

    Args:
        severity: Event severity
        message: Message text, may be empty
        extra: Metadata mapping, copied into the record
        clock: Nanosecond wall clock

    Returns:
        EventRecord with a new id and the captured timestamp
    """
    millis = clock() // 1_000_000

    return EventRecord(
        event_id=generate_event_id(),
        timestamp=millis // 1000,
        level=Severity(severity),
        message=message,
        extra=dict(extra or {}),
    )
