"""Encode event records into authenticated store requests."""

from dataclasses import dataclass, field
from typing import Any, Dict

import orjson

from . import __version__
from .models import EndpointIdentity, EventRecord, ReleaseContext

CLIENT_NAME = "sentry-reporter"
CLIENT_VERSION = __version__
PLATFORM = "python"
PROTOCOL_VERSION = 7

AUTH_HEADER = "X-Sentry-Auth"


@dataclass(frozen=True)
class StoreRequest:
    """An encoded POST to the store endpoint, reused as-is across retries."""

    url: str
    body: bytes
    event_id: str
    headers: Dict[str, str] = field(default_factory=dict)
    method: str = "POST"


def endpoint_url(host: str, project_id: str) -> str:
    """
    Build the legacy store URL.

    Host and project id are concatenated as given, without escaping.
    """
    return "https://" + host + "/api/" + str(project_id) + "/store/"


def auth_header(public_key: str, timestamp: int) -> str:
    """
    Build the X-Sentry-Auth header value.

    Format:
    Sentry sentry_version=7,sentry_client=<name>/<version>,
           sentry_timestamp=<seconds>,sentry_key=<public_key>
    """
    parts = [
        f"sentry_version={PROTOCOL_VERSION}",
        f"sentry_client={CLIENT_NAME}/{CLIENT_VERSION}",
        f"sentry_timestamp={timestamp}",
        f"sentry_key={public_key}",
    ]
    return "Sentry " + ",".join(parts)


def build_payload(release_context: ReleaseContext, event: EventRecord) -> Dict[str, Any]:
    """Shape an event into the store endpoint's JSON body."""
    return {
        "event_id": event.event_id,
        "timestamp": event.timestamp,
        "platform": PLATFORM,
        "level": event.level.value,
        "release": release_context.release,
        "environment": release_context.environment,
        "tags": {"context": release_context.context},
        "message": {"formatted": event.message},
        "extra": dict(event.extra),
    }


def encode(
    identity: EndpointIdentity,
    release_context: ReleaseContext,
    event: EventRecord,
) -> StoreRequest:
    """
    Encode an event into a store request.

    Args:
        identity: Public key, host and project id
        release_context: Release, environment and context tags
        event: The event to send

    Returns:
        StoreRequest carrying the event id

    Raises:
        orjson.JSONEncodeError: If extra metadata is not JSON-serialisable
    """
    body = orjson.dumps(build_payload(release_context, event))

    return StoreRequest(
        url=endpoint_url(identity.host, identity.project_id),
        body=body,
        event_id=event.event_id,
        headers={
            AUTH_HEADER: auth_header(identity.public_key, event.timestamp),
            "Content-Type": "application/json",
        },
    )
