"""Configured reporter exposing one coroutine per severity."""

from typing import Any, Mapping, Optional

import httpx

from .config import ReporterSettings
from .delivery import MAX_RETRIES, RETRY_DELAY_SECONDS, deliver
from .encoder import encode
from .event import build_event
from .models import EndpointIdentity, ReleaseContext, Severity


class SentryReporter:
    """
    Sentry store endpoint reporter.

    Holds an immutable endpoint identity and release context and may be
    shared between concurrent tasks. Each call builds, encodes and
    delivers one event independently.

    Usage:
        async with SentryReporter(identity, release) as reporter:
            event_id = await reporter.error("payment failed", {"order": 42})
    """

    def __init__(
        self,
        identity: EndpointIdentity,
        release_context: ReleaseContext,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        max_retries: int = MAX_RETRIES,
        retry_delay: float = RETRY_DELAY_SECONDS,
    ):
        """
        Initialize reporter.

        Args:
            identity: Public key, host and project id
            release_context: Release, environment and context tags
            http_client: Client to send through. If omitted, the reporter
                creates one without a timeout and closes it in aclose()
            max_retries: Retries allowed on HTTP 429
            retry_delay: Seconds between retries
        """
        self._identity = identity
        self._release_context = release_context
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=None)
        self._http_client = http_client
        self._max_retries = max_retries
        self._retry_delay = retry_delay

    @classmethod
    def from_settings(
        cls,
        settings: ReporterSettings,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "SentryReporter":
        """Create a reporter from loaded settings."""
        return cls(
            settings.endpoint_identity(),
            settings.release_context(),
            http_client=http_client,
            max_retries=settings.max_retries,
            retry_delay=settings.retry_delay_seconds,
        )

    @property
    def identity(self) -> EndpointIdentity:
        return self._identity

    @property
    def release_context(self) -> ReleaseContext:
        return self._release_context

    async def capture(
        self,
        severity: Severity,
        message: str,
        extra: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """
        Send one event.

        Returns:
            The generated event id

        Raises:
            httpx.RequestError: Network failure
            httpx.HTTPStatusError: Rejected or still rate limited
        """
        event = build_event(severity, message, extra)
        request = encode(self._identity, self._release_context, event)

        return await deliver(
            self._http_client,
            request,
            max_retries=self._max_retries,
            retry_delay=self._retry_delay,
        )

    async def fatal(self, message: str, extra: Optional[Mapping[str, Any]] = None) -> str:
        return await self.capture(Severity.FATAL, message, extra)

    async def error(self, message: str, extra: Optional[Mapping[str, Any]] = None) -> str:
        return await self.capture(Severity.ERROR, message, extra)

    async def warning(self, message: str, extra: Optional[Mapping[str, Any]] = None) -> str:
        return await self.capture(Severity.WARNING, message, extra)

    async def info(self, message: str, extra: Optional[Mapping[str, Any]] = None) -> str:
        return await self.capture(Severity.INFO, message, extra)

    async def debug(self, message: str, extra: Optional[Mapping[str, Any]] = None) -> str:
        return await self.capture(Severity.DEBUG, message, extra)

    async def aclose(self) -> None:
        """Close the HTTP client if this reporter created it."""
        if self._owns_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "SentryReporter":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
