"""Tests for the configured reporter."""

import asyncio

import httpx
import orjson
import pytest
import respx

from sentry_reporter.client import SentryReporter
from sentry_reporter.config import ReporterSettings
from sentry_reporter.models import Severity

STORE_URL = "https://o1.example.com/api/42/store/"


@pytest.mark.asyncio
class TestSentryReporter:
    """Test cases for SentryReporter."""

    @pytest.mark.parametrize(
        "method,token",
        [
            ("fatal", "fatal"),
            ("error", "error"),
            ("warning", "warning"),
            ("info", "info"),
            ("debug", "debug"),
        ],
    )
    @respx.mock
    async def test_severity_entry_points(self, identity, release_context, method, token):
        """Test each entry point sends its level and returns the event id."""
        route = respx.post(STORE_URL).mock(return_value=httpx.Response(200))

        async with httpx.AsyncClient() as http_client:
            reporter = SentryReporter(identity, release_context, http_client=http_client)
            event_id = await getattr(reporter, method)("something happened", {"a": 1, "b": "x"})

        body = orjson.loads(route.calls[0].request.content)
        assert body["level"] == token
        assert body["event_id"] == event_id
        assert body["message"] == {"formatted": "something happened"}
        assert body["extra"] == {"a": 1, "b": "x"}
        assert body["release"] == "shop@2.3.1"
        assert body["environment"] == "staging"
        assert body["tags"] == {"context": "checkout"}

    @respx.mock
    async def test_capture_without_extra(self, identity, release_context):
        """Test capture with no metadata sends an empty extra object."""
        route = respx.post(STORE_URL).mock(return_value=httpx.Response(200))

        async with httpx.AsyncClient() as http_client:
            reporter = SentryReporter(identity, release_context, http_client=http_client)
            await reporter.capture(Severity.INFO, "")

        assert orjson.loads(route.calls[0].request.content)["extra"] == {}

    @respx.mock
    async def test_concurrent_calls_are_independent(self, identity, release_context):
        """Test concurrent submissions get distinct event ids."""
        route = respx.post(STORE_URL).mock(return_value=httpx.Response(200))

        async with httpx.AsyncClient() as http_client:
            reporter = SentryReporter(identity, release_context, http_client=http_client)
            ids = await asyncio.gather(*(reporter.error(f"e{i}") for i in range(20)))

        sent = {orjson.loads(call.request.content)["event_id"] for call in route.calls}
        assert len(set(ids)) == 20
        assert sent == set(ids)

    @respx.mock
    async def test_rate_limit_settings_used(self, identity, release_context):
        """Test the reporter's retry budget applies."""
        route = respx.post(STORE_URL).mock(return_value=httpx.Response(429))

        async with httpx.AsyncClient() as http_client:
            reporter = SentryReporter(
                identity,
                release_context,
                http_client=http_client,
                max_retries=2,
                retry_delay=0,
            )
            with pytest.raises(httpx.HTTPStatusError):
                await reporter.warning("slow down")

        assert route.call_count == 3

    @respx.mock
    async def test_success_prints_nothing(self, identity, release_context, capsys):
        """Test a plain call writes nothing to the host application's output."""
        respx.post(STORE_URL).mock(return_value=httpx.Response(200))

        async with httpx.AsyncClient() as http_client:
            reporter = SentryReporter(identity, release_context, http_client=http_client)
            await reporter.error("boom")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    @respx.mock
    async def test_error_propagates(self, identity, release_context):
        """Test delivery errors reach the caller."""
        respx.post(STORE_URL).mock(side_effect=httpx.ConnectTimeout("timed out"))

        async with httpx.AsyncClient() as http_client:
            reporter = SentryReporter(identity, release_context, http_client=http_client)
            with pytest.raises(httpx.ConnectTimeout):
                await reporter.fatal("down")

    async def test_supplied_client_left_open(self, identity, release_context):
        """Test a caller's client is not closed by the reporter."""
        async with httpx.AsyncClient() as http_client:
            async with SentryReporter(identity, release_context, http_client=http_client):
                pass
            assert not http_client.is_closed

    async def test_owned_client_closed(self, identity, release_context):
        """Test the reporter closes the client it created."""
        reporter = SentryReporter(identity, release_context)
        async with reporter:
            assert not reporter._http_client.is_closed
        assert reporter._http_client.is_closed

    async def test_from_settings(self):
        """Test building a reporter from settings."""
        settings = ReporterSettings(
            _env_file=None,
            public_key="key",
            host="sentry.example.com",
            project_id="7",
            release="app@1.0.0",
            environment="production",
            context="web",
            max_retries=5,
            retry_delay_seconds=0.5,
        )

        async with SentryReporter.from_settings(settings) as reporter:
            assert reporter.identity.host == "sentry.example.com"
            assert reporter.identity.project_id == "7"
            assert reporter.release_context.context == "web"
            assert reporter._max_retries == 5
            assert reporter._retry_delay == 0.5
