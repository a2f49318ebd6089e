"""Shared fixtures for reporter tests."""

import pytest

from sentry_reporter.models import EndpointIdentity, ReleaseContext

PUBLIC_KEY = "abc123"
HOST = "o1.example.com"
PROJECT_ID = "42"
STORE_URL = f"https://{HOST}/api/{PROJECT_ID}/store/"


@pytest.fixture
def identity() -> EndpointIdentity:
    return EndpointIdentity(public_key=PUBLIC_KEY, host=HOST, project_id=PROJECT_ID)


@pytest.fixture
def release_context() -> ReleaseContext:
    return ReleaseContext(release="shop@2.3.1", environment="staging", context="checkout")


@pytest.fixture
def sleeps():
    """Record retry delays instead of sleeping."""
    delays = []

    async def fake_sleep(delay: float) -> None:
        delays.append(delay)

    fake_sleep.delays = delays
    return fake_sleep
