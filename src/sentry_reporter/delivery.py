"""Delivery of encoded store requests with bounded rate-limit retries."""

import asyncio
import logging
from typing import Awaitable, Callable

import httpx
import structlog

from .encoder import StoreRequest

# Emits through stdlib logging, silent until the application configures it.
logger = structlog.wrap_logger(
    logging.getLogger(__name__),
    wrapper_class=structlog.stdlib.BoundLogger,
)

MAX_RETRIES = 60
RETRY_DELAY_SECONDS = 1.0
RATE_LIMITED = 429


async def deliver(
    http_client: httpx.AsyncClient,
    request: StoreRequest,
    *,
    max_retries: int = MAX_RETRIES,
    retry_delay: float = RETRY_DELAY_SECONDS,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> str:
    """
    Post a store request, retrying while the server rate limits.

    Only HTTP 429 is retried: up to max_retries times, with a fixed delay
    between attempts. The identical request (same event id, timestamp and
    auth header) is re-posted each time. The response body is ignored.

    Args:
        http_client: Client used to send the request
        request: Encoded store request
        max_retries: Retries allowed after the first attempt
        retry_delay: Seconds to wait before each retry
        sleep: Awaitable sleep, replaceable in tests

    Returns:
        The event id carried by the request

    Raises:
        httpx.RequestError: On network or TLS failure, without retry
        httpx.HTTPStatusError: On a non-2xx status, or on 429 once
            retries are exhausted
    """
    remaining = max_retries

    while True:
        response = await http_client.request(
            request.method,
            request.url,
            content=request.body,
            headers=request.headers,
        )

        if response.status_code == RATE_LIMITED and remaining > 0:
            remaining -= 1
            logger.debug(
                "event_rate_limited",
                event_id=request.event_id,
                retries_left=remaining,
                retry_delay=retry_delay,
            )
            await sleep(retry_delay)
            continue

        response.raise_for_status()
        return request.event_id
