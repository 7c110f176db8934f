# =============================================================================
# core/dispatcher.py  —  Retrying HTTP Dispatcher
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   POSTs one JSON payload to one URL and returns what came back.
#
# THE RULES:
#   - Any HTTP response is an answer.  A 402 or a 400 is returned as a normal
#     DispatchOutcome, not raised, so the router can branch on the status.
#   - Transient failures are retried with exponential backoff:
#       * transport errors (connection refused, timeout, DNS)
#       * responses with status >= 500
#   - Delays are base_delay_ms * 2**attempt_index:  1000ms, 2000ms, 4000ms...
#   - When every attempt fails transiently → MaxRetriesExceeded.
#
#   Attempt timeline with max_attempts=3, base_delay_ms=1000, server down:
#
#     attempt 0 ── fail ── sleep 1000ms
#     attempt 1 ── fail ── sleep 2000ms
#     attempt 2 ── fail ── raise MaxRetriesExceeded
#
# The dispatcher keeps no state between calls, so concurrent calls from the
# same event loop can interleave freely.
# =============================================================================

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

import httpx

from core.errors import MaxRetriesExceeded, TransientNetworkError, TransportFailureError
from core.models import DispatchOutcome

Sleep = Callable[[float], Awaitable[Any]]

# Transport errors that no amount of retrying will fix.
_NON_RETRYABLE = (httpx.InvalidURL, httpx.UnsupportedProtocol)


def _decode_body(response: httpx.Response) -> Any:
    """JSON body when the server sent JSON, otherwise the raw text."""
    try:
        return response.json()
    except ValueError:
        return response.text


class RetryingDispatcher:
    """Sends tool payloads to the AIFAIS API with bounded retries.

    Args:
        logger: Where retry notices go.
        max_attempts: Total attempts per call, including the first.
        base_delay_ms: Delay before the first retry; doubled for each one after.
        timeout_seconds: Per-request timeout for the client this class opens.
        client: Optional shared httpx.AsyncClient.  When omitted, a client is
                opened and closed around each dispatch() call.
        sleep: Awaitable sleep taking seconds.  Tests inject a fake.
    """

    def __init__(
        self,
        logger: logging.Logger,
        max_attempts: int = 3,
        base_delay_ms: int = 1000,
        timeout_seconds: float = 60.0,
        client: Optional[httpx.AsyncClient] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.logger = logger
        self.max_attempts = max_attempts
        self.base_delay_ms = base_delay_ms
        self.timeout_seconds = timeout_seconds
        self._client = client
        self._sleep = sleep

    def backoff_ms(self, attempt_index: int) -> int:
        return self.base_delay_ms * (2 ** attempt_index)

    async def dispatch(self, url: str, payload: dict[str, Any]) -> DispatchOutcome:
        """POST ``payload`` to ``url``, retrying transient failures.

        Returns:
            The first DispatchOutcome with status < 500.

        Raises:
            MaxRetriesExceeded: every attempt failed transiently.
            TransportFailureError: the request itself is unusable (bad URL).
        """
        if self._client is not None:
            return await self._dispatch_with(self._client, url, payload)

        async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
            return await self._dispatch_with(client, url, payload)

    async def _dispatch_with(
        self,
        client: httpx.AsyncClient,
        url: str,
        payload: dict[str, Any],
    ) -> DispatchOutcome:
        last_error: Optional[TransientNetworkError] = None

        for attempt in range(self.max_attempts):
            try:
                response = await client.post(url, json=payload)
            except _NON_RETRYABLE as e:
                raise TransportFailureError(f"{type(e).__name__}: {e}") from e
            except httpx.TransportError as e:
                last_error = TransientNetworkError(f"{type(e).__name__}: {e}")
                last_error.__cause__ = e
            else:
                if response.status_code < 500:
                    return DispatchOutcome(
                        status_code=response.status_code,
                        body=_decode_body(response),
                    )
                last_error = TransientNetworkError(
                    f"HTTP {response.status_code}", status_code=response.status_code
                )

            if attempt < self.max_attempts - 1:
                delay = self.backoff_ms(attempt)
                self.logger.info(
                    f"Transient error, retrying in {delay}ms... "
                    f"(Attempt {attempt + 1}/{self.max_attempts})"
                )
                await self._sleep(delay / 1000)

        raise MaxRetriesExceeded(url, self.max_attempts, last_error) from last_error
