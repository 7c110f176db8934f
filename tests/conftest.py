"""
Shared fixtures for the AIFAIS MCP server tests.

HTTP is never real: the dispatcher gets an AsyncMock shaped like
httpx.AsyncClient, and backoff sleeps are recorded by an AsyncMock instead
of actually waiting.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Callable, Optional
from unittest.mock import AsyncMock

import httpx
import pytest

# Add project root to Python path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.dispatcher import RetryingDispatcher  # noqa: E402

BASE_URL = "https://api.test/v1"


@pytest.fixture
def test_logger() -> logging.Logger:
    """A propagating logger so caplog can see dispatcher/router output."""
    logger = logging.getLogger("aifais_tests")
    logger.setLevel(logging.DEBUG)
    logger.propagate = True
    return logger


@pytest.fixture
def mock_http_client() -> AsyncMock:
    return AsyncMock(spec=httpx.AsyncClient)


@pytest.fixture
def fake_sleep() -> AsyncMock:
    return AsyncMock(return_value=None)


@pytest.fixture
def make_response() -> Callable[..., httpx.Response]:
    """Build a real httpx.Response with a JSON or text body."""

    def _make(status_code: int, json: Any = None, text: Optional[str] = None) -> httpx.Response:
        request = httpx.Request("POST", f"{BASE_URL}/test")
        if text is not None:
            return httpx.Response(status_code, text=text, request=request)
        return httpx.Response(status_code, json=json if json is not None else {}, request=request)

    return _make


@pytest.fixture
def dispatcher(
    test_logger: logging.Logger, mock_http_client: AsyncMock, fake_sleep: AsyncMock
) -> RetryingDispatcher:
    return RetryingDispatcher(
        test_logger,
        max_attempts=3,
        base_delay_ms=1000,
        client=mock_http_client,
        sleep=fake_sleep,
    )
