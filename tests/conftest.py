"""
Shared test configuration and fixtures for did:web resolver tests.

Provides mocked aiohttp sessions so resolution can be exercised without
network access.
"""

import json
from typing import Any, Optional
from unittest.mock import AsyncMock

import pytest
from aiohttp import ClientResponse, ClientSession


def make_session(
    status: int = 200,
    body: Any = None,
    raw: Optional[bytes] = None,
) -> AsyncMock:
    """Create a mock ClientSession whose get() yields a single response.

    The session can also be used as an async context manager.
    """
    mock_session = AsyncMock(spec=ClientSession)
    mock_session.__aenter__.return_value = mock_session

    mock_response = AsyncMock(spec=ClientResponse)
    mock_response.status = status
    if raw is not None:
        mock_response.read.return_value = raw
    else:
        mock_response.read.return_value = json.dumps(body).encode("utf-8")

    mock_session.get.return_value.__aenter__.return_value = mock_response
    return mock_session


@pytest.fixture
def session_factory():
    """Provide the make_session helper to tests."""
    return make_session


@pytest.fixture(autouse=True)
def clear_settings_env(monkeypatch):
    """Keep resolver settings from the host environment out of tests."""
    for name in ("DEBUG", "DOH", "HTTP_TIMEOUT", "USER_AGENT", "SENTRY_DSN"):
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(name.lower(), raising=False)
    monkeypatch.delenv("LOGGING_CONFIG_FILE", raising=False)
