"""Shared fixtures for live site smoke tests.

These tests hit the real website; network errors and blocked pages
are handled gracefully via pytest.skip().
"""

from __future__ import annotations

import httpx
import pytest

from vidresolve.infrastructure.site.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)


@pytest.fixture()
async def live_http_client() -> httpx.AsyncClient:
    """Client configured like the one the app builds in lifespan."""
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(DEFAULT_TIMEOUT_SECONDS),
        headers={"User-Agent": DEFAULT_USER_AGENT},
    ) as client:
        yield client
