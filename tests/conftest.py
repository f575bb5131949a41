"""Shared test fixtures for the vidresolve test suite."""

from __future__ import annotations

from typing import Callable
from unittest.mock import AsyncMock

import pytest

from vidresolve.domain.entities import CatalogEntry
from vidresolve.infrastructure.config import AppConfig

_BASE_URL = "https://site.test"

# ---------------------------------------------------------------------------
# HTML fixtures
# ---------------------------------------------------------------------------

_CATALOG_HTML = """\
<html><body>
<div class="row">
  <div class="col pb-3">
    <div class="card">
      <a class="video-tmb" href="/video/1001/first-video">
        <img data-src="https://img.test/1001.jpg" src="/placeholder.gif">
        <span class="label-hd">HD</span>
        <span class="label-duration">12:34</span>
        <span class="label-code">ABC-001</span>
      </a>
      <a class="video-link" href="/video/1001/first-video" title="First Video">First</a>
    </div>
  </div>
  <div class="col pb-3">
    <div class="card">
      <a class="video-tmb" href="/video/1002/second-video">
        <img src="https://img.test/1002.jpg">
        <span class="label-duration"> 01:02:03 </span>
      </a>
      <a class="video-link" href="/video/1002/second-video">  Second Video  </a>
    </div>
  </div>
  <div class="col pb-3">
    <div class="card">
      <a class="video-tmb">
        <img src="https://img.test/nohref.jpg">
      </a>
    </div>
  </div>
  <div class="col pb-3">
    <div class="card">
      <a class="video-tmb" href="/tag/popular/">
        <img src="https://img.test/noid.jpg">
      </a>
    </div>
  </div>
  <div class="col pb-3">
    <div class="card">
      <a class="video-tmb" href="/video/1003/third-video"></a>
    </div>
  </div>
</div>
<div class="sidebar">
  <div class="card">
    <a class="video-tmb" href="/video/9999/outside-grid"></a>
  </div>
</div>
</body></html>
"""


def _video_page_html(token: str | None = "tok123") -> str:
    """Video detail page with (or without) the CSRF token element."""
    token_el = (
        f'<div id="token_full" data-csrf-token="{token}"></div>'
        if token is not None
        else ""
    )
    return f"""\
<html><head><title>Video</title></head><body>
<div class="player"></div>
{token_el}
</body></html>
"""


# ---------------------------------------------------------------------------
# Domain / config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def catalog_entry() -> CatalogEntry:
    return CatalogEntry(
        id="1001",
        code="ABC-001",
        title="First Video",
        thumbnail="https://img.test/1001.jpg",
        duration="12:34",
        quality="HD",
    )


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig(
        environment="test",
        site_base_url=_BASE_URL,
        http_timeout_seconds=5.0,
    )


# ---------------------------------------------------------------------------
# Mock port fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_catalog_source(catalog_entry: CatalogEntry) -> AsyncMock:
    """Mock CatalogSourcePort."""
    source = AsyncMock()
    source.fetch = AsyncMock(return_value=[catalog_entry])
    return source


@pytest.fixture()
def mock_resolver() -> AsyncMock:
    """Mock StreamResolverPort."""
    resolver = AsyncMock()
    resolver.resolve = AsyncMock(return_value="https://cdn.test/video.mp4")
    return resolver


@pytest.fixture()
def base_url() -> str:
    return _BASE_URL


@pytest.fixture()
def catalog_html() -> str:
    """Catalog page: 3 well-formed cards, 2 malformed ones, 1 outside the grid."""
    return _CATALOG_HTML


@pytest.fixture()
def make_video_page() -> Callable[..., str]:
    return _video_page_html
