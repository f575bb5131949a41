"""Site layout, selectors and the browser header set for the target site."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping
from urllib.parse import quote

DEFAULT_BASE_URL = "https://javtiful.com"
DEFAULT_CATALOG_PATH = "/main"
CDN_PATH = "/ajax/get_cdn"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/140.0.0.0 Safari/537.36"
)

DEFAULT_TIMEOUT_SECONDS = 15.0

# Catalog markup
CATALOG_CARD_SELECTOR = ".col.pb-3 .card"
CARD_ANCHOR_SELECTOR = "a.video-tmb"
CARD_TITLE_SELECTOR = ".video-link"
LABEL_QUALITY_SELECTOR = ".label-hd"
LABEL_DURATION_SELECTOR = ".label-duration"
LABEL_CODE_SELECTOR = ".label-code"
THUMBNAIL_ATTRS = ("data-src", "src")

# Video page markup
CSRF_ELEMENT_ID = "token_full"
CSRF_ATTR = "data-csrf-token"

# CDN form field that the site always submits empty
CDN_PID_FIELD = "pid_c"

# Sent with every CDN call so it reads as a same-origin XHR from the video
# page.  Content-Type is absent on purpose: httpx adds the multipart boundary.
CDN_REQUEST_HEADERS: Mapping[str, str] = MappingProxyType(
    {
        "Accept": "*/*",
        "Accept-Language": "en-US,en;q=0.9",
        "DNT": "1",
        "Sec-Fetch-Dest": "empty",
        "Sec-Fetch-Mode": "cors",
        "Sec-Fetch-Site": "same-origin",
    }
)


def video_page_url(base_url: str, video_id: str) -> str:
    """Detail page URL for *video_id* (also the CDN call's Referer)."""
    return f"{base_url.rstrip('/')}/video/{quote(video_id, safe='')}"


def cdn_url(base_url: str) -> str:
    return f"{base_url.rstrip('/')}{CDN_PATH}"


def catalog_url(base_url: str, catalog_path: str = DEFAULT_CATALOG_PATH) -> str:
    return f"{base_url.rstrip('/')}/{catalog_path.lstrip('/')}"
