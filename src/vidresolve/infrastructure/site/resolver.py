"""Session-replay resolver: video page -> CSRF token + cookies -> CDN URL.

The site only hands out the media URL to its own AJAX call, which must
carry the CSRF token rendered into the video page *and* the cookies set by
that same page response.  The resolver therefore runs three strictly
ordered steps per call, with no retries and nothing kept between calls:

    1. fetch_page         GET  /video/{id}
    2. extract_artifacts  token from the markup, cookies from Set-Cookie
    3. call_cdn           POST /ajax/get_cdn (multipart) -> {"playlists": url}

Any failure short-circuits and raises a ``ResolutionError`` subclass.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import structlog

from vidresolve.domain.entities.catalog import SessionArtifacts
from vidresolve.domain.entities.resolution import (
    CdnHttpError,
    CdnNoUrlError,
    CdnParseError,
    MissingCookiesError,
    MissingTokenError,
    PageFetchError,
)

from .constants import (
    CDN_PID_FIELD,
    CDN_REQUEST_HEADERS,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    cdn_url,
    video_page_url,
)
from .cookies import cookie_header_from_response
from .extractor import extract_csrf_token

log = structlog.get_logger(__name__)

# Raw CDN bodies are logged for diagnosis, but error pages can be huge.
_MAX_LOGGED_BODY = 2000


def _playlist_url(data: Any) -> str | None:
    """Stream URL from the CDN JSON body (``playlists`` is a single value)."""
    if not isinstance(data, dict):
        return None
    value = data.get("playlists")
    if isinstance(value, list):
        value = value[0] if value else None
    if isinstance(value, str) and value:
        return value
    return None


class SessionResolver:
    """Resolves a video id to its direct stream URL.

    Satisfies ``StreamResolverPort``.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._http = http_client
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent
        self._timeout = timeout

    async def resolve(self, video_id: str) -> str:
        page_url = video_page_url(self._base_url, video_id)

        page = await self._fetch_page(video_id, page_url)
        artifacts = self._extract_artifacts(video_id, page)
        log.info("session_artifacts_extracted", video_id=video_id)

        video_url = await self._call_cdn(video_id, page_url, artifacts)
        log.info("video_url_resolved", video_id=video_id)
        return video_url

    async def _fetch_page(self, video_id: str, page_url: str) -> httpx.Response:
        log.info("video_page_fetch", video_id=video_id, url=page_url)
        try:
            resp = await self._http.get(
                page_url,
                headers={"User-Agent": self._user_agent},
                follow_redirects=True,
                timeout=self._timeout,
            )
        except httpx.HTTPError as exc:
            log.warning(
                "video_page_fetch_failed",
                video_id=video_id,
                stage="fetch_page",
                error=str(exc),
            )
            raise PageFetchError(video_id, f"Video page unreachable: {exc}") from exc

        if not resp.is_success:
            log.warning(
                "video_page_fetch_failed",
                video_id=video_id,
                stage="fetch_page",
                status=resp.status_code,
            )
            raise PageFetchError(
                video_id,
                f"Video page returned HTTP {resp.status_code}",
                status=resp.status_code,
            )
        return resp

    def _extract_artifacts(
        self, video_id: str, page: httpx.Response
    ) -> SessionArtifacts:
        # Token and cookies must both come from this one response.
        token = extract_csrf_token(page.text)
        cookie_header = cookie_header_from_response(page)

        if not cookie_header:
            log.warning(
                "video_page_missing_cookies",
                video_id=video_id,
                stage="extract_artifacts",
            )
            raise MissingCookiesError(video_id, "No cookies in video page response")

        if not token:
            log.warning(
                "video_page_missing_token",
                video_id=video_id,
                stage="extract_artifacts",
            )
            raise MissingTokenError(video_id, "No CSRF token on video page")

        return SessionArtifacts(csrf_token=token, cookie_header=cookie_header)

    async def _call_cdn(
        self, video_id: str, page_url: str, artifacts: SessionArtifacts
    ) -> str:
        headers = {
            **CDN_REQUEST_HEADERS,
            "User-Agent": self._user_agent,
            "Cookie": artifacts.cookie_header,
            "Referer": page_url,
            "Origin": self._base_url,
        }
        # (None, value) tuples make httpx send plain multipart form fields.
        form = {
            "video_id": (None, video_id),
            CDN_PID_FIELD: (None, ""),
            "token": (None, artifacts.csrf_token),
        }

        try:
            resp = await self._http.post(
                cdn_url(self._base_url),
                headers=headers,
                files=form,
                timeout=self._timeout,
            )
        except httpx.HTTPError as exc:
            log.warning(
                "cdn_request_failed",
                video_id=video_id,
                stage="call_cdn",
                error=str(exc),
            )
            raise CdnHttpError(video_id, f"CDN endpoint unreachable: {exc}") from exc

        if not resp.is_success:
            log.warning(
                "cdn_http_error",
                video_id=video_id,
                stage="call_cdn",
                status=resp.status_code,
            )
            raise CdnHttpError(
                video_id,
                f"CDN endpoint returned HTTP {resp.status_code}",
                status=resp.status_code,
            )

        body = resp.text
        try:
            data = json.loads(body)
        except ValueError as exc:
            log.error(
                "cdn_response_not_json",
                video_id=video_id,
                stage="call_cdn",
                raw_body=body[:_MAX_LOGGED_BODY],
            )
            raise CdnParseError(
                video_id, "CDN response is not valid JSON", raw_body=body
            ) from exc

        video_url = _playlist_url(data)
        if video_url is None:
            log.warning(
                "cdn_response_without_url",
                video_id=video_id,
                stage="call_cdn",
            )
            raise CdnNoUrlError(video_id, "CDN response has no playlists URL")
        return video_url
