"""Classified failures of the stream-URL resolve flow.

``SessionError`` subclasses mean the video page could not provide a usable
session (unreachable, markup drift, blocked request).  ``CdnError``
subclasses mean the session was captured but the CDN endpoint did not hand
out a URL.
"""

from __future__ import annotations

from typing import Literal

ResolveStage = Literal["validate", "fetch_page", "extract_artifacts", "call_cdn"]


class ResolutionError(Exception):
    """Base error for the resolve flow."""

    stage: ResolveStage = "validate"

    def __init__(self, video_id: str, message: str = "") -> None:
        super().__init__(message or type(self).__name__)
        self.video_id = video_id


class InvalidVideoIdError(ResolutionError):
    """Caller supplied no usable video id."""


class SessionError(ResolutionError):
    """Video page stage failed."""


class PageFetchError(SessionError):
    """Video page unreachable or answered with a non-2xx status."""

    stage: ResolveStage = "fetch_page"

    def __init__(
        self, video_id: str, message: str = "", *, status: int | None = None
    ) -> None:
        super().__init__(video_id, message)
        self.status = status


class MissingTokenError(SessionError):
    """Video page carried no CSRF token element/attribute."""

    stage: ResolveStage = "extract_artifacts"


class MissingCookiesError(SessionError):
    """Video page response set no cookies."""

    stage: ResolveStage = "extract_artifacts"


class CdnError(ResolutionError):
    """CDN endpoint stage failed."""

    stage: ResolveStage = "call_cdn"


class CdnHttpError(CdnError):
    """CDN endpoint unreachable or rejected the request."""

    def __init__(
        self, video_id: str, message: str = "", *, status: int | None = None
    ) -> None:
        super().__init__(video_id, message)
        self.status = status


class CdnParseError(CdnError):
    """CDN endpoint answered with something that is not JSON."""

    def __init__(self, video_id: str, message: str = "", *, raw_body: str) -> None:
        super().__init__(video_id, message)
        self.raw_body = raw_body


class CdnNoUrlError(CdnError):
    """CDN response was valid JSON but had no ``playlists`` value."""
