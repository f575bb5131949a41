"""Catalog listing and stream-URL resolve endpoints."""

from __future__ import annotations

from typing import Any, cast

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from vidresolve.domain.entities import (
    CdnError,
    InvalidVideoIdError,
    ResolutionError,
)
from vidresolve.interfaces.app_state import AppState

log = structlog.get_logger(__name__)

router = APIRouter(prefix="/api", tags=["videos"])


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code)


def _video_id_from_body(body: Any) -> str | None:
    """``videoId`` from the request body; numbers are accepted as ids."""
    raw = body.get("videoId")
    # 0, False, "" and null all count as missing.
    if isinstance(raw, bool) or not raw:
        return None
    if isinstance(raw, (str, int)):
        return str(raw).strip() or None
    return None


@router.get("/videos")
async def list_videos(request: Request) -> JSONResponse:
    """Scrape the catalog page and return its video cards."""
    state = cast(AppState, request.app.state)

    try:
        entries = await state.list_videos_uc.execute()
    except Exception:
        log.error("list_videos_failed", exc_info=True)
        return _error("Failed to fetch videos", 500)

    return JSONResponse(content=[e.to_dict() for e in entries])


@router.post("/video-url")
async def resolve_video_url(request: Request) -> JSONResponse:
    """Resolve ``{"videoId": ...}`` to ``{"videoUrl": ...}``.

    CDN-stage failures (the session was captured but no URL came back)
    map to 404; page/session-stage and unexpected failures map to 500.
    """
    state = cast(AppState, request.app.state)

    try:
        body = await request.json()
    except ValueError:
        return _error("Invalid JSON body", 400)
    if not isinstance(body, dict):
        return _error("Invalid JSON body", 400)

    video_id = _video_id_from_body(body)
    if video_id is None:
        return _error("Video ID is required", 400)

    try:
        video_url = await state.resolve_video_url_uc.execute(video_id)
    except InvalidVideoIdError:
        return _error("Video ID is required", 400)
    except CdnError as e:
        log.warning(
            "video_url_not_found",
            video_id=e.video_id,
            stage=e.stage,
            error_type=type(e).__name__,
            error=str(e),
        )
        return _error("Failed to get video URL from CDN endpoint", 404)
    except ResolutionError as e:
        log.error(
            "video_url_resolution_failed",
            video_id=e.video_id,
            stage=e.stage,
            error_type=type(e).__name__,
            error=str(e),
        )
        return _error("Failed to fetch video URL", 500)
    except Exception:
        log.error("video_url_unexpected_error", video_id=video_id, exc_info=True)
        return _error("Failed to fetch video URL", 500)

    return JSONResponse(content={"videoUrl": video_url})
