"""Use case for resolving one video id to its direct stream URL."""

from __future__ import annotations

import structlog

from vidresolve.domain.entities import InvalidVideoIdError
from vidresolve.domain.ports import StreamResolverPort

log = structlog.get_logger(__name__)


class ResolveVideoUrlUseCase:
    """Validates the id and runs one fresh resolve.

    Nothing is cached: every call re-fetches the video page so the token
    and cookies never go stale.
    """

    def __init__(self, *, resolver: StreamResolverPort) -> None:
        self._resolver = resolver

    async def execute(self, video_id: str) -> str:
        video_id = video_id.strip()
        if not video_id:
            raise InvalidVideoIdError(video_id, "Video ID is required")

        log.info("resolve_started", video_id=video_id)
        return await self._resolver.resolve(video_id)
