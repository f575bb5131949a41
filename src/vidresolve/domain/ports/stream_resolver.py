"""Port for resolving a video id to a playable stream URL."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StreamResolverPort(Protocol):
    """Resolves a video id to a direct stream URL.

    Raises a ``ResolutionError`` subclass when no URL can be produced.
    """

    async def resolve(self, video_id: str) -> str: ...
