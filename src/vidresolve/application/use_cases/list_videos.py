"""Use case for listing the scraped video catalog."""

from __future__ import annotations

from vidresolve.domain.entities import CatalogEntry
from vidresolve.domain.ports import CatalogSourcePort


class ListVideosUseCase:
    def __init__(self, *, source: CatalogSourcePort) -> None:
        self._source = source

    async def execute(self) -> list[CatalogEntry]:
        return await self._source.fetch()
