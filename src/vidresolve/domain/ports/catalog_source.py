"""Port for fetching the scraped video catalog."""

from __future__ import annotations

from typing import Protocol

from vidresolve.domain.entities.catalog import CatalogEntry


class CatalogSourcePort(Protocol):
    """Best-effort catalog listing.

    Implementations never raise for upstream trouble; they return an
    empty list instead.
    """

    async def fetch(self) -> list[CatalogEntry]: ...
