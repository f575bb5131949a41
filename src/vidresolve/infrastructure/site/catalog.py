"""Catalog listing scraped from the site's main page."""

from __future__ import annotations

import httpx
import structlog

from vidresolve.domain.entities.catalog import CatalogEntry

from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_CATALOG_PATH,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    catalog_url,
)
from .extractor import extract_catalog

log = structlog.get_logger(__name__)


class HttpxCatalogSource:
    """Fetches the catalog page and extracts its video cards.

    Satisfies ``CatalogSourcePort``.  The listing is best-effort: any
    fetch or parse failure is logged and yields an empty list.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        base_url: str = DEFAULT_BASE_URL,
        catalog_path: str = DEFAULT_CATALOG_PATH,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._http = http_client
        self._url = catalog_url(base_url, catalog_path)
        self._user_agent = user_agent
        self._timeout = timeout

    @property
    def url(self) -> str:
        return self._url

    async def fetch(self) -> list[CatalogEntry]:
        try:
            resp = await self._http.get(
                self._url,
                headers={"User-Agent": self._user_agent},
                follow_redirects=True,
                timeout=self._timeout,
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            log.warning(
                "catalog_fetch_failed",
                url=self._url,
                status=exc.response.status_code,
            )
            return []
        except httpx.HTTPError as exc:
            log.warning("catalog_fetch_failed", url=self._url, error=str(exc))
            return []

        try:
            entries = extract_catalog(resp.text)
        except Exception:
            log.error("catalog_parse_failed", url=self._url, exc_info=True)
            return []

        log.info("catalog_fetched", url=self._url, entries=len(entries))
        return entries
