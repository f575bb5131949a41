"""HTML extraction for the catalog page and the video detail page.

Pure functions over markup text.  The parser is injectable; extraction
logic only uses the ``MarkupNode`` port.
"""

from __future__ import annotations

import re

import structlog

from vidresolve.domain.entities.catalog import CatalogEntry
from vidresolve.domain.ports.markup import MarkupNode, MarkupParser
from vidresolve.infrastructure.common.html_selectors import (
    extract_text,
    first_attr,
    parse_document,
)

from .constants import (
    CARD_ANCHOR_SELECTOR,
    CARD_TITLE_SELECTOR,
    CATALOG_CARD_SELECTOR,
    CSRF_ATTR,
    CSRF_ELEMENT_ID,
    LABEL_CODE_SELECTOR,
    LABEL_DURATION_SELECTOR,
    LABEL_QUALITY_SELECTOR,
    THUMBNAIL_ATTRS,
)

log = structlog.get_logger(__name__)

_VIDEO_ID_RE = re.compile(r"/video/(\d+)/")


def extract_video_id(href: str) -> str | None:
    """Numeric video id from a detail link such as ``/video/123/some-slug``."""
    match = _VIDEO_ID_RE.search(href)
    return match.group(1) if match else None


def _parse_card(card: MarkupNode, index: int) -> CatalogEntry | None:
    anchor = card.select_one(CARD_ANCHOR_SELECTOR)
    if anchor is None:
        log.debug("catalog_card_skipped", index=index, reason="no_anchor")
        return None

    href = anchor.attr("href")
    if not href:
        log.debug("catalog_card_skipped", index=index, reason="no_href")
        return None

    video_id = extract_video_id(href)
    if video_id is None:
        log.debug("catalog_card_skipped", index=index, reason="no_id", href=href)
        return None

    title_link = card.select_one(CARD_TITLE_SELECTOR)
    title = first_attr(title_link, "title")
    if not title and title_link is not None:
        title = title_link.text()

    return CatalogEntry(
        id=video_id,
        code=extract_text(anchor, LABEL_CODE_SELECTOR),
        title=title,
        thumbnail=first_attr(anchor.select_one("img"), *THUMBNAIL_ATTRS),
        duration=extract_text(anchor, LABEL_DURATION_SELECTOR),
        quality=extract_text(anchor, LABEL_QUALITY_SELECTOR),
    )


def extract_catalog(
    html: str, *, parser: MarkupParser = parse_document
) -> list[CatalogEntry]:
    """Parse every catalog card in *html* into a ``CatalogEntry``.

    Cards without a detail link or a numeric id are skipped; a card that
    blows up while parsing is logged and dropped.  Document order is kept,
    nothing is deduplicated.
    """
    root = parser(html)
    entries: list[CatalogEntry] = []

    for index, card in enumerate(root.select(CATALOG_CARD_SELECTOR)):
        try:
            entry = _parse_card(card, index)
        except Exception:
            log.warning("catalog_card_parse_failed", index=index, exc_info=True)
            continue
        if entry is not None:
            entries.append(entry)

    log.debug("catalog_extracted", entries=len(entries))
    return entries


def extract_csrf_token(
    html: str, *, parser: MarkupParser = parse_document
) -> str | None:
    """CSRF token of a video detail page, or ``None`` when absent."""
    element = parser(html).by_id(CSRF_ELEMENT_ID)
    if element is None:
        return None
    return element.attr(CSRF_ATTR) or None
