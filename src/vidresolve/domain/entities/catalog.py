"""Domain entities for the scraped catalog and session replay.

Pure value objects, no framework dependencies, no I/O.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class CatalogEntry:
    """One video card scraped from the catalog page."""

    id: str  # numeric video id, e.g. "123456"
    code: str  # release code label, e.g. "ABC-123"
    title: str
    thumbnail: str
    duration: str  # display-formatted, e.g. "12:34"
    quality: str  # "HD" or ""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class SessionArtifacts:
    """CSRF token and cookie header captured from one video page response.

    Consumed by exactly one CDN call, never stored or reused.
    """

    csrf_token: str
    cookie_header: str  # "name=value; name2=value2"
