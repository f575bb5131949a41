from .catalog import CatalogEntry, SessionArtifacts
from .resolution import (
    CdnError,
    CdnHttpError,
    CdnNoUrlError,
    CdnParseError,
    InvalidVideoIdError,
    MissingCookiesError,
    MissingTokenError,
    PageFetchError,
    ResolutionError,
    ResolveStage,
    SessionError,
)

__all__ = [
    "CatalogEntry",
    "CdnError",
    "CdnHttpError",
    "CdnNoUrlError",
    "CdnParseError",
    "InvalidVideoIdError",
    "MissingCookiesError",
    "MissingTokenError",
    "PageFetchError",
    "ResolutionError",
    "ResolveStage",
    "SessionArtifacts",
    "SessionError",
]
