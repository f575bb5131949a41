"""Scraping and session replay for the target video site."""

from __future__ import annotations

from .catalog import HttpxCatalogSource
from .cookies import cookie_header_from_response, normalize_set_cookie
from .extractor import extract_catalog, extract_csrf_token
from .resolver import SessionResolver

__all__ = [
    "HttpxCatalogSource",
    "SessionResolver",
    "cookie_header_from_response",
    "extract_catalog",
    "extract_csrf_token",
    "normalize_set_cookie",
]
