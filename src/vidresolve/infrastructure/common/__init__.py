"""Common infrastructure utilities."""

from __future__ import annotations

from .html_selectors import (
    SoupNode,
    extract_text,
    first_attr,
    parse_document,
    parse_html,
)

__all__ = [
    "SoupNode",
    "extract_text",
    "first_attr",
    "parse_document",
    "parse_html",
]
