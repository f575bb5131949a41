"""CSS-selector-based HTML extraction with fallback chains.

Wraps BeautifulSoup (lxml parser) in a small adapter that satisfies the
``MarkupNode`` port, plus composable helpers that walk a fallback chain of
attributes and return the first non-empty value.  Empty attribute values
count as missing, so ``data-src=""`` falls through to ``src``.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from vidresolve.domain.ports.markup import MarkupNode


def parse_html(html: str) -> BeautifulSoup:
    """Parse an HTML string into a BeautifulSoup tree using ``lxml``."""
    return BeautifulSoup(html, "lxml")


class SoupNode:
    """``MarkupNode`` backed by a BeautifulSoup tag."""

    __slots__ = ("_tag",)

    def __init__(self, tag: BeautifulSoup | Tag) -> None:
        self._tag = tag

    def select(self, selector: str) -> list[MarkupNode]:
        return [SoupNode(t) for t in self._tag.select(selector)]

    def select_one(self, selector: str) -> MarkupNode | None:
        match = self._tag.select_one(selector)
        return SoupNode(match) if match is not None else None

    def by_id(self, element_id: str) -> MarkupNode | None:
        match = self._tag.find(id=element_id)
        return SoupNode(match) if isinstance(match, Tag) else None

    def attr(self, name: str) -> str | None:
        val = self._tag.get(name)
        if val is None:
            return None
        # multi-valued attributes (class, rel) come back as lists
        if isinstance(val, list):
            return " ".join(val)
        return str(val)

    def text(self) -> str:
        # Whitespace runs collapse to one space; spacing between inline tags stays.
        return " ".join(self._tag.get_text().split())

    def __repr__(self) -> str:
        return f"SoupNode({self._tag.name!r})"


def parse_document(html: str) -> MarkupNode:
    """Parse *html* and return the document root as a ``MarkupNode``."""
    return SoupNode(parse_html(html))


def first_attr(node: MarkupNode | None, *attrs: str, default: str = "") -> str:
    """Return the first non-empty attribute of *node* among *attrs*."""
    if node is None:
        return default
    for name in attrs:
        val = node.attr(name)
        if val:
            return val
    return default


def extract_text(
    root: MarkupNode,
    selector: str,
    *fallback_selectors: str,
    default: str = "",
) -> str:
    """Extract text from the first matching child element.

    Tries each selector in order and returns the first non-empty text.
    """
    for sel in (selector, *fallback_selectors):
        match = root.select_one(sel)
        if match is not None:
            text = match.text()
            if text:
                return text
    return default
