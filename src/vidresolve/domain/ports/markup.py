"""Port for structural queries over a parsed HTML document.

The extractor only needs four capabilities: CSS selection, lookup by
element id, attribute reads and text reads.  Keeping them behind this
protocol lets a lighter tag-soup parser replace the lxml/BeautifulSoup
adapter without touching extraction logic.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class MarkupNode(Protocol):
    """One element (or the document root) of a parsed HTML tree."""

    def select(self, selector: str) -> list[MarkupNode]:
        """All descendants matching the CSS *selector*, in document order."""
        ...

    def select_one(self, selector: str) -> MarkupNode | None:
        """First descendant matching *selector*, or ``None``."""
        ...

    def by_id(self, element_id: str) -> MarkupNode | None:
        """Descendant with ``id == element_id``, or ``None``."""
        ...

    def attr(self, name: str) -> str | None:
        """Attribute value, or ``None`` when the attribute is absent."""
        ...

    def text(self) -> str:
        """Text content with whitespace runs collapsed and ends stripped."""
        ...


MarkupParser = Callable[[str], MarkupNode]
