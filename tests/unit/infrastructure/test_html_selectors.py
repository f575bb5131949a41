"""Tests for the BeautifulSoup markup adapter and selector helpers."""

from __future__ import annotations

from vidresolve.domain.ports.markup import MarkupNode
from vidresolve.infrastructure.common.html_selectors import (
    SoupNode,
    extract_text,
    first_attr,
    parse_document,
    parse_html,
)

# ---------------------------------------------------------------------------
# Fixture HTML
# ---------------------------------------------------------------------------

_CARD_HTML = """\
<html><body>
<div class="results">
  <div class="card movie-item" id="first">
    <a class="movie-title" href="/film/batman-2022" title="The Batman">
      <h3> The Batman </h3>
    </a>
    <span class="year">2022</span>
    <img src="/poster.jpg" data-src="" alt="poster">
  </div>
  <div class="card movie-item">
    <a class="movie-title" href="/film/dark-knight">
      <h3>The Dark Knight</h3>
    </a>
    <span class="year"></span>
  </div>
</div>
</body></html>
"""


class TestParseHtml:
    def test_returns_soup(self) -> None:
        soup = parse_html("<div>hello</div>")
        assert soup.find("div") is not None

    def test_empty_html(self) -> None:
        assert parse_html("") is not None


class TestSoupNode:
    def test_satisfies_port(self) -> None:
        assert isinstance(parse_document(_CARD_HTML), MarkupNode)

    def test_select_keeps_document_order(self) -> None:
        root = parse_document(_CARD_HTML)
        titles = [c.select_one("h3").text() for c in root.select("div.card")]
        assert titles == ["The Batman", "The Dark Knight"]

    def test_select_one_missing(self) -> None:
        assert parse_document(_CARD_HTML).select_one("table") is None

    def test_by_id(self) -> None:
        node = parse_document(_CARD_HTML).by_id("first")
        assert node is not None
        assert node.select_one(".year").text() == "2022"

    def test_by_id_missing(self) -> None:
        assert parse_document(_CARD_HTML).by_id("nope") is None

    def test_attr_present_absent_and_empty(self) -> None:
        img = parse_document(_CARD_HTML).select_one("img")
        assert img.attr("src") == "/poster.jpg"
        assert img.attr("data-src") == ""
        assert img.attr("width") is None

    def test_multi_valued_attr_joined(self) -> None:
        card = parse_document(_CARD_HTML).select_one("div.card")
        assert card.attr("class") == "card movie-item"

    def test_text_is_stripped(self) -> None:
        h3 = parse_document(_CARD_HTML).select_one("h3")
        assert h3.text() == "The Batman"

    def test_text_keeps_spaces_around_inline_tags(self) -> None:
        node = parse_document("<p> Hot <b>New</b>\n\t Release </p>").select_one("p")
        assert node.text() == "Hot New Release"

    def test_text_does_not_invent_spaces(self) -> None:
        node = parse_document("<p>Mega<b>Hit</b></p>").select_one("p")
        assert node.text() == "MegaHit"

    def test_repr(self) -> None:
        assert repr(SoupNode(parse_html("<p>x</p>").p)) == "SoupNode('p')"


class TestFirstAttr:
    def test_skips_empty_values(self) -> None:
        img = parse_document(_CARD_HTML).select_one("img")
        assert first_attr(img, "data-src", "src") == "/poster.jpg"

    def test_default_when_all_missing(self) -> None:
        img = parse_document(_CARD_HTML).select_one("img")
        assert first_attr(img, "data-lazy", default="none") == "none"

    def test_none_node(self) -> None:
        assert first_attr(None, "src") == ""


class TestExtractText:
    def test_primary_selector(self) -> None:
        card = parse_document(_CARD_HTML).select_one("div.card")
        assert extract_text(card, ".year") == "2022"

    def test_fallback_selector(self) -> None:
        card = parse_document(_CARD_HTML).select_one("div.card")
        assert extract_text(card, ".release", "h3") == "The Batman"

    def test_empty_text_falls_through_to_default(self) -> None:
        second = parse_document(_CARD_HTML).select("div.card")[1]
        assert extract_text(second, ".year", default="n/a") == "n/a"
