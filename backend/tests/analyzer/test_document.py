"""
Unit tests for the Document adapter.
"""

from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "app"))

from analyzer.core.document import (
    children_of,
    class_tokens,
    css_identifier,
    parent_of,
    quote_css_string,
    tag_name,
    text_content,
)


class TestQuery:
    """Test CSS querying."""

    def test_query_returns_matches_in_order(self, make_document):
        doc = make_document("<p class='a'>1</p><p class='a'>2</p>")
        assert [text_content(p) for p in doc.query(".a")] == ["1", "2"]

    def test_invalid_selector_returns_empty(self, make_document):
        doc = make_document("<div></div>")
        assert doc.query("div[") == []
        assert doc.query("p >") == []

    def test_count(self, make_document):
        doc = make_document("<li></li><li></li>")
        assert doc.count("li") == 2

    def test_get_element_by_id(self, make_document):
        doc = make_document("<div id='x'><span id='y'></span></div>")
        assert tag_name(doc.get_element_by_id("y")) == "span"
        assert doc.get_element_by_id("missing") is None
        assert doc.get_element_by_id("") is None

    def test_elements_with_id(self, make_document):
        doc = make_document("<div id='a'></div><div></div><p id='b'></p>")
        assert len(doc.elements_with_id()) == 2


class TestElementAccessors:
    """Test per-element accessors."""

    def test_class_tokens_ordered(self, make_document):
        doc = make_document("<div class='btn btn-primary large'></div>")
        assert class_tokens(doc.query("div")[0]) == ["btn", "btn-primary", "large"]

    def test_class_tokens_empty(self, make_document):
        doc = make_document("<div></div>")
        assert class_tokens(doc.query("div")[0]) == []

    def test_root_has_no_parent(self, make_document):
        doc = make_document("<div></div>")
        html = doc.query("html")[0]
        assert parent_of(html) is None
        assert tag_name(parent_of(doc.query("div")[0])) == "body"

    def test_children_are_elements_only(self, make_document):
        doc = make_document("<ul>text<li>a</li> <li>b</li></ul>")
        assert [tag_name(c) for c in children_of(doc.query("ul")[0])] == ["li", "li"]

    def test_text_content_concatenates_descendants(self, make_document):
        doc = make_document("<div>Hello <b>big</b> world</div>")
        assert text_content(doc.query("div")[0]) == "Hello big world"


class TestQuoteCssString:
    """Test selector string quoting."""

    def test_plain(self):
        assert quote_css_string("login") == '"login"'

    def test_escapes_quotes(self, make_document):
        doc = make_document("<a title='say &quot;hi&quot;'></a>")
        selector = "[title=" + quote_css_string('say "hi"') + "]"
        assert doc.count(selector) == 1


class TestCssIdentifier:
    """Test escaping of class and id tokens."""

    def test_plain_token_unchanged(self):
        assert css_identifier("submit-button") == "submit-button"

    def test_escapes_special_characters(self):
        assert css_identifier("md:flex") == "md\\:flex"
        assert css_identifier("a.b") == "a\\.b"

    def test_escaped_selectors_match(self, make_document):
        doc = make_document('<div class="md:flex"></div><ul id="a.b"></ul>')
        assert doc.count("." + css_identifier("md:flex")) == 1
        assert doc.count("#" + css_identifier("a.b")) == 1
