"""
Test context snippet truncation.
"""
import pytest

from common.dom import Element
from common.html_loader import SafeHTMLLoader
from diagnostics.snippet import build_context, CONTEXT_LIMIT, INNER_MARKUP_LIMIT


def first(body: str, xpath: str):
    html = f"<html><head><title>t</title></head><body>{body}</body></html>"
    return SafeHTMLLoader().parse(html).find(xpath)[0]


class MarkupElement(Element):
    """Element with fixed markup, for exact-length cases."""

    def __init__(self, outer, inner=""):
        self.outer = outer
        self.inner = inner

    def is_element(self):
        return True

    def get_id(self):
        return None

    def get_tag_name(self):
        return "div"

    def get_parent(self):
        return None

    def get_element_children(self):
        return []

    def get_outer_markup(self):
        return self.outer

    def get_inner_markup(self):
        return self.inner


def test_short_inner_markup_unchanged():
    element = first("<p>Hello</p>", "//p")

    assert build_context(element) == "<p>Hello</p>"


def test_long_inner_text_shortened():
    element = first("<p>" + "A" * 40 + "</p>", "//p")

    assert build_context(element) == "<p>" + "A" * INNER_MARKUP_LIMIT + "...</p>"


def test_inner_markup_at_limit_unchanged():
    element = first("<p>" + "B" * 31 + "</p>", "//p")

    assert build_context(element) == "<p>" + "B" * 31 + "</p>"


def test_long_nested_markup_shortened():
    element = first('<div id="d"><span>' + "c" * 40 + "</span></div>", "//div")
    inner = "<span>" + "c" * 40 + "</span>"

    context = build_context(element)
    assert context == '<div id="d">' + inner[:31] + "...</div>"


def test_escaped_text_is_shortened_in_place():
    element = first("<p>Fish &amp; chips &amp; mushy peas on the side</p>", "//p")

    context = build_context(element)
    assert context == "<p>Fish &amp; chips &amp; mushy pe...</p>"


def test_long_attributes_hard_truncated():
    element = first('<img alt="' + "x" * 300 + '" src="a.png">', "//img")

    context = build_context(element)
    assert context.startswith('<img alt="xxx')
    assert context.endswith("...")
    assert len(context) == CONTEXT_LIMIT + 3


@pytest.mark.parametrize("length,expected", [
    (250, "x" * 250),
    (251, "x" * 250 + "..."),
    (1000, "x" * 250 + "..."),
])
def test_outer_markup_cap(length, expected):
    assert build_context(MarkupElement("x" * length)) == expected


def test_inner_then_outer_truncation():
    inner = "i" * 100
    outer = "<div>" + inner + "</div>" + "o" * 300

    context = build_context(MarkupElement(outer, inner))

    assert context == ("<div>" + "i" * 31 + "...</div>" + "o" * 300)[:250] + "..."


def test_only_first_occurrence_replaced():
    inner = "r" * 40
    outer = "<div>" + inner + "</div><!--" + inner + "-->"

    context = build_context(MarkupElement(outer, inner))

    assert context == "<div>" + "r" * 31 + "...</div><!--" + inner + "-->"


def test_no_markup_is_absent():
    assert build_context(MarkupElement(None)) is None
    assert build_context(MarkupElement("")) is None
    assert build_context(None) is None


def test_context_never_exceeds_bound():
    element = first("<div>" + "<b>bold</b>" * 200 + "</div>", "//div")

    assert len(build_context(element)) <= CONTEXT_LIMIT + 3
