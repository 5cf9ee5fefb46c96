# tests/dom/test_anchor.py
import pytest

from htmlwalker.html_utils import load
from htmlwalker.dom.elements.anchor import HtmlAnchor

MARKUP = """
<div id="nav">
  <a id="home" href="http://x">Home</a>
  <A ID="upper" HREF="/docs/">Docs</A>
  <a id="bare">No target</a>
  <p id="para">text</p>
  <abbr id="abbr">HTML</abbr>
</div>
"""


@pytest.fixture
def document():
    return load().from_html(MARKUP)


def test_as_anchor_on_anchor(document):
    anchor = document.find_by_id("home").as_anchor()
    assert isinstance(anchor, HtmlAnchor)
    assert anchor.get_href() == "http://x"


def test_as_anchor_is_case_insensitive(document):
    """Upper-case markup is still recognised as a hyperlink."""
    anchor = document.find_by_id("upper").as_anchor()
    assert anchor is not None
    assert anchor.get_href() == "/docs/"


@pytest.mark.parametrize("element_id", ["nav", "para", "abbr"])
def test_as_anchor_on_other_tags(document, element_id):
    assert document.find_by_id(element_id).as_anchor() is None


def test_href_absent_returns_empty_string(document):
    assert document.find_by_id("bare").as_anchor().get_href() == ""


def test_resolve_href(document):
    anchor = document.find_by_id("upper").as_anchor()
    assert anchor.resolve_href("https://example.com/a/b") == "https://example.com/docs/"
    assert document.find_by_id("bare").as_anchor().resolve_href("https://example.com") == ""


def test_anchor_forwards_element_operations(document):
    """The decorator behaves like the element it wraps."""
    element = document.find_by_id("home")
    anchor = element.as_anchor()
    assert anchor == element
    assert hash(anchor) == hash(element)
    assert anchor.as_text() == "Home"
    assert anchor.as_raw_element() is element.as_raw_element()
    assert anchor.get_parent() == document.find_by_id("nav")
    assert list(anchor.get_parents()) == list(element.get_parents())
    assert anchor.find_by_id("home") == element
    assert list(anchor.find_by_tag("a")) == [element]
    assert anchor.as_anchor() == anchor


def test_anchor_visit_is_fluent(document):
    anchor = document.find_by_id("home").as_anchor()
    seen = []
    assert anchor.visit(lambda element, parents: seen.append(element) or True) is anchor
    assert seen == [anchor]


def test_find_anchors(document):
    hrefs = [anchor.get_href() for anchor in document.find_anchors()]
    assert hrefs == ["http://x", "/docs/", ""]
