# tests/dom/test_document.py
import pytest
from bs4 import BeautifulSoup

from htmlwalker.html_utils import load

MARKUP = """<!DOCTYPE html>
<html>
  <head><title>Title</title></head>
  <body>
    <h1 id="top">Heading</h1>
    <p>First <a href="/one">link</a>.</p>
    <p>Second paragraph.</p>
  </body>
</html>
"""


@pytest.fixture
def document():
    return load().from_html(MARKUP)


def test_get_returns_beautifulsoup(document):
    assert isinstance(document.get(), BeautifulSoup)


def test_as_text_matches_parser_text(document):
    """Whole-document text is the parser's own text with whitespace collapsed."""
    assert document.as_text() == " ".join(BeautifulSoup(MARKUP, "html.parser").get_text().split())
    assert document.as_text() == "Title Heading First link. Second paragraph."


def test_find_by_id_document_scope(document):
    assert document.find_by_id("top").as_text() == "Heading"
    assert document.find_by_id("missing") is None


def test_find_by_tag_document_scope(document):
    assert [p.as_text() for p in document.find_by_tag("p")] == ["First link.", "Second paragraph."]
    assert list(document.find_by_tag("table")) == []


def test_root_has_no_parent(document):
    assert document.root.get_parent() is None
    assert document.root.as_raw_element() is document.get()


def test_visit_returns_document(document):
    assert document.visit(lambda element, parents: False) is document


def test_documents_are_independent():
    first = load().from_html("<p id='x'>one</p>")
    second = load().from_html("<p id='x'>one</p>")
    assert first.find_by_id("x") != second.find_by_id("x")


def test_malformed_markup_is_tolerated():
    document = load().from_html("<div><p>unclosed <b>bold</div>")
    assert document.find_by_id("nothing") is None
    assert [b.as_text() for b in document.find_by_tag("b")] == ["bold"]
