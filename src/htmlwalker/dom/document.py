# src/htmlwalker/dom/document.py
from typing import Iterator, Optional

from bs4 import BeautifulSoup

from htmlwalker.utils.soup_utils import SoupUtils

from .core import ElementFinder, HtmlElement, HtmlElementWrapper, ANCHOR_TAG, Visitor
from .elements.anchor import HtmlAnchor
from .traverser import Traverser


class HtmlDocument(ElementFinder):
    """
    Represents a parsed HTML document.

    Offers the same lookup and visit operations as an element, scoped to the
    whole tree, plus whole-document text and access to the BeautifulSoup object.
    """

    def __init__(self, document: BeautifulSoup, source: Optional[str] = None):
        self._document = document
        self.source = source

    def get(self) -> BeautifulSoup:
        """Returns the underlying BeautifulSoup document."""
        return self._document

    @property
    def root(self) -> HtmlElement:
        """The document root as an element (it has no parent)."""
        return HtmlElementWrapper(self._document)

    def as_text(self) -> str:
        return SoupUtils.text(self._document)

    def find_by_id(self, element_id: str) -> Optional[HtmlElement]:
        return HtmlElementWrapper.wrap(SoupUtils.find_by_id(self._document, element_id))

    def find_by_tag(self, tag: str) -> Iterator[HtmlElement]:
        return (HtmlElementWrapper(found) for found in SoupUtils.iter_by_tag(self._document, tag))

    def find_anchors(self) -> Iterator[HtmlAnchor]:
        """Yields every <a> element of the document as an HtmlAnchor."""
        return (HtmlAnchor(element) for element in self.find_by_tag(ANCHOR_TAG))

    def visit(self, visitor: Visitor) -> "HtmlDocument":
        Traverser.of(self._document).visit(visitor)
        return self

    def __repr__(self):
        return f"<HtmlDocument source={self.source!r}>"
