# src/htmlwalker/dom/elements/anchor.py
from typing import Iterator, Optional
from urllib.parse import urljoin

from bs4 import Tag

from ..core import HtmlElement, Visitor


class HtmlAnchor(HtmlElement):
    """
    An element known to be a hyperlink (<a>) tag.
    Wraps another HtmlElement and forwards every element operation to it.
    """

    def __init__(self, element: HtmlElement):
        self._element = element

    def get_href(self) -> str:
        """Returns the raw href attribute, or "" when the anchor has none."""
        return self._element.attr("href")

    def resolve_href(self, base_url: str) -> str:
        """Returns the href made absolute against `base_url`."""
        href = self.get_href().strip()
        return urljoin(base_url, href) if href else ""

    # --- Forwarded element operations ---

    def find_by_id(self, element_id: str) -> Optional[HtmlElement]:
        return self._element.find_by_id(element_id)

    def find_by_tag(self, tag: str) -> Iterator[HtmlElement]:
        return self._element.find_by_tag(tag)

    def as_text(self) -> str:
        return self._element.as_text()

    def as_anchor(self) -> Optional["HtmlAnchor"]:
        return self._element.as_anchor()

    def as_raw_element(self) -> Tag:
        return self._element.as_raw_element()

    def get_parent(self) -> Optional[HtmlElement]:
        return self._element.get_parent()

    def get_parents(self) -> Iterator[HtmlElement]:
        return self._element.get_parents()

    def visit(self, visitor: Visitor) -> "HtmlAnchor":
        """Visits the wrapped element's subtree and returns this anchor."""
        self._element.visit(visitor)
        return self
