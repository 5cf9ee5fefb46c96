# src/htmlwalker/dom/core.py
from abc import ABC, abstractmethod
from typing import Callable, Iterator, Optional, TYPE_CHECKING

from bs4 import Tag

from htmlwalker.utils.soup_utils import SoupUtils

if TYPE_CHECKING:
    from .collection import HtmlElements
    from .elements.anchor import HtmlAnchor

ANCHOR_TAG = "a"

# Called with the current element and its ancestors (nearest first).
# Returning False skips the subtree below the current element.
Visitor = Callable[["HtmlElement", "HtmlElements"], bool]


class ElementFinder(ABC):
    """Lookup and traversal operations shared by elements and documents."""

    @abstractmethod
    def find_by_id(self, element_id: str) -> Optional["HtmlElement"]:
        ...

    @abstractmethod
    def find_by_tag(self, tag: str) -> Iterator["HtmlElement"]:
        ...

    @abstractmethod
    def visit(self, visitor: Visitor) -> "ElementFinder":
        ...


class HtmlElement(ElementFinder):
    """
    Read-only view of a single node of a parsed document.

    Equality, hashing and str() are derived from the underlying node only,
    so two wrappers over the same node are interchangeable.
    """

    @abstractmethod
    def as_text(self) -> str:
        ...

    @abstractmethod
    def as_anchor(self) -> Optional["HtmlAnchor"]:
        ...

    @abstractmethod
    def as_raw_element(self) -> Tag:
        ...

    @abstractmethod
    def get_parent(self) -> Optional["HtmlElement"]:
        ...

    def get_parents(self) -> Iterator["HtmlElement"]:
        """
        Yields the ancestors of this element, nearest first, ending at the document root.
        Parents are looked up one at a time as the iterator is consumed.
        """
        parent = self.get_parent()
        while parent is not None:
            yield parent
            parent = parent.get_parent()

    def find_parent(self, predicate: Callable[["HtmlElement"], bool]) -> Optional["HtmlElement"]:
        """Returns the nearest ancestor matching the predicate, or None."""
        return next((parent for parent in self.get_parents() if predicate(parent)), None)

    @property
    def tag_name(self) -> str:
        return SoupUtils.tag_name(self.as_raw_element())

    def attr(self, name: str) -> str:
        return SoupUtils.attr(self.as_raw_element(), name)

    def __eq__(self, other):
        if not isinstance(other, HtmlElement):
            return NotImplemented
        return self.as_raw_element() is other.as_raw_element()

    def __hash__(self):
        return id(self.as_raw_element())

    def __str__(self):
        return str(self.as_raw_element())

    def __repr__(self):
        element_id = self.attr("id")
        suffix = f" id={element_id!r}" if element_id else ""
        return f"<{type(self).__name__} {self.tag_name}{suffix}>"


class HtmlElementWrapper(HtmlElement):
    """HtmlElement backed directly by a BeautifulSoup Tag."""

    def __init__(self, element: Tag):
        self._element = element

    @staticmethod
    def wrap(element: Optional[Tag]) -> Optional["HtmlElementWrapper"]:
        return HtmlElementWrapper(element) if element is not None else None

    def as_text(self) -> str:
        return SoupUtils.text(self._element)

    def as_raw_element(self) -> Tag:
        return self._element

    def get_parent(self) -> Optional[HtmlElement]:
        return self.wrap(self._element.parent)

    def find_by_id(self, element_id: str) -> Optional[HtmlElement]:
        return self.wrap(SoupUtils.find_by_id(self._element, element_id))

    def find_by_tag(self, tag: str) -> Iterator[HtmlElement]:
        return (HtmlElementWrapper(found) for found in SoupUtils.iter_by_tag(self._element, tag))

    def as_anchor(self) -> Optional["HtmlAnchor"]:
        from .elements.anchor import HtmlAnchor

        if SoupUtils.tag_name(self._element) != ANCHOR_TAG:
            return None
        return HtmlAnchor(self)

    def visit(self, visitor: Visitor) -> "HtmlElementWrapper":
        from .traverser import Traverser

        Traverser.of(self._element).visit(visitor)
        return self
