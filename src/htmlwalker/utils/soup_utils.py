# src/htmlwalker/utils/soup_utils.py
import logging
from typing import Iterator, List, Optional

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

PARSER_FEATURES = "html.parser"


class SoupUtils:
    """
    A collection of static methods forming the boundary to BeautifulSoup.
    Everything the DOM layer asks of the parsed tree goes through here.
    """

    @staticmethod
    def parse(html: str) -> BeautifulSoup:
        """Parses markup into a tree; the returned soup is the root node."""
        return BeautifulSoup(html, PARSER_FEATURES)

    @staticmethod
    def child_tags(tag: Tag) -> List[Tag]:
        """Returns the element children of a tag in document order (text, comments and doctypes skipped)."""
        return [child for child in tag.children if isinstance(child, Tag)]

    @staticmethod
    def text(tag: Tag) -> str:
        """Returns the text of the subtree with runs of whitespace collapsed to single spaces."""
        return " ".join(tag.get_text().split())

    @staticmethod
    def tag_name(tag: Tag) -> str:
        return (tag.name or "").lower()

    @staticmethod
    def attr(tag: Tag, name: str) -> str:
        """
        Reads an attribute value, returning "" when the attribute is absent.
        Multi-valued attributes (class, rel, ...) are joined with spaces.
        """
        value = tag.get(name)
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            return " ".join(value)
        return value

    @staticmethod
    def find_by_id(tag: Tag, element_id: str) -> Optional[Tag]:
        """
        Returns the first tag in the subtree rooted at `tag` (the tag itself included)
        whose id equals `element_id`, in document order.
        """
        if tag.get("id") == element_id:
            return tag
        return tag.find(id=element_id)

    @staticmethod
    def iter_by_tag(tag: Tag, tag_name: str) -> Iterator[Tag]:
        """
        Lazily yields every tag in the subtree rooted at `tag` (the tag itself included)
        with the given name, in document order. Names are compared case-insensitively.
        """
        wanted = tag_name.lower()
        if SoupUtils.tag_name(tag) == wanted:
            yield tag
        for node in tag.descendants:
            if isinstance(node, Tag) and SoupUtils.tag_name(node) == wanted:
                yield node
