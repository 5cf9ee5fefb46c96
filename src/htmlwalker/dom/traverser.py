# src/htmlwalker/dom/traverser.py
import logging
from typing import List, Optional, Tuple

from bs4 import Tag

from htmlwalker.utils.soup_utils import SoupUtils

from .collection import HtmlElements
from .core import HtmlElementWrapper, Visitor

logger = logging.getLogger(__name__)


class Traverser:
    """
    Depth-first, pre-order walk over a parsed tree driven by a Visitor.

    For every node the visitor receives the wrapped node and a snapshot of its
    ancestors (nearest first). When the visitor returns False the children of
    that node are skipped; its siblings are still visited.

    The walk uses an explicit stack instead of recursion, so deeply nested
    documents do not hit the interpreter's recursion limit.
    """

    def __init__(self, element: Optional[Tag]):
        self.element = element

    @classmethod
    def of(cls, element: Optional[Tag]) -> "Traverser":
        return cls(element)

    def visit(self, visitor: Visitor) -> "Traverser":
        if self.element is None:
            return self

        # Each entry: (node, path from the traversal root down to the node's parent)
        stack: List[Tuple[Tag, Tuple[Tag, ...]]] = [(self.element, ())]
        visited = 0
        pruned = 0

        while stack:
            node, parents = stack.pop()
            visited += 1

            proceed = visitor(HtmlElementWrapper(node), HtmlElements(parents))
            if not proceed:
                pruned += 1
                continue

            path = parents + (node,)
            # Reversed so the first child is popped first
            for child in reversed(SoupUtils.child_tags(node)):
                stack.append((child, path))

        logger.debug("Traversal from <%s> visited %d nodes, pruned %d subtrees.",
                     SoupUtils.tag_name(self.element), visited, pruned)
        return self

    def __repr__(self):
        name = SoupUtils.tag_name(self.element) if self.element is not None else None
        return f"Traverser(element={name!r})"
