# src/htmlwalker/dom/collection.py
from collections.abc import Sequence
from typing import Iterable, Iterator, List

from bs4 import Tag

from htmlwalker.utils.soup_utils import SoupUtils

from .core import HtmlElement, HtmlElementWrapper


class HtmlElements(Sequence):
    """
    Immutable snapshot of the ancestors of a visited element, nearest first.

    Built from the descent path (root first) of one traversal step; the nodes
    are wrapped on access, so every read returns fresh HtmlElement instances.
    """

    def __init__(self, parents: Iterable[Tag]):
        self._parents = tuple(reversed(tuple(parents)))

    def __len__(self) -> int:
        return len(self._parents)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [HtmlElementWrapper(parent) for parent in self._parents[index]]
        return HtmlElementWrapper(self._parents[index])

    def __iter__(self) -> Iterator[HtmlElement]:
        return self.stream()

    def get_elements(self) -> List[HtmlElement]:
        """Returns the snapshot as a new list."""
        return list(self.stream())

    def stream(self) -> Iterator[HtmlElement]:
        return (HtmlElementWrapper(parent) for parent in self._parents)

    def __repr__(self):
        return f"HtmlElements({[SoupUtils.tag_name(p) for p in self._parents]})"
