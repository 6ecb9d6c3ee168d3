# markup/base.py

from collections.abc import Sequence
from typing import Protocol

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
LIST_TAGS = ("ol", "ul")


class MarkupNode(Protocol):
    """
    Read-only view of one element in a parsed markup tree.

    The parser and the chunker only talk to this interface, never to the
    HTML library behind it. Text and markup accessors are computed on
    demand and never mutate the tree.
    """

    @property
    def tag(self) -> str: ...

    def get_attribute(self, name: str) -> str | None: ...

    def has_attribute(self, name: str) -> bool: ...

    @property
    def children(self) -> Sequence["MarkupNode"]:
        """Element children in document order (text nodes skipped)."""
        ...

    def next_element_sibling(self) -> "MarkupNode | None": ...

    def find(self, *tags: str) -> "MarkupNode | None":
        """First descendant element with one of `tags` (any tag if empty)."""
        ...

    def find_all(self, *tags: str) -> list["MarkupNode"]:
        """Descendant elements with one of `tags`, in document order."""
        ...

    @property
    def text(self) -> str:
        """Concatenated descendant text, whitespace-trimmed."""
        ...

    @property
    def outer_html(self) -> str: ...

    @property
    def inner_html(self) -> str: ...


def heading_level(node: MarkupNode) -> int | None:
    """Return 1..6 for h1..h6 elements, None for anything else."""
    if node.tag in HEADING_TAGS:
        return int(node.tag[1])
    return None
