# markup/soup.py

from bs4 import BeautifulSoup, Tag

from .base import MarkupNode

# Stdlib-backed builder: tolerant of fragments and namespaced tags such as
# <ac:structured-macro>, and needs no compiled extension.
PARSER_FEATURES = "html.parser"


class SoupNode(MarkupNode):
    """MarkupNode adapter over a BeautifulSoup tag."""

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    @property
    def tag(self) -> str:
        return self._tag.name

    def get_attribute(self, name: str) -> str | None:
        value = self._tag.get(name)
        if value is None:
            return None
        # bs4 returns multi-valued attributes (class, rel) as lists
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def has_attribute(self, name: str) -> bool:
        return self._tag.has_attr(name)

    @property
    def children(self) -> list["SoupNode"]:
        return [SoupNode(child) for child in self._tag.children if isinstance(child, Tag)]

    def next_element_sibling(self) -> "SoupNode | None":
        sibling = self._tag.find_next_sibling(True)
        return SoupNode(sibling) if sibling is not None else None

    def find(self, *tags: str) -> "SoupNode | None":
        found = self._tag.find(list(tags) if tags else True)
        return SoupNode(found) if found is not None else None

    def find_all(self, *tags: str) -> list["SoupNode"]:
        return [SoupNode(found) for found in self._tag.find_all(list(tags) if tags else True)]

    @property
    def text(self) -> str:
        return self._tag.get_text().strip()

    @property
    def outer_html(self) -> str:
        return str(self._tag)

    @property
    def inner_html(self) -> str:
        return self._tag.decode_contents()

    def __repr__(self) -> str:
        return f"SoupNode(<{self._tag.name}>)"


def parse_markup(markup: str) -> SoupNode:
    """
    Build a markup tree and return its document root.

    Fragments are accepted as-is; no <html>/<body> wrapper is added.
    """
    if not isinstance(markup, str):
        raise TypeError(f"markup must be str, got {type(markup).__name__}")
    return SoupNode(BeautifulSoup(markup, PARSER_FEATURES))
