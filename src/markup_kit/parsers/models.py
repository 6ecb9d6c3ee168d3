# parsers/models.py

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class Section:
    level: int
    title: str
    # Outer markup of the heading's flat run of following siblings
    content: str
    text_content: str


@dataclass(frozen=True)
class TableCell:
    text: str
    html: str
    colspan: int = 1
    rowspan: int = 1


@dataclass(frozen=True)
class Table:
    caption: str
    headers: list[str]
    rows: list[list[TableCell]]


@dataclass(frozen=True)
class ListItem:
    text: str
    html: str
    # None means "no nested list", never an empty collection
    nested_lists: "ListCollection | None" = None


ListGroup = list[ListItem]


@dataclass(frozen=True)
class ListCollection:
    ordered: list[ListGroup] = field(default_factory=list)
    unordered: list[ListGroup] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.ordered and not self.unordered


@dataclass(frozen=True)
class CodeBlock:
    code: str
    language: str
    html: str


@dataclass(frozen=True)
class Link:
    href: str
    text: str
    title: str
    is_internal: bool
    is_attachment: bool


@dataclass(frozen=True)
class Image:
    src: str
    alt: str
    title: str
    width: str | None
    height: str | None
    is_attachment: bool


@dataclass(frozen=True)
class Macro:
    name: str
    parameters: dict[str, str]
    html: str
    content: str


@dataclass(frozen=True)
class ParsedDocument:
    metadata: dict[str, str]
    title: str
    sections: list[Section]
    tables: list[Table]
    lists: ListCollection
    code_blocks: list[CodeBlock]
    links: list[Link]
    images: list[Image]
    macros: list[Macro]
    text_content: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Plain dict/list/str nesting, ready for json.dumps."""
        return asdict(self)


@dataclass(frozen=True)
class ParseFailure:
    """
    Degenerate parse result.

    Returned instead of raising so that one broken page does not abort a
    batch; callers decide whether to retry or skip.
    """

    error: str
    raw_markup: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
