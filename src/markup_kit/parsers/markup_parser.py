# parsers/markup_parser.py

import logging
import re
from collections.abc import Callable
from time import monotonic
from typing import TypeVar

from markup_kit.markup import HEADING_TAGS, LIST_TAGS, MarkupNode, heading_level, parse_markup
from markup_kit.observability import names
from markup_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser
from .config import ParserConfig
from .macros import AttributeMacroClassifier, MacroClassifier
from .models import (
    CodeBlock,
    Image,
    Link,
    ListCollection,
    ListGroup,
    ListItem,
    Macro,
    ParsedDocument,
    ParseFailure,
    Section,
    Table,
    TableCell,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

LANGUAGE_CLASS = re.compile(r"language-(\w+)")

# Substring hints tried in order against the class attribute; first match wins.
LANGUAGE_HINTS = (
    ("java", "java"),
    ("js", "javascript"),
    ("py", "python"),
    ("xml", "xml"),
    ("html", "xml"),
    ("css", "css"),
    ("sql", "sql"),
)

WIKI_PATH = "/wiki/"
ATTACHMENT_PATH = "/download/attachments/"


class MarkupParser(DocumentParser):
    """
    Deterministic wiki markup parser.
    - One markup tree per call, no state shared between calls
    - Each extraction fails on its own and degrades to an empty value
    - Sections are flat sibling runs, not nested descendants
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        macro_classifier: MacroClassifier | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config or ParserConfig()
        self.macro_classifier = macro_classifier or AttributeMacroClassifier()
        self.metrics_hook = metrics_hook

    def parse(self, markup: str) -> ParsedDocument | ParseFailure:
        start = monotonic()
        try:
            root = parse_markup(markup)
            document = self._build_document(root)
        except Exception as exc:
            logger.error("Failed to parse markup: %s", exc)
            self.metrics_hook.increment(names.PARSING_ERRORS_TOTAL)
            raw = markup if isinstance(markup, str) else str(markup)
            return ParseFailure(error=str(exc), raw_markup=raw)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PARSING_DURATION, elapsed_ms)
        self.metrics_hook.record_gauge(names.PARSING_MARKUP_SIZE, len(markup))
        self.metrics_hook.increment(names.PARSING_DOCUMENTS_TOTAL)
        logger.info(
            "Parsed document %r: %d sections, %d tables, %d links, %d macros",
            document.title,
            len(document.sections),
            len(document.tables),
            len(document.links),
            len(document.macros),
        )
        return document

    def _build_document(self, root: MarkupNode) -> ParsedDocument:
        return ParsedDocument(
            metadata=self._extract("metadata", self._extract_metadata, root, dict),
            title=self._extract("title", self._extract_title, root, str),
            sections=self._extract("sections", self._extract_sections, root, list),
            tables=self._extract("tables", self._extract_tables, root, list),
            lists=self._extract("lists", self._extract_lists, root, ListCollection),
            code_blocks=self._extract("code_blocks", self._extract_code_blocks, root, list),
            links=self._extract("links", self._extract_links, root, list),
            images=self._extract("images", self._extract_images, root, list),
            macros=self._extract("macros", self._extract_macros, root, list),
            text_content=self._extract("text_content", lambda node: node.text, root, str),
        )

    def _extract(
        self,
        field_name: str,
        extractor: Callable[[MarkupNode], T],
        root: MarkupNode,
        default: Callable[[], T],
    ) -> T:
        try:
            return extractor(root)
        except Exception:
            logger.exception("Failed to extract %s, using empty value", field_name)
            self.metrics_hook.increment(
                names.PARSING_EXTRACTION_ERRORS_TOTAL, labels={"field": field_name}
            )
            return default()

    def _extract_metadata(self, root: MarkupNode) -> dict[str, str]:
        metadata = {}
        for meta in root.find_all("meta"):
            name = meta.get_attribute("name")
            content = meta.get_attribute("content")
            if name and content:
                metadata[name] = content
        return metadata

    def _extract_title(self, root: MarkupNode) -> str:
        node = root.find("title") or root.find("h1")
        return node.text if node is not None else ""

    def _extract_sections(self, root: MarkupNode) -> list[Section]:
        sections = []
        for heading in root.find_all(*HEADING_TAGS):
            level = int(heading.tag[1])

            run: list[MarkupNode] = []
            sibling = heading.next_element_sibling()
            while sibling is not None:
                sibling_level = heading_level(sibling)
                if sibling_level is not None and sibling_level <= level:
                    break
                run.append(sibling)
                sibling = sibling.next_element_sibling()

            sections.append(
                Section(
                    level=level,
                    title=heading.text,
                    content="".join(node.outer_html for node in run),
                    text_content="\n".join(node.text for node in run).strip(),
                )
            )
        return sections

    def _extract_tables(self, root: MarkupNode) -> list[Table]:
        tables = []
        for table in root.find_all("table"):
            caption = table.find("caption")
            headers = [th.text for th in table.find_all("th")]

            rows = []
            for tr in table.find_all("tr"):
                cells = [self._table_cell(td) for td in tr.children if td.tag == "td"]
                # Pure header rows have no <td> cells
                if cells:
                    rows.append(cells)

            tables.append(
                Table(
                    caption=caption.text if caption is not None else "",
                    headers=headers,
                    rows=rows,
                )
            )
        return tables

    def _table_cell(self, td: MarkupNode) -> TableCell:
        return TableCell(
            text=td.text,
            html=td.inner_html.strip(),
            colspan=_span(td.get_attribute("colspan")),
            rowspan=_span(td.get_attribute("rowspan")),
        )

    def _extract_lists(self, root: MarkupNode) -> ListCollection:
        return self._collect_lists(root, depth=0)

    def _collect_lists(self, scope: MarkupNode, depth: int) -> ListCollection:
        return ListCollection(
            ordered=[self._list_group(node, depth) for node in _outermost_lists(scope, "ol")],
            unordered=[self._list_group(node, depth) for node in _outermost_lists(scope, "ul")],
        )

    def _list_group(self, list_node: MarkupNode, depth: int) -> ListGroup:
        return [self._list_item(li, depth) for li in list_node.children if li.tag == "li"]

    def _list_item(self, li: MarkupNode, depth: int) -> ListItem:
        nested_lists = None
        if depth < self.config.max_list_depth:
            nested = self._collect_lists(li, depth + 1)
            if not nested.is_empty():
                nested_lists = nested
        elif li.find(*LIST_TAGS) is not None:
            logger.warning(
                "List nesting exceeds %d levels, dropping deeper lists",
                self.config.max_list_depth,
            )

        return ListItem(text=li.text, html=li.inner_html.strip(), nested_lists=nested_lists)

    def _extract_code_blocks(self, root: MarkupNode) -> list[CodeBlock]:
        return [
            CodeBlock(
                code=node.text,
                language=detect_language(node.get_attribute("class") or ""),
                html=node.outer_html,
            )
            for node in root.find_all("pre", "code")
        ]

    def _extract_links(self, root: MarkupNode) -> list[Link]:
        links = []
        for anchor in root.find_all("a"):
            href = anchor.get_attribute("href") or ""
            links.append(
                Link(
                    href=href,
                    text=anchor.text,
                    title=anchor.get_attribute("title") or "",
                    is_internal=WIKI_PATH in href or href.startswith("/"),
                    is_attachment=ATTACHMENT_PATH in href,
                )
            )
        return links

    def _extract_images(self, root: MarkupNode) -> list[Image]:
        images = []
        for img in root.find_all("img"):
            src = img.get_attribute("src") or ""
            images.append(
                Image(
                    src=src,
                    alt=img.get_attribute("alt") or "",
                    title=img.get_attribute("title") or "",
                    width=img.get_attribute("width") or None,
                    height=img.get_attribute("height") or None,
                    is_attachment=ATTACHMENT_PATH in src,
                )
            )
        return images

    def _extract_macros(self, root: MarkupNode) -> list[Macro]:
        classifier = self.macro_classifier
        return [
            Macro(
                name=classifier.macro_name(node),
                parameters=classifier.macro_parameters(node),
                html=node.outer_html,
                content=node.text,
            )
            for node in root.find_all()
            if classifier.is_macro(node)
        ]


def detect_language(classes: str) -> str:
    """Guess a code block's language from its class attribute."""
    match = LANGUAGE_CLASS.search(classes)
    if match:
        return match.group(1)
    for hint, language in LANGUAGE_HINTS:
        if hint in classes:
            return language
    return "unknown"


def _span(value: str | None) -> int:
    try:
        span = int(value) if value else 1
    except ValueError:
        return 1
    return max(span, 1)


def _outermost_lists(scope: MarkupNode, tag: str) -> list[MarkupNode]:
    """
    `tag` lists under `scope` that are not nested inside another list.

    Walks iteratively so deep markup cannot hit the recursion limit; the
    stack holds children reversed to keep document order.
    """
    found = []
    pending = list(reversed(scope.children))
    while pending:
        node = pending.pop()
        if node.tag in LIST_TAGS:
            if node.tag == tag:
                found.append(node)
            continue
        pending.extend(reversed(node.children))
    return found
