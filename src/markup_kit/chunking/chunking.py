import logging
from dataclasses import dataclass, fields
from time import monotonic

from markup_kit.markup import HEADING_TAGS, heading_level, parse_markup
from markup_kit.observability import names
from markup_kit.observability.base import MetricsHook, NoOpMetricsHook

from .config import ChunkerConfig
from .models import ChunkMetadata, DocumentMeta, VectorChunk
from .render import render_element

logger = logging.getLogger(__name__)

PARAGRAPH_BREAK = "\n\n"


@dataclass(frozen=True)
class ChunkState:
    """Text gathered for the chunk being built, and the section it belongs to."""

    content: str
    section: str

    def append(self, text: str) -> "ChunkState":
        content = self.content + PARAGRAPH_BREAK + text if self.content else text
        return ChunkState(content=content, section=self.section)

    def carry_over(self) -> "ChunkState":
        # Seed is the last paragraph, uncapped: an oversized paragraph
        # starts the next chunk already over max_chars.
        return ChunkState(
            content=self.content.split(PARAGRAPH_BREAK)[-1], section=self.section
        )

    def is_blank(self) -> bool:
        return not self.content.strip()


def chunk_markup(
    markup: str,
    meta: DocumentMeta,
    *,
    config: ChunkerConfig = ChunkerConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[VectorChunk]:
    """Split a page into section chunks followed by one metadata chunk.

    Never raises. If the section pass fails the error is logged and only
    the metadata chunk is returned.
    """
    start = monotonic()
    meta = _normalized(meta)
    url = document_url(meta, config)

    try:
        chunks = _section_chunks(markup, meta, url, config)
    except Exception:
        logger.exception("Failed to chunk document %s, keeping metadata only", meta.id)
        metrics_hook.increment(names.CHUNKING_ERRORS_TOTAL)
        chunks = []

    # dict.fromkeys keeps first-seen order
    sections = list(dict.fromkeys(c.metadata.section or "" for c in chunks))
    chunks.append(_metadata_chunk(meta, url, sections, len(chunks)))

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.CHUNKING_DURATION, elapsed_ms)
    metrics_hook.increment(names.CHUNKING_CHUNKS_CREATED, len(chunks))
    metrics_hook.record_gauge(names.CHUNKING_SECTIONS_SEEN, len(sections))
    logger.info(
        "Chunked document %s into %d chunks across %d sections",
        meta.id,
        len(chunks),
        len(sections),
    )
    return chunks


def document_url(meta: DocumentMeta, config: ChunkerConfig) -> str:
    if meta.url:
        return meta.url
    if config.base_url:
        base = config.base_url.rstrip("/")
        return f"{base}/wiki/spaces/{meta.container_key}/pages/{meta.id}"
    return ""


def _normalized(meta: DocumentMeta) -> DocumentMeta:
    """None becomes an empty string; any other value is passed through str()."""
    values = {f.name: getattr(meta, f.name) for f in fields(DocumentMeta)}
    return DocumentMeta(
        **{name: "" if value is None else str(value) for name, value in values.items()}
    )


def _section_chunks(
    markup: str, meta: DocumentMeta, url: str, config: ChunkerConfig
) -> list[VectorChunk]:
    root = parse_markup(markup)
    body = root.find("body") or root

    chunks: list[VectorChunk] = []
    state = ChunkState(content="", section=config.default_section)

    for element in body.children:
        is_heading = heading_level(element) is not None
        if element.tag not in config.block_tags and not (
            is_heading and config.include_headings
        ):
            logger.debug("Skipping top-level <%s>", element.tag)
            continue

        heading = element if is_heading else element.find(*HEADING_TAGS)
        if heading is not None:
            _flush(state, chunks, meta, url)
            title = heading.text
            state = ChunkState(content=title, section=title)
            continue

        text = render_element(element)
        if not text.strip():
            continue

        state = state.append(text)
        if len(state.content) > config.max_chars:
            logger.debug(
                "Chunk for section %r reached %d chars, splitting",
                state.section,
                len(state.content),
            )
            _flush(state, chunks, meta, url)
            state = state.carry_over()

    _flush(state, chunks, meta, url)
    return chunks


def _flush(
    state: ChunkState, chunks: list[VectorChunk], meta: DocumentMeta, url: str
) -> None:
    if state.is_blank():
        return

    chunks.append(
        VectorChunk(
            id=f"{meta.id}-chunk-{len(chunks)}",
            title=meta.title,
            document_id=meta.id,
            container_key=meta.container_key,
            content=state.content,
            type="section",
            metadata=ChunkMetadata(
                url=url,
                last_updated=meta.last_updated,
                author=meta.author,
                section=state.section,
            ),
        )
    )


def _metadata_chunk(
    meta: DocumentMeta, url: str, sections: list[str], section_count: int
) -> VectorChunk:
    content = "\n".join(
        [
            f"Title: {meta.title}",
            f"Space: {meta.container_key}",
            f"Sections: {', '.join(sections)}",
            f"Total Chunks: {section_count}",
            f"Last Updated: {meta.last_updated}",
            f"Author: {meta.author}",
        ]
    )
    return VectorChunk(
        id=f"{meta.id}-metadata",
        title=meta.title,
        document_id=meta.id,
        container_key=meta.container_key,
        content=content,
        type="metadata",
        metadata=ChunkMetadata(
            url=url,
            last_updated=meta.last_updated,
            author=meta.author,
        ),
    )
