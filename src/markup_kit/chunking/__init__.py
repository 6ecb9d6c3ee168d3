from .chunking import ChunkState, chunk_markup, document_url
from .config import ChunkerConfig
from .models import ChunkMetadata, ChunkType, DocumentMeta, VectorChunk
from .render import render_element, render_list, render_table

__all__ = [
    "ChunkMetadata",
    "ChunkState",
    "ChunkType",
    "ChunkerConfig",
    "DocumentMeta",
    "VectorChunk",
    "chunk_markup",
    "document_url",
    "render_element",
    "render_list",
    "render_table",
]
