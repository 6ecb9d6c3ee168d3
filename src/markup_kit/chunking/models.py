# chunking/models.py

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel

ChunkType = Literal["section", "metadata"]


@dataclass(frozen=True)
class DocumentMeta:
    """Provenance of one page, supplied by the retrieval layer."""

    id: str
    title: str
    container_key: str
    last_updated: str = ""
    author: str = ""
    # Canonical page URL; derived from ChunkerConfig.base_url when empty
    url: str = ""


class ChunkMetadata(BaseModel):
    url: str
    last_updated: str
    author: str
    section: str | None = None

    class Config:
        extra = "forbid"
        frozen = True


class VectorChunk(BaseModel):
    """One unit of text for the embedding pipeline.

    Plain strings and nesting only, so it survives a JSON round trip.
    """

    id: str
    title: str
    document_id: str
    container_key: str
    content: str
    type: ChunkType
    metadata: ChunkMetadata

    class Config:
        extra = "forbid"
        frozen = True
