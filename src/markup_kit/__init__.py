# Chunking
from .chunking import ChunkerConfig, DocumentMeta, VectorChunk, chunk_markup

# Markup tree
from .markup import MarkupNode, parse_markup

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    AttributeMacroClassifier,
    MacroClassifier,
    MarkupParser,
    ParsedDocument,
    ParseFailure,
    ParserConfig,
    load_macro_classifier,
)

__all__ = [
    # Chunking
    "ChunkerConfig",
    "DocumentMeta",
    "VectorChunk",
    "chunk_markup",
    # Markup tree
    "MarkupNode",
    "parse_markup",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "AttributeMacroClassifier",
    "MacroClassifier",
    "MarkupParser",
    "ParseFailure",
    "ParsedDocument",
    "ParserConfig",
    "load_macro_classifier",
]
