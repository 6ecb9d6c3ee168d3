from .base import DocumentParser
from .config import ParserConfig
from .macros import AttributeMacroClassifier, MacroClassifier, MacroRules, load_macro_classifier
from .markup_parser import MarkupParser, detect_language
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

__all__ = [
    "AttributeMacroClassifier",
    "CodeBlock",
    "DocumentParser",
    "Image",
    "Link",
    "ListCollection",
    "ListGroup",
    "ListItem",
    "Macro",
    "MacroClassifier",
    "MacroRules",
    "MarkupParser",
    "ParseFailure",
    "ParsedDocument",
    "ParserConfig",
    "Section",
    "Table",
    "TableCell",
    "detect_language",
    "load_macro_classifier",
]
