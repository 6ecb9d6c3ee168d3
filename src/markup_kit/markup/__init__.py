from .base import HEADING_TAGS, LIST_TAGS, MarkupNode, heading_level
from .soup import SoupNode, parse_markup

__all__ = [
    "HEADING_TAGS",
    "LIST_TAGS",
    "MarkupNode",
    "SoupNode",
    "heading_level",
    "parse_markup",
]
