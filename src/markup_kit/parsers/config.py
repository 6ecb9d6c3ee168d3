# parsers/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for MarkupParser.

    Immutable. Explicit. No magic defaults from environment.
    """

    # Nested lists deeper than this are cut off (nested_lists=None)
    max_list_depth: int = 32

    def __post_init__(self) -> None:
        if self.max_list_depth < 0:
            raise ValueError("max_list_depth must be >= 0")
