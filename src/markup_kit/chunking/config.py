# chunking/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ChunkerConfig:
    """Configuration for chunk_markup.

    Immutable. Explicit. No magic defaults from environment.
    """

    # Heuristic bound on the raw accumulated string, separators included
    max_chars: int = 1000
    default_section: str = "Main Content"
    # Top-level elements that are visited; a heading inside one starts a section
    block_tags: tuple[str, ...] = ("div", "p", "table", "ul", "ol")
    # Whether bare top-level <h1>..<h6> also start sections
    include_headings: bool = True
    # e.g. "https://example.atlassian.net"; used to build page URLs
    base_url: str = ""

    def __post_init__(self) -> None:
        if self.max_chars <= 0:
            raise ValueError("max_chars must be > 0")
        if not self.default_section:
            raise ValueError("default_section must not be empty")
