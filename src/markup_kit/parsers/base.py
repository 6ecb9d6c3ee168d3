# parsers/base.py

from abc import ABC, abstractmethod

from .models import ParsedDocument, ParseFailure


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, markup: str) -> ParsedDocument | ParseFailure:
        """
        Parse raw markup into a structured, deterministic representation.

        Requirements:
        - Deterministic output for same input
        - Never raises: failures come back as ParseFailure
        - No I/O
        """
        raise NotImplementedError
