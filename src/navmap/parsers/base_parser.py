"""Abstract base class for navigation document parsers.

Parsers turn a document (a file on disk or its raw bytes) into a
`NavigationParseResult`. Unlike generic document parsers they do not raise
for unreadable input; a problem is reported through the result's `error`.

Concrete implementations should subclass `BaseParser` and implement
`can_parse()` and `parse_bytes()`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from navmap.navigation.models import DEFAULT_LOGO_TEXT, NavigationParseResult, empty_navigation_config


class BaseParser(ABC):
    """Abstract navigation parser interface."""

    def __init__(self, *, logo_text: str = DEFAULT_LOGO_TEXT) -> None:
        self.logo_text = logo_text

    @abstractmethod
    def can_parse(self, path: Path) -> bool:
        """Return True if this parser can handle the given file/path."""

    @abstractmethod
    def parse_bytes(self, data: bytes) -> NavigationParseResult:
        """Parse in-memory document content."""
        raise NotImplementedError

    def parse(self, path: Path) -> NavigationParseResult:
        """Read the file and parse its content."""
        try:
            data = path.read_bytes()
        except OSError as exc:
            return self.failure(f"Could not read {path.name}: {exc}")
        return self.parse_bytes(data)

    def failure(self, message: str) -> NavigationParseResult:
        return NavigationParseResult(config=empty_navigation_config(self.logo_text), error=message)
