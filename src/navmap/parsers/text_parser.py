"""Parser for structured navigation text files (CSV, TSV, outlines, markdown)."""

from __future__ import annotations

from pathlib import Path

from navmap.navigation.engine import parse_navigation_text
from navmap.navigation.models import NavigationParseResult

from .base_parser import BaseParser


class TextParser(BaseParser):
    """Parser for `.txt`, `.csv`, `.tsv` and `.md` navigation outlines."""

    suffixes = {".txt", ".csv", ".tsv", ".md", ".markdown"}

    def can_parse(self, path: Path) -> bool:
        return path.suffix.lower() in self.suffixes

    def parse_bytes(self, data: bytes) -> NavigationParseResult:
        # utf-8-sig drops a spreadsheet-exported BOM from the first header cell
        text = data.decode("utf-8-sig", errors="replace")
        return parse_navigation_text(text, logo_text=self.logo_text)
