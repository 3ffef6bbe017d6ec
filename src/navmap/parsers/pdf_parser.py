"""PDF navigation parser using PyMuPDF.

Navigation maps exported to PDF usually keep each menu column as separate
text spans laid out side by side. Spans are read with their baseline
position, converted to a bottom-left origin, and handed to the row
reconstructor, which rebuilds the table rows from the vertical positions.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import fitz  # PyMuPDF

from navmap.exceptions import ExtractionError
from navmap.navigation.engine import parse_navigation_pages
from navmap.navigation.models import DEFAULT_LOGO_TEXT, NavigationParseResult
from navmap.navigation.rows import DEFAULT_CELL_SEPARATOR, DEFAULT_ROW_TOLERANCE, TextFragment

from .base_parser import BaseParser

logger = logging.getLogger(__name__)


def open_pdf(data: bytes) -> fitz.Document:
    """Open PDF bytes, raising `ExtractionError` if they cannot be read."""
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as exc:
        raise ExtractionError(f"Unable to open PDF: {exc}") from exc
    if doc.needs_pass:
        doc.close()
        raise ExtractionError("PDF is password protected")
    return doc


def _span_y(span: Dict[str, Any], page_height: float) -> Optional[float]:
    origin = span.get("origin")
    if origin and len(origin) >= 2:
        baseline = origin[1]
    elif span.get("bbox") and len(span["bbox"]) >= 4:
        baseline = span["bbox"][3]
    else:
        return None
    return page_height - float(baseline)


def _page_fragments(doc: fitz.Document, index: int) -> Iterator[TextFragment]:
    page = doc[index]
    height = page.rect.height
    layout = page.get_text("dict")
    for block in layout.get("blocks", []):
        for line in block.get("lines", []):
            for span in line.get("spans", []):
                text = span.get("text", "")
                if text and text.strip():
                    yield TextFragment(text=text, y=_span_y(span, height))


def iter_pdf_pages(doc: fitz.Document) -> Iterator[Iterator[TextFragment]]:
    """Yield one lazy fragment iterator per page.

    Reading a page happens while its iterator is consumed, so a damaged page
    only fails its own iteration.
    """
    for index in range(doc.page_count):
        yield _page_fragments(doc, index)


class PdfParser(BaseParser):
    """Parser for `.pdf` navigation maps."""

    def __init__(
        self,
        *,
        logo_text: str = DEFAULT_LOGO_TEXT,
        tolerance: float = DEFAULT_ROW_TOLERANCE,
        separator: str = DEFAULT_CELL_SEPARATOR,
    ) -> None:
        super().__init__(logo_text=logo_text)
        self.tolerance = tolerance
        self.separator = separator

    def can_parse(self, path: Path) -> bool:
        return path.suffix.lower() == ".pdf"

    def parse_bytes(self, data: bytes) -> NavigationParseResult:
        try:
            doc = open_pdf(data)
        except ExtractionError as exc:
            logger.warning("PDF extraction failed: %s", exc)
            return self.failure(f"Failed to parse PDF: {exc}")
        with doc:
            logger.debug("Opened PDF with %d pages", doc.page_count)
            return parse_navigation_pages(
                iter_pdf_pages(doc),
                tolerance=self.tolerance,
                separator=self.separator,
                logo_text=self.logo_text,
            )
