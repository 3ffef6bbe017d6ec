"""Dispatch documents to the parser that understands them."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from navmap.config import ParserConfig
from navmap.navigation.models import NavigationParseResult, empty_navigation_config

from .base_parser import BaseParser
from .pdf_parser import PdfParser
from .text_parser import TextParser

logger = logging.getLogger(__name__)

UNSUPPORTED_FILE = "Unsupported file type. Please upload a PDF or structured text file."

_CONTENT_TYPE_SUFFIXES = {
    "application/pdf": ".pdf",
    "text/csv": ".csv",
    "text/tab-separated-values": ".tsv",
    "text/markdown": ".md",
    "text/plain": ".txt",
}


def build_parsers(config: Optional[ParserConfig] = None) -> List[BaseParser]:
    cfg = config or ParserConfig()
    return [
        PdfParser(
            logo_text=cfg.logo_text,
            tolerance=cfg.row_tolerance,
            separator=cfg.cell_separator,
        ),
        TextParser(logo_text=cfg.logo_text),
    ]


def find_parser(path: Path, config: Optional[ParserConfig] = None) -> Optional[BaseParser]:
    return next((p for p in build_parsers(config) if p.can_parse(path)), None)


def _unsupported(config: Optional[ParserConfig]) -> NavigationParseResult:
    cfg = config or ParserConfig()
    return NavigationParseResult(config=empty_navigation_config(cfg.logo_text), error=UNSUPPORTED_FILE)


def parse_navigation_file(
    path: Union[str, Path], config: Optional[ParserConfig] = None
) -> NavigationParseResult:
    """Parse a navigation map from a PDF or structured text file on disk."""
    path = Path(path)
    parser = find_parser(path, config)
    if parser is None:
        logger.info("No parser for %s", path.name)
        return _unsupported(config)
    return parser.parse(path)


def parse_navigation_bytes(
    data: bytes,
    filename: str = "",
    *,
    content_type: Optional[str] = None,
    config: Optional[ParserConfig] = None,
) -> NavigationParseResult:
    """Parse in-memory document content, choosing a parser by name or MIME type."""
    path = Path(Path(filename).name or "document")
    parser = find_parser(path, config)
    if parser is None and content_type:
        mime = content_type.split(";", 1)[0].strip().lower()
        suffix = _CONTENT_TYPE_SUFFIXES.get(mime)
        if suffix:
            parser = find_parser(path.with_suffix(suffix), config)
    if parser is None:
        logger.info("No parser for %s (%s)", filename or "<unnamed>", content_type or "unknown type")
        return _unsupported(config)
    return parser.parse_bytes(data)
