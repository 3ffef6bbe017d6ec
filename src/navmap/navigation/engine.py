"""Navigation structure inference entry points.

Both entry points are pure and never raise: whatever the input, the caller
gets a structurally valid `NavigationConfig`, plus a diagnostic when the
result is empty or something went wrong.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Sequence

from .detect import TextFormat, content_lines, detect_format
from .fallback import parse_heading_lines, parse_table_columns
from .models import DEFAULT_LOGO_TEXT, NavigationParseResult, NavItem, empty_navigation_config
from .outline import parse_markdown, parse_outline
from .rows import DEFAULT_CELL_SEPARATOR, DEFAULT_ROW_TOLERANCE, reconstruct_lines, split_row
from .table import pad_rows, parse_table, split_delimited
from .tree import normalize_navigation

logger = logging.getLogger(__name__)

NO_CONTENT = "No content found in the text."
NO_STRUCTURE = "No navigation structure could be detected in the text."
NO_DOCUMENT_TEXT = (
    "No text could be extracted from the document. The file might be image-based or corrupted."
)
NO_TABLE = "No table structure found in the document."


def _failure(exc: Exception, logo_text: str) -> NavigationParseResult:
    logger.exception("Navigation parsing failed")
    return NavigationParseResult(
        config=empty_navigation_config(logo_text),
        error=f"Failed to parse navigation structure: {exc}",
    )


def _parse_table_with_fallback(rows: Sequence[Sequence[str]]) -> List[NavItem]:
    items = parse_table(rows)
    if not items and rows:
        logger.debug("Header row produced no items, falling back to column grouping")
        items = parse_table_columns(rows)
    return items


def _parse_lines(lines: Sequence[str]) -> List[NavItem]:
    fmt = detect_format(lines)
    logger.debug("Detected %s navigation text (%d lines)", fmt.value, len(lines))
    if fmt.delimiter is not None:
        items = _parse_table_with_fallback(split_delimited(lines, fmt.delimiter))
    elif fmt is TextFormat.MARKDOWN:
        items = parse_markdown(lines)
    else:
        items = parse_outline(lines)
    if not items:
        logger.debug("No items from %s parser, trying heading detection", fmt.value)
        items = parse_heading_lines([line.strip() for line in lines])
    return items


def parse_navigation_text(
    text: str, *, logo_text: str = DEFAULT_LOGO_TEXT
) -> NavigationParseResult:
    """Infer a navigation tree from CSV/TSV, indented or markdown text."""
    try:
        lines = content_lines(text)
        if not lines:
            return NavigationParseResult(config=empty_navigation_config(logo_text), error=NO_CONTENT)
        items = _parse_lines(lines)
        config = normalize_navigation(items, logo_text=logo_text)
        return NavigationParseResult(config=config, error=None if items else NO_STRUCTURE)
    except Exception as exc:
        return _failure(exc, logo_text)


def parse_navigation_rows(
    rows: Sequence[Sequence[str]], *, logo_text: str = DEFAULT_LOGO_TEXT
) -> NavigationParseResult:
    """Infer a navigation tree from already reconstructed document rows.

    The first row with at least two cells is the header; single-cell rows
    above it (titles, notes) are dropped and every row below it is table data,
    a lone cell landing in the first column. When no row has two cells, the
    rows are read as plain lines by the heading fallback.
    """
    try:
        cleaned = [[cell.strip() for cell in row if cell and cell.strip()] for row in rows]
        cleaned = [row for row in cleaned if row]
        if not cleaned:
            return NavigationParseResult(
                config=empty_navigation_config(logo_text), error=NO_DOCUMENT_TEXT
            )
        header_index = next((i for i, row in enumerate(cleaned) if len(row) > 1), None)
        if header_index is not None:
            table_rows = cleaned[header_index:]
            items = _parse_table_with_fallback(pad_rows(table_rows))
        else:
            logger.debug("No multi-cell rows, trying heading detection")
            items = parse_heading_lines([" ".join(row) for row in cleaned])
        config = normalize_navigation(items, logo_text=logo_text)
        return NavigationParseResult(config=config, error=None if items else NO_TABLE)
    except Exception as exc:
        return _failure(exc, logo_text)


def parse_navigation_pages(
    pages: Iterable[Iterable[Any]],
    *,
    tolerance: float = DEFAULT_ROW_TOLERANCE,
    separator: str = DEFAULT_CELL_SEPARATOR,
    logo_text: str = DEFAULT_LOGO_TEXT,
) -> NavigationParseResult:
    """Infer a navigation tree from pages of positioned text fragments."""
    try:
        lines = reconstruct_lines(pages, tolerance=tolerance, separator=separator)
        rows = [split_row(line, separator) for line in lines]
    except Exception as exc:
        return _failure(exc, logo_text)
    logger.debug("Reconstructed %d rows from document", len(rows))
    return parse_navigation_rows(rows, logo_text=logo_text)
