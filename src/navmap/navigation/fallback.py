"""Last-resort strategies used when a primary parser finds nothing."""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from .models import NavItem
from .tree import MIN_LABEL_LENGTH, add_child, make_item

logger = logging.getLogger(__name__)

_HEADER_LINE = re.compile(r"^[A-Z][a-zA-Z\s&]+$")
MAX_HEADER_LENGTH = 50


def parse_table_columns(rows: Sequence[Sequence[str]]) -> List[NavItem]:
    """Treat every column as a parent followed by flat children.

    The first non-blank cell of a column is the parent; all later non-blank
    cells are its children. Grandchild markers are not interpreted.
    """
    width = max((len(row) for row in rows), default=0)
    items: List[NavItem] = []
    for col in range(width):
        values = [
            (row[col] or "").strip()
            for row in rows
            if col < len(row) and len((row[col] or "").strip()) >= MIN_LABEL_LENGTH
        ]
        if not values:
            continue
        parent = make_item(values[0])
        for value in values[1:]:
            add_child(parent, make_item(value))
        items.append(parent)
    logger.debug("Column fallback produced %d top-level items", len(items))
    return items


def is_header_line(line: str) -> bool:
    text = line.strip()
    return len(text) < MAX_HEADER_LENGTH and bool(_HEADER_LINE.match(text))


def parse_heading_lines(lines: Sequence[str]) -> List[NavItem]:
    """Group plain lines under the first header-like line.

    Lines before the first header are ignored. The parent is never replaced,
    so every later line, header-like or not, becomes one of its children and
    the result holds at most one top-level item.
    """
    parent: Optional[NavItem] = None
    for line in lines:
        text = line.strip()
        if len(text) < MIN_LABEL_LENGTH:
            continue
        if parent is None:
            if is_header_line(text):
                parent = make_item(text)
            continue
        add_child(parent, make_item(text))
    logger.debug("Heading fallback found %s", "a parent" if parent else "no header line")
    return [parent] if parent is not None else []
