"""Delimited table parser (CSV/TSV and reconstructed document rows).

The first row holds the top-level labels, one per column. Each column is then
scanned top to bottom with a single "current child" pointer:

* a blank cell resets the pointer,
* a marker-prefixed cell (``>``, ``::``, ``|`` or leading indentation) becomes
  a grandchild under the current child, or is dropped if there is none,
* any other cell starts a new child and becomes the current child.

Example::

    About Us,What We Do
    Our Mission,Service One
    > Vision,Service Two
    Our Team,
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence, Tuple

from .models import NavItem
from .tree import MIN_LABEL_LENGTH, add_child, make_item

logger = logging.getLogger(__name__)

# Checked in order; only the first matching marker is removed
GRANDCHILD_MARKERS: Tuple[str, ...] = (">", "::", "|")
INDENT_PREFIXES: Tuple[str, ...] = ("  ", "\t")


class CellKind(str, Enum):
    EMPTY = "empty"
    CHILD = "child"
    GRANDCHILD = "grandchild"


class Cell(NamedTuple):
    kind: CellKind
    label: str


def classify_cell(raw: str) -> Cell:
    """Classify a data cell and return it with its cleaned label.

    Indentation is only visible if the caller has not left-stripped the cell.
    """
    raw = raw or ""
    text = raw.strip()
    if len(text) < MIN_LABEL_LENGTH:
        return Cell(CellKind.EMPTY, "")

    for marker in GRANDCHILD_MARKERS:
        if text.startswith(marker):
            label = text[len(marker):].strip()
            if not label:
                return Cell(CellKind.EMPTY, "")
            return Cell(CellKind.GRANDCHILD, label)

    if raw.startswith(INDENT_PREFIXES):
        return Cell(CellKind.GRANDCHILD, text)
    return Cell(CellKind.CHILD, text)


def _transition(
    current: Optional[NavItem], cell: Cell, children: List[NavItem]
) -> Optional[NavItem]:
    """Apply one classified cell to a column; return the new current child."""
    if cell.kind is CellKind.EMPTY:
        return None
    if cell.kind is CellKind.GRANDCHILD:
        if current is not None:
            add_child(current, make_item(cell.label))
        return current
    child = make_item(cell.label)
    children.append(child)
    return child


def split_delimited(lines: Sequence[str], delimiter: str) -> List[List[str]]:
    """Split text lines into rows padded with empty cells to a common width.

    Cells only lose trailing whitespace, so an indented cell reads as a
    grandchild in every column, the first one included.
    """
    rows = [[cell.rstrip() for cell in line.rstrip().split(delimiter)] for line in lines if line.strip()]
    return pad_rows(rows)


def pad_rows(rows: Sequence[Sequence[str]]) -> List[List[str]]:
    width = max((len(row) for row in rows), default=0)
    return [list(row) + [""] * (width - len(row)) for row in rows]


def parse_table(rows: Sequence[Sequence[str]]) -> List[NavItem]:
    """Build top-level items from a header row plus data rows.

    Header cells shorter than two characters produce no item; their columns
    are skipped without renumbering the others.
    """
    if not rows:
        return []
    header, data = rows[0], rows[1:]
    items: List[NavItem] = []
    for col, heading in enumerate(header):
        label = (heading or "").strip()
        if len(label) < MIN_LABEL_LENGTH:
            continue
        children: List[NavItem] = []
        current: Optional[NavItem] = None
        for row in data:
            raw = row[col] if col < len(row) else ""
            current = _transition(current, classify_cell(raw), children)
        item = make_item(label)
        item.children = children or None
        items.append(item)
    logger.debug("Table parser produced %d top-level items from %d rows", len(items), len(rows))
    return items
