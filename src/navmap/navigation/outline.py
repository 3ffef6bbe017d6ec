"""Indented and markdown outline parser.

Nesting comes from leading whitespace only: two spaces (or one tab) per
level. Markdown bullets are stripped first, so ``- `` and ``* `` never carry
meaning of their own::

    About Us            - About Us
      Our Mission         - Our Mission
        Vision              - Vision
    Contact             - Contact
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from .models import NavItem
from .tree import MIN_LABEL_LENGTH, add_child, make_item

logger = logging.getLogger(__name__)

_LEADING_WS = re.compile(r"^\s*")
_MARKDOWN_BULLET = re.compile(r"^(\s*)[-*]\s+")

INDENT_WIDTH = 2
TAB_WIDTH = 2


def indent_level(line: str) -> int:
    """Nesting level of a line: ``floor(indent / 2)`` with tabs as two spaces."""
    indent = _LEADING_WS.match(line).group(0)  # type: ignore[union-attr]
    width = sum(TAB_WIDTH if ch == "\t" else 1 for ch in indent)
    return width // INDENT_WIDTH


def strip_markdown_bullets(lines: Sequence[str]) -> List[str]:
    """Remove a leading ``-``/``*`` bullet from each line, keeping its indentation."""
    return [_MARKDOWN_BULLET.sub(r"\1", line, count=1) for line in lines]


def parse_outline(lines: Sequence[str]) -> List[NavItem]:
    """Build a tree of at most three levels from indented lines.

    Levels deeper than two are clamped to grandchildren of the nearest child.
    Lines without a suitable ancestor (a child before any top-level item, a
    grandchild with no child above it) are dropped.
    """
    items: List[NavItem] = []
    # ancestors[0] is the open top-level item, ancestors[1] the open child
    ancestors: List[Optional[NavItem]] = [None, None]

    for line in lines:
        label = line.strip()
        if len(label) < MIN_LABEL_LENGTH:
            continue
        level = indent_level(line)
        item = make_item(label)

        if level == 0:
            items.append(item)
            ancestors = [item, None]
        elif level == 1:
            parent = ancestors[0]
            if parent is None:
                logger.debug("Dropping orphan child %r", label)
                continue
            ancestors[1] = add_child(parent, item)
        else:
            parent = ancestors[1]
            if parent is None:
                logger.debug("Dropping orphan grandchild %r", label)
                continue
            add_child(parent, item)

    logger.debug("Outline parser produced %d top-level items", len(items))
    return items


def parse_markdown(lines: Sequence[str]) -> List[NavItem]:
    return parse_outline(strip_markdown_bullets(lines))
