"""Format detection for structured navigation text."""

from __future__ import annotations

import re
from enum import Enum
from typing import List, Optional, Sequence

_MARKDOWN_BULLET = re.compile(r"^[-*]\s")


class TextFormat(str, Enum):
    """Parsing strategy selected for a text blob."""

    TAB = "tab"
    COMMA = "comma"
    MARKDOWN = "markdown"
    INDENTED = "indented"

    @property
    def delimiter(self) -> Optional[str]:
        if self is TextFormat.TAB:
            return "\t"
        if self is TextFormat.COMMA:
            return ","
        return None


def content_lines(text: str) -> List[str]:
    """Split text into non-blank lines, keeping leading indentation.

    Trailing whitespace (including ``\\r`` from CRLF input) is dropped.
    """
    return [line.rstrip() for line in (text or "").splitlines() if line.strip()]


def detect_format(lines: Sequence[str]) -> TextFormat:
    """Pick a strategy by inspecting only the first non-blank line.

    First match wins: tab, then comma with at least two non-empty segments,
    then a ``-``/``*`` bullet, else indentation. A comma inside the first
    label of an outline therefore routes the whole input to the comma table
    parser.
    """
    first = next((line.strip() for line in lines if line.strip()), "")
    if "\t" in first:
        return TextFormat.TAB
    if "," in first and sum(1 for part in first.split(",") if part.strip()) > 1:
        return TextFormat.COMMA
    if _MARKDOWN_BULLET.match(first):
        return TextFormat.MARKDOWN
    return TextFormat.INDENTED
