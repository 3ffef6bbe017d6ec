"""Navigation structure inference.

Turns loosely structured menu descriptions (delimited tables, indented or
markdown outlines, positioned text from documents) into a three-level
`NavigationConfig`.
"""

from .detect import TextFormat, detect_format
from .engine import parse_navigation_pages, parse_navigation_rows, parse_navigation_text
from .models import (
    NavCTA,
    NavigationConfig,
    NavigationParseResult,
    NavItem,
    empty_navigation_config,
    validate_navigation_config,
)
from .rows import TextFragment, reconstruct_rows
from .slug import slugify

__all__ = [
    "NavCTA",
    "NavItem",
    "NavigationConfig",
    "NavigationParseResult",
    "TextFormat",
    "TextFragment",
    "detect_format",
    "empty_navigation_config",
    "parse_navigation_pages",
    "parse_navigation_rows",
    "parse_navigation_text",
    "reconstruct_rows",
    "slugify",
    "validate_navigation_config",
]
