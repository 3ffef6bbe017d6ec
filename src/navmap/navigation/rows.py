"""Row reconstruction from positioned text fragments.

Document extractors report text as loose fragments, each with a vertical
position. Fragments sitting on the same horizontal band (within a tolerance)
are treated as the cells of one table row. Pages are processed in order and
their rows concatenated; rows are never compared across pages.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_ROW_TOLERANCE = 5.0
DEFAULT_CELL_SEPARATOR = " | "
# Bucket used for fragments without a usable vertical coordinate
DEFAULT_BUCKET = 0.0


@dataclass(slots=True, frozen=True)
class TextFragment:
    """A piece of text located on a page.

    ``y`` grows towards the top of the page (bottom-left origin). ``None``
    means the extractor could not report a position.
    """

    text: str
    y: Optional[float] = None


def _coerce_fragment(item: Any) -> Optional[TextFragment]:
    if isinstance(item, TextFragment):
        return item
    if isinstance(item, Mapping):
        return TextFragment(text=str(item.get("text") or ""), y=item.get("y"))
    return None


def _usable_y(y: Any) -> Optional[float]:
    if isinstance(y, bool) or not isinstance(y, (int, float)):
        return None
    if not math.isfinite(y):
        return None
    return float(y)


def _bucket_key(y: Optional[float], tolerance: float) -> float:
    if y is None:
        return DEFAULT_BUCKET
    # Round half up so that e.g. y=2.5 with tolerance 5 lands in bucket 5
    return math.floor(y / tolerance + 0.5) * tolerance


def _page_lines(fragments: List[TextFragment], tolerance: float, separator: str) -> List[str]:
    buckets: Dict[float, List[str]] = {}
    for fragment in fragments:
        key = _bucket_key(_usable_y(fragment.y), tolerance)
        buckets.setdefault(key, []).append(fragment.text)
    # Top of the page first
    return [separator.join(buckets[key]) for key in sorted(buckets, reverse=True)]


def reconstruct_lines(
    pages: Iterable[Iterable[Any]],
    *,
    tolerance: float = DEFAULT_ROW_TOLERANCE,
    separator: str = DEFAULT_CELL_SEPARATOR,
) -> List[str]:
    """Group fragments into reading-order lines, one per horizontal band.

    Each page is an iterable of `TextFragment` (or ``{"text", "y"}`` mappings).
    Within a band, fragment texts keep their extraction order and are joined
    with `separator`. A page whose iteration raises, or that holds no
    non-blank fragment, is skipped and the remaining pages are still used.
    """
    if not math.isfinite(tolerance) or tolerance <= 0:
        tolerance = DEFAULT_ROW_TOLERANCE

    lines: List[str] = []
    for page_number, page in enumerate(pages, start=1):
        try:
            fragments = [
                fragment
                for fragment in (_coerce_fragment(item) for item in page)
                if fragment is not None and fragment.text.strip()
            ]
        except Exception as exc:
            logger.warning("Skipping page %d: text extraction failed: %s", page_number, exc)
            continue
        if not fragments:
            logger.debug("Page %d has no text fragments, skipping", page_number)
            continue
        page_lines = _page_lines(fragments, tolerance, separator)
        logger.debug("Page %d produced %d rows", page_number, len(page_lines))
        lines.extend(page_lines)
    return lines


def split_row(line: str, separator: str = DEFAULT_CELL_SEPARATOR) -> List[str]:
    """Split a reconstructed line back into its non-empty, trimmed cells."""
    token = separator.strip() or separator
    if not token:
        return [line.strip()] if line.strip() else []
    return [cell.strip() for cell in line.split(token) if cell.strip()]


def reconstruct_rows(
    pages: Iterable[Iterable[Any]],
    *,
    tolerance: float = DEFAULT_ROW_TOLERANCE,
    separator: str = DEFAULT_CELL_SEPARATOR,
) -> List[List[str]]:
    """Like `reconstruct_lines`, but with every line split into cells."""
    lines = reconstruct_lines(pages, tolerance=tolerance, separator=separator)
    return [split_row(line, separator) for line in lines]
