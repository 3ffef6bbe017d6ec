"""Label to URL path conversion."""

from __future__ import annotations

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(label: str) -> str:
    """Return the slug path for a menu label, e.g. "About Us" -> "/about-us".

    Empty or punctuation-only labels produce "/".
    """
    slug = _NON_ALNUM.sub("-", (label or "").lower()).strip("-")
    return f"/{slug}"
