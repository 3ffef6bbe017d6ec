"""Helpers for building and finishing navigation trees."""

from __future__ import annotations

from typing import List, Sequence

from .models import DEFAULT_LOGO_TEXT, NavigationConfig, NavItem, empty_navigation_config
from .slug import slugify

# Cells and lines shorter than this are treated as blank
MIN_LABEL_LENGTH = 2


def make_item(label: str) -> NavItem:
    """Create a leaf item with a synthesised href."""
    return NavItem(label=label, href=slugify(label))


def add_child(parent: NavItem, child: NavItem) -> NavItem:
    if parent.children is None:
        parent.children = []
    parent.children.append(child)
    return child


def normalize_navigation(
    primary_items: Sequence[NavItem], *, logo_text: str = DEFAULT_LOGO_TEXT
) -> NavigationConfig:
    """Merge parser output into the empty baseline.

    Secondary items and CTAs always come back empty; primary items come from
    the parser, or from the (equally empty) baseline when the parser found none.
    """
    config = empty_navigation_config(logo_text)
    items: List[NavItem] = list(primary_items)
    if items:
        config.primary_items = items
    return config
