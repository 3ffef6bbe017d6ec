"""Navigation tree models shared by every inference strategy.

`NavigationConfig` is the only value the engine hands back to callers. It is
serialised with camelCase keys (``logoText``, ``primaryItems`` ...) because
that is the shape the page editor stores and renders.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_LOGO_TEXT = "LOGO"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NavItem(_CamelModel):
    """One node of the navigation tree.

    Attributes
    ----------
    label: str
        Visible menu text.
    href: str | None
        Slug path synthesised from the label.
    children: list[NavItem] | None
        Ordered sub-items. ``None`` marks a leaf; it is never an empty list.
    intro: str | None
        Mega-menu intro copy, only meaningful on root-level items.
    """

    label: str = Field(..., min_length=1)
    href: Optional[str] = None
    children: Optional[List[NavItem]] = None
    intro: Optional[str] = None

    def depth(self) -> int:
        """Number of levels in this subtree, counting this item as 1."""
        if not self.children:
            return 1
        return 1 + max(child.depth() for child in self.children)


class NavCTA(_CamelModel):
    """Call-to-action button descriptor. Never produced by the inference engine."""

    label: str = Field(..., min_length=1)
    href: Optional[str] = None
    variant: Literal["primary", "secondary"] = "primary"


class NavigationConfig(_CamelModel):
    """Complete navigation configuration for a wireframe site header."""

    logo_text: str = DEFAULT_LOGO_TEXT
    show_secondary_nav: bool = True
    show_search: bool = True
    secondary_items: List[NavItem] = Field(default_factory=list)
    primary_items: List[NavItem] = Field(default_factory=list)
    ctas: List[NavCTA] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialise using the editor's camelCase keys, omitting unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True)


@dataclass(slots=True)
class NavigationParseResult:
    """A navigation config paired with an optional advisory diagnostic."""

    config: NavigationConfig
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"config": self.config.to_dict(), "error": self.error}


def empty_navigation_config(logo_text: str = DEFAULT_LOGO_TEXT) -> NavigationConfig:
    """Return the engine's empty baseline: no items, no CTAs, both toggles on."""
    return NavigationConfig(
        logo_text=logo_text,
        show_secondary_nav=True,
        show_search=True,
        secondary_items=[],
        primary_items=[],
        ctas=[],
    )


def validate_navigation_config(config: Any) -> bool:
    """Check only the top-level shape of a navigation config.

    Nested `NavItem`/`NavCTA` entries are not inspected; renderers must cope
    with malformed nested values on their own.
    """
    if isinstance(config, NavigationConfig):
        return True
    if not isinstance(config, Mapping):
        return False
    if not isinstance(config.get("logoText"), str):
        return False
    for key in ("showSecondaryNav", "showSearch"):
        if not isinstance(config.get(key), bool):
            return False
    for key in ("secondaryItems", "primaryItems", "ctas"):
        if not isinstance(config.get(key), list):
            return False
    return True
