"""Custom exception hierarchy for Navmap.

These exceptions allow callers to discriminate error categories
and handle them appropriately while preserving the original context.
The navigation engine itself never raises; these are used at the
document and network boundaries around it.
"""

from __future__ import annotations


class NavmapError(Exception):
    """Base class for all Navmap exceptions."""


class ConfigError(NavmapError):
    """Raised when configuration loading or validation fails."""


class ParsingError(NavmapError):
    """Raised when a document fails to parse."""


class ExtractionError(ParsingError):
    """Raised when positioned text cannot be read from a document."""


class FetchError(NavmapError):
    """Raised when a remote document cannot be retrieved."""
