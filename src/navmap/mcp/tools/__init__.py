"""Tool registration modules for the Navmap MCP server."""

from .navigation import register_navigation_tools

__all__ = ["register_navigation_tools"]
