"""Navmap MCP server entrypoint using FastMCP.

Exposes the navigation inference engine as tools.
Run with:
  - poetry run navmap-mcp
  - or: python -m navmap.mcp.server (ensure PYTHONPATH includes ./src)
"""
from __future__ import annotations

import logging
from typing import Optional

from fastmcp import FastMCP

from navmap.config import Settings, load_settings
from navmap.mcp.tools import register_navigation_tools

logger = logging.getLogger(__name__)


class AppState:
    """Application state shared by MCP tools."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings


# Global state and server instance
_state: Optional[AppState] = None
mcp = FastMCP("Navmap MCP Server")


# ----- Tools -----

@mcp.tool
def health() -> str:
    """Simple health check tool."""
    return "ok"


# ----- Entrypoint -----

def main() -> None:
    """Initialize state and run the MCP server."""
    global _state
    settings = load_settings()
    logging.basicConfig(
        level=settings.app.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _state = AppState(settings)
    register_navigation_tools(mcp, get_state=lambda: _state)
    # Choose transport based on configuration: stdio (default), http, or sse
    transport = settings.app.transport
    logger.info("Starting %s MCP server (%s transport)", settings.app.name, transport)
    if transport in ("http", "sse"):
        mcp.run(transport=transport, host=settings.app.host, port=settings.app.port)
    else:
        mcp.run()


if __name__ == "__main__":  # pragma: no cover
    main()
