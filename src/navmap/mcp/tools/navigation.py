"""Navigation inference tools for FastMCP.

Parse navigation maps from pasted text, local files or URLs and return the
editor's camelCase `NavigationConfig` together with any diagnostic.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict

from fastmcp import FastMCP

from navmap.config import FetchConfig, ParserConfig
from navmap.connectors.document import DocumentConnector
from navmap.navigation.engine import parse_navigation_text
from navmap.navigation.models import validate_navigation_config
from navmap.parsers.registry import parse_navigation_bytes, parse_navigation_file


def register_navigation_tools(mcp: FastMCP, get_state: Callable[[], Any]) -> None:
    """Register navigation tools on the given FastMCP instance.

    Reads config from state.settings.parser and state.settings.fetch.
    """

    def _parser_config(state_obj: Any) -> ParserConfig:
        settings = getattr(state_obj, "settings", None)
        return getattr(settings, "parser", None) or ParserConfig()

    def _make_connector(state_obj: Any) -> DocumentConnector:
        settings = getattr(state_obj, "settings", None)
        fcfg = getattr(settings, "fetch", None) or FetchConfig()
        return DocumentConnector(
            timeout=fcfg.timeout,
            user_agent=fcfg.user_agent,
            verify_ssl=fcfg.verify_ssl,
            max_bytes=_parser_config(state_obj).max_document_bytes,
        )

    @mcp.tool
    def navigation_parse_text(text: str) -> Dict[str, Any]:
        """Infer a navigation tree from structured text.

        Parameters
        ----------
        text: str
            CSV/TSV (first row = top-level items), an indented outline
            (two spaces per level) or a markdown bullet list.
        """
        cfg = _parser_config(get_state())
        return parse_navigation_text(text or "", logo_text=cfg.logo_text).to_dict()

    @mcp.tool
    def navigation_parse_file(path: str) -> Dict[str, Any]:
        """Infer a navigation tree from a local PDF or text file."""
        target = (path or "").strip()
        if not target:
            raise ValueError("path is required")
        file_path = Path(target).expanduser()
        if not file_path.is_file():
            raise ValueError(f"File not found: {target}")
        return parse_navigation_file(file_path, _parser_config(get_state())).to_dict()

    @mcp.tool
    async def navigation_parse_url(url: str) -> Dict[str, Any]:
        """Download a PDF or text navigation map and infer its tree."""
        state = get_state()
        conn = _make_connector(state)
        doc = await conn.fetch(url)
        result = parse_navigation_bytes(
            doc.content,
            doc.filename,
            content_type=doc.content_type,
            config=_parser_config(state),
        )
        out = result.to_dict()
        out["source_url"] = doc.url
        return out

    @mcp.tool
    def navigation_validate(config: Dict[str, Any]) -> Dict[str, bool]:
        """Check the top-level shape of a navigation config (nested items are not inspected)."""
        return {"valid": validate_navigation_config(config)}
