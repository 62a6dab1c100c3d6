"""md2html MCP server entrypoint using FastMCP.

Exposes the Markdown pipeline, document wrapper and theme editor as tools.
Run with:
  - md2html-mcp
  - or: python -m md2html.mcp.server (ensure PYTHONPATH includes ./src)
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastmcp import FastMCP

from md2html.config import Settings, load_settings
from md2html.exceptions import ThemeImportError
from md2html.themes import Theme, import_theme, themes

from md2html.mcp.tools import register_render_tools, register_theme_tools

logger = logging.getLogger("md2html.mcp")


class AppState:
    """Application state shared by MCP tools."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.custom_theme: Theme = themes["custom"]

    def load_custom_theme(self) -> None:
        """Load the custom theme exported in a previous session, if configured."""
        path = self.settings.themes.custom_theme_path
        if not path:
            return
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ThemeImportError(f"Unable to read custom theme {path}: {exc}") from exc
        theme = import_theme(text)
        theme.name = "custom"
        self.custom_theme = theme
        logger.info("loaded custom theme from %s", path)

    def resolve_theme(self, name: str) -> Theme:
        """Return an editable copy of the named theme; `custom` is the session's theme."""
        if name == "custom":
            return self.custom_theme.model_copy(deep=True)
        try:
            return themes[name]
        except KeyError:
            raise ValueError(f"Unknown theme {name!r}; expected one of {', '.join(themes)}") from None


# Global state and server instance
_state: Optional[AppState] = None
mcp = FastMCP("md2html")


# ----- Tools -----

@mcp.tool
def health() -> str:
    """Simple health check tool."""
    return "ok"


# ----- Entrypoint -----

def main() -> None:
    """Initialize state and run the MCP server on stdio."""
    global _state
    settings = load_settings()
    # stdout carries the protocol; logs go to stderr
    logging.basicConfig(level=settings.app.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s %(message)s")
    _state = AppState(settings)
    _state.load_custom_theme()
    register_render_tools(mcp, get_state=lambda: _state)
    register_theme_tools(mcp, get_state=lambda: _state)
    mcp.run()


if __name__ == "__main__":  # pragma: no cover
    main()
