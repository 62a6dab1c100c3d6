"""Tool registration modules for the md2html MCP server."""

from .render import register_render_tools
from .themes import register_theme_tools

__all__ = [
    "register_render_tools",
    "register_theme_tools",
]
