"""Theme tools for FastMCP.

List, export and merge themes, and edit the session's custom theme the way a
theme editor would: one field at a time, by import, or by reset from a base.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

from fastmcp import FastMCP

from md2html.themes import export_theme, import_theme, merge_theme, set_theme_value, theme_to_css_variables, themes


def register_theme_tools(mcp: FastMCP, get_state: Callable[[], Any]) -> None:
    """Register theme tools on the given FastMCP instance.

    The custom theme lives on state.custom_theme and is replaced, never mutated.
    """

    @mcp.tool
    def theme_list() -> List[str]:
        """Return the available theme names."""
        return list(themes)

    @mcp.tool
    def theme_export(name: str = "custom") -> str:
        """Return the named theme as pretty-printed JSON."""
        return export_theme(get_state().resolve_theme(name))

    @mcp.tool
    def theme_css(name: str = "light") -> str:
        """Return the CSS custom properties for the named theme."""
        return theme_to_css_variables(get_state().resolve_theme(name))

    @mcp.tool
    def theme_merge(base: str, overrides: Dict[str, Any]) -> str:
        """Merge `overrides` (e.g. {"colors": {"background": "#000"}}) onto a theme, return JSON.

        Neither the base theme nor the session's custom theme is changed.
        """
        return export_theme(merge_theme(get_state().resolve_theme(base), overrides))

    @mcp.tool
    def custom_theme_set(path: str, value: Any) -> str:
        """Set one field of the custom theme, e.g. path="colors.background", value="#fef3c7"."""
        state = get_state()
        state.custom_theme = set_theme_value(state.custom_theme, path, value)
        return export_theme(state.custom_theme)

    @mcp.tool
    def custom_theme_import(theme_json: str) -> str:
        """Replace the custom theme with a theme previously exported as JSON."""
        state = get_state()
        theme = import_theme(theme_json)
        theme.name = "custom"
        state.custom_theme = theme
        return export_theme(theme)

    @mcp.tool
    def custom_theme_reset(base: str = "light") -> str:
        """Reset the custom theme to a copy of a built-in theme."""
        state = get_state()
        if base == "custom":
            raise ValueError("base must be a built-in theme such as 'light' or 'dark'")
        state.custom_theme = merge_theme(state.resolve_theme(base), {"name": "custom"})
        return export_theme(state.custom_theme)
