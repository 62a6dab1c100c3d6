import json
from pathlib import Path
from typing import Any, Dict, List, Union

import pytest
from fastmcp import Client, FastMCP
from fastmcp.exceptions import ToolError

from md2html.config import Settings
from md2html.exceptions import ThemeImportError
from md2html.mcp.server import AppState
from md2html.mcp.tools import register_render_tools, register_theme_tools
from md2html.themes import export_theme, set_theme_value, themes


def _extract_json_payload(result: Any) -> Union[Dict[str, Any], List[Any], str]:
    if isinstance(result, (dict, list, str)):
        return result
    content = getattr(result, "content", None)
    if isinstance(content, list) and content:
        for item in content:
            text = getattr(item, "text", None)
            if isinstance(text, str):
                try:
                    return json.loads(text)
                except json.JSONDecodeError:
                    return text
    raise AssertionError("Unable to extract JSON payload from tool result")


def _make_server() -> tuple[FastMCP, AppState]:
    mcp = FastMCP("test")
    state = AppState(Settings())
    register_render_tools(mcp, get_state=lambda: state)
    register_theme_tools(mcp, get_state=lambda: state)
    return mcp, state


@pytest.mark.asyncio
async def test_markdown_to_html_and_outline() -> None:
    mcp, _ = _make_server()
    markdown = "---\ntitle: Notes\n---\n\n# Intro\n\n<script>x()</script>\n\n## Details\n"

    async with Client(mcp) as client:
        res_html = await client.call_tool("markdown_to_html", {"markdown": markdown})
        res_raw = await client.call_tool(
            "markdown_to_html", {"markdown": markdown, "sanitize": False, "extract_metadata": False}
        )
        res_outline = await client.call_tool("markdown_outline", {"markdown": markdown})

    payload_html = _extract_json_payload(res_html)
    payload_raw = _extract_json_payload(res_raw)
    payload_outline = _extract_json_payload(res_outline)

    assert isinstance(payload_html, dict)
    assert payload_html["metadata"] == {"title": "Notes"}
    assert '<h1 id="intro">Intro</h1>' in payload_html["html"]
    assert "<script>" not in payload_html["html"]
    assert isinstance(payload_raw, dict)
    assert payload_raw["metadata"] is None
    assert "<script>" in payload_raw["html"]
    assert payload_outline == [
        {"title": "Intro", "level": 1, "anchor": "intro"},
        {"title": "Details", "level": 2, "anchor": "details"},
    ]


@pytest.mark.asyncio
async def test_markdown_to_document_uses_frontmatter_and_theme() -> None:
    mcp, _ = _make_server()
    markdown = "---\ntitle: Weekly Report\nauthor: Ada\n---\n\n# Summary\n"

    async with Client(mcp) as client:
        res_doc = await client.call_tool("markdown_to_document", {"markdown": markdown, "theme": "dark"})
        res_titled = await client.call_tool(
            "markdown_to_document", {"markdown": markdown, "title": "Override", "inline_styles": False}
        )

    page = _extract_json_payload(res_doc)
    titled = _extract_json_payload(res_titled)

    assert isinstance(page, str)
    assert page.startswith("<!DOCTYPE html>")
    assert "<title>Weekly Report</title>" in page
    assert '<meta name="author" content="Ada">' in page
    assert "--color-background: #0f172a;" in page
    assert isinstance(titled, str)
    assert "<title>Override</title>" in titled
    assert '<link rel="stylesheet" href="styles.css">' in titled


@pytest.mark.asyncio
async def test_html_sanitize_report() -> None:
    mcp, _ = _make_server()

    async with Client(mcp) as client:
        res = await client.call_tool(
            "html_sanitize_report", {"html": '<p onclick="x()">Hi</p><script>alert(1)</script>'}
        )

    payload = _extract_json_payload(res)

    assert isinstance(payload, dict)
    assert payload["html"] == "<p>Hi</p>"
    assert payload["removed"] == ["script tags", "event handlers"]
    assert payload["dangerous"] is True


@pytest.mark.asyncio
async def test_custom_theme_editing_flow() -> None:
    mcp, state = _make_server()

    async with Client(mcp) as client:
        res_list = await client.call_tool("theme_list", {})
        res_set = await client.call_tool(
            "custom_theme_set", {"path": "colors.background", "value": "#fef3c7"}
        )
        res_css = await client.call_tool("theme_css", {"name": "custom"})
        res_light = await client.call_tool("theme_export", {"name": "light"})
        res_reset = await client.call_tool("custom_theme_reset", {"base": "dark"})

    assert _extract_json_payload(res_list) == ["light", "dark", "custom"]

    edited = _extract_json_payload(res_set)
    assert isinstance(edited, dict)
    assert edited["name"] == "custom"
    assert edited["colors"]["background"] == "#fef3c7"

    css = _extract_json_payload(res_css)
    assert isinstance(css, str)
    assert "--color-background: #fef3c7;" in css

    light = _extract_json_payload(res_light)
    assert isinstance(light, dict)
    assert light["colors"]["background"] == "#ffffff"

    reset = _extract_json_payload(res_reset)
    assert isinstance(reset, dict)
    assert reset["name"] == "custom"
    assert reset["colors"]["background"] == "#0f172a"
    assert state.custom_theme.colors.background == "#0f172a"
    # Built-ins are never modified by custom theme edits
    assert themes["dark"].name == "dark"


@pytest.mark.asyncio
async def test_theme_merge_and_import() -> None:
    mcp, state = _make_server()
    exported = export_theme(set_theme_value(themes["dark"], "colors.links", "#ff6600"))
    before_merge = state.custom_theme

    async with Client(mcp) as client:
        res_merge = await client.call_tool(
            "theme_merge", {"base": "light", "overrides": {"colors": {"background": "#000000"}}}
        )

    merged = _extract_json_payload(res_merge)
    assert isinstance(merged, dict)
    assert merged["name"] == "light"
    assert merged["colors"]["background"] == "#000000"
    assert merged["colors"]["text"] == "#111827"
    # Merging never touches the session's custom theme
    assert state.custom_theme is before_merge
    assert state.custom_theme.colors.background == "#ffffff"

    async with Client(mcp) as client:
        res_import = await client.call_tool("custom_theme_import", {"theme_json": exported})

    imported = _extract_json_payload(res_import)
    assert isinstance(imported, dict)
    assert imported["name"] == "custom"
    assert state.custom_theme.colors.links == "#ff6600"
    assert state.custom_theme.colors.background == "#0f172a"


@pytest.mark.asyncio
async def test_theme_tool_errors() -> None:
    mcp, state = _make_server()
    before = state.custom_theme

    async with Client(mcp) as client:
        with pytest.raises(ToolError):
            await client.call_tool("theme_export", {"name": "sepia"})
        with pytest.raises(ToolError):
            await client.call_tool("custom_theme_set", {"path": "colors.sparkle", "value": "#fff"})
        with pytest.raises(ToolError):
            await client.call_tool("custom_theme_import", {"theme_json": "invalid json"})
        with pytest.raises(ToolError):
            await client.call_tool("custom_theme_reset", {"base": "custom"})

    assert state.custom_theme is before


def test_load_custom_theme_from_settings(tmp_path: Path) -> None:
    path = tmp_path / "theme.json"
    path.write_text(export_theme(set_theme_value(themes["light"], "colors.text", "#333333")), encoding="utf-8")
    state = AppState(Settings())
    state.settings.themes.custom_theme_path = str(path)

    state.load_custom_theme()

    assert state.custom_theme.name == "custom"
    assert state.custom_theme.colors.text == "#333333"


def test_load_custom_theme_missing_file(tmp_path: Path) -> None:
    state = AppState(Settings())
    state.settings.themes.custom_theme_path = str(tmp_path / "missing.json")

    with pytest.raises(ThemeImportError):
        state.load_custom_theme()


def test_resolve_theme_returns_copies() -> None:
    state = AppState(Settings())

    custom = state.resolve_theme("custom")
    custom.colors.background = "#000000"

    assert state.custom_theme.colors.background == "#ffffff"
    with pytest.raises(ValueError):
        state.resolve_theme("sepia")


def test_main_configures_logging_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    from md2html.mcp import server

    calls: Dict[str, Any] = {}
    monkeypatch.setenv("MD2HTML_APP__LOG_LEVEL", "debug")
    monkeypatch.setattr(server.logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    monkeypatch.setattr(server.mcp, "run", lambda *args, **kwargs: calls.update(ran=True))

    server.main()

    assert calls["level"] == "DEBUG"
    assert calls["ran"] is True
