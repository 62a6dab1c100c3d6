"""Markdown rendering tools for FastMCP.

Convert Markdown to sanitized HTML fragments or complete themed documents.
Nothing is written to disk; results are returned directly.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from fastmcp import FastMCP

from md2html.document import to_full_html
from md2html.parsers.base_parser import ParsedDocument
from md2html.parsers.html_parser import extract_sections
from md2html.pipeline import parse
from md2html.sanitizer import has_dangerous_content, sanitize_with_report


def _serialize_parsed_document(doc: ParsedDocument) -> Dict[str, Any]:
    return {
        "html": doc.html,
        "metadata": dict(doc.metadata) if doc.metadata is not None else None,
    }


def register_render_tools(mcp: FastMCP, get_state: Callable[[], Any]) -> None:
    """Register rendering tools on the given FastMCP instance.

    Defaults come from state.settings.render and state.settings.document.
    """

    @mcp.tool
    def markdown_to_html(
        markdown: str,
        sanitize: Optional[bool] = None,
        extract_metadata: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Convert Markdown to an HTML fragment plus frontmatter metadata.

        Parameters
        ----------
        markdown: str
            Markdown source, optionally starting with a `---` frontmatter block.
        sanitize: bool | None
            Sanitize the HTML (default from settings, normally True).
        extract_metadata: bool | None
            Parse the frontmatter block into metadata (default from settings).
        """
        rcfg = get_state().settings.render
        doc = parse(
            markdown,
            sanitize=rcfg.sanitize if sanitize is None else sanitize,
            extract_metadata=rcfg.extract_metadata if extract_metadata is None else extract_metadata,
        )
        return _serialize_parsed_document(doc)

    @mcp.tool
    def markdown_to_document(
        markdown: str,
        theme: Optional[str] = None,
        title: Optional[str] = None,
        inline_styles: Optional[bool] = None,
    ) -> str:
        """Convert Markdown to a complete, themed HTML document.

        The document title is `title`, else the frontmatter `title`, else the
        configured default. Frontmatter author/description/keywords become meta tags.
        """
        state = get_state()
        dcfg = state.settings.document
        doc = parse(markdown, sanitize=True, extract_metadata=True)
        metadata = doc.metadata or {}
        return to_full_html(
            doc.html,
            state.resolve_theme(theme or dcfg.theme),
            inline_styles=dcfg.inline_styles if inline_styles is None else inline_styles,
            title=title or metadata.get("title") or dcfg.title,
            metadata=metadata,
            stylesheet_href=dcfg.stylesheet_href,
        )

    @mcp.tool
    def markdown_outline(markdown: str) -> List[Dict[str, Any]]:
        """Return the document's headings with their anchor ids."""
        doc = parse(markdown)
        return [
            {"title": s.title, "level": s.level, "anchor": s.anchor}
            for s in extract_sections(doc.html)
        ]

    @mcp.tool
    def html_sanitize_report(html: str) -> Dict[str, Any]:
        """Sanitize an HTML fragment and report the dangerous constructs it contained."""
        report = sanitize_with_report(html)
        return {
            "html": report.html,
            "removed": list(report.removed),
            "dangerous": has_dangerous_content(html),
        }
