"""md2html: Markdown to sanitized, themeable HTML.

Typical use:

    from md2html import parse, themes, to_full_html

    doc = parse(markdown_text)
    page = to_full_html(doc.html, themes["dark"], metadata=doc.metadata)
"""

from md2html.document import to_full_html
from md2html.exceptions import (
    ConfigError,
    MarkdownRenderError,
    Md2HtmlError,
    ParsingError,
    ThemeError,
    ThemeImportError,
    ThemeValidationError,
)
from md2html.parsers.base_parser import ParsedDocument, SectionInfo
from md2html.parsers.frontmatter import FrontmatterResult, extract_frontmatter
from md2html.pipeline import MarkdownPipeline, parse, parse_async, parse_file
from md2html.sanitizer import (
    SanitizeReport,
    SanitizerPolicy,
    has_dangerous_content,
    sanitize,
    sanitize_with_report,
)
from md2html.themes import (
    Theme,
    clone_theme,
    export_theme,
    get_theme,
    import_theme,
    merge_theme,
    set_theme_value,
    theme_to_css_variables,
    themes,
)

__all__ = [
    "ConfigError",
    "FrontmatterResult",
    "MarkdownPipeline",
    "MarkdownRenderError",
    "Md2HtmlError",
    "ParsedDocument",
    "ParsingError",
    "SanitizeReport",
    "SanitizerPolicy",
    "SectionInfo",
    "Theme",
    "ThemeError",
    "ThemeImportError",
    "ThemeValidationError",
    "clone_theme",
    "export_theme",
    "extract_frontmatter",
    "get_theme",
    "has_dangerous_content",
    "import_theme",
    "merge_theme",
    "parse",
    "parse_async",
    "parse_file",
    "sanitize",
    "sanitize_with_report",
    "set_theme_value",
    "theme_to_css_variables",
    "themes",
    "to_full_html",
]
