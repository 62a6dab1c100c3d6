"""Errors raised by md2html.

Three areas can fail: loading settings, turning Markdown into HTML (reading
the source file or running the renderer), and working with themes (importing
exported JSON, merging overrides, editing single fields). Invalid Markdown is
never an error; it renders as text. Every error derives from `Md2HtmlError`
and chains the library exception that caused it.
"""

from __future__ import annotations


class Md2HtmlError(Exception):
    """Root of every md2html error."""


class ConfigError(Md2HtmlError):
    """`MD2HTML_*` environment or `.env` values did not validate."""


class ParsingError(Md2HtmlError):
    """A Markdown source could not be read or converted to HTML."""


class MarkdownRenderError(ParsingError):
    """Raised when the Markdown renderer fails (bad extension config, internal error)."""


class ThemeError(Md2HtmlError):
    """Base class for theme related failures."""


class ThemeImportError(ThemeError):
    """Raised when a theme JSON document cannot be imported."""


class ThemeValidationError(ThemeError):
    """Raised when a merge or field edit does not fit the theme schema."""
