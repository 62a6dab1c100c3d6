"""Abstract base classes and data structures for Markdown parsers.

Parsers turn Markdown text into an HTML fragment. The parse pipeline combines
a parser with frontmatter extraction and sanitization to build a
`ParsedDocument`.

Concrete implementations should subclass `BaseParser` and implement
`can_parse()` and `render()`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


@dataclass(frozen=True, slots=True)
class SectionInfo:
    """Represents a heading within a rendered document.

    Attributes
    ----------
    title: str
        The human-readable heading text.
    level: int
        A hierarchical level where 1 is top-level (H1), 2 is H2, etc.
    anchor: str | None
        The heading's generated `id`, usable as a `#fragment` link target.
    """

    title: str
    level: int
    anchor: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ParsedDocument:
    """Container for parse pipeline outputs.

    `metadata` is None when the document carried no frontmatter (or frontmatter
    extraction was disabled); it is never empty. Pipelines return it as a
    read-only mapping, so the whole document is immutable once returned.
    """

    html: str = ""
    metadata: Optional[Mapping[str, str]] = None


class BaseParser(ABC):
    """Abstract Markdown renderer interface."""

    @abstractmethod
    def can_parse(self, path: Path) -> bool:
        """Return True if this parser can handle the given file/path."""

    @abstractmethod
    def render(self, markdown_text: str) -> str:
        """Render Markdown text to an HTML fragment.

        Implementations should raise `md2html.exceptions.MarkdownRenderError` on failure.
        """
        raise NotImplementedError
