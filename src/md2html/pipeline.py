"""Markdown to safe HTML pipeline.

frontmatter extraction -> Markdown rendering -> HTML sanitization

The module-level functions use a process-wide default pipeline whose renderer
configuration and sanitizer policy are immutable, so they are safe to call
concurrently for independent inputs.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

from md2html.exceptions import ParsingError
from md2html.parsers.base_parser import BaseParser, ParsedDocument
from md2html.parsers.frontmatter import extract_frontmatter
from md2html.parsers.markdown_parser import MarkdownParser
from md2html.sanitizer.base_sanitizer import DEFAULT_POLICY, BaseSanitizer, SanitizerPolicy
from md2html.sanitizer.bleach_sanitizer import BleachSanitizer

logger = logging.getLogger("md2html.pipeline")


class MarkdownPipeline:
    """Combine a Markdown renderer and an HTML sanitizer into `ParsedDocument`s."""

    def __init__(
        self,
        renderer: Optional[BaseParser] = None,
        sanitizer: Optional[BaseSanitizer] = None,
        policy: SanitizerPolicy = DEFAULT_POLICY,
    ) -> None:
        self._renderer = renderer or MarkdownParser()
        self._sanitizer = sanitizer or BleachSanitizer()
        self._policy = policy

    @property
    def renderer(self) -> BaseParser:
        return self._renderer

    def parse(
        self, markdown_text: str, *, sanitize: bool = True, extract_metadata: bool = True
    ) -> ParsedDocument:
        """Render `markdown_text` into a `ParsedDocument`.

        Parameters
        ----------
        markdown_text: str
            Raw Markdown, optionally starting with a frontmatter block.
        sanitize: bool
            Run the rendered HTML through the allow-list sanitizer (default True).
        extract_metadata: bool
            Split off and parse a leading frontmatter block (default True). When
            False the whole input is rendered and metadata is None.
        """
        content = markdown_text
        metadata: Optional[Mapping[str, str]] = None
        if extract_metadata:
            extracted = extract_frontmatter(markdown_text)
            content = extracted.content
            if extracted.metadata is not None:
                metadata = MappingProxyType(extracted.metadata)

        html = self._renderer.render(content)
        if sanitize:
            html = self._sanitizer.clean(html, self._policy)
        return ParsedDocument(html=html, metadata=metadata)

    def parse_file(
        self, path: Union[str, Path], *, sanitize: bool = True, extract_metadata: bool = True
    ) -> ParsedDocument:
        """Read a Markdown file from disk and parse it."""
        path = Path(path)
        if not self._renderer.can_parse(path):
            raise ParsingError(f"Unsupported file type for Markdown parsing: {path.name}")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ParsingError(f"Unable to read {path}: {exc}") from exc
        logger.debug("parsing markdown file %s", path)
        return self.parse(text, sanitize=sanitize, extract_metadata=extract_metadata)


_default_pipeline = MarkdownPipeline()


def parse(markdown_text: str, *, sanitize: bool = True, extract_metadata: bool = True) -> ParsedDocument:
    """Parse Markdown into sanitized HTML plus frontmatter metadata."""
    return _default_pipeline.parse(markdown_text, sanitize=sanitize, extract_metadata=extract_metadata)


def parse_file(
    path: Union[str, Path], *, sanitize: bool = True, extract_metadata: bool = True
) -> ParsedDocument:
    """Parse a `.md`/`.markdown` file with the default pipeline."""
    return _default_pipeline.parse_file(path, sanitize=sanitize, extract_metadata=extract_metadata)


async def parse_async(
    markdown_text: str, *, sanitize: bool = True, extract_metadata: bool = True
) -> ParsedDocument:
    """Awaitable `parse()`; rendering runs in a worker thread."""
    return await asyncio.to_thread(
        parse, markdown_text, sanitize=sanitize, extract_metadata=extract_metadata
    )
