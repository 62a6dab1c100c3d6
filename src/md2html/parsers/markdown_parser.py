"""Markdown renderer adapter built on Python-Markdown.

Implementation note: we convert Markdown to HTML using the `markdown` library
with GitHub-Flavored extensions from `pymdown-extensions` (strikethrough,
task lists, bare-URL autolinks) layered on the core tables/fenced code set.
The `toc` extension gives every heading a lowercase, hyphenated `id` slug.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Tuple

import markdown as md  # type: ignore[import-untyped]

from md2html.exceptions import MarkdownRenderError

from .base_parser import BaseParser

logger = logging.getLogger("md2html.parsers.markdown")

DEFAULT_EXTENSIONS: Tuple[str, ...] = (
    "tables",
    "fenced_code",
    "sane_lists",
    "toc",
    "pymdownx.tilde",
    "pymdownx.tasklist",
    "pymdownx.magiclink",
)

DEFAULT_EXTENSION_CONFIGS: Mapping[str, Mapping[str, Any]] = MappingProxyType(
    {
        "toc": MappingProxyType({"permalink": False}),
        # `~~text~~` only; a single tilde stays literal text
        "pymdownx.tilde": MappingProxyType({"subscript": False}),
        "pymdownx.tasklist": MappingProxyType(
            {"custom_checkbox": False, "clickable_checkbox": False}
        ),
        "pymdownx.magiclink": MappingProxyType({"hide_protocol": False}),
    }
)


class MarkdownParser(BaseParser):
    """Parser for `.md` and `.markdown` files or content strings."""

    def __init__(
        self,
        extensions: Optional[Iterable[str]] = None,
        extension_configs: Optional[Mapping[str, Mapping[str, Any]]] = None,
    ) -> None:
        self._extensions: Tuple[str, ...] = (
            tuple(extensions) if extensions is not None else DEFAULT_EXTENSIONS
        )
        configs = DEFAULT_EXTENSION_CONFIGS if extension_configs is None else extension_configs
        self._extension_configs = MappingProxyType(
            {name: MappingProxyType(dict(cfg)) for name, cfg in configs.items()}
        )

    @property
    def extensions(self) -> Tuple[str, ...]:
        return self._extensions

    def can_parse(self, path: Path) -> bool:
        return path.suffix.lower() in {".md", ".markdown"}

    def render(self, markdown_text: str) -> str:
        # A Markdown instance keeps per-document state, so every call gets its own.
        try:
            converter = md.Markdown(
                extensions=list(self._extensions),
                extension_configs={name: dict(cfg) for name, cfg in self._extension_configs.items()},
                output_format="html",
            )
            html = converter.convert(markdown_text)
        except Exception as exc:
            raise MarkdownRenderError(f"Failed to render markdown: {exc}") from exc
        logger.debug("rendered %d chars of markdown into %d chars of html", len(markdown_text), len(html))
        return html


_default_parser = MarkdownParser()


def render(markdown_text: str) -> str:
    """Render Markdown with the process-wide default configuration."""
    return _default_parser.render(markdown_text)
