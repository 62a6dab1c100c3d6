"""Frontmatter extraction for Markdown documents.

Only a flat block of `key: value` lines is understood:

    ---
    title: My Document
    author: "Jane Doe"
    ---

    # Body starts here

Values stay strings; nested structures, lists and multi-line values are not
supported.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Optional

# The optional group lets an empty block (`---\n---\n`) match as well.
_FRONTMATTER_RE = re.compile(r"\A---\n(?:(.*?)\n)?---\s*\n", re.DOTALL)
_QUOTES = ('"', "'")


@dataclass(frozen=True, slots=True)
class FrontmatterResult:
    """Markdown body with the frontmatter block removed, plus parsed metadata."""

    content: str
    metadata: Optional[Dict[str, str]] = None


def extract_frontmatter(markdown_text: str) -> FrontmatterResult:
    """Split a leading frontmatter block from `markdown_text`.

    If the text does not start with a frontmatter block, the whole input is
    returned as content and metadata is None.
    """
    match = _FRONTMATTER_RE.match(markdown_text)
    if not match:
        return FrontmatterResult(content=markdown_text, metadata=None)

    content = markdown_text[match.end():]
    return FrontmatterResult(content=content, metadata=parse_frontmatter_block(match.group(1) or ""))


def parse_frontmatter_block(block: str) -> Optional[Dict[str, str]]:
    """Parse `key: value` lines; returns None when no key was found."""
    metadata: Dict[str, str] = {}
    for line in block.split("\n"):
        colon = line.find(":")
        if colon <= 0:
            continue
        key = line[:colon].strip()
        value = line[colon + 1:].strip()
        metadata[key] = _strip_quotes(value)
    return metadata or None


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value
