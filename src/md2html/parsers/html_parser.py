"""Heading outline extraction for rendered HTML.

Walks an HTML fragment with BeautifulSoup and reports its headings (h1-h6)
together with the anchor ids generated by the Markdown renderer, so callers
can build a table of contents or link to sections.
"""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup  # type: ignore[import-untyped]

from .base_parser import SectionInfo

_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


def extract_sections(html: str) -> List[SectionInfo]:
    """Return the headings of `html` in document order."""
    soup = BeautifulSoup(html, "html.parser")

    sections: List[SectionInfo] = []
    for tag in soup.find_all(_HEADING_TAGS):
        title = tag.get_text(" ", strip=True)
        if not title:
            continue
        anchor = tag.get("id") or None
        sections.append(SectionInfo(title=title, level=int(tag.name[1]), anchor=anchor))
    return sections
