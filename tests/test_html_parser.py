from md2html import SectionInfo, parse
from md2html.parsers.html_parser import extract_sections


def test_extracts_headings_with_anchors() -> None:
    html = parse("# Intro\n\ntext\n\n## Setup Steps\n\n### Notes\n").html

    assert extract_sections(html) == [
        SectionInfo(title="Intro", level=1, anchor="intro"),
        SectionInfo(title="Setup Steps", level=2, anchor="setup-steps"),
        SectionInfo(title="Notes", level=3, anchor="notes"),
    ]


def test_heading_without_id_has_no_anchor() -> None:
    sections = extract_sections("<h2>Plain <em>heading</em></h2><p>body</p>")

    assert sections == [SectionInfo(title="Plain heading", level=2, anchor=None)]


def test_empty_headings_are_skipped() -> None:
    assert extract_sections("<h1></h1><p>x</p>") == []
