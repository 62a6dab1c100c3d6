"""Theme models.

Field names are snake_case in Python and camelCase in theme JSON
(`linksHover`, `baseFontSize`, ...). Either spelling is accepted on input.
"""

from __future__ import annotations

from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

THEME_SCHEMA_VERSION = 1

# Sizes and families are CSS strings; weights and line heights are usually numbers.
CssValue = Union[int, float, str]


class _ThemeModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
    )


class HeadingStyle(_ThemeModel):
    size: str
    weight: CssValue


class Typography(_ThemeModel):
    font_family: str
    base_font_size: str
    line_height: CssValue
    h1: HeadingStyle
    h2: HeadingStyle
    h3: HeadingStyle
    h4: HeadingStyle


class Colors(_ThemeModel):
    background: str
    surface: str
    text: str
    headings: str
    links: str
    links_hover: str
    code_background: str
    code_text: str
    inline_code_bg: str
    inline_code_text: str
    table_header: str
    table_row: str
    table_row_alt: str
    border: str
    blockquote_border: str
    blockquote_bg: str


class Spacing(_ThemeModel):
    paragraph_spacing: str
    list_spacing: str
    block_spacing: str


class Tables(_ThemeModel):
    border_style: str
    border_width: str
    zebra: bool
    cell_padding: str


class CodeStyle(_ThemeModel):
    font_family: str
    font_size: str
    line_height: CssValue
    block_padding: str
    border_radius: str


class Lists(_ThemeModel):
    bullet_style: str
    ordered_style: str
    nested_indent: str


class Theme(_ThemeModel):
    """A named, fully specified set of style values renderable to CSS variables."""

    name: str = "custom"
    schema_version: int = Field(default=THEME_SCHEMA_VERSION)
    typography: Typography
    colors: Colors
    spacing: Spacing
    tables: Tables
    code: CodeStyle
    lists: Lists

    def to_json_dict(self) -> Dict[str, Any]:
        """Return the camelCase, JSON-compatible representation."""
        return self.model_dump(by_alias=True, mode="json")


def clone_theme(theme: Theme) -> Theme:
    """Deep copy `theme` through its JSON form; the copy shares nothing with the source."""
    return Theme.model_validate_json(theme.model_dump_json(by_alias=True))
