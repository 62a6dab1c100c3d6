"""Theme to CSS custom property rendering."""

from __future__ import annotations

from typing import Any, Tuple

from .models import Theme

# (custom property, attribute path on Theme); emission order is fixed.
CSS_VARIABLES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("--font-family", ("typography", "font_family")),
    ("--font-size-base", ("typography", "base_font_size")),
    ("--line-height", ("typography", "line_height")),
    ("--h1-size", ("typography", "h1", "size")),
    ("--h1-weight", ("typography", "h1", "weight")),
    ("--h2-size", ("typography", "h2", "size")),
    ("--h2-weight", ("typography", "h2", "weight")),
    ("--h3-size", ("typography", "h3", "size")),
    ("--h3-weight", ("typography", "h3", "weight")),
    ("--h4-size", ("typography", "h4", "size")),
    ("--h4-weight", ("typography", "h4", "weight")),
    ("--color-background", ("colors", "background")),
    ("--color-surface", ("colors", "surface")),
    ("--color-text", ("colors", "text")),
    ("--color-headings", ("colors", "headings")),
    ("--color-links", ("colors", "links")),
    ("--color-links-hover", ("colors", "links_hover")),
    ("--color-code-bg", ("colors", "code_background")),
    ("--color-code-text", ("colors", "code_text")),
    ("--color-inline-code-bg", ("colors", "inline_code_bg")),
    ("--color-inline-code-text", ("colors", "inline_code_text")),
    ("--color-table-header", ("colors", "table_header")),
    ("--color-table-row", ("colors", "table_row")),
    ("--color-table-row-alt", ("colors", "table_row_alt")),
    ("--color-border", ("colors", "border")),
    ("--color-blockquote-border", ("colors", "blockquote_border")),
    ("--color-blockquote-bg", ("colors", "blockquote_bg")),
    ("--spacing-paragraph", ("spacing", "paragraph_spacing")),
    ("--spacing-list", ("spacing", "list_spacing")),
    ("--spacing-block", ("spacing", "block_spacing")),
    ("--table-border-style", ("tables", "border_style")),
    ("--table-border-width", ("tables", "border_width")),
    ("--table-zebra", ("tables", "zebra")),
    ("--table-cell-padding", ("tables", "cell_padding")),
    ("--code-font-family", ("code", "font_family")),
    ("--code-font-size", ("code", "font_size")),
    ("--code-line-height", ("code", "line_height")),
    ("--code-block-padding", ("code", "block_padding")),
    ("--code-border-radius", ("code", "border_radius")),
    ("--list-bullet-style", ("lists", "bullet_style")),
    ("--list-ordered-style", ("lists", "ordered_style")),
    ("--list-nested-indent", ("lists", "nested_indent")),
)


def theme_to_css_variables(theme: Theme) -> str:
    """Render one `--property: value;` line per theme leaf, in fixed order."""
    lines = []
    for prop, path in CSS_VARIABLES:
        value: Any = theme
        for attr in path:
            value = getattr(value, attr)
        lines.append(f"{prop}: {_css_value(value)};")
    return "\n".join(lines)


def _css_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
