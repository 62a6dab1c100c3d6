"""Full HTML document generation around a rendered fragment.

The wrapper performs no escaping: the fragment is expected to come from the
parse pipeline with sanitization on, and callers escape title and metadata
text themselves. This is not a second sanitization boundary.
"""

from __future__ import annotations

import textwrap
from typing import List, Mapping, Optional

from md2html.themes.css import theme_to_css_variables
from md2html.themes.models import Theme

ROOT_CLASS = "md-preview"
GENERATOR = "md2html"
DEFAULT_TITLE = "Markdown Document"
_META_FIELDS = ("author", "description", "keywords")

BASE_STYLESHEET = """\
* {
  margin: 0;
  padding: 0;
  box-sizing: border-box;
}

body {
  font-family: var(--font-family);
  font-size: var(--font-size-base);
  line-height: var(--line-height);
  color: var(--color-text);
  background-color: var(--color-background);
  padding: 2rem;
  max-width: 900px;
  margin: 0 auto;
}

.md-preview {
  background: var(--color-surface);
  padding: 2rem;
  border-radius: 0.5rem;
}

.md-preview h1 {
  font-size: var(--h1-size);
  font-weight: var(--h1-weight);
  color: var(--color-headings);
  margin-bottom: var(--spacing-block);
  padding-bottom: 0.5rem;
  border-bottom: 2px solid var(--color-border);
}

.md-preview h2,
.md-preview h3 {
  color: var(--color-headings);
  margin-top: var(--spacing-block);
  margin-bottom: var(--spacing-paragraph);
}

.md-preview h2 { font-size: var(--h2-size); font-weight: var(--h2-weight); }
.md-preview h3 { font-size: var(--h3-size); font-weight: var(--h3-weight); }

.md-preview h4 {
  font-size: var(--h4-size);
  font-weight: var(--h4-weight);
  color: var(--color-headings);
  margin-top: var(--spacing-paragraph);
  margin-bottom: var(--spacing-paragraph);
}

.md-preview p {
  margin-bottom: var(--spacing-paragraph);
}

.md-preview a {
  color: var(--color-links);
  text-decoration: none;
  border-bottom: 1px solid transparent;
  transition: all 0.2s;
}

.md-preview a:hover {
  color: var(--color-links-hover);
  border-bottom-color: var(--color-links-hover);
}

.md-preview strong { font-weight: 600; }
.md-preview em { font-style: italic; }
.md-preview del { text-decoration: line-through; opacity: 0.7; }

.md-preview code {
  font-family: var(--code-font-family);
  font-size: var(--code-font-size);
  background: var(--color-inline-code-bg);
  color: var(--color-inline-code-text);
  padding: 0.2em 0.4em;
  border-radius: 0.25rem;
}

.md-preview pre {
  background: var(--color-code-bg);
  color: var(--color-code-text);
  padding: var(--code-block-padding);
  border-radius: var(--code-border-radius);
  overflow-x: auto;
  margin-bottom: var(--spacing-block);
  line-height: var(--code-line-height);
}

.md-preview pre code {
  background: none;
  color: inherit;
  padding: 0;
  font-size: var(--code-font-size);
}

.md-preview blockquote {
  border-left: 4px solid var(--color-blockquote-border);
  background: var(--color-blockquote-bg);
  padding: 1rem 1.5rem;
  margin: var(--spacing-block) 0;
  font-style: italic;
}

.md-preview ul,
.md-preview ol {
  margin-bottom: var(--spacing-block);
  padding-left: var(--list-nested-indent);
}

.md-preview ul { list-style-type: var(--list-bullet-style); }
.md-preview ol { list-style-type: var(--list-ordered-style); }
.md-preview li { margin-bottom: var(--spacing-list); }

.md-preview li > ul,
.md-preview li > ol {
  margin-top: var(--spacing-list);
  margin-bottom: 0;
}

.md-preview ul.task-list { list-style-type: none; }

.md-preview table {
  width: 100%;
  border-collapse: collapse;
  margin-bottom: var(--spacing-block);
  overflow-x: auto;
  display: block;
}

.md-preview thead { background: var(--color-table-header); }

.md-preview th,
.md-preview td {
  padding: var(--table-cell-padding);
  border: var(--table-border-width) var(--table-border-style) var(--color-border);
  text-align: left;
}

.md-preview th { font-weight: 600; }
.md-preview tbody tr:nth-child(odd) { background: var(--color-table-row); }
.md-preview tbody tr:nth-child(even) { background: var(--color-table-row-alt); }
.md-preview.no-zebra tbody tr:nth-child(even) { background: var(--color-table-row); }

.md-preview img {
  max-width: 100%;
  height: auto;
  display: block;
  margin: var(--spacing-block) 0;
  border-radius: 0.375rem;
}

.md-preview hr {
  border: none;
  border-top: 2px solid var(--color-border);
  margin: var(--spacing-block) 0;
}

.md-preview input[type="checkbox"] {
  margin-right: 0.5rem;
}

@media (max-width: 768px) {
  body { padding: 1rem; }
  .md-preview { padding: 1rem; }
}
"""


def build_stylesheet(theme: Theme) -> str:
    """Return the inline stylesheet: theme variables on `:root` plus the base rules."""
    variables = textwrap.indent(theme_to_css_variables(theme), "  ")
    return f":root {{\n{variables}\n}}\n\n{BASE_STYLESHEET}"


def to_full_html(
    html_fragment: str,
    theme: Theme,
    *,
    inline_styles: bool = True,
    title: str = DEFAULT_TITLE,
    metadata: Optional[Mapping[str, str]] = None,
    stylesheet_href: str = "styles.css",
) -> str:
    """Wrap `html_fragment` in a complete, themed HTML document.

    Parameters
    ----------
    html_fragment: str
        Already sanitized HTML, inserted verbatim inside the content root.
    theme: Theme
        Theme whose CSS variables are inlined (when `inline_styles` is True).
    inline_styles: bool
        Inline a `<style>` block; when False link `stylesheet_href` instead.
    title: str
        Document title, inserted verbatim.
    metadata: Mapping[str, str] | None
        Optional `author`, `description` and `keywords`; each produces a meta
        tag only when present and non-empty. Other keys are ignored.
    """
    head: List[str] = [
        '  <meta charset="UTF-8">',
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f'  <meta name="generator" content="{GENERATOR}">',
    ]
    for field in _META_FIELDS:
        value = (metadata or {}).get(field)
        if value:
            head.append(f'  <meta name="{field}" content="{value}">')
    head.append(f"  <title>{title}</title>")

    if inline_styles:
        head.append("  <style>")
        head.append(textwrap.indent(build_stylesheet(theme), "    ").rstrip())
        head.append("  </style>")
    else:
        head.append(f'  <link rel="stylesheet" href="{stylesheet_href}">')

    root_class = ROOT_CLASS if theme.tables.zebra else f"{ROOT_CLASS} no-zebra"
    lines = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        *head,
        "</head>",
        "<body>",
        f'  <div class="{root_class}">',
        html_fragment,
        "  </div>",
        "</body>",
        "</html>",
    ]
    return "\n".join(lines) + "\n"
