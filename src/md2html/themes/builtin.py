"""Built-in themes and the read-only theme collection."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Mapping

from .models import Theme, clone_theme

_SANS = "Inter, system-ui, -apple-system, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif"
_MONO = "Menlo, Monaco, 'Courier New', monospace"

_SHARED_GROUPS = {
    "typography": {
        "fontFamily": _SANS,
        "baseFontSize": "16px",
        "lineHeight": 1.6,
        "h1": {"size": "2rem", "weight": 700},
        "h2": {"size": "1.5rem", "weight": 600},
        "h3": {"size": "1.25rem", "weight": 600},
        "h4": {"size": "1rem", "weight": 600},
    },
    "spacing": {
        "paragraphSpacing": "1rem",
        "listSpacing": "0.5rem",
        "blockSpacing": "1.5rem",
    },
    "tables": {
        "borderStyle": "solid",
        "borderWidth": "1px",
        "zebra": True,
        "cellPadding": "0.75rem",
    },
    "code": {
        "fontFamily": _MONO,
        "fontSize": "0.95rem",
        "lineHeight": 1.5,
        "blockPadding": "1rem",
        "borderRadius": "0.375rem",
    },
    "lists": {
        "bulletStyle": "disc",
        "orderedStyle": "decimal",
        "nestedIndent": "1.5rem",
    },
}

_LIGHT_COLORS = {
    "background": "#ffffff",
    "surface": "#f8f9fb",
    "text": "#111827",
    "headings": "#0f172a",
    "links": "#1d4ed8",
    "linksHover": "#1e40af",
    "codeBackground": "#0b1220",
    "codeText": "#e6edf3",
    "inlineCodeBg": "#e5e7eb",
    "inlineCodeText": "#374151",
    "tableHeader": "#eef2ff",
    "tableRow": "#ffffff",
    "tableRowAlt": "#f9fafb",
    "border": "#e5e7eb",
    "blockquoteBorder": "#d1d5db",
    "blockquoteBg": "#f9fafb",
}

_DARK_COLORS = {
    "background": "#0f172a",
    "surface": "#1e293b",
    "text": "#e2e8f0",
    "headings": "#f1f5f9",
    "links": "#60a5fa",
    "linksHover": "#93c5fd",
    "codeBackground": "#020617",
    "codeText": "#e2e8f0",
    "inlineCodeBg": "#334155",
    "inlineCodeText": "#e2e8f0",
    "tableHeader": "#1e293b",
    "tableRow": "#0f172a",
    "tableRowAlt": "#1e293b",
    "border": "#334155",
    "blockquoteBorder": "#475569",
    "blockquoteBg": "#1e293b",
}


def _build(name: str, colors: Mapping[str, str]) -> Theme:
    # model_validate copies the dicts, so the two themes share no sub-structure
    return Theme.model_validate({"name": name, "colors": dict(colors), **_SHARED_GROUPS})


class ThemeCollection(Mapping[str, Theme]):
    """Read-only mapping of theme name to Theme.

    Every read returns a fresh deep copy, so the shared instances held here can
    never be mutated by callers.
    """

    def __init__(self, items: Iterable[Theme]) -> None:
        self._themes: Dict[str, Theme] = {theme.name: theme for theme in items}

    def __getitem__(self, name: str) -> Theme:
        return clone_theme(self._themes[name])

    def __iter__(self) -> Iterator[str]:
        return iter(self._themes)

    def __len__(self) -> int:
        return len(self._themes)

    def __repr__(self) -> str:
        return f"ThemeCollection({list(self._themes)!r})"


_light = _build("light", _LIGHT_COLORS)
_dark = _build("dark", _DARK_COLORS)
_custom = clone_theme(_light)
_custom.name = "custom"

themes = ThemeCollection([_light, _dark, _custom])


def get_theme(name: str) -> Theme:
    """Return an editable copy of the named built-in theme; KeyError if unknown."""
    return themes[name]
