"""Theme editing, merging and JSON import/export."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping, Tuple, Type

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel

from md2html.exceptions import ThemeImportError, ThemeValidationError

from .builtin import themes
from .models import THEME_SCHEMA_VERSION, Theme, clone_theme

logger = logging.getLogger("md2html.themes")

REQUIRED_GROUPS: Tuple[str, ...] = ("typography", "colors", "spacing")


def merge_theme(base: Theme, overrides: Mapping[str, Any]) -> Theme:
    """Return a copy of `base` with `overrides` applied one level deep.

    For every top-level key in `overrides`: a mapping value is shallow-merged
    onto the matching group (override leaves win, other leaves are kept); any
    other value replaces the key wholesale. Nested leaf objects such as
    `typography.h1` are replaced, not merged further. `base` is not modified.
    """
    merged = base.to_json_dict()
    for key, value in overrides.items():
        key = to_camel(key)
        current = merged.get(key)
        if isinstance(value, Mapping) and isinstance(current, dict):
            merged[key] = {**current, **{to_camel(k): v for k, v in value.items()}}
        else:
            merged[key] = value
    try:
        return Theme.model_validate(merged)
    except ValidationError as exc:
        raise ThemeValidationError(f"Merged theme is invalid: {exc}") from exc


def set_theme_value(theme: Theme, path: str, value: Any) -> Theme:
    """Return a copy of `theme` with the dotted field `path` set to `value`.

    `path` may use snake_case or camelCase segments, e.g. `colors.linksHover`
    or `typography.h1.size`.
    """
    parts = [part for part in path.split(".") if part]
    if not parts:
        raise ThemeValidationError("Theme field path is empty")

    updated = clone_theme(theme)
    target: BaseModel = updated
    for part in parts[:-1]:
        child = getattr(target, _field_name(type(target), part, path))
        if not isinstance(child, BaseModel):
            raise ThemeValidationError(f"Unknown theme field: {path}")
        target = child

    try:
        setattr(target, _field_name(type(target), parts[-1], path), value)
    except ValidationError as exc:
        raise ThemeValidationError(f"Invalid value for {path}: {exc}") from exc
    return updated


def _field_name(model: Type[BaseModel], key: str, path: str) -> str:
    if key in model.model_fields:
        return key
    for name, info in model.model_fields.items():
        if info.alias == key:
            return name
    raise ThemeValidationError(f"Unknown theme field: {path}")


def export_theme(theme: Theme) -> str:
    """Serialize `theme` as pretty-printed JSON (2-space indent, declaration order)."""
    return json.dumps(theme.to_json_dict(), indent=2)


def import_theme(json_text: str) -> Theme:
    """Parse a theme exported with `export_theme()`.

    Only the presence of the `typography`, `colors` and `spacing` groups is
    required. Any other missing group or leaf is filled in from the light
    theme, so the result always renders a complete set of CSS variables.
    """
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as exc:
        raise ThemeImportError(f"Failed to import theme: {exc}") from exc

    if not isinstance(data, dict) or any(data.get(group) is None for group in REQUIRED_GROUPS):
        raise ThemeImportError("Failed to import theme: Invalid theme structure")

    version = data.get("schemaVersion", THEME_SCHEMA_VERSION)
    if not isinstance(version, int) or isinstance(version, bool) or version > THEME_SCHEMA_VERSION:
        raise ThemeImportError(f"Failed to import theme: unsupported schemaVersion {version!r}")

    defaults = themes["light"].to_json_dict()
    defaults.pop("name")
    missing: List[str] = []
    filled = _fill_missing(defaults, data, prefix="", missing=missing)
    if missing:
        logger.debug("theme import filled missing fields from light: %s", ", ".join(missing))

    try:
        return Theme.model_validate(filled)
    except ValidationError as exc:
        raise ThemeImportError(f"Failed to import theme: {exc}") from exc


def _fill_missing(
    defaults: Mapping[str, Any], data: Mapping[str, Any], *, prefix: str, missing: List[str]
) -> Dict[str, Any]:
    result: Dict[str, Any] = dict(data)
    for key, default in defaults.items():
        if key not in result:
            result[key] = default
            missing.append(prefix + key)
        elif isinstance(default, dict) and isinstance(result[key], dict):
            result[key] = _fill_missing(default, result[key], prefix=f"{prefix}{key}.", missing=missing)
    return result
