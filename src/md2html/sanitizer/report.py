"""Heuristic detection of dangerous HTML constructs.

These probes are a fast pre-check for reporting and telemetry. They are not
the enforcement mechanism: `sanitize()` and its allow-list policy are. The
report produced by `sanitize_with_report()` therefore lists what was present
before sanitization, not a verified diff of what was stripped.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Pattern, Tuple

from .bleach_sanitizer import sanitize

logger = logging.getLogger("md2html.sanitizer")

_SCRIPT_BLOCK_RE = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_EVENT_HANDLER_RE = re.compile(r"on\w+\s*=", re.IGNORECASE)
_JAVASCRIPT_URI_RE = re.compile(r"javascript:", re.IGNORECASE)
_DATA_HTML_URI_RE = re.compile(r"data:text/html", re.IGNORECASE)
_IFRAME_RE = re.compile(r"<iframe", re.IGNORECASE)
_OBJECT_RE = re.compile(r"<object", re.IGNORECASE)
_EMBED_RE = re.compile(r"<embed", re.IGNORECASE)

_DANGER_PROBES: Tuple[Pattern[str], ...] = (
    _SCRIPT_BLOCK_RE,
    _EVENT_HANDLER_RE,
    _JAVASCRIPT_URI_RE,
    _DATA_HTML_URI_RE,
    _IFRAME_RE,
    _OBJECT_RE,
    _EMBED_RE,
)

# Order is part of the report contract.
_REPORT_PROBES: Tuple[Tuple[Pattern[str], str], ...] = (
    (_SCRIPT_BLOCK_RE, "script tags"),
    (_EVENT_HANDLER_RE, "event handlers"),
    (_JAVASCRIPT_URI_RE, "javascript: protocols"),
    (_IFRAME_RE, "iframe elements"),
)


@dataclass(frozen=True, slots=True)
class SanitizeReport:
    """Sanitized HTML plus labels for the dangerous constructs seen in the input."""

    html: str
    removed: Tuple[str, ...] = ()


def has_dangerous_content(html: str) -> bool:
    """Return True if any dangerous-content probe matches `html`."""
    return any(probe.search(html) for probe in _DANGER_PROBES)


def sanitize_with_report(html: str) -> SanitizeReport:
    """Sanitize `html` and report which dangerous constructs it contained."""
    removed: List[str] = [label for probe, label in _REPORT_PROBES if probe.search(html)]
    if removed:
        logger.debug("sanitizing html containing: %s", ", ".join(removed))
    return SanitizeReport(html=sanitize(html), removed=tuple(removed))
