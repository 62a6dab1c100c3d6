"""HTML sanitization: allow-list policy, bleach backend and heuristic reports."""

from .base_sanitizer import DEFAULT_POLICY, BaseSanitizer, SanitizerPolicy
from .bleach_sanitizer import BleachSanitizer, build_policy, sanitize
from .report import SanitizeReport, has_dangerous_content, sanitize_with_report

__all__ = [
    "DEFAULT_POLICY",
    "BaseSanitizer",
    "SanitizerPolicy",
    "BleachSanitizer",
    "build_policy",
    "sanitize",
    "SanitizeReport",
    "has_dangerous_content",
    "sanitize_with_report",
]
