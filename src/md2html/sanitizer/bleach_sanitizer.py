"""Allow-list HTML sanitizer backed by bleach.

bleach enforces the tag, attribute and URI scheme allow-lists. It unwraps
disallowed elements but keeps their text, so elements whose content is
itself dangerous (script, style, iframe, ...) are removed beforehand with
BeautifulSoup.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Mapping, Optional

import bleach
from bs4 import BeautifulSoup  # type: ignore[import-untyped]

from .base_sanitizer import DEFAULT_POLICY, BaseSanitizer, SanitizerPolicy


class BleachSanitizer(BaseSanitizer):
    """Sanitizer using BeautifulSoup for element removal and bleach for allow-lists."""

    def clean(self, html: str, policy: SanitizerPolicy) -> str:
        if not html:
            return ""
        pruned = self._remove_elements(html, policy)
        # bleach.Cleaner is not thread-safe; bleach.clean builds a fresh one per call.
        return bleach.clean(
            pruned,
            tags=set(policy.allowed_tags),
            attributes=sorted(policy.allowed_attributes),
            protocols=set(policy.allowed_protocols),
            strip=True,
            strip_comments=policy.strip_comments,
        )

    def _remove_elements(self, html: str, policy: SanitizerPolicy) -> str:
        soup = BeautifulSoup(html, "html.parser")
        # An empty name list would match every tag.
        if policy.forbidden_content_tags:
            for tag in soup.find_all(sorted(policy.forbidden_content_tags)):
                if not tag.decomposed:
                    tag.decompose()
        if not policy.keep_content:
            for tag in soup.find_all(True):
                if not tag.decomposed and tag.name not in policy.allowed_tags:
                    tag.decompose()
        return str(soup)


_default_sanitizer = BleachSanitizer()


def build_policy(policy_overrides: Optional[Mapping[str, Any]] = None) -> SanitizerPolicy:
    """Return DEFAULT_POLICY with whole keys replaced by `policy_overrides`.

    Overrides replace a key entirely: passing `allowed_tags` substitutes the
    default tag list rather than extending it. Unknown keys raise TypeError.
    """
    if not policy_overrides:
        return DEFAULT_POLICY
    return dataclasses.replace(DEFAULT_POLICY, **dict(policy_overrides))


def sanitize(html: str, policy_overrides: Optional[Mapping[str, Any]] = None) -> str:
    """Sanitize `html` with the default policy, optionally overriding policy keys."""
    return _default_sanitizer.clean(html, build_policy(policy_overrides))
