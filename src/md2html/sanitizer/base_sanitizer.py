"""Abstract sanitizer interface and the allow-list policy it enforces.

Defines the minimal surface for HTML sanitizer backends (e.g., bleach),
enabling extensibility and testability via a common contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True, slots=True)
class SanitizerPolicy:
    """Allow-lists and switches handed to a sanitizer backend.

    Attributes
    ----------
    allowed_tags: frozenset[str]
        Elements kept in the output.
    allowed_attributes: frozenset[str]
        Attributes kept on any allowed element.
    allowed_protocols: frozenset[str]
        URI schemes accepted in `href`/`src`. Scheme-less (relative) references
        are always accepted.
    keep_content: bool
        When True, elements outside `allowed_tags` are unwrapped (their text
        is kept). When False they are removed together with their content.
    forbidden_content_tags: frozenset[str]
        Elements always removed together with their content.
    strip_comments: bool
        Drop HTML comments.
    """

    allowed_tags: FrozenSet[str]
    allowed_attributes: FrozenSet[str]
    allowed_protocols: FrozenSet[str]
    keep_content: bool = True
    forbidden_content_tags: FrozenSet[str] = frozenset()
    strip_comments: bool = True

    def __post_init__(self) -> None:
        # Accept any iterable from callers; store frozensets so policies stay hashable.
        for name in ("allowed_tags", "allowed_attributes", "allowed_protocols", "forbidden_content_tags"):
            object.__setattr__(self, name, frozenset(getattr(self, name)))


DEFAULT_POLICY = SanitizerPolicy(
    allowed_tags=frozenset(
        {
            "h1", "h2", "h3", "h4", "h5", "h6",
            "p", "br", "hr",
            "strong", "em", "del", "ins", "mark", "code", "pre",
            "blockquote",
            "ul", "ol", "li",
            "a",
            "img",
            "table", "thead", "tbody", "tfoot", "tr", "th", "td",
            "div", "span",
            "input",  # task list checkboxes
        }
    ),
    allowed_attributes=frozenset(
        {
            "href", "title", "alt", "src",
            "class", "id",
            "type", "checked", "disabled",
            "align", "colspan", "rowspan",
        }
    ),
    allowed_protocols=frozenset({"http", "https", "mailto", "tel", "callto", "sms", "cid", "xmpp"}),
    keep_content=True,
    forbidden_content_tags=frozenset(
        {
            "script", "style", "iframe", "object", "embed", "noscript",
            "template", "frame", "frameset", "noembed", "xmp", "textarea",
        }
    ),
    strip_comments=True,
)


class BaseSanitizer(ABC):
    """Abstract interface for allow-list HTML sanitizers.

    This is also the hook point for custom sanitization: subclass
    `BleachSanitizer`, call `super().clean()` and adjust its output (for
    example add `rel="nofollow"` to links), then pass the instance to
    `MarkdownPipeline(sanitizer=...)`.
    """

    @abstractmethod
    def clean(self, html: str, policy: SanitizerPolicy) -> str:
        """Return `html` reduced to what `policy` allows. Must not raise for valid policies."""
        raise NotImplementedError
