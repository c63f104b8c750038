"""String sanitizers for mail headers and HTML bodies."""

from __future__ import annotations

import re

_LINE_BREAKS_RE = re.compile(r"[\r\n]+")
_NEWLINE_RE = re.compile(r"\r?\n")

# Ampersand must stay first so later entities are not escaped twice.
_MARKUP_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def sanitize_header_field(value: str) -> str:
    """Collapse CR/LF runs to a single space and trim the result.

    SECURITY: Apply to every value that ends up in a mail header
    (subject, reply-to, display names) to prevent header injection.
    """
    return _LINE_BREAKS_RE.sub(" ", value).strip()


def escape_markup(value: str) -> str:
    """Escape the five HTML-significant characters."""
    for char, entity in _MARKUP_REPLACEMENTS:
        value = value.replace(char, entity)
    return value


def to_display_html(value: str) -> str:
    """Escape text and turn line breaks into ``<br/>`` tags."""
    return _NEWLINE_RE.sub("<br/>", escape_markup(value))
