"""Template types for email rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ComposedMessage:
    """A rendered email ready for a single transport call."""

    to: str
    reply_to: str
    subject: str
    body_text: str
    body_html: str
