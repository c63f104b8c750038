"""Input validation utilities."""

from __future__ import annotations

import re

EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def validate_email(value: str) -> str:
    """Validate an email address.

    The address is returned as given; replies go back to exactly
    what the submitter typed.

    Args:
        value: The email address to validate.

    Returns:
        The unchanged email address.

    Raises:
        ValueError: If the email address is invalid.
    """
    if not EMAIL_RE.match(value):
        raise ValueError("Invalid email address")
    return value

