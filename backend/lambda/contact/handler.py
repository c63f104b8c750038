"""Lambda entrypoint for the contact form."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from contact_api.api.contact import lambda_handler as _handler
from contact_api.config import get_contact_config

# Fail the cold start when FROM_EMAIL or TO_EMAIL is missing.
get_contact_config()


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Delegate to the contact form handler."""

    return _handler(event, context)
