"""Validation of raw contact form bodies."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional

import pydantic

from contact_api.api.schemas import ContactPayload

INVALID_JSON_MESSAGE = "Invalid JSON"
BAD_REQUEST_MESSAGE = "Bad Request"


@dataclass(frozen=True)
class ValidationOutcome:
    """Either a validated payload or the reason it was rejected."""

    payload: Optional[ContactPayload] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.payload is not None

    @classmethod
    def accepted(cls, payload: ContactPayload) -> "ValidationOutcome":
        return cls(payload=payload)

    @classmethod
    def rejected(cls, reason: str) -> "ValidationOutcome":
        return cls(reason=reason)


def validate_contact_body(raw: Optional[str]) -> ValidationOutcome:
    """Parse and validate a raw request body.

    Only the first failing field is reported, using the fixed order
    name, email, title, message.

    Args:
        raw: The request body text.

    Returns:
        A ValidationOutcome holding a trimmed ContactPayload, or a
        human-readable rejection reason.
    """
    if not raw:
        return ValidationOutcome.rejected(BAD_REQUEST_MESSAGE)

    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        return ValidationOutcome.rejected(INVALID_JSON_MESSAGE)

    if not isinstance(data, dict):
        return ValidationOutcome.rejected(BAD_REQUEST_MESSAGE)

    try:
        payload = ContactPayload.model_validate(data)
    except pydantic.ValidationError as exc:
        return ValidationOutcome.rejected(_first_error_message(exc))

    return ValidationOutcome.accepted(payload)


def _first_error_message(exc: pydantic.ValidationError) -> str:
    errors = exc.errors()
    if not errors or not errors[0].get("loc"):
        return BAD_REQUEST_MESSAGE
    return f"Invalid {errors[0]['loc'][0]}"
