"""Pydantic schemas for the contact form API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from contact_api.utils.validators import validate_email

MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 100
MAX_TITLE_LENGTH = 300
MAX_MESSAGE_LENGTH = 5000


class ContactPayload(BaseModel):
    """Validated contact form submission.

    Fields are trimmed before the length checks run, and are checked in
    declaration order.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH, strict=True)
    email: str = Field(min_length=1, max_length=MAX_EMAIL_LENGTH, strict=True)
    title: str = Field(min_length=1, max_length=MAX_TITLE_LENGTH, strict=True)
    message: str = Field(min_length=1, max_length=MAX_MESSAGE_LENGTH, strict=True)

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        return validate_email(value)


class ContactResponse(BaseModel):
    """Contact API response body."""

    ok: bool
    message: Optional[str] = None
