"""Environment-provided configuration for the contact mailer."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional
from typing import Sequence

from contact_api.exceptions import ConfigurationError

DEFAULT_SITE_NAME = "Contact"


@dataclass(frozen=True)
class ContactConfig:
    sender_email: str
    owner_email: str
    allowed_origins: Sequence[str]
    site_name: str = DEFAULT_SITE_NAME
    ses_region: Optional[str] = None


def parse_origin_list(value: str) -> tuple[str, ...]:
    """Split a comma-separated origin list, dropping blank entries."""
    return tuple(
        origin for origin in (part.strip() for part in value.split(",")) if origin
    )


def _require_env(name: str) -> str:
    value = os.getenv(name, "").strip()
    if not value:
        raise ConfigurationError(name)
    return value


def load_contact_config() -> ContactConfig:
    """Build the configuration from environment variables.

    Raises:
        ConfigurationError: If FROM_EMAIL or TO_EMAIL is not set.
    """
    return ContactConfig(
        sender_email=_require_env("FROM_EMAIL"),
        owner_email=_require_env("TO_EMAIL"),
        allowed_origins=parse_origin_list(os.getenv("ALLOWED_ORIGINS", "")),
        site_name=os.getenv("SITE_NAME", "").strip() or DEFAULT_SITE_NAME,
        ses_region=os.getenv("SES_REGION", "").strip() or None,
    )


@lru_cache(maxsize=1)
def get_contact_config() -> ContactConfig:
    """Return the configuration, loading it once per process."""
    return load_contact_config()
