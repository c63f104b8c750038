"""SES client factory with per-region caching."""

from __future__ import annotations

from typing import Any

import boto3
from botocore.config import Config

# The function timeout is 10s; two sends must fit inside it.
SES_CLIENT_CONFIG = Config(
    retries={
        "max_attempts": 2,
        "mode": "standard",
    },
    connect_timeout=2,
    read_timeout=3,
)

_CLIENT_CACHE: dict[str | None, Any] = {}


def get_ses_client(region_name: str | None = None) -> Any:
    """Return a cached SES client for the region (default region if None)."""
    if region_name in _CLIENT_CACHE:
        return _CLIENT_CACHE[region_name]
    client = boto3.client(  # type: ignore[call-overload]
        "ses",
        region_name=region_name,
        config=SES_CLIENT_CONFIG,
    )
    _CLIENT_CACHE[region_name] = client
    return client


def clear_client_cache() -> None:
    """Clear cached clients (useful in tests)."""
    _CLIENT_CACHE.clear()
