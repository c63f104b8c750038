"""Helpers for reading fields out of API Gateway proxy events."""

from __future__ import annotations

import base64
import binascii
from typing import Any
from typing import Mapping
from typing import Optional


def get_http_method(event: Mapping[str, Any]) -> str:
    """Return the upper-cased HTTP method.

    REST API events carry ``httpMethod``; HTTP API (v2) events carry
    ``requestContext.http.method``.
    """
    method = event.get("httpMethod")
    if not method:
        http = (event.get("requestContext") or {}).get("http") or {}
        method = http.get("method")
    return str(method or "").upper()


def get_request_id(event: Mapping[str, Any]) -> str:
    """Return the API Gateway request id, or an empty string."""
    return (event.get("requestContext") or {}).get("requestId", "")


def get_header(event: Mapping[str, Any], name: str) -> Optional[str]:
    """Look up a header by its lower-case or capitalized name."""
    headers = event.get("headers") or {}
    return headers.get(name.lower()) or headers.get(name.title())


def read_body(event: Mapping[str, Any]) -> Optional[str]:
    """Return the raw request body text, or None when absent.

    Raises:
        ValueError: If the body is not text, or a base64-encoded body
            cannot be decoded as UTF-8.
    """
    raw = event.get("body")
    if not raw:
        return None
    if not isinstance(raw, str):
        raise ValueError(f"Body must be text, not {type(raw).__name__}")
    if event.get("isBase64Encoded"):
        try:
            raw = base64.b64decode(raw, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            raise ValueError("Body is not valid base64 UTF-8 text") from exc
    return raw
