"""Shared response utilities for Lambda handlers."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any
from typing import Mapping
from typing import Sequence

from pydantic import BaseModel

from contact_api.utils.parsers import get_header

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def get_security_headers() -> dict[str, str]:
    """Get security headers for JSON responses.

    SECURITY: These headers protect against common web vulnerabilities:
    - X-Content-Type-Options: Prevents MIME type sniffing
    - X-Frame-Options: Prevents clickjacking
    - Cache-Control: Prevents caching of submission results

    Returns:
        Dictionary of security headers.
    """
    return {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Cache-Control": "no-store, no-cache, must-revalidate",
        "Pragma": "no-cache",
    }


def allow_origin_headers(
    event: Mapping[str, Any],
    allowed_origins: Sequence[str],
) -> dict[str, str]:
    """Decide whether to echo the request origin back to the browser.

    Matching is exact and case-sensitive. Origins outside the allow-list
    get no CORS headers at all, so the browser blocks the response.

    Args:
        event: The Lambda event containing the request origin header.
        allowed_origins: Origins permitted to read responses.

    Returns:
        ``Access-Control-Allow-Origin`` and ``Vary`` headers, or an
        empty dict.
    """
    request_origin = get_header(event, "origin")
    if request_origin and request_origin in allowed_origins:
        return {"Access-Control-Allow-Origin": request_origin, "Vary": "Origin"}
    return {}


def json_response(
    status_code: int,
    body: Any,
    event: Mapping[str, Any],
    allowed_origins: Sequence[str],
) -> dict[str, Any]:
    """Create a JSON API Gateway response.

    Args:
        status_code: HTTP status code.
        body: Response body (dict, Pydantic model, or dataclass).
        event: Lambda event for CORS origin detection.
        allowed_origins: CORS allow-list.

    Returns:
        API Gateway response dictionary.
    """
    response_headers = {"Content-Type": JSON_CONTENT_TYPE}
    response_headers.update(get_security_headers())
    response_headers.update(allow_origin_headers(event, allowed_origins))

    return {
        "statusCode": status_code,
        "headers": response_headers,
        "body": json.dumps(_serialize_body(body), default=str),
    }


def preflight_response(
    event: Mapping[str, Any],
    allowed_origins: Sequence[str],
) -> dict[str, Any]:
    """Create an empty 204 response carrying only the CORS headers."""
    return {
        "statusCode": 204,
        "headers": allow_origin_headers(event, allowed_origins),
        "body": "",
    }


def _serialize_body(body: Any) -> Any:
    """Serialize response body to JSON-compatible format."""
    if isinstance(body, BaseModel):
        return body.model_dump(exclude_none=True)

    if hasattr(body, "__dataclass_fields__"):
        return asdict(body)

    return body
