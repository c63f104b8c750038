"""Utility modules for the contact API."""

from contact_api.utils.logging import (
    clear_request_context,
    configure_logging,
    get_logger,
    mask_email,
    set_request_context,
)
from contact_api.utils.parsers import get_header, get_http_method, read_body
from contact_api.utils.responses import (
    allow_origin_headers,
    json_response,
    preflight_response,
)
from contact_api.utils.sanitizers import (
    escape_markup,
    sanitize_header_field,
    to_display_html,
)
from contact_api.utils.validators import validate_email

__all__ = [
    "allow_origin_headers",
    "clear_request_context",
    "configure_logging",
    "escape_markup",
    "get_header",
    "get_http_method",
    "get_logger",
    "json_response",
    "mask_email",
    "preflight_response",
    "read_body",
    "sanitize_header_field",
    "set_request_context",
    "to_display_html",
    "validate_email",
]
