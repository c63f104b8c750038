"""Structured logging utilities for the contact Lambda functions.

Log entries are emitted as single-line JSON so they can be queried with
CloudWatch Logs Insights.

SECURITY NOTES:
- Submitted form fields are PII; log their lengths, never their values
- Use mask_email() whenever a submitter address has to appear in a log line
"""

from __future__ import annotations

import json
import logging
import os
import sys
import traceback
from contextvars import ContextVar
from datetime import datetime
from datetime import timezone
from typing import Any
from typing import Mapping
from typing import MutableMapping
from typing import Optional


def mask_email(email: str) -> str:
    """Mask an email address for safe logging.

    Args:
        email: The email address to mask.

    Returns:
        A masked version like "jo***@***.com".

    Examples:
        >>> mask_email("john.doe@example.com")
        'jo***@***.com'
        >>> mask_email("a@b.co")
        'a***@***.co'
    """
    if not email or "@" not in email:
        return "***"

    local, domain = email.rsplit("@", 1)
    domain_parts = domain.rsplit(".", 1)

    visible_local = local[:2] if len(local) > 2 else local[:1]
    tld = domain_parts[-1] if len(domain_parts) > 1 else ""

    return f"{visible_local}***@***.{tld}" if tld else f"{visible_local}***@***"


# Context variables for request tracking
request_id: ContextVar[str] = ContextVar("request_id", default="")


class StructuredLogFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Produces log entries compatible with CloudWatch Logs Insights,
    including request context and exception details.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        req_id = request_id.get()
        if req_id:
            log_data["request_id"] = req_id

        if record.levelno >= logging.WARNING:
            log_data["source"] = {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info),
            }

        if hasattr(record, "extra") and isinstance(record.extra, dict):
            log_data["extra"] = record.extra

        return json.dumps(log_data, default=str)


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that automatically includes context variables."""

    def process(
        self,
        msg: str,
        kwargs: MutableMapping[str, Any],
    ) -> tuple[str, MutableMapping[str, Any]]:
        """Nest adapter and call-site extras under a single ``extra`` key."""
        extra = dict(self.extra or {})
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = {"extra": extra} if extra else {}
        return msg, kwargs


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structured logging for Lambda execution.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to
               LOG_LEVEL environment variable or INFO.
    """
    log_level: str = level or os.getenv("LOG_LEVEL") or "INFO"

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Lambda installs its own handler; replace it with the JSON one
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredLogFormatter())
    root_logger.addHandler(handler)

    logging.getLogger("boto3").setLevel(logging.WARNING)
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str, **extra: Any) -> ContextLogger:
    """Get a context-aware logger.

    Args:
        name: Logger name (typically __name__).
        **extra: Additional context to include in all log messages.

    Returns:
        A ContextLogger instance.
    """
    logger = logging.getLogger(name)
    return ContextLogger(logger, extra)


def set_request_context(req_id: Optional[str] = None) -> None:
    """Set request context for logging.

    Call this at the start of each Lambda invocation to set
    context that will be included in all log messages.

    Args:
        req_id: API Gateway request ID.
    """
    if req_id:
        request_id.set(req_id)


def clear_request_context() -> None:
    """Clear request context after Lambda invocation."""
    request_id.set("")


def log_lambda_event(
    logger: ContextLogger,
    event: Mapping[str, Any],
    method: str,
) -> None:
    """Log Lambda event details at DEBUG level.

    Only the body length is recorded; the body itself holds PII.
    """
    headers = event.get("headers") or {}
    log_data: dict[str, Any] = {
        "http_method": method,
        "path": event.get("path") or event.get("rawPath"),
        "origin": headers.get("origin") or headers.get("Origin"),
        "body_length": len(event.get("body") or ""),
    }
    logger.debug("Lambda event received", extra={"event": log_data})


def log_response(
    logger: ContextLogger,
    status_code: int,
    duration_ms: Optional[float] = None,
) -> None:
    """Log Lambda response details.

    Args:
        logger: The logger to use.
        status_code: HTTP status code of the response.
        duration_ms: Request duration in milliseconds.
    """
    log_data: dict[str, Any] = {"status_code": status_code}
    if duration_ms is not None:
        log_data["duration_ms"] = round(duration_ms, 2)

    level = logging.INFO if status_code < 400 else logging.WARNING
    logger.log(level, "Lambda response", extra={"response": log_data})
