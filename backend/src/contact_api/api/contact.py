"""Lambda handler for the public contact form.

A submission is validated, then two emails are sent through the mail
transport: a notification to the site owner, which must succeed, and an
acknowledgement to the submitter, whose failure is only logged.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any
from typing import Mapping
from typing import Optional

from contact_api.api.contact_validation import BAD_REQUEST_MESSAGE
from contact_api.api.contact_validation import INVALID_JSON_MESSAGE
from contact_api.api.contact_validation import validate_contact_body
from contact_api.api.schemas import ContactPayload
from contact_api.api.schemas import ContactResponse
from contact_api.config import ContactConfig
from contact_api.config import get_contact_config
from contact_api.exceptions import DeliveryError
from contact_api.exceptions import MethodNotAllowedError
from contact_api.exceptions import ValidationError
from contact_api.services.email import MailTransport
from contact_api.services.email import SesMailTransport
from contact_api.templates import compose_acknowledgement
from contact_api.templates import compose_owner_notification
from contact_api.utils.logging import clear_request_context
from contact_api.utils.logging import configure_logging
from contact_api.utils.logging import get_logger
from contact_api.utils.logging import log_lambda_event
from contact_api.utils.logging import log_response
from contact_api.utils.logging import mask_email
from contact_api.utils.logging import set_request_context
from contact_api.utils.parsers import get_http_method
from contact_api.utils.parsers import get_request_id
from contact_api.utils.parsers import read_body
from contact_api.utils.responses import json_response
from contact_api.utils.responses import preflight_response

# Configure logging on module load
configure_logging()
logger = get_logger(__name__)


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of a best-effort send. Never raised, only logged."""

    success: bool
    error: Optional[str] = None


def dispatch_contact_request(
    event: Mapping[str, Any],
    config: ContactConfig,
    transport: MailTransport,
) -> dict[str, Any]:
    """Run a contact form submission through validation and delivery.

    Args:
        event: API Gateway proxy event.
        config: Sender, owner and CORS configuration.
        transport: Mail transport used for both sends.

    Returns:
        API Gateway response dictionary.
    """
    method = get_http_method(event)
    log_lambda_event(logger, event, method)

    if method == "OPTIONS":
        return preflight_response(event, config.allowed_origins)

    try:
        if method != "POST":
            raise MethodNotAllowedError(method)

        try:
            raw_body = read_body(event)
        except ValueError as exc:
            raise ValidationError(INVALID_JSON_MESSAGE) from exc
        if raw_body is None:
            raise ValidationError(BAD_REQUEST_MESSAGE)

        outcome = validate_contact_body(raw_body)
        if outcome.payload is None:
            raise ValidationError(outcome.reason or BAD_REQUEST_MESSAGE)
        payload = outcome.payload
    except (MethodNotAllowedError, ValidationError) as exc:
        logger.warning(f"Rejected contact request: {exc.message}")
        return _respond(exc.status_code, exc.to_dict(), event, config)
    except Exception:
        logger.exception("Unexpected error while reading contact request")
        return _respond(500, DeliveryError().to_dict(), event, config)

    try:
        _send_owner_notification(payload, config, transport)
    except Exception as exc:
        error = (
            exc
            if isinstance(exc, DeliveryError)
            else DeliveryError(detail=f"{type(exc).__name__}: {exc}")
        )
        logger.exception(f"Owner notification failed: {error.detail}")
        return _respond(error.status_code, error.to_dict(), event, config)

    result = _send_acknowledgement(payload, config, transport)
    if not result.success:
        logger.warning(
            f"Acknowledgement to {mask_email(payload.email)} failed: {result.error}"
        )

    return _respond(200, ContactResponse(ok=True), event, config)


def _send_owner_notification(
    payload: ContactPayload,
    config: ContactConfig,
    transport: MailTransport,
) -> None:
    """Send the owner notification. Errors propagate to the caller."""
    message = compose_owner_notification(payload, config.owner_email)
    transport.send(source=config.sender_email, message=message)
    logger.info(
        "Owner notification sent",
        extra={
            "submitter": mask_email(payload.email),
            "message_length": len(payload.message),
        },
    )


def _send_acknowledgement(
    payload: ContactPayload,
    config: ContactConfig,
    transport: MailTransport,
) -> DeliveryResult:
    """Send the acknowledgement and report the outcome without raising."""
    try:
        message = compose_acknowledgement(
            payload,
            config.owner_email,
            config.site_name,
        )
        transport.send(source=config.sender_email, message=message)
    except DeliveryError as exc:
        return DeliveryResult(success=False, error=exc.detail or exc.message)
    except Exception as exc:
        return DeliveryResult(success=False, error=f"{type(exc).__name__}: {exc}")
    logger.info(f"Acknowledgement sent to {mask_email(payload.email)}")
    return DeliveryResult(success=True)


def _respond(
    status_code: int,
    body: Any,
    event: Mapping[str, Any],
    config: ContactConfig,
) -> dict[str, Any]:
    return json_response(status_code, body, event, config.allowed_origins)


_transport: Optional[MailTransport] = None


def get_transport(config: ContactConfig) -> MailTransport:
    """Return the process-wide SES transport."""
    global _transport
    if _transport is None:
        _transport = SesMailTransport(region_name=config.ses_region)
    return _transport


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Handle API Gateway request for the contact form."""

    set_request_context(req_id=get_request_id(event))
    start_time = time.perf_counter()
    config = get_contact_config()

    try:
        response = dispatch_contact_request(event, config, get_transport(config))
    except Exception:  # pragma: no cover - safety net
        logger.exception("Unexpected error in contact handler")
        response = json_response(
            500,
            DeliveryError().to_dict(),
            event,
            config.allowed_origins,
        )

    log_response(
        logger,
        response["statusCode"],
        duration_ms=(time.perf_counter() - start_time) * 1000,
    )
    clear_request_context()
    return response
