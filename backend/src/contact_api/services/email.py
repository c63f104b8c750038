"""SES email sending helpers."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol

from botocore.exceptions import BotoCoreError, ClientError

from contact_api.exceptions import DeliveryError
from contact_api.services.aws_clients import get_ses_client
from contact_api.templates.types import ComposedMessage
from contact_api.utils.sanitizers import sanitize_header_field


class MailTransport(Protocol):
    """Anything that can hand a composed message to a mail system."""

    def send(self, *, source: str, message: ComposedMessage) -> None: ...


def send_email(
    *,
    source: str,
    to_addresses: Iterable[str],
    subject: str,
    body_text: str,
    body_html: Optional[str] = None,
    reply_to_addresses: Iterable[str] = (),
    region_name: Optional[str] = None,
) -> str:
    """Send a plain or HTML email via SES.

    Returns:
        The SES message id.

    Raises:
        DeliveryError: If SES rejects the message or cannot be reached.
    """
    message: dict[str, Any] = {
        "Subject": {"Data": subject, "Charset": "UTF-8"},
        "Body": {"Text": {"Data": body_text, "Charset": "UTF-8"}},
    }
    if body_html:
        message["Body"]["Html"] = {"Data": body_html, "Charset": "UTF-8"}

    request: dict[str, Any] = {
        "Source": source,
        "Destination": {"ToAddresses": list(to_addresses)},
        "Message": message,
    }
    reply_to = list(reply_to_addresses)
    if reply_to:
        request["ReplyToAddresses"] = reply_to

    try:
        response = get_ses_client(region_name).send_email(**request)
    except ClientError as exc:
        error = exc.response.get("Error", {})
        raise DeliveryError(
            detail=f"SES {error.get('Code', 'Unknown')}: {error.get('Message', exc)}"
        ) from exc
    except BotoCoreError as exc:
        raise DeliveryError(detail=str(exc)) from exc
    return response.get("MessageId", "")


class SesMailTransport:
    """Mail transport backed by Amazon SES."""

    def __init__(self, region_name: Optional[str] = None):
        self.region_name = region_name

    def send(self, *, source: str, message: ComposedMessage) -> None:
        # Header values are sanitized again at the boundary.
        send_email(
            source=source,
            to_addresses=[message.to],
            subject=sanitize_header_field(message.subject),
            body_text=message.body_text,
            body_html=message.body_html,
            reply_to_addresses=[sanitize_header_field(message.reply_to)],
            region_name=self.region_name,
        )
