"""Submitter acknowledgement email template."""

from __future__ import annotations

from contact_api.api.schemas import ContactPayload
from contact_api.templates.types import ComposedMessage
from contact_api.utils.sanitizers import escape_markup
from contact_api.utils.sanitizers import to_display_html

ACKNOWLEDGEMENT_SUBJECT = "[{site_name}] Thank you for your message"

ACKNOWLEDGEMENT_TEXT = """
Dear {name},

Thank you for getting in touch.
We have received your message and will reply as soon as we can.

If you did not submit this message, please disregard this email.

--------------------------------

Your message:

{title}

{message}
"""

ACKNOWLEDGEMENT_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
    <p>Dear {name},</p>
    <p>
        Thank you for getting in touch.<br/>
        We have received your message and will reply as soon as we can.
    </p>
    <p>If you did not submit this message, please disregard this email.</p>

    <hr style="border: none; border-top: 1px solid #dee2e6; margin: 30px 0;">

    <p style="font-weight: bold; margin-bottom: 5px;">Your message</p>
    <p style="margin: 0 0 10px 0;">{title}</p>
    <p style="margin-top: 0;">{message}</p>
</body>
</html>
"""


def compose_acknowledgement(
    payload: ContactPayload,
    reply_to_address: str,
    site_name: str,
) -> ComposedMessage:
    """Render the thank-you message sent back to the submitter."""
    subject = ACKNOWLEDGEMENT_SUBJECT.format(site_name=site_name)

    body_text = ACKNOWLEDGEMENT_TEXT.format(
        name=payload.name,
        title=payload.title,
        message=payload.message,
    )

    body_html = ACKNOWLEDGEMENT_HTML.format(
        name=escape_markup(payload.name),
        title=escape_markup(payload.title),
        message=to_display_html(payload.message),
    )

    return ComposedMessage(
        to=payload.email,
        reply_to=reply_to_address,
        subject=subject,
        body_text=body_text,
        body_html=body_html,
    )
