"""Owner notification email template."""

from __future__ import annotations

from contact_api.api.schemas import ContactPayload
from contact_api.templates.types import ComposedMessage
from contact_api.utils.sanitizers import escape_markup
from contact_api.utils.sanitizers import sanitize_header_field
from contact_api.utils.sanitizers import to_display_html

OWNER_NOTIFICATION_SUBJECT = "[Contact] {title} - {name}"

OWNER_NOTIFICATION_TEXT = """
From: {name}
Email: {email}

Title: {title}

Message:
{message}
"""

OWNER_NOTIFICATION_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
    <h2 style="margin: 0 0 20px 0; color: #1a1a1a;">New contact form submission</h2>

    <table style="border-collapse: collapse; width: 100%; margin-bottom: 20px;">
        <tr>
            <td style="padding: 12px; border: 1px solid #dee2e6; font-weight: bold; background-color: #f8f9fa; width: 120px;">
                Name
            </td>
            <td style="padding: 12px; border: 1px solid #dee2e6;">
                {name}
            </td>
        </tr>
        <tr>
            <td style="padding: 12px; border: 1px solid #dee2e6; font-weight: bold; background-color: #f8f9fa;">
                Email
            </td>
            <td style="padding: 12px; border: 1px solid #dee2e6;">
                {email}
            </td>
        </tr>
        <tr>
            <td style="padding: 12px; border: 1px solid #dee2e6; font-weight: bold; background-color: #f8f9fa;">
                Title
            </td>
            <td style="padding: 12px; border: 1px solid #dee2e6;">
                {title}
            </td>
        </tr>
    </table>

    <p style="font-weight: bold; margin-bottom: 5px;">Message</p>
    <p style="margin-top: 0;">{message}</p>

    <hr style="border: none; border-top: 1px solid #dee2e6; margin: 30px 0;">

    <p style="font-size: 12px; color: #666; margin: 0;">
        Reply to this email to answer the sender directly.
    </p>
</body>
</html>
"""


def compose_owner_notification(
    payload: ContactPayload,
    owner_address: str,
) -> ComposedMessage:
    """Render the notification sent to the site owner.

    The plain-text body carries the submission verbatim; every value
    interpolated into the subject, reply-to or HTML body is sanitized.
    """
    subject = OWNER_NOTIFICATION_SUBJECT.format(
        title=sanitize_header_field(payload.title),
        name=sanitize_header_field(payload.name),
    )

    body_text = OWNER_NOTIFICATION_TEXT.format(
        name=payload.name,
        email=payload.email,
        title=payload.title,
        message=payload.message,
    )

    body_html = OWNER_NOTIFICATION_HTML.format(
        name=escape_markup(payload.name),
        email=escape_markup(payload.email),
        title=escape_markup(payload.title),
        message=to_display_html(payload.message),
    )

    return ComposedMessage(
        to=owner_address,
        reply_to=sanitize_header_field(payload.email),
        subject=subject,
        body_text=body_text,
        body_html=body_html,
    )
