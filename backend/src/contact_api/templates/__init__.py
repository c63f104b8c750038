"""Email templates for the contact form."""

from contact_api.templates.acknowledgement import compose_acknowledgement
from contact_api.templates.owner_notification import compose_owner_notification
from contact_api.templates.types import ComposedMessage

__all__ = [
    "ComposedMessage",
    "compose_acknowledgement",
    "compose_owner_notification",
]
