"""User-facing notification payload."""

from pydantic import BaseModel

from recruit.models.enums import NotificationVariant


class Notification(BaseModel):
    """Transient message shown to the user after an action."""
    title: str
    description: str
    variant: NotificationVariant = NotificationVariant.default
