"""ripple-rest resource models."""

from ripple_rest.models.base import HasAdditionalProperties
from ripple_rest.models.notification import Direction, Notification, NotificationType, State

__all__ = ["Direction", "HasAdditionalProperties", "Notification", "NotificationType", "State"]
