"""Core module - Configuration, exceptions, logging and schemas."""

from slacknotifier.core.config import settings
from slacknotifier.core.exceptions import (
    DeliveryCancelledError,
    DeliveryError,
    InvalidNotificationError,
    SlackNotifierError,
    TransportError,
)
from slacknotifier.core.schemas import ContextEntry, Notification, load_notification

__all__ = [
    # Config
    "settings",
    # Exceptions
    "DeliveryCancelledError",
    "DeliveryError",
    "InvalidNotificationError",
    "SlackNotifierError",
    "TransportError",
    # Schemas
    "ContextEntry",
    "Notification",
    "load_notification",
]
