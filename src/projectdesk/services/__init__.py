"""Service layer exports."""

from .auth import StaticTokenAuthenticator
from .exceptions import AuthenticationError, DeliveryError, ServiceError
from .interfaces import Authenticator, NotificationService
from .models import Delivery, Notification
from .notifications import (
    LoggingNotificationService,
    OutboxNotificationService,
    WebhookNotificationService,
)

__all__ = [
    "AuthenticationError",
    "Authenticator",
    "Delivery",
    "DeliveryError",
    "LoggingNotificationService",
    "Notification",
    "NotificationService",
    "OutboxNotificationService",
    "ServiceError",
    "StaticTokenAuthenticator",
    "WebhookNotificationService",
]
