"""Protocols for capabilities delegated outside the domain."""

from __future__ import annotations

from typing import Protocol

from projectdesk.domain import EmailAddress, UserId

from .models import Notification


class NotificationService(Protocol):
    """Contract implemented by notification provider adapters."""

    def send(self, recipient: EmailAddress, message: Notification) -> None:
        """Deliver ``message`` to ``recipient`` or raise ``DeliveryError``."""


class Authenticator(Protocol):
    """Resolves an opaque caller token to a user identity."""

    def authenticate(self, token: str) -> UserId:
        """Return the caller's id or raise ``AuthenticationError``."""


__all__ = ["Authenticator", "NotificationService"]
