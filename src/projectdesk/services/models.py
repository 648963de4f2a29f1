"""Value objects exchanged with service providers."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from pydantic import Field

from projectdesk.domain import DomainModel, EmailAddress


def utc_now() -> datetime:
    return datetime.now(UTC)


class Notification(DomainModel):
    """Message handed to a notification provider."""

    subject: Annotated[str, Field(min_length=1)]
    body: str
    created_at: datetime = Field(default_factory=utc_now)


class Delivery(DomainModel):
    """Record of a notification accepted by a provider."""

    recipient: EmailAddress
    notification: Notification
    delivered_at: datetime = Field(default_factory=utc_now)


__all__ = ["Delivery", "Notification"]
