"""Notification provider implementations."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager

import httpx

from projectdesk.domain import EmailAddress

from .exceptions import DeliveryError
from .interfaces import NotificationService
from .models import Delivery, Notification

logger = logging.getLogger(__name__)


class OutboxNotificationService(NotificationService):
    """Keeps deliveries in memory; useful for tests and local runs."""

    def __init__(self) -> None:
        self._deliveries: list[Delivery] = []
        self._lock = threading.Lock()

    def send(self, recipient: EmailAddress, message: Notification) -> None:
        with self._lock:
            self._deliveries.append(Delivery(recipient=recipient, notification=message))

    @property
    def deliveries(self) -> tuple[Delivery, ...]:
        with self._lock:
            return tuple(self._deliveries)

    def sent_to(self, recipient: EmailAddress) -> tuple[Notification, ...]:
        return tuple(d.notification for d in self.deliveries if d.recipient == recipient)

    def clear(self) -> None:
        with self._lock:
            self._deliveries.clear()


class LoggingNotificationService(NotificationService):
    """Writes each notification to the log instead of delivering it."""

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def send(self, recipient: EmailAddress, message: Notification) -> None:
        self._logger.info("Notify %s: %s", recipient, message.subject)


class WebhookNotificationService(NotificationService):
    """Adapter that POSTs notifications as JSON to an HTTP endpoint."""

    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        url: str,
        *,
        client: httpx.Client | None = None,
        headers: Mapping[str, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if not url:
            msg = "Webhook URL is not configured"
            raise DeliveryError(msg)
        self._url = url
        self._client = client
        self._headers = dict(headers or {})
        self._timeout = timeout

    def send(self, recipient: EmailAddress, message: Notification) -> None:
        payload = {"recipient": str(recipient), **message.model_dump(mode="json")}
        with self._client_scope() as client:
            try:
                response = client.post(self._url, json=payload, headers=self._headers)
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                msg = f"Webhook delivery failed with status {exc.response.status_code}"
                raise DeliveryError(msg) from exc
            except httpx.HTTPError as exc:
                msg = "Webhook delivery failed"
                raise DeliveryError(msg) from exc
        logger.debug("Delivered notification to %s via webhook", recipient)

    @contextmanager
    def _client_scope(self) -> Iterator[httpx.Client]:
        if self._client is not None:
            yield self._client
            return
        with httpx.Client(timeout=self._timeout) as client:
            yield client


__all__ = [
    "LoggingNotificationService",
    "OutboxNotificationService",
    "WebhookNotificationService",
]
