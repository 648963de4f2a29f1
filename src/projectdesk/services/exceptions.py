"""Custom exceptions for external service adapters."""

from __future__ import annotations


class ServiceError(RuntimeError):
    """Base class for failures of delegated capabilities."""


class DeliveryError(ServiceError):
    """Raised when a notification could not be delivered."""


class AuthenticationError(ServiceError):
    """Raised when a caller cannot be authenticated."""


__all__ = ["AuthenticationError", "DeliveryError", "ServiceError"]
