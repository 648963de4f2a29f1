"""Exceptions raised by intent business rules."""

from __future__ import annotations


class IntentError(RuntimeError):
    """Raised when a use-case rule rejects the request."""


class NotOwnerError(IntentError):
    """Raised when the caller does not own the project it acts on."""


class DuplicateIdentityError(IntentError):
    """Raised when creating an entity whose identity is already taken."""


__all__ = ["DuplicateIdentityError", "IntentError", "NotOwnerError"]
