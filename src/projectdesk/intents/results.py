"""Outcome type returned by every intent."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

from pydantic import ValidationError

from projectdesk.domain import DomainError, InvalidValueError, SpecificationViolation
from projectdesk.persistence import NotFoundError, RepositoryError
from projectdesk.services import AuthenticationError, ServiceError

from .exceptions import IntentError

T = TypeVar("T")

# Failures an intent translates into an IntentResult; anything else propagates.
HANDLED_ERRORS: tuple[type[Exception], ...] = (
    DomainError,
    IntentError,
    RepositoryError,
    ServiceError,
    ValidationError,
)


class IntentStatus(StrEnum):
    SUCCEEDED = "succeeded"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    REJECTED = "rejected"
    UNAUTHORIZED = "unauthorized"
    FAILED = "failed"


@dataclass(frozen=True)
class IntentResult(Generic[T]):
    """Value or failure produced by an intent invocation."""

    status: IntentStatus
    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is IntentStatus.SUCCEEDED

    @classmethod
    def success(cls, value: T) -> IntentResult[T]:
        return cls(status=IntentStatus.SUCCEEDED, value=value)

    @classmethod
    def failure(cls, status: IntentStatus, error: str) -> IntentResult[T]:
        if status is IntentStatus.SUCCEEDED:
            msg = "A failure cannot carry the succeeded status"
            raise ValueError(msg)
        return cls(status=status, error=error)


def status_for(exc: Exception) -> IntentStatus:
    if isinstance(exc, NotFoundError):
        return IntentStatus.NOT_FOUND
    if isinstance(exc, AuthenticationError):
        return IntentStatus.UNAUTHORIZED
    if isinstance(exc, (InvalidValueError, ValidationError)):
        return IntentStatus.INVALID
    if isinstance(exc, (SpecificationViolation, IntentError)):
        return IntentStatus.REJECTED
    return IntentStatus.FAILED


def failure_from(exc: Exception, logger: logging.Logger) -> IntentResult[T]:
    """Translate a handled exception into a failed result and log it."""

    status = status_for(exc)
    level = logging.ERROR if status is IntentStatus.FAILED else logging.INFO
    logger.log(level, "Intent failed (%s): %s", status.value, exc)
    return IntentResult.failure(status, str(exc))


__all__ = ["HANDLED_ERRORS", "IntentResult", "IntentStatus", "failure_from", "status_for"]
