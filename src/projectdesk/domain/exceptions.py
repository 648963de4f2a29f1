"""Domain-level exceptions."""

from __future__ import annotations


class DomainError(RuntimeError):
    """Base class for domain rule failures."""


class InvalidValueError(DomainError, ValueError):
    """Raised by value factories when raw input violates a constraint."""


class CurrencyMismatchError(InvalidValueError):
    """Raised when combining money amounts in different currencies."""


class SpecificationViolation(DomainError):
    """Raised when an entity fails a domain specification."""

    def __init__(self, specification: str, entity_id: object, reason: str) -> None:
        self.specification = specification
        self.entity_id = entity_id
        self.reason = reason
        super().__init__(f"{specification} violated by {entity_id}: {reason}")


__all__ = [
    "CurrencyMismatchError",
    "DomainError",
    "InvalidValueError",
    "SpecificationViolation",
]
