"""
Specification pattern for project rules.

A specification is a standalone predicate over an entity. Specifications
compose with ``&``, ``|`` and ``~`` and are enforced at the persistence
boundary by ``persistence.specified``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .enums import ProjectStatus
from .exceptions import SpecificationViolation
from .money import Money
from .project import Project

T = TypeVar("T")


class Specification(ABC, Generic[T]):
    """
    Abstract base class for specifications.

    A specification encapsulates a single business rule.
    """

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Check if a candidate object satisfies this specification.

        Args:
            candidate: Object to check

        Returns:
            True if candidate satisfies specification
        """

    @property
    def name(self) -> str:
        return type(self).__name__

    def describe(self, candidate: T) -> str:
        """Human readable reason used when ``candidate`` fails."""

        return f"does not satisfy {self.name}"

    def check(self, candidate: T) -> None:
        """
        Raise ``SpecificationViolation`` if the candidate is not satisfied.

        Args:
            candidate: Object to check
        """
        if not self.is_satisfied_by(candidate):
            raise SpecificationViolation(
                self.name,
                getattr(candidate, "id", None),
                self.describe(candidate),
            )

    def __and__(self, other: Specification[T]) -> AndSpecification[T]:
        """Combine specifications with AND."""
        return AndSpecification(self, other)

    def __or__(self, other: Specification[T]) -> OrSpecification[T]:
        """Combine specifications with OR."""
        return OrSpecification(self, other)

    def __invert__(self) -> NotSpecification[T]:
        """Negate specification with NOT."""
        return NotSpecification(self)


class AndSpecification(Specification[T]):
    """Specification that combines two specifications with AND."""

    def __init__(self, left: Specification[T], right: Specification[T]) -> None:
        self.left = left
        self.right = right

    @property
    def name(self) -> str:
        return f"({self.left.name} & {self.right.name})"

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)

    def describe(self, candidate: T) -> str:
        # Report the side that actually failed.
        if not self.left.is_satisfied_by(candidate):
            return self.left.describe(candidate)
        return self.right.describe(candidate)


class OrSpecification(Specification[T]):
    """Specification that combines two specifications with OR."""

    def __init__(self, left: Specification[T], right: Specification[T]) -> None:
        self.left = left
        self.right = right

    @property
    def name(self) -> str:
        return f"({self.left.name} | {self.right.name})"

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(candidate)

    def describe(self, candidate: T) -> str:
        return f"{self.left.describe(candidate)} and {self.right.describe(candidate)}"


class NotSpecification(Specification[T]):
    """Specification that negates another specification."""

    def __init__(self, spec: Specification[T]) -> None:
        self.spec = spec

    @property
    def name(self) -> str:
        return f"~{self.spec.name}"

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.spec.is_satisfied_by(candidate)

    def describe(self, candidate: T) -> str:
        return f"unexpectedly satisfies {self.spec.name}"


class HasOwners(Specification[Project]):
    """Every stored project needs at least one owner."""

    def is_satisfied_by(self, candidate: Project) -> bool:
        return bool(candidate.owners)

    def describe(self, candidate: Project) -> str:
        return "project has no owners"


class BudgetWithin(Specification[Project]):
    """Budget is in the limit's currency and does not exceed it."""

    def __init__(self, limit: Money) -> None:
        self.limit = limit

    def is_satisfied_by(self, candidate: Project) -> bool:
        budget = candidate.budget
        return budget.currency == self.limit.currency and budget.amount <= self.limit.amount

    def describe(self, candidate: Project) -> str:
        if candidate.budget.currency != self.limit.currency:
            return f"budget currency {candidate.budget.currency} differs from {self.limit.currency}"
        return f"budget {candidate.budget} exceeds limit {self.limit}"


class IsActive(Specification[Project]):
    def is_satisfied_by(self, candidate: Project) -> bool:
        return candidate.status is ProjectStatus.ACTIVE

    def describe(self, candidate: Project) -> str:
        return f"project is {candidate.status.value}"


__all__ = [
    "AndSpecification",
    "BudgetWithin",
    "HasOwners",
    "IsActive",
    "NotSpecification",
    "OrSpecification",
    "Specification",
]
