"""Domain layer: value types, entities, factories and specifications."""

from .base import DomainModel, Entity, MutableDomainModel
from .email import EmailAddress
from .enums import ProjectStatus
from .exceptions import (
    CurrencyMismatchError,
    DomainError,
    InvalidValueError,
    SpecificationViolation,
)
from .factories import EmailAddressFactory, MoneyFactory, ValueFactory
from .money import DEFAULT_CURRENCY, Money
from .project import Project
from .specifications import (
    AndSpecification,
    BudgetWithin,
    HasOwners,
    IsActive,
    NotSpecification,
    OrSpecification,
    Specification,
)
from .types import AmountLike, ProjectId, UserId
from .user import User

__all__ = [
    "DEFAULT_CURRENCY",
    "AmountLike",
    "AndSpecification",
    "BudgetWithin",
    "CurrencyMismatchError",
    "DomainError",
    "DomainModel",
    "EmailAddress",
    "EmailAddressFactory",
    "Entity",
    "HasOwners",
    "InvalidValueError",
    "IsActive",
    "Money",
    "MoneyFactory",
    "MutableDomainModel",
    "NotSpecification",
    "OrSpecification",
    "Project",
    "ProjectId",
    "ProjectStatus",
    "Specification",
    "SpecificationViolation",
    "User",
    "UserId",
    "ValueFactory",
]
