"""Core base classes for domain models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain model base with strict validation.

    Value types derive from this class: equality is structural and any
    derived value is a new instance.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_assignment=True)


class MutableDomainModel(BaseModel):
    """Mutable counterpart used where in-place updates are required."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


class Entity(MutableDomainModel):
    """Mutable domain object identified by a stable ``id``.

    Subclasses declare ``id`` with ``Field(frozen=True)`` so that the
    identity cannot be reassigned once the entity exists. Two entities of
    the same type are equal when their identities match, whatever the
    rest of their state looks like.
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return type(self) is type(other) and self.identity == other.identity

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.identity))

    @property
    def identity(self) -> object:
        return getattr(self, "id")


__all__ = ["DomainModel", "Entity", "MutableDomainModel"]
