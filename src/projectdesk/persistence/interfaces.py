"""Persistence layer abstractions for repositories."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar

from projectdesk.domain import Project, ProjectId, User, UserId

EntityT = TypeVar("EntityT")
IdT = TypeVar("IdT")


class Repository(Protocol[EntityT, IdT]):
    """Lookup and save operations over one entity type.

    ``save`` upserts by identity. ``find_by_id`` raises ``NotFoundError``
    for an unknown identity; multi-result queries return an empty
    sequence when nothing matches.
    """

    def save(self, entity: EntityT) -> None: ...

    def find_by_id(self, entity_id: IdT) -> EntityT: ...

    def find_all(self) -> Sequence[EntityT]: ...

    def delete(self, entity_id: IdT) -> None: ...


class ProjectRepository(Repository[Project, ProjectId], Protocol):
    """Storage for projects."""

    def list_by_owner(self, user_id: UserId) -> Sequence[Project]: ...


class UserRepository(Repository[User, UserId], Protocol):
    """Storage for users."""


__all__ = ["EntityT", "IdT", "ProjectRepository", "Repository", "UserRepository"]
