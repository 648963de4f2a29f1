"""Repositories that enforce domain specifications at the persistence boundary."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Generic, TypeVar

from projectdesk.domain import Project, ProjectId, Specification, SpecificationViolation, UserId
from projectdesk.persistence.interfaces import ProjectRepository, Repository

EntityT = TypeVar("EntityT")
IdT = TypeVar("IdT")


class SpecifiedRepository(Generic[EntityT, IdT]):
    """Wraps a delegate repository and checks specifications on every access.

    Writes are checked before the delegate is touched, so a violating
    entity never reaches the store. Reads are checked after the delegate
    returns, flagging entities that were persisted before a rule existed.
    Delegate errors propagate unchanged.
    """

    def __init__(
        self,
        delegate: Repository[EntityT, IdT],
        *specifications: Specification[EntityT],
        logger: logging.Logger | None = None,
    ) -> None:
        if not specifications:
            msg = "At least one specification is required"
            raise ValueError(msg)
        self._delegate = delegate
        self._specifications = specifications
        self._logger = logger or logging.getLogger(__name__)

    @property
    def delegate(self) -> Repository[EntityT, IdT]:
        return self._delegate

    @property
    def specifications(self) -> tuple[Specification[EntityT], ...]:
        return self._specifications

    def save(self, entity: EntityT) -> None:
        self._enforce(entity, operation="save")
        self._delegate.save(entity)

    def find_by_id(self, entity_id: IdT) -> EntityT:
        entity = self._delegate.find_by_id(entity_id)
        self._enforce(entity, operation="read")
        return entity

    def find_all(self) -> Sequence[EntityT]:
        return self._enforce_all(self._delegate.find_all())

    def delete(self, entity_id: IdT) -> None:
        self._delegate.delete(entity_id)

    def _enforce_all(self, entities: Sequence[EntityT]) -> list[EntityT]:
        for entity in entities:
            self._enforce(entity, operation="read")
        return list(entities)

    def _enforce(self, entity: EntityT, *, operation: str) -> None:
        for specification in self._specifications:
            try:
                specification.check(entity)
            except SpecificationViolation as exc:
                self._logger.warning(
                    "Rejected %s of %s: %s",
                    operation,
                    exc.entity_id,
                    exc.reason,
                    extra={"specification": exc.specification},
                )
                raise


class SpecifiedProjectRepository(SpecifiedRepository[Project, ProjectId], ProjectRepository):
    """``ProjectRepository`` guarded by project specifications."""

    def __init__(
        self,
        delegate: ProjectRepository,
        *specifications: Specification[Project],
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(delegate, *specifications, logger=logger)
        self._projects = delegate

    def list_by_owner(self, user_id: UserId) -> Sequence[Project]:
        return self._enforce_all(self._projects.list_by_owner(user_id))


__all__ = ["SpecifiedProjectRepository", "SpecifiedRepository"]
