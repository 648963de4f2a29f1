"""In-memory repository implementations."""

from __future__ import annotations

import threading
from collections.abc import Callable, Sequence
from copy import deepcopy
from dataclasses import dataclass, field
from typing import ClassVar, Generic, TypeVar

from projectdesk.domain import Entity, Project, ProjectId, User, UserId
from projectdesk.persistence.errors import NotFoundError
from projectdesk.persistence.interfaces import ProjectRepository, UserRepository

EntityT = TypeVar("EntityT", bound=Entity)
IdT = TypeVar("IdT")
T = TypeVar("T")


def _copy(value: T) -> T:
    return deepcopy(value)


@dataclass(eq=False)
class InMemoryRepository(Generic[EntityT, IdT]):
    """Dict-backed store keyed by entity identity.

    Every read and write holds ``_lock`` and works on deep copies, so
    callers never share mutable state with the stored entities.
    """

    entity_name: ClassVar[str] = "Entity"

    _items: dict[object, EntityT] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def save(self, entity: EntityT) -> None:
        with self._lock:
            self._items[entity.identity] = _copy(entity)

    def find_by_id(self, entity_id: IdT) -> EntityT:
        with self._lock:
            entity = self._items.get(entity_id)
            if entity is None:
                raise NotFoundError(self.entity_name, entity_id)
            return _copy(entity)

    def find_all(self) -> Sequence[EntityT]:
        return self._select(lambda _: True)

    def delete(self, entity_id: IdT) -> None:
        with self._lock:
            self._items.pop(entity_id, None)

    def _select(self, predicate: Callable[[EntityT], bool]) -> list[EntityT]:
        with self._lock:
            return [_copy(entity) for entity in self._items.values() if predicate(entity)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


@dataclass(eq=False)
class InMemoryProjectRepository(InMemoryRepository[Project, ProjectId], ProjectRepository):
    entity_name: ClassVar[str] = "Project"

    def list_by_owner(self, user_id: UserId) -> Sequence[Project]:
        return self._select(lambda project: project.is_owned_by(user_id))


@dataclass(eq=False)
class InMemoryUserRepository(InMemoryRepository[User, UserId], UserRepository):
    entity_name: ClassVar[str] = "User"


__all__ = [
    "InMemoryProjectRepository",
    "InMemoryRepository",
    "InMemoryUserRepository",
]
