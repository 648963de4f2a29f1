"""SQLite repository implementations."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from sqlalchemy import Select, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from projectdesk.domain import Project, ProjectId, User, UserId
from projectdesk.persistence.errors import NotFoundError, StorageError
from projectdesk.persistence.interfaces import ProjectRepository, UserRepository

from .models import ProjectOwnerRecord, ProjectRecord, UserRecord


class _SessionRepository:
    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    @contextmanager
    def _transaction(self) -> Iterator[Session]:
        try:
            with self._session_factory.begin() as session:
                yield session
        except SQLAlchemyError as exc:
            msg = f"Storage failure in {type(self).__name__}: {exc}"
            raise StorageError(msg) from exc


class SQLProjectRepository(_SessionRepository, ProjectRepository):
    def save(self, project: Project) -> None:
        payload = project.model_dump(mode="json")
        with self._transaction() as session:
            record = session.get(ProjectRecord, project.id)
            if record is None:
                record = ProjectRecord(
                    id=project.id,
                    name=project.name,
                    status=project.status.value,
                    payload=payload,
                )
                session.add(record)
            else:
                record.name = project.name
                record.status = project.status.value
                record.payload = payload
            session.execute(
                delete(ProjectOwnerRecord).where(ProjectOwnerRecord.project_id == project.id)
            )
            session.add_all(
                ProjectOwnerRecord(project_id=project.id, user_id=owner)
                for owner in project.owners
            )

    def find_by_id(self, project_id: ProjectId) -> Project:
        with self._transaction() as session:
            record = session.get(ProjectRecord, project_id)
            if record is None:
                raise NotFoundError("Project", project_id)
            return Project.model_validate(record.payload)

    def find_all(self) -> Sequence[Project]:
        return self._select(select(ProjectRecord).order_by(ProjectRecord.id))

    def list_by_owner(self, user_id: UserId) -> Sequence[Project]:
        stmt: Select[tuple[ProjectRecord]] = (
            select(ProjectRecord)
            .join(ProjectOwnerRecord, ProjectOwnerRecord.project_id == ProjectRecord.id)
            .where(ProjectOwnerRecord.user_id == user_id)
            .order_by(ProjectRecord.id)
        )
        return self._select(stmt)

    def delete(self, project_id: ProjectId) -> None:
        with self._transaction() as session:
            session.execute(
                delete(ProjectOwnerRecord).where(ProjectOwnerRecord.project_id == project_id)
            )
            session.execute(delete(ProjectRecord).where(ProjectRecord.id == project_id))

    def _select(self, stmt: Select[tuple[ProjectRecord]]) -> list[Project]:
        with self._transaction() as session:
            records = session.execute(stmt).scalars().all()
            return [Project.model_validate(record.payload) for record in records]


class SQLUserRepository(_SessionRepository, UserRepository):
    def save(self, user: User) -> None:
        payload = user.model_dump(mode="json")
        with self._transaction() as session:
            record = session.get(UserRecord, user.id)
            if record is None:
                session.add(
                    UserRecord(id=user.id, name=user.name, email=str(user.email), payload=payload)
                )
            else:
                record.name = user.name
                record.email = str(user.email)
                record.payload = payload

    def find_by_id(self, user_id: UserId) -> User:
        with self._transaction() as session:
            record = session.get(UserRecord, user_id)
            if record is None:
                raise NotFoundError("User", user_id)
            return User.model_validate(record.payload)

    def find_all(self) -> Sequence[User]:
        with self._transaction() as session:
            records = session.execute(select(UserRecord).order_by(UserRecord.id)).scalars().all()
            return [User.model_validate(record.payload) for record in records]

    def delete(self, user_id: UserId) -> None:
        with self._transaction() as session:
            session.execute(delete(UserRecord).where(UserRecord.id == user_id))


__all__ = ["SQLProjectRepository", "SQLUserRepository"]
