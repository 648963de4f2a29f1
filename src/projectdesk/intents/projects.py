"""Project use cases."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from projectdesk.domain import (
    AmountLike,
    IsActive,
    Money,
    Project,
    ProjectId,
    UserId,
    ValueFactory,
)
from projectdesk.persistence import NotFoundError, ProjectRepository, UserRepository
from projectdesk.services import Authenticator, Notification, NotificationService

from .authentication import Authentication
from .exceptions import DuplicateIdentityError
from .results import HANDLED_ERRORS, IntentResult, failure_from


class GetProject:
    """Look up a single project by id."""

    def __init__(
        self,
        projects: ProjectRepository,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._projects = projects
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, project_id: ProjectId) -> IntentResult[Project]:
        try:
            project = self._projects.find_by_id(project_id)
        except HANDLED_ERRORS as exc:
            return failure_from(exc, self._logger)
        return IntentResult.success(project)


class ListOwnerProjects:
    """List every project a user owns; an empty list is a valid outcome."""

    def __init__(
        self,
        projects: ProjectRepository,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._projects = projects
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, owner_id: UserId) -> IntentResult[list[Project]]:
        try:
            projects = self._projects.list_by_owner(owner_id)
        except HANDLED_ERRORS as exc:
            return failure_from(exc, self._logger)
        return IntentResult.success(list(projects))


class CreateProject:
    """Register a new project for existing owners."""

    def __init__(
        self,
        projects: ProjectRepository,
        users: UserRepository,
        money_factory: ValueFactory[Money],
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._projects = projects
        self._users = users
        self._money_factory = money_factory
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self,
        project_id: ProjectId,
        name: str,
        owner_ids: Sequence[UserId],
        budget: AmountLike = 0,
    ) -> IntentResult[Project]:
        try:
            self._ensure_new(project_id)
            for owner_id in owner_ids:
                self._users.find_by_id(owner_id)
            project = Project(
                id=project_id,
                name=name,
                owners=list(owner_ids),
                budget=self._money_factory.make(budget),
            )
            self._projects.save(project)
        except HANDLED_ERRORS as exc:
            return failure_from(exc, self._logger)
        self._logger.info("Created project %s (%s)", project.id, project.name)
        return IntentResult.success(project)

    def _ensure_new(self, project_id: ProjectId) -> None:
        try:
            self._projects.find_by_id(project_id)
        except NotFoundError:
            return
        msg = f"Project {project_id} already exists"
        raise DuplicateIdentityError(msg)


class AllocateBudget:
    """Add funds to an active project's budget."""

    def __init__(
        self,
        projects: ProjectRepository,
        money_factory: ValueFactory[Money],
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._projects = projects
        self._money_factory = money_factory
        self._active = IsActive()
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, project_id: ProjectId, amount: AmountLike) -> IntentResult[Project]:
        try:
            increment = self._money_factory.make(amount)
            project = self._projects.find_by_id(project_id)
            self._active.check(project)
            project.allocate(increment)
            self._projects.save(project)
        except HANDLED_ERRORS as exc:
            return failure_from(exc, self._logger)
        self._logger.info("Allocated %s to project %s", increment, project.id)
        return IntentResult.success(project)


class NotifyProjectOwners:
    """Send a message to every owner of a project on behalf of one of them."""

    def __init__(
        self,
        projects: ProjectRepository,
        users: UserRepository,
        notifications: NotificationService,
        authenticator: Authenticator,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._projects = projects
        self._users = users
        self._notifications = notifications
        self.authentication = Authentication(authenticator)
        self._logger = logger or logging.getLogger(__name__)

    def authenticate(self, token: str) -> UserId:
        return self.authentication.authenticate(token)

    def ensure_owner(self, user_id: UserId, project: Project) -> None:
        self.authentication.ensure_owner(user_id, project)

    def execute(
        self,
        token: str,
        project_id: ProjectId,
        subject: str,
        body: str,
    ) -> IntentResult[int]:
        try:
            caller = self.authenticate(token)
            project = self._projects.find_by_id(project_id)
            self.ensure_owner(caller, project)
            message = Notification(subject=subject, body=body)
            recipients = [self._users.find_by_id(owner).email for owner in project.owners]
            for recipient in recipients:
                self._notifications.send(recipient, message)
        except HANDLED_ERRORS as exc:
            return failure_from(exc, self._logger)
        self._logger.info(
            "User %s notified %d owner(s) of project %s", caller, len(recipients), project.id
        )
        return IntentResult.success(len(recipients))


__all__ = [
    "AllocateBudget",
    "CreateProject",
    "GetProject",
    "ListOwnerProjects",
    "NotifyProjectOwners",
]
