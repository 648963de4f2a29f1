"""Composition root wiring repositories, services and intents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import httpx

from projectdesk.config import AppSettings, ConfigurationError
from projectdesk.domain import (
    BudgetWithin,
    EmailAddress,
    EmailAddressFactory,
    HasOwners,
    Money,
    MoneyFactory,
    UserId,
    ValueFactory,
)
from projectdesk.intents import (
    AllocateBudget,
    CreateProject,
    GetProject,
    ListOwnerProjects,
    NotifyProjectOwners,
    RegisterUser,
)
from projectdesk.persistence import (
    InMemoryProjectRepository,
    InMemoryUserRepository,
    ProjectRepository,
    SpecifiedProjectRepository,
    UserRepository,
)
from projectdesk.persistence.sqlite import (
    SQLProjectRepository,
    SQLUserRepository,
    create_session_factory,
    is_memory_url,
)
from projectdesk.services import (
    Authenticator,
    LoggingNotificationService,
    NotificationService,
    OutboxNotificationService,
    StaticTokenAuthenticator,
    WebhookNotificationService,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Every intent assembled with its concrete dependencies."""

    settings: AppSettings
    projects: ProjectRepository
    users: UserRepository
    notifications: NotificationService
    authenticator: Authenticator
    money_factory: ValueFactory[Money]
    email_factory: ValueFactory[EmailAddress]
    register_user: RegisterUser
    create_project: CreateProject
    get_project: GetProject
    list_owner_projects: ListOwnerProjects
    allocate_budget: AllocateBudget
    notify_project_owners: NotifyProjectOwners


def _ensure_sqlite_directory(database_url: str) -> None:
    if not database_url.startswith("sqlite") or is_memory_url(database_url):
        return
    try:
        _, path = database_url.split(":///", maxsplit=1)
    except ValueError:
        return
    if not path:
        return
    db_path = Path(path).expanduser()
    db_path.parent.mkdir(parents=True, exist_ok=True)


def _build_repositories(settings: AppSettings) -> tuple[ProjectRepository, UserRepository]:
    if settings.storage == "memory":
        return InMemoryProjectRepository(), InMemoryUserRepository()
    _ensure_sqlite_directory(settings.database_url)
    session_factory = create_session_factory(settings.database_url)
    return SQLProjectRepository(session_factory), SQLUserRepository(session_factory)


def _build_notifications(
    settings: AppSettings,
    http_client: httpx.Client | None,
) -> NotificationService:
    if settings.notifier == "outbox":
        return OutboxNotificationService()
    if settings.notifier == "webhook":
        if not settings.webhook_url:
            msg = "PROJECTDESK_WEBHOOK_URL is required for the webhook notifier"
            raise ConfigurationError(msg)
        return WebhookNotificationService(settings.webhook_url, client=http_client)
    return LoggingNotificationService()


def build_container(
    settings: AppSettings | None = None,
    *,
    notifications: NotificationService | None = None,
    http_client: httpx.Client | None = None,
) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()

    money_factory = MoneyFactory(resolved_settings.currency)
    email_factory = EmailAddressFactory()
    budget_limit = money_factory.make(resolved_settings.budget_limit)

    project_store, users = _build_repositories(resolved_settings)
    projects = SpecifiedProjectRepository(
        project_store,
        HasOwners() & BudgetWithin(budget_limit),
    )
    notifier = notifications or _build_notifications(resolved_settings, http_client)
    authenticator = StaticTokenAuthenticator(
        {token: UserId(user_id) for token, user_id in resolved_settings.api_tokens}
    )
    logger.debug(
        "Built container (storage=%s, notifier=%s)",
        resolved_settings.storage,
        type(notifier).__name__,
    )

    return ServiceContainer(
        settings=resolved_settings,
        projects=projects,
        users=users,
        notifications=notifier,
        authenticator=authenticator,
        money_factory=money_factory,
        email_factory=email_factory,
        register_user=RegisterUser(users, email_factory),
        create_project=CreateProject(projects, users, money_factory),
        get_project=GetProject(projects),
        list_owner_projects=ListOwnerProjects(projects),
        allocate_budget=AllocateBudget(projects, money_factory),
        notify_project_owners=NotifyProjectOwners(projects, users, notifier, authenticator),
    )


__all__ = ["ServiceContainer", "build_container"]
