from __future__ import annotations

from collections.abc import Sequence

import pytest

from projectdesk.domain import (
    BudgetWithin,
    EmailAddress,
    EmailAddressFactory,
    HasOwners,
    Money,
    MoneyFactory,
    Project,
    ProjectId,
    ProjectStatus,
    User,
    UserId,
)
from projectdesk.intents import (
    AllocateBudget,
    Authentication,
    CreateProject,
    GetProject,
    IntentResult,
    IntentStatus,
    ListOwnerProjects,
    NotifyProjectOwners,
    RegisterUser,
)
from projectdesk.persistence import (
    InMemoryProjectRepository,
    InMemoryUserRepository,
    NotFoundError,
    ProjectRepository,
    SpecifiedProjectRepository,
    StorageError,
)
from projectdesk.services import (
    DeliveryError,
    Notification,
    NotificationService,
    OutboxNotificationService,
    StaticTokenAuthenticator,
)


class MissingProjectRepository(ProjectRepository):
    """Mock repository that knows no projects at all."""

    def save(self, entity: Project) -> None:
        raise AssertionError("save should not be called")

    def find_by_id(self, entity_id: ProjectId) -> Project:
        raise NotFoundError("Project", entity_id)

    def find_all(self) -> Sequence[Project]:
        return []

    def delete(self, entity_id: ProjectId) -> None:
        return None

    def list_by_owner(self, user_id: UserId) -> Sequence[Project]:
        return []


class ExplodingProjectRepository(MissingProjectRepository):
    def __init__(self, error: Exception) -> None:
        self.error = error

    def find_by_id(self, entity_id: ProjectId) -> Project:
        raise self.error


class FailingNotifier(NotificationService):
    def send(self, recipient: EmailAddress, message: Notification) -> None:
        raise DeliveryError("smtp down")


def _env() -> tuple[SpecifiedProjectRepository, InMemoryProjectRepository, InMemoryUserRepository]:
    store = InMemoryProjectRepository()
    projects = SpecifiedProjectRepository(store, HasOwners(), BudgetWithin(Money.create(1000)))
    users = InMemoryUserRepository()
    for user_id, name in ((1, "ada"), (2, "grace"), (3, "linus")):
        users.save(
            User(id=UserId(user_id), name=name, email=EmailAddress.create(f"{name}@example.com"))
        )
    return projects, store, users


def _seed(store: InMemoryProjectRepository, **overrides: object) -> Project:
    fields: dict[str, object] = {
        "id": ProjectId(1),
        "name": "Apollo",
        "owners": [UserId(1), UserId(2)],
        "budget": Money.create(100),
    }
    fields.update(overrides)
    project = Project(**fields)  # type: ignore[arg-type]
    store.save(project)
    return project


def test_get_project_with_missing_repository_returns_not_found() -> None:
    result = GetProject(MissingProjectRepository()).execute(ProjectId(9))

    assert not result.ok
    assert result.status is IntentStatus.NOT_FOUND
    assert result.value is None
    assert "9" in (result.error or "")


def test_get_project_success() -> None:
    projects, store, _ = _env()
    seeded = _seed(store)

    result = GetProject(projects).execute(ProjectId(1))

    assert result.ok
    assert result.value == seeded


def test_get_project_translates_storage_failure() -> None:
    result = GetProject(ExplodingProjectRepository(StorageError("disk"))).execute(ProjectId(1))
    assert result.status is IntentStatus.FAILED


def test_unexpected_errors_propagate() -> None:
    with pytest.raises(KeyError):
        GetProject(ExplodingProjectRepository(KeyError("bug"))).execute(ProjectId(1))


def test_list_owner_projects_empty_is_success() -> None:
    projects, store, _ = _env()
    _seed(store)

    assert ListOwnerProjects(projects).execute(UserId(3)) == IntentResult.success([])
    result = ListOwnerProjects(projects).execute(UserId(2))
    assert result.ok and [p.id for p in result.value or []] == [1]


def test_create_project() -> None:
    projects, store, users = _env()
    intent = CreateProject(projects, users, MoneyFactory())

    result = intent.execute(ProjectId(5), "Gemini", [UserId(1)], "250")

    assert result.ok
    assert store.find_by_id(ProjectId(5)).budget == Money.create(250)


def test_create_project_without_owners_is_rejected() -> None:
    projects, store, users = _env()

    result = CreateProject(projects, users, MoneyFactory()).execute(ProjectId(5), "Orphan", [])

    assert result.status is IntentStatus.REJECTED
    assert len(store) == 0


@pytest.mark.parametrize(
    ("owners", "budget", "status"),
    [
        ([UserId(42)], "10", IntentStatus.NOT_FOUND),
        ([UserId(1)], "-10", IntentStatus.INVALID),
        ([UserId(1)], "5000", IntentStatus.REJECTED),
    ],
)
def test_create_project_failures(owners: list[UserId], budget: str, status: IntentStatus) -> None:
    projects, store, users = _env()

    result = CreateProject(projects, users, MoneyFactory()).execute(
        ProjectId(5), "Gemini", owners, budget
    )

    assert result.status is status
    assert len(store) == 0


def test_create_project_rejects_duplicate_identity() -> None:
    projects, store, users = _env()
    _seed(store)

    result = CreateProject(projects, users, MoneyFactory()).execute(
        ProjectId(1), "Again", [UserId(1)]
    )

    assert result.status is IntentStatus.REJECTED
    assert store.find_by_id(ProjectId(1)).name == "Apollo"


def test_allocate_budget() -> None:
    projects, store, _ = _env()
    _seed(store)

    result = AllocateBudget(projects, MoneyFactory()).execute(ProjectId(1), 50)

    assert result.ok
    assert store.find_by_id(ProjectId(1)).budget == Money.create(150)


def test_allocate_budget_over_limit_leaves_store_unchanged() -> None:
    projects, store, _ = _env()
    _seed(store)

    result = AllocateBudget(projects, MoneyFactory()).execute(ProjectId(1), 950)

    assert result.status is IntentStatus.REJECTED
    assert store.find_by_id(ProjectId(1)).budget == Money.create(100)


@pytest.mark.parametrize(
    ("factory", "amount", "overrides", "status"),
    [
        (MoneyFactory(), -1, {}, IntentStatus.INVALID),
        (MoneyFactory("EUR"), 1, {}, IntentStatus.INVALID),
        (MoneyFactory(), 1, {"status": ProjectStatus.ARCHIVED}, IntentStatus.REJECTED),
    ],
)
def test_allocate_budget_failures(
    factory: MoneyFactory,
    amount: int,
    overrides: dict[str, object],
    status: IntentStatus,
) -> None:
    projects, store, _ = _env()
    _seed(store, **overrides)

    result = AllocateBudget(projects, factory).execute(ProjectId(1), amount)

    assert result.status is status
    assert store.find_by_id(ProjectId(1)).budget == Money.create(100)


def test_allocate_budget_missing_project() -> None:
    result = AllocateBudget(MissingProjectRepository(), MoneyFactory()).execute(ProjectId(1), 1)
    assert result.status is IntentStatus.NOT_FOUND


def _notify(
    notifier: NotificationService,
) -> tuple[NotifyProjectOwners, InMemoryProjectRepository]:
    projects, store, users = _env()
    _seed(store)
    auth = StaticTokenAuthenticator({"ada-token": UserId(1), "linus-token": UserId(3)})
    return NotifyProjectOwners(projects, users, notifier, auth), store


def test_notify_project_owners() -> None:
    outbox = OutboxNotificationService()
    intent, _ = _notify(outbox)

    result = intent.execute("ada-token", ProjectId(1), "Kickoff", "Monday 9am")

    assert result == IntentResult.success(2)
    recipients = [str(delivery.recipient) for delivery in outbox.deliveries]
    assert recipients == ["ada@example.com", "grace@example.com"]
    assert outbox.deliveries[0].notification.subject == "Kickoff"


@pytest.mark.parametrize(
    ("token", "project_id", "status"),
    [
        ("bad-token", 1, IntentStatus.UNAUTHORIZED),
        ("linus-token", 1, IntentStatus.REJECTED),
        ("ada-token", 99, IntentStatus.NOT_FOUND),
    ],
)
def test_notify_failures_send_nothing(token: str, project_id: int, status: IntentStatus) -> None:
    outbox = OutboxNotificationService()
    intent, _ = _notify(outbox)

    result = intent.execute(token, ProjectId(project_id), "Kickoff", "")

    assert result.status is status
    assert outbox.deliveries == ()


def test_notify_delivery_failure() -> None:
    intent, _ = _notify(FailingNotifier())
    result = intent.execute("ada-token", ProjectId(1), "Kickoff", "")
    assert result.status is IntentStatus.FAILED
    assert result.error == "smtp down"


def test_notify_composes_authentication() -> None:
    intent, _ = _notify(OutboxNotificationService())

    assert isinstance(intent.authentication, Authentication)
    assert not isinstance(intent, Authentication)
    assert intent.authenticate("ada-token") == 1


def test_register_user() -> None:
    users = InMemoryUserRepository()
    intent = RegisterUser(users, EmailAddressFactory())

    created = intent.execute(UserId(1), "Ada", "ADA@example.com")
    duplicate = intent.execute(UserId(1), "Ada", "ada@example.com")
    invalid = intent.execute(UserId(2), "Bob", "not-an-email")

    assert created.ok and str(users.find_by_id(UserId(1)).email) == "ada@example.com"
    assert duplicate.status is IntentStatus.REJECTED
    assert invalid.status is IntentStatus.INVALID
    assert len(users) == 1


def test_failure_cannot_claim_success() -> None:
    with pytest.raises(ValueError):
        IntentResult.failure(IntentStatus.SUCCEEDED, "nope")
