from __future__ import annotations

import threading

import pytest

from projectdesk.domain import EmailAddress, Money, Project, ProjectId, User, UserId
from projectdesk.persistence import (
    InMemoryProjectRepository,
    InMemoryUserRepository,
    NotFoundError,
)


def _project(project_id: int, name: str = "Apollo", owners: tuple[int, ...] = (1,)) -> Project:
    return Project(
        id=ProjectId(project_id),
        name=name,
        owners=[UserId(owner) for owner in owners],
        budget=Money.create(100),
    )


def test_save_then_find_round_trip() -> None:
    repo = InMemoryProjectRepository()
    project = _project(1)

    repo.save(project)
    loaded = repo.find_by_id(ProjectId(1))

    assert loaded == project
    assert loaded.model_dump() == project.model_dump()


def test_save_overwrites_existing_identity() -> None:
    repo = InMemoryProjectRepository()
    repo.save(_project(1, "Apollo"))
    repo.save(_project(1, "Artemis"))

    assert len(repo) == 1
    assert repo.find_by_id(ProjectId(1)).name == "Artemis"
    assert [p.name for p in repo.find_all()] == ["Artemis"]


def test_unknown_identity_raises_not_found() -> None:
    repo = InMemoryProjectRepository()
    with pytest.raises(NotFoundError) as info:
        repo.find_by_id(ProjectId(42))
    assert info.value.entity_id == 42
    assert info.value.entity == "Project"


def test_multi_result_queries_return_empty_lists() -> None:
    repo = InMemoryProjectRepository()
    assert repo.find_all() == []
    repo.save(_project(1, owners=(1,)))
    assert repo.list_by_owner(UserId(99)) == []
    assert [p.id for p in repo.list_by_owner(UserId(1))] == [1]


def test_stored_entities_are_isolated_from_callers() -> None:
    repo = InMemoryProjectRepository()
    project = _project(1)
    repo.save(project)

    project.rename("Changed after save")
    loaded = repo.find_by_id(ProjectId(1))
    loaded.rename("Changed after load")

    assert repo.find_by_id(ProjectId(1)).name == "Apollo"


def test_delete_is_a_noop_for_missing_identity() -> None:
    repo = InMemoryProjectRepository()
    repo.save(_project(1))
    repo.delete(ProjectId(1))
    repo.delete(ProjectId(1))
    assert len(repo) == 0


def test_user_repository() -> None:
    repo = InMemoryUserRepository()
    user = User(id=UserId(1), name="Ada", email=EmailAddress.create("ada@example.com"))
    repo.save(user)
    assert repo.find_by_id(UserId(1)).email == user.email
    with pytest.raises(NotFoundError):
        repo.find_by_id(UserId(2))


def test_concurrent_saves_keep_one_entity_per_identity() -> None:
    repo = InMemoryProjectRepository()
    barrier = threading.Barrier(8)

    def worker(offset: int) -> None:
        barrier.wait()
        for round_ in range(25):
            for project_id in range(1, 11):
                repo.save(_project(project_id, name=f"w{offset}-r{round_}"))
                repo.find_by_id(ProjectId(project_id))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(repo) == 10
    assert sorted(p.id for p in repo.find_all()) == list(range(1, 11))
