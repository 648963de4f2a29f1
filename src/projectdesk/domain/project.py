"""Project entity."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, field_validator

from .base import Entity
from .enums import ProjectStatus
from .money import Money
from .types import ProjectId, UserId


class Project(Entity):
    """A budgeted project owned by one or more users.

    Owners and budget change over time; the ``id`` never does. Whether a
    project must have owners is a persistence rule enforced by
    specifications, so an owner-less project can still be built in memory.
    """

    id: ProjectId = Field(frozen=True, ge=1)
    name: Annotated[str, Field(min_length=1)]
    owners: list[UserId] = Field(default_factory=list)
    budget: Money = Field(default_factory=Money.zero)
    status: ProjectStatus = ProjectStatus.ACTIVE

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            msg = "Project name must not be blank"
            raise ValueError(msg)
        return stripped

    @field_validator("owners")
    @classmethod
    def dedupe_owners(cls, value: list[UserId]) -> list[UserId]:
        return list(dict.fromkeys(value))

    def rename(self, name: str) -> None:
        self.name = name

    def add_owner(self, user_id: UserId) -> None:
        if user_id not in self.owners:
            self.owners = [*self.owners, user_id]

    def remove_owner(self, user_id: UserId) -> None:
        self.owners = [owner for owner in self.owners if owner != user_id]

    def is_owned_by(self, user_id: UserId) -> bool:
        return user_id in self.owners

    def allocate(self, amount: Money) -> None:
        """Grow the budget by ``amount``; raises on currency mismatch."""

        self.budget = self.budget.add(amount)

    def archive(self) -> None:
        self.status = ProjectStatus.ARCHIVED


__all__ = ["Project"]
