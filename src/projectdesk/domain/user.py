"""User entity."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from .base import Entity
from .email import EmailAddress
from .types import UserId


class User(Entity):
    id: UserId = Field(frozen=True, ge=1)
    name: Annotated[str, Field(min_length=1)]
    email: EmailAddress

    def change_email(self, email: EmailAddress) -> None:
        self.email = email


__all__ = ["User"]
