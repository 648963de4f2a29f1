"""Authentication capability composed into intents."""

from __future__ import annotations

from projectdesk.domain import Project, UserId
from projectdesk.services import Authenticator

from .exceptions import NotOwnerError


class Authentication:
    """Caller identification and ownership checks.

    Intents hold one of these as a named field and forward to it rather
    than inheriting from it.
    """

    def __init__(self, authenticator: Authenticator) -> None:
        self._authenticator = authenticator

    def authenticate(self, token: str) -> UserId:
        return self._authenticator.authenticate(token)

    def ensure_owner(self, user_id: UserId, project: Project) -> None:
        if not project.is_owned_by(user_id):
            msg = f"User {user_id} does not own project {project.id}"
            raise NotOwnerError(msg)


__all__ = ["Authentication"]
