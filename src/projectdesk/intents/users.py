"""User use cases."""

from __future__ import annotations

import logging

from projectdesk.domain import EmailAddress, User, UserId, ValueFactory
from projectdesk.persistence import NotFoundError, UserRepository

from .exceptions import DuplicateIdentityError
from .results import HANDLED_ERRORS, IntentResult, failure_from


class RegisterUser:
    """Create a user record from raw input."""

    def __init__(
        self,
        users: UserRepository,
        email_factory: ValueFactory[EmailAddress],
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._users = users
        self._email_factory = email_factory
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, user_id: UserId, name: str, email: str) -> IntentResult[User]:
        try:
            address = self._email_factory.make(email)
            try:
                self._users.find_by_id(user_id)
            except NotFoundError:
                pass
            else:
                msg = f"User {user_id} already exists"
                raise DuplicateIdentityError(msg)
            user = User(id=user_id, name=name, email=address)
            self._users.save(user)
        except HANDLED_ERRORS as exc:
            return failure_from(exc, self._logger)
        return IntentResult.success(user)


__all__ = ["RegisterUser"]
