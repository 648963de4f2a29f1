"""Authenticator providers."""

from __future__ import annotations

import hmac
from collections.abc import Mapping

from projectdesk.domain import UserId

from .exceptions import AuthenticationError
from .interfaces import Authenticator


class StaticTokenAuthenticator(Authenticator):
    """Authenticates against a fixed token table loaded from configuration."""

    def __init__(self, tokens: Mapping[str, UserId]) -> None:
        self._tokens = dict(tokens)

    def authenticate(self, token: str) -> UserId:
        if token:
            for known, user_id in self._tokens.items():
                if hmac.compare_digest(known.encode(), token.encode()):
                    return user_id
        msg = "Unknown or missing API token"
        raise AuthenticationError(msg)


__all__ = ["StaticTokenAuthenticator"]
