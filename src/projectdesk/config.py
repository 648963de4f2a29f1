"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

STORAGE_BACKENDS = frozenset({"memory", "sqlite"})
NOTIFIERS = frozenset({"log", "outbox", "webhook"})


class ConfigurationError(ValueError):
    """Raised when an environment variable holds an unusable value."""


def _env_choice(name: str, default: str, choices: frozenset[str]) -> str:
    value = os.getenv(name, default).strip().lower()
    if value not in choices:
        msg = f"{name} must be one of {sorted(choices)}, got {value!r}"
        raise ConfigurationError(msg)
    return value


def _env_decimal(name: str, default: Decimal) -> Decimal:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return Decimal(raw.strip())
    except InvalidOperation as exc:
        msg = f"{name} must be a decimal number, got {raw!r}"
        raise ConfigurationError(msg) from exc


def parse_api_tokens(raw: str | None) -> tuple[tuple[str, int], ...]:
    """Parse ``token:user_id`` pairs separated by commas."""

    if not raw:
        return ()
    pairs: list[tuple[str, int]] = []
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        token, sep, user_id = item.rpartition(":")
        if not sep or not token or not user_id.strip().isdigit():
            msg = f"Malformed API token entry {item!r}; expected token:user_id"
            raise ConfigurationError(msg)
        pairs.append((token, int(user_id)))
    return tuple(pairs)


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    storage: str = "sqlite"
    database_url: str = "sqlite:///projectdesk.db"
    currency: str = "USD"
    budget_limit: Decimal = Decimal("1000000")
    notifier: str = "log"
    webhook_url: str | None = None
    api_tokens: tuple[tuple[str, int], ...] = ()
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("PROJECTDESK_ENV", cls.environment),
            storage=_env_choice("PROJECTDESK_STORAGE", cls.storage, STORAGE_BACKENDS),
            database_url=os.getenv("PROJECTDESK_DATABASE_URL", cls.database_url),
            currency=os.getenv("PROJECTDESK_CURRENCY", cls.currency).strip().upper(),
            budget_limit=_env_decimal("PROJECTDESK_BUDGET_LIMIT", cls.budget_limit),
            notifier=_env_choice("PROJECTDESK_NOTIFIER", cls.notifier, NOTIFIERS),
            webhook_url=os.getenv("PROJECTDESK_WEBHOOK_URL") or None,
            api_tokens=parse_api_tokens(os.getenv("PROJECTDESK_API_TOKENS")),
            log_level=os.getenv("PROJECTDESK_LOG_LEVEL", cls.log_level).upper(),
        )


__all__ = ["AppSettings", "ConfigurationError", "parse_api_tokens"]
