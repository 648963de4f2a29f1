"""Container lookup for CLI commands."""

from __future__ import annotations

import logging
from functools import lru_cache

from projectdesk.config import AppSettings
from projectdesk.container import ServiceContainer, build_container

logger = logging.getLogger(__name__)

_settings_override: AppSettings | None = None


def use_settings(settings: AppSettings | None) -> None:
    """Build the next container from ``settings`` instead of the environment."""

    global _settings_override
    _settings_override = settings
    get_container.cache_clear()


def current_settings() -> AppSettings:
    return _settings_override or AppSettings.from_env()


@lru_cache(maxsize=1)
def get_container() -> ServiceContainer:
    """Return the process-wide container, building it on first use."""

    settings = current_settings()
    logger.debug("Building CLI container for %s", settings.environment)
    return build_container(settings)


def reset_container() -> None:
    """Drop the cached container and any settings override."""

    use_settings(None)


__all__ = ["current_settings", "get_container", "reset_container", "use_settings"]
