"""Enumerations used across the projectdesk domain layer."""

from __future__ import annotations

from enum import StrEnum


class ProjectStatus(StrEnum):
    """Lifecycle status for projects."""

    ACTIVE = "active"
    ARCHIVED = "archived"
