"""SQLite persistence implementation."""

from .engine import create_engine_for, create_session_factory, is_memory_url
from .repositories import SQLProjectRepository, SQLUserRepository

__all__ = [
    "SQLProjectRepository",
    "SQLUserRepository",
    "create_engine_for",
    "create_session_factory",
    "is_memory_url",
]
