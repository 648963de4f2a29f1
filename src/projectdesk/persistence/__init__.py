"""Persistence layer exports."""

from .errors import NotFoundError, RepositoryError, StorageError
from .interfaces import ProjectRepository, Repository, UserRepository
from .memory import InMemoryProjectRepository, InMemoryRepository, InMemoryUserRepository
from .specified import SpecifiedProjectRepository, SpecifiedRepository

__all__ = [
    "InMemoryProjectRepository",
    "InMemoryRepository",
    "InMemoryUserRepository",
    "NotFoundError",
    "ProjectRepository",
    "Repository",
    "RepositoryError",
    "SpecifiedProjectRepository",
    "SpecifiedRepository",
    "StorageError",
    "UserRepository",
]
