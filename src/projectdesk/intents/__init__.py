"""Application intents (use cases)."""

from .authentication import Authentication
from .exceptions import DuplicateIdentityError, IntentError, NotOwnerError
from .projects import (
    AllocateBudget,
    CreateProject,
    GetProject,
    ListOwnerProjects,
    NotifyProjectOwners,
)
from .results import IntentResult, IntentStatus
from .users import RegisterUser

__all__ = [
    "AllocateBudget",
    "Authentication",
    "CreateProject",
    "DuplicateIdentityError",
    "GetProject",
    "IntentError",
    "IntentResult",
    "IntentStatus",
    "ListOwnerProjects",
    "NotOwnerError",
    "NotifyProjectOwners",
    "RegisterUser",
]
