"""Email address value object."""

from __future__ import annotations

from pydantic import ValidationError, field_validator

from .base import DomainModel
from .exceptions import InvalidValueError


class EmailAddress(DomainModel):
    value: str

    @field_validator("value")
    @classmethod
    def validate_address(cls, value: str) -> str:
        normalized = value.strip().lower()
        local, sep, domain = normalized.partition("@")
        if not sep or not local or "@" in domain:
            msg = f"Malformed email address: {value!r}"
            raise ValueError(msg)
        labels = domain.split(".")
        if len(labels) < 2 or not all(labels):
            msg = f"Email domain must be dotted: {value!r}"
            raise ValueError(msg)
        return normalized

    @classmethod
    def create(cls, raw: str) -> EmailAddress:
        try:
            return cls(value=raw)
        except ValidationError as exc:
            raise InvalidValueError(f"Invalid email address {raw!r}") from exc

    @property
    def domain(self) -> str:
        return self.value.partition("@")[2]

    def __str__(self) -> str:
        return self.value


__all__ = ["EmailAddress"]
