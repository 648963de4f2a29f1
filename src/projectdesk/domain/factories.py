"""Value factory capability and its concrete providers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeVar

from .email import EmailAddress
from .money import DEFAULT_CURRENCY, Money
from .types import AmountLike

ValueT_co = TypeVar("ValueT_co", covariant=True)


class ValueFactory(Protocol[ValueT_co]):
    """Produces a validated value from raw input or raises ``InvalidValueError``."""

    def make(self, raw: object) -> ValueT_co: ...


@dataclass(frozen=True)
class MoneyFactory(ValueFactory[Money]):
    """Builds ``Money`` in a fixed currency."""

    currency: str = DEFAULT_CURRENCY

    def make(self, raw: AmountLike) -> Money:  # type: ignore[override]
        return Money.create(raw, self.currency)


@dataclass(frozen=True)
class EmailAddressFactory(ValueFactory[EmailAddress]):
    def make(self, raw: str) -> EmailAddress:  # type: ignore[override]
        return EmailAddress.create(raw)


__all__ = ["EmailAddressFactory", "MoneyFactory", "ValueFactory"]
