"""Money value object."""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal, Inexact, localcontext
from typing import Annotated

from pydantic import Field, ValidationError, field_validator

from .base import DomainModel
from .exceptions import CurrencyMismatchError, InvalidValueError
from .types import AmountLike

DEFAULT_CURRENCY = "USD"
# Amounts and every arithmetic result must fit this many significant digits.
MAX_DIGITS = 28


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    return str(errors[0]["msg"])


class Money(DomainModel):
    """Non-negative monetary amount in a single currency."""

    amount: Annotated[Decimal, Field(ge=0, max_digits=MAX_DIGITS)]
    currency: Annotated[str, Field(pattern=r"^[A-Z]{3}$")] = DEFAULT_CURRENCY

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, value: object) -> object:
        # Route floats through str so 0.1 stays 0.1.
        if isinstance(value, float):
            return Decimal(str(value))
        return value

    @field_validator("currency", mode="before")
    @classmethod
    def normalize_currency(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @classmethod
    def create(cls, amount: AmountLike, currency: str = DEFAULT_CURRENCY) -> Money:
        """Validating factory.

        Raises:
            InvalidValueError: if the amount is negative or not a number, or
                the currency is not a three letter code.
        """

        try:
            return cls(amount=amount, currency=currency)
        except ValidationError as exc:
            msg = f"Invalid money {amount!r} {currency!r}: {_first_error(exc)}"
            raise InvalidValueError(msg) from exc

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> Money:
        return cls.create(0, currency)

    def is_zero(self) -> bool:
        return self.amount == 0

    def add(self, other: Money) -> Money:
        """Return the sum as a new instance; both operands are left as they are."""

        self._ensure_compatible(other)
        return self._exact(lambda: self.amount + other.amount)

    def subtract(self, other: Money) -> Money:
        self._ensure_compatible(other)
        return self._exact(lambda: self.amount - other.amount)

    def multiply(self, factor: AmountLike) -> Money:
        if isinstance(factor, float):
            factor = Decimal(str(factor))
        try:
            multiplier = Decimal(factor)
        except (ArithmeticError, TypeError, ValueError) as exc:
            msg = f"Invalid money factor {factor!r}"
            raise InvalidValueError(msg) from exc
        return self._exact(lambda: self.amount * multiplier)

    def _exact(self, operation: Callable[[], Decimal]) -> Money:
        """Evaluate ``operation`` without rounding and wrap the result."""

        try:
            with localcontext() as ctx:
                ctx.prec = MAX_DIGITS
                ctx.traps[Inexact] = True
                result = operation()
        except ArithmeticError as exc:
            msg = f"Money arithmetic exceeds {MAX_DIGITS} significant digits"
            raise InvalidValueError(msg) from exc
        return type(self).create(result, self.currency)

    def _ensure_compatible(self, other: object) -> None:
        if not isinstance(other, Money):
            msg = f"Cannot combine Money and {type(other).__name__}"
            raise TypeError(msg)
        if other.currency != self.currency:
            msg = f"Cannot combine {self.currency} and {other.currency}"
            raise CurrencyMismatchError(msg)

    def __add__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> Money:
        # sum() starts from the integer 0.
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"


__all__ = ["DEFAULT_CURRENCY", "MAX_DIGITS", "Money"]
