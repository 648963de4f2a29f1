from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from projectdesk.domain import CurrencyMismatchError, InvalidValueError, Money


def test_equal_inputs_give_equal_values() -> None:
    assert Money.create(100) == Money.create(100)
    assert Money.create("100.00") == Money.create(100)
    assert hash(Money.create(100)) == hash(Money.create(100))
    assert Money.create(100) != Money.create(100, "EUR")


def test_negative_amount_is_rejected() -> None:
    with pytest.raises(InvalidValueError):
        Money.create(-1)


def test_constructor_runs_the_same_validation() -> None:
    with pytest.raises(ValidationError):
        Money(amount=Decimal("-0.01"))


@pytest.mark.parametrize("amount", ["abc", "", None])
def test_non_numeric_amount_is_rejected(amount: object) -> None:
    with pytest.raises(InvalidValueError):
        Money.create(amount)  # type: ignore[arg-type]


@pytest.mark.parametrize("currency", ["US", "DOLLARS", "12$"])
def test_currency_must_be_three_letters(currency: str) -> None:
    with pytest.raises(InvalidValueError):
        Money.create(10, currency)


def test_currency_is_normalized() -> None:
    assert Money.create(5, " eur ").currency == "EUR"


def test_float_amount_keeps_its_decimal_text() -> None:
    assert Money.create(0.1).amount == Decimal("0.1")


def test_add_leaves_both_operands_unchanged() -> None:
    v1 = Money.create(100)
    fifty = Money.create(50)
    v2 = v1.add(fifty)

    assert v1 == Money.create(100)
    assert fifty == Money.create(50)
    assert v2 == Money.create(150)
    assert v2 is not v1


def test_operators_delegate_to_arithmetic() -> None:
    assert Money.create(10) + Money.create(5) == Money.create(15)
    assert Money.create(10) - Money.create(5) == Money.create(5)


def test_values_cannot_be_mutated() -> None:
    money = Money.create(100)
    with pytest.raises(ValidationError):
        money.amount = Decimal("1")  # type: ignore[misc]
    assert money == Money.create(100)


def test_subtract_below_zero_fails() -> None:
    with pytest.raises(InvalidValueError):
        Money.create(10).subtract(Money.create(11))


def test_currency_mismatch() -> None:
    with pytest.raises(CurrencyMismatchError):
        Money.create(10).add(Money.create(10, "EUR"))


def test_multiply() -> None:
    assert Money.create("12.50").multiply(2) == Money.create(25)
    with pytest.raises(InvalidValueError):
        Money.create(1).multiply(-1)
    with pytest.raises(InvalidValueError):
        Money.create(1).multiply("x")


def test_zero_and_formatting() -> None:
    assert Money.zero().is_zero()
    assert str(Money.create(150)) == "150.00 USD"


def test_large_amounts_stay_exact() -> None:
    big = Money.create("1234567890123456789012345.67")
    cent = Money.create("0.01")

    assert big.add(cent).subtract(big) == cent
    assert big.multiply(2) == Money.create("2469135780246913578024691.34")


def test_amount_beyond_precision_is_rejected() -> None:
    with pytest.raises(InvalidValueError):
        Money.create("12345678901234567890123456789")


def test_arithmetic_that_would_round_is_rejected() -> None:
    near_limit = Money.create("9" * 28)

    with pytest.raises(InvalidValueError):
        near_limit.add(Money.create("0.01"))
    with pytest.raises(InvalidValueError):
        Money.create("1234567890123456789012345.67").multiply("1.001")


def test_operators_reject_foreign_operands() -> None:
    money = Money.create(10)

    with pytest.raises(TypeError):
        money + 5  # type: ignore[operator]
    with pytest.raises(TypeError):
        5 - money  # type: ignore[operator]
    with pytest.raises(TypeError):
        money.add(Decimal("5"))  # type: ignore[arg-type]


def test_sum_of_money_values() -> None:
    amounts = [Money.create("1.25"), Money.create("2.50"), Money.create("0.25")]

    assert sum(amounts) == Money.create(4)
    assert sum(amounts, Money.zero()) == Money.create(4)
