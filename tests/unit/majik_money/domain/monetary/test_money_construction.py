from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

import pytest

from majik_money.domain.monetary.currency_registry import PHP, USD
from majik_money.domain.monetary.errors import UnsupportedCurrencyError
from majik_money.domain.monetary.money import Money
from majik_money.domain.monetary.rounding import RoundingMode


# region Factories


def test_from_major_php():
    money = Money.from_major(1234.56, "PHP")
    assert money.to_minor() == 123456
    assert money.currency is PHP


def test_from_major_accepts_currency_instance():
    assert Money.from_major("19.99", USD) == Money.from_minor(1999, "USD")


@pytest.mark.parametrize(
    "value, code, expected_minor",
    [
        ("0.005", "USD", 0),  # 0.5 minor -> nearest even
        ("0.015", "USD", 2),  # 1.5 minor -> nearest even
        ("1234.5", "JPY", 1234),
        ("1235.5", "JPY", 1236),
        ("1.2345", "KWD", 1234),
        ("-0.025", "USD", -2),
    ],
)
def test_from_major_rounds_half_even_by_default(value, code, expected_minor):
    assert Money.from_major(value, code).to_minor() == expected_minor


def test_from_major_with_explicit_rounding():
    assert Money.from_major("0.005", "USD", RoundingMode.HALF_UP).to_minor() == 1
    assert Money.from_major("0.009", "USD", RoundingMode.DOWN).to_minor() == 0
    assert Money.from_major("-0.001", "USD", RoundingMode.FLOOR).to_minor() == -1
    # `decimal` constants resolve to the matching mode
    assert Money.from_major("0.005", "USD", ROUND_HALF_UP).to_minor() == 1


def test_from_major_rejects_unknown_rounding():
    with pytest.raises(ValueError, match=r"\$rounding must be"):
        Money.from_major("1", "USD", "ROUND_SOMETIMES")


@pytest.mark.parametrize(
    "value, expected_minor",
    [(1999, 1999), (12.9, 12), (-12.9, -12), ("250", 250), (Decimal("99.99"), 99)],
)
def test_from_minor_truncates_fractions(value, expected_minor):
    assert Money.from_minor(value, "USD").to_minor() == expected_minor


@pytest.mark.parametrize("value", [float("nan"), float("inf"), "-Infinity", "abc"])
def test_from_minor_rejects_non_finite(value):
    with pytest.raises(ValueError, match="Cannot call `from_minor`"):
        Money.from_minor(value, "USD")


def test_from_major_rejects_non_finite():
    with pytest.raises(ValueError, match="Cannot call `from_major`"):
        Money.from_major(float("nan"), "USD")


@pytest.mark.parametrize("code", ["usd", "XXX", None])
def test_factories_reject_unsupported_currency(code):
    with pytest.raises(UnsupportedCurrencyError):
        Money.from_minor(100, code)
    with pytest.raises(UnsupportedCurrencyError):
        Money.from_major(1, code)
    with pytest.raises(UnsupportedCurrencyError):
        Money.zero(code)


def test_zero():
    zero = Money.zero("JPY")
    assert zero.to_minor() == 0
    assert zero.is_zero()
    assert zero.currency.code == "JPY"


def test_from_str():
    assert Money.from_str("1234.56 PHP") == Money.from_minor(123456, "PHP")
    assert Money.from_str("  -5 USD ") == Money.from_minor(-500, "USD")


@pytest.mark.parametrize("value_str", ["", "   ", "1234.56", "1234.56 PHP extra", "abc PHP"])
def test_from_str_rejects_malformed_input(value_str):
    with pytest.raises(ValueError):
        Money.from_str(value_str)


def test_from_str_rejects_unknown_currency():
    with pytest.raises(UnsupportedCurrencyError):
        Money.from_str("10 XYZ")


# endregion

# region Constructor & immutability


@pytest.mark.parametrize("amount", [1.5, Decimal("1"), "100", True])
def test_constructor_requires_int_minor_units(amount):
    with pytest.raises(TypeError, match=r"\$amount must be an int"):
        Money(amount, USD)


def test_constructor_requires_currency_instance():
    with pytest.raises(TypeError, match=r"\$currency must be a Currency"):
        Money(100, "USD")


def test_money_is_immutable():
    money = Money.from_minor(100, "USD")
    with pytest.raises(AttributeError, match="immutable"):
        money._amount = 200


# endregion

# region Conversions & representation


def test_major_and_minor_views():
    money = Money.from_minor(123456, "PHP")
    assert money.to_minor() == 123456
    assert money.amount == 123456
    assert money.to_major_precise() == Decimal("1234.56")
    assert money.to_major() == pytest.approx(1234.56)


@pytest.mark.parametrize("value", [0.01, 1234.56, 99999.99, -42.1])
def test_from_major_then_to_major_is_inverse(value):
    assert Money.from_major(value, "USD").to_major() == pytest.approx(value, abs=0.005)


def test_to_major_precise_keeps_minor_unit_digits():
    assert str(Money.from_minor(1234567, "KWD").to_major_precise()) == "1234.567"
    assert str(Money.from_minor(1235, "JPY").to_major_precise()) == "1235"


def test_str_and_repr():
    money = Money.from_minor(123456, "PHP")
    assert str(money) == "1234.56 PHP"
    assert repr(money) == "Money(1234.56, PHP)"


@pytest.mark.parametrize("huge", [10**30 + 1, 10**45 + 7, -(10**60) - 3])
def test_large_amounts_stay_exact(huge):
    money = Money.from_minor(huge, "USD")
    assert money.add(Money.from_minor(1, "USD")).to_minor() == huge + 1
    # Every minor-unit digit survives the major-unit view
    assert str(money.to_major_precise()).replace(".", "") == str(huge)
    assert str(money) == f"{money.to_major_precise()} USD"
    assert Money.from_major(money.to_major_precise(), "USD") == money
    assert money.multiply(1) == money
    assert money.divide(1) == money


# endregion

# region Equality & hashing


def test_equality():
    assert Money.from_minor(100, "USD") == Money.from_major(1, "USD")
    assert Money.from_minor(100, "USD") != Money.from_minor(101, "USD")
    # Same minor amount, different currency
    assert Money.from_minor(100, "USD") != Money.from_minor(100, "EUR")
    assert Money.from_minor(100, "USD") != 100


def test_hash_is_consistent_with_equality():
    values = {Money.from_minor(100, "USD"), Money.from_major(1, "USD"), Money.from_minor(100, "EUR")}
    assert len(values) == 2


# endregion
