from __future__ import annotations

import pytest
from babel import UnknownLocaleError

from majik_money.domain.monetary.formatting import DEFAULT_LOCALE, currency_pattern, format_money, normalize_locale
from majik_money.domain.monetary.money import Money


def test_format_php_in_default_locale():
    money = Money.from_major("1234.56", "PHP")
    assert DEFAULT_LOCALE == "en_PH"
    assert money.format() == "₱1,234.56"
    assert format_money(money) == "₱1,234.56"


def test_format_usd_in_us_locale():
    assert Money.from_major("1234.56", "USD").format("en_US") == "$1,234.56"
    assert Money.zero("USD").format("en_US") == "$0.00"
    assert Money.from_major("-1234.5", "USD").format("en_US") == "-$1,234.50"


def test_format_accepts_hyphenated_locale_tag():
    assert Money.from_major("1234.56", "USD").format("en-US") == "$1,234.56"


def test_format_uses_currency_minor_units():
    assert Money.from_minor(1235, "JPY").format("en_US") == "¥1,235"
    assert "1,234.567" in Money.from_minor(1234567, "KWD").format("en_US")


def test_format_large_amount_is_exact():
    assert Money.from_minor(123456789012345678901, "USD").format("en_US") == "$1,234,567,890,123,456,789.01"
    assert Money.from_minor(10**45 + 7, "USD").format("en_US") == f"${10**43:,}.07"


def test_format_uses_locale_separators():
    formatted = Money.from_major("1234.56", "EUR").format("de_DE")
    assert "1.234,56" in formatted
    assert "€" in formatted


def test_format_rejects_unknown_locale():
    with pytest.raises(UnknownLocaleError):
        Money.from_major(1, "USD").format("zz_ZZ")


def test_normalize_locale():
    assert normalize_locale("en-PH") == "en_PH"
    assert normalize_locale(" en_US ") == "en_US"


@pytest.mark.parametrize("minor_units, expected", [(0, "¤#,##0"), (2, "¤#,##0.00"), (3, "¤#,##0.000")])
def test_currency_pattern_rewrites_fraction_digits(minor_units, expected):
    assert currency_pattern("en_US", minor_units) == expected
