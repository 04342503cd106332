from __future__ import annotations

import re
from decimal import localcontext
from functools import lru_cache

from babel import Locale
from babel.numbers import format_currency

from majik_money.domain.monetary.money import Money, money_context

# Locale used when none is given
DEFAULT_LOCALE = "en_PH"

# Integer digit followed by the fraction part of a CLDR number pattern (e.g. "0.00" in "¤#,##0.00")
_FRACTION_PATTERN = re.compile(r"0\.0+")


def normalize_locale(locale: str) -> str:
    """Convert a BCP 47 tag like 'en-PH' to the 'en_PH' form Babel expects."""
    return locale.strip().replace("-", "_")


@lru_cache(maxsize=256)
def currency_pattern(locale: str, minor_units: int) -> str:
    """Return the locale's standard currency pattern showing exactly $minor_units fraction digits.

    Args:
        locale (str): Locale identifier in Babel form (e.g. "en_PH").
        minor_units (int): Number of fraction digits to show.

    Returns:
        str: CLDR number pattern (e.g. "¤#,##0.000" for a 3-digit currency).

    Raises:
        babel.UnknownLocaleError: If $locale is not known to Babel.
    """
    pattern = Locale.parse(locale).currency_formats["standard"].pattern
    fraction = "0." + "0" * minor_units if minor_units > 0 else "0"
    return _FRACTION_PATTERN.sub(fraction, pattern)


def format_money(money: Money, locale: str | None = None) -> str:
    """Format $money as a localized currency string.

    The output uses the locale's symbol placement, grouping and decimal separator, and always
    shows exactly the currency's minor-unit digits (e.g. '₱1,234.56', '¥1,235', '$0.00').
    The exact Decimal amount is formatted, so no float rounding leaks into the display.

    Args:
        money (Money): Amount to format.
        locale (str | None): Locale tag like "en_PH" or "en-PH"; defaults to `DEFAULT_LOCALE`.

    Returns:
        str: Formatted amount.

    Raises:
        babel.UnknownLocaleError: If $locale is not known to Babel.
    """
    babel_locale = normalize_locale(locale or DEFAULT_LOCALE)
    pattern = currency_pattern(babel_locale, money.currency.minor_units)
    value = money.to_major_precise()

    # Babel quantizes in the active context; widen it so long amounts keep every digit
    with localcontext(money_context(value)):
        return format_currency(
            value,
            money.currency.code,
            format=pattern,
            locale=babel_locale,
            currency_digits=False,
        )
