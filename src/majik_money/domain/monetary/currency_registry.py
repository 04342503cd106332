from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from majik_money.domain.monetary.currency import Currency
from majik_money.domain.monetary.errors import UnsupportedCurrencyError


# Major currencies
USD = Currency("USD", "$", 2, "US Dollar")
EUR = Currency("EUR", "€", 2, "Euro")
JPY = Currency("JPY", "¥", 0, "Yen")
GBP = Currency("GBP", "£", 2, "Pound Sterling")
CHF = Currency("CHF", "CHF", 2, "Swiss Franc")
AUD = Currency("AUD", "$", 2, "Australian Dollar")
CAD = Currency("CAD", "$", 2, "Canadian Dollar")
CNY = Currency("CNY", "¥", 2, "Yuan Renminbi")
HKD = Currency("HKD", "$", 2, "Hong Kong Dollar")
SGD = Currency("SGD", "$", 2, "Singapore Dollar")

# Asia
PHP = Currency("PHP", "₱", 2, "Philippine Peso")
KRW = Currency("KRW", "₩", 0, "Won")
INR = Currency("INR", "₹", 2, "Indian Rupee")
IDR = Currency("IDR", "Rp", 2, "Rupiah")
THB = Currency("THB", "฿", 2, "Baht")
MYR = Currency("MYR", "RM", 2, "Ringgit")
VND = Currency("VND", "₫", 0, "Dong")

# Middle East (3 decimal places)
KWD = Currency("KWD", "د.ك", 3, "Kuwaiti Dinar")
BHD = Currency("BHD", ".د.ب", 3, "Bahraini Dinar")
JOD = Currency("JOD", "د.ا", 3, "Jordanian Dinar")

# Americas
CLP = Currency("CLP", "$", 0, "Chilean Peso")
COP = Currency("COP", "$", 2, "Colombian Peso")
MXN = Currency("MXN", "$", 2, "Mexican Peso")
BRL = Currency("BRL", "R$", 2, "Brazilian Real")
ARS = Currency("ARS", "$", 2, "Argentine Peso")

# Africa
ZAR = Currency("ZAR", "R", 2, "Rand")
NGN = Currency("NGN", "₦", 2, "Naira")
KES = Currency("KES", "KSh", 2, "Kenyan Shilling")
EGP = Currency("EGP", "£", 2, "Egyptian Pound")

# Europe (non-euro)
RUB = Currency("RUB", "₽", 2, "Russian Ruble")
TRY = Currency("TRY", "₺", 2, "Turkish Lira")
PLN = Currency("PLN", "zł", 2, "Zloty")
CZK = Currency("CZK", "Kč", 2, "Czech Koruna")
HUF = Currency("HUF", "Ft", 2, "Forint")

# Read-only table, built once at import time
CURRENCIES: Mapping[str, Currency] = MappingProxyType(
    {
        currency.code: currency
        for currency in (
            USD, EUR, JPY, GBP, CHF, AUD, CAD, CNY, HKD, SGD,
            PHP, KRW, INR, IDR, THB, MYR, VND,
            KWD, BHD, JOD,
            CLP, COP, MXN, BRL, ARS,
            ZAR, NGN, KES, EGP,
            RUB, TRY, PLN, CZK, HUF,
        )
    }
)


def get_currency(code: str) -> Currency:
    """Get currency from the table by its exact ISO 4217 code.

    The lookup is exact and case-sensitive: "php" is not "PHP".

    Args:
        code (str): Currency code to look up.

    Returns:
        Currency: The currency instance.

    Raises:
        UnsupportedCurrencyError: If $code is not a string or is not found in the table.
    """
    if not isinstance(code, str):
        raise UnsupportedCurrencyError(f"$code must be a string, but provided value is: {code!r}")

    currency = CURRENCIES.get(code)
    if currency is None:
        raise UnsupportedCurrencyError(f"Currency with code '{code}' is not supported. Available currencies: {sorted(CURRENCIES)}")

    return currency


def resolve_currency(currency: Currency | str) -> Currency:
    """Return $currency itself when it is a Currency, else look it up by code."""
    if isinstance(currency, Currency):
        return currency
    return get_currency(currency)
