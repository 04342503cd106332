__version__ = "0.1.0"

from majik_money.domain.monetary.currency import Currency
from majik_money.domain.monetary.currency_registry import CURRENCIES, get_currency
from majik_money.domain.monetary.errors import (
    CurrencyMismatchError,
    DivisionByZeroError,
    EmptySequenceError,
    InvalidAllocationError,
    LengthMismatchError,
    MoneyError,
    UnsupportedCurrencyError,
)
from majik_money.domain.monetary.formatting import format_money
from majik_money.domain.monetary.money import Money
from majik_money.domain.monetary.rounding import RoundingMode
from majik_money.domain.monetary.serialization import deserialize_money, dumps, loads, serialize_money

__all__ = [
    "CURRENCIES",
    "Currency",
    "CurrencyMismatchError",
    "DivisionByZeroError",
    "EmptySequenceError",
    "InvalidAllocationError",
    "LengthMismatchError",
    "Money",
    "MoneyError",
    "RoundingMode",
    "UnsupportedCurrencyError",
    "deserialize_money",
    "dumps",
    "format_money",
    "get_currency",
    "loads",
    "serialize_money",
]
