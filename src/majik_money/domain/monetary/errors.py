"""Exceptions raised by the money engine.

Every error is a caller contract violation. Each class also derives from the closest built-in
exception, so code catching `ValueError` or `ZeroDivisionError` keeps working.
"""


class MoneyError(Exception):
    """Base class for all money engine errors."""


class UnsupportedCurrencyError(MoneyError, ValueError):
    """Raised when a currency code is missing or not in the currency table."""


class CurrencyMismatchError(MoneyError, ValueError):
    """Raised when a binary operation mixes two different currencies."""


class DivisionByZeroError(MoneyError, ZeroDivisionError):
    """Raised when a divisor, ratio denominator or quoted FX rate is zero."""


class InvalidAllocationError(MoneyError, ValueError):
    """Raised for empty or non-positive allocation ratios and non-positive part counts."""


class EmptySequenceError(MoneyError, ValueError):
    """Raised when a statistical reduction gets no values."""


class LengthMismatchError(MoneyError, ValueError):
    """Raised when values and weights of a weighted average differ in length."""
