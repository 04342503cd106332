from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TypeAlias


# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise, so `0.1` becomes
    `Decimal("0.1")` and not the binary expansion of the float.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        TypeError: If $value is a bool or not a Decimal-like scalar.
        ValueError: If $value is a string that is not a valid number.
    """
    if isinstance(value, Decimal):
        return value

    # Raise: bool is an int subclass, but True/False are never meant as amounts
    if isinstance(value, bool) or not isinstance(value, (int, str, float)):
        raise TypeError(f"$value must be Decimal, int, str or float, but provided value is: {value!r} (type '{type(value).__name__}')")

    try:
        return Decimal(str(value).strip())
    except InvalidOperation as e:
        raise ValueError(f"Cannot convert $value ('{value}') to Decimal") from e

