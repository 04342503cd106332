from __future__ import annotations

from decimal import (
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
)
from enum import Enum


class RoundingMode(Enum):
    """Policy for collapsing a fractional minor-unit result to a whole number of minor units.

    Each value is the matching `decimal` module constant, so a member can be passed straight to
    `Decimal.quantize` and `RoundingMode("ROUND_HALF_UP")` resolves to `HALF_UP`.
    """

    HALF_EVEN = ROUND_HALF_EVEN  # Banker's rounding; default everywhere
    HALF_UP = ROUND_HALF_UP
    HALF_DOWN = ROUND_HALF_DOWN
    UP = ROUND_UP  # Away from zero
    DOWN = ROUND_DOWN  # Toward zero (truncation)
    CEILING = ROUND_CEILING
    FLOOR = ROUND_FLOOR
    ZERO_FIVE_UP = ROUND_05UP

    @classmethod
    def of(cls, rounding: RoundingMode | str) -> RoundingMode:
        """Resolve $rounding given as a member or as a `decimal` rounding constant.

        Raises:
            ValueError: If $rounding names no known rounding mode.
        """
        if isinstance(rounding, cls):
            return rounding

        try:
            return cls(rounding)
        except ValueError as e:
            raise ValueError(f"$rounding must be a RoundingMode or a `decimal` rounding constant, but provided value is: {rounding!r}") from e


DEFAULT_ROUNDING = RoundingMode.HALF_EVEN
