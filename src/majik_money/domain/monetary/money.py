from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_EVEN, localcontext

from majik_money.domain.monetary.currency import Currency
from majik_money.domain.monetary.currency_registry import resolve_currency
from majik_money.domain.monetary.errors import (
    CurrencyMismatchError,
    DivisionByZeroError,
    EmptySequenceError,
    InvalidAllocationError,
    LengthMismatchError,
)
from majik_money.domain.monetary.rounding import DEFAULT_ROUNDING, RoundingMode
from majik_money.utils.decimal_tools import DecimalLike, as_decimal

logger = logging.getLogger(__name__)

# Minimum precision for intermediate financial calculations; `money_context` widens it per operation
MONEY_CONTEXT = Context(prec=40, rounding=ROUND_HALF_EVEN)

_ONE = Decimal(1)


def _digit_span(value: Decimal | int) -> int:
    """Return how many decimal digits $value spans, counting digits on both sides of the point."""
    if isinstance(value, int):
        return len(str(abs(value)))

    sign, digits, exponent = value.as_tuple()
    return len(digits) + abs(exponent)


def money_context(*values: Decimal | int) -> Context:
    """Return a copy of `MONEY_CONTEXT` wide enough for exact products and quotients of $values.

    The precision is the digit span of all operands plus `MONEY_CONTEXT.prec` guard digits, so
    amounts of any size keep every digit and rounding to minor units never runs out of room.

    Example:
        >>> money_context(10**45 + 7, Decimal("1.5")).prec
        89
    """
    context = MONEY_CONTEXT.copy()
    context.prec = MONEY_CONTEXT.prec + sum(_digit_span(value) for value in values)
    return context


def _round_to_minor(value: Decimal, rounding: RoundingMode | str) -> int:
    """Round a Decimal amount of minor units to a whole number of minor units."""
    mode = RoundingMode.of(rounding)
    with localcontext(money_context(value)):
        return int(value.quantize(_ONE, rounding=mode.value))


def _is_number(value) -> bool:
    """Check if $value is a numeric operand for arithmetic operators (strings are not)."""
    return isinstance(value, (Decimal, int, float)) and not isinstance(value, bool)


def _coerce(value: DecimalLike, operation: str, arg_name: str) -> Decimal:
    """Convert $value to Decimal, reporting failures against $operation and $arg_name."""
    try:
        result = as_decimal(value)
    except (ValueError, TypeError) as e:
        raise ValueError(f"Cannot call `{operation}` because ${arg_name} ({value!r}) cannot be converted to Decimal") from e

    # Raise: NaN and infinity have no meaning as money factors
    if not result.is_finite():
        raise ValueError(f"Cannot call `{operation}` because ${arg_name} ({value!r}) is not a finite number")

    return result


class Money:
    """Represents a monetary amount as a whole number of minor units of a currency.

    The amount is stored as a Python `int` of minor units (e.g., centavos), so it has arbitrary
    precision and never carries a fractional part. Any operation whose exact result is fractional
    in minor units rounds it back with a `RoundingMode` (default `HALF_EVEN`, banker's rounding).

    Instances are immutable; every operation returns a new Money. Binary operations require both
    operands to use the same currency and raise `CurrencyMismatchError` otherwise.

    Build instances through the factories `from_minor`, `from_major`, `zero`, `from_str` or
    `parse_from_json` rather than the constructor.

    Example:
        >>> price = Money.from_major("123.45", "PHP")
        >>> total = price.add(Money.from_major(50, "PHP"))
        >>> total.to_minor()
        17345
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: int, currency: Currency):
        """Initialize Money with an integer minor-unit amount and a currency.

        Args:
            amount (int): Whole number of minor units.
            currency (Currency): Currency object.

        Raises:
            TypeError: If $amount is not an int or $currency is not a Currency instance.
        """
        # Raise: minor-unit amounts are whole numbers at rest
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise TypeError(f"$amount must be an int of minor units, but provided value is: {amount!r}. Use `Money.from_minor` or `Money.from_major` to convert")

        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency!r}")

        object.__setattr__(self, "_amount", amount)
        object.__setattr__(self, "_currency", currency)

    def __setattr__(self, key, value):
        raise AttributeError(f"Cannot set attribute '{key}' because {self.__class__.__name__} is immutable")

    # region Factories

    @classmethod
    def from_minor(cls, value: DecimalLike, currency: Currency | str) -> Money:
        """Build Money from minor units (e.g., centavos).

        Minor-unit input is assumed to be already rounded by the caller. A fractional $value is
        truncated toward zero; no rounding mode is applied.

        Args:
            value: Amount in minor units.
            currency: ISO 4217 code or Currency.

        Returns:
            Money: New instance.

        Raises:
            UnsupportedCurrencyError: If $currency is not in the currency table.
            ValueError: If $value is not a finite number.
        """
        resolved = resolve_currency(currency)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value, resolved)

        decimal_value = _coerce(value, "from_minor", "value")
        return cls(int(decimal_value), resolved)

    @classmethod
    def from_major(cls, value: DecimalLike, currency: Currency | str, rounding: RoundingMode | str = DEFAULT_ROUNDING) -> Money:
        """Build Money from major units (e.g., pesos).

        Multiplies $value by `10 ** minor_units` and rounds to whole minor units with $rounding.

        Args:
            value: Amount in major units.
            currency: ISO 4217 code or Currency.
            rounding: Rounding mode for the conversion to minor units.

        Returns:
            Money: New instance.

        Raises:
            UnsupportedCurrencyError: If $currency is not in the currency table.
            ValueError: If $value is not a finite number.
        """
        resolved = resolve_currency(currency)
        decimal_value = _coerce(value, "from_major", "value")
        with localcontext(money_context(decimal_value, resolved.scale)):
            minor = decimal_value * resolved.scale
        return cls(_round_to_minor(minor, rounding), resolved)

    @classmethod
    def zero(cls, currency: Currency | str) -> Money:
        """Return zero Money of $currency."""
        return cls(0, resolve_currency(currency))

    @classmethod
    def from_str(cls, value_str: str) -> Money:
        """Parse Money from a string like '1234.56 PHP' (major units, then code).

        Args:
            value_str (str): String representation.

        Returns:
            Money: Money object.

        Raises:
            ValueError: If string format is invalid.
            UnsupportedCurrencyError: If the currency code is not supported.
        """
        value_str = value_str.strip()
        if not value_str:
            raise ValueError("Value string with $value_str = '' cannot be empty")

        # Split by whitespace
        parts = value_str.split()
        if len(parts) != 2:
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'value currency_code'")

        value_part, currency_part = parts

        try:
            value = Decimal(value_part)
        except InvalidOperation as e:
            raise ValueError(f"Invalid value part '{value_part}' in string '{value_str}'") from e

        return cls.from_major(value, currency_part)

    # endregion

    # region Properties & conversions

    @property
    def amount(self) -> int:
        """Get the amount in minor units."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    def to_minor(self) -> int:
        """Return the amount in minor units (e.g., centavos)."""
        return self._amount

    def to_major_precise(self) -> Decimal:
        """Return the exact amount in major units as a Decimal.

        Use this value for any further computation. The result carries exactly `minor_units`
        decimal places (e.g., `Decimal("1234.56")` for 123456 PHP centavos).
        """
        return Decimal(self._amount).scaleb(-self._currency.minor_units, context=money_context(self._amount))

    def to_major(self) -> float:
        """Return an approximate amount in major units as a float, for display only."""
        return float(self.to_major_precise())

    def format(self, locale: str | None = None) -> str:
        """Format as a localized currency string (e.g., '₱1,234.56').

        See `majik_money.domain.monetary.formatting.format_money`.
        """
        from majik_money.domain.monetary.formatting import format_money

        return format_money(self, locale)

    def to_json(self) -> dict[str, str]:
        """Serialize to the JSON wire shape.

        See `majik_money.domain.monetary.serialization.money_to_json`.
        """
        from majik_money.domain.monetary.serialization import money_to_json

        return money_to_json(self)

    @classmethod
    def parse_from_json(cls, data: dict) -> Money:
        """Build Money from its JSON wire shape.

        See `majik_money.domain.monetary.serialization.money_from_json`.
        """
        from majik_money.domain.monetary.serialization import money_from_json

        return money_from_json(data)

    # endregion

    # region Arithmetic

    def _check_same_currency(self, other: Money, operation: str) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            TypeError: If $other is not Money.
            CurrencyMismatchError: If currencies don't match.
        """
        if not isinstance(other, Money):
            raise TypeError(f"Cannot call `{operation}` because $other is not Money (got type '{type(other).__name__}')")

        if self._currency.code != other._currency.code:
            raise CurrencyMismatchError(f"Cannot call `{operation}` on different currencies: {self._currency.code} and {other._currency.code}")

    def _with_amount(self, amount: int) -> Money:
        return Money(amount, self._currency)

    def add(self, other: Money) -> Money:
        """Add another Money of the same currency (exact)."""
        self._check_same_currency(other, "add")
        return self._with_amount(self._amount + other._amount)

    def subtract(self, other: Money) -> Money:
        """Subtract another Money of the same currency (exact)."""
        self._check_same_currency(other, "subtract")
        return self._with_amount(self._amount - other._amount)

    def multiply(self, factor: DecimalLike, rounding: RoundingMode | str = DEFAULT_ROUNDING) -> Money:
        """Multiply by $factor and round the product to whole minor units with $rounding."""
        return self._with_amount(_round_to_minor(self.multiply_decimal(factor), rounding))

    def multiply_decimal(self, factor: DecimalLike) -> Decimal:
        """Multiply by $factor WITHOUT rounding.

        Intended for analytical use; the result is a Decimal in minor units, not Money.
        """
        decimal_factor = _coerce(factor, "multiply", "factor")
        with localcontext(money_context(self._amount, decimal_factor)):
            return Decimal(self._amount) * decimal_factor

    def divide(self, divisor: DecimalLike, rounding: RoundingMode | str = DEFAULT_ROUNDING) -> Money:
        """Divide by $divisor and round the quotient to whole minor units with $rounding.

        `divide` then `multiply` by the same number is lossy: 100.00 USD / 3 * 3 is 99.99 USD.

        Raises:
            DivisionByZeroError: If $divisor is zero.
        """
        return self._with_amount(_round_to_minor(self.divide_decimal(divisor), rounding))

    def divide_decimal(self, divisor: DecimalLike) -> Decimal:
        """Divide by $divisor WITHOUT rounding; the result is a Decimal in minor units.

        Raises:
            DivisionByZeroError: If $divisor is zero.
        """
        decimal_divisor = _coerce(divisor, "divide", "divisor")

        # Raise: division by zero has no monetary meaning
        if decimal_divisor == 0:
            raise DivisionByZeroError(f"Cannot call `divide` because $divisor is zero for {self}")

        with localcontext(money_context(self._amount, decimal_divisor)):
            return Decimal(self._amount) / decimal_divisor

    def invert_divide(self, dividend: DecimalLike, rounding: RoundingMode | str = DEFAULT_ROUNDING) -> Money:
        """Divide $dividend by this amount in major units.

        This is an algebraic helper for rate calculations, not a unit-safe economic operation.
        The division uses major units, so 100.00 PHP `.invert_divide(2)` is 0.02 PHP.

        Raises:
            DivisionByZeroError: If this amount is zero.
        """
        decimal_dividend = _coerce(dividend, "invert_divide", "dividend")

        # Raise: cannot invert a zero amount
        if self._amount == 0:
            raise DivisionByZeroError(f"Cannot call `invert_divide` because the amount is zero ({self})")

        amount_major = self.to_major_precise()
        with localcontext(money_context(decimal_dividend, amount_major)):
            result_major = decimal_dividend / amount_major
        return Money.from_major(result_major, self._currency, rounding)

    def ratio(self, other: Money) -> float:
        """Return the unitless ratio of this amount to $other (same currency).

        Raises:
            CurrencyMismatchError: If currencies don't match.
            DivisionByZeroError: If $other is zero.
        """
        self._check_same_currency(other, "ratio")

        # Raise: ratio to a zero amount is undefined
        if other._amount == 0:
            raise DivisionByZeroError(f"Cannot call `ratio` because $other is zero ({other})")

        with localcontext(money_context(self._amount, other._amount)):
            return float(Decimal(self._amount) / Decimal(other._amount))

    def negate(self) -> Money:
        """Return Money with the opposite sign."""
        return self._with_amount(-self._amount)

    def abs(self) -> Money:
        """Return Money with the absolute amount."""
        return self._with_amount(abs(self._amount))

    def is_zero(self) -> bool:
        """Check if amount is exactly zero."""
        return self._amount == 0

    def is_positive(self) -> bool:
        """Check if amount is greater than zero."""
        return self._amount > 0

    def is_negative(self) -> bool:
        """Check if amount is less than zero."""
        return self._amount < 0

    # endregion

    # region Comparison

    def equals(self, other: Money) -> bool:
        """Check equality of amounts; raises `CurrencyMismatchError` across currencies."""
        self._check_same_currency(other, "equals")
        return self._amount == other._amount

    def greater_than(self, other: Money) -> bool:
        self._check_same_currency(other, "greater_than")
        return self._amount > other._amount

    def greater_than_or_equal(self, other: Money) -> bool:
        self._check_same_currency(other, "greater_than_or_equal")
        return self._amount >= other._amount

    def less_than(self, other: Money) -> bool:
        self._check_same_currency(other, "less_than")
        return self._amount < other._amount

    def less_than_or_equal(self, other: Money) -> bool:
        self._check_same_currency(other, "less_than_or_equal")
        return self._amount <= other._amount

    # endregion

    # region Percentage & compounding

    def apply_percentage(self, rate: DecimalLike, rounding: RoundingMode | str = DEFAULT_ROUNDING) -> Money:
        """Return $rate of this amount (e.g., 0.05 for 5%), rounded with $rounding."""
        return self.multiply(rate, rounding)

    def add_percentage(self, rate: DecimalLike, rounding: RoundingMode | str = DEFAULT_ROUNDING) -> Money:
        """Return this amount plus $rate of itself (e.g., a tax-inclusive total)."""
        return self.add(self.apply_percentage(rate, rounding))

    def subtract_percentage(self, rate: DecimalLike, rounding: RoundingMode | str = DEFAULT_ROUNDING) -> Money:
        """Return this amount minus $rate of itself (e.g., a discounted price)."""
        return self.subtract(self.apply_percentage(rate, rounding))

    def compound(self, rate: DecimalLike, periods: int, rounding: RoundingMode | str = DEFAULT_ROUNDING) -> Money:
        """Grow this amount by $rate per period over $periods periods.

        The growth factor `(1 + rate) ** periods` is computed in full precision and the result is
        rounded once.

        Args:
            rate: Growth rate per period as a decimal (e.g., 0.05 for 5%).
            periods: Number of compounding periods; a non-negative int.
            rounding: Rounding mode for the final minor-unit amount.

        Raises:
            TypeError: If $periods is not an int.
            ValueError: If $periods is negative.
        """
        # Raise: fractional periods are not supported
        if not isinstance(periods, int) or isinstance(periods, bool):
            raise TypeError(f"Cannot call `compound` because $periods ({periods!r}) is not int")

        # Raise: negative periods (discounting) are not supported
        if periods < 0:
            raise ValueError(f"Cannot call `compound` because $periods ({periods}) < 0")

        decimal_rate = _coerce(rate, "compound", "rate")
        with localcontext(money_context(self._amount, decimal_rate)):
            factor = (_ONE + decimal_rate) ** periods
        return self.multiply(factor, rounding)

    # endregion

    # region Allocation

    def allocate(self, ratios: Sequence[DecimalLike]) -> list[Money]:
        """Split the amount into parts proportional to $ratios.

        Every part except the last is `amount * ratio / sum(ratios)` truncated toward zero. The
        last part takes whatever is left, so the parts always sum exactly to this amount. Order
        of $ratios decides which part absorbs the remainder: always the last one.

        Args:
            ratios: Non-negative relative weights; their sum must be positive.

        Returns:
            list[Money]: One part per ratio, in the same order.

        Raises:
            InvalidAllocationError: If $ratios is empty, contains a negative value or sums to zero.

        Example:
            >>> [m.to_minor() for m in Money.from_minor(100, "USD").allocate([1, 1, 1])]
            [33, 33, 34]
        """
        decimal_ratios = [self._coerce_ratio(ratio) for ratio in ratios]

        # Raise: nothing to allocate into
        if not decimal_ratios:
            raise InvalidAllocationError("Cannot call `allocate` because $ratios is empty")

        # Raise: negative weights would make shares exceed the total
        negative_ratios = [ratio for ratio in decimal_ratios if ratio < 0]
        if negative_ratios:
            raise InvalidAllocationError(f"Cannot call `allocate` because $ratios contains negative values {negative_ratios}")

        with localcontext(money_context(self._amount, *decimal_ratios)):
            total_ratio = sum(decimal_ratios, Decimal(0))

            # Raise: proportions are undefined without a positive total
            if total_ratio <= 0:
                raise InvalidAllocationError(f"Cannot call `allocate` because sum of $ratios ({total_ratio}) <= 0")

            amount = Decimal(self._amount)
            shares = [_round_to_minor(amount * ratio / total_ratio, RoundingMode.DOWN) for ratio in decimal_ratios[:-1]]

        shares.append(self._amount - sum(shares))
        logger.debug(f"Allocated {self} into {len(shares)} part(s) by $ratios {[str(ratio) for ratio in decimal_ratios]}")
        return [self._with_amount(share) for share in shares]

    def even_split(self, parts: int) -> list[Money]:
        """Split the amount into $parts equal parts; the last part absorbs the remainder.

        Raises:
            InvalidAllocationError: If $parts is not a positive int.
        """
        # Raise: a split needs at least one part
        if not isinstance(parts, int) or isinstance(parts, bool) or parts <= 0:
            raise InvalidAllocationError(f"Cannot call `even_split` because $parts ({parts!r}) must be a positive int")

        return self.allocate([1] * parts)

    @staticmethod
    def _coerce_ratio(ratio: DecimalLike) -> Decimal:
        try:
            return _coerce(ratio, "allocate", "ratios")
        except ValueError as e:
            raise InvalidAllocationError(str(e)) from e

    # endregion

    # region Currency conversion

    def convert(self, rate: DecimalLike, target_currency: Currency | str, rounding: RoundingMode | str = DEFAULT_ROUNDING) -> Money:
        """Convert to $target_currency at $rate (target units per one source unit).

        The conversion runs on exact major units and rounds once, to the target's minor units.

        Raises:
            UnsupportedCurrencyError: If $target_currency is not in the currency table.
        """
        target = resolve_currency(target_currency)
        decimal_rate = _coerce(rate, "convert", "rate")
        source_major = self.to_major_precise()
        with localcontext(money_context(source_major, decimal_rate)):
            target_major = source_major * decimal_rate

        result = Money.from_major(target_major, target, rounding)
        logger.debug(f"Converted {self} to {result} at $rate {decimal_rate}")
        return result

    def convert_from_quoted(self, quoted_rate: DecimalLike, target_currency: Currency | str, rounding: RoundingMode | str = DEFAULT_ROUNDING) -> Money:
        """Convert using a quoted rate (source units per one target unit).

        Example: converting PHP to USD with USDPHP quoted at 56.00 means 1 / 56.00 USD per PHP.

        Raises:
            DivisionByZeroError: If $quoted_rate is zero.
        """
        decimal_quoted_rate = _coerce(quoted_rate, "convert_from_quoted", "quoted_rate")

        # Raise: a zero quote cannot be inverted
        if decimal_quoted_rate == 0:
            raise DivisionByZeroError("Cannot call `convert_from_quoted` because $quoted_rate is zero")

        with localcontext(money_context(self._amount, decimal_quoted_rate)):
            rate = _ONE / decimal_quoted_rate
        return self.convert(rate, target_currency, rounding)

    # endregion

    # region Statistics

    @staticmethod
    def _require_uniform(values: Iterable[Money], operation: str) -> list[Money]:
        """Return $values as a list after checking it is non-empty and single-currency.

        Raises:
            EmptySequenceError: If $values is empty.
            CurrencyMismatchError: If $values mix currencies.
        """
        items = list(values)

        # Raise: reductions need at least one value
        if not items:
            raise EmptySequenceError(f"Cannot call `{operation}` because $values is empty")

        first = items[0]
        if not isinstance(first, Money):
            raise TypeError(f"Cannot call `{operation}` because $values contains non-Money item {first!r}")

        for item in items[1:]:
            first._check_same_currency(item, operation)

        return items

    @classmethod
    def sum(cls, values: Iterable[Money]) -> Money:
        """Return the total of $values (same currency)."""
        items = cls._require_uniform(values, "sum")
        total = cls.zero(items[0].currency)
        for item in items:
            total = total.add(item)
        return total

    @classmethod
    def average(cls, values: Iterable[Money]) -> Money:
        """Return the arithmetic mean of $values, rounded half-even to minor units."""
        items = cls._require_uniform(values, "average")
        return cls.sum(items).divide(len(items))

    @classmethod
    def weighted_average(cls, values: Sequence[Money], weights: Sequence[DecimalLike]) -> Money:
        """Return `sum(value_i * weight_i) / sum(weight_i)`, rounded once, half-even.

        Raises:
            EmptySequenceError: If $values is empty.
            LengthMismatchError: If $values and $weights differ in length.
            CurrencyMismatchError: If $values mix currencies.
            DivisionByZeroError: If $weights sum to zero.
        """
        items = list(values)
        weight_list = list(weights)

        # Raise: reductions need at least one value
        if not items:
            raise EmptySequenceError("Cannot call `weighted_average` because $values is empty")

        # Raise: every value needs exactly one weight
        if len(items) != len(weight_list):
            raise LengthMismatchError(f"Cannot call `weighted_average` because len($values) ({len(items)}) != len($weights) ({len(weight_list)})")

        cls._require_uniform(items, "weighted_average")
        decimal_weights = [_coerce(weight, "weighted_average", "weights") for weight in weight_list]

        widest_amount = max((item.amount for item in items), key=_digit_span)
        with localcontext(money_context(widest_amount, len(items), *decimal_weights)):
            total_weight = sum(decimal_weights, Decimal(0))
            weighted_sum = sum((Decimal(item.amount) * weight for item, weight in zip(items, decimal_weights)), Decimal(0))

        # Raise: weights summing to zero leave the average undefined
        if total_weight == 0:
            raise DivisionByZeroError("Cannot call `weighted_average` because sum of $weights is zero")

        with localcontext(money_context(weighted_sum, total_weight)):
            average_minor = weighted_sum / total_weight
        return cls(_round_to_minor(average_minor, DEFAULT_ROUNDING), items[0].currency)

    @classmethod
    def median(cls, values: Iterable[Money]) -> Money:
        """Return the median of $values.

        An even count averages the two middle values (half-even rounding); an odd count returns
        the middle value itself.
        """
        items = sorted(cls._require_uniform(values, "median"), key=lambda m: m.amount)
        mid = len(items) // 2

        if len(items) % 2 == 0:
            return items[mid - 1].add(items[mid]).divide(2)
        return items[mid]

    @classmethod
    def min(cls, values: Iterable[Money]) -> Money:
        """Return the smallest of $values (either one when equal)."""
        items = cls._require_uniform(values, "min")
        result = items[0]
        for item in items[1:]:
            if item.less_than(result):
                result = item
        return result

    @classmethod
    def max(cls, values: Iterable[Money]) -> Money:
        """Return the largest of $values (either one when equal)."""
        items = cls._require_uniform(values, "max")
        result = items[0]
        for item in items[1:]:
            if item.greater_than(result):
                result = item
        return result

    @classmethod
    def variance(cls, values: Iterable[Money]) -> Money:
        """Return the population variance of $values (divides by n, not n - 1).

        Squared differences are computed on exact major units around `average(values)`, then the
        result is converted back with `from_major`.
        """
        items = cls._require_uniform(values, "variance")
        mean = cls.average(items).to_major_precise()

        majors = [item.to_major_precise() for item in items]
        widest = max([mean, *majors], key=_digit_span)
        with localcontext(money_context(widest, widest, len(items))):
            squared_diffs = sum(((major - mean) ** 2 for major in majors), Decimal(0))
            variance_major = squared_diffs / len(items)

        return cls.from_major(variance_major, items[0].currency)

    @classmethod
    def standard_deviation(cls, values: Iterable[Money]) -> Money:
        """Return the square root of `variance(values)` taken on major units."""
        items = cls._require_uniform(values, "standard_deviation")
        variance_major = cls.variance(items).to_major_precise()

        with localcontext(money_context(variance_major)):
            deviation_major = variance_major.sqrt()

        return cls.from_major(deviation_major, items[0].currency)

    # endregion

    # region Magic

    def __eq__(self, other) -> bool:
        """Check equality with another Money object (different currencies are never equal)."""
        if not isinstance(other, Money):
            return False
        return self._currency.code == other._currency.code and self._amount == other._amount

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than_or_equal(other)

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than_or_equal(other)

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        """Multiply Money by number (returns Money, half-even rounding)."""
        if not _is_number(other):
            return NotImplemented  # Money * Money and Money * str are not defined
        return self.multiply(other)

    def __rmul__(self, other):
        """Right multiplication: number * Money."""
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide Money by number (returns Money) or Money by Money (returns float ratio)."""
        if isinstance(other, Money):
            return self.ratio(other)
        if not _is_number(other):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> Money:
        return self.negate()

    def __pos__(self) -> Money:
        return self

    def __abs__(self) -> Money:
        return self.abs()

    def __hash__(self) -> int:
        """Hash based on minor-unit amount and currency code."""
        return hash((self._amount, self._currency.code))

    def __str__(self) -> str:
        """Return string like '1234.56 PHP'."""
        return f"{self.to_major_precise()} {self._currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(1234.56, PHP)'."""
        return f"{self.__class__.__name__}({self.to_major_precise()}, {self._currency.code})"

    # endregion
