"""JSON wire shape for Money and recursive conversion of nested structures.

A Money value travels as a tagged dict holding its integer minor units as a string, so no
precision is lost to JSON numbers:

    {"__type": "MajikMoney", "amount": "123456", "currency": "PHP"}
"""

from __future__ import annotations

import json
import logging
from typing import Any

from majik_money.domain.monetary.currency_registry import get_currency
from majik_money.domain.monetary.money import Money

logger = logging.getLogger(__name__)

# Tag identifying a serialized Money inside arbitrary JSON
MONEY_JSON_TYPE = "MajikMoney"


def money_to_json(money: Money) -> dict[str, str]:
    """Return the wire shape of $money."""
    return {
        "__type": MONEY_JSON_TYPE,
        "amount": str(money.to_minor()),
        "currency": money.currency.code,
    }


def money_from_json(data: dict) -> Money:
    """Build Money from its wire shape.

    The `amount` field may be a string or a native number; a fractional amount is truncated
    toward zero like `Money.from_minor`. The `__type` tag is not required here.

    Args:
        data (dict): Mapping with `amount` and `currency` keys.

    Returns:
        Money: Decoded instance.

    Raises:
        TypeError: If $data is not a dict.
        UnsupportedCurrencyError: If `currency` is absent, not a string or not in the table.
        ValueError: If `amount` is absent or cannot be parsed as a number.
    """
    # Raise: only mappings carry the wire shape
    if not isinstance(data, dict):
        raise TypeError(f"Cannot call `money_from_json` because $data is not dict (got type '{type(data).__name__}')")

    currency = get_currency(data.get("currency"))

    amount = data.get("amount")
    # Raise: bool is a JSON literal, not an amount
    if amount is None or isinstance(amount, bool):
        raise ValueError(f"Cannot call `money_from_json` because $data has no valid 'amount' (got {amount!r})")

    return Money.from_minor(amount, currency)


def is_money_json(value: Any) -> bool:
    """Check if $value is a dict tagged as serialized Money."""
    return isinstance(value, dict) and value.get("__type") == MONEY_JSON_TYPE


def serialize_money(obj: Any) -> Any:
    """Replace every Money in $obj with its wire shape.

    Walks dicts, lists and tuples recursively and keeps the container types. Other values are
    returned unchanged.
    """
    if isinstance(obj, Money):
        return money_to_json(obj)
    if isinstance(obj, dict):
        return {key: serialize_money(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [serialize_money(item) for item in obj]
    if isinstance(obj, tuple):
        return tuple(serialize_money(item) for item in obj)
    return obj


def deserialize_money(obj: Any) -> Any:
    """Replace every tagged Money dict in $obj with a Money instance.

    Inverse of `serialize_money`: walks dicts, lists and tuples recursively and keeps the
    container types. Other values are returned unchanged.

    Raises:
        UnsupportedCurrencyError: If a tagged dict names an unsupported currency.
        ValueError: If a tagged dict has an unparseable amount.
    """
    if is_money_json(obj):
        money = money_from_json(obj)
        logger.debug(f"Deserialized {money} from tagged dict")
        return money
    if isinstance(obj, dict):
        return {key: deserialize_money(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [deserialize_money(item) for item in obj]
    if isinstance(obj, tuple):
        return tuple(deserialize_money(item) for item in obj)
    return obj


def dumps(obj: Any, **kwargs) -> str:
    """Serialize $obj to a JSON string, encoding any nested Money. $kwargs go to `json.dumps`."""
    return json.dumps(serialize_money(obj), **kwargs)


def loads(text: str | bytes, **kwargs) -> Any:
    """Parse a JSON string and decode any nested Money. $kwargs go to `json.loads`."""
    return deserialize_money(json.loads(text, **kwargs))
