from __future__ import annotations

import json

import pytest

from majik_money.domain.monetary.errors import UnsupportedCurrencyError
from majik_money.domain.monetary.money import Money
from majik_money.domain.monetary.serialization import (
    MONEY_JSON_TYPE,
    deserialize_money,
    dumps,
    is_money_json,
    loads,
    money_from_json,
    serialize_money,
)


def test_to_json_wire_shape():
    assert Money.from_minor(123456, "PHP").to_json() == {"__type": "MajikMoney", "amount": "123456", "currency": "PHP"}
    assert MONEY_JSON_TYPE == "MajikMoney"


@pytest.mark.parametrize("money", [Money.from_minor(123456, "PHP"), Money.from_minor(-5, "USD"), Money.zero("JPY"), Money.from_minor(10**30, "KWD")])
def test_json_round_trip(money):
    assert Money.parse_from_json(money.to_json()) == money
    assert Money.parse_from_json(json.loads(json.dumps(money.to_json()))) == money


@pytest.mark.parametrize("amount, expected_minor", [("123456", 123456), (123456, 123456), (12.9, 12), ("-42", -42)])
def test_parse_from_json_accepts_string_or_number_amount(amount, expected_minor):
    money = Money.parse_from_json({"amount": amount, "currency": "USD"})
    assert money == Money.from_minor(expected_minor, "USD")


@pytest.mark.parametrize(
    "data",
    [
        {"amount": "100"},
        {"amount": "100", "currency": None},
        {"amount": "100", "currency": 840},
        {"amount": "100", "currency": "usd"},
        {"amount": "100", "currency": "XYZ"},
    ],
)
def test_parse_from_json_rejects_bad_currency(data):
    with pytest.raises(UnsupportedCurrencyError):
        Money.parse_from_json(data)


@pytest.mark.parametrize("amount", [None, "abc", "", True, "NaN"])
def test_parse_from_json_rejects_bad_amount(amount):
    with pytest.raises(ValueError):
        money_from_json({"amount": amount, "currency": "USD"})


def test_parse_from_json_requires_dict():
    with pytest.raises(TypeError, match=r"\$data is not dict"):
        money_from_json('{"amount": "1", "currency": "USD"}')


def test_is_money_json():
    assert is_money_json({"__type": "MajikMoney", "amount": "1", "currency": "USD"})
    assert not is_money_json({"amount": "1", "currency": "USD"})
    assert not is_money_json({"__type": "Other"})
    assert not is_money_json(["MajikMoney"])


class TestTreeSerialization:
    TREE = {
        "invoice": "INV-1",
        "total": Money.from_minor(123456, "PHP"),
        "lines": [
            {"qty": 2, "price": Money.from_minor(50000, "PHP")},
            {"qty": 1, "price": Money.from_minor(23456, "PHP"), "tags": ("sale", None)},
        ],
        "refund": None,
    }

    def test_serialize_replaces_money_and_keeps_other_values(self):
        serialized = serialize_money(self.TREE)
        assert serialized["invoice"] == "INV-1"
        assert serialized["refund"] is None
        assert serialized["total"] == {"__type": "MajikMoney", "amount": "123456", "currency": "PHP"}
        assert serialized["lines"][0]["price"]["amount"] == "50000"
        assert serialized["lines"][1]["tags"] == ("sale", None)

    def test_deserialize_restores_tree(self):
        assert deserialize_money(serialize_money(self.TREE)) == self.TREE

    def test_container_types_are_kept(self):
        pair = (Money.from_minor(1, "USD"), [Money.from_minor(2, "USD")])
        serialized = serialize_money(pair)
        assert isinstance(serialized, tuple)
        assert isinstance(serialized[1], list)
        assert deserialize_money(serialized) == pair

    def test_untagged_dicts_pass_through(self):
        data = {"amount": "100", "currency": "USD", "__type": "Other"}
        assert deserialize_money(data) == data

    def test_scalars_pass_through(self):
        for value in (1, 1.5, "MajikMoney", None, True):
            assert serialize_money(value) == value
            assert deserialize_money(value) == value

    def test_deserialize_propagates_bad_currency(self):
        with pytest.raises(UnsupportedCurrencyError):
            deserialize_money({"items": [{"__type": "MajikMoney", "amount": "1", "currency": "XYZ"}]})

    def test_dumps_and_loads_round_trip(self):
        tree = {"balances": {"cash": Money.from_minor(-250, "USD"), "savings": [Money.from_minor(99, "JPY")]}, "count": 2}
        text = dumps(tree, sort_keys=True)
        assert '"__type": "MajikMoney"' in text
        assert loads(text) == tree
