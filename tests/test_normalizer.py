"""Tests for json_to_scss.normalizer."""

from collections import OrderedDict
from types import MappingProxyType

import pytest

from json_to_scss.errors import ContractViolation
from json_to_scss.model import VBool, VEmptyString, VList, VMap, VNull, VNumber, VString
from json_to_scss.normalizer import classify


class TestScalars:
    def test_null(self):
        assert classify(None) is VNull

    def test_bool(self):
        assert classify(True) == VBool(True)
        assert classify(False) == VBool(False)

    def test_bool_is_not_a_number(self):
        assert not isinstance(classify(True), VNumber)

    def test_int(self):
        assert classify(0) == VNumber(0)
        assert classify(-12) == VNumber(-12)

    def test_float(self):
        assert classify(1.5) == VNumber(1.5)

    def test_empty_string(self):
        assert classify("") is VEmptyString

    def test_string(self):
        assert classify("red") == VString("red")

    def test_whitespace_string_is_not_empty(self):
        assert classify(" ") == VString(" ")


class TestContainers:
    def test_list(self):
        assert classify([1, "a"]) == VList([1, "a"])

    def test_tuple(self):
        assert classify((1, 2)) == VList([1, 2])

    def test_empty_list(self):
        assert classify([]) == VList([])

    def test_dict(self):
        assert classify({"a": 1}) == VMap({"a": 1})

    def test_items_left_raw(self):
        node = classify({"a": {"b": None}})
        assert node.entries["a"] == {"b": None}

    def test_order_kept(self):
        node = classify({"z": 1, "a": 2, "m": 3})
        assert list(node.entries) == ["z", "a", "m"]

    def test_other_mappings(self):
        assert classify(OrderedDict([("a", 1)])) == VMap({"a": 1})
        assert classify(MappingProxyType({"a": 1})) == VMap({"a": 1})


# ---------------------------------------------------------------------------
# Values outside the JSON grammar
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "value",
    [object(), {1, 2}, b"bytes", lambda: None, float("nan"), float("inf"), float("-inf")],
)
def test_rejects_non_json_values(value):
    with pytest.raises(ContractViolation):
        classify(value)


def test_rejects_non_string_keys():
    with pytest.raises(ContractViolation, match="key"):
        classify({1: "a"})


def test_contract_violation_is_a_type_error():
    with pytest.raises(TypeError):
        classify(object())
