"""Unit tests for JSON path evaluation."""

import pytest

from docviewer.core.errors import BadRequestError
from docviewer.core.jsonpath import JsonKind, Segment, evaluate, json_kind, parse_segment

DOCUMENT = {
    "a": {"b": [1, 2, 3]},
    "servers": [{"name": "alpha", "ports": [80, 443]}],
    "empty": None,
    "": "blank key",
}


class TestParseSegment:
    @pytest.mark.parametrize(
        "segment, expected",
        [
            ("name", Segment("name")),
            ("b[1]", Segment("b", 1)),
            ("[0]", Segment("", 0)),
            ("b[12]", Segment("b", 12)),
            ("b[1][2]", Segment("b", 1, "[2]")),
            ("b[1]x", Segment("b", 1, "x")),
            ("b[x]", Segment("b[x]")),
            ("b[-1]", Segment("b[-1]")),
            ("b[]", Segment("b[]")),
            ("b[x][3]", Segment("b[x]", 3)),
            ("", Segment("")),
        ],
    )
    def test_scanner(self, segment, expected):
        assert parse_segment(segment) == expected

    def test_is_indexed(self):
        assert parse_segment("a[0]").is_indexed
        assert not parse_segment("a").is_indexed


class TestJsonKind:
    @pytest.mark.parametrize(
        "value, kind",
        [
            ({}, JsonKind.OBJECT),
            ([], JsonKind.ARRAY),
            ("s", JsonKind.STRING),
            (1, JsonKind.NUMBER),
            (1.5, JsonKind.NUMBER),
            (True, JsonKind.BOOLEAN),
            (None, JsonKind.NULL),
        ],
    )
    def test_kinds(self, value, kind):
        assert json_kind(value) is kind

    def test_non_json_value(self):
        with pytest.raises(TypeError):
            json_kind(object())


class TestEvaluate:
    def test_nested_index(self):
        assert evaluate({"a": {"b": [1, 2, 3]}}, "a.b[1]") == 2

    def test_index_out_of_bounds(self):
        with pytest.raises(BadRequestError) as exc_info:
            evaluate({"a": {"b": [1, 2, 3]}}, "a.b[5]")
        assert exc_info.value.message == "Array index out of bounds: 5"

    @pytest.mark.parametrize("digits", ["9" * 20, "9" * 5000])
    def test_huge_index_out_of_bounds(self, digits):
        with pytest.raises(BadRequestError) as exc_info:
            evaluate({"a": [1]}, f"a[{digits}]")
        assert exc_info.value.message.startswith("Array index out of bounds")

    def test_huge_index_on_non_array(self):
        with pytest.raises(BadRequestError) as exc_info:
            evaluate({"a": 1}, "a[" + "9" * 5000 + "]")
        assert exc_info.value.message == "Cannot index - not an array"

    def test_stored_null_is_not_an_object(self):
        with pytest.raises(BadRequestError) as exc_info:
            evaluate(DOCUMENT, "empty.b")
        assert exc_info.value.message == "Cannot access property 'b' - not an object"

    def test_null_root_is_not_an_object(self):
        with pytest.raises(BadRequestError):
            evaluate(None, "x")

    def test_missing_key_is_null(self):
        assert evaluate({"a": 1}, "x") is None
        assert evaluate({"a": 1}, "x.y") is None

    def test_index_after_missing_key_fails(self):
        with pytest.raises(BadRequestError):
            evaluate({"a": 1}, "x.y[0]")

    def test_scalar_root_is_not_an_object(self):
        with pytest.raises(BadRequestError) as exc_info:
            evaluate(5, "x")
        assert exc_info.value.message == "Cannot access property 'x' - not an object"

    def test_plain_path_equals_key_lookups(self):
        assert evaluate(DOCUMENT, "a.b") == DOCUMENT["a"]["b"]

    def test_index_then_property(self):
        assert evaluate(DOCUMENT, "servers[0].name") == "alpha"
        assert evaluate(DOCUMENT, "servers[0].ports[1]") == 443

    def test_bare_index_segment(self):
        assert evaluate([10, 20], "[1]") == 20
        assert evaluate(DOCUMENT, "a.b.[2]") == 3

    def test_index_on_non_array(self):
        with pytest.raises(BadRequestError) as exc_info:
            evaluate(DOCUMENT, "a[0]")
        assert exc_info.value.message == "Cannot index - not an array"

    def test_index_on_missing_key(self):
        with pytest.raises(BadRequestError):
            evaluate(DOCUMENT, "missing[0]")

    def test_chained_brackets_not_supported(self):
        with pytest.raises(BadRequestError) as exc_info:
            evaluate({"m": [[1, 2]]}, "m[0][1]")
        assert exc_info.value.message == "Complex array paths not supported"

    def test_keyed_index_on_non_object(self):
        with pytest.raises(BadRequestError) as exc_info:
            evaluate([1], "a[0]")
        assert exc_info.value.message == "Cannot access property 'a' - not an object"

    def test_empty_path_looks_up_empty_key(self):
        assert evaluate(DOCUMENT, "") == "blank key"
        assert evaluate({"a": 1}, "") is None

    def test_terminal_values_returned_as_is(self):
        assert evaluate(DOCUMENT, "empty") is None
        assert evaluate(DOCUMENT, "a") == {"b": [1, 2, 3]}

    def test_idempotent(self):
        first = evaluate(DOCUMENT, "servers[0].ports")
        assert evaluate(DOCUMENT, "servers[0].ports") == first
        assert DOCUMENT["servers"][0]["ports"] == [80, 443]
