"""Tests for MCP argument sanitizers and per-tool validators."""

import math

import pytest

from json_manager.errors import ErrorKind, StoreError
from json_manager.mcp.handlers import HANDLERS, VALIDATORS
from json_manager.mcp.handlers.collections import (
    validate_add_json_object,
    validate_delete_json_object,
    validate_query_json_objects,
    validate_update_json_object,
)
from json_manager.mcp.sanitize import (
    MAX_FILENAME_LENGTH,
    sanitize_filename,
    sanitize_string,
    validate_index,
    validate_object,
)


def _raises_validation(fn, *args):
    with pytest.raises(StoreError) as exc_info:
        fn(*args)
    assert exc_info.value.kind is ErrorKind.VALIDATION
    return exc_info.value


class TestSanitizeString:
    def test_strips_control_characters(self):
        assert sanitize_string("a\x00b\x07c\nd\te", "f") == "abc\nd\te"

    def test_rejects_non_string(self):
        err = _raises_validation(sanitize_string, 5, "filename")
        assert "filename must be a string, got int" in err.message

    def test_rejects_blank_when_required(self):
        _raises_validation(sanitize_string, "  ", "property")

    def test_optional_none_is_empty(self):
        assert sanitize_string(None, "f", required=False) == ""

    def test_max_length(self):
        _raises_validation(sanitize_filename, "a" * (MAX_FILENAME_LENGTH + 1))

    def test_filename_control_characters_rejected(self):
        err = _raises_validation(sanitize_filename, "a\x01b")
        assert "control characters" in err.message

    def test_filename_at_max_length_accepted(self):
        name = "a" * MAX_FILENAME_LENGTH
        assert sanitize_filename(name) == name


class TestValidateObject:
    def test_accepts_mapping(self):
        assert validate_object({"a": 1}, "object") == {"a": 1}

    @pytest.mark.parametrize("value", [None, [], "x", 3])
    def test_rejects_non_mapping(self, value):
        err = _raises_validation(validate_object, value, "updates")
        assert err.message.startswith("updates must be an object")


class TestValidateIndex:
    @pytest.mark.parametrize("value,expected", [(0, 0), (7, 7), (2.0, 2)])
    def test_accepts(self, value, expected):
        assert validate_index(value) == expected
        assert type(validate_index(value)) is int

    @pytest.mark.parametrize("value", [-1, 1.5, math.nan, math.inf, True, "1", None, [0]])
    def test_rejects(self, value):
        _raises_validation(validate_index, value)


class TestToolValidators:
    def test_add_requires_object_mapping(self):
        _raises_validation(validate_add_json_object, {"filename": "x", "object": [1]})

    def test_query_keeps_any_value(self):
        for value in [None, 0, False, "", {"a": [1]}]:
            args = validate_query_json_objects({"filename": "x", "property": "p", "value": value})
            assert args["value"] == value

    def test_update_normalizes_integral_float_index(self):
        args = validate_update_json_object({"filename": "x", "index": 1.0, "updates": {}})
        assert args["index"] == 1

    def test_delete_rejects_negative(self):
        _raises_validation(validate_delete_json_object, {"filename": "x", "index": -2})


class TestRegistry:
    def test_every_handler_has_validator(self):
        assert set(HANDLERS) == set(VALIDATORS)
        assert all(callable(h) for h in HANDLERS.values())
