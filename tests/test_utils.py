"""Tests for json_manager.utils."""

import time
from datetime import datetime

import pytest

from json_manager.utils import generate_id, json_equal, utc_now


class TestJsonEqual:
    @pytest.mark.parametrize(
        "a,b",
        [
            ("a", "a"),
            (1, 1),
            (1, 1.0),
            (True, True),
            (None, None),
            ({"x": 1, "y": 2}, {"y": 2, "x": 1}),
            ({"x": {"y": [1, 2]}}, {"x": {"y": [1, 2]}}),
            ([1, {"a": "b"}], [1, {"a": "b"}]),
            ([], []),
            ({}, {}),
        ],
    )
    def test_equal(self, a, b):
        assert json_equal(a, b)
        assert json_equal(b, a)

    @pytest.mark.parametrize(
        "a,b",
        [
            ("a", "b"),
            (1, "1"),
            (True, 1),
            (False, 0),
            (None, 0),
            (None, {}),
            ({"x": 1}, {"x": 1, "y": 2}),
            ({"x": 1}, {"y": 1}),
            ({"x": None}, {"y": None}),
            ([1, 2], [2, 1]),
            ([1], [1, 1]),
            ([], {}),
        ],
    )
    def test_not_equal(self, a, b):
        assert not json_equal(a, b)
        assert not json_equal(b, a)


class TestGenerateId:
    def test_is_timestamp_based_integer(self):
        before = int(time.time() * 1000)
        value = generate_id()
        after = int(time.time() * 1000)
        assert isinstance(value, int)
        assert before <= value <= after + 999


class TestUtcNow:
    def test_iso_format_with_timezone(self):
        parsed = datetime.fromisoformat(utc_now())
        assert parsed.tzinfo is not None
