"""Tests for PaginationParser."""

from __future__ import annotations

import pytest

from searchkit_filtering import (
    FilterParseError,
    PaginationParser,
    PaginationResult,
    SearchEndpointConfig,
)


def test_defaults_when_absent():
    assert PaginationParser().parse({}) == PaginationResult(offset=0, limit=20)


def test_parses_strings():
    assert PaginationParser().parse({"limit": "5", "offset": "10"}) == (10, 5)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("0", 1), ("-3", 1), ("1000", 100), ("100", 100)],
)
def test_limit_clamped(raw, expected):
    assert PaginationParser().parse({"limit": raw}).limit == expected


def test_negative_offset_clamped():
    assert PaginationParser().parse({"offset": "-1"}).offset == 0


def test_empty_values_use_defaults():
    assert PaginationParser().parse({"limit": "", "offset": ""}) == (0, 20)


def test_non_integer_rejected():
    with pytest.raises(FilterParseError) as exc_info:
        PaginationParser().parse({"limit": "ten"})
    assert exc_info.value.errors == {"limit": ["must be an integer, got 'ten'"]}


def test_custom_keys_and_bounds():
    config = SearchEndpointConfig(
        limit_key="page_size", offset_key="skip", default_limit=5, max_limit=10
    )
    parser = PaginationParser(config)
    assert parser.parse({}) == (0, 5)
    assert parser.parse({"page_size": "50", "skip": "3", "limit": "ignored"}) == (3, 10)


class TestConfig:
    def test_reserved_keys(self):
        assert SearchEndpointConfig().reserved_keys == {"limit", "offset", "sort"}

    def test_default_above_max_rejected(self):
        with pytest.raises(ValueError, match="exceed"):
            SearchEndpointConfig(default_limit=50, max_limit=10)

    def test_non_positive_limits_rejected(self):
        with pytest.raises(ValueError, match="positive"):
            SearchEndpointConfig(max_limit=0)

    def test_duplicate_keys_rejected(self):
        with pytest.raises(ValueError, match="must differ"):
            SearchEndpointConfig(sort_key="limit")
