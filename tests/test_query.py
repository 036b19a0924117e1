"""Tests for the ``:in`` filter merge and query string encoding."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from bigcommerce_management.services.query import build_query_string, with_in_param

EDT = timezone(timedelta(hours=-4))


class TestWithInParam:
    def test_merges_plain_and_in_spellings(self):
        result = with_in_param({"id": [1, 2], "id:in": [5]}, "id")
        assert result == {"id:in": [1, 2, 5]}

    def test_scalar_value_becomes_list(self):
        assert with_in_param({"email": "a@example.com"}, "email") == {
            "email:in": ["a@example.com"]
        }

    def test_no_dedup(self):
        result = with_in_param({"id": [1], "id:in": [1]}, "id")
        assert result == {"id:in": [1, 1]}

    @pytest.mark.parametrize(
        "a, b",
        [([1], [2]), ([], [3, 4]), (["x", "y"], []), ([7, 8], [9, 10, 11])],
    )
    def test_union_under_single_key(self, a, b):
        result = with_in_param({"customer_id": a, "customer_id:in": b}, "customer_id")
        keys = [k for k in result if k.startswith("customer_id")]
        assert keys == ["customer_id:in"]
        assert result["customer_id:in"] == a + b

    def test_non_eligible_names_untouched(self):
        options = {"name": "Bob", "include": ["addresses"], "date_created:min": "x"}
        assert with_in_param(options, "id", "email") == options

    def test_only_in_spelling_present(self):
        assert with_in_param({"id:in": [3]}, "id") == {"id:in": [3]}

    def test_empty_values_dropped(self):
        assert with_in_param({"id": [], "page": 2}, "id") == {"page": 2}

    def test_idempotent(self):
        once = with_in_param({"id": 1, "id:in": [2, 3], "sku": "A"}, "id", "sku")
        twice = with_in_param(once, "id", "sku")
        assert twice == once

    def test_does_not_mutate_input(self):
        options = {"id": [1], "id:in": [2]}
        with_in_param(options, "id")
        assert options == {"id": [1], "id:in": [2]}

    def test_none_options(self):
        assert with_in_param(None, "id") == {}


class TestBuildQueryString:
    def test_empty_gives_no_query(self):
        assert build_query_string({}) == ""
        assert build_query_string(None) == ""

    def test_prefix_and_separator(self):
        assert build_query_string({"page": 2, "limit": 50}) == "?page=2&limit=50"

    def test_arrays_join_with_comma(self):
        assert build_query_string({"include": ["addresses", "storecredit"]}) == (
            "?include=addresses,storecredit"
        )

    def test_keys_are_encoded(self):
        assert build_query_string({"id:in": [1, 5]}) == "?id%3Ain=1,5"

    def test_scalar_values_are_encoded(self):
        assert build_query_string({"name": "Bill & Ted"}) == "?name=Bill+%26+Ted"

    def test_datetime_not_encoded(self):
        after = datetime(2024, 10, 30, 22, 30, 38, tzinfo=EDT)
        assert build_query_string({"date_created:min": after}) == (
            "?date_created%3Amin=2024-10-30T22:30:38-0400"
        )

    def test_naive_datetime_taken_as_utc(self):
        assert build_query_string({"date_modified:max": datetime(2024, 1, 2, 3, 4, 5)}) == (
            "?date_modified%3Amax=2024-01-02T03:04:05+0000"
        )

    def test_date_value(self):
        assert build_query_string({"since": date(2024, 5, 1)}) == "?since=2024-05-01"

    def test_booleans_lowercase(self):
        assert build_query_string({"is_in_stock": True}) == "?is_in_stock=true"

    def test_none_values_skipped(self):
        assert build_query_string({"page": None, "limit": 5}) == "?limit=5"
        assert build_query_string({"page": None}) == ""
