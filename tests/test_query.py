"""Tests for the query-string adapter."""

from hypothesis import given

from decision_tree.codec.query import (
    entries_from_mapping,
    format_query,
    mapping_from_entries,
    parse_query,
)
from tests.strategies import wire_mappings


class TestMappingFromEntries:
    def test_groups_duplicate_keys_in_order(self):
        entries = [("a", "1"), ("b", "x"), ("a", "2")]
        assert mapping_from_entries(entries) == {"a": ["1", "2"], "b": ["x"]}

    def test_empty(self):
        assert mapping_from_entries([]) == {}


class TestEntriesFromMapping:
    def test_one_pair_per_value(self):
        assert entries_from_mapping({"a": ["1", "2"], "b": ["x"]}) == [
            ("a", "1"),
            ("a", "2"),
            ("b", "x"),
        ]

    def test_none_values_skipped(self):
        assert entries_from_mapping({"a": None, "b": ["x"]}) == [("b", "x")]


class TestParseQuery:
    def test_duplicate_keys_preserved(self):
        assert parse_query("a=1&b=2&a=3") == {"a": ["1", "3"], "b": ["2"]}

    def test_blank_value_kept(self):
        assert parse_query("steps=") == {"steps": [""]}

    def test_leading_question_mark(self):
        assert parse_query("?steps=a,b_c") == {"steps": ["a,b_c"]}

    def test_empty_string(self):
        assert parse_query("") == {}

    def test_percent_decoding(self):
        assert parse_query("steps=a%2Cb_c") == {"steps": ["a,b_c"]}

    def test_plus_is_space(self):
        assert parse_query("q=a+b") == {"q": ["a b"]}


class TestFormatQuery:
    def test_repeats_keys(self):
        query = format_query({"a": ["1", "2"]})
        assert parse_query(query) == {"a": ["1", "2"]}
        assert query.count("a=") == 2

    def test_empty_mapping(self):
        assert format_query({}) == ""

    def test_special_characters_escaped(self):
        query = format_query({"q": ["a&b=c"]})
        assert "&b=" not in query
        assert parse_query(query) == {"q": ["a&b=c"]}

    @given(wire_mappings)
    def test_round_trip(self, mapping):
        assert parse_query(format_query(mapping)) == mapping
