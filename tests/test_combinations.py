"""Tests for the cumulative combination expander."""

from hypothesis import given
from hypothesis import strategies as st

from decision_tree.combinations import combine_groups, count_paths
from tests.strategies import groups


class TestCombineGroups:
    def test_empty_input(self):
        assert combine_groups([]) == []

    def test_single_group_returned_verbatim(self):
        assert combine_groups([["x", "y"]]) == [["x", "y"]]

    def test_two_groups(self):
        assert combine_groups([["a", "b"], ["c", "d"]]) == [
            ["a", "b"],
            ["a-c", "a-d", "b-c", "b-d"],
        ]

    def test_nesting_order_outer_previous_inner_group(self):
        levels = combine_groups([["1", "2"], ["x"], ["p", "q"]])
        assert levels[2] == ["1-x-p", "1-x-q", "2-x-p", "2-x-q"]

    def test_custom_separator(self):
        assert combine_groups([["a"], ["b"]], separator="/") == [["a"], ["a/b"]]

    def test_empty_group_empties_later_levels(self):
        levels = combine_groups([["a", "b"], [], ["c"]])
        assert levels == [["a", "b"], [], []]

    def test_input_not_mutated(self):
        source = [["a", "b"], ["c"]]
        levels = combine_groups(source)
        levels[0].append("z")
        assert source == [["a", "b"], ["c"]]

    def test_accepts_tuples(self):
        assert combine_groups((("a",), ("b", "c"))) == [["a"], ["a-b", "a-c"]]


class TestCountPaths:
    def test_matches_example(self):
        assert count_paths([["a", "b"], ["c", "d", "e"]]) == [2, 6]

    def test_empty(self):
        assert count_paths([]) == []

    @given(groups)
    def test_counts_match_expansion(self, g):
        assert count_paths(g) == [len(level) for level in combine_groups(g)]

    @given(st.lists(st.lists(st.just("x"), max_size=3), min_size=1, max_size=4))
    def test_one_level_per_group(self, g):
        assert len(combine_groups(g)) == len(g)
