"""Tests for LCS table construction and back-tracking."""

import pytest

from script_diff.diff.alignment import (
    build_alignment_table,
    backtrack_matches,
    find_matched_indices,
)


class TestBuildAlignmentTable:
    def test_dimensions(self):
        table = build_alignment_table(["a", "b", "c"], ["a", "c"])
        assert len(table) == 4
        assert all(len(row) == 3 for row in table)

    def test_borders_are_zero(self):
        table = build_alignment_table(["a", "b"], ["b", "a"])
        assert table[0] == [0, 0, 0]
        assert [row[0] for row in table] == [0, 0, 0]

    def test_known_values(self):
        table = build_alignment_table(["a", "b", "c", "d"], ["a", "c", "d"])
        assert table == [
            [0, 0, 0, 0],
            [0, 1, 1, 1],
            [0, 1, 1, 1],
            [0, 1, 2, 2],
            [0, 1, 2, 3],
        ]

    def test_bottom_right_is_lcs_length(self):
        table = build_alignment_table(list("abcbdab"), list("bdcaba"))
        assert table[-1][-1] == 4

    def test_empty_sequences(self):
        assert build_alignment_table([], []) == [[0]]
        assert build_alignment_table(["a"], []) == [[0], [0]]
        assert build_alignment_table([], ["a"]) == [[0, 0]]

    def test_empty_keys_compare_equal(self):
        table = build_alignment_table([""], [""])
        assert table[1][1] == 1


class TestBacktrackMatches:
    def test_full_match(self):
        keys = ["i", "am", "a", "student"]
        table = build_alignment_table(keys, keys)
        assert backtrack_matches(table, keys, keys) == {0, 1, 2, 3}

    def test_tie_prefers_later_original(self):
        orig, trans = ["a", "a"], ["a"]
        table = build_alignment_table(orig, trans)
        assert backtrack_matches(table, orig, trans) == {1}

    def test_tie_between_swapped_words(self):
        # Either word alone is an optimal alignment; the trailing "x" of the
        # transcript is skipped first, so "y" wins
        orig, trans = ["x", "y"], ["y", "x"]
        table = build_alignment_table(orig, trans)
        assert backtrack_matches(table, orig, trans) == {1}

    def test_no_common_words(self):
        orig, trans = ["a", "b"], ["c", "d"]
        table = build_alignment_table(orig, trans)
        assert backtrack_matches(table, orig, trans) == set()


class TestFindMatchedIndices:
    @pytest.mark.parametrize(
        "orig, trans, expected",
        [
            (["i", "am", "a", "student"], ["a", "student"], {2, 3}),
            (["go", "to", "the", "store"], ["go", "store"], {0, 3}),
            (["a", "a"], ["a"], {1}),
            (["a", "b", "a"], ["a"], {2}),
            (["the", "cat", "the", "dog"], ["the", "dog"], {2, 3}),
        ],
    )
    def test_scenarios(self, orig, trans, expected):
        assert find_matched_indices(orig, trans) == expected

    def test_empty_original(self):
        assert find_matched_indices([], ["a"]) == set()

    def test_empty_transcription(self):
        assert find_matched_indices(["a"], []) == set()

    def test_matched_count_equals_lcs_length(self):
        orig, trans = list("abcbdab"), list("bdcaba")
        matched = find_matched_indices(orig, trans)
        assert len(matched) == build_alignment_table(orig, trans)[-1][-1]

    def test_deterministic(self):
        orig = ["a", "b", "a", "b", "a"]
        trans = ["b", "a", "b"]
        results = {frozenset(find_matched_indices(orig, trans)) for _ in range(5)}
        assert len(results) == 1
