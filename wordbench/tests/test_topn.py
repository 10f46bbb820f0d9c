"""
Copyright (c) 2025. All rights reserved.
"""

"""
Unit tests for top-N selection.
"""

import os
import sys

sys.path.append(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
)

import pytest

from wordbench.topn import format_top_words, top_n_words

COUNTS = {"the": 4, "cat": 2, "dog": 2, "sat": 1, "on": 1, "mat": 1, "ran": 1}


class TestTopNWords:
    """Test suite for top_n_words."""

    def test_sorted_by_count_descending(self):
        result = top_n_words(COUNTS, 3)
        assert result == [("the", 4), ("cat", 2), ("dog", 2)]

    def test_ties_broken_alphabetically(self):
        result = top_n_words({"b": 1, "c": 1, "a": 1})
        assert result == [("a", 1), ("b", 1), ("c", 1)]

    def test_default_n_is_ten(self):
        counts = {f"word{chr(ord('a') + i)}": i + 1 for i in range(15)}
        assert len(top_n_words(counts)) == 10

    def test_zero_returns_empty(self):
        assert top_n_words(COUNTS, 0) == []

    def test_n_larger_than_map(self):
        result = top_n_words(COUNTS, 100)
        assert len(result) == len(COUNTS)
        assert [count for _, count in result] == sorted(COUNTS.values(), reverse=True)

    def test_empty_map(self):
        assert top_n_words({}, 5) == []

    def test_negative_n(self):
        with pytest.raises(ValueError):
            top_n_words(COUNTS, -1)

    def test_idempotent(self):
        assert top_n_words(COUNTS, 4) == top_n_words(COUNTS, 4)

    def test_input_not_mutated(self):
        counts = dict(COUNTS)
        top_n_words(counts, 2)
        assert counts == COUNTS
        assert list(counts) == list(COUNTS)

    def test_independent_of_insertion_order(self):
        reversed_counts = dict(reversed(list(COUNTS.items())))
        assert top_n_words(reversed_counts, 5) == top_n_words(COUNTS, 5)


class TestFormatTopWords:
    """Test suite for format_top_words."""

    def test_fixed_width_layout(self):
        text = format_top_words([("the", 4), ("cat", 2)])
        assert text.splitlines() == [
            "    the            : 4",
            "    cat            : 2",
        ]

    def test_long_word_not_truncated(self):
        text = format_top_words([("incomprehensibilities", 1)], width=5, indent="")
        assert text == "incomprehensibilities: 1"

    def test_empty(self):
        assert format_top_words([]) == ""
