"""
Copyright (c) 2025. All rights reserved.
"""

"""
Unit tests for the word tokenizer.
"""

import os
import sys

sys.path.append(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
)

import pytest

from wordbench.tokenizer import count_words, is_word_char, iter_words


class TestIsWordChar:
    """Test suite for word character classification."""

    @pytest.mark.parametrize("ch", ["a", "Z", "é", "ß", "Ω", "я"])
    def test_letters_are_word_chars(self, ch):
        assert is_word_char(ch)

    @pytest.mark.parametrize("ch", ["0", "9", " ", "\n", "\t", ",", "!", "'", "-", "_", "�"])
    def test_separators(self, ch):
        assert not is_word_char(ch)


class TestIterWords:
    """Test suite for iter_words."""

    def test_mixed_input(self):
        assert list(iter_words("Hello, World! 123 hello")) == ["hello", "world", "hello"]

    def test_empty_input(self):
        assert list(iter_words("")) == []

    def test_separators_only(self):
        assert list(iter_words("  123 ,.;!?\n\t ")) == []

    def test_word_at_end_of_input(self):
        """A word in progress at end-of-input is emitted."""
        assert list(iter_words("one two")) == ["one", "two"]

    def test_digits_split_words(self):
        assert list(iter_words("abc123def")) == ["abc", "def"]

    def test_apostrophes_and_hyphens_split_words(self):
        assert list(iter_words("don't well-known")) == ["don", "t", "well", "known"]

    def test_case_folding(self):
        assert list(iter_words("MiXeD CASE words")) == ["mixed", "case", "words"]

    def test_unicode_letters(self):
        assert list(iter_words("Héllo wörld")) == ["héllo", "wörld"]

    def test_case_folding_keeps_only_letters(self):
        """Lowercasing "İ" adds a combining dot, which is not a letter."""
        words = list(iter_words("İstanbul İzmir"))
        assert words == ["istanbul", "izmir"]
        assert all(is_word_char(ch) for word in words for ch in word)

    def test_returns_iterator(self):
        result = iter_words("hello world")
        assert hasattr(result, "__iter__") and hasattr(result, "__next__")


class TestCountWords:
    """Test suite for single-pass counting."""

    def test_known_counts(self):
        assert count_words("Hello, World! 123 hello") == {"hello": 2, "world": 1}

    def test_empty_buffer(self):
        assert count_words("") == {}

    def test_returns_plain_dict(self):
        assert type(count_words("a b a")) is dict

    def test_newlines_and_tabs(self):
        text = "the cat\nsat on\tthe mat\n"
        assert count_words(text) == {"the": 2, "cat": 1, "sat": 1, "on": 1, "mat": 1}
