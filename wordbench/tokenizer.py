"""
Copyright (c) 2025. All rights reserved.
"""

"""
Word tokenizer.

A word is a maximal run of alphabetic characters. Everything else (digits,
punctuation, whitespace) separates words and never appears inside one.
Characters are lowercased one at a time as they are accumulated, so
"Hello, World! 123 hello" yields hello, world, hello.
"""

import itertools
from collections import defaultdict
from typing import Iterator


def is_word_char(ch: str) -> bool:
    """Return True if ``ch`` is an alphabetic letter (ASCII or Unicode)."""
    return ch.isalpha()


def iter_words(buffer: str) -> Iterator[str]:
    """
    Yield the lowercase words of ``buffer`` in order of appearance.

    Args:
        buffer: Text to scan

    Yields:
        Each maximal alphabetic run, case-folded per character

    Example:
        >>> list(iter_words("Hello, World! 123 hello"))
        ['hello', 'world', 'hello']
    """
    for is_word, run in itertools.groupby(buffer, key=is_word_char):
        if is_word:
            # Folding can expand a letter ("İ" -> "i" + U+0307); keep letters only.
            yield "".join(c for ch in run for c in ch.lower() if is_word_char(c))


def count_words(buffer: str) -> dict[str, int]:
    """Count word frequencies in ``buffer`` in a single pass."""
    word_count = defaultdict(int)
    for word in iter_words(buffer):
        word_count[word] += 1
    return dict(word_count)
