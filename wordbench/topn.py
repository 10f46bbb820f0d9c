"""
Copyright (c) 2025. All rights reserved.
"""

"""
Top-N word selection and formatting.
"""

from typing import List, Tuple

TopEntry = Tuple[str, int]


def top_n_words(word_counts: dict[str, int], n: int = 10) -> List[TopEntry]:
    """
    Return the ``n`` most frequent words, highest count first.

    Words with equal counts are ordered alphabetically, so the result does not
    depend on the map's iteration order. The input map is left untouched.

    Args:
        word_counts: Word to count mapping
        n: Maximum number of entries (>= 0)

    Returns:
        At most n (word, count) pairs; all of them if the map is smaller

    Raises:
        ValueError: If n is negative

    Example:
        >>> top_n_words({'the': 4, 'dog': 2, 'cat': 2, 'mat': 1}, 3)
        [('the', 4), ('cat', 2), ('dog', 2)]
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    if n == 0:
        return []
    ranked = sorted(word_counts.items(), key=lambda item: (-item[1], item[0]))
    return ranked[:n]


def format_top_words(entries: List[TopEntry], width: int = 15, indent: str = "    ") -> str:
    """Render entries one per line, word left-justified in ``width`` columns."""
    return "\n".join(f"{indent}{word:<{width}}: {count}" for word, count in entries)
