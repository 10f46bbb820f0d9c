"""
Copyright (c) 2025. All rights reserved.
"""

"""
Buffer partitioning for the multi-threaded counting engine.

A buffer is split into exactly K contiguous, non-overlapping partitions that
together cover it. Nominal boundaries sit at multiples of ``len // K`` and the
last partition takes the remainder. An interior boundary that would cut a
word in two is moved forward to the end of that word, so every word belongs
to exactly one partition and partitioned counting equals a single pass.
"""

from dataclasses import dataclass
from typing import List

from .tokenizer import is_word_char


@dataclass(frozen=True)
class Partition:
    """Half-open slice ``[start, end)`` of a buffer owned by one worker."""

    index: int
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    def slice(self, buffer: str) -> str:
        return buffer[self.start:self.end]


def _align_to_word_end(buffer: str, position: int) -> int:
    # Advance while the boundary sits between two word characters.
    size = len(buffer)
    while 0 < position < size and is_word_char(buffer[position - 1]) and is_word_char(buffer[position]):
        position += 1
    return position


def split_buffer(buffer: str, num_partitions: int) -> List[Partition]:
    """
    Split ``buffer`` into ``num_partitions`` word-aligned partitions.

    Args:
        buffer: Text to split
        num_partitions: Number of partitions K (>= 1)

    Returns:
        Exactly K partitions in buffer order. Some may be empty when the
        buffer is short or a word spans several nominal boundaries.

    Raises:
        ValueError: If num_partitions < 1

    Example:
        >>> [p.slice("aa bb cc dd") for p in split_buffer("aa bb cc dd", 2)]
        ['aa bb', ' cc dd']
    """
    if num_partitions < 1:
        raise ValueError(f"num_partitions must be >= 1, got {num_partitions}")

    size = len(buffer)
    chunk_size = size // num_partitions

    boundaries = [0]
    for idx in range(1, num_partitions):
        nominal = max(idx * chunk_size, boundaries[-1])
        boundaries.append(_align_to_word_end(buffer, nominal))
    boundaries.append(size)

    return [
        Partition(index=idx, start=boundaries[idx], end=boundaries[idx + 1])
        for idx in range(num_partitions)
    ]
