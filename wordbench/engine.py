"""
Copyright (c) 2025. All rights reserved.
"""

"""
Counting engine.

Counts word frequencies either in one pass over the whole buffer or across a
fixed number of worker threads. In the threaded path each worker scans its own
partition into a private map and returns it; the calling thread waits for all
workers and then merges the maps one after another, so no shared state is
touched while scanning and no lock is needed for the merge.
"""

import logging
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Union

from .configs import DEFAULT_NUM_WORKERS
from .errors import WorkerStartError
from .partitioning import Partition, split_buffer
from .reader import read_text
from .tokenizer import count_words

logger = logging.getLogger(__name__)


def count_partition(buffer: str, partition: Partition) -> dict[str, int]:
    """Count the words of one partition into a worker-private map."""
    return count_words(partition.slice(buffer))


def merge_counts(local_counts: Iterable[dict[str, int]]) -> dict[str, int]:
    """
    Merge worker-local word counts into a single map.

    Example:
        >>> merge_counts([{'hello': 2, 'world': 1}, {'hello': 1, 'test': 3}])
        {'hello': 3, 'world': 1, 'test': 3}
    """
    word_count = defaultdict(int)
    for local_count in local_counts:
        for word, count in local_count.items():
            word_count[word] += count
    return dict(word_count)


class CountingEngine:
    """Single- and multi-threaded word frequency counting.

    Args:
        num_workers: Fixed number of partitions and worker threads used by
            count_parallel. Never derived from the input or the hardware.
    """

    def __init__(self, num_workers: int = DEFAULT_NUM_WORKERS):
        if num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {num_workers}")
        self.num_workers = num_workers

    def count_single(self, buffer: str) -> dict[str, int]:
        return count_words(buffer)

    def count_parallel(self, buffer: str) -> dict[str, int]:
        """
        Count ``buffer`` across ``num_workers`` threads.

        Returns:
            The merged word counts, equal to count_single(buffer)

        Raises:
            WorkerStartError: If a worker thread cannot be started. No partial
                result is returned.
        """
        partitions = split_buffer(buffer, self.num_workers)
        logger.debug(
            f"Counting {len(buffer)} chars across {self.num_workers} workers "
            f"(partition sizes: {[p.length for p in partitions]})"
        )

        with ThreadPoolExecutor(
            max_workers=self.num_workers, thread_name_prefix="wordbench-worker"
        ) as executor:
            futures = []
            for partition in partitions:
                try:
                    futures.append(executor.submit(count_partition, buffer, partition))
                except RuntimeError as e:
                    raise WorkerStartError(
                        f"could not start worker {partition.index}: {e}"
                    ) from e
            # Join barrier: results are collected in partition order.
            local_counts = [future.result() for future in futures]

        return merge_counts(local_counts)

    def count_file(self, path: Union[str, Path], parallel: bool = True) -> dict[str, int]:
        """Read ``path`` and count it. An unreadable file counts as empty."""
        buffer = read_text(path)
        if parallel:
            return self.count_parallel(buffer)
        return self.count_single(buffer)
