"""
Copyright (c) 2025. All rights reserved.
"""

"""
Word frequency benchmark comparing single-threaded, multi-threaded and
multi-process counting.

Modules:
    tokenizer: Alphabetic word extraction and single-pass counting
    partitioning: Word-aligned buffer partitioning
    engine: Single- and multi-threaded counting engine
    topn: Top-N selection and formatting
    orchestrator: One-child-per-file process fan-out
    benchmark: Timing, comparison and resource usage reporting
"""

from .configs import BenchmarkConfig
from .engine import CountingEngine, merge_counts
from .errors import (
    ChannelError,
    ChildFailedError,
    ChildSpawnError,
    ReportTimeoutError,
    WordBenchError,
    WorkerStartError,
)
from .orchestrator import ChildReport, FanOutResult, ProcessOrchestrator
from .partitioning import Partition, split_buffer
from .tokenizer import count_words, iter_words
from .topn import format_top_words, top_n_words

__version__ = "1.0.0"

__all__ = [
    # Counting
    "CountingEngine",
    "count_words",
    "iter_words",
    "merge_counts",
    "Partition",
    "split_buffer",
    "top_n_words",
    "format_top_words",
    # Process fan-out
    "ProcessOrchestrator",
    "ChildReport",
    "FanOutResult",
    # Configuration
    "BenchmarkConfig",
    # Errors
    "WordBenchError",
    "WorkerStartError",
    "ChannelError",
    "ChildSpawnError",
    "ReportTimeoutError",
    "ChildFailedError",
]
