"""
Copyright (c) 2025. All rights reserved.
"""

"""
Configuration for wordbench benchmark runs.
"""

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

# The Calgary text compression corpus, relative to the working directory.
CALGARY_FILES = [
    "calgary/bib",
    "calgary/paper1",
    "calgary/paper2",
    "calgary/progc",
    "calgary/progl",
    "calgary/progp",
    "calgary/trans",
]

DEFAULT_NUM_WORKERS = 4
DEFAULT_TOP_N = 10
DEFAULT_REPORT_TIMEOUT = 300.0

MODES = ("compare", "fanout", "both")
START_METHODS = ("fork", "spawn", "forkserver")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class BenchmarkConfig:
    """Configuration for a benchmark run.

    Attributes:
        files (List[str]): Text files to count, in processing order
        num_workers (int): Fixed number of partitions/worker threads per count
        top_n (int): Number of most frequent words each child prints
        repeat (int): Timed repetitions per strategy in the comparison phase
        report_timeout (float): Seconds the parent waits for each child report
        start_method (Optional[str]): multiprocessing start method, None for default
        mode (str): 'compare', 'fanout' or 'both'
        log_level (str): Root logging level name
    """

    files: List[str] = field(default_factory=lambda: list(CALGARY_FILES))
    num_workers: int = DEFAULT_NUM_WORKERS
    top_n: int = DEFAULT_TOP_N
    repeat: int = 1
    report_timeout: float = DEFAULT_REPORT_TIMEOUT
    start_method: Optional[str] = None
    mode: str = "both"
    log_level: str = "INFO"

    def validate(self) -> "BenchmarkConfig":
        if self.num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {self.num_workers}")
        if self.top_n < 0:
            raise ValueError(f"top_n must be >= 0, got {self.top_n}")
        if self.repeat < 1:
            raise ValueError(f"repeat must be >= 1, got {self.repeat}")
        if self.report_timeout <= 0:
            raise ValueError(
                f"report_timeout must be positive, got {self.report_timeout}"
            )
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {self.mode!r}")
        if self.start_method is not None and self.start_method not in START_METHODS:
            raise ValueError(
                f"start_method must be one of {START_METHODS}, got {self.start_method!r}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"unknown log level {self.log_level!r}")
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BenchmarkConfig":
        """Build a config from WORDBENCH_* environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            num_workers=int(env.get("WORDBENCH_WORKERS", DEFAULT_NUM_WORKERS)),
            top_n=int(env.get("WORDBENCH_TOP_N", DEFAULT_TOP_N)),
            report_timeout=float(
                env.get("WORDBENCH_REPORT_TIMEOUT", DEFAULT_REPORT_TIMEOUT)
            ),
            log_level=env.get("WORDBENCH_LOG_LEVEL", "INFO").upper(),
        )
