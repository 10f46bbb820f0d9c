"""
Copyright (c) 2025. All rights reserved.
"""

"""
Benchmark driver.

Runs the two benchmark phases and prints their results:

1. Comparison: for each file, time single-threaded against multi-threaded
   counting and check that both produce the same word counts.
2. Fan-out: count every file in its own child process and sum the
   distinct-word counts the children report.

Finally the resource usage of the benchmark process is reported.
"""

import logging
import resource
import sys
import time
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

import numpy as np
import psutil

from .configs import BenchmarkConfig
from .engine import CountingEngine
from .errors import ChildFailedError
from .orchestrator import FanOutResult, ProcessOrchestrator
from .reader import read_text

logger = logging.getLogger(__name__)


@dataclass
class Timing:
    """Wall-clock seconds of repeated runs of one strategy."""

    runs: List[float]

    @property
    def mean(self) -> float:
        return float(np.mean(self.runs))

    @property
    def std(self) -> float:
        return float(np.std(self.runs))

    @property
    def best(self) -> float:
        return float(np.min(self.runs))


@dataclass
class FileComparison:
    path: str
    single: Timing
    multi: Timing
    matches: bool
    distinct_words: int

    @property
    def speedup(self) -> float:
        return calculate_speedup(self.single.mean, self.multi.mean)


@dataclass
class ResourceUsage:
    user_cpu_seconds: float
    system_cpu_seconds: float
    peak_rss_kb: int


@dataclass
class BenchmarkReport:
    comparisons: List[FileComparison] = field(default_factory=list)
    fan_out: Optional[FanOutResult] = None
    usage: Optional[ResourceUsage] = None


def time_call(fn: Callable, *args, repeat: int = 1) -> Tuple[Any, Timing]:
    """Call ``fn(*args)`` ``repeat`` times; return the last result and timings."""
    if repeat < 1:
        raise ValueError(f"repeat must be >= 1, got {repeat}")
    runs = []
    result = None
    for _ in range(repeat):
        start_time = time.perf_counter()
        result = fn(*args)
        runs.append(time.perf_counter() - start_time)
    return result, Timing(runs)


def calculate_speedup(single_seconds: float, multi_seconds: float) -> float:
    """Speedup of the multi-threaded run over the single-threaded one."""
    if multi_seconds == 0:
        return float("inf")
    return single_seconds / multi_seconds


def compare_file(engine: CountingEngine, path: str, repeat: int = 1) -> FileComparison:
    """Time single- against multi-threaded counting of one file."""
    buffer = read_text(path)
    single_counts, single_timing = time_call(engine.count_single, buffer, repeat=repeat)
    multi_counts, multi_timing = time_call(engine.count_parallel, buffer, repeat=repeat)

    matches = single_counts == multi_counts
    if not matches:
        logger.warning(f"Single- and multi-threaded counts differ for {path}")
    return FileComparison(
        path=path,
        single=single_timing,
        multi=multi_timing,
        matches=matches,
        distinct_words=len(single_counts),
    )


def compare_performance(
    engine: CountingEngine, paths: List[str], repeat: int = 1
) -> List[FileComparison]:
    comparisons = []
    for path in paths:
        print(f"Processing file: {path}")
        comparison = compare_file(engine, path, repeat=repeat)
        print_comparison(comparison)
        comparisons.append(comparison)
    return comparisons


def resource_usage() -> ResourceUsage:
    """CPU time and peak resident memory of the current process."""
    cpu_times = psutil.Process().cpu_times()
    peak_rss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    if sys.platform == "darwin":
        # macOS reports bytes, Linux kilobytes.
        peak_rss //= 1024
    return ResourceUsage(
        user_cpu_seconds=cpu_times.user,
        system_cpu_seconds=cpu_times.system,
        peak_rss_kb=int(peak_rss),
    )


def print_comparison(comparison: FileComparison) -> None:
    single, multi = comparison.single, comparison.multi
    if len(single.runs) > 1:
        print(f"  Single-threaded time: {single.mean:.6f} seconds (std {single.std:.6f}, best {single.best:.6f})")
        print(f"  Multi-threaded time:  {multi.mean:.6f} seconds (std {multi.std:.6f}, best {multi.best:.6f})")
    else:
        print(f"  Single-threaded time: {single.mean:.6f} seconds")
        print(f"  Multi-threaded time:  {multi.mean:.6f} seconds")
    print(f"  Speedup:              {comparison.speedup:.2f}x")
    verdict = "match" if comparison.matches else "mismatch"
    print(f"  Results {verdict} for file: {comparison.path}")


def print_fan_out(result: FanOutResult) -> None:
    for report in result.reports:
        print(f"\n  Word count in file: {report.path}: {report.distinct_words}")
    print(f"\nTotal word count across all files: {result.total}")
    print(
        f"\nElapsed time for multiprocessing + multithreading: "
        f"{result.elapsed_seconds:.6f} seconds"
    )


def print_resource_usage(usage: ResourceUsage) -> None:
    print("\nResource Usage:")
    print(f"  CPU time used (user):    {usage.user_cpu_seconds:.6f} seconds")
    print(f"  CPU time used (system):  {usage.system_cpu_seconds:.6f} seconds")
    print(f"  Maximum memory usage:    {usage.peak_rss_kb} kilobytes")


def run_benchmark(config: BenchmarkConfig) -> BenchmarkReport:
    """
    Run the phases selected by ``config.mode`` and print their results.

    Raises:
        WordBenchError: On any fatal fan-out condition
    """
    config.validate()
    report = BenchmarkReport()

    if config.mode in ("compare", "both"):
        engine = CountingEngine(config.num_workers)
        report.comparisons = compare_performance(engine, config.files, repeat=config.repeat)

    if config.mode in ("fanout", "both"):
        orchestrator = ProcessOrchestrator(
            num_workers=config.num_workers,
            top_n=config.top_n,
            report_timeout=config.report_timeout,
            start_method=config.start_method,
        )
        sys.stdout.flush()
        try:
            report.fan_out = orchestrator.run(config.files)
        except ChildFailedError as e:
            print_fan_out(e.result)
            raise
        print_fan_out(report.fan_out)

    report.usage = resource_usage()
    print_resource_usage(report.usage)
    return report
