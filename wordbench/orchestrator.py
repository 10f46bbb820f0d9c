"""
Copyright (c) 2025. All rights reserved.
"""

"""
Multi-process fan-out.

One child process is started per input file. Each child runs the
multi-threaded counting engine on its file, prints its own top-N listing and
puts exactly one ChildReport on a result queue shared by all children. Only
the distinct-word count crosses the process boundary, never the word map.

Every child reports, including one that fails: the failure travels back as an
error report and the child exits with status 1. A child killed before it can
report is detected from its exit code and recorded as an error report too.
The parent reads one report per child with a bounded wait, places each report
in its spawn slot, joins the children and sums the counts.

Per-child lifecycle:
    spawned -> counting -> reporting -> terminated (exit 0)
                                     -> terminated-with-error (exit 1)
"""

import logging
import multiprocessing
import os
import queue
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .configs import DEFAULT_NUM_WORKERS, DEFAULT_REPORT_TIMEOUT, DEFAULT_TOP_N
from .engine import CountingEngine
from .errors import (
    ChannelError,
    ChildFailedError,
    ChildSpawnError,
    ReportTimeoutError,
)
from .topn import format_top_words, top_n_words

logger = logging.getLogger(__name__)

# Seconds between checks for children that died without reporting.
POLL_INTERVAL = 0.1


@dataclass(frozen=True)
class ChildReport:
    """The single message a child sends to its parent."""

    index: int
    path: str
    distinct_words: int
    pid: int
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class FanOutResult:
    """Reports in spawn order plus the aggregated total."""

    reports: List[ChildReport] = field(default_factory=list)
    total: int = 0
    elapsed_seconds: float = 0.0
    exit_codes: List[Optional[int]] = field(default_factory=list)


def run_child(index: int, path: str, num_workers: int, top_n: int, channel) -> None:
    """Child process entry point: count, print, report once, exit."""
    pid = os.getpid()
    try:
        word_counts = CountingEngine(num_workers).count_file(path)
        top_words = top_n_words(word_counts, top_n)
        print(f"\n  Most frequent words in file {path}:")
        if top_words:
            print(format_top_words(top_words))
        sys.stdout.flush()
        report = ChildReport(index=index, path=path, distinct_words=len(word_counts), pid=pid)
        exit_code = 0
    except Exception as e:
        logger.exception(f"Counting failed for {path} in process {pid}")
        report = ChildReport(
            index=index,
            path=path,
            distinct_words=0,
            pid=pid,
            error=f"{type(e).__name__}: {e}",
        )
        exit_code = 1

    channel.put(report)
    channel.close()
    channel.join_thread()
    sys.exit(exit_code)


class ProcessOrchestrator:
    """Fan files out to one child process each and collect their reports.

    Args:
        num_workers: Worker threads used by each child's counting engine
        top_n: Size of the top-N listing each child prints
        report_timeout: Seconds to wait for each report before giving up
        start_method: multiprocessing start method, None for the platform default
    """

    def __init__(
        self,
        num_workers: int = DEFAULT_NUM_WORKERS,
        top_n: int = DEFAULT_TOP_N,
        report_timeout: float = DEFAULT_REPORT_TIMEOUT,
        start_method: Optional[str] = None,
    ):
        if num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {num_workers}")
        if top_n < 0:
            raise ValueError(f"top_n must be >= 0, got {top_n}")
        if report_timeout <= 0:
            raise ValueError(f"report_timeout must be positive, got {report_timeout}")
        self.num_workers = num_workers
        self.top_n = top_n
        self.report_timeout = report_timeout
        self.context = multiprocessing.get_context(start_method)

    def run(self, paths: Iterable[Union[str, Path]]) -> FanOutResult:
        """
        Count every file in its own child process.

        Returns:
            FanOutResult with one report per path, in the order given

        Raises:
            ChannelError: The result queue could not be created or read
            ChildSpawnError: A child process could not be started
            ReportTimeoutError: A child did not report within report_timeout
            ChildFailedError: One or more children reported a failure
        """
        paths = [str(path) for path in paths]
        if not paths:
            return FanOutResult()

        start_time = time.perf_counter()
        try:
            channel = self.context.Queue()
        except OSError as e:
            raise ChannelError(f"could not create result channel: {e}") from e

        try:
            processes = self._spawn_children(paths, channel)
            reports = self._collect_reports(paths, channel, processes)
        finally:
            channel.close()

        exit_codes = []
        for process in processes:
            process.join()
            exit_codes.append(process.exitcode)
            logger.debug(f"{process.name} (pid {process.pid}) exited with {process.exitcode}")

        result = FanOutResult(
            reports=reports,
            total=sum(report.distinct_words for report in reports),
            elapsed_seconds=time.perf_counter() - start_time,
            exit_codes=exit_codes,
        )

        failed = [report for report in reports if not report.ok]
        if failed:
            raise ChildFailedError(failed, result)
        return result

    def _spawn_children(self, paths: List[str], channel) -> list:
        processes = []
        for index, path in enumerate(paths):
            process = self.context.Process(
                target=run_child,
                args=(index, path, self.num_workers, self.top_n, channel),
                name=f"wordbench-child-{index}",
            )
            try:
                process.start()
            except OSError as e:
                self._terminate(processes)
                raise ChildSpawnError(f"could not start child for {path}: {e}") from e
            logger.info(f"Spawned {process.name} (pid {process.pid}) for {path}")
            processes.append(process)
        return processes

    def _collect_reports(self, paths: List[str], channel, processes: list) -> List[ChildReport]:
        """
        Read one report per child, polling so that dead children are noticed.

        A child that exits without reporting (killed, os._exit) gets an error
        report built from its exit code instead of being waited on until the
        timeout. The timeout restarts after every report.
        """
        slots: List[Optional[ChildReport]] = [None] * len(paths)
        deadline = time.monotonic() + self.report_timeout
        while any(slot is None for slot in slots):
            # Snapshot before reading: a child writes its report before it
            # exits, so an empty read after this point means no report is coming.
            exited = [
                idx for idx, process in enumerate(processes)
                if slots[idx] is None and process.exitcode is not None
            ]
            try:
                report = channel.get(timeout=max(0.0, min(POLL_INTERVAL, deadline - time.monotonic())))
            except queue.Empty:
                for idx in exited:
                    slots[idx] = self._exit_report(idx, paths[idx], processes[idx])
                if exited:
                    deadline = time.monotonic() + self.report_timeout
                elif time.monotonic() >= deadline:
                    missing = [paths[idx] for idx, slot in enumerate(slots) if slot is None]
                    self._terminate(processes)
                    raise ReportTimeoutError(self.report_timeout, missing) from None
                continue
            except (OSError, EOFError) as e:
                self._terminate(processes)
                raise ChannelError(f"could not read from result channel: {e}") from e

            deadline = time.monotonic() + self.report_timeout
            slots[report.index] = report
            if report.ok:
                logger.info(
                    f"Report from pid {report.pid}: {report.path} has "
                    f"{report.distinct_words} distinct words"
                )
            else:
                logger.error(f"Error report from pid {report.pid}: {report.path}: {report.error}")
        return slots

    @staticmethod
    def _exit_report(index: int, path: str, process) -> ChildReport:
        error = f"exited with code {process.exitcode} before reporting"
        logger.error(f"{process.name} (pid {process.pid}) for {path} {error}")
        return ChildReport(index=index, path=path, distinct_words=0, pid=process.pid, error=error)

    @staticmethod
    def _terminate(processes: list) -> None:
        for process in processes:
            if process.is_alive():
                logger.warning(f"Terminating {process.name} (pid {process.pid})")
                process.terminate()
        for process in processes:
            process.join()
