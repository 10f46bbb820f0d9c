"""
Copyright (c) 2025. All rights reserved.
"""

"""
Exception hierarchy for wordbench.

Every exception defined here is fatal for a benchmark run: the CLI logs it
and exits with status 1. Recoverable conditions (an unreadable input file)
never raise; they are logged and counted as empty input instead.
"""

from typing import List


class WordBenchError(Exception):
    """Base class for all fatal wordbench errors."""


class WorkerStartError(WordBenchError):
    """A counting worker thread could not be started."""


class ChannelError(WordBenchError):
    """The parent/child result channel could not be created or read."""


class ChildSpawnError(WordBenchError):
    """A child process could not be started."""


class ReportTimeoutError(WordBenchError):
    """A child process did not deliver its report in time."""

    def __init__(self, timeout: float, missing: List[str]):
        self.timeout = timeout
        self.missing = missing
        super().__init__(
            f"no report within {timeout:.1f}s from {len(missing)} child(ren): "
            + ", ".join(missing)
        )


class ChildFailedError(WordBenchError):
    """One or more child processes reported a counting failure.

    Attributes:
        failed: the error reports, in spawn order
        result: the complete fan-out result, including successful reports
    """

    def __init__(self, failed, result):
        self.failed = failed
        self.result = result
        details = "; ".join(f"{r.path}: {r.error}" for r in failed)
        super().__init__(f"{len(failed)} child process(es) failed: {details}")
