"""
Copyright (c) 2025. All rights reserved.
"""

"""
Command line entry point for wordbench.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .benchmark import run_benchmark
from .configs import LOG_LEVELS, MODES, START_METHODS, BenchmarkConfig
from .errors import WordBenchError

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Options left unset fall back to WORDBENCH_* environment variables and
    then to the built-in defaults.
    """
    parser = argparse.ArgumentParser(
        prog="wordbench",
        description="Word frequency benchmark: single-threaded vs multi-threaded vs multi-process",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  wordbench                              # Calgary corpus, compare + fan-out
  wordbench a.txt b.txt --workers 8      # Custom files, 8 worker threads
  wordbench --mode compare --repeat 5    # Only the timing comparison, 5 runs each
  wordbench --mode fanout --top-n 20     # Only the process fan-out
        """,
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Text files to count (default: the Calgary corpus under ./calgary)",
    )
    parser.add_argument("--workers", type=int, help="Worker threads per count (default: 4)")
    parser.add_argument("--top-n", type=int, help="Words listed per file (default: 10)")
    parser.add_argument("--repeat", type=int, help="Timed runs per strategy (default: 1)")
    parser.add_argument(
        "--report-timeout",
        type=float,
        help="Seconds to wait for each child report (default: 300)",
    )
    parser.add_argument("--start-method", choices=START_METHODS, help="multiprocessing start method")
    parser.add_argument("--mode", choices=MODES, default="both", help="Phases to run (default: both)")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Logging level")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> BenchmarkConfig:
    config = BenchmarkConfig.from_env()
    if args.files:
        config.files = list(args.files)
    if args.workers is not None:
        config.num_workers = args.workers
    if args.top_n is not None:
        config.top_n = args.top_n
    if args.repeat is not None:
        config.repeat = args.repeat
    if args.report_timeout is not None:
        config.report_timeout = args.report_timeout
    if args.start_method is not None:
        config.start_method = args.start_method
    if args.log_level is not None:
        config.log_level = args.log_level
    config.mode = args.mode
    return config.validate()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    try:
        config = build_config(args)
    except ValueError as e:
        print(f"wordbench: error: {e}", file=sys.stderr)
        return 2

    configure_logging(config.log_level)
    logger.info(f"Benchmarking {len(config.files)} files with {config.num_workers} workers")

    try:
        run_benchmark(config)
    except WordBenchError as e:
        logger.error(f"Fatal: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
