#!/usr/bin/env python3
"""
List Iteration Performance Test

Times indexed for-loop, indexed while-loop and for-each iteration over a
Python ``list`` and a ``LinkedList`` filled with the same integers.

Usage:
    python -m list_iteration                  # Defaults from benchmark_config.toml
    python -m list_iteration --size 20000     # Smaller run
    python -m list_iteration --unit us        # Microsecond resolution
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from .config import (
    DEFAULT_CONFIG_FILE,
    LOG_LEVELS,
    BenchmarkConfig,
    ConfigError,
    load_config,
)
from .harness import UNITS, IterationHarness
from .linked_list import LinkedList

BANNER = "=" * 55

# Containers timed, in order.
CONTAINERS = (list, LinkedList)


def setup_logging(config: BenchmarkConfig) -> None:
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=config.log_level)
    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(config.log_file, rotation="10 MB", retention="30 days", level="DEBUG")


def run(config: BenchmarkConfig) -> None:
    print(BANNER)
    print("List Iteration Performance Test")
    print(BANNER + "\n")

    for container_cls in CONTAINERS:
        harness = IterationHarness(container_cls(), size=config.list_size, unit=config.unit)
        harness.populate()
        harness.run_all()

    print(BANNER)
    print("Test completed!")
    print(BANNER)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="list-iteration-bench",
        description="Time three iteration styles over a list and a linked list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help=f"TOML config file (default: {DEFAULT_CONFIG_FILE.name})"
    )
    parser.add_argument(
        "--size", "-n",
        type=int,
        default=None,
        help="Items per container (overrides list_size)"
    )
    parser.add_argument(
        "--unit",
        choices=sorted(UNITS),
        default=None,
        help="Reporting unit for elapsed times"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="stderr log level"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write a DEBUG log to this file"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config).with_overrides(
            list_size=args.size,
            unit=args.unit,
            log_level=args.log_level,
            log_file=Path(args.log_file) if args.log_file else None,
        )
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    setup_logging(config)
    logger.info(f"Starting run: {config.list_size} items, unit={config.unit}")
    run(config)
    logger.info("Run finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
