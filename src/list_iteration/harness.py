"""Timing harness for iterating list-like containers three different ways.

The harness fills a container with ``0 .. size-1`` and then times:

- an indexed ``for i in range(len(c))`` loop,
- an indexed ``while i < len(c)`` loop,
- a plain ``for value in c`` traversal.

For a ``list`` all three are linear. For a ``LinkedList`` each indexed read
walks the node chain, so the two indexed passes are quadratic.
"""

from __future__ import annotations

import time
from typing import Any, Iterator, Protocol

from loguru import logger

LIST_SIZE = 1_000_000

# Nanoseconds per reporting unit.
UNITS = {"ms": 1_000_000, "us": 1_000, "ns": 1}

SEPARATOR = "-" * 56


class SupportsListOps(Protocol):
    def clear(self) -> None: ...

    def append(self, value: Any) -> None: ...

    def __getitem__(self, index: int) -> Any: ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[Any]: ...


def container_kind(container: SupportsListOps) -> str:
    return type(container).__name__


class IterationHarness:
    def __init__(self, container: SupportsListOps, size: int = LIST_SIZE, unit: str = "ms"):
        if unit not in UNITS:
            raise ValueError(f"Unknown unit {unit!r}, expected one of {sorted(UNITS)}")
        self.container = container
        self.size = size
        self.unit = unit
        # Sum from the most recent pass; keeps the reads observable.
        self.checksum = 0

    def populate(self) -> None:
        """Clear the container and append ``0 .. size-1`` one at a time."""
        c = self.container
        t0 = time.perf_counter_ns()
        c.clear()
        for i in range(self.size):
            c.append(i)
        logger.debug(
            f"Populated {container_kind(c)} with {len(c)} items "
            f"in {time.perf_counter_ns() - t0} ns"
        )

    def _elapsed(self, label: str, start_ns: int, end_ns: int, total: int) -> int:
        self.checksum = total
        elapsed_ns = end_ns - start_ns
        logger.debug(f"{label}: {elapsed_ns} ns, checksum={total}")
        return elapsed_ns // UNITS[self.unit]

    def time_indexed_for(self) -> int:
        """Time reading every element by index with a counting loop."""
        c = self.container
        start = time.perf_counter_ns()
        total = 0
        for i in range(len(c)):
            total += c[i]
        end = time.perf_counter_ns()
        return self._elapsed("indexed for", start, end, total)

    def time_indexed_while(self) -> int:
        """Time reading every element by index with an explicit cursor."""
        c = self.container
        start = time.perf_counter_ns()
        total = 0
        i = 0
        while i < len(c):
            total += c[i]
            i += 1
        end = time.perf_counter_ns()
        return self._elapsed("indexed while", start, end, total)

    def time_sequential(self) -> int:
        """Time a single forward traversal without any indexed reads."""
        c = self.container
        start = time.perf_counter_ns()
        total = 0
        for value in c:
            total += value
        end = time.perf_counter_ns()
        return self._elapsed("sequential", start, end, total)

    def run_all(self) -> None:
        kind = container_kind(self.container)
        logger.info(f"Timing {kind} with {self.size} items")

        print(f"Testing {kind} with {self.size} items:")
        print(SEPARATOR)

        t_for = self.time_indexed_for()
        print(f"For-loop iteration time:      {t_for} {self.unit}")

        t_while = self.time_indexed_while()
        print(f"While-loop iteration time:    {t_while} {self.unit}")

        t_each = self.time_sequential()
        print(f"For-each loop iteration time: {t_each} {self.unit}")

        print(SEPARATOR + "\n")
        logger.info(f"{kind}: for={t_for} while={t_while} for-each={t_each} ({self.unit})")
