"""Common structures and helpers shared by the instrumented sorters."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Protocol, runtime_checkable


@dataclass
class SortStats:
    """Counters collected during a single ``sort`` call.

    Fields:
        comparisons: Number of element-to-element ordering tests.
        swaps: Number of element writes / relocations.
        elapsed_us: Wall-clock duration of the sort body in microseconds.
    """

    comparisons: int = 0
    swaps: int = 0
    elapsed_us: float = 0.0

    def reset(self) -> None:
        """Zero all counters in place."""
        self.comparisons = 0
        self.swaps = 0
        self.elapsed_us = 0.0


@runtime_checkable
class InstrumentedSorter(Protocol):
    """Measurable in-place sorter.

    Implementations own their ``stats`` instance and must call ``reset()`` at
    the start of every ``sort`` so the counters describe the last run only.
    """

    name: str
    stats: SortStats

    def reset(self) -> None: ...

    def sort(self, data: List[int]) -> None: ...


@contextmanager
def measure_time(stats: SortStats) -> Iterator[SortStats]:
    """Time the enclosed block and store the duration in ``stats.elapsed_us``."""
    t0 = time.perf_counter()
    try:
        yield stats
    finally:
        stats.elapsed_us = (time.perf_counter() - t0) * 1_000_000
