"""Core data structures for benchmark results.

This module defines:
    Series           -- alias for one metric's per-algorithm measurements.
    BenchmarkResults -- all series collected by a benchmark run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from sortbench.algorithms import ALGORITHMS, SortStats

Series = Dict[str, List[float]]  # algorithm name -> one value per tested size

METRICS = ("time_us", "comparisons", "swaps")


def _empty_series(algorithms: Sequence[str]) -> Series:
    return {name: [] for name in algorithms}


@dataclass
class BenchmarkResults:
    """Measurements of a benchmark run, one entry per tested size.

    Attributes:
        sizes: Tested input sizes in increasing order.
        time_us: Elapsed sort time in microseconds per algorithm.
        comparisons: Comparison counts per algorithm.
        swaps: Swap (element write) counts per algorithm.
    """

    algorithms: tuple[str, ...] = ALGORITHMS
    sizes: List[int] = field(default_factory=list)
    time_us: Series = field(default_factory=dict)
    comparisons: Series = field(default_factory=dict)
    swaps: Series = field(default_factory=dict)

    def __post_init__(self) -> None:
        for metric in METRICS:
            if not getattr(self, metric):
                setattr(self, metric, _empty_series(self.algorithms))

    def add_size(self, n: int) -> None:
        self.sizes.append(n)

    def record(self, algorithm: str, stats: SortStats) -> None:
        """Append the last-run counters of ``algorithm``."""
        self.time_us[algorithm].append(stats.elapsed_us)
        self.comparisons[algorithm].append(stats.comparisons)
        self.swaps[algorithm].append(stats.swaps)

    def metric(self, name: str) -> Series:
        if name not in METRICS:
            raise ValueError(f"Unknown metric: {name}")
        return getattr(self, name)

    def table(self, name: str) -> List[List[float]]:
        """Return rows ``[n, v_algo1, v_algo2, ...]`` for the given metric."""
        series = self.metric(name)
        return [
            [n] + [series[algo][i] for algo in self.algorithms]
            for i, n in enumerate(self.sizes)
        ]
