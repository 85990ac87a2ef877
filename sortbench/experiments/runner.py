from __future__ import annotations

import logging
import random
import sys
from dataclasses import dataclass
from typing import Dict, List

from sortbench.algorithms import ALGORITHMS, InstrumentedSorter, SortStats, create_sorters
from sortbench.generator import generate_random_input
from sortbench.models import BenchmarkResults
from sortbench.operations import validate_sorted_permutation

logger = logging.getLogger("sortbench.runner")

# Algorithms that receive the freshly generated (unsorted) input.
RANDOM_INPUT_ALGORITHMS = ("Insertion", "Merge", "Heap")
# Sorted-input recursion of quick sort is one frame per element.
_RECURSION_HEADROOM = 200


@dataclass(frozen=True)
class BenchmarkConfig:
    """Configuration of one benchmark sweep.

    Sizes run over ``range(min_size, max_size)``; input values are drawn from
    ``[value_low, value_high)``. ``seed=None`` uses a non-deterministic RNG.
    """

    min_size: int = 2
    max_size: int = 200
    value_low: int = 0
    value_high: int = 100
    seed: int | None = None
    verify: bool = False
    quick_worst_case: bool = True
    log_every: int = 50

    def __post_init__(self) -> None:
        if self.min_size < 0:
            raise ValueError(f"min_size must be >= 0, got {self.min_size}")
        if self.max_size <= self.min_size:
            raise ValueError(
                f"max_size ({self.max_size}) must be greater than min_size ({self.min_size})"
            )
        if self.value_high <= self.value_low:
            raise ValueError(
                f"value_high ({self.value_high}) must be greater than value_low ({self.value_low})"
            )

    @property
    def sizes(self) -> range:
        return range(self.min_size, self.max_size)


def run_single(
    sorter: InstrumentedSorter,
    original: List[int],
    verify: bool = False,
) -> SortStats:
    """Sort an independent copy of ``original`` and return the sorter's counters.

    ``original`` itself is never mutated. The returned object is the sorter's own
    stats instance, so it is overwritten by the next call.
    """
    data = list(original)
    sorter.sort(data)
    if verify:
        validate_sorted_permutation(original, data, algorithm=sorter.name)
    return sorter.stats


def _ensure_recursion_limit(max_size: int) -> None:
    needed = max_size + _RECURSION_HEADROOM
    if sys.getrecursionlimit() < needed:
        logger.debug("Raising recursion limit to %d", needed)
        sys.setrecursionlimit(needed)


class BenchmarkRunner:
    def __init__(self, config: BenchmarkConfig = BenchmarkConfig()):
        """Each runner owns one sorter per algorithm, reused for every size."""
        self.config = config
        self.rng = random.Random(config.seed)
        self.sorters: Dict[str, InstrumentedSorter] = create_sorters()

    def run(self) -> BenchmarkResults:
        cfg = self.config
        _ensure_recursion_limit(cfg.max_size)
        results = BenchmarkResults(algorithms=ALGORITHMS)
        logger.info(
            "Benchmark: sizes %d..%d, values [%d, %d), seed=%s, quick_worst_case=%s",
            cfg.min_size,
            cfg.max_size - 1,
            cfg.value_low,
            cfg.value_high,
            cfg.seed,
            cfg.quick_worst_case,
        )
        for idx, n in enumerate(cfg.sizes, start=1):
            self._run_size(n, results)
            if cfg.log_every and idx % cfg.log_every == 0:
                logger.info(
                    "Progress %d/%d (n=%d) comparisons: %s",
                    idx,
                    len(cfg.sizes),
                    n,
                    ", ".join(f"{a}={results.comparisons[a][-1]}" for a in ALGORITHMS),
                )
        logger.info("Benchmark finished: %d sizes", len(results.sizes))
        return results

    def _run_size(self, n: int, results: BenchmarkResults) -> None:
        cfg = self.config
        data = generate_random_input(n, self.rng, cfg.value_low, cfg.value_high)
        results.add_size(n)

        for name in RANDOM_INPUT_ALGORITHMS:
            stats = run_single(self.sorters[name], data, verify=cfg.verify)
            results.record(name, stats)

        if cfg.quick_worst_case:
            # first-element pivot on sorted input -> quadratic partitioning
            data.sort()

        stats = run_single(self.sorters["Quick"], data, verify=cfg.verify)
        results.record("Quick", stats)
