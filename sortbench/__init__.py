"""Core package for sorting algorithm benchmarks.

Exports the instrumented sorters, the benchmark runner and result containers.
"""

from sortbench.algorithms import ALGORITHMS, create_sorters  # noqa: F401
from sortbench.experiments.runner import BenchmarkConfig, BenchmarkRunner  # noqa: F401
from sortbench.models import BenchmarkResults  # noqa: F401

__all__ = [
    "ALGORITHMS",
    "BenchmarkConfig",
    "BenchmarkResults",
    "BenchmarkRunner",
    "create_sorters",
]
