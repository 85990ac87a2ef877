"""Benchmark sweep and result export.

Provides the benchmark runner that exercises every sorter over a range of
input sizes and the CSV writers for the collected tables.
"""

from sortbench.experiments.export import write_results, write_table_csv  # noqa: F401
from sortbench.experiments.runner import BenchmarkConfig, BenchmarkRunner, run_single  # noqa: F401

__all__ = [
    "BenchmarkConfig",
    "BenchmarkRunner",
    "run_single",
    "write_results",
    "write_table_csv",
]
