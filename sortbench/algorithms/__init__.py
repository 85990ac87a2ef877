"""Instrumented sorting algorithms.

Contains:
- Insertion sort
- Merge sort
- Heap sort
- Quick sort (first-element pivot)
"""

from typing import Dict

from sortbench.algorithms.base import InstrumentedSorter, SortStats, measure_time
from sortbench.algorithms.heap import HeapSorter
from sortbench.algorithms.insertion import InsertionSorter
from sortbench.algorithms.merge import MergeSorter
from sortbench.algorithms.quick import QuickSorter

# Column order used by every result table.
ALGORITHMS = ("Insertion", "Merge", "Heap", "Quick")


def create_sorters() -> Dict[str, InstrumentedSorter]:
    """Return one fresh sorter per algorithm, keyed by name in table order."""
    sorters = (InsertionSorter(), MergeSorter(), HeapSorter(), QuickSorter())
    return {s.name: s for s in sorters}


__all__ = [
    "ALGORITHMS",
    "HeapSorter",
    "InsertionSorter",
    "InstrumentedSorter",
    "MergeSorter",
    "QuickSorter",
    "SortStats",
    "create_sorters",
    "measure_time",
]
