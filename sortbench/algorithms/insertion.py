"""Insertion sort with comparison / shift counting."""

from __future__ import annotations

from typing import List

from sortbench.algorithms.base import SortStats, measure_time


class InsertionSorter:
    """Classic shift-based insertion sort (stable, O(n^2) worst case)."""

    name = "Insertion"

    def __init__(self) -> None:
        self.stats = SortStats()

    def reset(self) -> None:
        self.stats.reset()

    def sort(self, data: List[int]) -> None:
        self.reset()
        stats = self.stats
        with measure_time(stats):
            for i in range(1, len(data)):
                key = data[i]
                j = i - 1
                while j >= 0:
                    # the probe that stops the scan is counted too
                    stats.comparisons += 1
                    if data[j] <= key:
                        break
                    data[j + 1] = data[j]
                    stats.swaps += 1
                    j -= 1
                data[j + 1] = key
