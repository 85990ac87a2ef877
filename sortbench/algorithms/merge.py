"""Top-down merge sort.

Not in place: every merge copies both runs into temporary lists and writes
them back. Each written element is counted as a swap.
"""

from __future__ import annotations

from typing import List

from sortbench.algorithms.base import SortStats, measure_time


class MergeSorter:
    name = "Merge"

    def __init__(self) -> None:
        self.stats = SortStats()

    def reset(self) -> None:
        self.stats.reset()

    def sort(self, data: List[int]) -> None:
        self.reset()
        with measure_time(self.stats):
            self._merge_sort(data, 0, len(data) - 1)

    def _merge_sort(self, data: List[int], left: int, right: int) -> None:
        if left >= right:
            return
        mid = (left + right) // 2
        self._merge_sort(data, left, mid)
        self._merge_sort(data, mid + 1, right)
        self._merge(data, left, mid, right)

    def _merge(self, data: List[int], left: int, mid: int, right: int) -> None:
        stats = self.stats
        left_run = data[left : mid + 1]
        right_run = data[mid + 1 : right + 1]
        i = j = 0
        k = left

        while i < len(left_run) and j < len(right_run):
            stats.comparisons += 1
            # ties go left (stability)
            if left_run[i] <= right_run[j]:
                data[k] = left_run[i]
                i += 1
            else:
                data[k] = right_run[j]
                j += 1
            stats.swaps += 1
            k += 1

        while i < len(left_run):
            data[k] = left_run[i]
            stats.swaps += 1
            i += 1
            k += 1

        while j < len(right_run):
            data[k] = right_run[j]
            stats.swaps += 1
            j += 1
            k += 1
