"""Quick sort with first-element pivot.

The pivot choice is deliberately naive: on already sorted input every
partition peels off a single element, giving O(n^2) comparisons and O(n)
recursion depth. The benchmark relies on this to show the worst case.
"""

from __future__ import annotations

from typing import List

from sortbench.algorithms.base import SortStats, measure_time


class QuickSorter:
    name = "Quick"

    def __init__(self) -> None:
        self.stats = SortStats()

    def reset(self) -> None:
        self.stats.reset()

    def sort(self, data: List[int]) -> None:
        self.reset()
        with measure_time(self.stats):
            self._quick_sort(data, 0, len(data) - 1)

    def _quick_sort(self, data: List[int], low: int, high: int) -> None:
        if low >= high:
            return
        boundary = self.partition(data, low, high)
        self._quick_sort(data, low, boundary)
        self._quick_sort(data, boundary + 1, high)

    def partition(self, data: List[int], low: int, high: int) -> int:
        """Hoare-style partition around ``data[low]``.

        Returns:
            Boundary ``b`` such that ``data[low..b]`` <= pivot <= ``data[b+1..high]``.
            ``low <= b < high`` holds for any range with at least two elements.
        """
        stats = self.stats
        pivot = data[low]
        i, j = low, high

        while i <= j:
            stats.comparisons += 1
            while data[i] < pivot:
                i += 1
                stats.comparisons += 1

            stats.comparisons += 1
            while data[j] > pivot:
                j -= 1
                stats.comparisons += 1

            if i <= j:
                if i != j:
                    data[i], data[j] = data[j], data[i]
                    stats.swaps += 1
                i += 1
                j -= 1

        return i - 1
