"""In-place heap sort built on a binary max-heap."""

from __future__ import annotations

from typing import List

from sortbench.algorithms.base import SortStats, measure_time


class HeapSorter:
    """Heap sort: bottom-up heap construction, then root extraction.

    ``heapify`` charges exactly two comparisons per call (left and right child)
    whether or not the children lie inside the heap, so the comparison count
    reflects the number of sift-down steps rather than the data.
    """

    name = "Heap"

    def __init__(self) -> None:
        self.stats = SortStats()

    def reset(self) -> None:
        self.stats.reset()

    def sort(self, data: List[int]) -> None:
        self.reset()
        with measure_time(self.stats):
            n = len(data)
            for i in range(n // 2 - 1, -1, -1):
                self.heapify(data, n, i)

            for end in range(n - 1, 0, -1):
                data[0], data[end] = data[end], data[0]
                self.stats.swaps += 1
                self.heapify(data, end, 0)

    def heapify(self, data: List[int], heap_size: int, i: int) -> None:
        """Sift ``data[i]`` down within the first ``heap_size`` elements."""
        largest = i
        left = 2 * i + 1
        right = 2 * i + 2

        self.stats.comparisons += 1
        if left < heap_size and data[left] > data[largest]:
            largest = left

        self.stats.comparisons += 1
        if right < heap_size and data[right] > data[largest]:
            largest = right

        if largest != i:
            data[i], data[largest] = data[largest], data[i]
            self.stats.swaps += 1
            self.heapify(data, heap_size, largest)
