"""Result checks for sorter output.

Concepts
--------
Sorted permutation
    A list that contains exactly the same multiset of values as the input it
    was produced from and is non-decreasing. Every sorter must turn its copy
    of the input into the sorted permutation of that input.
"""

from collections import Counter
from typing import Sequence


def is_sorted(data: Sequence[int]) -> bool:
    """Return True if ``data`` is in non-decreasing order."""
    return all(data[i] <= data[i + 1] for i in range(len(data) - 1))


def validate_sorted_permutation(
    original: Sequence[int],
    result: Sequence[int],
    algorithm: str = "sorter",
) -> bool:
    """Validate that ``result`` is the ascending permutation of ``original``.

    Args:
        original: Input handed to the sorter (before sorting).
        result: Sorter output.
        algorithm: Name used in error messages.

    Returns:
        True if the result is valid, so the call can be used in assertions.

    Raises:
        ValueError: If lengths differ, the multisets of values differ, or the
            result is not in ascending order.
    """
    if len(original) != len(result):
        raise ValueError(
            f"{algorithm}: length changed from {len(original)} to {len(result)}"
        )
    if Counter(original) != Counter(result):
        raise ValueError(f"{algorithm}: output is not a permutation of the input")
    if not is_sorted(result):
        raise ValueError(f"{algorithm}: output is not in ascending order")
    return True
