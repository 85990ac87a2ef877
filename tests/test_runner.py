"""Tests for the benchmark runner (size sweep, copies, worst-case quick input)."""

from __future__ import annotations

import random

import pytest

from sortbench.algorithms import ALGORITHMS, InsertionSorter, QuickSorter
from sortbench.experiments.runner import BenchmarkConfig, BenchmarkRunner, run_single
from sortbench.generator import generate_random_input
from sortbench.models import METRICS


@pytest.fixture(scope="module")
def default_results():
    """One full default sweep (n = 2..199) shared by the module."""
    return BenchmarkRunner(BenchmarkConfig(seed=1234, verify=True)).run()


def test_default_sweep_has_198_entries_per_series(default_results) -> None:
    assert default_results.sizes == list(range(2, 200))
    for metric in METRICS:
        series = default_results.metric(metric)
        assert list(series) == list(ALGORITHMS)
        for algo in ALGORITHMS:
            assert len(series[algo]) == 198
            assert all(v >= 0 for v in series[algo])


def test_quick_worst_case_exceeds_merge_and_heap(default_results) -> None:
    comps = default_results.comparisons
    for i, n in enumerate(default_results.sizes):
        if n >= 50:
            assert comps["Quick"][i] > comps["Merge"][i]
            assert comps["Quick"][i] > comps["Heap"][i]


def test_quick_receives_sorted_input() -> None:
    # distinct values: a sorted input partitions without a single exchange
    cfg = BenchmarkConfig(max_size=100, value_high=10**12, seed=99)
    results = BenchmarkRunner(cfg).run()
    assert all(s == 0 for s in results.swaps["Quick"])
    for i, n in enumerate(results.sizes):
        assert results.comparisons["Quick"][i] == n * (n + 1) // 2 + n - 2


def test_same_seed_gives_same_counts() -> None:
    cfg = BenchmarkConfig(min_size=2, max_size=40, seed=7)
    a = BenchmarkRunner(cfg).run()
    b = BenchmarkRunner(cfg).run()
    assert a.comparisons == b.comparisons
    assert a.swaps == b.swaps


def test_quick_on_random_input_when_worst_case_disabled() -> None:
    worst = BenchmarkRunner(BenchmarkConfig(min_size=150, max_size=160, seed=3)).run()
    random_cfg = BenchmarkConfig(min_size=150, max_size=160, seed=3, quick_worst_case=False)
    plain = BenchmarkRunner(random_cfg).run()
    for w, p in zip(worst.comparisons["Quick"], plain.comparisons["Quick"]):
        assert p < w
    # other algorithms see the same inputs either way
    assert worst.comparisons["Merge"] == plain.comparisons["Merge"]


def test_run_single_does_not_mutate_original() -> None:
    original = [5, 3, 4, 1, 2]
    stats = run_single(InsertionSorter(), original, verify=True)
    assert original == [5, 3, 4, 1, 2]
    assert stats.comparisons == 10


def test_run_single_verify_rejects_wrong_output() -> None:
    class BrokenSorter(QuickSorter):
        def sort(self, data):
            super().sort(data)
            data.reverse()

    with pytest.raises(ValueError):
        run_single(BrokenSorter(), [3, 1, 2], verify=True)


def test_generated_input_range() -> None:
    rng = random.Random(0)
    data = generate_random_input(500, rng)
    assert len(data) == 500
    assert all(0 <= v < 100 for v in data)
    assert generate_random_input(0, rng) == []
    with pytest.raises(ValueError):
        generate_random_input(-1, rng)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_size": -1},
        {"min_size": 10, "max_size": 10},
        {"value_low": 5, "value_high": 5},
    ],
)
def test_invalid_config_fails_fast(kwargs) -> None:
    with pytest.raises(ValueError):
        BenchmarkConfig(**kwargs)
