"""Tests for CSV table export."""

from __future__ import annotations

import csv
from pathlib import Path

import pytest

from sortbench.algorithms import SortStats
from sortbench.experiments.export import (
    TABLE_FILES,
    read_table_csv,
    write_results,
    write_table_csv,
)
from sortbench.experiments.runner import BenchmarkConfig, BenchmarkRunner
from sortbench.models import BenchmarkResults


def _small_results() -> BenchmarkResults:
    results = BenchmarkResults()
    for n, base in ((2, 1), (3, 10)):
        results.add_size(n)
        for k, algo in enumerate(results.algorithms):
            results.record(algo, SortStats(comparisons=base + k, swaps=k, elapsed_us=0.5 * k))
    return results


def test_write_table_layout(tmp_path: Path) -> None:
    results = _small_results()
    path = write_table_csv(
        results.comparisons, results.sizes, tmp_path / "c.csv", algorithms=results.algorithms
    )
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["N", "Insertion", "Merge", "Heap", "Quick"]
    assert rows[1] == ["2", "1", "2", "3", "4"]
    assert rows[2] == ["3", "10", "11", "12", "13"]
    assert results.table("comparisons")[1] == [3, 10, 11, 12, 13]


def test_write_table_rejects_ragged_series(tmp_path: Path) -> None:
    series = {"Insertion": [1.0], "Merge": [1.0, 2.0]}
    with pytest.raises(ValueError):
        write_table_csv(series, [2, 3], tmp_path / "bad.csv")


def test_write_results_creates_all_tables(tmp_path: Path) -> None:
    out_dir = tmp_path / "nested" / "out"
    results = BenchmarkRunner(BenchmarkConfig(max_size=30, seed=5)).run()
    paths = write_results(results, out_dir)
    assert set(paths) == set(TABLE_FILES)
    for metric, filename in TABLE_FILES.items():
        assert paths[metric] == out_dir / filename
        rows = read_table_csv(paths[metric])
        assert len(rows) == 28
        assert [int(r["N"]) for r in rows] == list(range(2, 30))
    comps = read_table_csv(paths["comparisons"])
    assert int(comps[0]["Insertion"]) == results.comparisons["Insertion"][0]


def test_write_results_propagates_io_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("not a dir")
    with pytest.raises(OSError):
        write_results(_small_results(), blocker)


def test_unknown_metric_rejected() -> None:
    with pytest.raises(ValueError):
        _small_results().metric("memory")
