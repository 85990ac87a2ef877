from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Dict, List, Sequence

from sortbench.models import BenchmarkResults, Series

logger = logging.getLogger("sortbench.export")

# metric -> output file name
TABLE_FILES = {
    "time_us": "sorting_microseconds.csv",
    "comparisons": "sorting_comparisons.csv",
    "swaps": "sorting_swaps.csv",
}


def write_table_csv(
    series: Series,
    sizes: Sequence[int],
    path: str | Path,
    algorithms: Sequence[str] | None = None,
) -> Path:
    """Write one metric as a table: header ``N,<algo>...``, one row per size.

    Raises:
        ValueError: If a series length does not match ``sizes``.
    """
    if algorithms is None:
        algorithms = list(series.keys())
    for algo in algorithms:
        if len(series[algo]) != len(sizes):
            raise ValueError(
                f"Series {algo} has {len(series[algo])} entries, expected {len(sizes)}"
            )
    out_path = Path(path)
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["N", *algorithms])
        for i, n in enumerate(sizes):
            writer.writerow([n, *(series[algo][i] for algo in algorithms)])
    logger.info("Table written: %s", out_path.resolve())
    return out_path


def write_results(results: BenchmarkResults, output_dir: str | Path) -> Dict[str, Path]:
    """Write every metric table of ``results`` into ``output_dir``.

    Returns:
        Mapping metric name -> written file path.
    """
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    written: Dict[str, Path] = {}
    for metric, filename in TABLE_FILES.items():
        written[metric] = write_table_csv(
            results.metric(metric),
            results.sizes,
            out_dir / filename,
            algorithms=results.algorithms,
        )
    return written


def read_table_csv(path: str | Path) -> List[Dict[str, str]]:
    """Read a table written by ``write_table_csv`` back as dict rows."""
    with Path(path).open("r", newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))
