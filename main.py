#!/usr/bin/env python3

import argparse
import logging
from typing import List, Optional

from sortbench.algorithms import ALGORITHMS
from sortbench.analysis import estimate_complexity
from sortbench.config import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_DIR,
    build_config,
    load_config,
)
from sortbench.experiments.export import write_results
from sortbench.experiments.runner import BenchmarkRunner
from sortbench.models import BenchmarkResults

logger = logging.getLogger("sortbench")


def log_growth_summary(results: BenchmarkResults) -> None:
    """Log the best-fitting growth class of each algorithm's comparison count."""
    for algo in ALGORITHMS:
        label, r2 = estimate_complexity(results.sizes, results.comparisons[algo])
        logger.info("%-9s comparisons grow as %s (R^2=%.4f)", algo, label, r2)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sorting algorithm benchmark")
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help=f"Path to YAML/JSON config file (default: {DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument("--output-dir", help="Directory for CSV tables (overrides config)")
    parser.add_argument("--seed", type=int, help="Random seed (overrides config)")
    parser.add_argument("--max-size", type=int, help="Exclusive upper input size (overrides config)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    cfg = load_config(args.config)

    log_level = cfg.get("log_level", DEFAULT_LOG_LEVEL)
    logging.basicConfig(
        level=getattr(logging, str(log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = build_config(cfg, seed=args.seed, max_size=args.max_size)
    output_dir = args.output_dir or cfg.get("output_dir", DEFAULT_OUTPUT_DIR)

    results = BenchmarkRunner(config).run()
    print("Done!")
    paths = write_results(results, output_dir)
    log_growth_summary(results)
    for path in paths.values():
        print(f"CSV saved to {path.resolve()}")
    print("Results written to CSV files.")


if __name__ == "__main__":
    main()
