"""Pytest configuration, shared fixtures & custom summary hook.

Also ensures the project root is on sys.path so ``import sortbench`` and
``import main`` work without installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from sortbench.algorithms import (  # noqa: E402
    HeapSorter,
    InsertionSorter,
    MergeSorter,
    QuickSorter,
)

SORTER_CLASSES = [InsertionSorter, MergeSorter, HeapSorter, QuickSorter]


@pytest.fixture(params=SORTER_CLASSES, ids=lambda cls: cls.name)
def sorter(request):
    """A fresh instance of every sorter in turn."""
    return request.param()


def pytest_terminal_summary(
    terminalreporter: pytest.TerminalReporter,
    exitstatus: int,
    config: pytest.Config,
) -> None:  # noqa: D401
    """Append a compact custom summary at the end of test session."""
    stats = terminalreporter.stats
    collected = terminalreporter._numcollected  # type: ignore[attr-defined]
    passed = len(stats.get("passed", []))
    failed = len(stats.get("failed", []))
    errors = len(stats.get("error", []))
    skipped = len(stats.get("skipped", []))

    terminalreporter.section("Custom summary", sep="=")
    terminalreporter.write_line(
        f"Collected: {collected} | Passed: {passed} | Failed: {failed} | "
        f"Errors: {errors} | Skipped: {skipped}"
    )
    if failed:
        terminalreporter.write_line("Failed tests:")
        for rep in stats["failed"]:
            terminalreporter.write_line(f"  - {rep.nodeid}")
