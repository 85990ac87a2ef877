"""Empirical growth-rate estimation for measured series."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple


def _fit(x: Sequence[float], y: Sequence[float]) -> Tuple[float, float]:
    """Least-squares line ``y = m*x + b``."""
    n = len(x)
    sx, sy = sum(x), sum(y)
    sxy = sum(a * b for a, b in zip(x, y))
    sxx = sum(a * a for a in x)
    d = n * sxx - sx * sx
    if abs(d) < 1e-10:
        return 0.0, sy / n if n else 0.0
    return (n * sxy - sx * sy) / d, (sy * sxx - sx * sxy) / d


def _r2(pred: Sequence[float], act: Sequence[float]) -> float:
    m = sum(act) / len(act)
    ss_tot = sum((a - m) ** 2 for a in act)
    if ss_tot == 0:
        return 0.0
    return 1 - sum((a - p) ** 2 for a, p in zip(act, pred)) / ss_tot


def estimate_complexity(sizes: Sequence[int], values: Sequence[float]) -> Tuple[str, float]:
    """Estimate the Big-O class of ``values`` over ``sizes`` via curve fitting.

    Fits ``O(n)``, ``O(n log n)`` and ``O(n^2)`` models and returns the label
    with the best coefficient of determination. Fewer than three points give
    ``("unknown", 0.0)``.
    """
    if len(sizes) < 3 or len(values) < 3:
        return ("unknown", 0.0)

    models = {
        "O(n)": [float(s) for s in sizes],
        "O(n log n)": [s * math.log(s) if s > 0 else 0.0 for s in sizes],
        "O(n^2)": [float(s * s) for s in sizes],
    }
    candidates: List[Tuple[str, float]] = []
    for label, xs in models.items():
        m, b = _fit(xs, values)
        candidates.append((label, _r2([m * x + b for x in xs], values)))
    return max(candidates, key=lambda c: c[1])


def growth_exponent(sizes: Sequence[int], values: Sequence[float]) -> float:
    """Slope of ``log(value)`` against ``log(n)``.

    Points with a non-positive size or value are skipped. A slope near 1
    means linear growth and near 2 means quadratic growth.

    Raises:
        ValueError: If fewer than two usable points remain.
    """
    pts = [(math.log(s), math.log(v)) for s, v in zip(sizes, values) if s > 0 and v > 0]
    if len(pts) < 2:
        raise ValueError("At least two positive points are required")
    xs, ys = zip(*pts)
    slope, _ = _fit(xs, ys)
    return slope
