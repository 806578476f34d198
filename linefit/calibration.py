"""Cost after every gradient-descent step, for choosing ``alpha`` and ``-n``.

Instead of re-running the program with n = 0, 1, 2, ... and comparing the
plots, ``cost_trace`` records the whole path of one run in a DataFrame.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from .points import Point
from .regression import DEFAULT_ALPHA, DEFAULT_ITERATIONS, Model, cost, descend

COLUMNS = ["iteration", "m", "c", "cost"]


def cost_trace(points: Sequence[Point], alpha: float = DEFAULT_ALPHA,
               iterations: int = DEFAULT_ITERATIONS) -> pd.DataFrame:
    """One row per iteration count 0..iterations; row 0 is the start (0, 0)."""
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")
    start = Model(0.0, 0.0)
    rows = [(0, start.m, start.c, cost(points, *start))]
    for i, model in enumerate(descend(points, alpha, iterations), start=1):
        rows.append((i, model.m, model.c, cost(points, *model)))
    trace = pd.DataFrame(rows, columns=COLUMNS)
    trace["iteration"] = trace["iteration"].astype(np.int64)
    return trace


def is_monotonic(trace: pd.DataFrame) -> bool:
    """True if the cost never goes up from one iteration to the next."""
    return bool(trace["cost"].is_monotonic_decreasing)
