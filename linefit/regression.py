"""
regression.py – Fit ``y = m*x + c`` to a list of points by minimising the
mean squared error.

Two interchangeable strategies are provided:

* ``Strategy.GRID_SEARCH`` – brute force over m, c in [-100, 100) with a
  0.1 step (4 000 000 candidates).  Slow but deterministic; it serves as the
  reference answer.
* ``Strategy.GRADIENT_DESCENT`` – start at (0, 0) and take a fixed number of
  steps against the analytic gradient.  There is no convergence check, so a
  large ``alpha`` can diverge to inf/NaN.

Both need at least one point.  An empty list is not rejected; the division by
N simply yields NaN.
"""

from __future__ import annotations

import sys
from enum import StrEnum
from typing import Iterator, NamedTuple, Sequence

import numpy as np

from .points import Point

GRID_MIN = -100.0
GRID_MAX = 100.0
GRID_STEP = 0.1
# residuals evaluated at once by grid_search, whatever the number of points
GRID_BLOCK = 1 << 16

DEFAULT_ALPHA = 0.01
DEFAULT_ITERATIONS = 1000


class Model(NamedTuple):
    m: float
    c: float

    def predict(self, x):
        return self.m * x + self.c


class Strategy(StrEnum):
    GRID_SEARCH = "grid"
    GRADIENT_DESCENT = "gradient"


def _as_arrays(points: Sequence[Point]) -> tuple[np.ndarray, np.ndarray]:
    xs = np.array([p.x for p in points], dtype=float)
    ys = np.array([p.y for p in points], dtype=float)
    return xs, ys


def _cost(xs: np.ndarray, ys: np.ndarray, m: float, c: float) -> float:
    d = ys - (xs * m + c)
    return float(np.sum(d * d) / xs.size)


def _gradient(xs: np.ndarray, ys: np.ndarray, m: float, c: float) -> tuple[float, float]:
    # cost/dm = 2/N * sum(-x * d), cost/dc = 2/N * sum(-d)
    d = ys - (xs * m + c)
    n = xs.size
    return float(2 * np.sum(-xs * d) / n), float(2 * np.sum(-d) / n)


def cost(points: Sequence[Point], m: float, c: float) -> float:
    """Mean squared residual of the line (m, c) against *points*."""
    return _cost(*_as_arrays(points), m, c)


def gradient(points: Sequence[Point], m: float, c: float) -> tuple[float, float]:
    """Partial derivatives of :func:`cost` with respect to m and c."""
    return _gradient(*_as_arrays(points), m, c)


# ---- grid search -----------------------------------------------------------

def grid_axis(lo: float = GRID_MIN, hi: float = GRID_MAX,
              step: float = GRID_STEP) -> Iterator[float]:
    """Yield ``lo + i*step`` for i = 0, 1, ... while the value is below *hi*."""
    i = 0
    value = lo
    while value < hi:
        yield value
        i += 1
        value = lo + i * step


def grid_search(points: Sequence[Point], lo: float = GRID_MIN,
                hi: float = GRID_MAX, step: float = GRID_STEP,
                block: int = GRID_BLOCK) -> Model:
    xs, ys = _as_arrays(points)
    n = xs.size
    cs = np.fromiter(grid_axis(lo, hi, step), dtype=float)

    best = Model(0.0, 0.0)
    min_cost = sys.float_info.max
    rows = max(1, block // max(n, 1))
    # Fixed m, a slice of c values at a time, both in scan order.
    for m in grid_axis(lo, hi, step):
        for start in range(0, cs.size, rows):
            chunk = cs[start:start + rows]
            d = ys - (xs * m + chunk[:, None])
            costs = np.sum(d * d, axis=1) / n
            j = int(np.argmin(costs))
            if costs[j] < min_cost:
                min_cost = costs[j]
                best = Model(float(m), float(chunk[j]))
    return best


# ---- gradient descent ------------------------------------------------------

def descend(points: Sequence[Point], alpha: float = DEFAULT_ALPHA,
            iterations: int = DEFAULT_ITERATIONS) -> Iterator[Model]:
    """Yield the model after each descent step, starting from (0, 0)."""
    xs, ys = _as_arrays(points)
    m = c = 0.0
    for _ in range(iterations):
        dm, dc = _gradient(xs, ys, m, c)
        m -= dm * alpha
        c -= dc * alpha
        yield Model(m, c)


def gradient_descent(points: Sequence[Point], alpha: float = DEFAULT_ALPHA,
                     iterations: int = DEFAULT_ITERATIONS) -> Model:
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")
    model = Model(0.0, 0.0)
    for model in descend(points, alpha, iterations):
        pass
    return model


def fit(points: Sequence[Point],
        strategy: Strategy = Strategy.GRADIENT_DESCENT, *,
        alpha: float = DEFAULT_ALPHA,
        iterations: int = DEFAULT_ITERATIONS) -> Model:
    """Fit a line to *points* with the chosen strategy.

    ``alpha`` and ``iterations`` only matter for gradient descent.
    """
    strategy = Strategy(strategy)
    if strategy is Strategy.GRID_SEARCH:
        return grid_search(points)
    return gradient_descent(points, alpha=alpha, iterations=iterations)
