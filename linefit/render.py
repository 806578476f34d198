"""
render.py – Draw the points and the fitted line and save them as a PNG.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from sklearn.metrics import r2_score  # noqa: E402

from .errors import RenderFailure  # noqa: E402
from .points import Point  # noqa: E402
from .regression import Model  # noqa: E402

logger = logging.getLogger(__name__)

DPI = 100
DEFAULT_SIZE = 512
DEFAULT_X_RANGE = (3.0, 20.0)


def r_squared(points: Sequence[Point], model: Model) -> float:
    """Coefficient of determination of *model* on *points*.

    NaN for fewer than two points, where R² is not defined.
    """
    if len(points) < 2:
        return float("nan")
    y = np.array([p.y for p in points], dtype=float)
    y_hat = model.predict(np.array([p.x for p in points], dtype=float))
    return float(r2_score(y, y_hat))


def render_fit(points: Sequence[Point], model: Model,
               path: str | Path = "out.png", *,
               size: int = DEFAULT_SIZE,
               x_range: tuple[float, float] = DEFAULT_X_RANGE) -> Path:
    path = Path(path)

    # ---- plot construction -------------------------------------------------
    try:
        fig, ax = plt.subplots(figsize=(size / DPI, size / DPI), dpi=DPI)
    except (ValueError, RuntimeError) as exc:
        raise RenderFailure(f"could not create plot: {exc}") from exc

    try:
        try:
            ax.scatter([p.x for p in points], [p.y for p in points],
                       marker="x", color="red", label="data")
        except (ValueError, TypeError) as exc:
            raise RenderFailure(f"could not create scatter: {exc}") from exc

        x0, x1 = x_range
        try:
            ax.plot([x0, x1], [model.predict(x0), model.predict(x1)],
                    label=f"y = {model.m:.2f}x {model.c:+.2f}")
        except (ValueError, TypeError) as exc:
            raise RenderFailure(f"could not create line: {exc}") from exc
        ax.legend()

        # ---- rasterise and write -------------------------------------------
        try:
            fh = open(path, "wb")
        except OSError as exc:
            raise RenderFailure(f"could not create {path}: {exc}") from exc

        try:
            fig.savefig(fh, format="png", dpi=DPI)
        except (OSError, ValueError, RuntimeError) as exc:
            fh.close()
            raise RenderFailure(f"could not write to {path}: {exc}") from exc

        try:
            fh.close()
        except OSError as exc:
            raise RenderFailure(f"could not close {path}: {exc}") from exc
    finally:
        plt.close(fig)

    logger.info("wrote %s (%dx%d)", path, size, size)
    return path
