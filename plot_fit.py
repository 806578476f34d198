#!/usr/bin/env python3
"""
plot_fit.py – Fit a straight line to the points in a text file and plot it.

Usage
-----
$ python plot_fit.py [-n ITERATIONS] [data.txt]

Each line of the data file holds one ``x,y`` pair.  The line of best fit is
printed as ``cost(m, c) = cost`` and the points plus the line are written to
``out.png``.  To watch gradient descent converge, re-run with a growing
iteration count:

$ for n in $(seq 0 100); do python plot_fit.py -n $n; sleep 1; done

Other settings come from the environment: ``LINEFIT_STRATEGY`` (gradient or
grid), ``LINEFIT_ALPHA``, ``LINEFIT_OUTPUT``, ``LINEFIT_TRACE`` (write the
cost after every iteration to this CSV) and ``LINEFIT_LOG_LEVEL``.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from linefit import (
    LinefitError,
    Settings,
    Strategy,
    cost,
    cost_trace,
    fit,
    load_points,
    r_squared,
    render_fit,
)
from linefit.regression import DEFAULT_ITERATIONS

logger = logging.getLogger("plot_fit")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fit y = m*x + c to a file of x,y points and plot the result.",
    )
    parser.add_argument("-n", type=int, default=DEFAULT_ITERATIONS,
                        help="number of iterations (default: %(default)s)")
    parser.add_argument("data", nargs="?", default=None,
                        help="input file, one x,y pair per line (default: data.txt)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.n < 0:
        parser.error(f"-n must be non-negative, got {args.n}")

    try:
        settings = Settings.from_env(iterations=args.n, data_path=args.data)
    except ValueError as exc:
        print(f"invalid configuration: {exc}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # ---- load --------------------------------------------------------------
    try:
        points = load_points(settings.data_path)
    except LinefitError as exc:
        logger.error("could not read %s: %s", settings.data_path, exc)
        sys.exit(1)

    # ---- fit ---------------------------------------------------------------
    model = fit(points, settings.strategy,
                alpha=settings.alpha, iterations=settings.iterations)
    print(f"cost({model.m:.2f}, {model.c:.2f}) = {cost(points, model.m, model.c):.2f}")
    print(f"R²: {r_squared(points, model):.4f}")

    if settings.trace_path is not None:
        if settings.strategy is not Strategy.GRADIENT_DESCENT:
            logger.warning("not writing trace %s: it only applies to the %s strategy",
                           settings.trace_path, Strategy.GRADIENT_DESCENT)
        else:
            trace = cost_trace(points, settings.alpha, settings.iterations)
            try:
                trace.to_csv(settings.trace_path, index=False)
            except OSError as exc:
                logger.error("could not write trace %s: %s", settings.trace_path, exc)
                sys.exit(1)

    # ---- plotting ----------------------------------------------------------
    try:
        render_fit(points, model, settings.output_path)
    except LinefitError as exc:
        logger.error("could not plot data: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
