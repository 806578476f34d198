"""
points.py – Load (x, y) pairs from a newline-delimited text file.

Each line is expected to look like ``3.0,7.5``.  Lines that do not parse are
skipped with a warning; they never turn into a made-up (0, 0) point.  Bytes
that are not valid UTF-8 only spoil the line they appear on.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, NamedTuple

from .errors import MalformedRecord, ReadFailure, SourceUnavailable

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    x: float
    y: float


def parse_point(text: str) -> Point:
    # anything after the second value is ignored
    fields = text.split(",")
    if len(fields) < 2:
        raise MalformedRecord(
            f"expected 2 comma-separated values, found {len(fields)}"
        )
    try:
        return Point(float(fields[0]), float(fields[1]))
    except ValueError as exc:
        raise MalformedRecord(str(exc)) from exc


def read_points(lines: Iterable[str]) -> list[Point]:
    """Parse every line of *lines*, keeping the good ones in order."""
    points: list[Point] = []
    try:
        for line in lines:
            raw = line.rstrip("\r\n")
            try:
                points.append(parse_point(raw))
            except MalformedRecord as exc:
                logger.warning('discarding bad data point: "%s": %s', raw, exc)
    except OSError as exc:
        raise ReadFailure(f"could not scan: {exc}") from exc
    return points


def load_points(path: str | Path) -> list[Point]:
    path = Path(path)
    try:
        fh = path.open("r", encoding="utf-8", errors="replace")
    except OSError as exc:
        raise SourceUnavailable(f"could not open {path}: {exc}") from exc

    with fh:
        points = read_points(fh)

    logger.debug("loaded %d points from %s", len(points), path)
    return points
