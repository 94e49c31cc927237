"""
Visual arc paths between two points.

This is NOT great-circle math. Longitude and latitude are interpolated linearly and
a sinusoidal latitude lift is added on top, which reads as a pleasant "flight arc" on
a globe. Keep it separate from `globearc.core.geo.great_circle_midpoint`: swapping
in geodesic interpolation changes the drawn curve.
"""

from __future__ import annotations

import logging
from math import pi, sin

from globearc.core.errors import InvalidStepCountError
from globearc.core.geo import GeoPoint

logger = logging.getLogger(__name__)


def _lifted_point(start: GeoPoint, end: GeoPoint, t: float, height_deg: float) -> GeoPoint:
    lon = start.lon + t * (end.lon - start.lon)
    lat_base = start.lat + t * (end.lat - start.lat)
    return GeoPoint(lon=lon, lat=lat_base + height_deg * sin(pi * t))


def generate_arc(start: GeoPoint, end: GeoPoint, steps: int, height_deg: float) -> tuple[GeoPoint, ...]:
    """Return `steps + 1` points from `start` to `end`, lifted by up to `height_deg`.

    Point `i` sits at `t = i / steps`. The first and last points are exactly `start`
    and `end`. Callers reveal an arc progressively by slicing a prefix of the result
    (see `globearc.core.reveal`); this function has no notion of progress.
    """
    if isinstance(steps, bool) or not isinstance(steps, int):
        raise InvalidStepCountError(f"steps must be an integer, got {steps!r}")
    if steps < 1:
        raise InvalidStepCountError(f"steps must be >= 1, got {steps}")

    points = [start]
    for i in range(1, steps):
        points.append(_lifted_point(start, end, i / steps, height_deg))
    points.append(end)

    logger.debug("Generated arc with %d points (height=%.3f)", len(points), height_deg)
    return tuple(points)


def arc_apex(start: GeoPoint, end: GeoPoint, height_deg: float) -> GeoPoint:
    """The highest point of the arc (t = 0.5), e.g. for placing a label."""
    return _lifted_point(start, end, 0.5, height_deg)
