"""
Progressive reveal of a precomputed path.

Animation progress is owned by the renderer; these helpers only turn a progress value
into "how many points of the path to draw". A polyline needs at least two points, so
the visible count never drops below 2.
"""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

T = TypeVar("T")

MIN_VISIBLE_POINTS = 2


def visible_count(total: int, progress: float) -> int:
    """Number of leading points to draw for `progress` in [0, 1]."""
    if not 0.0 <= progress <= 1.0:
        raise ValueError(f"progress must be within [0, 1], got {progress}")
    count = math.floor(total * progress)
    return min(total, max(MIN_VISIBLE_POINTS, count))


def visible_prefix(points: Sequence[T], progress: float) -> tuple[T, ...]:
    return tuple(points[: visible_count(len(points), progress)])
