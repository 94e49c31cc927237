"""
Flight planning: glue between settings, the geometry core, and the JSON contract.

Both the API and the CLI call into this module so defaults (north offset, arc height,
step count) are resolved in exactly one place.
"""

from __future__ import annotations

import logging

from globearc.config.settings import Settings
from globearc.core import geo
from globearc.core.arc import generate_arc
from globearc.core.camera import frame_camera
from globearc.core.reveal import visible_prefix
from globearc.domain.models import ArcResult, CameraFrame, FlightView, Position

logger = logging.getLogger(__name__)  # Module-level logger (configured by app entrypoint).


def midpoint(a: geo.GeoPoint, b: geo.GeoPoint) -> Position:
    return Position.from_core(geo.great_circle_midpoint(a, b))


def plan_frame(
    settings: Settings,
    *,
    start: geo.GeoPoint | None = None,
    destination: geo.GeoPoint | None = None,
    north_offset_deg: float | None = None,
) -> CameraFrame:
    """Camera target for `start` -> `destination`; `start` defaults to the configured origin."""
    cam = settings.camera
    start = start if start is not None else settings.origin.location.to_core()
    offset = cam.north_offset_deg if north_offset_deg is None else north_offset_deg
    options = frame_camera(start, destination, north_offset=offset, zoom=cam.zoom, pitch=cam.pitch)
    return CameraFrame.from_core(options)


def plan_arc(
    settings: Settings,
    start: geo.GeoPoint,
    end: geo.GeoPoint,
    *,
    steps: int | None = None,
    height_deg: float | None = None,
    progress: float | None = None,
) -> ArcResult:
    """Full arc between two points plus the prefix visible at `progress` (default 1)."""
    steps = settings.arc.steps if steps is None else steps
    height = settings.arc.height_deg if height_deg is None else height_deg
    progress = 1.0 if progress is None else progress

    points = generate_arc(start, end, steps, height)
    visible = visible_prefix(points, progress)
    logger.debug("Arc %s -> %s: %d/%d points visible", start, end, len(visible), len(points))

    return ArcResult(
        steps=steps,
        height_deg=height,
        progress=progress,
        total_points=len(points),
        visible_points=len(visible),
        points=[Position.from_core(p) for p in points],
        visible=[Position.from_core(p) for p in visible],
    )


def plan_flight(settings: Settings, destination_id: str, *, progress: float | None = None) -> FlightView:
    """Camera + arc from the configured origin to a configured destination.

    Raises KeyError when `destination_id` is not configured.
    """
    destination = settings.find_destination(destination_id)
    if destination is None:
        raise KeyError(destination_id)

    origin = settings.origin
    start = origin.location.to_core()
    end = destination.location.to_core()
    logger.info("Planning flight %s -> %s", origin.id, destination.id)

    return FlightView(
        origin=origin,
        destination=destination,
        camera=plan_frame(settings, start=start, destination=end),
        arc=plan_arc(settings, start, end, progress=progress),
    )
