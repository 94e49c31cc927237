"""
Camera framing for a globe view.

The renderer owns fly-to animation and easing; this module only decides the target
camera state so every caller frames a route the same way.
"""

from __future__ import annotations

from dataclasses import dataclass

from globearc.core.geo import GeoPoint, frame_center


@dataclass(frozen=True)
class CameraOptions:
    """Target camera state. Bearing is always north-up."""

    center: GeoPoint
    zoom: float = 1.0
    pitch: float = 0.0
    bearing: float = 0.0


def build_camera_options(center: GeoPoint, pitch: float, zoom: float = 1.0) -> CameraOptions:
    return CameraOptions(center=center, zoom=zoom, pitch=pitch, bearing=0.0)


def frame_camera(
    start: GeoPoint,
    destination: GeoPoint | None,
    *,
    north_offset: float,
    zoom: float = 1.0,
    pitch: float = 0.0,
) -> CameraOptions:
    """Camera centered on the route midpoint (or the start when nothing is selected)."""
    center = frame_center(start, destination, north_offset)
    return build_camera_options(center, pitch, zoom=zoom)
