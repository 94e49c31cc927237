"""
Spherical geometry helpers.

We keep a tiny geometry layer here so the camera and API modules can work with
great circles without pulling in heavier GIS dependencies.

Units: every public function takes and returns degrees; radians are used only inside
this module. `GeoPoint` does not validate ranges on construction because a north
offset may legitimately push latitude past 90 (the camera target is not a real place).
Inputs coming from users go through `validate_point()` instead.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from math import acos, atan2, cos, degrees, radians, sin, sqrt

from globearc.core.errors import AntipodalPointsError, InvalidCoordinateError

# Within this angular separation (radians, roughly 0.6 m on Earth) of pi two points are
# treated as antipodal. Below it the slerp weight is unreliable (`acos` of a cosine that
# rounded to 1 - 1e-16 is already ~1.5e-8), so the plain vector sum is used instead.
ANGULAR_TOLERANCE_RAD = 1e-7


@dataclass(frozen=True)
class GeoPoint:
    """A longitude/latitude pair in decimal degrees."""

    lon: float
    lat: float

    def as_lonlat(self) -> tuple[float, float]:
        return (self.lon, self.lat)


def validate_point(point: GeoPoint) -> GeoPoint:
    """Return `point` unchanged, or raise `InvalidCoordinateError` if it is out of range."""
    if not (math.isfinite(point.lon) and math.isfinite(point.lat)):
        raise InvalidCoordinateError(f"Coordinates must be finite, got lon={point.lon} lat={point.lat}")
    if not -180.0 <= point.lon <= 180.0:
        raise InvalidCoordinateError(f"Longitude {point.lon} is outside [-180, 180]")
    if not -90.0 <= point.lat <= 90.0:
        raise InvalidCoordinateError(f"Latitude {point.lat} is outside [-90, 90]")
    return point


def to_radians(point: GeoPoint) -> tuple[float, float]:
    """Return `(lon, lat)` in radians."""
    return radians(point.lon), radians(point.lat)


def from_radians(lon_rad: float, lat_rad: float) -> GeoPoint:
    return GeoPoint(lon=degrees(lon_rad), lat=degrees(lat_rad))


def angular_distance(a: GeoPoint, b: GeoPoint) -> float:
    """Central angle between two points in radians (spherical law of cosines)."""
    lon1, lat1 = to_radians(a)
    lon2, lat2 = to_radians(b)
    c = sin(lat1) * sin(lat2) + cos(lat1) * cos(lat2) * cos(lon2 - lon1)
    # Rounding can push the cosine a hair outside [-1, 1].
    return acos(max(-1.0, min(1.0, c)))


def great_circle_midpoint(a: GeoPoint, b: GeoPoint) -> GeoPoint:
    """Point halfway between `a` and `b` along the great circle joining them.

    Identical inputs return `a` unchanged. Antipodal inputs raise
    `AntipodalPointsError`, since every great circle through them qualifies.
    """
    if a == b:
        return a
    d = angular_distance(a, b)
    if math.pi - d < ANGULAR_TOLERANCE_RAD:
        raise AntipodalPointsError(f"Midpoint is undefined for antipodal points {a} and {b}")

    lon1, lat1 = to_radians(a)
    lon2, lat2 = to_radians(b)

    # Slerp weights at f=0.5 are equal for both endpoints. atan2 ignores the common
    # scale, so nearly coincident points can skip it (sin(d) may round to 0).
    w = sin(0.5 * d) / sin(d) if d >= ANGULAR_TOLERANCE_RAD else 1.0

    x = w * cos(lat1) * cos(lon1) + w * cos(lat2) * cos(lon2)
    y = w * cos(lat1) * sin(lon1) + w * cos(lat2) * sin(lon2)
    z = w * sin(lat1) + w * sin(lat2)

    lat = atan2(z, sqrt(x * x + y * y))
    lon = atan2(y, x)
    return from_radians(lon, lat)


def offset_north(point: GeoPoint, degrees_north: float) -> GeoPoint:
    """Shift a point north by `degrees_north` (negative shifts south). No clamping."""
    return GeoPoint(lon=point.lon, lat=point.lat + degrees_north)


def frame_center(start: GeoPoint, destination: GeoPoint | None, north_offset: float) -> GeoPoint:
    """Where a globe camera should look: the route midpoint (or the start) pushed north.

    Shifting north moves the globe's horizon down so the route sits on the front face.
    """
    if destination is None:
        return offset_north(start, north_offset)
    return offset_north(great_circle_midpoint(start, destination), north_offset)
