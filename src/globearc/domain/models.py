"""
Domain models (Pydantic).

These types are the JSON contract between the geometry core and its callers:
- API/CLI inputs (`MidpointRequest`, `FrameRequest`, `ArcRequest`)
- configured places (`Place`)
- outputs (`Position`, `CameraFrame`, `ArcResult`, `FlightView`)

Inputs use `GeoPoint`, which rejects out-of-range coordinates. Outputs use `Position`,
which does not: a camera center shifted north may sit above latitude 90.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, FiniteFloat, field_validator

from globearc.core import geo
from globearc.core.camera import CameraOptions


class GeoPoint(BaseModel):
    """A geographic input point in decimal degrees."""

    lon: float = Field(..., ge=-180, le=180)
    lat: float = Field(..., ge=-90, le=90)

    def to_core(self) -> geo.GeoPoint:
        return geo.GeoPoint(lon=self.lon, lat=self.lat)


class Position(BaseModel):
    """A computed point; not range-checked."""

    lon: float
    lat: float

    @classmethod
    def from_core(cls, point: geo.GeoPoint) -> "Position":
        return cls(lon=point.lon, lat=point.lat)


class Place(BaseModel):
    """A named, selectable location (origin or destination)."""

    id: str
    name: str
    location: GeoPoint

    @field_validator("id")
    @classmethod
    def _normalize_id(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("place id must not be empty")
        return value


class MidpointRequest(BaseModel):
    a: GeoPoint
    b: GeoPoint


class FrameRequest(BaseModel):
    """Camera framing request. `start` defaults to the configured origin."""

    start: GeoPoint | None = None
    destination: GeoPoint | None = None
    north_offset_deg: FiniteFloat | None = None
    settings_overrides: dict[str, Any] | None = None


class ArcRequest(BaseModel):
    """Arc request. Omitted knobs fall back to settings; `progress` trims the result."""

    start: GeoPoint
    end: GeoPoint
    steps: int | None = Field(default=None, ge=1, le=10_000)
    height_deg: FiniteFloat | None = None
    progress: float | None = Field(default=None, ge=0, le=1)
    settings_overrides: dict[str, Any] | None = None


class CameraFrame(BaseModel):
    center: Position
    zoom: float
    pitch: float
    bearing: float

    @classmethod
    def from_core(cls, options: CameraOptions) -> "CameraFrame":
        return cls(
            center=Position.from_core(options.center),
            zoom=options.zoom,
            pitch=options.pitch,
            bearing=options.bearing,
        )


class ArcResult(BaseModel):
    """Full arc plus the prefix visible at `progress` (all of it when progress is 1)."""

    steps: int
    height_deg: float
    progress: float
    total_points: int
    visible_points: int
    points: list[Position]
    visible: list[Position]


class FlightView(BaseModel):
    """Everything a globe renderer needs after a destination is selected."""

    origin: Place
    destination: Place
    camera: CameraFrame
    arc: ArcResult
