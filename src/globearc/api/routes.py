"""
API routes.

Endpoints:
- GET  `/api/health`: liveness probe.
- GET  `/api/settings`: camera/arc defaults for the UI.
- GET  `/api/destinations`: configured origin + destinations.
- GET  `/api/destinations/{id}/flight`: camera + arc from the origin to a destination.
- POST `/api/midpoint`: great-circle midpoint of two points.
- POST `/api/frame`: camera target for a (start, destination) pair.
- POST `/api/arc`: arc points between two points, optionally trimmed by progress.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from fastapi import APIRouter, HTTPException, Query

from globearc.config.overrides import apply_settings_overrides
from globearc.config.settings import Settings, get_settings
from globearc.domain.models import (
    ArcRequest,
    ArcResult,
    CameraFrame,
    FlightView,
    FrameRequest,
    MidpointRequest,
    Position,
)
from globearc.flight.plan import midpoint, plan_arc, plan_flight, plan_frame

logger = logging.getLogger(__name__)

router = APIRouter()

T = TypeVar("T")


def _run(fn: Callable[[], T]) -> T:
    # Core errors are ValueError subclasses (bad step count, antipodes, bad overrides).
    try:
        return fn()
    except ValueError as e:
        logger.warning("Rejected request: %s", e)
        raise HTTPException(
            status_code=400,
            detail={"code": "VALIDATION_ERROR", "message": str(e)},
        ) from e


def _settings_for(overrides: dict[str, Any] | None) -> Settings:
    return apply_settings_overrides(get_settings(), overrides)


@router.get("/api/health")
def get_health() -> dict:
    return {"status": "ok"}


@router.get("/api/settings")
def get_public_settings() -> dict:
    """Return the tuning knobs the UI needs (camera + arc defaults)."""
    settings = get_settings()
    return {
        "app": {"name": settings.app.name},
        "camera": settings.camera.model_dump(mode="json"),
        "arc": settings.arc.model_dump(mode="json"),
    }


@router.get("/api/destinations")
def get_destinations() -> dict:
    settings = get_settings()
    return {
        "origin": settings.origin.model_dump(mode="json"),
        "destinations": [d.model_dump(mode="json") for d in settings.destinations],
    }


@router.get("/api/destinations/{destination_id}/flight", response_model=FlightView)
def get_flight(destination_id: str, progress: float = Query(1.0, ge=0, le=1)) -> FlightView:
    """Camera frame and arc for the origin -> `destination_id` flight."""
    settings = get_settings()
    try:
        return _run(lambda: plan_flight(settings, destination_id, progress=progress))
    except KeyError as e:
        raise HTTPException(
            status_code=404,
            detail={"code": "DESTINATION_NOT_FOUND", "message": f"Unknown destination: {destination_id}"},
        ) from e


@router.post("/api/midpoint", response_model=Position)
def post_midpoint(req: MidpointRequest) -> Position:
    return _run(lambda: midpoint(req.a.to_core(), req.b.to_core()))


@router.post("/api/frame", response_model=CameraFrame)
def post_frame(req: FrameRequest) -> CameraFrame:
    """Camera target; without a destination the view centers on the start."""

    def _frame() -> CameraFrame:
        settings = _settings_for(req.settings_overrides)
        return plan_frame(
            settings,
            start=req.start.to_core() if req.start else None,
            destination=req.destination.to_core() if req.destination else None,
            north_offset_deg=req.north_offset_deg,
        )

    return _run(_frame)


@router.post("/api/arc", response_model=ArcResult)
def post_arc(req: ArcRequest) -> ArcResult:
    def _arc() -> ArcResult:
        settings = _settings_for(req.settings_overrides)
        return plan_arc(
            settings,
            req.start.to_core(),
            req.end.to_core(),
            steps=req.steps,
            height_deg=req.height_deg,
            progress=req.progress,
        )

    return _run(_arc)
