# src/globearc/api/app.py
"""
FastAPI application wiring.

This file creates the `FastAPI` instance and configures CORS for local map frontends.
Endpoint logic lives in `globearc.api.routes` and `globearc.flight.plan`.
"""

from __future__ import annotations

import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from globearc.core.logging import configure_logging

from .routes import router

configure_logging()

app = FastAPI(title="GlobeArc API", version="0.1.0")

# CORS (dev-friendly): allow a local globe frontend (e.g. http://localhost:5173) to call this API.
# Configure via env:
# - GLOBEARC_CORS_ORIGINS="http://localhost:5173,http://127.0.0.1:5173"
# - GLOBEARC_CORS_ALLOW_LOCAL=0 to disable the default localhost allowance
cors_origins = [s.strip() for s in os.getenv("GLOBEARC_CORS_ORIGINS", "").split(",") if s.strip()]
cors_allow_local = os.getenv("GLOBEARC_CORS_ALLOW_LOCAL", "1").strip().lower() in {"1", "true", "yes", "y"}
cors_origin_regex = r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$" if cors_allow_local and not cors_origins else ""
if cors_origins or cors_origin_regex:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_origin_regex=cors_origin_regex or None,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """422 without echoing inputs back; NaN/Infinity inputs are not valid JSON output."""
    errors = [{"loc": list(e.get("loc", ())), "msg": e.get("msg", ""), "type": e.get("type", "")} for e in exc.errors()]
    return JSONResponse(status_code=422, content={"detail": errors})


app.include_router(router)
