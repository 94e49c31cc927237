"""
GlobeArc CLI entrypoint.

This CLI is intended for quick local inspection of midpoints, camera frames and arcs
without a map frontend. It delegates all planning to `globearc.flight.plan`.
"""

from __future__ import annotations

import argparse
import json
import math
import sys
from typing import Any

from globearc.config.settings import Settings, get_settings
from globearc.core.geo import GeoPoint, validate_point
from globearc.core.logging import configure_logging
from globearc.flight.plan import midpoint, plan_arc, plan_flight, plan_frame


def _point(lon: float, lat: float) -> GeoPoint:
    return validate_point(GeoPoint(lon=float(lon), lat=float(lat)))


def _optional_point(lon: float | None, lat: float | None, label: str) -> GeoPoint | None:
    if lon is None and lat is None:
        return None
    if lon is None or lat is None:
        raise ValueError(f"--{label}-lon and --{label}-lat must be given together")
    return _point(lon, lat)


def _destination_point(settings: Settings, destination_id: str) -> GeoPoint:
    place = settings.find_destination(destination_id)
    if place is None:
        known = ", ".join(p.id for p in settings.destinations)
        raise ValueError(f"Unknown destination '{destination_id}' (known: {known})")
    return place.location.to_core()


def _target_point(
    settings: Settings, destination_id: str | None, lon: float | None, lat: float | None, label: str
) -> GeoPoint | None:
    """Resolve `--destination` or `--{label}-lon/--{label}-lat`; the two are exclusive."""
    if destination_id is None:
        return _optional_point(lon, lat, label)
    if lon is not None or lat is not None:
        raise ValueError(f"--destination cannot be combined with --{label}-lon/--{label}-lat")
    return _destination_point(settings, destination_id)


def _finite_float(value: str) -> float:
    """argparse type: a float that is neither NaN nor infinite."""
    try:
        out = float(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid float value: {value!r}") from e
    if not math.isfinite(out):
        raise argparse.ArgumentTypeError(f"value must be finite, got {value!r}")
    return out


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _cmd_midpoint(args: argparse.Namespace) -> int:
    result = midpoint(_point(args.a_lon, args.a_lat), _point(args.b_lon, args.b_lat))
    if args.json:
        _print_json(result.model_dump(mode="json"))
        return 0
    print(f"midpoint: lon={result.lon:.6f} lat={result.lat:.6f}")
    return 0


def _cmd_frame(args: argparse.Namespace) -> int:
    """Handle the `frame` subcommand."""
    settings = get_settings()
    start = _optional_point(args.start_lon, args.start_lat, "start")
    destination = _target_point(settings, args.destination, args.dest_lon, args.dest_lat, "dest")

    frame = plan_frame(settings, start=start, destination=destination, north_offset_deg=args.north_offset)
    if args.json:
        _print_json(frame.model_dump(mode="json"))
        return 0
    c = frame.center
    print(f"center: lon={c.lon:.6f} lat={c.lat:.6f}  zoom={frame.zoom:g} pitch={frame.pitch:g} bearing={frame.bearing:g}")
    return 0


def _cmd_arc(args: argparse.Namespace) -> int:
    """Handle the `arc` subcommand."""
    settings = get_settings()
    start = _optional_point(args.start_lon, args.start_lat, "start") or settings.origin.location.to_core()
    end = _target_point(settings, args.destination, args.end_lon, args.end_lat, "end")
    if end is None:
        raise ValueError("arc needs --destination or --end-lon/--end-lat")

    result = plan_arc(
        settings,
        start,
        end,
        steps=args.steps,
        height_deg=args.height,
        progress=args.progress,
    )
    if args.json:
        _print_json(result.model_dump(mode="json"))
        return 0

    print(
        f"arc: steps={result.steps} height={result.height_deg:g} "
        f"visible={result.visible_points}/{result.total_points}"
    )
    for i, p in enumerate(result.visible):
        print(f"{i:>5}  {p.lon:11.6f} {p.lat:10.6f}")
    return 0


def _cmd_destinations(args: argparse.Namespace) -> int:
    settings = get_settings()
    if args.json:
        _print_json(
            {
                "origin": settings.origin.model_dump(mode="json"),
                "destinations": [d.model_dump(mode="json") for d in settings.destinations],
            }
        )
        return 0

    o = settings.origin
    print(f"origin: {o.id} ({o.name}) lon={o.location.lon} lat={o.location.lat}")
    for d in settings.destinations:
        flight = plan_flight(settings, d.id)
        c = flight.camera.center
        print(f"  {d.id:<12} {d.name:<12} lon={d.location.lon:<10} lat={d.location.lat:<10} camera=({c.lon:.3f}, {c.lat:.3f})")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("globearc.api.app:app", host=args.host, port=int(args.port), reload=bool(args.reload))
    return 0


def _add_point_args(p: argparse.ArgumentParser, label: str, *, required: bool = False) -> None:
    p.add_argument(f"--{label}-lon", dest=f"{label}_lon", type=_finite_float, required=required, default=None)
    p.add_argument(f"--{label}-lat", dest=f"{label}_lat", type=_finite_float, required=required, default=None)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the GlobeArc CLI."""
    parser = argparse.ArgumentParser(prog="globearc")
    parser.add_argument("--log-level", default=None, help="Override GLOBEARC_LOG_LEVEL (e.g. DEBUG)")
    sub = parser.add_subparsers(dest="command", required=True)

    mid = sub.add_parser("midpoint", help="Great-circle midpoint of two points.")
    _add_point_args(mid, "a", required=True)
    _add_point_args(mid, "b", required=True)
    mid.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    mid.set_defaults(func=_cmd_midpoint)

    fr = sub.add_parser("frame", help="Camera target for the origin (or --start) and an optional destination.")
    _add_point_args(fr, "start")
    _add_point_args(fr, "dest")
    fr.add_argument("--destination", type=str, default=None, help="Configured destination id (e.g. india)")
    fr.add_argument("--north-offset", type=_finite_float, default=None, help="Degrees to shift the center north")
    fr.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    fr.set_defaults(func=_cmd_frame)

    arc = sub.add_parser("arc", help="Arc points from the origin (or --start) to a destination.")
    _add_point_args(arc, "start")
    _add_point_args(arc, "end")
    arc.add_argument("--destination", type=str, default=None, help="Configured destination id (e.g. india)")
    arc.add_argument("--steps", type=int, default=None)
    arc.add_argument("--height", type=_finite_float, default=None, help="Maximum lift in degrees latitude")
    arc.add_argument("--progress", type=_finite_float, default=None, help="0..1; print only the visible prefix")
    arc.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    arc.set_defaults(func=_cmd_arc)

    dest = sub.add_parser("destinations", help="List the configured origin and destinations.")
    dest.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    dest.set_defaults(func=_cmd_destinations)

    srv = sub.add_parser("serve", help="Run the HTTP API with uvicorn.")
    srv.add_argument("--host", default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--reload", action="store_true")
    srv.set_defaults(func=_cmd_serve)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m globearc.cli`."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    func: Any = getattr(args, "func")
    try:
        return int(func(args))
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
