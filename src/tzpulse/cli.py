"""CLI entry point for the timezone engine.

    uv run tzpulse resolve 51.5 -0.1
    uv run tzpulse classify Europe/London --at 2024-06-15T12:00:00Z
    uv run tzpulse terminator --step 5
    uv run tzpulse outline Asia/Tokyo --scale 2
    uv run tzpulse snapshot Europe/Dublin
"""

import argparse
import json
import logging
import os
import sys
from dataclasses import asdict
from datetime import datetime, timezone

from dotenv import load_dotenv

from tzpulse import solar
from tzpulse.config import EngineSettings
from tzpulse.engine import TimezoneEngine
from tzpulse.errors import TzPulseError
from tzpulse.geometry import equirectangular
from tzpulse.temporal import format_utc_offset

log = logging.getLogger("tzpulse")


def _parse_instant(value: str | None) -> datetime:
    """ISO-8601 instant; naive values are taken as UTC, missing means now."""
    if value is None:
        return datetime.now(timezone.utc)
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _classification_json(c) -> dict:
    data = asdict(c)
    data["local_time"] = c.local_time.isoformat()
    data["utc_offset"] = format_utc_offset(c.utc_offset)
    return data


def _cmd_resolve(engine: TimezoneEngine, args) -> dict:
    point = engine.resolve(args.lat, args.lng)
    return {
        "region_id": point.region_id,
        "kind": str(point.kind),
        "distance": round(point.distance, 3),
        "color": engine.color_for(point.region_id),
    }


def _cmd_classify(engine: TimezoneEngine, args) -> dict:
    return _classification_json(engine.classify(args.zone, _parse_instant(args.at)))


def _cmd_terminator(engine: TimezoneEngine, args) -> dict:
    instant = _parse_instant(args.at)
    step = args.step if args.step is not None else engine.settings.terminator_step
    state = solar.terminator(instant, step=step)
    return {
        "instant": state.instant.isoformat(),
        "subsolar": list(state.subsolar),
        "declination": state.declination,
        "curve": [list(p) for p in state.curve],
    }


def _cmd_outline(engine: TimezoneEngine, args) -> dict:
    projection = equirectangular(scale=args.scale, translate=(180 * args.scale, 90 * args.scale))
    return {"region_id": args.zone, "path": engine.outline(args.zone, projection)}


def _cmd_snapshot(engine: TimezoneEngine, args) -> dict:
    snap = engine.snapshot(args.zone, _parse_instant(args.at))
    return {
        "region_id": snap.region_id,
        "boundary_id": snap.region.id,
        "name": snap.region.name,
        "color": snap.color,
        "is_lit": snap.is_lit,
        "classification": _classification_json(snap.classification),
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tzpulse", description=__doc__.splitlines()[0])
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("resolve", help="Resolve a coordinate to a timezone region")
    p.add_argument("lat", type=float)
    p.add_argument("lng", type=float)
    p.set_defaults(func=_cmd_resolve)

    p = sub.add_parser("classify", help="Business/night/weekend/DST flags for a zone")
    p.add_argument("zone")
    p.add_argument("--at", help="ISO-8601 instant (default: now)")
    p.set_defaults(func=_cmd_classify)

    p = sub.add_parser("terminator", help="Day/night terminator curve")
    p.add_argument("--at", help="ISO-8601 instant (default: now)")
    p.add_argument("--step", type=float, help="Longitude step in degrees")
    p.set_defaults(func=_cmd_terminator)

    p = sub.add_parser("outline", help="Equirectangular SVG path of a zone boundary")
    p.add_argument("zone")
    p.add_argument("--scale", type=float, default=1.0)
    p.set_defaults(func=_cmd_outline)

    p = sub.add_parser("snapshot", help="Colour, lit flag and classification for a zone")
    p.add_argument("zone")
    p.add_argument("--at", help="ISO-8601 instant (default: now)")
    p.set_defaults(func=_cmd_snapshot)

    return parser


def _log_level(name: str) -> int:
    try:
        return logging.getLevelNamesMapping()[name.strip().upper()]
    except KeyError:
        raise ValueError(f"TZPULSE_LOG_LEVEL={name!r}: unknown log level") from None


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    try:
        level = _log_level(os.environ.get("TZPULSE_LOG_LEVEL", "WARNING"))
    except ValueError as exc:
        print(f"tzpulse: {exc}", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)
    log.debug("Running %s", args.command)

    try:
        engine = TimezoneEngine(settings=EngineSettings.from_env())
        result = args.func(engine, args)
    except (TzPulseError, ValueError) as exc:
        print(f"tzpulse: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
