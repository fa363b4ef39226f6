"""Coordinate geometry — containment, centroids, great-circle distance, and path projection.

All points are (lat, lng) pairs in degrees. Polygons are sequences of points,
implicitly closed.
"""

import logging
import math
import re
from typing import Callable, Sequence

from tzpulse.models import LatLng

log = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0

Projection = Callable[[float, float], tuple[float, float] | None]

_PATH_POINT = re.compile(r"[ML]\s*(-?[\d.]+(?:e-?\d+)?),(-?[\d.]+(?:e-?\d+)?)")


def crosses_antimeridian(polygon: Sequence[LatLng]) -> bool:
    """True when any edge (including the closing one) jumps more than 180° of longitude."""
    n = len(polygon)
    for i in range(n):
        if abs(polygon[i][1] - polygon[i - 1][1]) > 180.0:
            return True
    return False


def unwrap_longitudes(polygon: Sequence[LatLng]) -> list[LatLng]:
    """Shift a seam-crossing polygon onto [0, 360) longitudes so its edges are contiguous.

    Polygons that do not cross the ±180° seam are returned unchanged.
    """
    if not crosses_antimeridian(polygon):
        return list(polygon)
    return [(lat, lng + 360.0 if lng < 0 else lng) for lat, lng in polygon]


def wrap_longitude(lng: float) -> float:
    """Normalize a longitude to [-180, 180)."""
    return (lng + 180.0) % 360.0 - 180.0


def point_in_polygon(point: LatLng, polygon: Sequence[LatLng]) -> bool:
    """Ray-casting containment test.

    Casts a ray from the point towards +longitude and counts edge crossings;
    an odd count means inside. Seam-crossing polygons are unwrapped first and
    the query longitude is shifted into the same range.
    """
    if len(polygon) < 3:
        return False
    lat, lng = point
    ring = polygon
    if crosses_antimeridian(polygon):
        ring = unwrap_longitudes(polygon)
        if lng < 0:
            lng += 360.0

    inside = False
    j = len(ring) - 1
    for i in range(len(ring)):
        lat_i, lng_i = ring[i]
        lat_j, lng_j = ring[j]
        if (lat_i > lat) != (lat_j > lat):
            crossing = lng_i + (lat - lat_i) * (lng_j - lng_i) / (lat_j - lat_i)
            if lng < crossing:
                inside = not inside
        j = i
    return inside


def centroid(polygon: Sequence[LatLng]) -> LatLng:
    """Arithmetic mean of the vertices.

    Good enough as a fallback anchor; not the area-weighted centroid.
    """
    if not polygon:
        raise ValueError("centroid of an empty polygon")
    ring = unwrap_longitudes(polygon)
    lat = sum(p[0] for p in ring) / len(ring)
    lng = sum(p[1] for p in ring) / len(ring)
    if lng >= 180.0:
        lng = wrap_longitude(lng)
    return (lat, lng)


def great_circle_distance(a: LatLng, b: LatLng, radius: float = EARTH_RADIUS_KM) -> float:
    """Haversine distance between two points, in the units of `radius` (km by default)."""
    phi1, phi2 = math.radians(a[0]), math.radians(b[0])
    dphi = math.radians(b[0] - a[0])
    dlam = math.radians(b[1] - a[1])
    h = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlam / 2) ** 2
    # Clamp to [0, 1] to handle floating point errors near antipodes
    h = max(0.0, min(1.0, h))
    return radius * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def angular_distance(a: LatLng, b: LatLng) -> float:
    """Central angle between two points, in degrees."""
    return math.degrees(great_circle_distance(a, b, radius=1.0))


def _fmt(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def to_path(polygon: Sequence[LatLng], projection: Projection) -> str:
    """Project a polygon and emit a closed SVG path ("M x,y L x,y ... Z").

    The projection maps (lat, lng) to view (x, y) and may return None for
    vertices it clips. Non-finite or clipped vertices are dropped. Returns an
    empty string when fewer than 3 usable vertices remain; never raises.
    """
    if len(polygon) < 3:
        log.debug("Degenerate boundary with %d vertices, empty path", len(polygon))
        return ""

    points: list[tuple[float, float]] = []
    for lat, lng in unwrap_longitudes(polygon):
        projected = projection(lat, lng)
        if projected is None:
            continue
        x, y = projected
        if not (math.isfinite(x) and math.isfinite(y)):
            continue
        points.append((x, y))

    if len(points) < 3:
        log.warning(
            "Only %d of %d vertices survived projection, empty path",
            len(points),
            len(polygon),
        )
        return ""

    head, *rest = points
    parts = [f"M{_fmt(head[0])},{_fmt(head[1])}"]
    parts.extend(f"L{_fmt(x)},{_fmt(y)}" for x, y in rest)
    parts.append("Z")
    return " ".join(parts)


def parse_path(path: str) -> list[tuple[float, float]]:
    """Read the vertices back out of a path produced by to_path."""
    return [(float(x), float(y)) for x, y in _PATH_POINT.findall(path)]


# --- Stock projections ---
# Callers are free to supply their own; these cover the dashboard's flat map.


def equirectangular(
    scale: float = 1.0,
    center: LatLng = (0.0, 0.0),
    translate: tuple[float, float] = (0.0, 0.0),
) -> Projection:
    """Plate carrée: x grows east, y grows south (SVG orientation)."""
    c_lat, c_lng = center
    tx, ty = translate

    def project(lat: float, lng: float) -> tuple[float, float]:
        return (tx + scale * (lng - c_lng), ty - scale * (lat - c_lat))

    return project


_MERCATOR_LIMIT = 85.05112878


def mercator(
    scale: float = 1.0,
    center: LatLng = (0.0, 0.0),
    translate: tuple[float, float] = (0.0, 0.0),
) -> Projection:
    """Spherical Mercator in degree-equivalent units, latitude clamped to ±85.05°."""
    c_lat, c_lng = center
    tx, ty = translate

    def _y(lat: float) -> float:
        lat = max(-_MERCATOR_LIMIT, min(_MERCATOR_LIMIT, lat))
        return math.degrees(math.log(math.tan(math.pi / 4 + math.radians(lat) / 2)))

    c_y = _y(c_lat)

    def project(lat: float, lng: float) -> tuple[float, float]:
        return (tx + scale * (lng - c_lng), ty - scale * (_y(lat) - c_y))

    return project
