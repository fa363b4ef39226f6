"""Data model definitions — explicit boundaries between catalog, compute, and caller layers."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import StrEnum
from typing import Callable

LatLng = tuple[float, float]  # (latitude, longitude) in decimal degrees


class MatchKind(StrEnum):
    EXACT = "exact"
    NEAREST = "nearest"


@dataclass(frozen=True)
class TimezoneRegion:
    """A named timezone boundary. Immutable once loaded."""

    id: str  # IANA identifier ("America/New_York")
    name: str  # Display name ("Eastern Time")
    vertices: tuple[LatLng, ...]  # Simple polygon, implicitly closed
    center: LatLng  # Marker position and nearest-match anchor
    color: str  # Canonical "#rrggbb" display colour


@dataclass(frozen=True)
class RelatedRegionGroup:
    """Identifiers drawn with one canonical boundary."""

    canonical_id: str
    member_ids: tuple[str, ...]

    def ids(self) -> frozenset[str]:
        return frozenset((self.canonical_id, *self.member_ids))


@dataclass(frozen=True)
class ResolvedPoint:
    """Result of resolving a coordinate against the catalog."""

    region_id: str
    kind: MatchKind
    distance: float  # Kilometres to the region centre; 0 for exact matches


@dataclass(frozen=True)
class SolarState:
    """Day/night geometry for a single instant."""

    instant: datetime  # UTC, tz-aware
    subsolar: LatLng
    declination: float  # Degrees
    curve: tuple[LatLng, ...]  # Terminator samples, west to east
    _is_lit: Callable[[float, float], bool] = field(repr=False, compare=False)

    def is_lit(self, lat: float, lng: float) -> bool:
        """True when the sun is above the horizon at (lat, lng) at this instant."""
        return self._is_lit(lat, lng)

    def night_polygon(self) -> tuple[LatLng, ...]:
        """Closed outline of the dark hemisphere, suitable for geometry.to_path.

        The curve is closed over whichever pole is currently dark, walking the
        pole in 90° steps so no edge jumps the ±180° seam.
        """
        if not self.curve:
            return ()
        pole = -90.0 if self.declination >= 0 else 90.0
        east = self.curve[-1][1]
        west = self.curve[0][1]
        cap = [(pole, east)]
        lng = east - 90.0
        while lng > west:
            cap.append((pole, lng))
            lng -= 90.0
        cap.append((pole, west))
        return self.curve + tuple(cap)


@dataclass(frozen=True)
class TemporalClassification:
    """Independent local-clock flags for a (zone, instant) pair."""

    region_id: str
    local_time: datetime  # Wall-clock time in region_id
    utc_offset: timedelta
    abbreviation: str  # "BST", "JST", ...
    is_business_hours: bool
    is_night_hours: bool
    is_weekend: bool
    is_daylight_saving: bool
    is_approaching_dst_transition: bool


@dataclass(frozen=True)
class RegionSnapshot:
    """Everything a dashboard tick needs to draw one selected zone."""

    region_id: str  # The zone the caller asked about
    region: TimezoneRegion  # Canonical boundary it is drawn with
    color: str
    classification: TemporalClassification
    is_lit: bool  # Evaluated at region.center
    path: str = ""  # Projected outline; empty unless a projection was given
