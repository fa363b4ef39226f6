"""Point resolver: map a coordinate to a catalog region, exact polygon hit first, nearest centre second."""

import logging
import math

from timezonefinder import TimezoneFinder

from tzpulse.catalog import BoundaryCatalog
from tzpulse.errors import InvalidCoordinate, UnknownRegion
from tzpulse.geometry import great_circle_distance, point_in_polygon
from tzpulse.models import MatchKind, ResolvedPoint

log = logging.getLogger(__name__)


def validate_coordinate(lat: float, lng: float) -> None:
    """Raise InvalidCoordinate unless lat ∈ [-90, 90] and lng ∈ [-180, 180]."""
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise InvalidCoordinate(lat, lng)
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0):
        raise InvalidCoordinate(lat, lng)


class PointResolver:
    """Resolve (lat, lng) against a BoundaryCatalog.

    Linear in catalog size. Regions are visited in catalog order, so the first
    containing polygon wins overlaps and the first-listed centre wins distance
    ties.
    """

    def __init__(self, catalog: BoundaryCatalog) -> None:
        self.catalog = catalog
        self._finder: TimezoneFinder | None = None

    def resolve(self, lat: float, lng: float) -> ResolvedPoint:
        """Return the region containing the point, or the one with the closest centre.

        Raises:
            InvalidCoordinate: lat/lng out of range or not finite.
            UnknownRegion: the catalog is empty.
        """
        validate_coordinate(lat, lng)
        point = (lat, lng)

        for region in self.catalog:
            if point_in_polygon(point, region.vertices):
                return ResolvedPoint(region_id=region.id, kind=MatchKind.EXACT, distance=0.0)

        best: ResolvedPoint | None = None
        for region in self.catalog:
            d = great_circle_distance(point, region.center)
            if best is None or d < best.distance:
                best = ResolvedPoint(region_id=region.id, kind=MatchKind.NEAREST, distance=d)

        if best is None:
            raise UnknownRegion(f"{lat},{lng}", "catalog is empty")
        log.debug("No boundary contains (%s, %s); nearest is %s", lat, lng, best.region_id)
        return best

    def local_zone(self, lat: float, lng: float) -> str:
        """Precise IANA zone at a point, for classifying the clicked location itself.

        Uses the timezonefinder shapefile data when it has an answer and falls
        back to the catalog resolution otherwise.
        """
        validate_coordinate(lat, lng)
        if self._finder is None:
            self._finder = TimezoneFinder()
        tz_str = self._finder.timezone_at(lng=lng, lat=lat)
        if tz_str is None:
            log.debug("timezonefinder has no zone at (%s, %s), using catalog", lat, lng)
            return self.resolve(lat, lng).region_id
        return tz_str
