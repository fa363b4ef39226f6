"""Boundary catalog — the read-only registry of timezone regions and related-id groups."""

import logging
import math
import threading
from typing import Iterable, Iterator, Mapping, Sequence

from tzpulse import boundaries
from tzpulse.errors import DegenerateBoundary, InvalidCoordinate, UnknownRegion
from tzpulse.geometry import centroid
from tzpulse.models import LatLng, RelatedRegionGroup, TimezoneRegion

log = logging.getLogger(__name__)


class BoundaryCatalog:
    """Immutable, insertion-ordered registry of TimezoneRegion records.

    Member identifiers of a RelatedRegionGroup resolve to their canonical
    region, so selecting "Europe/Dublin" highlights the "Europe/London"
    boundary.
    """

    def __init__(
        self,
        regions: Iterable[TimezoneRegion],
        groups: Iterable[RelatedRegionGroup] = (),
    ) -> None:
        self._regions: dict[str, TimezoneRegion] = {}
        for region in regions:
            if region.id in self._regions:
                raise ValueError(f"Duplicate region id: {region.id}")
            self._regions[region.id] = region

        self._groups: dict[str, RelatedRegionGroup] = {}
        self._canonical: dict[str, str] = {rid: rid for rid in self._regions}
        for group in groups:
            if group.canonical_id not in self._regions:
                raise UnknownRegion(group.canonical_id, "related group has no boundary")
            self._groups[group.canonical_id] = group
            for member in group.member_ids:
                # A member keeps its own boundary if it has one
                self._canonical.setdefault(member, group.canonical_id)

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[TimezoneRegion]:
        return iter(self._regions.values())

    def __contains__(self, region_id: object) -> bool:
        return region_id in self._canonical

    def all(self) -> tuple[TimezoneRegion, ...]:
        return tuple(self._regions.values())

    def canonical_id(self, region_id: str) -> str:
        """Identifier of the boundary region_id is drawn with."""
        try:
            return self._canonical[region_id]
        except KeyError:
            raise UnknownRegion(region_id) from None

    def lookup(self, region_id: str) -> TimezoneRegion:
        """Return the region for region_id (or its canonical boundary).

        Raises:
            UnknownRegion: region_id is neither a boundary nor a group member.
        """
        return self._regions[self.canonical_id(region_id)]

    def get(self, region_id: str) -> TimezoneRegion | None:
        canonical = self._canonical.get(region_id)
        return self._regions[canonical] if canonical is not None else None

    def related_ids(self, region_id: str) -> frozenset[str]:
        """All identifiers sharing a canonical boundary with region_id, itself included."""
        canonical = self.canonical_id(region_id)
        group = self._groups.get(canonical)
        if group is None:
            return frozenset((canonical,))
        return group.ids()


def _check_point(point: Sequence[float]) -> LatLng:
    lat, lng = float(point[0]), float(point[1])
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise InvalidCoordinate(lat, lng)
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0):
        raise InvalidCoordinate(lat, lng)
    return (lat, lng)


def region_from_record(record: Mapping) -> TimezoneRegion:
    """Build a TimezoneRegion from one boundary record (shape documented in boundaries.py).

    Raises:
        DegenerateBoundary: fewer than 3 vertices.
        InvalidCoordinate: a vertex or the centre is out of range.
        KeyError: a required field is missing.
    """
    vertices = tuple(_check_point(p) for p in record["vertices"])
    if len(vertices) > 1 and vertices[0] == vertices[-1]:
        vertices = vertices[:-1]
    if len(vertices) < 3:
        raise DegenerateBoundary(
            f"{record['id']}: boundary needs at least 3 vertices, got {len(vertices)}"
        )
    raw_center = record.get("center")
    center = _check_point(raw_center) if raw_center is not None else centroid(vertices)
    return TimezoneRegion(
        id=record["id"],
        name=record["name"],
        vertices=vertices,
        center=center,
        color=record["color"],
    )


def load_catalog(
    records: Iterable[Mapping],
    groups: Mapping[str, Sequence[str]] | None = None,
) -> BoundaryCatalog:
    """Build a catalog from boundary records and a canonical-id -> members mapping."""
    regions = [region_from_record(r) for r in records]
    related = [
        RelatedRegionGroup(canonical_id=cid, member_ids=tuple(members))
        for cid, members in (groups or {}).items()
    ]
    catalog = BoundaryCatalog(regions, related)
    log.debug("Loaded %d boundaries, %d related groups", len(regions), len(related))
    return catalog


_default: BoundaryCatalog | None = None
_default_lock = threading.Lock()


def default_catalog() -> BoundaryCatalog:
    """The embedded catalog, built once on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = load_catalog(boundaries.BOUNDARY_RECORDS, boundaries.RELATED_GROUPS)
    return _default
