"""Engine facade: wires catalog, resolver, classifier, colours, and solar geometry together."""

import logging
import threading
from datetime import datetime

from tzpulse import solar
from tzpulse.catalog import BoundaryCatalog, default_catalog
from tzpulse.colors import ColorAssigner
from tzpulse.config import EngineSettings
from tzpulse.geometry import Projection, to_path
from tzpulse.models import (
    RegionSnapshot,
    ResolvedPoint,
    SolarState,
    TemporalClassification,
)
from tzpulse.resolver import PointResolver
from tzpulse.temporal import TemporalClassifier

log = logging.getLogger(__name__)


class TimezoneEngine:
    """Single entry point for dashboard callers.

    Holds no per-call state: every method is a pure function of its
    arguments and the immutable catalog, so one engine can be shared across
    threads.
    """

    def __init__(
        self,
        catalog: BoundaryCatalog | None = None,
        settings: EngineSettings | None = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else default_catalog()
        self.settings = settings or EngineSettings()
        self.resolver = PointResolver(self.catalog)
        self.classifier = TemporalClassifier(self.settings)
        self.colors = ColorAssigner(self.catalog)

    def resolve(self, lat: float, lng: float) -> ResolvedPoint:
        return self.resolver.resolve(lat, lng)

    def classify(self, region_id: str, instant: datetime) -> TemporalClassification:
        return self.classifier.classify(region_id, instant)

    def terminator(self, instant: datetime) -> SolarState:
        return solar.terminator(instant, step=self.settings.terminator_step)

    def color_for(self, region_id: str) -> str:
        return self.colors.color_for(region_id)

    def outline(self, region_id: str, projection: Projection) -> str:
        """Projected boundary path for region_id (or its canonical boundary).

        Raises:
            UnknownRegion: region_id has no boundary.
        """
        return to_path(self.catalog.lookup(region_id).vertices, projection)

    def snapshot(
        self,
        region_id: str,
        instant: datetime,
        projection: Projection | None = None,
    ) -> RegionSnapshot:
        """Everything needed to draw region_id on one redraw tick.

        The classification uses region_id's own rules even when it is drawn
        with a related canonical boundary.

        Raises:
            UnknownRegion: region_id has no boundary or no timezone rules.
        """
        region = self.catalog.lookup(region_id)
        classification = self.classifier.classify(region_id, instant)
        lat, lng = region.center
        return RegionSnapshot(
            region_id=region_id,
            region=region,
            color=self.colors.color_for(region_id),
            classification=classification,
            is_lit=solar.is_lit((lat, lng), instant),
            path=to_path(region.vertices, projection) if projection is not None else "",
        )


_default: TimezoneEngine | None = None
_default_lock = threading.Lock()


def default_engine() -> TimezoneEngine:
    """Shared engine over the embedded catalog and environment settings, built once."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = TimezoneEngine(settings=EngineSettings.from_env())
                log.debug("Default engine ready with %d regions", len(_default.catalog))
    return _default
