"""Engine facade tests: snapshots, outlines, and the shared default engine."""

from datetime import datetime, timedelta, timezone

import pytest

from tzpulse.catalog import load_catalog
from tzpulse.config import EngineSettings
from tzpulse.engine import TimezoneEngine, default_engine
from tzpulse.errors import UnknownRegion
from tzpulse.geometry import equirectangular, parse_path
from tzpulse.models import MatchKind

NOON_SATURDAY = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def engine():
    return TimezoneEngine()


class TestSnapshot:
    def test_related_zone_uses_canonical_boundary(self, engine):
        snap = engine.snapshot("Europe/Dublin", NOON_SATURDAY)
        assert snap.region_id == "Europe/Dublin"
        assert snap.region.id == "Europe/London"
        assert snap.color == "#ef4444"

    def test_related_zone_keeps_own_rules(self, engine):
        snap = engine.snapshot("Europe/Dublin", NOON_SATURDAY)
        assert snap.classification.region_id == "Europe/Dublin"
        assert snap.classification.utc_offset == timedelta(hours=1)
        assert snap.classification.local_time.hour == 13

    def test_lit_at_center(self, engine):
        assert engine.snapshot("Europe/London", NOON_SATURDAY).is_lit is True
        assert engine.snapshot("Asia/Tokyo", NOON_SATURDAY).is_lit is False

    def test_path_only_with_projection(self, engine):
        assert engine.snapshot("Asia/Tokyo", NOON_SATURDAY).path == ""
        path = engine.snapshot("Asia/Tokyo", NOON_SATURDAY, projection=equirectangular()).path
        assert path.startswith("M") and path.endswith("Z")

    def test_unknown_region(self, engine):
        with pytest.raises(UnknownRegion):
            engine.snapshot("Mars/Jezero", NOON_SATURDAY)

    def test_boundary_without_timezone_rules(self):
        catalog = load_catalog(
            [{"id": "Test/Nowhere", "name": "N", "color": "#000000",
              "vertices": ((0, 0), (0, 10), (10, 10), (10, 0))}]
        )
        with pytest.raises(UnknownRegion):
            TimezoneEngine(catalog).snapshot("Test/Nowhere", NOON_SATURDAY)


class TestOutline:
    def test_vertex_count(self, engine):
        path = engine.outline("Pacific/Honolulu", equirectangular())
        assert len(parse_path(path)) == 4

    def test_member_draws_canonical(self, engine):
        projection = equirectangular()
        assert engine.outline("Asia/Seoul", projection) == engine.outline("Asia/Tokyo", projection)

    def test_unknown(self, engine):
        with pytest.raises(UnknownRegion):
            engine.outline("Mars/Jezero", equirectangular())


class TestDelegation:
    def test_resolve(self, engine):
        point = engine.resolve(51.5, -0.1)
        assert point.region_id == "Europe/London"
        assert point.kind is MatchKind.EXACT

    def test_classify(self, engine):
        assert engine.classify("Europe/London", NOON_SATURDAY).abbreviation == "BST"

    def test_terminator_uses_configured_step(self):
        engine = TimezoneEngine(settings=EngineSettings(terminator_step=10.0))
        assert len(engine.terminator(NOON_SATURDAY).curve) == 37

    def test_color_for(self, engine):
        assert engine.color_for("Europe/Lisbon") == "#ef4444"

    def test_settings_flow_to_classifier(self):
        engine = TimezoneEngine(settings=EngineSettings(business_start=14, business_end=18))
        assert engine.classify("Europe/London", NOON_SATURDAY).is_business_hours is False


class TestDefaultEngine:
    def test_singleton(self):
        assert default_engine() is default_engine()

    def test_uses_embedded_catalog(self):
        assert "Pacific/Fiji" in default_engine().catalog
