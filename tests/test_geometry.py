"""Geometry tests: containment, centroid, haversine, and path projection."""

import math

import pytest

from tzpulse.geometry import (
    angular_distance,
    centroid,
    crosses_antimeridian,
    equirectangular,
    great_circle_distance,
    mercator,
    parse_path,
    point_in_polygon,
    to_path,
    unwrap_longitudes,
    wrap_longitude,
)

SQUARE = ((0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0))
BRITISH_ISLES = ((60.0, -11.0), (60.0, 2.0), (49.0, 2.0), (49.0, -11.0))
# Straddles the antimeridian
FIJI = ((-12.0, 175.0), (-12.0, -178.0), (-22.0, -178.0), (-22.0, 175.0))
# Concave "C" opening east
NOTCHED = ((0, 0), (0, 10), (3, 10), (3, 3), (7, 3), (7, 10), (10, 10), (10, 0))


def identity(lat, lng):
    return (lat, lng)


class TestPointInPolygon:
    @pytest.mark.parametrize(
        "point, expected",
        [
            ((5.0, 5.0), True),
            ((0.5, 9.5), True),
            ((-1.0, 5.0), False),
            ((5.0, 11.0), False),
            ((15.0, 15.0), False),
        ],
    )
    def test_square(self, point, expected):
        assert point_in_polygon(point, SQUARE) is expected

    def test_london(self):
        assert point_in_polygon((51.5, -0.1), BRITISH_ISLES)
        assert not point_in_polygon((48.85, 2.35), BRITISH_ISLES)

    def test_concave_notch_is_outside(self):
        assert not point_in_polygon((5.0, 8.0), NOTCHED)
        assert point_in_polygon((5.0, 1.0), NOTCHED)
        assert point_in_polygon((8.0, 8.0), NOTCHED)

    def test_vertex_order_does_not_matter(self):
        assert point_in_polygon((5.0, 5.0), tuple(reversed(SQUARE)))

    def test_fewer_than_three_vertices_contains_nothing(self):
        assert not point_in_polygon((0.0, 0.0), ((0.0, 0.0), (1.0, 1.0)))
        assert not point_in_polygon((0.0, 0.0), ())

    def test_seam_crossing_east_side(self):
        assert point_in_polygon((-17.71, 178.06), FIJI)

    def test_seam_crossing_west_side(self):
        assert point_in_polygon((-17.0, -179.0), FIJI)

    def test_seam_crossing_outside(self):
        assert not point_in_polygon((-17.0, -170.0), FIJI)
        assert not point_in_polygon((-17.0, 170.0), FIJI)
        assert not point_in_polygon((-17.0, 0.0), FIJI)


class TestAntimeridian:
    def test_detects_seam_edge(self):
        assert crosses_antimeridian(FIJI)
        assert not crosses_antimeridian(SQUARE)

    def test_closing_edge_counts(self):
        ring = ((0.0, -179.0), (5.0, -179.0), (5.0, 179.0))
        assert crosses_antimeridian(ring)

    def test_unwrap_shifts_western_half(self):
        lngs = [lng for _, lng in unwrap_longitudes(FIJI)]
        assert lngs == [175.0, 182.0, 182.0, 175.0]

    def test_unwrap_leaves_ordinary_polygon(self):
        assert unwrap_longitudes(SQUARE) == list(SQUARE)

    @pytest.mark.parametrize(
        "lng, expected",
        [(0.0, 0.0), (180.0, -180.0), (190.0, -170.0), (-190.0, 170.0), (360.0, 0.0)],
    )
    def test_wrap_longitude(self, lng, expected):
        assert wrap_longitude(lng) == pytest.approx(expected)


class TestCentroid:
    def test_square(self):
        assert centroid(SQUARE) == pytest.approx((5.0, 5.0))

    def test_is_vertex_mean_not_area_centroid(self):
        # Extra vertex on one edge pulls the mean but not the area centroid
        ring = ((0.0, 0.0), (0.0, 5.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0))
        assert centroid(ring) == pytest.approx((4.0, 5.0))

    def test_seam_crossing_wraps_back(self):
        lat, lng = centroid(FIJI)
        assert lat == pytest.approx(-17.0)
        assert lng == pytest.approx(178.5)

    def test_seam_crossing_mean_past_180(self):
        ring = ((0.0, 178.0), (0.0, -170.0), (5.0, -170.0))
        lat, lng = centroid(ring)
        assert lng == pytest.approx(-174.0)

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            centroid(())


class TestGreatCircleDistance:
    def test_same_point(self):
        assert great_circle_distance((40.758, -73.985), (40.758, -73.985)) == pytest.approx(0.0)

    def test_london_to_paris(self):
        d = great_circle_distance((51.5074, -0.1278), (48.8566, 2.3522))
        assert d == pytest.approx(344, abs=5)

    def test_quarter_meridian(self):
        d = great_circle_distance((0.0, 0.0), (90.0, 0.0))
        assert d == pytest.approx(math.pi * 6371.0 / 2)

    def test_symmetric(self):
        a, b = (35.68, 139.76), (-33.87, 151.21)
        assert great_circle_distance(a, b) == pytest.approx(great_circle_distance(b, a))

    def test_antipodes(self):
        assert angular_distance((23.4, 10.0), (-23.4, -170.0)) == pytest.approx(180.0)

    def test_across_the_seam_is_short(self):
        assert great_circle_distance((0.0, 179.5), (0.0, -179.5)) < 120


class TestToPath:
    def test_identity_round_trip(self):
        path = to_path(SQUARE, identity)
        assert path.startswith("M0,0 ")
        assert path.endswith(" Z")
        assert parse_path(path) == [tuple(p) for p in SQUARE]

    def test_vertex_count_preserved(self):
        path = to_path(NOTCHED, identity)
        assert len(parse_path(path)) == len(NOTCHED)
        assert path.count("L") == len(NOTCHED) - 1

    def test_exact_format(self):
        path = to_path(((0.0, 0.0), (0.0, 10.5), (-2.25, 10.0)), lambda lat, lng: (lng, lat))
        assert path == "M0,0 L10.5,0 L10,-2.25 Z"

    @pytest.mark.parametrize("polygon", [(), ((1.0, 1.0),), ((1.0, 1.0), (2.0, 2.0))])
    def test_degenerate_is_empty(self, polygon):
        assert to_path(polygon, identity) == ""

    def test_clipped_vertices_are_dropped(self):
        def clip_north(lat, lng):
            return None if lat > 5 else (lng, lat)

        path = to_path(SQUARE + ((2.0, 5.0),), clip_north)
        assert len(parse_path(path)) == 3

    def test_too_many_clipped_vertices_is_empty(self):
        assert to_path(SQUARE, lambda lat, lng: None if lat > 0 else (lng, lat)) == ""

    def test_non_finite_vertices_are_dropped(self):
        path = to_path(SQUARE, lambda lat, lng: (math.nan, lat) if lng > 5 else (lng, lat))
        assert path == ""

    def test_seam_crossing_outline_is_contiguous(self):
        xs = [x for x, _ in parse_path(to_path(FIJI, equirectangular()))]
        assert max(xs) - min(xs) == pytest.approx(7.0)


class TestProjections:
    def test_equirectangular_center_maps_to_translate(self):
        project = equirectangular(scale=2.0, center=(10.0, 20.0), translate=(100.0, 50.0))
        assert project(10.0, 20.0) == pytest.approx((100.0, 50.0))

    def test_equirectangular_north_is_up(self):
        project = equirectangular(scale=1.0, translate=(180.0, 90.0))
        assert project(90.0, -180.0) == pytest.approx((0.0, 0.0))
        assert project(-90.0, 180.0) == pytest.approx((360.0, 180.0))

    def test_mercator_equator_matches_equirectangular(self):
        assert mercator()(0.0, 45.0) == pytest.approx(equirectangular()(0.0, 45.0))

    def test_mercator_stretches_high_latitudes(self):
        _, y = mercator()(60.0, 0.0)
        assert -y > 60.0

    def test_mercator_clamps_poles(self):
        _, y = mercator()(90.0, 0.0)
        assert math.isfinite(y)

