# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Unit tests for distance, extent and area measurement."""

import numpy as np
import pytest

from spherical_geojson import constants as c
from spherical_geojson.exceptions import (
    DegenerateInputError,
    InvalidUnitError,
    NegativeDistanceError,
    WrongGeometryKindError,
)
from spherical_geojson.measurement import (
    along,
    area,
    bbox,
    bbox_polygon,
    bearing,
    center,
    destination,
    distance,
    envelope,
    length,
    midpoint,
    polygon_area,
    ring_area,
    square,
)
from spherical_geojson.model import (
    BoundingBox,
    Feature,
    FeatureCollection,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Position,
)
from spherical_geojson.units import FACTORS


PT1 = Point.from_lng_lat(-75.343, 39.984)
PT2 = Point.from_lng_lat(-75.534, 39.123)

# One degree of arc in kilometers
KM_PER_DEGREE = np.radians(1) * 6373.0


def unit_square(west, south, size=1):
    return [(west, south), (west + size, south), (west + size, south + size),
            (west, south + size), (west, south)]


# Distance

def test_distance_reference_values():
    assert distance(PT1, PT2, c.UNIT_MILES) == pytest.approx(60.37218405837491, abs=1e-10)
    assert distance(PT1, PT2, c.UNIT_NAUTICAL_MILES) == pytest.approx(52.461979624130436, abs=1e-10)
    assert distance(PT1, PT2, c.UNIT_KILOMETERS) == pytest.approx(97.15957803131901, abs=1e-10)
    assert distance(PT1, PT2, c.UNIT_RADIANS) == pytest.approx(0.015245501024842149, abs=1e-10)
    assert distance(PT1, PT2, c.UNIT_DEGREES) == pytest.approx(0.8735028650863799, abs=1e-10)


def test_distance_defaults_to_kilometers():
    assert distance(PT1, PT2) == distance(PT1, PT2, c.UNIT_KILOMETERS)


@pytest.mark.parametrize('units', sorted(FACTORS))
def test_distance_is_symmetric(units):
    assert distance(PT1, PT2, units) == pytest.approx(distance(PT2, PT1, units), rel=1e-12)


def test_distance_of_identical_points_is_zero():
    assert distance(PT1, PT1) == 0


def test_distance_accepts_point_like_values():
    expected = distance(PT1, PT2)
    assert distance(PT1.coordinates, Feature(PT2)) == expected
    assert distance([-75.343, 39.984], (-75.534, 39.123)) == expected


def test_distance_unknown_unit():
    with pytest.raises(InvalidUnitError):
        distance(PT1, PT2, 'leagues')


# Bearing and destination

def test_bearing_cardinal_directions():
    origin = Point.from_lng_lat(0, 0)
    assert bearing(origin, Point.from_lng_lat(0, 10)) == pytest.approx(0, abs=1e-12)
    assert bearing(origin, Point.from_lng_lat(10, 0)) == pytest.approx(90)
    assert bearing(origin, Point.from_lng_lat(-10, 0)) == pytest.approx(-90)
    assert bearing(Point.from_lng_lat(0, 10), origin) == pytest.approx(180)


def test_bearing_is_nonzero_off_meridian():
    assert bearing(Point.from_lng_lat(-75.4, 39.4), PT2) != pytest.approx(0)


def test_bearing_due_south_with_signed_zero_longitude():
    heading = bearing(Point.from_lng_lat(0.0, 10.0), Point.from_lng_lat(-0.0, -10.0))
    assert heading == 180.0
    assert bearing(Point.from_lng_lat(-0.0, 10.0), Point.from_lng_lat(0.0, -10.0)) == 180.0


@pytest.mark.parametrize('dist, heading, units', [
    (10.0, 0.0, c.UNIT_KILOMETERS),
    (250.5, 45.0, c.UNIT_KILOMETERS),
    (1000.0, -120.0, c.UNIT_KILOMETERS),
    (75.0, 170.0, c.UNIT_MILES),
    (2.5, 90.0, c.UNIT_DEGREES),
])
def test_destination_inverts_distance(dist, heading, units):
    origin = Point.from_lng_lat(-75.0, 39.0)
    target = destination(origin, dist, heading, units)
    assert distance(origin, target, units) == pytest.approx(dist, rel=1e-9)


def test_destination_along_meridian():
    target = destination(Point.from_lng_lat(0, 0), KM_PER_DEGREE, 0)
    assert target.longitude == pytest.approx(0, abs=1e-12)
    assert target.latitude == pytest.approx(1)


def test_destination_zero_distance():
    target = destination(PT1, 0, 45)
    assert target.longitude == pytest.approx(PT1.longitude)
    assert target.latitude == pytest.approx(PT1.latitude)


def test_destination_negative_distance():
    with pytest.raises(NegativeDistanceError):
        destination(PT1, -1, 0)


@pytest.mark.parametrize('a, b', [
    ((0.0, 0.0), (10.0, 0.0)),
    ((0.0, 0.0), (0.0, 10.0)),
    ((0.0, 10.0), (0.0, 0.0)),
    ((-1.0, 10.0), (1.0, -1.0)),
    ((-5.0, -1.0), (5.0, 10.0)),
    ((22.5, 21.94304553343818), (92.10937499999999, 46.800059446787316)),
])
def test_midpoint_is_equidistant(a, b):
    pt1 = Point(a)
    pt2 = Point(b)
    mid = midpoint(pt1, pt2)
    assert distance(pt1, mid, c.UNIT_MILES) == pytest.approx(
        distance(pt2, mid, c.UNIT_MILES), abs=1e-6
    )


# Along

def test_along_single_coordinate_line():
    point = along(LineString([(1, 1)]), 5)
    assert point == Point.from_lng_lat(1, 1)


def test_along_clamps_to_line_ends():
    line = LineString([(0, 0), (0, 1), (1, 1)])
    assert along(line, 0) == Point.from_lng_lat(0, 0)
    assert along(line, -3) == Point.from_lng_lat(0, 0)
    assert along(line, 10000) == Point.from_lng_lat(1, 1)


def test_along_interpolates_inside_segment():
    line = LineString([(0, 0), (0, 1), (1, 1)])
    point = along(line, KM_PER_DEGREE / 2)
    assert point.longitude == pytest.approx(0, abs=1e-12)
    assert point.latitude == pytest.approx(0.5)


def test_along_second_segment():
    line = LineString([(0, 0), (0, 1), (1, 1)])
    point = along(line, 1.5 * KM_PER_DEGREE)
    assert 0 < point.longitude < 1
    assert point.latitude == pytest.approx(1, abs=1e-3)
    expected = destination(Point.from_lng_lat(0, 1), 0.5 * KM_PER_DEGREE,
                           bearing(Point.from_lng_lat(0, 1), Point.from_lng_lat(1, 1)))
    assert point.longitude == pytest.approx(expected.longitude)
    assert point.latitude == pytest.approx(expected.latitude)


def test_along_accepts_line_feature():
    line = LineString([(0, 0), (0, 1)])
    assert along(Feature(line), 10) == along(line, 10)


def test_along_rejects_empty_and_non_lines():
    with pytest.raises(DegenerateInputError):
        along(LineString([]), 1)
    with pytest.raises(WrongGeometryKindError):
        along(Polygon([unit_square(0, 0)]), 1)
    with pytest.raises(WrongGeometryKindError):
        along(Feature(Point.from_lng_lat(0, 0)), 1)


# Length

def test_length_single_coordinate_line():
    assert length(LineString([(1, 1)]), c.UNIT_METERS) == 0


def test_length_of_meridian_segment():
    assert length(LineString([(0, 0), (0, 1)])) == pytest.approx(KM_PER_DEGREE, rel=1e-12)


def test_length_of_points_is_zero():
    assert length(Point.from_lng_lat(0, 0)) == 0
    assert length(MultiPoint([(0, 0), (5, 5)])) == 0


def test_length_covers_every_ring(polygon_with_hole):
    outer, hole = polygon_with_hole.coordinates
    expected = length(LineString(outer)) + length(LineString(hole))
    assert length(polygon_with_hole) == pytest.approx(expected)
    assert length(MultiPolygon([polygon_with_hole.coordinates] * 2)) == pytest.approx(2 * expected)


def test_length_sums_collections():
    a = LineString([(0, 0), (0, 1)])
    b = LineString([(1, 0), (1, 2)])
    expected = length(a) + length(b)
    assert length(MultiLineString([a.coordinates, b.coordinates])) == pytest.approx(expected)
    assert length(FeatureCollection.from_features([Feature(a), Feature(b)])) == pytest.approx(expected)
    assert length(GeometryCollection((a, Point.from_lng_lat(5, 5), b))) == pytest.approx(expected)


# Extent

def test_bbox_of_point():
    assert bbox(Point.from_lng_lat(100, 0)) == [100, 0, 100, 0]


def test_bbox_of_line():
    line = LineString([(102, -10), (103, 1), (104, 0), (130, 4)])
    assert bbox(line) == [102, -10, 130, 4]


def test_bbox_of_geometry_collection():
    collection = GeometryCollection((
        LineString([(102, -10), (130, 4)]),
        GeometryCollection((Point.from_lng_lat(-1, -1),)),
    ))
    assert bbox(collection) == [-1, -10, 130, 4]


def test_bbox_without_coordinates():
    assert bbox(FeatureCollection()) == [np.inf, np.inf, -np.inf, -np.inf]
    assert bbox(Feature()) == [np.inf, np.inf, -np.inf, -np.inf]


def test_bbox_polygon_ring_order():
    feature = bbox_polygon(BoundingBox.from_lng_lats(102, -10, 130, 4))
    ring = feature.geometry.coordinates[0]
    assert ring == (
        Position(102, -10), Position(130, -10), Position(130, 4),
        Position(102, 4), Position(102, -10),
    )
    assert feature.geometry.inner_lines() == []


def test_bbox_polygon_from_list_with_id():
    feature = bbox_polygon([0, 0, 1, 1], {'name': 'box'}, 'TEST_ID')
    assert feature.id == 'TEST_ID'
    assert feature.get_property('name') == 'box'
    assert len(feature.geometry.coordinates[0]) == 5


def test_envelope():
    collection = FeatureCollection.from_features([
        Feature(Point.from_lng_lat(20, 0)),
        Feature(LineString([(102, -10), (130, 4)])),
        Feature(Polygon([unit_square(50, -5)])),
    ])
    expected = Polygon([[(20, -10), (130, -10), (130, 4), (20, 4), (20, -10)]])
    assert envelope(collection) == expected


def test_square():
    assert square(BoundingBox.from_lng_lats(0, 0, 5, 10)) == BoundingBox.from_lng_lats(-2.5, 0, 7.5, 10)
    assert square(BoundingBox.from_lng_lats(0, 0, 10, 5)) == BoundingBox.from_lng_lats(0, -2.5, 10, 7.5)
    assert square([0, 0, 10, 5]) == BoundingBox.from_lng_lats(0, -2.5, 10, 7.5)


def test_center():
    polygon = Polygon([[(113, -39), (154, -39), (154, -15), (113, -15), (113, -39)]])
    assert center(Feature(polygon)) == Feature(Point.from_lng_lat(133.5, -27.0))


def test_center_with_properties_and_id():
    polygon = Polygon([[(113, -39), (154, -39), (154, -15), (113, -15), (113, -39)]])
    result = center(polygon, {'key': 'value'}, 'TEST_ID')
    assert result.geometry == Point.from_lng_lat(133.5, -27.0)
    assert result.get_property('key') == 'value'
    assert result.id == 'TEST_ID'


# Area

def test_ring_area_of_degree_square():
    expected = c.EARTH_RADIUS ** 2 * np.radians(1) * np.sin(np.radians(1))
    ring = Polygon([unit_square(0, 0)]).coordinates[0]
    assert abs(ring_area(ring)) == pytest.approx(expected, rel=1e-9)


def test_ring_area_short_ring():
    assert ring_area([Position(0, 0), Position(1, 1)]) == 0


def test_area_is_winding_agnostic():
    ring = unit_square(10, 10)
    assert area(Polygon([ring])) == pytest.approx(area(Polygon([ring[::-1]])))
    assert area(Polygon([ring])) > 0


def test_area_subtracts_holes(polygon_with_hole):
    outer, hole = polygon_with_hole.coordinates
    expected = area(Polygon([outer])) - area(Polygon([hole]))
    assert area(polygon_with_hole) == pytest.approx(expected)
    assert polygon_area(polygon_with_hole.coordinates) == pytest.approx(expected)


def test_area_sums_members(polygon_with_hole):
    single = area(polygon_with_hole)
    multi = MultiPolygon([polygon_with_hole.coordinates, polygon_with_hole.coordinates])
    assert area(multi) == pytest.approx(2 * single)
    collection = FeatureCollection.from_features([
        Feature(polygon_with_hole),
        Feature(multi),
        Feature(LineString([(0, 0), (1, 1)])),
    ])
    assert area(collection) == pytest.approx(3 * single)
    assert area(GeometryCollection((polygon_with_hole, Point.from_lng_lat(0, 0)))) == pytest.approx(single)


def test_area_of_non_polygons_is_zero():
    assert area(LineString([(0, 0), (1, 1)])) == 0
    assert area(Polygon([])) == 0
