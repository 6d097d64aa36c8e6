# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Unit tests for nearest-point-on-line projection and line slicing."""

import numpy as np
import pytest

from spherical_geojson import constants as c
from spherical_geojson.exceptions import (
    DegenerateInputError,
    NegativeDistanceError,
    StartBeyondLineError,
    WrongGeometryKindError,
)
from spherical_geojson.measurement import distance, length
from spherical_geojson.misc import line_slice, line_slice_along, nearest_point_on_line
from spherical_geojson.misc.line_slice import _line_intersects
from spherical_geojson.model import Feature, LineString, Point, Polygon, Position


MERIDIAN_LINE = LineString([(0, 0), (0, 1), (0, 2)])
BENT_LINE = LineString([(0, 0), (10, 0), (10, 10)])

# One degree of arc in kilometers
KM_PER_DEGREE = np.radians(1) * 6373.0


def km_to_degrees(km):
    return np.degrees(km / 6373.0)


# Segment intersection

def test_line_intersects_crossing():
    assert _line_intersects(0, -1, 0, 1, -1, 0, 1, 0) == pytest.approx((0, 0))


def test_line_intersects_parallel_and_disjoint():
    assert _line_intersects(0, 0, 1, 0, 0, 1, 1, 1) is None
    assert _line_intersects(0, 0, 1, 1, 2, 0, 3, -1) is None


def test_line_intersects_end_point_touch_is_excluded():
    assert _line_intersects(0, 0, 1, 0, 1, -1, 1, 1) is None


# Nearest point on line

def test_nearest_point_on_line_perpendicular():
    target = Point.from_lng_lat(1, 5)
    result = nearest_point_on_line(target, LineString([(0, 0), (0, 10)]))
    snapped = result.geometry
    assert snapped.longitude == pytest.approx(0, abs=1e-9)
    assert 4.5 < snapped.latitude < 5.5
    assert result.get_property(c.INDEX_KEY) == 0
    assert result.get_property(c.DISTANCE_KEY) == pytest.approx(distance(target, snapped))
    assert result.get_property(c.DISTANCE_KEY) < distance(target, Point.from_lng_lat(0, 5)) * 1.01


def test_nearest_point_on_line_beyond_end():
    target = Point.from_lng_lat(0, 12)
    result = nearest_point_on_line(target, [(0, 0), (0, 10)])
    assert result.geometry == Point.from_lng_lat(0, 10)
    assert result.get_property(c.INDEX_KEY) == 0
    assert result.get_property(c.DISTANCE_KEY) == pytest.approx(
        distance(target, Point.from_lng_lat(0, 10))
    )


def test_nearest_point_on_line_picks_segment():
    result = nearest_point_on_line(Point.from_lng_lat(12, 5), BENT_LINE)
    assert result.get_property(c.INDEX_KEY) == 1
    assert result.geometry.longitude == pytest.approx(10)


def test_nearest_point_on_line_vertex():
    result = nearest_point_on_line([10, 0], BENT_LINE)
    assert result.geometry == Point.from_lng_lat(10, 0)
    assert result.get_property(c.DISTANCE_KEY) == 0
    assert result.get_property(c.INDEX_KEY) == 0


def test_nearest_point_on_line_reports_units():
    target = Point.from_lng_lat(0, 12)
    km = nearest_point_on_line(target, [(0, 0), (0, 10)])
    miles = nearest_point_on_line(target, [(0, 0), (0, 10)], c.UNIT_MILES)
    assert miles.get_property(c.DISTANCE_KEY) == pytest.approx(
        km.get_property(c.DISTANCE_KEY) * 3960.0 / 6373.0
    )


def test_nearest_point_on_line_accepts_line_feature():
    target = Point.from_lng_lat(12, 5)
    assert nearest_point_on_line(target, Feature(BENT_LINE)) == nearest_point_on_line(target, BENT_LINE)


def test_nearest_point_on_line_rejects_non_line_feature():
    with pytest.raises(WrongGeometryKindError):
        nearest_point_on_line(Point.from_lng_lat(0, 0), Feature(Point.from_lng_lat(1, 1)))


def test_nearest_point_on_line_needs_two_coordinates():
    with pytest.raises(DegenerateInputError):
        nearest_point_on_line(Point.from_lng_lat(0, 0), [Point.from_lng_lat(1, 1)])


# Line slice

def test_line_slice_between_projections():
    sliced = line_slice(Point.from_lng_lat(2, 0), Point.from_lng_lat(10, 5), BENT_LINE)
    coords = sliced.coordinates
    assert len(coords) == 3
    assert coords[0].longitude == pytest.approx(2)
    assert coords[0].latitude == pytest.approx(0, abs=1e-9)
    assert coords[1] == Position(10, 0)
    assert coords[2].longitude == pytest.approx(10)
    assert 4.5 < coords[2].latitude < 5.5


def test_line_slice_orders_points_along_line():
    forward = line_slice(Point.from_lng_lat(2, 0), Point.from_lng_lat(10, 5), BENT_LINE)
    backward = line_slice(Point.from_lng_lat(10, 5), Point.from_lng_lat(2, 0), BENT_LINE)
    assert forward == backward


def test_line_slice_within_one_segment():
    line = LineString([(0, 0), (0, 10), (10, 10)])
    sliced = line_slice(Point.from_lng_lat(0.5, 2), Point.from_lng_lat(0.5, 8), line)
    assert len(sliced.coordinates) == 2
    assert sliced.coordinates[0].latitude < sliced.coordinates[1].latitude


def test_line_slice_accepts_line_feature():
    expected = line_slice(Point.from_lng_lat(2, 0), Point.from_lng_lat(10, 5), BENT_LINE)
    assert line_slice(Point.from_lng_lat(2, 0), Point.from_lng_lat(10, 5), Feature(BENT_LINE)) == expected


def test_line_slice_degenerate_input():
    with pytest.raises(DegenerateInputError):
        line_slice(Point.from_lng_lat(0, 0), Point.from_lng_lat(1, 1), LineString([(1, 1)]))
    with pytest.raises(DegenerateInputError):
        line_slice(Point.from_lng_lat(2, 0), Point.from_lng_lat(2, 0), BENT_LINE)


def test_line_slice_wrong_kind():
    polygon = Polygon([[(0, 0), (1, 0), (1, 1), (0, 0)]])
    with pytest.raises(WrongGeometryKindError):
        line_slice(Point.from_lng_lat(0, 0), Point.from_lng_lat(1, 1), polygon)
    with pytest.raises(WrongGeometryKindError):
        line_slice(Point.from_lng_lat(0, 0), Point.from_lng_lat(1, 1), Feature(polygon))


# Line slice along

def test_line_slice_along_interpolates_both_ends():
    sliced = line_slice_along(MERIDIAN_LINE, 50, 150)
    coords = sliced.coordinates
    assert len(coords) == 3
    assert coords[0].longitude == pytest.approx(0, abs=1e-12)
    assert coords[0].latitude == pytest.approx(km_to_degrees(50), abs=1e-9)
    assert coords[1] == Position(0, 1)
    assert coords[2].latitude == pytest.approx(km_to_degrees(150), abs=1e-9)


def test_line_slice_along_from_start():
    sliced = line_slice_along(MERIDIAN_LINE, 0, 150)
    coords = sliced.coordinates
    assert coords[0] == Position(0, 0)
    assert coords[1] == Position(0, 1)
    assert len(coords) == 3


def test_line_slice_along_cut_on_vertex():
    line = LineString([(0, 0), (0, 1), (0, 2), (0, 3)])
    sliced = line_slice_along(line, distance((0, 0), (0, 1)), 2.5 * KM_PER_DEGREE)
    coords = sliced.coordinates
    assert coords[0] == Position(0, 1)
    assert coords[1] == Position(0, 2)
    assert len(coords) == 3


def test_line_slice_along_stop_past_end():
    sliced = line_slice_along(MERIDIAN_LINE, 0, 500)
    assert sliced.coordinates == MERIDIAN_LINE.coordinates


def test_line_slice_along_within_one_segment():
    sliced = line_slice_along(MERIDIAN_LINE, 10, 20)
    coords = sliced.coordinates
    assert len(coords) == 2
    assert coords[0].latitude == pytest.approx(km_to_degrees(10), abs=1e-9)
    assert coords[1].latitude == pytest.approx(km_to_degrees(20), abs=1e-9)


def test_line_slice_along_accepts_line_feature():
    assert line_slice_along(Feature(MERIDIAN_LINE), 50, 150) == line_slice_along(MERIDIAN_LINE, 50, 150)


def test_line_slice_along_start_at_line_end():
    line = LineString([(0, 0), (1, 0)])
    total = length(line)
    sliced = line_slice_along(line, total, total + 1)
    assert sliced.coordinates == (Position(1, 0), Position(1, 0))


def test_line_slice_along_start_beyond_line():
    with pytest.raises(StartBeyondLineError):
        line_slice_along(MERIDIAN_LINE, 300, 400)


def test_line_slice_along_invalid_distances():
    with pytest.raises(NegativeDistanceError):
        line_slice_along(MERIDIAN_LINE, -1, 10)
    with pytest.raises(NegativeDistanceError):
        line_slice_along(MERIDIAN_LINE, 1, -10)
    with pytest.raises(DegenerateInputError):
        line_slice_along(MERIDIAN_LINE, 0, 0)
    with pytest.raises(DegenerateInputError):
        line_slice_along(MERIDIAN_LINE, 10, 10)
    with pytest.raises(DegenerateInputError):
        line_slice_along(MERIDIAN_LINE, 20, 10)


def test_line_slice_along_single_coordinate_line():
    with pytest.raises(DegenerateInputError):
        line_slice_along(LineString([(1, 1)]), 0, 10)
