# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Great-circle distance, bearing and destination on a spherical Earth.

Distances use the haversine formula. Angles are in degrees; distances are in
the requested unit (kilometers by default). Wherever a point is expected, a
Point, a Position, a Point Feature or a ``[lon, lat]`` sequence is accepted.
"""

import logging
import math
from typing import Any, List, Sequence

from .. import constants as c
from ..exceptions import DegenerateInputError, WrongGeometryKindError
from ..meta import feature_of, get_coord, iter_geometries
from ..model import Feature, Geometry, GeometryType, LineString, Point, Position
from ..units import (
    degrees_to_radians,
    distance_to_radians,
    radians_to_degrees,
    radians_to_distance,
)

logger = logging.getLogger(__name__)


def distance(point1: Any, point2: Any, units: str = c.UNIT_DEFAULT) -> float:
    """
    Haversine distance between two points.

    :param point1: First point.
    :type point1: Any
    :param point2: Second point.
    :type point2: Any
    :param units: Unit of the result (default kilometers).
    :type units: str
    :return: Non-negative distance; 0 for identical points.
    :rtype: float
    :raises InvalidUnitError: If ``units`` is not a known unit.
    """
    p1 = get_coord(point1)
    p2 = get_coord(point2)
    d_lat = degrees_to_radians(p2.latitude - p1.latitude)
    d_lon = degrees_to_radians(p2.longitude - p1.longitude)
    lat1 = degrees_to_radians(p1.latitude)
    lat2 = degrees_to_radians(p2.latitude)

    a = (math.sin(d_lat / 2) ** 2
         + math.sin(d_lon / 2) ** 2 * math.cos(lat1) * math.cos(lat2))
    return radians_to_distance(2 * math.atan2(math.sqrt(a), math.sqrt(1 - a)), units)


def bearing(point1: Any, point2: Any) -> float:
    """
    Initial great-circle bearing from ``point1`` towards ``point2``.

    :param point1: Origin.
    :type point1: Any
    :param point2: Target.
    :type point2: Any
    :return: Bearing in degrees, 0 is north, positive clockwise, in (-180, 180].
    :rtype: float
    """
    p1 = get_coord(point1)
    p2 = get_coord(point2)
    lon1 = degrees_to_radians(p1.longitude)
    lon2 = degrees_to_radians(p2.longitude)
    lat1 = degrees_to_radians(p1.latitude)
    lat2 = degrees_to_radians(p2.latitude)

    a = math.sin(lon2 - lon1) * math.cos(lat2)
    b = (math.cos(lat1) * math.sin(lat2)
         - math.sin(lat1) * math.cos(lat2) * math.cos(lon2 - lon1))
    result = radians_to_degrees(math.atan2(a, b))
    # atan2 gives -pi for a signed-zero longitude difference
    if result <= -180.0:
        return 180.0
    return result


def destination(origin: Any, dist: float, bearing_deg: float,
                units: str = c.UNIT_DEFAULT) -> Point:
    """
    Point reached by travelling ``dist`` from ``origin`` along ``bearing_deg``.

    The resulting longitude is not normalised to [-180, 180].

    :param origin: Starting point.
    :type origin: Any
    :param dist: Non-negative distance to travel.
    :type dist: float
    :param bearing_deg: Bearing in degrees (-180 to 180).
    :type bearing_deg: float
    :param units: Unit of ``dist`` (default kilometers).
    :type units: str
    :return: Destination point.
    :rtype: Point
    :raises NegativeDistanceError: If ``dist`` is negative.
    """
    start = get_coord(origin)
    lon1 = degrees_to_radians(start.longitude)
    lat1 = degrees_to_radians(start.latitude)
    bearing_rad = degrees_to_radians(bearing_deg)
    radians = distance_to_radians(dist, units)

    lat2 = math.asin(math.sin(lat1) * math.cos(radians)
                     + math.cos(lat1) * math.sin(radians) * math.cos(bearing_rad))
    lon2 = lon1 + math.atan2(math.sin(bearing_rad) * math.sin(radians) * math.cos(lat1),
                             math.cos(radians) - math.sin(lat1) * math.sin(lat2))
    return Point.from_lng_lat(radians_to_degrees(lon2), radians_to_degrees(lat2))


def midpoint(point1: Any, point2: Any) -> Point:
    """
    Point half-way along the great circle between two points.

    :param point1: First point.
    :type point1: Any
    :param point2: Second point.
    :type point2: Any
    :return: Midpoint.
    :rtype: Point
    """
    dist = distance(point1, point2)
    heading = bearing(point1, point2)
    return destination(point1, dist / 2, heading)


def line_coordinates(line: Any, caller: str) -> Sequence[Position]:
    """
    Positions of a LineString or of a LineString Feature.

    :raises WrongGeometryKindError: For any other input.
    """
    if isinstance(line, Feature):
        feature_of(line, GeometryType.LINE_STRING.value, caller)
        return line.geometry.coordinates
    if isinstance(line, LineString):
        return line.coordinates
    raise WrongGeometryKindError(
        f"Invalid input to {caller}: a LineString or LineString Feature is required",
        {'caller': caller}
    )


def along(line: Any, dist: float, units: str = c.UNIT_DEFAULT) -> Point:
    """
    Point at a given distance along a line.

    Distances at or below 0 give the first coordinate and distances at or
    beyond the line length give the last one.

    :param line: LineString or LineString Feature.
    :type line: Any
    :param dist: Distance from the start of the line.
    :type dist: float
    :param units: Unit of ``dist`` (default kilometers).
    :type units: str
    :return: Point on the line.
    :rtype: Point
    :raises DegenerateInputError: If the line has no coordinates.
    """
    coords = line_coordinates(line, 'along')
    if not coords:
        raise DegenerateInputError("along requires a line with at least one coordinate.")
    if dist <= 0:
        return Point(coords[0])

    travelled = 0.0
    for i in range(len(coords) - 1):
        segment = distance(coords[i], coords[i + 1], units)
        if travelled + segment > dist:
            remaining = dist - travelled
            if remaining == 0:
                return Point(coords[i])
            logger.debug("along: %s %s falls in segment %d", dist, units, i)
            return destination(coords[i], remaining,
                               bearing(coords[i], coords[i + 1]), units)
        travelled += segment
    return Point(coords[-1])


def _coordinate_sequences(geometry: Geometry) -> List[Sequence[Position]]:
    kind = geometry.type
    if kind is GeometryType.LINE_STRING:
        return [geometry.coordinates]
    if kind in (GeometryType.MULTI_LINE_STRING, GeometryType.POLYGON):
        return list(geometry.coordinates)
    if kind is GeometryType.MULTI_POLYGON:
        return [ring for polygon in geometry.coordinates for ring in polygon]
    return []


def _sequence_length(coords: Sequence[Position], units: str) -> float:
    return sum(distance(coords[i], coords[i + 1], units) for i in range(len(coords) - 1))


def length(obj: Any, units: str = c.UNIT_DEFAULT) -> float:
    """
    Total length of the lines in a geometry, Feature or FeatureCollection.

    Polygons contribute the perimeter of every ring (holes included). Points
    contribute nothing.

    :param obj: Any model value.
    :type obj: Any
    :param units: Unit of the result (default kilometers).
    :type units: str
    :return: Summed great-circle length.
    :rtype: float
    """
    total = 0.0
    for geometry in iter_geometries(obj):
        for coords in _coordinate_sequences(geometry):
            total += _sequence_length(coords, units)
    return total
