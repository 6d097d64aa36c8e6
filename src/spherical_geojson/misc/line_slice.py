# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Point projection onto lines and line slicing.

Projection casts a perpendicular ray through the query point for every
segment and intersects it with the segment in lon/lat space; the segment
end points are candidates too. Slicing is built on that projection, or on
cumulative great-circle distance for :func:`line_slice_along`.
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple

from .. import constants as c
from ..exceptions import (
    DegenerateInputError,
    NegativeDistanceError,
    StartBeyondLineError,
)
from ..measurement.distance import bearing, destination, distance, line_coordinates
from ..meta import get_coord
from ..model import Feature, LineString, Point, Position

logger = logging.getLogger(__name__)


def _line_intersects(x1: float, y1: float, x2: float, y2: float,
                     x3: float, y3: float, x4: float, y4: float
                     ) -> Optional[Tuple[float, float]]:
    """
    Intersection of segment (x1, y1)-(x2, y2) with segment (x3, y3)-(x4, y4).

    Both parameters must lie strictly inside (0, 1); touching at an end
    point does not count.

    :return: ``(x, y)`` of the intersection, or None for parallel or
        non-crossing segments.
    :rtype: Optional[Tuple[float, float]]
    """
    denominator = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    if denominator == 0:
        return None

    a = y1 - y3
    b = x1 - x3
    numerator1 = (x4 - x3) * a - (y4 - y3) * b
    numerator2 = (x2 - x1) * a - (y2 - y1) * b
    ua = numerator1 / denominator
    ub = numerator2 / denominator

    if 0 < ua < 1 and 0 < ub < 1:
        return x1 + ua * (x2 - x1), y1 + ua * (y2 - y1)
    return None


def _positions(coords: Any) -> List[Position]:
    if isinstance(coords, (LineString, Feature)):
        return list(line_coordinates(coords, 'nearest_point_on_line'))
    return [get_coord(value) for value in coords]


def nearest_point_on_line(point: Any, coords: Any,
                          units: str = c.UNIT_DEFAULT) -> Feature:
    """
    Closest point on a line to a given point.

    :param point: Query point.
    :type point: Any
    :param coords: LineString, LineString Feature or sequence of points/positions.
    :type coords: Any
    :param units: Unit of the reported distance (default kilometers).
    :type units: str
    :return: Point Feature with properties ``index`` (start index of the
        winning segment) and ``dist`` (distance from ``point``).
    :rtype: Feature
    :raises DegenerateInputError: If the line has fewer than 2 positions.
    """
    positions = _positions(coords)
    if len(positions) < 2:
        raise DegenerateInputError(
            "nearest_point_on_line requires a line of at least 2 coordinates."
        )
    target = get_coord(point)

    best_position = Position(float('inf'), float('inf'))
    best_dist = float('inf')
    best_index = None

    for i in range(len(positions) - 1):
        start = positions[i]
        stop = positions[i + 1]
        start_dist = distance(target, start, units)
        stop_dist = distance(target, stop, units)

        height = max(start_dist, stop_dist)
        direction = bearing(start, stop)
        ray1 = destination(target, height, direction + 90, units)
        ray2 = destination(target, height, direction - 90, units)
        crossing = _line_intersects(
            ray1.longitude, ray1.latitude,
            ray2.longitude, ray2.latitude,
            start.longitude, start.latitude,
            stop.longitude, stop.latitude,
        )

        candidates = [(start, start_dist), (stop, stop_dist)]
        if crossing is not None:
            crossing_position = Position(*crossing)
            candidates.append((crossing_position, distance(target, crossing_position, units)))

        for candidate, candidate_dist in candidates:
            if candidate_dist < best_dist:
                best_position, best_dist, best_index = candidate, candidate_dist, i

    logger.debug("nearest_point_on_line: segment %s at %s %s", best_index, best_dist, units)
    return Feature.from_geometry(
        Point(best_position),
        {c.INDEX_KEY: best_index, c.DISTANCE_KEY: best_dist}
    )


def line_slice(start: Any, stop: Any, line: Any) -> LineString:
    """
    Part of a line between the projections of two points.

    The two points may be given in either order along the line.

    :param start: First bounding point.
    :type start: Any
    :param stop: Second bounding point.
    :type stop: Any
    :param line: LineString or LineString Feature.
    :type line: Any
    :return: Sliced line, starting and ending at the projected points.
    :rtype: LineString
    :raises DegenerateInputError: If the line has fewer than 2 positions or
        the two points are equal.
    :raises WrongGeometryKindError: If ``line`` is not line-like.
    """
    coords = line_coordinates(line, 'line_slice')
    if len(coords) < 2:
        raise DegenerateInputError(
            "line_slice requires a LineString made up of at least 2 coordinates."
        )
    if get_coord(start) == get_coord(stop):
        raise DegenerateInputError("Start and stop points in line_slice cannot be equal.")

    ends = sorted(
        [nearest_point_on_line(start, coords), nearest_point_on_line(stop, coords)],
        key=lambda feature: feature.get_property(c.INDEX_KEY)
    )
    first_index = ends[0].get_property(c.INDEX_KEY)
    last_index = ends[1].get_property(c.INDEX_KEY)
    logger.debug("line_slice: segments %d..%d", first_index, last_index)

    positions = ([ends[0].geometry.coordinates]
                 + list(coords[first_index + 1:last_index + 1])
                 + [ends[1].geometry.coordinates])
    return LineString(positions)


def _interpolate_back(coords: Sequence[Position], index: int,
                      overshoot: float, units: str) -> Position:
    # step back from coords[index] towards the previous vertex
    if overshoot == 0 or index == 0:
        return coords[index]
    direction = bearing(coords[index], coords[index - 1])
    return destination(coords[index], overshoot, direction, units).coordinates


def line_slice_along(line: Any, start_dist: float, stop_dist: float,
                     units: str = c.UNIT_DEFAULT) -> LineString:
    """
    Part of a line between two distances measured from its start.

    If ``stop_dist`` lies past the end of the line, the slice runs to the
    last coordinate. A ``start_dist`` equal to the line length gives a line
    made of the last coordinate twice.

    :param line: LineString or LineString Feature.
    :type line: Any
    :param start_dist: Distance to the start of the slice.
    :type start_dist: float
    :param stop_dist: Distance to the end of the slice.
    :type stop_dist: float
    :param units: Unit of both distances (default kilometers).
    :type units: str
    :return: Sliced line.
    :rtype: LineString
    :raises NegativeDistanceError: If either distance is negative.
    :raises DegenerateInputError: If ``stop_dist`` is 0, not greater than
        ``start_dist``, or the line has fewer than 2 positions.
    :raises StartBeyondLineError: If ``start_dist`` exceeds the line length.
    """
    if start_dist < 0:
        raise NegativeDistanceError(start_dist)
    if stop_dist < 0:
        raise NegativeDistanceError(stop_dist)
    if stop_dist == 0:
        raise DegenerateInputError("stop_dist must be greater than 0.")

    coords = line_coordinates(line, 'line_slice_along')
    if len(coords) < 2:
        raise DegenerateInputError(
            "line_slice_along requires a LineString made up of at least 2 coordinates."
        )
    if start_dist == stop_dist:
        raise DegenerateInputError("Start and stop distance in line_slice_along cannot be equal.")
    if start_dist > stop_dist:
        raise DegenerateInputError(
            f"start_dist ({start_dist}) must be less than stop_dist ({stop_dist})."
        )

    travelled = 0.0
    sliced: List[Position] = []
    for index in range(len(coords)):
        if travelled > start_dist and not sliced:
            sliced.append(_interpolate_back(coords, index, travelled - start_dist, units))

        if travelled >= stop_dist:
            sliced.append(_interpolate_back(coords, index, travelled - stop_dist, units))
            break
        if travelled >= start_dist:
            sliced.append(coords[index])

        if index + 1 < len(coords):
            travelled += distance(coords[index], coords[index + 1], units)

    if travelled < start_dist:
        raise StartBeyondLineError(
            f"Start position {start_dist} {units} is beyond the line ({travelled} {units}).",
            {'start_dist': start_dist, 'length': travelled}
        )
    if len(sliced) < 2:
        # start_dist falls exactly on the end of the line
        sliced.append(coords[-1])

    logger.debug("line_slice_along: %s..%s %s -> %d positions",
                 start_dist, stop_dist, units, len(sliced))
    return LineString(sliced)
