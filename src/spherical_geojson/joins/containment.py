# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Point-in-polygon tests.

Containment is decided in planar lon/lat space with even-odd ray casting,
so ring winding order does not matter. Points lying exactly on an edge are
detected separately and resolved by ``ignore_boundary``.
"""

import logging
from typing import Any, Sequence, Tuple

from ..exceptions import WrongGeometryKindError
from ..meta import get_coord
from ..model import Feature, FeatureCollection, GeometryType, Position

logger = logging.getLogger(__name__)


def _cross(a: Tuple[float, float], b: Tuple[float, float], p: Tuple[float, float]) -> float:
    return (b[0] - a[0]) * (p[1] - a[1]) - (b[1] - a[1]) * (p[0] - a[0])


def _on_segment(p: Tuple[float, float], a: Tuple[float, float], b: Tuple[float, float]) -> bool:
    """True if ``p`` lies on the closed segment ``a``-``b``."""
    if _cross(a, b, p) != 0:
        return False
    return (min(a[0], b[0]) <= p[0] <= max(a[0], b[0])
            and min(a[1], b[1]) <= p[1] <= max(a[1], b[1]))


def in_ring(point: Position, ring: Sequence[Position], ignore_boundary: bool = False) -> bool:
    """
    Even-odd test of a position against a single ring.

    :param point: Position to test.
    :type point: Position
    :param ring: Ring positions; a closing duplicate is ignored.
    :type ring: Sequence[Position]
    :param ignore_boundary: If True, a point on an edge is reported outside.
    :type ignore_boundary: bool
    :return: True if the point is inside the ring.
    :rtype: bool
    """
    vertices = [(p.longitude, p.latitude) for p in ring]
    if len(vertices) > 1 and vertices[0] == vertices[-1]:
        vertices = vertices[:-1]

    x, y = point.longitude, point.latitude
    inside = False
    j = len(vertices) - 1
    for i in range(len(vertices)):
        xi, yi = vertices[i]
        xj, yj = vertices[j]
        if _on_segment((x, y), (xi, yi), (xj, yj)):
            return not ignore_boundary
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def _in_polygon(point: Position, rings: Sequence[Sequence[Position]],
                ignore_boundary: bool) -> bool:
    if not rings or not in_ring(point, rings[0], ignore_boundary):
        return False
    # hole edges belong to the polygon unless ignore_boundary is set
    return not any(in_ring(point, hole, not ignore_boundary) for hole in rings[1:])


def inside(point: Any, polygon: Any, ignore_boundary: bool = False) -> bool:
    """
    Whether a point lies inside a Polygon or MultiPolygon.

    A point inside a hole is outside the polygon. A MultiPolygon contains the
    point if any of its members does.

    :param point: Point, Position or Point Feature.
    :type point: Any
    :param polygon: Polygon, MultiPolygon, or a Feature of either.
    :type polygon: Any
    :param ignore_boundary: If True, points on an outer or hole edge are
        treated as outside; by default they count as inside.
    :type ignore_boundary: bool
    :return: True if the point is inside.
    :rtype: bool
    :raises WrongGeometryKindError: If ``polygon`` is not polygonal.
    """
    position = get_coord(point)
    geometry = polygon.geometry if isinstance(polygon, Feature) else polygon
    kind = getattr(geometry, 'type', None)

    if kind is GeometryType.POLYGON:
        return _in_polygon(position, geometry.coordinates, ignore_boundary)
    if kind is GeometryType.MULTI_POLYGON:
        return any(_in_polygon(position, rings, ignore_boundary)
                   for rings in geometry.coordinates)
    raise WrongGeometryKindError(
        "Invalid input to inside: a Polygon or MultiPolygon is required",
        {'caller': 'inside'}
    )


def points_within_polygon(points: FeatureCollection,
                          polygons: FeatureCollection) -> FeatureCollection:
    """
    Point Features lying inside at least one polygon Feature.

    :param points: FeatureCollection of Point Features.
    :type points: FeatureCollection
    :param polygons: FeatureCollection of Polygon or MultiPolygon Features.
    :type polygons: FeatureCollection
    :return: The matching point Features, unchanged, in input order, each
        at most once.
    :rtype: FeatureCollection
    """
    matched = [
        feature for feature in points.features
        if any(inside(feature, polygon) for polygon in polygons.features)
    ]
    logger.debug("points_within_polygon: %d of %d points matched",
                 len(matched), len(points.features))
    return FeatureCollection.from_features(matched)
