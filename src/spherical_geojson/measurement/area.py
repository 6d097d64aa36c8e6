# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Geodesic area of polygons.

Ring areas follow the spherical-excess approximation of Chamberlain and
Duquette ("Some Algorithms for Polygons on a Sphere", JPL, 2007) with the
WGS84 equatorial radius.
"""

from typing import Any, Sequence

import numpy as np

from .. import constants as c
from ..meta import iter_geometries
from ..model import GeometryType, Position


def ring_area(ring: Sequence[Position]) -> float:
    """
    Signed area of a single ring in square meters.

    The sign depends on the winding order; rings with fewer than three
    positions have zero area.

    :param ring: Ring positions (closed or not).
    :type ring: Sequence[Position]
    :return: Signed area in square meters.
    :rtype: float
    """
    if len(ring) <= 2:
        return 0.0

    lon = np.radians([p.longitude for p in ring])
    lat = np.radians([p.latitude for p in ring])
    # term i pairs lon[i+2] - lon[i] with lat[i+1], indices wrapping around
    terms = (np.roll(lon, -2) - lon) * np.sin(np.roll(lat, -1))
    return float(np.sum(terms) * c.EARTH_RADIUS ** 2 / 2)


def polygon_area(rings: Sequence[Sequence[Position]]) -> float:
    """
    Area of a polygon given as rings: outer area minus the hole areas.

    :param rings: Outer ring followed by holes.
    :type rings: Sequence[Sequence[Position]]
    :return: Area in square meters.
    :rtype: float
    """
    if not rings:
        return 0.0
    total = abs(ring_area(rings[0]))
    for hole in rings[1:]:
        total -= abs(ring_area(hole))
    return total


def area(obj: Any) -> float:
    """
    Area of every polygon in a geometry, Feature or FeatureCollection.

    Non-polygonal geometries contribute 0.

    :param obj: Any model value.
    :type obj: Any
    :return: Area in square meters.
    :rtype: float
    """
    total = 0.0
    for geometry in iter_geometries(obj):
        if geometry.type is GeometryType.POLYGON:
            total += polygon_area(geometry.coordinates)
        elif geometry.type is GeometryType.MULTI_POLYGON:
            total += sum(polygon_area(rings) for rings in geometry.coordinates)
    return total
