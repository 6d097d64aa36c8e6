# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Bounding boxes and centers.

Boxes are plain ``[west, south, east, north]`` lists when computed, and
:class:`BoundingBox` values when passed between functions. Boxes crossing
the antimeridian are not handled.
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence, Union

import numpy as np

from ..meta import coord_all
from ..model import BoundingBox, Feature, Point, Polygon
from .distance import distance

logger = logging.getLogger(__name__)


def bbox(obj: Any) -> List[float]:
    """
    Extent of every coordinate of a geometry, Feature or FeatureCollection.

    :param obj: Any model value.
    :type obj: Any
    :return: ``[min_lon, min_lat, max_lon, max_lat]``. An input without
        coordinates gives ``[inf, inf, -inf, -inf]``.
    :rtype: List[float]
    """
    positions = coord_all(obj)
    if not positions:
        return [np.inf, np.inf, -np.inf, -np.inf]

    lonlat = np.array([[p.longitude, p.latitude] for p in positions], dtype=float)
    west, south = lonlat.min(axis=0)
    east, north = lonlat.max(axis=0)
    return [float(west), float(south), float(east), float(north)]


def _as_bounding_box(box: Union[BoundingBox, Sequence[float]]) -> BoundingBox:
    if isinstance(box, BoundingBox):
        return box
    return BoundingBox.from_list(box)


def bbox_polygon(box: Union[BoundingBox, Sequence[float]],
                 properties: Optional[Mapping[str, Any]] = None,
                 id: Optional[str] = None) -> Feature:
    """
    Polygon Feature covering a bounding box.

    The ring runs ``[w,s] -> [e,s] -> [e,n] -> [w,n] -> [w,s]``.

    :param box: BoundingBox or ``[w, s, e, n]`` list.
    :type box: Union[BoundingBox, Sequence[float]]
    :param properties: Properties of the returned Feature.
    :type properties: Optional[Mapping[str, Any]]
    :param id: Id of the returned Feature.
    :type id: Optional[str]
    :return: Feature with a single-ring Polygon.
    :rtype: Feature
    """
    box = _as_bounding_box(box)
    west, south, east, north = box.west, box.south, box.east, box.north
    ring = [
        (west, south),
        (east, south),
        (east, north),
        (west, north),
        (west, south),
    ]
    return Feature.from_geometry(Polygon([ring]), properties, id)


def envelope(obj: Any) -> Polygon:
    """Rectangular Polygon enclosing every coordinate of ``obj``."""
    return bbox_polygon(bbox(obj)).geometry


def square(box: Union[BoundingBox, Sequence[float]]) -> BoundingBox:
    """
    Smallest square-ish box containing ``box``.

    The south edge and the west edge are compared as great-circle distances;
    the shorter side is widened about the box center to match the longer one,
    in degrees.

    :param box: BoundingBox or ``[w, s, e, n]`` list.
    :type box: Union[BoundingBox, Sequence[float]]
    :return: Widened box.
    :rtype: BoundingBox
    """
    box = _as_bounding_box(box)
    west, south, east, north = box.west, box.south, box.east, box.north

    horizontal = distance(box.southwest, Point.from_lng_lat(east, south))
    vertical = distance(box.southwest, Point.from_lng_lat(west, north))

    if horizontal >= vertical:
        vertical_mid = (south + north) / 2
        half = (east - west) / 2
        return BoundingBox.from_lng_lats(west, vertical_mid - half,
                                         east, vertical_mid + half)

    horizontal_mid = (west + east) / 2
    half = (north - south) / 2
    return BoundingBox.from_lng_lats(horizontal_mid - half, south,
                                     horizontal_mid + half, north)


def center(obj: Any, properties: Optional[Mapping[str, Any]] = None,
           id: Optional[str] = None) -> Feature:
    """
    Point Feature at the center of the bounding box of ``obj``.

    :param obj: Any model value.
    :type obj: Any
    :param properties: Properties of the returned Feature.
    :type properties: Optional[Mapping[str, Any]]
    :param id: Id of the returned Feature.
    :type id: Optional[str]
    :return: Feature with a Point geometry.
    :rtype: Feature
    """
    west, south, east, north = bbox(obj)
    lon = (west + east) / 2
    lat = (south + north) / 2
    logger.debug("center: [%s, %s, %s, %s] -> (%s, %s)", west, south, east, north, lon, lat)
    return Feature.from_geometry(Point.from_lng_lat(lon, lat), properties, id)
