# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Shape conversion: exploding into points, combining into multi-geometries,
and turning polygons into lines.
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence, Union

from ..exceptions import DegenerateInputError, EmptyCollectionError, WrongGeometryKindError
from ..meta import coord_all
from ..model import (
    Feature,
    FeatureCollection,
    GeometryType,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Position,
)

logger = logging.getLogger(__name__)


def explode(obj: Any) -> FeatureCollection:
    """
    One Point Feature per coordinate of ``obj``.

    The closing coordinate of each polygon ring is left out.

    :param obj: Geometry, Feature or FeatureCollection.
    :type obj: Any
    :return: Point Features in encounter order.
    :rtype: FeatureCollection
    """
    positions = coord_all(obj, exclude_wrap_coord=True)
    return FeatureCollection.from_features(
        Feature.from_geometry(Point(position)) for position in positions
    )


def combine(collection: FeatureCollection) -> FeatureCollection:
    """
    Merge the features of a collection into multi-geometries by family.

    Points and MultiPoints become one MultiPoint, lines one MultiLineString
    and polygons one MultiPolygon; the output holds one Feature per family
    present, in that order. Properties are not carried over. Features
    without a point, line or polygon geometry are skipped.

    :param collection: FeatureCollection to combine.
    :type collection: FeatureCollection
    :return: Combined features, or ``collection`` itself if nothing could
        be combined.
    :rtype: FeatureCollection
    :raises EmptyCollectionError: If the collection has no features.
    """
    if not collection.features:
        raise EmptyCollectionError("combine requires a FeatureCollection with at least one Feature.")

    points: List[Position] = []
    lines = []
    polygons = []
    for feature in collection.features:
        geometry = feature.geometry
        kind = getattr(geometry, 'type', None)
        if kind is GeometryType.POINT:
            points.append(geometry.coordinates)
        elif kind is GeometryType.MULTI_POINT:
            points.extend(geometry.coordinates)
        elif kind is GeometryType.LINE_STRING:
            lines.append(geometry.coordinates)
        elif kind is GeometryType.MULTI_LINE_STRING:
            lines.extend(geometry.coordinates)
        elif kind is GeometryType.POLYGON:
            polygons.append(geometry.coordinates)
        elif kind is GeometryType.MULTI_POLYGON:
            polygons.extend(geometry.coordinates)

    combined = []
    if points:
        combined.append(Feature.from_geometry(MultiPoint(points)))
    if lines:
        combined.append(Feature.from_geometry(MultiLineString(lines)))
    if polygons:
        combined.append(Feature.from_geometry(MultiPolygon(polygons)))

    logger.debug("combine: %d points, %d lines, %d polygons",
                 len(points), len(lines), len(polygons))
    if not combined:
        return collection
    return FeatureCollection.from_features(combined)


def _rings_to_line(rings: Sequence[Sequence[Position]],
                   properties: Optional[Mapping[str, Any]]) -> Feature:
    if not rings:
        raise DegenerateInputError("polygon_to_line requires a Polygon with at least one ring.")
    if len(rings) == 1:
        return Feature.from_geometry(LineString(rings[0]), properties)
    return Feature.from_geometry(MultiLineString(rings), properties)


def polygon_to_line(obj: Any, properties: Optional[Mapping[str, Any]] = None
                    ) -> Union[Feature, FeatureCollection]:
    """
    Convert polygon rings to line geometries.

    A single-ring Polygon gives a LineString Feature and a Polygon with holes
    a MultiLineString Feature. A MultiPolygon gives a FeatureCollection with
    one such Feature per member polygon.

    :param obj: Polygon, MultiPolygon, or a Feature of either. A Feature
        passes its own properties on when ``properties`` is None.
    :type obj: Any
    :param properties: Properties for the produced Feature(s).
    :type properties: Optional[Mapping[str, Any]]
    :return: Feature or FeatureCollection of line Features.
    :rtype: Union[Feature, FeatureCollection]
    :raises DegenerateInputError: If a Polygon has no rings.
    :raises WrongGeometryKindError: If ``obj`` is not polygonal.
    """
    geometry = obj
    if isinstance(obj, Feature):
        geometry = obj.geometry
        if properties is None:
            properties = obj.properties

    kind = getattr(geometry, 'type', None)
    if kind is GeometryType.POLYGON:
        return _rings_to_line(geometry.coordinates, properties)
    if kind is GeometryType.MULTI_POLYGON:
        return FeatureCollection.from_features(
            _rings_to_line(rings, properties) for rings in geometry.coordinates
        )
    raise WrongGeometryKindError(
        "Invalid input to polygon_to_line: a Polygon or MultiPolygon is required",
        {'caller': 'polygon_to_line'}
    )
