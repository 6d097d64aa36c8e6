# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Coordinate and geometry traversal.

Walks any model value (geometry, Feature, FeatureCollection, nested
GeometryCollections) with an explicit worklist so that deeply nested
collections never hit the recursion limit. Dispatch is on the geometry
``type`` tag.
"""

from typing import Any, Iterator, List

from ..exceptions import WrongGeometryKindError
from ..model import (
    Feature,
    FeatureCollection,
    GEOMETRY_CLASSES,
    Geometry,
    GeometryType,
    Point,
    Position,
)


def iter_geometries(obj: Any) -> Iterator[Geometry]:
    """
    Yield every non-collection geometry contained in ``obj``, in order.

    Features without a geometry contribute nothing.

    :param obj: Geometry, Feature or FeatureCollection.
    :type obj: Any
    :return: Iterator over leaf geometries.
    :rtype: Iterator[Geometry]
    :raises WrongGeometryKindError: If ``obj`` is not a model value.
    """
    stack = [obj]
    while stack:
        item = stack.pop()
        if item is None:
            continue
        if isinstance(item, FeatureCollection):
            stack.extend(reversed(item.features))
        elif isinstance(item, Feature):
            stack.append(item.geometry)
        elif isinstance(item, GEOMETRY_CLASSES):
            if item.type is GeometryType.GEOMETRY_COLLECTION:
                stack.extend(reversed(item.geometries))
            else:
                yield item
        else:
            raise WrongGeometryKindError(
                f"Expected a GeoJSON value, got {type(item).__name__}"
            )


def geometry_coords(geometry: Geometry, exclude_wrap_coord: bool = False) -> List[Position]:
    """
    Flatten the coordinates of a single non-collection geometry.

    :param geometry: Leaf geometry.
    :type geometry: Geometry
    :param exclude_wrap_coord: Drop the closing position of polygon rings.
    :type exclude_wrap_coord: bool
    :return: Positions in encounter order.
    :rtype: List[Position]
    """
    kind = geometry.type
    if kind is GeometryType.POINT:
        return [geometry.coordinates]
    if kind in (GeometryType.MULTI_POINT, GeometryType.LINE_STRING):
        return list(geometry.coordinates)
    if kind is GeometryType.MULTI_LINE_STRING:
        return [position for line in geometry.coordinates for position in line]
    if kind is GeometryType.POLYGON:
        rings = geometry.coordinates
    elif kind is GeometryType.MULTI_POLYGON:
        rings = [ring for polygon in geometry.coordinates for ring in polygon]
    else:
        raise WrongGeometryKindError(f"Cannot flatten a {kind.value} directly")
    wrap_offset = 1 if exclude_wrap_coord else 0
    return [position for ring in rings for position in ring[:len(ring) - wrap_offset]]


def coord_all(obj: Any, exclude_wrap_coord: bool = False) -> List[Position]:
    """
    Collect every position of a geometry, Feature or FeatureCollection.

    :param obj: Any model value.
    :type obj: Any
    :param exclude_wrap_coord: If True, the closing position of each polygon
        ring (a repeat of its first position) is left out.
    :type exclude_wrap_coord: bool
    :return: Flat list of Positions in encounter order.
    :rtype: List[Position]
    """
    coords = []
    for geometry in iter_geometries(obj):
        coords.extend(geometry_coords(geometry, exclude_wrap_coord))
    return coords


def get_coord(obj: Any) -> Position:
    """
    Unwrap a single position from a point-like value.

    Accepts a Position, a Point, a Feature with a Point geometry, or a
    2/3-length numeric sequence.

    :param obj: Point-like value.
    :type obj: Any
    :return: The position.
    :rtype: Position
    :raises WrongGeometryKindError: If ``obj`` is not point-like.
    """
    if isinstance(obj, Position):
        return obj
    if isinstance(obj, Point):
        return obj.coordinates
    if isinstance(obj, Feature):
        if isinstance(obj.geometry, Point):
            return obj.geometry.coordinates
        raise WrongGeometryKindError("A Feature with a Point geometry is required.")
    if isinstance(obj, (list, tuple)):
        try:
            return Position.of(obj)
        except (TypeError, ValueError):
            pass
    raise WrongGeometryKindError(
        f"A Position, Point or Point Feature is required, got {type(obj).__name__}"
    )
