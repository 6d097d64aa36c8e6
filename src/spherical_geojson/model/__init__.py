# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Geometry model: immutable GeoJSON-shaped value types."""

from .geometries import (
    GeometryType,
    Position,
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
    BoundingBox,
    Geometry,
    GEOMETRY_CLASSES,
    COORDINATE_DEPTH,
    validate_ring,
    geometry_to_dict,
    geometry_from_dict
)

from .features import (
    Feature,
    FeatureCollection,
    from_dict
)

__all__ = [
    # Geometries
    'GeometryType',
    'Position',
    'Point',
    'MultiPoint',
    'LineString',
    'MultiLineString',
    'Polygon',
    'MultiPolygon',
    'GeometryCollection',
    'BoundingBox',
    'Geometry',
    'GEOMETRY_CLASSES',
    'COORDINATE_DEPTH',
    'validate_ring',
    'geometry_to_dict',
    'geometry_from_dict',
    # Features
    'Feature',
    'FeatureCollection',
    'from_dict',
]
