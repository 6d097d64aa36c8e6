# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
GeoJSON geometry value types.

All geometries are immutable (frozen dataclasses) with structural equality.
Each class carries a class-level ``type`` tag from :class:`GeometryType`;
code that walks geometries dispatches on that tag rather than on methods
overridden per class.

Coordinates are stored as nested tuples of :class:`Position`. Constructors
accept any nested sequence of numbers (or Positions/Points) and normalise
it, so ``LineString([(0, 0), (1, 1)])`` and
``LineString((Position(0, 0), Position(1, 1)))`` are equal.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple, Union

from ..exceptions import InvalidRingError, WrongGeometryKindError


class GeometryType(str, Enum):
    """Closed set of geometry kinds, valued by their GeoJSON ``type`` name."""

    POINT = 'Point'
    MULTI_POINT = 'MultiPoint'
    LINE_STRING = 'LineString'
    MULTI_LINE_STRING = 'MultiLineString'
    POLYGON = 'Polygon'
    MULTI_POLYGON = 'MultiPolygon'
    GEOMETRY_COLLECTION = 'GeometryCollection'


# Nesting depth of the ``coordinates`` member for each coordinate-bearing kind
COORDINATE_DEPTH = {
    GeometryType.POINT: 0,
    GeometryType.MULTI_POINT: 1,
    GeometryType.LINE_STRING: 1,
    GeometryType.MULTI_LINE_STRING: 2,
    GeometryType.POLYGON: 2,
    GeometryType.MULTI_POLYGON: 3,
}


@dataclass(frozen=True)
class Position:
    """
    A longitude/latitude pair with optional altitude, in degrees.

    No range validation is applied.
    """

    longitude: float
    latitude: float
    altitude: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, 'longitude', float(self.longitude))
        object.__setattr__(self, 'latitude', float(self.latitude))
        if self.altitude is not None:
            object.__setattr__(self, 'altitude', float(self.altitude))

    @classmethod
    def of(cls, value: Any) -> 'Position':
        """
        Build a Position from a Position, a Point or a 2/3-length sequence.

        :param value: Value to normalise.
        :type value: Any
        :return: Position instance.
        :rtype: Position
        :raises ValueError: If a sequence does not have 2 or 3 items.
        """
        if isinstance(value, Position):
            return value
        if isinstance(value, Point):
            return value.coordinates
        values = tuple(value)
        if len(values) not in (2, 3):
            raise ValueError(f"A position needs 2 or 3 values, got {len(values)}")
        return cls(*values)

    def to_list(self) -> List[float]:
        """Return ``[lon, lat]`` or ``[lon, lat, alt]``."""
        if self.altitude is None:
            return [self.longitude, self.latitude]
        return [self.longitude, self.latitude, self.altitude]


def coerce_coordinates(values: Any, depth: int):
    """
    Normalise a nested coordinate sequence to nested tuples of Positions.

    :param values: Nested sequence of coordinates.
    :type values: Any
    :param depth: Nesting depth (0 for a single position).
    :type depth: int
    :return: Position (depth 0) or nested tuple of Positions.
    """
    if depth == 0:
        return Position.of(values)
    return tuple(coerce_coordinates(v, depth - 1) for v in values)


def coordinates_to_lists(values: Any, depth: int):
    """Inverse of :func:`coerce_coordinates`: nested plain lists of floats."""
    if depth == 0:
        return values.to_list()
    return [coordinates_to_lists(v, depth - 1) for v in values]


def validate_ring(ring: Sequence[Position]) -> None:
    """
    Check the linear ring rules: at least 4 positions, first equals last.

    Winding order is not checked.

    :param ring: Ring positions.
    :type ring: Sequence[Position]
    :raises InvalidRingError: If the ring is too short or not closed.
    """
    if len(ring) < 4:
        raise InvalidRingError(
            f"LinearRings need to be made up of 4 or more coordinates, got {len(ring)}"
        )
    if ring[0] != ring[-1]:
        raise InvalidRingError(
            "LinearRings require first and last coordinate to be identical."
        )


def _coerce_bbox(bbox: Any) -> Optional['BoundingBox']:
    if bbox is None or isinstance(bbox, BoundingBox):
        return bbox
    return BoundingBox.from_list(bbox)


@dataclass(frozen=True)
class Point:
    """A single position."""

    type: ClassVar[GeometryType] = GeometryType.POINT

    coordinates: Position
    bbox: Optional['BoundingBox'] = None

    def __post_init__(self):
        object.__setattr__(self, 'coordinates', Position.of(self.coordinates))
        object.__setattr__(self, 'bbox', _coerce_bbox(self.bbox))

    @classmethod
    def from_lng_lat(cls, longitude: float, latitude: float,
                     altitude: Optional[float] = None,
                     bbox: Optional['BoundingBox'] = None) -> 'Point':
        return cls(Position(longitude, latitude, altitude), bbox)

    @property
    def longitude(self) -> float:
        return self.coordinates.longitude

    @property
    def latitude(self) -> float:
        return self.coordinates.latitude

    @property
    def altitude(self) -> Optional[float]:
        return self.coordinates.altitude

    def to_dict(self) -> Dict[str, Any]:
        return geometry_to_dict(self)


@dataclass(frozen=True)
class MultiPoint:
    """An ordered sequence of positions."""

    type: ClassVar[GeometryType] = GeometryType.MULTI_POINT

    coordinates: Tuple[Position, ...]
    bbox: Optional['BoundingBox'] = None

    def __post_init__(self):
        object.__setattr__(self, 'coordinates', coerce_coordinates(self.coordinates, 1))
        object.__setattr__(self, 'bbox', _coerce_bbox(self.bbox))

    def points(self) -> List[Point]:
        return [Point(position) for position in self.coordinates]

    def to_dict(self) -> Dict[str, Any]:
        return geometry_to_dict(self)


@dataclass(frozen=True)
class LineString:
    """An ordered sequence of positions; most operations need at least two."""

    type: ClassVar[GeometryType] = GeometryType.LINE_STRING

    coordinates: Tuple[Position, ...]
    bbox: Optional['BoundingBox'] = None

    def __post_init__(self):
        object.__setattr__(self, 'coordinates', coerce_coordinates(self.coordinates, 1))
        object.__setattr__(self, 'bbox', _coerce_bbox(self.bbox))

    def to_dict(self) -> Dict[str, Any]:
        return geometry_to_dict(self)


@dataclass(frozen=True)
class MultiLineString:
    """An ordered sequence of line coordinate sequences."""

    type: ClassVar[GeometryType] = GeometryType.MULTI_LINE_STRING

    coordinates: Tuple[Tuple[Position, ...], ...]
    bbox: Optional['BoundingBox'] = None

    def __post_init__(self):
        object.__setattr__(self, 'coordinates', coerce_coordinates(self.coordinates, 2))
        object.__setattr__(self, 'bbox', _coerce_bbox(self.bbox))

    @classmethod
    def from_line_strings(cls, lines: Sequence[LineString],
                          bbox: Optional['BoundingBox'] = None) -> 'MultiLineString':
        return cls(tuple(line.coordinates for line in lines), bbox)

    def line_strings(self) -> List[LineString]:
        return [LineString(line) for line in self.coordinates]

    def to_dict(self) -> Dict[str, Any]:
        return geometry_to_dict(self)


@dataclass(frozen=True)
class Polygon:
    """
    A surface bounded by linear rings.

    The first ring is the outer boundary and any further rings are holes.
    Every ring must hold at least 4 positions and be closed; this is checked
    here so that consumers can rely on it. Rings are expected to follow the
    right-hand rule (outer counter-clockwise, holes clockwise) but that is
    not enforced.

    :raises InvalidRingError: If any ring breaks the linear ring rules.
    """

    type: ClassVar[GeometryType] = GeometryType.POLYGON

    coordinates: Tuple[Tuple[Position, ...], ...]
    bbox: Optional['BoundingBox'] = None

    def __post_init__(self):
        rings = coerce_coordinates(self.coordinates, 2)
        for ring in rings:
            validate_ring(ring)
        object.__setattr__(self, 'coordinates', rings)
        object.__setattr__(self, 'bbox', _coerce_bbox(self.bbox))

    @classmethod
    def from_outer_inner(cls, outer: LineString,
                         inner: Sequence[LineString] = (),
                         bbox: Optional['BoundingBox'] = None) -> 'Polygon':
        rings = [outer.coordinates] + [line.coordinates for line in inner]
        return cls(tuple(rings), bbox)

    def outer_line(self) -> LineString:
        return LineString(self.coordinates[0])

    def inner_lines(self) -> List[LineString]:
        return [LineString(ring) for ring in self.coordinates[1:]]

    def to_dict(self) -> Dict[str, Any]:
        return geometry_to_dict(self)


@dataclass(frozen=True)
class MultiPolygon:
    """An ordered sequence of polygon coordinate sequences."""

    type: ClassVar[GeometryType] = GeometryType.MULTI_POLYGON

    coordinates: Tuple[Tuple[Tuple[Position, ...], ...], ...]
    bbox: Optional['BoundingBox'] = None

    def __post_init__(self):
        polygons = coerce_coordinates(self.coordinates, 3)
        for rings in polygons:
            for ring in rings:
                validate_ring(ring)
        object.__setattr__(self, 'coordinates', polygons)
        object.__setattr__(self, 'bbox', _coerce_bbox(self.bbox))

    @classmethod
    def from_polygons(cls, polygons: Sequence[Polygon],
                      bbox: Optional['BoundingBox'] = None) -> 'MultiPolygon':
        return cls(tuple(polygon.coordinates for polygon in polygons), bbox)

    def polygons(self) -> List[Polygon]:
        return [Polygon(rings) for rings in self.coordinates]

    def to_dict(self) -> Dict[str, Any]:
        return geometry_to_dict(self)


@dataclass(frozen=True)
class GeometryCollection:
    """
    A heterogeneous sequence of geometries.

    Nesting another GeometryCollection is allowed, though discouraged by
    RFC 7946.
    """

    type: ClassVar[GeometryType] = GeometryType.GEOMETRY_COLLECTION

    geometries: Tuple['Geometry', ...] = field(default_factory=tuple)
    bbox: Optional['BoundingBox'] = None

    def __post_init__(self):
        geometries = tuple(self.geometries)
        for geometry in geometries:
            if not isinstance(geometry, GEOMETRY_CLASSES):
                raise WrongGeometryKindError(
                    f"GeometryCollection members must be geometries, got {type(geometry).__name__}"
                )
        object.__setattr__(self, 'geometries', geometries)
        object.__setattr__(self, 'bbox', _coerce_bbox(self.bbox))

    def to_dict(self) -> Dict[str, Any]:
        return geometry_to_dict(self)


@dataclass(frozen=True)
class BoundingBox:
    """
    Rectangular extent given by its southwest and northeast corners.

    Boxes crossing the antimeridian (west > east) can be represented but are
    left as given by every algorithm.
    """

    southwest: Point
    northeast: Point

    def __post_init__(self):
        if not isinstance(self.southwest, Point):
            object.__setattr__(self, 'southwest', Point(self.southwest))
        if not isinstance(self.northeast, Point):
            object.__setattr__(self, 'northeast', Point(self.northeast))

    @classmethod
    def from_lng_lats(cls, west: float, south: float, east: float, north: float,
                      southwest_altitude: Optional[float] = None,
                      northeast_altitude: Optional[float] = None) -> 'BoundingBox':
        return cls(
            Point.from_lng_lat(west, south, southwest_altitude),
            Point.from_lng_lat(east, north, northeast_altitude)
        )

    @classmethod
    def from_list(cls, values: Sequence[float]) -> 'BoundingBox':
        """
        Build a box from a flat GeoJSON ``bbox`` array.

        Six-value (3D) arrays are accepted; their altitude members are kept
        on the corner points.

        :param values: ``[w, s, e, n]`` or ``[w, s, lo, e, n, hi]``.
        :type values: Sequence[float]
        :return: BoundingBox instance.
        :rtype: BoundingBox
        :raises ValueError: If the array has neither 4 nor 6 values.
        """
        values = list(values)
        if len(values) == 4:
            return cls.from_lng_lats(*values)
        if len(values) == 6:
            west, south, low, east, north, high = values
            return cls.from_lng_lats(west, south, east, north, low, high)
        raise ValueError(f"A bbox needs 4 or 6 values, got {len(values)}")

    @property
    def west(self) -> float:
        return self.southwest.longitude

    @property
    def south(self) -> float:
        return self.southwest.latitude

    @property
    def east(self) -> float:
        return self.northeast.longitude

    @property
    def north(self) -> float:
        return self.northeast.latitude

    def to_list(self) -> List[float]:
        return [self.west, self.south, self.east, self.north]


Geometry = Union[Point, MultiPoint, LineString, MultiLineString,
                 Polygon, MultiPolygon, GeometryCollection]

GEOMETRY_CLASSES = (Point, MultiPoint, LineString, MultiLineString,
                    Polygon, MultiPolygon, GeometryCollection)

_CLASS_BY_TYPE = {cls.type: cls for cls in GEOMETRY_CLASSES}


def geometry_class(type_name: str):
    """
    Look up the geometry class for a GeoJSON ``type`` name.

    :raises WrongGeometryKindError: If the name is not a geometry type.
    """
    try:
        return _CLASS_BY_TYPE[GeometryType(type_name)]
    except ValueError:
        raise WrongGeometryKindError(f"Unknown geometry type: {type_name!r}")


def geometry_to_dict(geometry: Geometry) -> Dict[str, Any]:
    """
    Convert a geometry to its GeoJSON mapping.

    ``bbox`` is included only when set.

    :param geometry: Any geometry value.
    :type geometry: Geometry
    :return: GeoJSON mapping.
    :rtype: Dict[str, Any]
    """
    result: Dict[str, Any] = {'type': geometry.type.value}
    if geometry.type is GeometryType.GEOMETRY_COLLECTION:
        result['geometries'] = [geometry_to_dict(g) for g in geometry.geometries]
    else:
        depth = COORDINATE_DEPTH[geometry.type]
        result['coordinates'] = coordinates_to_lists(geometry.coordinates, depth)
    if geometry.bbox is not None:
        result['bbox'] = geometry.bbox.to_list()
    return result


def geometry_from_dict(data: Dict[str, Any]) -> Geometry:
    """
    Build a geometry from its GeoJSON mapping. Unknown members are ignored.

    :param data: GeoJSON geometry mapping.
    :type data: Dict[str, Any]
    :return: Geometry value.
    :rtype: Geometry
    :raises WrongGeometryKindError: If ``type`` is missing or not a geometry.
    """
    cls = geometry_class(data.get('type'))
    bbox = data.get('bbox')
    if cls is GeometryCollection:
        members = tuple(geometry_from_dict(g) for g in data.get('geometries', ()))
        return GeometryCollection(members, bbox)
    return cls(data['coordinates'], bbox)
