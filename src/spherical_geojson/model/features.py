# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
GeoJSON Feature and FeatureCollection value types.

A Feature pairs an optional geometry with a read-only property mapping,
an optional string id and an optional bounding box.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Iterable, Mapping, Optional, Tuple

from ..exceptions import WrongGeometryKindError
from .geometries import (
    BoundingBox,
    GEOMETRY_CLASSES,
    Geometry,
    geometry_from_dict,
    geometry_to_dict,
)


def _freeze(value: Any) -> Any:
    # mappings become read-only proxies, lists become tuples, at every depth
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


def _freeze_properties(properties: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
    if properties is None:
        return None
    return _freeze(properties)


def _coerce_bbox(bbox: Any) -> Optional[BoundingBox]:
    if bbox is None or isinstance(bbox, BoundingBox):
        return bbox
    return BoundingBox.from_list(bbox)


@dataclass(frozen=True)
class Feature:
    """
    A geometry with properties.

    ``properties`` is copied on construction and exposed read-only at every
    depth: nested mappings are read-only proxies and lists become tuples.
    It takes part in equality but not in hashing.
    """

    type: ClassVar[str] = 'Feature'

    geometry: Optional[Geometry] = None
    properties: Optional[Mapping[str, Any]] = field(default=None, hash=False)
    id: Optional[str] = None
    bbox: Optional[BoundingBox] = None

    def __post_init__(self):
        if self.geometry is not None and not isinstance(self.geometry, GEOMETRY_CLASSES):
            raise WrongGeometryKindError(
                f"Feature geometry must be a geometry, got {type(self.geometry).__name__}"
            )
        object.__setattr__(self, 'properties', _freeze_properties(self.properties))
        if self.id is not None:
            object.__setattr__(self, 'id', str(self.id))
        object.__setattr__(self, 'bbox', _coerce_bbox(self.bbox))

    @classmethod
    def from_geometry(cls, geometry: Optional[Geometry],
                      properties: Optional[Mapping[str, Any]] = None,
                      id: Optional[str] = None,
                      bbox: Optional[BoundingBox] = None) -> 'Feature':
        return cls(geometry, properties, id, bbox)

    def get_property(self, key: str, default: Any = None) -> Any:
        """Return the property ``key``, or ``default`` when absent."""
        if self.properties is None:
            return default
        return self.properties.get(key, default)

    def has_property(self, key: str) -> bool:
        return self.properties is not None and key in self.properties

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a GeoJSON mapping.

        ``geometry`` and ``properties`` are always present (``null`` when
        unset, as RFC 7946 requires); ``id`` and ``bbox`` only when set.
        """
        result: Dict[str, Any] = {
            'type': self.type,
            'geometry': None if self.geometry is None else geometry_to_dict(self.geometry),
            'properties': None if self.properties is None else _thaw(self.properties),
        }
        if self.id is not None:
            result['id'] = self.id
        if self.bbox is not None:
            result['bbox'] = self.bbox.to_list()
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Feature':
        """
        Build a Feature from its GeoJSON mapping. Unknown members are ignored.

        :param data: GeoJSON Feature mapping.
        :type data: Dict[str, Any]
        :return: Feature instance.
        :rtype: Feature
        :raises WrongGeometryKindError: If ``type`` is not ``Feature``.
        """
        if data.get('type') != cls.type:
            raise WrongGeometryKindError(f"Expected a Feature, got {data.get('type')!r}")
        geometry = data.get('geometry')
        return cls(
            None if geometry is None else geometry_from_dict(geometry),
            data.get('properties'),
            data.get('id'),
            data.get('bbox'),
        )


@dataclass(frozen=True)
class FeatureCollection:
    """An ordered sequence of Features."""

    type: ClassVar[str] = 'FeatureCollection'

    features: Tuple[Feature, ...] = field(default_factory=tuple)
    bbox: Optional[BoundingBox] = None

    def __post_init__(self):
        features = tuple(self.features)
        for feature in features:
            if not isinstance(feature, Feature):
                raise WrongGeometryKindError(
                    f"FeatureCollection members must be Features, got {type(feature).__name__}"
                )
        object.__setattr__(self, 'features', features)
        object.__setattr__(self, 'bbox', _coerce_bbox(self.bbox))

    @classmethod
    def from_features(cls, features: Iterable[Feature],
                      bbox: Optional[BoundingBox] = None) -> 'FeatureCollection':
        return cls(tuple(features), bbox)

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self):
        return iter(self.features)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            'type': self.type,
            'features': [feature.to_dict() for feature in self.features],
        }
        if self.bbox is not None:
            result['bbox'] = self.bbox.to_list()
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FeatureCollection':
        if data.get('type') != cls.type:
            raise WrongGeometryKindError(
                f"Expected a FeatureCollection, got {data.get('type')!r}"
            )
        return cls(
            tuple(Feature.from_dict(f) for f in data.get('features', ())),
            data.get('bbox'),
        )


def from_dict(data: Dict[str, Any]):
    """
    Build any model value (geometry, Feature or FeatureCollection) from a
    GeoJSON mapping, dispatching on its ``type`` member.
    """
    type_name = data.get('type')
    if type_name == Feature.type:
        return Feature.from_dict(data)
    if type_name == FeatureCollection.type:
        return FeatureCollection.from_dict(data)
    return geometry_from_dict(data)
