# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Input type assertions shared by the algorithm modules."""

from typing import Any

from ..exceptions import WrongGeometryKindError
from ..model import Feature, FeatureCollection, GEOMETRY_CLASSES


def _type_name(value: Any) -> str:
    if isinstance(value, GEOMETRY_CLASSES):
        return value.type.value
    if isinstance(value, (Feature, FeatureCollection)):
        return value.type
    return type(value).__name__


def geojson_type(value: Any, type_name: str, caller: str) -> None:
    """
    Require ``value`` to be a geometry of the given type.

    :param value: Value to check.
    :type value: Any
    :param type_name: Expected GeoJSON type name, e.g. ``'Polygon'``.
    :type type_name: str
    :param caller: Name of the calling operation, used in the message.
    :type caller: str
    :raises WrongGeometryKindError: On mismatch.
    """
    if value is None or _type_name(value) != type_name:
        raise WrongGeometryKindError(
            f"Invalid input to {caller}: must be a {type_name}, given {_type_name(value)}",
            {'caller': caller, 'expected': type_name}
        )


def feature_of(feature: Any, type_name: str, caller: str) -> None:
    """
    Require ``feature`` to be a Feature whose geometry has the given type.

    :raises WrongGeometryKindError: If ``feature`` is not a Feature, has no
        geometry, or its geometry has another type.
    """
    if not isinstance(feature, Feature) or feature.geometry is None:
        raise WrongGeometryKindError(
            f"Invalid input to {caller}: a Feature with a geometry is required",
            {'caller': caller, 'expected': type_name}
        )
    geojson_type(feature.geometry, type_name, caller)


def collection_of(collection: Any, type_name: str, caller: str) -> None:
    """
    Require every member of a FeatureCollection to have the given geometry type.

    :raises WrongGeometryKindError: If ``collection`` is not a
        FeatureCollection or any member fails :func:`feature_of`.
    """
    if not isinstance(collection, FeatureCollection):
        raise WrongGeometryKindError(
            f"Invalid input to {caller}: a FeatureCollection is required",
            {'caller': caller, 'expected': type_name}
        )
    for feature in collection.features:
        feature_of(feature, type_name, caller)
