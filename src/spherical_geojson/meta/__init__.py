# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Meta module for coordinate traversal and input assertions."""

from .coords import (
    iter_geometries,
    geometry_coords,
    coord_all,
    get_coord
)

from .invariant import (
    geojson_type,
    feature_of,
    collection_of
)

__all__ = [
    # Traversal
    'iter_geometries',
    'geometry_coords',
    'coord_all',
    'get_coord',
    # Assertions
    'geojson_type',
    'feature_of',
    'collection_of',
]
