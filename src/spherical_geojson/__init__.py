# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Spherical GeoJSON Package

Computational geometry on a spherical Earth over an immutable GeoJSON
geometry model: distances, bearings, interpolation along lines, bounding
boxes, areas, point-in-polygon tests and shape conversion.

Modules:
--------
- model: Geometry, Feature and FeatureCollection value types
- units: Distance unit conversion
- meta: Coordinate traversal and input assertions
- measurement: Distance, bearing, destination, length, extents and area
- misc: Nearest point on line and line slicing
- joins: Point-in-polygon containment
- conversion: explode, combine and polygon_to_line
- transformation: Circle polygons
- classification: Nearest point

Example Usage:
--------------
    import spherical_geojson as sg

    a = sg.model.Point.from_lng_lat(-75.343, 39.984)
    b = sg.model.Point.from_lng_lat(-75.534, 39.123)
    sg.measurement.distance(a, b, units='miles')

    line = sg.model.LineString([(0, 0), (1, 0), (1, 1)])
    sg.misc.line_slice_along(line, 10, 150)
    # ... (see scripts/ directory for a complete example)
"""

import logging

__version__ = '0.1.0'
__author__ = 'Spherical GeoJSON Team'

from . import constants
from . import exceptions
from . import model
from . import units
from . import meta
from . import measurement
from . import misc
from . import joins
from . import conversion
from . import transformation
from . import classification

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'constants',
    'exceptions',
    'model',
    'units',
    'meta',
    'measurement',
    'misc',
    'joins',
    'conversion',
    'transformation',
    'classification',
]
