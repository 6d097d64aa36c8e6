# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Shared constants for spherical_geojson.

Unit names accepted by the distance functions, the Earth radius used for
area computation, and default parameter values.
"""

# Unit names
UNIT_MILES = 'miles'
UNIT_NAUTICAL_MILES = 'nauticalmiles'
UNIT_KILOMETERS = 'kilometers'
UNIT_KILOMETRES = 'kilometres'
UNIT_METERS = 'meters'
UNIT_METRES = 'metres'
UNIT_CENTIMETERS = 'centimeters'
UNIT_CENTIMETRES = 'centimetres'
UNIT_RADIANS = 'radians'
UNIT_DEGREES = 'degrees'
UNIT_INCHES = 'inches'
UNIT_YARDS = 'yards'
UNIT_FEET = 'feet'

UNIT_DEFAULT = UNIT_KILOMETERS

# Equatorial radius (WGS84) in meters, used by the ring-area formula
EARTH_RADIUS = 6378137.0

DEFAULT_CIRCLE_STEPS = 64

# Property keys attached by nearest_point_on_line
INDEX_KEY = 'index'
DISTANCE_KEY = 'dist'
