# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Measurement module for distances, extents and areas."""

from .distance import (
    distance,
    bearing,
    destination,
    midpoint,
    along,
    length
)

from .extent import (
    bbox,
    bbox_polygon,
    envelope,
    square,
    center
)

from .area import (
    ring_area,
    polygon_area,
    area
)

__all__ = [
    # Distance
    'distance',
    'bearing',
    'destination',
    'midpoint',
    'along',
    'length',
    # Extent
    'bbox',
    'bbox_polygon',
    'envelope',
    'square',
    'center',
    # Area
    'ring_area',
    'polygon_area',
    'area',
]
