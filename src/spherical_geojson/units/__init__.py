# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Unit conversion module."""

from .conversion import (
    FACTORS,
    distance_to_radians,
    radians_to_distance,
    convert_distance,
    distance_to_degrees,
    degrees_to_radians,
    radians_to_degrees
)

__all__ = [
    'FACTORS',
    'distance_to_radians',
    'radians_to_distance',
    'convert_distance',
    'distance_to_degrees',
    'degrees_to_radians',
    'radians_to_degrees',
]
