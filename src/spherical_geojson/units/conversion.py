# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Unit conversion on a spherical Earth.

Distances are converted through radians of arc using a fixed table of
Earth-radius factors, one per unit name.
"""

import math
from types import MappingProxyType

from .. import constants as c
from ..exceptions import InvalidUnitError, NegativeDistanceError


# Earth radius expressed in each unit (read-only)
FACTORS = MappingProxyType({
    c.UNIT_MILES: 3960.0,
    c.UNIT_NAUTICAL_MILES: 3441.145,
    c.UNIT_DEGREES: 57.2957795,
    c.UNIT_RADIANS: 1.0,
    c.UNIT_INCHES: 250905600.0,
    c.UNIT_YARDS: 6969600.0,
    c.UNIT_METERS: 6373000.0,
    c.UNIT_METRES: 6373000.0,
    c.UNIT_CENTIMETERS: 6.373e+8,
    c.UNIT_CENTIMETRES: 6.373e+8,
    c.UNIT_KILOMETERS: 6373.0,
    c.UNIT_KILOMETRES: 6373.0,
    c.UNIT_FEET: 20908792.65,
})


def _factor(units: str) -> float:
    try:
        return FACTORS[units]
    except (KeyError, TypeError):
        raise InvalidUnitError(units)


def distance_to_radians(distance: float, units: str = c.UNIT_DEFAULT) -> float:
    """
    Convert a real-world distance to radians of arc.

    :param distance: Non-negative distance.
    :type distance: float
    :param units: Unit of ``distance`` (default kilometers).
    :type units: str
    :return: Distance in radians.
    :rtype: float
    :raises NegativeDistanceError: If ``distance`` is negative.
    :raises InvalidUnitError: If ``units`` is not a known unit.
    """
    factor = _factor(units)
    if distance < 0:
        raise NegativeDistanceError(distance)
    return distance / factor


def radians_to_distance(radians: float, units: str = c.UNIT_DEFAULT) -> float:
    """
    Convert radians of arc to a real-world distance.

    :param radians: Arc length in radians.
    :type radians: float
    :param units: Target unit (default kilometers).
    :type units: str
    :return: Distance in ``units``.
    :rtype: float
    :raises InvalidUnitError: If ``units`` is not a known unit.
    """
    return radians * _factor(units)


def convert_distance(distance: float, original_units: str,
                     final_units: str = c.UNIT_DEFAULT) -> float:
    """
    Convert a distance from one unit to another.

    :param distance: Non-negative distance.
    :type distance: float
    :param original_units: Unit of ``distance``.
    :type original_units: str
    :param final_units: Unit of the result (default kilometers).
    :type final_units: str
    :return: Converted distance.
    :rtype: float
    """
    return radians_to_distance(distance_to_radians(distance, original_units), final_units)


def distance_to_degrees(distance: float, units: str = c.UNIT_DEFAULT) -> float:
    """Convert a real-world distance to degrees of arc."""
    return radians_to_degrees(distance_to_radians(distance, units))


def degrees_to_radians(degrees: float) -> float:
    """
    Convert an angle in degrees to radians.

    The angle is first reduced modulo 360, keeping the sign of the input.
    """
    return math.fmod(degrees, 360.0) * math.pi / 180.0


def radians_to_degrees(radians: float) -> float:
    """
    Convert an angle in radians to degrees.

    The angle is first reduced modulo 2*pi, keeping the sign of the input.
    """
    return math.fmod(radians, 2 * math.pi) * 180.0 / math.pi
