# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Exception hierarchy for spherical_geojson.

Every error raised by the package derives from :class:`GeoError`, which is a
``ValueError`` so that generic input-validation handlers keep working. Each
subclass carries a stable ``error_code`` string.
"""

from typing import Optional


class GeoError(ValueError):
    """
    Base class for all spherical_geojson errors.

    :param message: Human-readable description of the failure.
    :type message: str
    :param details: Optional extra context (offending value, caller name).
    :type details: Optional[dict]
    """

    error_code = 'GEO_ERROR'

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidRingError(GeoError):
    """A polygon ring has fewer than 4 positions or is not closed."""

    error_code = 'INVALID_RING'


class InvalidUnitError(GeoError):
    """An unrecognised unit name was passed to a distance function."""

    error_code = 'INVALID_UNIT'

    def __init__(self, units: str):
        super().__init__(f"Unknown unit: {units!r}", {'units': units})


class NegativeDistanceError(GeoError):
    """A negative distance was passed where only non-negative is valid."""

    error_code = 'NEGATIVE_DISTANCE'

    def __init__(self, distance: float):
        super().__init__(
            f"Distance must be greater than or equal to 0, got {distance}",
            {'distance': distance}
        )


class DegenerateInputError(GeoError):
    """Equal start/stop values, or too few coordinates for the operation."""

    error_code = 'DEGENERATE_INPUT'


class StartBeyondLineError(GeoError):
    """The start distance of a slice lies past the end of the line."""

    error_code = 'START_BEYOND_LINE'


class InvalidStepsError(GeoError):
    """A circle was requested with fewer than one step."""

    error_code = 'INVALID_STEPS'

    def __init__(self, steps: int):
        super().__init__(f"Steps must be greater than 0, got {steps}", {'steps': steps})


class EmptyCollectionError(GeoError):
    """An operation that needs at least one member received none."""

    error_code = 'EMPTY_COLLECTION'


class WrongGeometryKindError(GeoError):
    """A value of one geometry kind was given where another was expected."""

    error_code = 'WRONG_GEOMETRY_KIND'
