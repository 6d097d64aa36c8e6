# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Circle approximation as a geodesic polygon."""

from typing import Any

import numpy as np

from .. import constants as c
from ..exceptions import InvalidStepsError
from ..measurement.distance import destination
from ..model import Polygon


def circle(center: Any, radius: float, steps: int = c.DEFAULT_CIRCLE_STEPS,
           units: str = c.UNIT_DEFAULT) -> Polygon:
    """
    Polygon approximating a circle of given radius around a center point.

    Vertices are the destinations from ``center`` at evenly spaced bearings
    ``i * 360 / steps``; the ring is closed by repeating the first vertex.

    :param center: Center point.
    :type center: Any
    :param radius: Non-negative radius.
    :type radius: float
    :param steps: Number of vertices. Values below 1 are rejected, and 1 or 2
        give a ring too short for a Polygon.
    :type steps: int
    :param units: Unit of ``radius`` (default kilometers).
    :type units: str
    :return: Polygon with one ring of ``steps + 1`` positions.
    :rtype: Polygon
    :raises InvalidStepsError: If ``steps`` is below 1.
    :raises InvalidRingError: If ``steps`` is 1 or 2.
    """
    if steps < 1:
        raise InvalidStepsError(steps)

    bearings = np.arange(steps) * 360.0 / steps
    ring = [destination(center, radius, float(b), units).coordinates for b in bearings]
    ring.append(ring[0])
    return Polygon([ring])
