# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Nearest-point classification."""

import logging
from typing import Any

import numpy as np

from ..exceptions import EmptyCollectionError
from ..measurement.distance import distance
from ..meta import get_coord
from ..model import FeatureCollection, Point

logger = logging.getLogger(__name__)


def nearest_point(target: Any, candidates: Any) -> Point:
    """
    Candidate closest to ``target`` by great-circle distance.

    Ties go to the earliest candidate.

    :param target: Reference point.
    :type target: Any
    :param candidates: Sequence of Points, Positions or Point Features, or a
        FeatureCollection of Point Features.
    :type candidates: Any
    :return: The nearest candidate as a Point.
    :rtype: Point
    :raises EmptyCollectionError: If there are no candidates.
    """
    if isinstance(candidates, FeatureCollection):
        candidates = candidates.features
    positions = [get_coord(candidate) for candidate in candidates]
    if not positions:
        raise EmptyCollectionError("nearest_point requires at least one candidate.")

    origin = get_coord(target)
    distances = np.array([distance(origin, position) for position in positions])
    best = int(np.argmin(distances))
    logger.debug("nearest_point: candidate %d of %d at %s km",
                 best, len(positions), distances[best])
    return Point(positions[best])
