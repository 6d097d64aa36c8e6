# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Shared fixtures for the spherical_geojson test suite."""

import os
import sys

import pytest

# Add src to path when running from a source checkout
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from spherical_geojson.model import Polygon  # noqa: E402


@pytest.fixture
def square_polygon():
    """Axis-aligned 100 x 100 degree square with one corner at the origin."""
    return Polygon([[(0, 0), (0, 100), (100, 100), (100, 0), (0, 0)]])


@pytest.fixture
def polygon_with_hole():
    """10 x 10 degree square with a 2 x 2 degree hole in its middle."""
    return Polygon([
        [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)],
        [(4, 4), (4, 6), (6, 6), (6, 4), (4, 4)],
    ])
