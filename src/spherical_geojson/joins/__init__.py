# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Joins module for point containment."""

from .containment import (
    in_ring,
    inside,
    points_within_polygon
)

__all__ = [
    'in_ring',
    'inside',
    'points_within_polygon',
]
