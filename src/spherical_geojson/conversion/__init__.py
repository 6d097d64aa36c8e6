# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Conversion module for exploding, combining and outlining shapes."""

from .shapes import (
    explode,
    combine,
    polygon_to_line
)

__all__ = [
    'explode',
    'combine',
    'polygon_to_line',
]
