# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Miscellaneous module for line projection and slicing."""

from .line_slice import (
    nearest_point_on_line,
    line_slice,
    line_slice_along
)

__all__ = [
    'nearest_point_on_line',
    'line_slice',
    'line_slice_along',
]
