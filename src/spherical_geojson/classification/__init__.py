# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Classification module."""

from .nearest import nearest_point

__all__ = [
    'nearest_point',
]
