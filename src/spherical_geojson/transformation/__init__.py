# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""Transformation module."""

from .circle import circle

__all__ = [
    'circle',
]
