#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexharmony/shared/clamping.py

from hexharmony.core import config as c


def _clamp01(v: float) -> float:
    """Alpha and HSL components; NaN collapses to 0."""
    if v != v:
        return 0.0
    return max(0.0, min(c.UNIT, v))


def _clamp255(v: float) -> float:
    """8-bit channel range, still unrounded; NaN collapses to 0."""
    if v != v:
        return 0.0
    return max(0.0, min(c.RGB_MAX, v))


def clamp_percent(v: float, lower: float = c.PERCENT_MIN, upper: float = c.PERCENT_MAX) -> float:
    """Clamp a percentage, upper bound first."""
    return max(lower, min(upper, v))
