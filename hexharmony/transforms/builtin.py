#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexharmony/transforms/builtin.py

from hexharmony.core import config as c
from hexharmony.core import conversions as conv
from hexharmony.core.color import Color


def complement(color: Color) -> Color:
    """Rotate the hue by 180 degrees, keeping saturation and lightness."""
    h, s, l = conv.rgb_to_hsl(*color.rgb)
    r, g, b = conv.hsl_to_rgb(h + c.HUE_HALF, s, l)
    return Color.from_rgb(r, g, b, color.alpha)


def invert(color: Color) -> Color:
    """Negative of each RGB channel; alpha is left alone."""
    rgb_max = int(c.RGB_MAX)
    return Color(rgb_max - color.r, rgb_max - color.g, rgb_max - color.b, color.alpha)


def grayscale(color: Color) -> Color:
    h, _, l = conv.rgb_to_hsl(*color.rgb)
    r, g, b = conv.hsl_to_rgb(h, 0.0, l)
    return Color.from_rgb(r, g, b, color.alpha)
