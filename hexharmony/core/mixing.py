#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexharmony/core/mixing.py

from . import config as c
from .color import Color
from hexharmony.shared.clamping import clamp_percent


def mix(color1: Color, color2: Color, weight: float = c.DEFAULT_MIX_WEIGHT) -> Color:
    """
    Mix two colors, taking `weight` percent of color1 and the rest of color2.

    Alpha takes part in the channel weighting the way CSS preprocessors do it:
    a more opaque color contributes more to the RGB channels. With equal
    alphas this reduces to plain linear interpolation.
    """
    p = clamp_percent(weight) / c.PERCENT_MAX
    w = p * c.DIV_2 - c.UNIT
    a = color1.alpha - color2.alpha

    if w * a == -c.UNIT:
        combined = w
    else:
        combined = (w + a) / (c.UNIT + w * a)
    w1 = (combined + c.UNIT) / c.DIV_2

    # interpolate from color2 so equal channels come back unchanged
    return Color.from_rgb(
        color2.r + (color1.r - color2.r) * w1,
        color2.g + (color1.g - color2.g) * w1,
        color2.b + (color1.b - color2.b) * w1,
        color2.alpha + (color1.alpha - color2.alpha) * p,
    )
