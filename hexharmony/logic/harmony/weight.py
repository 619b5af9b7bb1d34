#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexharmony/logic/harmony/weight.py

import math

from hexharmony.core import config as c
from hexharmony.core.brightness import get_brightness
from hexharmony.core.color import Color
from hexharmony.shared.clamping import clamp_percent


def get_mix_weight(color: Color, harmony: Color, median: float, margin: float) -> float:
    """
    Share of the harmony color (in percent) to mix into the base color.

    A harmony brighter than the base raises the weight above `median`, a
    darker one lowers it, by at most `margin` per unit of brightness
    difference relative to white. The result is clamped to [0, 50] for any
    median and margin, infinities and NaN included.
    """
    if median != median:
        return c.MIX_WEIGHT_MIN
    if math.isinf(median):
        return clamp_percent(median, c.MIX_WEIGHT_MIN, c.MIX_WEIGHT_MAX)

    white_brightness = get_brightness(Color.from_hex(c.WHITE_HEX))
    color_brightness = get_brightness(color)
    harmony_brightness = get_brightness(harmony)

    diff = (harmony_brightness - color_brightness) / white_brightness
    shift = diff * margin
    if shift != shift:
        shift = 0.0

    # past this bound the clamp below decides, and round() needs a finite value
    bound = abs(median) + c.MIX_WEIGHT_MAX + c.UNIT
    shift = max(-bound, min(bound, shift))

    # round() is ties-to-even
    weight = median + round(shift)

    return clamp_percent(weight, c.MIX_WEIGHT_MIN, c.MIX_WEIGHT_MAX)
