#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexharmony/logic/harmony/engine.py

from hexharmony.core import config as c
from hexharmony.core.color import Color
from hexharmony.core.mixing import mix
from .resolver import HarmonySpec, resolve_harmony
from .weight import get_mix_weight


def harmonize(
    color: Color,
    harmony: HarmonySpec = c.DEFAULT_HARMONY,
    median: float = c.DEFAULT_MEDIAN,
    margin: float = c.DEFAULT_MARGIN,
) -> Color:
    """
    Blend a harmony color into `color` by a brightness-aware weight.

    `harmony` is either a Color or the name of a registered transform
    applied to `color` (default: its complement). `median` and `margin`
    are percentages that tune the weight; see get_mix_weight.
    """
    harmony_color = resolve_harmony(color, harmony)
    weight = get_mix_weight(color, harmony_color, median, margin)

    # weight is the share of the harmony color
    return mix(harmony_color, color, weight)
