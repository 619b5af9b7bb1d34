#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexharmony/core/brightness.py

from . import config as c
from .color import Color


def get_brightness(color: Color) -> float:
    """
    Perceived brightness of a color as a percentage (black 0, white 100).

    Source: W3C Techniques For Accessibility Evaluation And Repair Tools (AERT),
    YIQ luma weights 299/587/114.
    """
    luma = (c.YIQ_R * color.r + c.YIQ_G * color.g + c.YIQ_B * color.b) / c.YIQ_DIVISOR
    return luma / c.RGB_MAX * c.PERCENT_MAX
