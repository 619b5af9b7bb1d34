#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexharmony/core/conversions.py

from typing import Tuple

from . import config as c
from hexharmony.shared.clamping import _clamp01
from hexharmony.shared.sanitizer import normalize_hex, _sanitize_for_log


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Parse a 1, 2, 3 or 6 digit hex code into 0..255 channels."""
    h = normalize_hex(hex_code)
    if not h:
        raise ValueError(f"invalid hex color: '{_sanitize_for_log(hex_code)}'")
    return tuple(int(h[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Uppercase 6-digit hex without '#'; channels are rounded and clamped to 0..255."""
    channels = (max(0, min(int(c.RGB_MAX), int(round(v)))) for v in (r, g, b))
    return "".join(f"{v:02X}" for v in channels)


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """
    0..255 channels to (hue in degrees [0, 360), saturation 0..1, lightness 0..1).
    Achromatic colors get hue 0 and saturation 0.
    """
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    lightness = (cmax + cmin) / c.DIV_2

    if delta == 0:
        return (0.0, 0.0, lightness)

    denom = c.UNIT - abs(c.DIV_2 * lightness - c.UNIT)
    saturation = 0.0 if abs(denom) < c.EPS else delta / denom

    if cmax == r_f:
        sector = ((g_f - b_f) / delta) % c.HSL_HUE_MOD
    elif cmax == g_f:
        sector = (b_f - r_f) / delta + c.DIV_2
    else:
        sector = (r_f - g_f) / delta + c.HSL_HUE_OFFSET_B
    hue = (c.HUE_SECTOR * sector) % c.HUE_MAX

    return (hue, saturation, lightness)


def hsl_to_rgb(h: float, s: float, L: float) -> Tuple[float, float, float]:
    """
    HSL back to channels on the 0..255 scale. The result is unrounded so
    callers decide how to quantize; Color.from_rgb rounds and clamps.
    """
    h = h % c.HUE_MAX
    if s == 0:
        gray = _clamp01(L) * c.RGB_MAX
        return gray, gray, gray

    chroma = (c.UNIT - abs(c.DIV_2 * L - c.UNIT)) * s
    x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
    m = L - chroma / c.DIV_2

    # channel order for each 60 degree sector, red through magenta
    sectors = (
        (chroma, x, 0.0),
        (x, chroma, 0.0),
        (0.0, chroma, x),
        (0.0, x, chroma),
        (x, 0.0, chroma),
        (chroma, 0.0, x),
    )
    r_p, g_p, b_p = sectors[int(h // c.HUE_SECTOR) % len(sectors)]

    return (
        _clamp01(r_p + m) * c.RGB_MAX,
        _clamp01(g_p + m) * c.RGB_MAX,
        _clamp01(b_p + m) * c.RGB_MAX,
    )
