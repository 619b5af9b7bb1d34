#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexharmony/core/color.py

from typing import NamedTuple, Tuple

from . import config as c
from .conversions import hex_to_rgb, rgb_to_hex
from hexharmony.shared.clamping import _clamp01, _clamp255


class Color(NamedTuple):
    """An sRGB color with 8-bit channels and a 0..1 alpha."""

    r: int
    g: int
    b: int
    alpha: float = c.ALPHA_OPAQUE

    @classmethod
    def from_hex(cls, hex_code: str, alpha: float = c.ALPHA_OPAQUE) -> "Color":
        r, g, b = hex_to_rgb(hex_code)
        return cls(r, g, b, alpha)

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, alpha: float = c.ALPHA_OPAQUE) -> "Color":
        """Build a color from float channels, rounding and clamping them."""
        return cls(
            int(round(_clamp255(r))),
            int(round(_clamp255(g))),
            int(round(_clamp255(b))),
            _clamp01(alpha),
        )

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return rgb_to_hex(self.r, self.g, self.b)

    def __str__(self) -> str:
        if self.alpha >= c.ALPHA_OPAQUE:
            return f"#{self.hex}"
        return f"rgba({self.r}, {self.g}, {self.b}, {self.alpha:g})"


WHITE = Color.from_hex(c.WHITE_HEX)
BLACK = Color(0, 0, 0)
