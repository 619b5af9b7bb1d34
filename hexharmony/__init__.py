#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexharmony/__init__.py

__version__ = "0.1.0"

from hexharmony.core.color import Color, WHITE, BLACK
from hexharmony.core.brightness import get_brightness
from hexharmony.core.mixing import mix
from hexharmony.shared.errors import InvalidHarmonyError
from hexharmony.transforms.registry import (
    TRANSFORMS,
    ColorTransform,
    get_transform,
    register_transform,
)
from hexharmony.logic.harmony import HarmonySpec, get_mix_weight, harmonize

__all__ = [
    "Color",
    "WHITE",
    "BLACK",
    "get_brightness",
    "mix",
    "InvalidHarmonyError",
    "TRANSFORMS",
    "ColorTransform",
    "get_transform",
    "register_transform",
    "HarmonySpec",
    "get_mix_weight",
    "harmonize",
]
