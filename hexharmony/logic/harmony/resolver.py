#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexharmony/logic/harmony/resolver.py

from typing import Union

from hexharmony.core.color import Color
from hexharmony.shared.errors import InvalidHarmonyError
from hexharmony.transforms.registry import get_transform

HarmonySpec = Union[Color, str]


def resolve_harmony(color: Color, harmony: HarmonySpec) -> Color:
    """Resolve a harmony input into a Color, or raise InvalidHarmonyError."""
    if isinstance(harmony, Color):
        return harmony

    transform = get_transform(harmony)
    if transform is None:
        raise InvalidHarmonyError(harmony)

    candidate = transform(color)
    if not isinstance(candidate, Color):
        raise InvalidHarmonyError(candidate)

    return candidate
